"""Anonymisation run configuration dataclasses, frozen and slotted."""

from dataclasses import dataclass, field

from graphanon.graph.types import MAX_LABELS, FileFormat

MODES = ("attribute", "identity")
ALGORITHMS = ("greedy", "hopeful")


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Input graph: either a file or a random graph."""

    n: int = 100  # vertices in the random graph
    occupancy: float = 0.05  # fraction of possible edges in the random graph
    num_labels: int = 2  # label alphabet size
    input_path: str | None = None  # overrides the random parameters when set
    input_format: str = FileFormat.ADJACENCY_LIST.value


@dataclass(frozen=True, slots=True)
class AttributeConfig:
    """Alpha-proximity parameters."""

    alpha: float = 0.1
    algorithm: str = "greedy"  # "greedy" or "hopeful"


@dataclass(frozen=True, slots=True)
class IdentityConfig:
    """k-degree-anonymity parameters."""

    k: int = 5
    hide_new_vertices: bool = False


@dataclass(frozen=True, slots=True)
class MetricsConfig:
    """Which graph statistics to report before and after anonymisation."""

    hop_plot: bool = True
    clustering: bool = True
    include_self_paths: bool = False
    subgraph_centrality_limit: int = 0  # 0 disables (dense O(n^2) memory)
    workers: int = 1  # threads for the hop-plot BFS


@dataclass(frozen=True, slots=True)
class AnonymizationConfig:
    """Top-level run configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    mode: str = "attribute"
    graph: GraphConfig = field(default_factory=GraphConfig)
    attribute: AttributeConfig = field(default_factory=AttributeConfig)
    identity: IdentityConfig = field(default_factory=IdentityConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.attribute.algorithm not in ALGORITHMS:
            raise ValueError(
                f"algorithm must be one of {ALGORITHMS}, "
                f"got {self.attribute.algorithm!r}"
            )
        if self.attribute.alpha <= 0:
            raise ValueError(f"alpha must be > 0, got {self.attribute.alpha}")
        if self.identity.k < 1:
            raise ValueError(f"k must be >= 1, got {self.identity.k}")
        if not 1 <= self.graph.num_labels <= MAX_LABELS:
            raise ValueError(
                f"num_labels must be in [1, {MAX_LABELS}], "
                f"got {self.graph.num_labels}"
            )
        if not 0.0 <= self.graph.occupancy <= 1.0:
            raise ValueError(
                f"occupancy must be in [0, 1], got {self.graph.occupancy}"
            )
        if self.graph.n < 0:
            raise ValueError(f"n must be >= 0, got {self.graph.n}")
        formats = tuple(f.value for f in FileFormat)
        if self.graph.input_format not in formats:
            raise ValueError(
                f"input_format must be one of {formats}, "
                f"got {self.graph.input_format!r}"
            )
        if (
            self.mode == "attribute"
            and self.graph.input_path is not None
            and self.graph.input_format != FileFormat.LABELLED_ADJACENCY_LIST.value
        ):
            raise ValueError(
                "attribute mode needs vertex labels: input_format must be "
                f"{FileFormat.LABELLED_ADJACENCY_LIST.value!r}"
            )
        if self.metrics.subgraph_centrality_limit < 0:
            raise ValueError(
                "subgraph_centrality_limit must be >= 0, "
                f"got {self.metrics.subgraph_centrality_limit}"
            )
        if self.metrics.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.metrics.workers}")
