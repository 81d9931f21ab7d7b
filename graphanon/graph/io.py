"""Plain-text graph files: adjacency lists (optionally labelled) and edge lists.

Formats (vertex ids are dense integers starting at 0):

- adjacency_list: first line "n"; then n lines, line u holding the
  whitespace-separated neighbours of u (possibly none).
- labelled_adjacency_list: first line "n l"; then n lines of the form
  "label nbr nbr ...".
- edge_list: first line "n"; then one "u v" pair per line.

Every listed pair goes through Graph.add_edge, so one-directional or
duplicated entries are accepted. Apart from the header, input is assumed
to be well formed.
"""

import logging
from pathlib import Path

import numpy as np

from graphanon.graph.labelled import LabelledGraph
from graphanon.graph.store import Graph
from graphanon.graph.types import FileFormat

log = logging.getLogger(__name__)


class GraphFormatError(Exception):
    """Raised when a graph file header cannot be parsed."""


def _parse_header(line: str, expected: int, path: Path) -> list[int]:
    fields = line.split()
    try:
        values = [int(x) for x in fields[:expected]]
    except ValueError as exc:
        raise GraphFormatError(f"{path}: malformed header {line.strip()!r}") from exc
    if len(values) != expected or values[0] < 0:
        raise GraphFormatError(
            f"{path}: expected {expected} non-negative header value(s), "
            f"got {line.strip()!r}"
        )
    return values


def read_graph(
    path: str | Path,
    fmt: FileFormat | str = FileFormat.ADJACENCY_LIST,
    rng: np.random.Generator | None = None,
) -> Graph | LabelledGraph:
    """Load a graph file.

    Args:
        path: File to read.
        fmt: One of the FileFormat values.
        rng: Generator for the new graph (fresh entropy if None).

    Returns:
        A LabelledGraph for the labelled format, a Graph otherwise.

    Raises:
        GraphFormatError: If the header line is missing or malformed.
    """
    path = Path(path)
    fmt = FileFormat(fmt)
    lines = path.read_text().splitlines()
    if not lines:
        raise GraphFormatError(f"{path}: empty file")

    if fmt is FileFormat.LABELLED_ADJACENCY_LIST:
        n, num_labels = _parse_header(lines[0], 2, path)
    else:
        (n,) = _parse_header(lines[0], 1, path)

    graph = Graph(n, rng=rng)
    body = lines[1:]

    if fmt is FileFormat.EDGE_LIST:
        for line in body:
            fields = line.split()
            if len(fields) >= 2:
                graph.add_edge(int(fields[0]), int(fields[1]))
        log.info("Read %s: n=%d, m=%d (edge list)", path, n, graph.num_edges)
        return graph

    labels = np.zeros(n, dtype=np.int64)
    for u in range(n):
        fields = [int(x) for x in body[u].split()] if u < len(body) else []
        if fmt is FileFormat.LABELLED_ADJACENCY_LIST and fields:
            labels[u] = fields[0]
            fields = fields[1:]
        for v in fields:
            graph.add_edge(u, v)

    log.info("Read %s: n=%d, m=%d (%s)", path, n, graph.num_edges, fmt.value)
    if fmt is FileFormat.LABELLED_ADJACENCY_LIST:
        return LabelledGraph(graph, num_labels, labels)
    return graph


def format_graph(
    graph: Graph | LabelledGraph,
    fmt: FileFormat | str = FileFormat.ADJACENCY_LIST,
) -> str:
    """Render a graph in one of the text formats (neighbours sorted)."""
    fmt = FileFormat(fmt)
    lgraph = graph if isinstance(graph, LabelledGraph) else None
    g = graph.graph if lgraph is not None else graph

    if fmt is FileFormat.LABELLED_ADJACENCY_LIST and lgraph is None:
        raise ValueError("labelled_adjacency_list output requires a LabelledGraph")

    if fmt is FileFormat.EDGE_LIST:
        out = [str(g.num_vertices)]
        out.extend(f"{u} {v}" for u, v in g.edges())
        return "\n".join(out) + "\n"

    if fmt is FileFormat.LABELLED_ADJACENCY_LIST:
        out = [f"{g.num_vertices} {lgraph.num_labels}"]
    else:
        out = [str(g.num_vertices)]
    for u in range(g.num_vertices):
        row = [str(v) for v in sorted(g.neighbours(u))]
        if fmt is FileFormat.LABELLED_ADJACENCY_LIST:
            row.insert(0, str(lgraph.label(u)))
        out.append(" ".join(row))
    return "\n".join(out) + "\n"


def write_graph(
    graph: Graph | LabelledGraph,
    path: str | Path,
    fmt: FileFormat | str = FileFormat.ADJACENCY_LIST,
) -> Path:
    """Write a graph file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_graph(graph, fmt))
    log.info("Wrote %s (%s)", path, FileFormat(fmt).value)
    return path
