"""Code provenance: short git SHA stored alongside every run result."""

import subprocess


def _git(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        check=False,
    )


def get_git_hash() -> str:
    """Short SHA of HEAD, suffixed with '-dirty' if the tree has changes.

    Returns:
        "a3f9c1d", "a3f9c1d-dirty", or "unknown" outside a repository or
        when git is not installed.
    """
    try:
        head = _git("rev-parse", "--short", "HEAD")
    except FileNotFoundError:
        return "unknown"
    if head.returncode != 0:
        return "unknown"
    sha = head.stdout.decode().strip()

    # Unstaged first, then staged.
    if _git("diff", "--quiet").returncode != 0:
        return sha + "-dirty"
    if _git("diff", "--quiet", "--cached").returncode != 0:
        return sha + "-dirty"
    return sha
