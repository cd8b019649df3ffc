"""Code provenance for result files: short git SHA with dirty-tree flag."""

import subprocess
from pathlib import Path

# Repository checkout containing this package
_REPO_ROOT = Path(__file__).resolve().parents[2]


def _git(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        check=False,
    )


def get_git_hash(cwd: str | Path | None = None) -> str:
    """Short SHA of HEAD, suffixed "-dirty" when tracked files have changes.

    Args:
        cwd: Directory inside the repository; defaults to this checkout.

    Returns:
        "a3f9c1d", "a3f9c1d-dirty", or "unknown" outside a git repository
        or without a git executable.
    """
    cwd = Path(cwd) if cwd is not None else _REPO_ROOT
    try:
        head = _git("rev-parse", "--short", "HEAD", cwd=cwd)
        if head.returncode != 0:
            return "unknown"
        sha = head.stdout.decode().strip()
        # unstaged or staged changes make the run unreproducible from the SHA
        dirty = (
            _git("diff", "--quiet", cwd=cwd).returncode != 0
            or _git("diff", "--quiet", "--cached", cwd=cwd).returncode != 0
        )
    except (FileNotFoundError, NotADirectoryError):
        return "unknown"
    return f"{sha}-dirty" if dirty else sha
