"""Git hash capture with dirty-tree detection for code provenance tracking.

Logged alongside each generated maze so a maze can be traced back to the
exact generator version that produced it.
"""

import subprocess
from pathlib import Path


def _git_ok(args: list[str], cwd: Path | None) -> bool:
    """Run a git command, returning False on a non-zero exit."""
    try:
        subprocess.check_output(["git", *args], cwd=cwd, stderr=subprocess.DEVNULL)
    except subprocess.CalledProcessError:
        return False
    return True


def get_git_hash(repo_dir: str | Path | None = None) -> str:
    """Get the short git SHA of HEAD with dirty detection.

    Args:
        repo_dir: Directory inside the repository. Defaults to the
            current working directory.

    Returns:
        Git hash string in one of three forms:
        - "a3f9c1d" — clean working tree
        - "a3f9c1d-dirty" — staged or unstaged changes present
        - "unknown" — not in a git repository or git not available
    """
    cwd = Path(repo_dir) if repo_dir is not None else None
    try:
        sha = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=cwd,
            stderr=subprocess.DEVNULL,
        ).decode().strip()
    except (subprocess.CalledProcessError, FileNotFoundError, NotADirectoryError):
        return "unknown"

    clean = _git_ok(["diff", "--quiet"], cwd) and _git_ok(
        ["diff", "--quiet", "--cached"], cwd
    )
    return sha if clean else f"{sha}-dirty"
