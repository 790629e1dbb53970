"""Thin wrappers around git CLI commands and the repository config."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError
from .models import BranchRef, RepoRemote

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 10.0

_URL_LINE = re.compile(r"url\s*=\s*(.*)")


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    proc = subprocess.run(
        cmd,
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
        timeout=GIT_TIMEOUT_SECONDS,
    )
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def repo_toplevel(path: Path) -> Path:
    proc = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    return Path(proc.stdout.strip())


def read_remote_url(repo_root: Path) -> RepoRemote | None:
    """Return the first ``url = ...`` value in ``.git/config``, if any."""

    config_path = repo_root / ".git" / "config"
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading git config %s: %s", config_path, exc)
        return None
    match = _URL_LINE.search(text)
    if not match:
        return None
    return RepoRemote(url=match.group(1).rstrip("\r"))


def current_branch(repo_root: Path) -> BranchRef:
    """Short name of the checked-out branch, or an empty name on failure."""

    try:
        proc = run_git(["symbolic-ref", "--short", "HEAD"], cwd=repo_root, raise_on_error=False)
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.error("Error getting current branch: %s", exc)
        return BranchRef(name="")
    if proc.returncode != 0:
        logger.error("Error getting current branch: %s", proc.stderr.strip())
        return BranchRef(name="")
    return BranchRef(name=proc.stdout.strip())


__all__ = [
    "GIT_TIMEOUT_SECONDS",
    "current_branch",
    "read_remote_url",
    "repo_toplevel",
    "run_git",
]
