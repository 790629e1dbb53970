"""Resolve the workspace root from options, environment and git."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from .exceptions import GitCommandError, ValidationError
from .git import repo_toplevel

logger = logging.getLogger(__name__)

REPO_ENV_VAR = "GIT_OPEN_LINK_REPO"


def resolve_workspace_root(repo_override: Path | None, file_path: Path | None) -> Path | None:
    """Pick the repository root, or ``None`` when nothing resolves.

    ``--repo`` wins over ``GIT_OPEN_LINK_REPO``; otherwise git is asked for the
    toplevel of the file's directory, or of the current directory.
    """

    if repo_override:
        return _existing_dir(repo_override.expanduser(), "--repo")
    raw = os.environ.get(REPO_ENV_VAR)
    if raw:
        return _existing_dir(Path(raw).expanduser(), REPO_ENV_VAR)

    start = Path.cwd()
    if file_path is not None and file_path.parent.is_dir():
        start = file_path.parent
    try:
        return repo_toplevel(start)
    except (GitCommandError, OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("No git toplevel for %s: %s", start, exc)
        return None


def _existing_dir(path: Path, source: str) -> Path:
    if not path.is_dir():
        raise ValidationError(f"Repository path from {source} does not exist: {path}")
    return path.resolve()


__all__ = ["REPO_ENV_VAR", "resolve_workspace_root"]
