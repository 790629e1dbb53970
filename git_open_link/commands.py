"""The two open-link actions and the handler they share."""

from __future__ import annotations

import logging
from pathlib import Path

from .browser import BrowserLauncher
from .editor import EditorContext
from .exceptions import NoActiveEditorError, RemoteNotFoundError, WorkspaceNotFoundError
from .git import current_branch, read_remote_url
from .links import DEFAULT_BRANCH, build_link
from .models import BranchRef, WebLink

logger = logging.getLogger(__name__)


def open_file(
    editor: EditorContext,
    workspace_root: Path | None,
    launcher: BrowserLauncher,
    *,
    use_default_branch: bool,
) -> WebLink:
    """Build the link for the editor's file and selection, then open it.

    Raises NoActiveEditorError, WorkspaceNotFoundError or RemoteNotFoundError
    before anything is opened. A branch that cannot be resolved becomes an
    empty name rather than an error.
    """

    selection = editor.selection_range()
    if selection is None:
        raise NoActiveEditorError()
    if workspace_root is None:
        raise WorkspaceNotFoundError()

    remote = read_remote_url(workspace_root)
    if remote is None:
        raise RemoteNotFoundError()

    file = editor.relative_file_path(workspace_root)
    if use_default_branch:
        branch = BranchRef(name=DEFAULT_BRANCH)
    else:
        branch = current_branch(workspace_root)
    logger.debug("Resolved %s on branch %r in %s", file.relative_path, branch.name, workspace_root)

    link = build_link(remote, branch, file, selection, use_default_branch)
    launcher.open(link.url)
    return link


def open_on_default_branch(
    editor: EditorContext, workspace_root: Path | None, launcher: BrowserLauncher
) -> WebLink:
    return open_file(editor, workspace_root, launcher, use_default_branch=True)


def open_on_current_branch(
    editor: EditorContext, workspace_root: Path | None, launcher: BrowserLauncher
) -> WebLink:
    return open_file(editor, workspace_root, launcher, use_default_branch=False)


__all__ = ["open_file", "open_on_current_branch", "open_on_default_branch"]
