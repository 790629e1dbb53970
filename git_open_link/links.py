"""Compose web links to files on the hosted repository."""

from __future__ import annotations

import logging

from .models import BranchRef, FileRef, RepoRemote, SelectionRange, WebLink

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "main"
_GIT_SUFFIX = ".git"


def strip_git_suffix(url: str) -> str:
    """Drop a single trailing ``.git`` from a remote url."""

    if url.endswith(_GIT_SUFFIX):
        return url[: -len(_GIT_SUFFIX)]
    return url


def build_link(
    remote: RepoRemote,
    branch: BranchRef,
    file: FileRef,
    selection: SelectionRange,
    use_default_branch: bool,
) -> WebLink:
    """Build the blob url for ``file`` at ``selection``.

    Multi-line selections get a second anchor joined with ``-#L``
    (``#L10-#L15``), which is the established output format.
    """

    base = strip_git_suffix(remote.url)
    branch_segment = DEFAULT_BRANCH if use_default_branch else branch.name
    url = f"{base}/blob/{branch_segment}/{file.relative_path}#L{selection.start_line}"
    if selection.end_line > selection.start_line:
        url += f"-#L{selection.end_line}"
    logger.debug("Built link %s", url)
    return WebLink(url=url)


__all__ = ["DEFAULT_BRANCH", "build_link", "strip_git_suffix"]
