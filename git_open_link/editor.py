"""Editor state: which file is open and which lines are selected."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Protocol

from .models import FileRef, SelectionRange


class EditorContext(Protocol):
    """Read-only view of the active editor."""

    def selection_range(self) -> SelectionRange | None:
        """Selected lines, the cursor line, or ``None`` without an editor."""
        ...

    def relative_file_path(self, repo_root: Path) -> FileRef:
        ...


class CommandLineEditor:
    """Editor context populated from command-line arguments."""

    def __init__(self, file_path: Path | None, selection: SelectionRange | None = None) -> None:
        self.file_path = file_path
        self.selection = selection

    def selection_range(self) -> SelectionRange | None:
        if self.file_path is None:
            return None
        return self.selection or SelectionRange(start_line=1, end_line=1)

    def relative_file_path(self, repo_root: Path) -> FileRef:
        if self.file_path is None:
            return FileRef(relative_path="")
        relative = os.path.relpath(self.file_path.resolve(), repo_root.resolve())
        return FileRef(relative_path=PurePath(relative).as_posix())


def parse_file_argument(raw: str) -> tuple[Path, SelectionRange | None]:
    """Split an optional ``:N`` or ``:N-M`` suffix off a file argument."""

    head, sep, tail = raw.rpartition(":")
    if sep and head and tail and tail.replace("-", "").isdigit():
        return Path(head), SelectionRange.parse(tail)
    return Path(raw), None


__all__ = ["CommandLineEditor", "EditorContext", "parse_file_argument"]
