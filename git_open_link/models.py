"""Dataclasses shared across modules."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import ValidationError


_RANGE_PATTERN = re.compile(r"^\s*(?P<start>\d+)\s*(?:-\s*(?P<end>\d+)\s*)?$")


@dataclass(frozen=True)
class SelectionRange:
    """Inclusive, 1-based line span of the user's selection."""

    start_line: int
    end_line: int

    @classmethod
    def from_cursor(cls, line: int) -> SelectionRange:
        """Range for an empty selection; ``line`` is the 0-based cursor line."""

        return cls(start_line=line + 1, end_line=line + 1)

    @classmethod
    def from_selection(cls, start: int, end: int) -> SelectionRange:
        """Range covering every 0-based editor line from ``start`` to ``end``."""

        lowest, highest = min(start, end), max(start, end)
        return cls(start_line=lowest + 1, end_line=highest + 1)

    @classmethod
    def parse(cls, text: str) -> SelectionRange:
        """Parse ``N`` or ``N-M`` as typed on the command line (1-based)."""

        match = _RANGE_PATTERN.match(text)
        if not match:
            raise ValidationError(f"Invalid line range: {text!r}. Use N or N-M.")
        start = int(match.group("start"))
        end = int(match.group("end") or start)
        if start < 1:
            raise ValidationError(f"Line numbers start at 1, got {start}.")
        if end < start:
            raise ValidationError(f"Line range end {end} is before start {start}.")
        return cls.from_selection(start - 1, end - 1)

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


@dataclass(frozen=True)
class EditorSelection:
    """Raw editor selection state using 0-based line indices.

    Editor integrations hand their anchor/active lines over in this form;
    the CLI builds one for a bare cursor line.
    """

    anchor_line: int
    active_line: int
    is_empty: bool = False

    def to_range(self) -> SelectionRange:
        if self.is_empty:
            return SelectionRange.from_cursor(self.active_line)
        return SelectionRange.from_selection(self.anchor_line, self.active_line)


@dataclass(frozen=True)
class RepoRemote:
    """Remote url as configured for the repository."""

    url: str


@dataclass(frozen=True)
class BranchRef:
    name: str


@dataclass(frozen=True)
class FileRef:
    """Repository-relative path using forward slashes."""

    relative_path: str


@dataclass(frozen=True)
class WebLink:
    url: str

    def __str__(self) -> str:
        return self.url
