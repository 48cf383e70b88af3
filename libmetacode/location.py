from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of any directive or text within source file."""

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: Literal["file", "toolchain"] = "file"

    # Column where text of each line begins, for text which is stripped from an comment prefix
    # (e.g macro bodies), so columns on next lines are still columns within the file
    col_base: int = 0

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "toolchain":
            return "'(metacode-toolchain-internals)'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"

    def shift_col_number(self, by: int) -> SourceLocation:
        return SourceLocation(
            line_number=self.line_number,
            col_number=self.col_number + by,
            filepath=self.filepath,
            source=self.source,
            col_base=self.col_base,
        )

    def advance_by_text(self, text: str) -> SourceLocation:
        """Get location right after given text, if that text begins at current location."""
        newlines = text.count("\n")
        if not newlines:
            return self.shift_col_number(len(text))
        return SourceLocation(
            line_number=self.line_number + newlines,
            col_number=self.col_base + len(text) - text.rfind("\n") - 1,
            filepath=self.filepath,
            source=self.source,
            col_base=self.col_base,
        )

    @classmethod
    def at_line(cls, filepath: Path, line_number: int, col_number: int = 0) -> SourceLocation:
        """Create a location within file, where text of each line begins at given column."""
        return cls(
            line_number=line_number,
            col_number=col_number,
            filepath=filepath,
            col_base=col_number,
        )

    @classmethod
    def toolchain(cls) -> SourceLocation:
        """Create a location for toolchain originated text."""
        return cls(
            line_number=0,
            col_number=0,
            source="toolchain",
        )
