"""Classification of source file lines into directive block lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from libmetacode.location import SourceLocation

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from libmetacode.config import SyntaxConfig


class LineKind(Enum):
    """Kind of an line, only meaningful inside directive blocks (except markers)."""

    # Block markers
    METACODE = auto()
    METAGEN = auto()
    METAEND = auto()

    # Definitions
    MACRO = auto()
    TABLE = auto()
    BODY = auto()

    INVOCATION = auto()
    UNKNOWN_DIRECTIVE = auto()

    # Comment line without any text
    BLANK = auto()

    # Line that is not an comment (host language code or generated output)
    CODE = auto()


WORD_TO_MARKER = {
    "#metacode": LineKind.METACODE,
    "#metagen": LineKind.METAGEN,
    "#metaend": LineKind.METAEND,
}
WORD_TO_DEFINITION = {
    "#macro": LineKind.MACRO,
    "#table": LineKind.TABLE,
}
DIRECTIVE_MARK = "#"

# Only line feed terminates an line (form feed and other Unicode breaks are part of line text)
_LINE_END = re.compile(r"(?<=\n)")


@dataclass(frozen=True)
class SourceLine:
    kind: LineKind

    # Line exactly as in source (with line terminator if any)
    raw: str

    # Payload of an line (e.g body text, macro signature, table name, invocation)
    content: str

    # Location of payload
    location: SourceLocation

    @property
    def text(self) -> str:
        """Line without line terminator."""
        return self.raw.rstrip("\r\n")


def iterate_source_lines(
    text: str,
    path: Path,
    config: SyntaxConfig,
) -> Iterator[SourceLine]:
    """Stream classified lines of given text, in order from top to bottom of an file."""
    for row, raw in enumerate(_split_lines_keepends(text)):
        yield classify_source_line(raw, row, path, config)


def classify_source_line(
    raw: str,
    row: int,
    path: Path,
    config: SyntaxConfig,
) -> SourceLine:
    line = raw.rstrip("\r\n")
    prefix = config.comment_prefix

    if not line.startswith(prefix):
        return _source_line(LineKind.CODE, raw, line, path, row, col=0)

    rest = line.removeprefix(prefix)
    if not rest.strip():
        return _source_line(LineKind.BLANK, raw, "", path, row, col=len(prefix))

    if rest.startswith(config.body_prefix):
        col = len(prefix) + len(config.body_prefix)
        return _source_line(LineKind.BODY, raw, line[col:], path, row, col=col)

    col = len(line) - len(rest.lstrip())
    directive = rest.strip()
    word, _, argument = directive.partition(" ")

    if kind := WORD_TO_MARKER.get(directive):
        return _source_line(kind, raw, "", path, row, col=col)

    if kind := WORD_TO_DEFINITION.get(word):
        return _source_line(kind, raw, argument.strip(), path, row, col=col)

    if directive.startswith(DIRECTIVE_MARK):
        return _source_line(LineKind.UNKNOWN_DIRECTIVE, raw, directive, path, row, col=col)

    return _source_line(LineKind.INVOCATION, raw, directive, path, row, col=col)


def _source_line(
    kind: LineKind,
    raw: str,
    content: str,
    path: Path,
    row: int,
    *,
    col: int,
) -> SourceLine:
    return SourceLine(
        kind=kind,
        raw=raw,
        content=content,
        location=SourceLocation.at_line(path, row, col),
    )


def _split_lines_keepends(text: str) -> list[str]:
    return [line for line in _LINE_END.split(text) if line]
