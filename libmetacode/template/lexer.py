"""Split template text into text and directive chunks.

Also performs whitespace collapsing requested with trim markers (`{{~`, `~}}`),
so parser and expander never see formatting whitespace of trimmed directives.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING

from libmetacode.template.errors import MalformedTemplateError

if TYPE_CHECKING:
    from libmetacode.location import SourceLocation

DIRECTIVE_OPEN = "{{"
DIRECTIVE_CLOSE = "}}"
TRIM_MARK = "~"

_TRAILING_INDENTATION = re.compile(r"[ \t]+\Z")
_LEADING_WHITESPACE = re.compile(r"\A(?:[ \t]+|[\r\n]+)")


class ChunkType(Enum):
    TEXT = auto()
    DIRECTIVE = auto()


@dataclass(frozen=True)
class TemplateChunk:
    type: ChunkType

    # Text itself for text chunks, or expression inside markers for directive chunks
    text: str

    # Directive exactly as in source (with markers)
    raw: str

    location: SourceLocation

    trim_left: bool = False
    trim_right: bool = False


def tokenize_template(text: str, location: SourceLocation) -> list[TemplateChunk]:
    """Tokenize template text into chunks, with trimmed whitespace already collapsed."""
    chunks: list[TemplateChunk] = []
    cursor = 0
    current = location

    while (start := text.find(DIRECTIVE_OPEN, cursor)) != -1:
        if start > cursor:
            chunks.append(_text_chunk(text[cursor:start], current))
            current = current.advance_by_text(text[cursor:start])

        end = text.find(DIRECTIVE_CLOSE, start + len(DIRECTIVE_OPEN))
        if end == -1:
            raise MalformedTemplateError(
                location=current,
                directive=text[start:].split("\n", maxsplit=1)[0],
                reason=f"Directive is not closed, expected `{DIRECTIVE_CLOSE}` after it.",
            )

        raw = text[start : end + len(DIRECTIVE_CLOSE)]
        chunks.append(_directive_chunk(raw, current))

        current = current.advance_by_text(raw)
        cursor = end + len(DIRECTIVE_CLOSE)

    if cursor < len(text):
        chunks.append(_text_chunk(text[cursor:], current))

    return collapse_trimmed_whitespace(chunks)


def collapse_trimmed_whitespace(chunks: list[TemplateChunk]) -> list[TemplateChunk]:
    """Remove whitespace adjacent to directives which requested trimming.

    Left trim removes indentation (spaces/tabs) right before directive.
    Right trim removes indentation or otherwise line break(s) right after directive.
    """
    collapsed = list(chunks)
    for idx, chunk in enumerate(collapsed):
        if chunk.type != ChunkType.DIRECTIVE:
            continue

        if chunk.trim_left and idx > 0 and collapsed[idx - 1].type == ChunkType.TEXT:
            previous = collapsed[idx - 1]
            text = _TRAILING_INDENTATION.sub("", previous.text)
            collapsed[idx - 1] = replace(previous, text=text, raw=text)

        if (
            chunk.trim_right
            and idx + 1 < len(collapsed)
            and collapsed[idx + 1].type == ChunkType.TEXT
        ):
            following = collapsed[idx + 1]
            if match := _LEADING_WHITESPACE.match(following.text):
                text = following.text[match.end() :]
                collapsed[idx + 1] = replace(
                    following,
                    text=text,
                    raw=text,
                    location=following.location.advance_by_text(match.group()),
                )

    return [
        chunk
        for chunk in collapsed
        if chunk.type == ChunkType.DIRECTIVE or chunk.text
    ]


def _text_chunk(text: str, location: SourceLocation) -> TemplateChunk:
    return TemplateChunk(
        type=ChunkType.TEXT,
        text=text,
        raw=text,
        location=location,
    )


def _directive_chunk(raw: str, location: SourceLocation) -> TemplateChunk:
    expression = raw[len(DIRECTIVE_OPEN) : -len(DIRECTIVE_CLOSE)]

    trim_left = expression.startswith(TRIM_MARK)
    if trim_left:
        expression = expression.removeprefix(TRIM_MARK)

    trim_right = expression.endswith(TRIM_MARK)
    if trim_right:
        expression = expression.removesuffix(TRIM_MARK)

    return TemplateChunk(
        type=ChunkType.DIRECTIVE,
        text=expression.strip(),
        raw=raw,
        location=location,
        trim_left=trim_left,
        trim_right=trim_right,
    )
