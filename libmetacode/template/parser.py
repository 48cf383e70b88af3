from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libmetacode.location import SourceLocation
from libmetacode.template.errors import MalformedTemplateError
from libmetacode.template.lexer import ChunkType, TemplateChunk, tokenize_template
from libmetacode.template.segments import (
    CountSegment,
    LiteralSegment,
    LoopSegment,
    Segment,
    SubstitutionSegment,
    Template,
)

if TYPE_CHECKING:
    from collections.abc import MutableSequence

LOOP_START_KEYWORD = "#for"
LOOP_END_KEYWORD = "/for"

_LOOP_START = re.compile(
    r"#for\s+(?P<variable>\w+)(?:\s*,\s*(?P<index>\w+))?\s+of\s+(?P<iterable>\w+)",
)
_COUNT = re.compile(r"#(?P<name>\w+)")
_SUBSTITUTION = re.compile(r"(?P<name>\w+)(?:\.(?P<field>\w+))?")


@dataclass
class _OpenLoop:
    """Loop start which is not yet closed by loop end directive."""

    chunk: TemplateChunk
    variable: str
    index: str | None
    iterable: str

    body: list[Segment] = field(default_factory=list)


def parse_template(
    text: str,
    location: SourceLocation | None = None,
) -> Template:
    """Parse template body into tree of segments (loop blocks contain their bodies).

    :param location: Location of first character of given text, used for error reporting
    """
    location = location or SourceLocation.toolchain()

    root: list[Segment] = []
    loops: list[_OpenLoop] = []

    for chunk in tokenize_template(text, location):
        body = loops[-1].body if loops else root

        if chunk.type == ChunkType.TEXT:
            body.append(LiteralSegment(text=chunk.text, location=chunk.location))
            continue

        if _is_loop_start(chunk.text):
            loops.append(_consume_loop_start(chunk))
            continue

        if chunk.text == LOOP_END_KEYWORD:
            _consume_loop_end(chunk, loops, root)
            continue

        body.append(_consume_scalar_directive(chunk))

    if loops:
        # Report innermost loop as it is the one that must be closed first
        unclosed = loops[-1].chunk
        raise MalformedTemplateError(
            location=unclosed.location,
            directive=unclosed.raw,
            reason=f"Loop is never closed, expected `{{{{{LOOP_END_KEYWORD}}}}}` before end of template.",
        )

    return Template(segments=tuple(root), location=location)


def _is_loop_start(expression: str) -> bool:
    keyword, *_ = expression.split(maxsplit=1) or [""]
    return keyword == LOOP_START_KEYWORD


def _consume_loop_start(chunk: TemplateChunk) -> _OpenLoop:
    if not (match := _LOOP_START.fullmatch(chunk.text)):
        raise MalformedTemplateError(
            location=chunk.location,
            directive=chunk.raw,
            reason="Loop start must be written as `#for row of table` or `#for row,index of table`.",
        )

    variable, index, iterable = match.group("variable", "index", "iterable")
    if variable == index:
        raise MalformedTemplateError(
            location=chunk.location,
            directive=chunk.raw,
            reason=f"Loop row and index variables must differ, but both are named '{variable}'.",
        )
    return _OpenLoop(
        chunk=chunk,
        variable=variable,
        index=index,
        iterable=iterable,
    )


def _consume_loop_end(
    chunk: TemplateChunk,
    loops: MutableSequence[_OpenLoop],
    root: MutableSequence[Segment],
) -> None:
    if not loops:
        raise MalformedTemplateError(
            location=chunk.location,
            directive=chunk.raw,
            reason="Loop end has no matching loop start.",
        )

    loop = loops.pop()
    parent = loops[-1].body if loops else root
    parent.append(
        LoopSegment(
            variable=loop.variable,
            index=loop.index,
            iterable=loop.iterable,
            body=tuple(loop.body),
            directive=loop.chunk.raw,
            location=loop.chunk.location,
        ),
    )


def _consume_scalar_directive(chunk: TemplateChunk) -> Segment:
    """Consume count reference or scalar substitution directive."""
    if match := _COUNT.fullmatch(chunk.text):
        return CountSegment(
            name=match.group("name"),
            directive=chunk.raw,
            location=chunk.location,
        )

    if match := _SUBSTITUTION.fullmatch(chunk.text):
        return SubstitutionSegment(
            name=match.group("name"),
            field=match.group("field"),
            directive=chunk.raw,
            location=chunk.location,
        )

    raise MalformedTemplateError(
        location=chunk.location,
        directive=chunk.raw,
        reason="Unknown directive syntax." if chunk.text else "Directive is empty.",
    )
