from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from libmetacode.location import SourceLocation


@dataclass(frozen=True)
class LiteralSegment:
    """Text that is emitted verbatim."""

    text: str
    location: SourceLocation


@dataclass(frozen=True)
class SubstitutionSegment:
    """Scalar substitution, e.g `{{name}}` or `{{row.column}}`."""

    name: str
    field: str | None

    # Directive as written in source, for error reporting
    directive: str
    location: SourceLocation


@dataclass(frozen=True)
class CountSegment:
    """Row count reference, e.g `{{#table}}`."""

    name: str

    directive: str
    location: SourceLocation


@dataclass(frozen=True)
class LoopSegment:
    """Loop block over rows of an table, e.g `{{#for row,index of table}} ... {{/for}}`."""

    variable: str
    index: str | None
    iterable: str

    # Segments between loop start and loop end, expanded once per row
    body: tuple[Segment, ...]

    directive: str
    location: SourceLocation


Segment: TypeAlias = LiteralSegment | SubstitutionSegment | CountSegment | LoopSegment


@dataclass(frozen=True)
class Template:
    """Parsed template body, sequence of literal and directive segments."""

    segments: tuple[Segment, ...]
    location: SourceLocation
