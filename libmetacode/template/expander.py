from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libmetacode.tables.table import Row, Table
from libmetacode.template.errors import (
    FieldNotFoundError,
    ReferenceKindError,
    UnboundReferenceError,
)
from libmetacode.template.scope import Binding, ScopeStack, describe_binding
from libmetacode.template.segments import (
    CountSegment,
    LiteralSegment,
    LoopSegment,
    SubstitutionSegment,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, MutableSequence

    from libmetacode.macros.macro import Macro
    from libmetacode.template.segments import Segment, Template

LOOP_HEADER_ORDER_HINT = (
    "Loop header binds row first and index second, e.g `{{#for row,index of table}}`."
)


def expand(macro: Macro, environment: Mapping[str, Binding]) -> str:
    """Expand macro template with given binding environment into output text.

    Environment must bind every formal parameter of an macro (see `bind_macro_arguments`).
    Expansion is pure, any error aborts whole expansion so there is no partial output.
    """
    assert all(param in environment for param in macro.params), (
        f"Environment for macro '{macro.name}' must bind all of its parameters"
    )
    return expand_template(macro.template, environment)


def expand_template(template: Template, environment: Mapping[str, Binding]) -> str:
    """Expand parsed template with given binding environment into output text."""
    output: list[str] = []
    _expand_segments(template.segments, ScopeStack(environment), output)
    return "".join(output)


def _expand_segments(
    segments: Iterable[Segment],
    scopes: ScopeStack,
    output: MutableSequence[str],
) -> None:
    for segment in segments:
        match segment:
            case LiteralSegment():
                output.append(segment.text)
            case SubstitutionSegment():
                output.append(_expand_substitution(segment, scopes))
            case CountSegment():
                table = _resolve_table(segment, segment.name, scopes)
                output.append(str(len(table)))
            case LoopSegment():
                _expand_loop(segment, scopes, output)
            case _:
                assert_never(segment)


def _expand_loop(
    segment: LoopSegment,
    scopes: ScopeStack,
    output: MutableSequence[str],
) -> None:
    table = _resolve_table(segment, segment.iterable, scopes)
    for index, row in enumerate(table):
        bindings: dict[str, Binding] = {segment.variable: row}
        if segment.index is not None:
            bindings[segment.index] = index

        with scopes.scope(bindings):
            _expand_segments(segment.body, scopes, output)


def _expand_substitution(segment: SubstitutionSegment, scopes: ScopeStack) -> str:
    value = _resolve(segment, segment.name, scopes)

    if segment.field is None:
        if isinstance(value, (Row, Table)):
            raise ReferenceKindError(
                name=segment.name,
                location=segment.location,
                directive=segment.directive,
                expected="text or an index",
                got=describe_binding(value),
            )
        return str(value)

    if not isinstance(value, Row):
        raise ReferenceKindError(
            name=segment.name,
            location=segment.location,
            directive=segment.directive,
            expected="a row",
            got=describe_binding(value),
            hint=LOOP_HEADER_ORDER_HINT if isinstance(value, int) else None,
        )

    if segment.field not in value:
        raise FieldNotFoundError(
            name=segment.name,
            field=segment.field,
            location=segment.location,
            directive=segment.directive,
            columns=list(value.cells),
        )
    return value[segment.field]


def _resolve_table(
    segment: CountSegment | LoopSegment,
    name: str,
    scopes: ScopeStack,
) -> Table:
    value = _resolve(segment, name, scopes)
    if not isinstance(value, Table):
        raise ReferenceKindError(
            name=name,
            location=segment.location,
            directive=segment.directive,
            expected="a table",
            got=describe_binding(value),
        )
    return value


def _resolve(
    segment: SubstitutionSegment | CountSegment | LoopSegment,
    name: str,
    scopes: ScopeStack,
) -> Binding:
    value = scopes.get(name)
    if value is None:
        raise UnboundReferenceError(
            name=name,
            location=segment.location,
            directive=segment.directive,
            available=scopes.names(),
        )
    return value
