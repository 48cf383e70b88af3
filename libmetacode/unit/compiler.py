from __future__ import annotations

import re
from collections import deque
from dataclasses import replace
from typing import TYPE_CHECKING, assert_never

from libmetacode.config import SyntaxConfig
from libmetacode.location import SourceLocation
from libmetacode.macros.errors import MalformedDirectiveError
from libmetacode.macros.invocation import (
    bind_macro_arguments,
    parse_macro_invocation,
    parse_macro_signature,
    resolve_macro_invocation,
)
from libmetacode.tables.parser import parse_table
from libmetacode.template.expander import expand
from libmetacode.template.parser import parse_template

from ._state import BlockState, TranslationUnitState
from .errors import MetacodeBlockError
from .lines import LineKind, SourceLine, iterate_source_lines

if TYPE_CHECKING:
    from pathlib import Path

    from libmetacode.macros.macro import Macro
    from libmetacode.tables.table import Table

_IDENTIFIER = re.compile(r"\w+")
_BODY_KINDS = (LineKind.BODY, LineKind.BLANK)


def compile_translation_unit(
    text: str,
    path: Path,
    config: SyntaxConfig | None = None,
) -> str:
    """Regenerate output of all directive blocks within given file text.

    Everything between `#metagen` and `#metaend` is replaced with expansions of invocations
    from preceding `#metacode` block, all other lines are preserved as-is.

    :returns text: New text of an file, same as given if generated output is up to date
    """
    config = config or SyntaxConfig()
    state = TranslationUnitState(
        path=path,
        config=config,
        lines=deque(iterate_source_lines(text, path, config)),
    )

    while state.lines:
        line = state.lines.popleft()
        match state.block:
            case BlockState.OUTSIDE:
                _process_line_outside_block(line, state)
            case BlockState.DIRECTIVES:
                _process_line_inside_directives(line, state)
            case BlockState.GENERATED:
                _process_line_inside_generated(line, state)
            case _:
                assert_never(state.block)

    _validate_end_of_file(state)
    return "".join(state.output)


def has_metacode_block(text: str, config: SyntaxConfig | None = None) -> bool:
    """Check is given file text contains any directive block (e.g must be processed)."""
    config = config or SyntaxConfig()
    pattern = rf"^{re.escape(config.comment_prefix)}[ \t]*#metacode[ \t]*\r?$"
    return re.search(pattern, text, flags=re.MULTILINE) is not None


def consume_macro_definition_from_line(
    line: SourceLine,
    state: TranslationUnitState,
) -> Macro:
    """Consume macro definition (signature and indented body lines below) into macros registry."""
    assert line.kind == LineKind.MACRO
    if not line.content:
        raise MalformedDirectiveError(
            location=line.location,
            directive=line.text.strip(),
            reason="Macro definition requires signature, e.g `#macro NAME(a, b)`.",
        )

    name, params = parse_macro_signature(line.content, line.location)
    body = _consume_definition_body(state)
    if body is None:
        raise MalformedDirectiveError(
            location=line.location,
            directive=line.text.strip(),
            reason=f"Macro '{name}' has no body, expected indented template lines below.",
        )

    text, location = body
    template = parse_template(text, location)
    return state.macros.new(line.location, name, params, template)


def consume_table_definition_from_line(
    line: SourceLine,
    state: TranslationUnitState,
) -> Table:
    """Consume table definition (name and indented rows below) into tables registry."""
    assert line.kind == LineKind.TABLE
    name = line.content
    if not _IDENTIFIER.fullmatch(name):
        raise MalformedDirectiveError(
            location=line.location,
            directive=line.text.strip(),
            reason="Table definition requires single identifier name, e.g `#table T_NAME`.",
        )

    text, location = _consume_definition_body(state) or ("", line.location)
    table = parse_table(
        text,
        name=name,
        location=location,
        delimiter=state.config.table_cell_delimiter,
    )
    return state.tables.define(replace(table, location=line.location))


def expand_macro_invocation_from_line(
    line: SourceLine,
    state: TranslationUnitState,
) -> str:
    """Expand invoked macro and remember its output for generated region of current block."""
    assert line.kind == LineKind.INVOCATION
    invocation = parse_macro_invocation(line.content, line.location)
    macro = resolve_macro_invocation(invocation, state.macros)
    environment = bind_macro_arguments(macro, invocation, state.tables)

    expansion = expand(macro, environment)
    state.expansions.append(expansion)
    return expansion


def _process_line_outside_block(line: SourceLine, state: TranslationUnitState) -> None:
    match line.kind:
        case LineKind.METACODE:
            _open_block(line, state, BlockState.DIRECTIVES)
        case LineKind.METAGEN:
            raise MetacodeBlockError(
                location=line.location,
                line=line.text,
                reason="`#metagen` must be preceded by `#metacode`.",
            )
        case LineKind.METAEND:
            raise MetacodeBlockError(
                location=line.location,
                line=line.text,
                reason="`#metaend` must be preceded by `#metagen` and `#metacode`.",
            )
        case _:
            # Host language code and regular comments are not touched
            pass
    state.emit(line)


def _process_line_inside_directives(
    line: SourceLine,
    state: TranslationUnitState,
) -> None:
    if line.kind == LineKind.CODE:
        _close_definitions_only_block(line, state)
        state.emit(line)
        return

    state.emit(line)
    match line.kind:
        case LineKind.METACODE | LineKind.BLANK:
            # Consecutive `#metacode` is allowed (e.g definitions split into several blocks)
            pass
        case LineKind.METAGEN:
            _open_block(line, state, BlockState.GENERATED)
        case LineKind.METAEND:
            raise MetacodeBlockError(
                location=line.location,
                line=line.text,
                reason="`#metaend` must be preceded by `#metagen`.",
            )
        case LineKind.MACRO:
            consume_macro_definition_from_line(line, state)
        case LineKind.TABLE:
            consume_table_definition_from_line(line, state)
        case LineKind.INVOCATION:
            expand_macro_invocation_from_line(line, state)
        case LineKind.BODY:
            raise MetacodeBlockError(
                location=line.location,
                line=line.text,
                reason="Indented line is not a part of any `#macro` or `#table` definition.",
            )
        case LineKind.UNKNOWN_DIRECTIVE:
            raise MalformedDirectiveError(
                location=line.location,
                directive=line.content,
                reason="Unknown directive, expected one of `#macro`, `#table`, `#metagen`.",
            )


def _process_line_inside_generated(
    line: SourceLine,
    state: TranslationUnitState,
) -> None:
    match line.kind:
        case LineKind.METAEND:
            _emit_generated_output(state)
            state.emit(line)
            state.block = BlockState.OUTSIDE
            state.block_opened_by = None
            state.expansions.clear()
        case LineKind.METACODE | LineKind.METAGEN:
            raise MetacodeBlockError(
                location=line.location,
                line=line.text,
                reason="`#metagen` must be followed by `#metaend` before any other block.",
            )
        case _:
            # Stale generated output, replaced by fresh one at `#metaend`
            pass


def _open_block(line: SourceLine, state: TranslationUnitState, block: BlockState) -> None:
    state.block = block
    state.block_opened_by = line


def _close_definitions_only_block(
    line: SourceLine,
    state: TranslationUnitState,
) -> None:
    """Leave directive block on host code, which is only valid when block has no invocations."""
    if state.expansions:
        raise MetacodeBlockError(
            location=line.location,
            line=line.text,
            reason="Directive block with macro invocations must be closed by `#metagen` and `#metaend`, but found code line.",
        )
    state.block = BlockState.OUTSIDE
    state.block_opened_by = None


def _emit_generated_output(state: TranslationUnitState) -> None:
    assert state.block_opened_by is not None
    generated = "".join(state.expansions)
    if not generated:
        return

    if not generated.endswith("\n"):
        generated += "\n"

    # Generated output follows line terminators of an file (by `#metagen` line)
    if state.block_opened_by.raw.endswith("\r\n"):
        generated = generated.replace("\n", "\r\n")
    state.output.append(generated)


def _consume_definition_body(
    state: TranslationUnitState,
) -> tuple[str, SourceLocation] | None:
    """Consume indented (and blank) comment lines below an definition, or None if there is no body."""
    body: list[SourceLine] = []
    while state.lines and state.lines[0].kind in _BODY_KINDS:
        line = state.lines.popleft()
        state.emit(line)
        body.append(line)

    # Blank lines separates definitions, so trailing ones are not part of the body
    while body and body[-1].kind == LineKind.BLANK:
        body.pop()

    if not body:
        return None

    text = "".join(f"{line.content}\n" for line in body)
    location = SourceLocation.at_line(
        state.path,
        body[0].location.line_number,
        len(state.config.comment_prefix) + len(state.config.body_prefix),
    )
    return text, location


def _validate_end_of_file(state: TranslationUnitState) -> None:
    opened_by = state.block_opened_by
    if state.block == BlockState.GENERATED:
        assert opened_by is not None
        raise MetacodeBlockError(
            location=opened_by.location,
            line=opened_by.text,
            reason="`#metagen` is never closed by `#metaend` until end of file.",
        )

    if state.block == BlockState.DIRECTIVES and state.expansions:
        assert opened_by is not None
        raise MetacodeBlockError(
            location=opened_by.location,
            line=opened_by.text,
            reason="Directive block with macro invocations is never followed by `#metagen` and `#metaend`.",
        )
