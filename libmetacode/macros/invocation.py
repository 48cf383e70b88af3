from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import (
    MacroArgumentsMismatchError,
    MalformedDirectiveError,
    UnknownMacroError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libmetacode.location import SourceLocation
    from libmetacode.tables.table import Table
    from libmetacode.template.scope import Binding

    from .macro import Macro
    from .registry import MacrosRegistry

_CALL_LIKE = re.compile(r"(?P<name>\w+)\s*\((?P<arguments>[^()]*)\)")
_IDENTIFIER = re.compile(r"\w+")


@dataclass(frozen=True)
class MacroInvocation:
    """Call site of an macro, e.g `ENUM(CatBreed, T_CAT_BREEDS)`."""

    name: str
    arguments: tuple[str, ...]

    location: SourceLocation


def parse_macro_signature(
    text: str,
    location: SourceLocation,
) -> tuple[str, list[str]]:
    """Parse macro signature `NAME(param, ...)` into name and formal parameters."""
    name, params = _parse_call_like(text, location, what="Macro signature")

    for param in params:
        if not _IDENTIFIER.fullmatch(param):
            raise MalformedDirectiveError(
                location=location,
                directive=text,
                reason=f"Macro parameter '{param}' is not an identifier.",
            )

    if duplicates := sorted({p for p in params if params.count(p) > 1}):
        raise MalformedDirectiveError(
            location=location,
            directive=text,
            reason=f"Macro parameter(s) {', '.join(duplicates)} defined more than once.",
        )
    return name, params


def parse_macro_invocation(text: str, location: SourceLocation) -> MacroInvocation:
    """Parse macro invocation `NAME(argument, ...)`."""
    name, arguments = _parse_call_like(text, location, what="Macro invocation")
    return MacroInvocation(
        name=name,
        arguments=tuple(arguments),
        location=location,
    )


def resolve_macro_invocation(
    invocation: MacroInvocation,
    macros: MacrosRegistry,
) -> Macro:
    """Find macro which is invoked or raise error if it is not defined."""
    if not (macro := macros.get(invocation.name)):
        raise UnknownMacroError(
            name=invocation.name,
            location=invocation.location,
            defined=sorted(macros),
        )
    return macro


def bind_macro_arguments(
    macro: Macro,
    invocation: MacroInvocation,
    tables: Mapping[str, Table],
) -> dict[str, Binding]:
    """Construct binding environment for single invocation of an macro.

    Argument which is a name of defined table is bound to that table, otherwise it is bound as-is (text).
    """
    if len(invocation.arguments) != len(macro.params):
        raise MacroArgumentsMismatchError(
            macro=macro,
            location=invocation.location,
            arguments_count=len(invocation.arguments),
        )

    environment: dict[str, Binding] = {}
    for param, argument in zip(macro.params, invocation.arguments, strict=True):
        environment[param] = tables.get(argument, argument)
    return environment


def _parse_call_like(
    text: str,
    location: SourceLocation,
    *,
    what: str,
) -> tuple[str, list[str]]:
    if not (match := _CALL_LIKE.fullmatch(text.strip())):
        raise MalformedDirectiveError(
            location=location,
            directive=text.strip(),
            reason=f"{what} must be written as `NAME(a, b)`.",
        )

    name, raw_arguments = match.group("name", "arguments")
    if not raw_arguments.strip():
        return name, []

    arguments = [argument.strip() for argument in raw_arguments.split(",")]
    if not all(arguments):
        raise MalformedDirectiveError(
            location=location,
            directive=text.strip(),
            reason=f"{what} has an empty argument.",
        )
    return name, arguments
