"""Macro definitions, registry and invocations."""

from .macro import Macro
from .errors import (
    MacroArgumentsMismatchError,
    MacroRedefinedError,
    MalformedDirectiveError,
    UnknownMacroError,
)
from .invocation import (
    MacroInvocation,
    bind_macro_arguments,
    parse_macro_invocation,
    parse_macro_signature,
    resolve_macro_invocation,
)
from .registry import MacrosRegistry

__all__ = (
    "Macro",
    "MacroArgumentsMismatchError",
    "MacroInvocation",
    "MacroRedefinedError",
    "MacrosRegistry",
    "MalformedDirectiveError",
    "UnknownMacroError",
    "bind_macro_arguments",
    "parse_macro_invocation",
    "parse_macro_signature",
    "resolve_macro_invocation",
)
