from .arguments_mismatch import MacroArgumentsMismatchError
from .macro_redefined import MacroRedefinedError
from .malformed_directive import MalformedDirectiveError
from .unknown_macro import UnknownMacroError

__all__ = [
    "MacroArgumentsMismatchError",
    "MacroRedefinedError",
    "MalformedDirectiveError",
    "UnknownMacroError",
]
