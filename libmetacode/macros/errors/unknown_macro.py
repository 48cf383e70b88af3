from collections.abc import Sequence

from libmetacode.location import SourceLocation
from libmetacode.macros.exceptions import MacroError


class UnknownMacroError(MacroError):
    def __init__(
        self,
        name: str,
        location: SourceLocation,
        defined: Sequence[str],
    ) -> None:
        self.name = name
        self.location = location
        self.defined = defined

    def __repr__(self) -> str:
        defined = ", ".join(f"'{name}'" for name in self.defined) or "(none)"
        return f"""Invocation of an unknown macro '{self.name}' at {self.location}!

Macros must be defined with `#macro` before they are invoked.
Defined macros: {defined}

{self.generic_error_name}"""
