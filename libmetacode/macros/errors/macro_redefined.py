from libmetacode.location import SourceLocation
from libmetacode.macros.exceptions import MacroError


class MacroRedefinedError(MacroError):
    def __init__(
        self,
        name: str,
        redefined: SourceLocation,
        original: SourceLocation,
    ) -> None:
        self.name = name
        self.redefined = redefined
        self.original = original

    def __repr__(self) -> str:
        return f"""Redefinition of an macro '{self.name}' at {self.redefined}

Original definition found at {self.original}.

Only single definition allowed for macros within one file.

{self.generic_error_name}"""
