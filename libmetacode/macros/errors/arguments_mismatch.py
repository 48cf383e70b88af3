from libmetacode.location import SourceLocation
from libmetacode.macros.exceptions import MacroError
from libmetacode.macros.macro import Macro


class MacroArgumentsMismatchError(MacroError):
    def __init__(
        self,
        macro: Macro,
        location: SourceLocation,
        arguments_count: int,
    ) -> None:
        self.macro = macro
        self.location = location
        self.arguments_count = arguments_count

    def __repr__(self) -> str:
        signature = f"{self.macro.name}({', '.join(self.macro.params)})"
        return f"""Macro '{self.macro.name}' invoked at {self.location} with {self.arguments_count} argument(s)!

Expected {len(self.macro.params)} argument(s) as defined by `{signature}` at {self.macro.location}.

{self.generic_error_name}"""
