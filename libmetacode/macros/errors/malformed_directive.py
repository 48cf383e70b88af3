from libmetacode.location import SourceLocation
from libmetacode.macros.exceptions import MacroError


class MalformedDirectiveError(MacroError):
    def __init__(
        self,
        location: SourceLocation,
        directive: str,
        reason: str,
    ) -> None:
        self.location = location
        self.directive = directive
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Malformed directive `{self.directive}` at {self.location}!

{self.reason}

{self.generic_error_name}"""
