from collections.abc import Sequence

from libmetacode.location import SourceLocation
from libmetacode.template.exceptions import TemplateError


class UnboundReferenceError(TemplateError):
    def __init__(
        self,
        name: str,
        location: SourceLocation,
        directive: str,
        available: Sequence[str],
    ) -> None:
        self.name = name
        self.location = location
        self.directive = directive
        self.available = available

    def __repr__(self) -> str:
        available = ", ".join(f"'{name}'" for name in self.available) or "(nothing)"
        return f"""Unbound reference '{self.name}' in `{self.directive}` at {self.location}!

Name is not a macro parameter nor a loop variable in any enclosing scope.
Names available there: {available}

{self.generic_error_name}"""
