from libmetacode.location import SourceLocation
from libmetacode.template.exceptions import TemplateError


class ReferenceKindError(TemplateError):
    def __init__(
        self,
        name: str,
        location: SourceLocation,
        directive: str,
        expected: str,
        got: str,
        hint: str | None = None,
    ) -> None:
        self.name = name
        self.location = location
        self.directive = directive
        self.expected = expected
        self.got = got
        self.hint = hint

    def __repr__(self) -> str:
        hint = f"\n{self.hint}" if self.hint else ""
        return f"""Reference '{self.name}' in `{self.directive}` at {self.location} resolved to {self.got}!

Expected {self.expected} here.
Only tables can be counted and iterated, only rows have fields, only text and indices are substituted.{hint}

{self.generic_error_name}"""
