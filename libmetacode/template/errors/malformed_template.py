from libmetacode.location import SourceLocation
from libmetacode.template.exceptions import TemplateError


class MalformedTemplateError(TemplateError):
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
        return f"""Malformed template directive `{self.directive}` at {self.location}!

{self.reason}

Known directives are `{{{{name}}}}`, `{{{{row.column}}}}`, `{{{{#table}}}}` (row count)
and loop block `{{{{#for row[,index] of table}}}} ... {{{{/for}}}}`.

{self.generic_error_name}"""
