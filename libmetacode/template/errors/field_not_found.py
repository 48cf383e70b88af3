from collections.abc import Sequence

from libmetacode.location import SourceLocation
from libmetacode.template.exceptions import TemplateError


class FieldNotFoundError(TemplateError):
    def __init__(
        self,
        name: str,
        field: str,
        location: SourceLocation,
        directive: str,
        columns: Sequence[str],
    ) -> None:
        self.name = name
        self.field = field
        self.location = location
        self.directive = directive
        self.columns = columns

    def __repr__(self) -> str:
        columns = ", ".join(f"'{column}'" for column in self.columns)
        return f"""Unknown field '{self.field}' of row '{self.name}' in `{self.directive}` at {self.location}!

Row has only these columns: {columns}

{self.generic_error_name}"""
