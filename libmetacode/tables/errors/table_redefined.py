from libmetacode.location import SourceLocation
from libmetacode.tables.exceptions import TableError


class TableRedefinedError(TableError):
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
        return f"""Redefinition of an table '{self.name}' at {self.redefined}

Original definition found at {self.original}.

Only single definition allowed for tables within one file.

{self.generic_error_name}"""
