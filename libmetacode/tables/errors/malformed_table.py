from libmetacode.location import SourceLocation
from libmetacode.tables.exceptions import TableError


class MalformedTableError(TableError):
    def __init__(
        self,
        table_name: str,
        location: SourceLocation,
        reason: str,
        line: str | None = None,
    ) -> None:
        self.table_name = table_name
        self.location = location
        self.reason = reason
        self.line = line

    def __repr__(self) -> str:
        offending = f"\n\n    {self.line.strip()}\n" if self.line is not None else "\n"
        return f"""Malformed table '{self.table_name}' at {self.location}!
{offending}
{self.reason}
Tables are a header row of column names followed by data rows, cells are separated by '|'.

{self.generic_error_name}"""
