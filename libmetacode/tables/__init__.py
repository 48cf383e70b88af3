"""Tables are declarative rows of data which macros are iterating over."""

from .errors import MalformedTableError, TableRedefinedError
from .parser import TABLE_CELL_DELIMITER, parse_table
from .registry import TablesRegistry
from .table import Row, Table

__all__ = (
    "TABLE_CELL_DELIMITER",
    "MalformedTableError",
    "Row",
    "Table",
    "TableRedefinedError",
    "TablesRegistry",
    "parse_table",
)
