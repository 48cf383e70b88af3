from .malformed_table import MalformedTableError
from .table_redefined import TableRedefinedError

__all__ = ["MalformedTableError", "TableRedefinedError"]
