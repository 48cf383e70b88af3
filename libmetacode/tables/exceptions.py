from libmetacode.exceptions import MetacodeError


class TableError(MetacodeError):
    """Parent for all errors raised while parsing table definitions."""
