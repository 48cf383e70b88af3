from libmetacode.exceptions import MetacodeError


class MacroError(MetacodeError):
    """Parent for all errors related to macro definitions and invocations."""
