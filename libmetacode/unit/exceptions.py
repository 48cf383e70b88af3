from libmetacode.exceptions import MetacodeError


class TranslationUnitError(MetacodeError):
    """Parent for all errors raised while processing directive blocks of an file."""
