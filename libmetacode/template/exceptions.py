from libmetacode.exceptions import MetacodeError


class TemplateError(MetacodeError):
    """Parent for all errors raised while parsing or expanding templates."""
