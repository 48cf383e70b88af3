"""Base of all errors raised by Metacode toolchain."""

import re
from abc import abstractmethod

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_kebab(s: str) -> str:
    return _WORD_BOUNDARY.sub("-", s).lower()


class MetacodeError(Exception):
    """Parent for all Metacode errors (exceptions).

    Errors are user-facing: `repr` is an multi-line message that names location of an offending
    directive within source file and ends with generic error name (e.g `[unbound-reference-error]`).
    CLI emits that message as-is, and `str` is same as `repr` for any other consumer.
    """

    @abstractmethod
    def __repr__(self) -> str:
        return f"Undocumented toolchain error {type(self).__name__}{self.args!r}"

    def __str__(self) -> str:
        return repr(self)

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(type(self).__name__)}]"
