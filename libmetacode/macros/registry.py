from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import MacroRedefinedError
from .macro import Macro

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libmetacode.location import SourceLocation
    from libmetacode.template.segments import Template


class MacrosRegistry(dict[str, Macro]):
    """Top-level mapping of macros defined within single generation pass."""

    def new(
        self,
        location: SourceLocation,
        name: str,
        params: Sequence[str],
        template: Template,
    ) -> Macro:
        """Create macro that located at given location, which must not be defined before."""
        if original := self.get(name):
            raise MacroRedefinedError(
                name=name,
                redefined=location,
                original=original.location,
            )

        macro = Macro(
            location=location,
            name=name,
            params=tuple(params),
            template=template,
        )
        self.__setitem__(name, macro)
        return macro
