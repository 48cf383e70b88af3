from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libmetacode.location import SourceLocation
    from libmetacode.template.segments import Template


@dataclass(frozen=True)
class Macro:
    """Named template with formal parameters, expanded once per invocation.

    Workflow:
        Translation unit encounters macro definition (within directive block) like:
        `#macro ENUM(name, t)`
        `  {{~#for r of t~}}`
        `  {{name}}_{{r.k}},`
        `  {{~/for~}}`

        Loop header binds row first and optional zero-based index second (`#for row,index of table`).

        It consumes indented lines below as template body.
        Next time when it encounters invocation of that macro, e.g:
        `ENUM(CatBreed, T_CAT_BREEDS)`
        It binds parameters to arguments (tables are bound by their name) and expands template,
        output is placed into generated region (`#metagen` ... `#metaend`).

    Read more:
        Text substitution macros: https://en.wikipedia.org/wiki/Macro_(computer_science)#Text-substitution_macros
    """

    # Where is that definition begins (an reference to `#macro` directive)
    location: SourceLocation

    name: str

    # Formal parameter names, in order of invocation arguments
    params: tuple[str, ...]

    template: Template
