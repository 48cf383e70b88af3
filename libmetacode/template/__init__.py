"""Template parser and expander (substitution, row count and loops over tables)."""

from .errors import (
    FieldNotFoundError,
    MalformedTemplateError,
    ReferenceKindError,
    UnboundReferenceError,
)
from .expander import expand, expand_template
from .parser import parse_template
from .scope import Binding, ScopeStack
from .segments import (
    CountSegment,
    LiteralSegment,
    LoopSegment,
    Segment,
    SubstitutionSegment,
    Template,
)

__all__ = (
    "Binding",
    "CountSegment",
    "FieldNotFoundError",
    "LiteralSegment",
    "LoopSegment",
    "MalformedTemplateError",
    "ReferenceKindError",
    "ScopeStack",
    "Segment",
    "SubstitutionSegment",
    "Template",
    "UnboundReferenceError",
    "expand",
    "expand_template",
    "parse_template",
)
