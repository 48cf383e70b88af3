from .field_not_found import FieldNotFoundError
from .malformed_template import MalformedTemplateError
from .reference_kind import ReferenceKindError
from .unbound_reference import UnboundReferenceError

__all__ = [
    "FieldNotFoundError",
    "MalformedTemplateError",
    "ReferenceKindError",
    "UnboundReferenceError",
]
