"""Translation unit: directive blocks within an source file and splicing of generated output."""

from .compiler import compile_translation_unit, has_metacode_block
from .errors import MetacodeBlockError
from .lines import LineKind, SourceLine, classify_source_line, iterate_source_lines

__all__ = (
    "LineKind",
    "MetacodeBlockError",
    "SourceLine",
    "classify_source_line",
    "compile_translation_unit",
    "has_metacode_block",
    "iterate_source_lines",
)
