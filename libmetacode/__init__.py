"""Metacode library.

Table-driven macro expansion for generating boilerplate code right inside source files.
"""

from .metacode import GenerationResult, apply_generation_result, process_input_file

__all__ = [
    "GenerationResult",
    "apply_generation_result",
    "process_input_file",
]
