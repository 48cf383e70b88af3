"""Metacode core entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libmetacode.io import read_source_file, write_source_file
from libmetacode.unit import compile_translation_unit, has_metacode_block

if TYPE_CHECKING:
    from pathlib import Path

    from libmetacode.config import SyntaxConfig


@dataclass(frozen=True)
class GenerationResult:
    """Result of single generation pass over an file."""

    path: Path

    original: str
    generated: str

    # File has no directive blocks so it was not processed at all
    skipped: bool = False

    @property
    def changed(self) -> bool:
        return self.original != self.generated


def process_input_file(
    path: Path,
    config: SyntaxConfig | None = None,
) -> GenerationResult:
    """Core entry for Metacode API.

    Regenerates output of all directive blocks of given file, does not write anything.
    Use `apply_generation_result` to write regenerated output back into file.
    """
    original = read_source_file(path)
    if not has_metacode_block(original, config):
        return GenerationResult(
            path=path,
            original=original,
            generated=original,
            skipped=True,
        )

    generated = compile_translation_unit(original, path, config)
    return GenerationResult(path=path, original=original, generated=generated)


def apply_generation_result(result: GenerationResult) -> bool:
    """Write regenerated output into file if it differs from current content.

    :returns written: Was file modified or not
    """
    if not result.changed:
        return False
    write_source_file(result.path, result.generated)
    return True
