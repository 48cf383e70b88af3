from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from libmetacode.macros.registry import MacrosRegistry
from libmetacode.tables.registry import TablesRegistry

if TYPE_CHECKING:
    from collections import deque
    from pathlib import Path

    from libmetacode.config import SyntaxConfig

    from .lines import SourceLine


class BlockState(Enum):
    OUTSIDE = auto()

    # Between `#metacode` and `#metagen`
    DIRECTIVES = auto()

    # Between `#metagen` and `#metaend`, stale output that will be replaced
    GENERATED = auto()


@dataclass(frozen=False)
class TranslationUnitState:
    """State for single generation pass over an file which only required for internal usages."""

    path: Path
    config: SyntaxConfig

    # Lines that are not yet consumed
    lines: deque[SourceLine]

    macros: MacrosRegistry = field(default_factory=MacrosRegistry)
    tables: TablesRegistry = field(default_factory=TablesRegistry)

    # Resulting text of an file
    output: list[str] = field(default_factory=list)

    block: BlockState = BlockState.OUTSIDE

    # Markers that opened current block, for error reporting
    block_opened_by: SourceLine | None = None

    # Outputs of invocations within current directive block, in order of invocations
    expansions: list[str] = field(default_factory=list)

    def emit(self, line: SourceLine) -> None:
        """Preserve given line as-is in resulting text."""
        self.output.append(line.raw)
