from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from libmetacode.location import SourceLocation


@dataclass(frozen=True)
class Row:
    """Single record within an table, addressable by column name."""

    # Column name to cell value, same set of keys for each row of an table
    cells: Mapping[str, str]

    # Where that row is defined (data line within table definition)
    location: SourceLocation

    def __contains__(self, column: str) -> bool:
        return column in self.cells

    def __getitem__(self, column: str) -> str:
        return self.cells[column]


@dataclass(frozen=True)
class Table:
    """Named ordered collection of rows sharing an uniform column schema.

    Definition example (inside an directive block):
        `#table T_CAT_BREEDS`
        `  k          |`
        `  Persian    |`
        `  MaineCoon  |`

    Order of rows is significant as it determines order of loop emission.
    """

    name: str

    # Reference to table definition (e.g `#table` directive)
    location: SourceLocation

    columns: tuple[str, ...]
    rows: tuple[Row, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)
