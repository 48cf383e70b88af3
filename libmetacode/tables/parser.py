from __future__ import annotations

from typing import TYPE_CHECKING

from libmetacode.tables.errors import MalformedTableError
from libmetacode.tables.table import Row, Table

if TYPE_CHECKING:
    from libmetacode.location import SourceLocation

TABLE_CELL_DELIMITER = "|"


def parse_table(
    text: str,
    *,
    name: str,
    location: SourceLocation,
    delimiter: str = TABLE_CELL_DELIMITER,
) -> Table:
    """Parse table definition body (header row and data rows) into an table.

    Each cell is trimmed from surrounding whitespace, blank lines are skipped.
    Columns with empty header cell are dropped (e.g trailing delimiter `k |`)

    :param location: Location of first line of given text
    """
    lines = [
        (row, line)
        for row, line in enumerate(text.split("\n"))
        if line.strip()
    ]
    if not lines:
        raise MalformedTableError(
            table_name=name,
            location=location,
            reason="Table has no header row (table definition is empty).",
        )

    (header_row, header_line), *data_lines = lines
    header = _split_cells(header_line, delimiter)
    columns = _validate_header(
        header,
        name=name,
        line=header_line,
        location=_line_location(location, header_row),
    )
    if not data_lines:
        raise MalformedTableError(
            table_name=name,
            location=_line_location(location, header_row),
            reason="Table has header but no data rows, expected at least one row.",
            line=header_line,
        )

    rows: list[Row] = []
    for row, line in data_lines:
        row_location = _line_location(location, row)
        cells = _split_cells(line, delimiter)
        if len(cells) != len(header):
            raise MalformedTableError(
                table_name=name,
                location=row_location,
                reason=f"Row has {len(cells)} cell(s) while header has {len(header)}.",
                line=line,
            )

        mapping = {
            column: cell for column, cell in zip(header, cells, strict=True) if column
        }
        rows.append(Row(cells=mapping, location=row_location))

    return Table(
        name=name,
        location=location,
        columns=columns,
        rows=tuple(rows),
    )


def _split_cells(line: str, delimiter: str) -> list[str]:
    return [cell.strip() for cell in line.split(delimiter)]


def _validate_header(
    header: list[str],
    *,
    name: str,
    line: str,
    location: SourceLocation,
) -> tuple[str, ...]:
    columns = tuple(column for column in header if column)
    if not columns:
        raise MalformedTableError(
            table_name=name,
            location=location,
            reason="Header row has no column names.",
            line=line,
        )

    seen: set[str] = set()
    for column in columns:
        if column in seen:
            raise MalformedTableError(
                table_name=name,
                location=location,
                reason=f"Column '{column}' is defined more than once.",
                line=line,
            )
        seen.add(column)
    return columns


def _line_location(location: SourceLocation, row: int) -> SourceLocation:
    if location.source != "file":
        return location
    return location.advance_by_text("\n" * row)
