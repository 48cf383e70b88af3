from pathlib import Path

import pytest

from libmetacode.location import SourceLocation
from libmetacode.tables.errors import TableRedefinedError
from libmetacode.tables.parser import parse_table
from libmetacode.tables.registry import TablesRegistry
from libmetacode.tables.table import Table


def test_tables_registry_define() -> None:
    registry = TablesRegistry()
    table = registry.define(_table(line_number=0))
    assert registry["T"] is table


def test_tables_registry_redefinition() -> None:
    registry = TablesRegistry()
    registry.define(_table(line_number=0))

    with pytest.raises(TableRedefinedError) as e:
        registry.define(_table(line_number=7))
    assert e.value.original.line_number == 0
    assert e.value.redefined.line_number == 7


def _table(line_number: int) -> Table:
    location = SourceLocation.at_line(Path("test.c"), line_number)
    return parse_table("k\nvalue", name="T", location=location)
