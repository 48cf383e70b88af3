from libmetacode.tables.errors import TableRedefinedError

from .table import Table


class TablesRegistry(dict[str, Table]):
    """Mapping of tables defined within single generation pass."""

    def define(self, table: Table) -> Table:
        """Register given table, which must not be defined before."""
        if original := self.get(table.name):
            raise TableRedefinedError(
                name=table.name,
                redefined=table.location,
                original=original.location,
            )
        self.__setitem__(table.name, table)
        return table
