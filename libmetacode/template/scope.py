from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, TypeAlias, assert_never

from libmetacode.tables.table import Row, Table

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

# Macro parameters are bound to text or tables, loop variables to rows and indices
Binding: TypeAlias = str | int | Row | Table


class ScopeStack:
    """Stack of nested lookup scopes, resolved innermost-first.

    Bottom scope is an binding environment of macro invocation,
    each loop iteration pushes its own scope with loop variables which shadows outer ones.
    """

    def __init__(self, environment: Mapping[str, Binding]) -> None:
        self._scopes: list[Mapping[str, Binding]] = [environment]

    @contextmanager
    def scope(self, bindings: Mapping[str, Binding]) -> Generator[None]:
        """Push scope with given bindings for lifetime of context."""
        self._scopes.append(bindings)
        try:
            yield
        finally:
            self._scopes.pop()

    def get(self, name: str) -> Binding | None:
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return None

    def names(self) -> list[str]:
        """All names visible from innermost scope."""
        return sorted({name for scope in self._scopes for name in scope})


def describe_binding(value: Binding) -> str:
    match value:
        case Table():
            return f"a table '{value.name}'"
        case Row():
            return "a row"
        case int():
            return "an index"
        case str():
            return "text"
        case _:
            assert_never(value)
