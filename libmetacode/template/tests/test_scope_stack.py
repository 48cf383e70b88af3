from libmetacode.template.scope import ScopeStack


def test_scope_stack_resolves_environment() -> None:
    scopes = ScopeStack({"name": "N"})
    assert scopes.get("name") == "N"
    assert scopes.get("missing") is None


def test_scope_stack_innermost_first() -> None:
    scopes = ScopeStack({"name": "outer"})
    with scopes.scope({"name": "inner"}):
        assert scopes.get("name") == "inner"
        with scopes.scope({"other": 1}):
            assert scopes.get("name") == "inner"
            assert scopes.get("other") == 1
        assert scopes.get("other") is None
    assert scopes.get("name") == "outer"


def test_scope_stack_pops_on_error() -> None:
    scopes = ScopeStack({})
    try:
        with scopes.scope({"i": 0}):
            raise ValueError
    except ValueError:
        pass
    assert scopes.get("i") is None


def test_scope_stack_names() -> None:
    scopes = ScopeStack({"b": "1"})
    with scopes.scope({"a": 0, "b": 1}):
        assert scopes.names() == ["a", "b"]
