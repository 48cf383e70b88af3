from libmetacode.location import SourceLocation
from libmetacode.tables.parser import parse_table
from libmetacode.template.expander import expand_template
from libmetacode.template.lexer import ChunkType, tokenize_template
from libmetacode.template.parser import parse_template
from libmetacode.template.scope import Binding


def test_template_tokenize_chunks() -> None:
    chunks = tokenize_template("a {{~x~}} b", SourceLocation.toolchain())
    assert [chunk.type for chunk in chunks] == [
        ChunkType.TEXT,
        ChunkType.DIRECTIVE,
        ChunkType.TEXT,
    ]

    directive = chunks[1]
    assert directive.text == "x"
    assert directive.raw == "{{~x~}}"
    assert directive.trim_left
    assert directive.trim_right


def test_template_trim_loop_on_own_lines() -> None:
    text = "a\n  {{~#for r of t~}}\n  - {{r.k}}\n  {{~/for~}}\nb\n"
    assert _expand(text) == "a\n  - x\n  - y\nb\n"


def test_template_no_trim_preserves_whitespace() -> None:
    text = "a\n{{#for r of t}}\n- {{r.k}}\n{{/for}}\nb"
    assert _expand(text) == "a\n\n- x\n\n- y\n\nb"


def test_template_trim_left_only() -> None:
    assert _expand("value: \t {{~name}} ;") == "value:N ;"


def test_template_trim_left_keeps_line_break() -> None:
    assert _expand("value\n{{~name}}") == "value\nN"


def test_template_trim_right_indentation() -> None:
    assert _expand("{{name~}}   \ny") == "N\ny"


def test_template_trim_right_line_breaks() -> None:
    assert _expand("{{name~}}\n\ny") == "Ny"


def test_template_trim_does_not_touch_values() -> None:
    assert _expand(" {{~padded~}} ", padded="  value  ") == "  value  "


def test_template_trim_drops_whitespace_only_text() -> None:
    chunks = tokenize_template("{{a~}}\n{{~b}}", SourceLocation.toolchain())
    assert [chunk.type for chunk in chunks] == [
        ChunkType.DIRECTIVE,
        ChunkType.DIRECTIVE,
    ]


def _expand(text: str, **environment: Binding) -> str:
    table = parse_table("k\nx\ny", name="T", location=SourceLocation.toolchain())
    return expand_template(
        parse_template(text),
        {"t": table, "name": "N", **environment},
    )
