from pathlib import Path

import pytest

from libmetacode.config import SyntaxConfig
from libmetacode.unit import LineKind, classify_source_line, iterate_source_lines

PATH = Path("test.c")
CONFIG = SyntaxConfig()


@pytest.mark.parametrize(
    ("raw", "kind", "content"),
    [
        ("int x;\n", LineKind.CODE, "int x;"),
        ("\n", LineKind.CODE, ""),
        ("  // indented comment\n", LineKind.CODE, "  // indented comment"),
        ("//\n", LineKind.BLANK, ""),
        ("//   \t\n", LineKind.BLANK, ""),
        ("// #metacode\n", LineKind.METACODE, ""),
        ("//#metagen\n", LineKind.METAGEN, ""),
        ("//  #metaend  \r\n", LineKind.METAEND, ""),
        ("// #macro ENUM(name, t)\n", LineKind.MACRO, "ENUM(name, t)"),
        ("// #macro\n", LineKind.MACRO, ""),
        ("// #table T_CAT_BREEDS\n", LineKind.TABLE, "T_CAT_BREEDS"),
        ("//   {{name}}_{{r.k}},\n", LineKind.BODY, "{{name}}_{{r.k}},"),
        ("//     nested\n", LineKind.BODY, "  nested"),
        ("// ENUM(CatBreed, T)\n", LineKind.INVOCATION, "ENUM(CatBreed, T)"),
        ("// #include <x.h>\n", LineKind.UNKNOWN_DIRECTIVE, "#include <x.h>"),
        ("// #metacode extra\n", LineKind.UNKNOWN_DIRECTIVE, "#metacode extra"),
    ],
)
def test_source_line_classify(raw: str, kind: LineKind, content: str) -> None:
    line = classify_source_line(raw, 0, PATH, CONFIG)
    assert line.kind == kind
    assert line.content == content
    assert line.raw == raw


def test_source_line_text_without_terminator() -> None:
    line = classify_source_line("// #metagen\r\n", 0, PATH, CONFIG)
    assert line.text == "// #metagen"


def test_source_line_locations() -> None:
    text = "int x;\n// #macro A(x)\n//   {{x}}\n"
    lines = list(iterate_source_lines(text, PATH, CONFIG))
    assert [line.kind for line in lines] == [LineKind.CODE, LineKind.MACRO, LineKind.BODY]
    assert repr(lines[1].location) == "'test.c:2:4'"
    assert repr(lines[2].location) == "'test.c:3:6'"


def test_source_line_body_indent() -> None:
    config = SyntaxConfig(comment_prefix="--", body_indent=4)
    assert classify_source_line("--     x\n", 0, PATH, config).kind == LineKind.BODY
    assert classify_source_line("--   x\n", 0, PATH, config).kind == LineKind.INVOCATION


def test_source_line_only_line_feed_ends_line() -> None:
    text = "int a;\f\vint b;\x1c\u2028\r\n// #metagen\nno terminator"
    lines = list(iterate_source_lines(text, PATH, CONFIG))
    assert [line.raw for line in lines] == ["int a;\f\vint b;\x1c\u2028\r\n", "// #metagen\n", "no terminator"]
    assert lines[1].kind == LineKind.METAGEN
    assert lines[1].location.line_number == 1
