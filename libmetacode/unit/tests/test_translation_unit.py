from pathlib import Path

import pytest

from libmetacode.config import SyntaxConfig
from libmetacode.macros import (
    MacroRedefinedError,
    MalformedDirectiveError,
    UnknownMacroError,
)
from libmetacode.tables import MalformedTableError, TableRedefinedError
from libmetacode.template import MalformedTemplateError
from libmetacode.unit import MetacodeBlockError, compile_translation_unit, has_metacode_block

PATH = Path("breeds.c")

CAT_BREEDS_DIRECTIVES = [
    "#include <stdio.h>",
    "",
    "// #metacode",
    "// #table T_CAT_BREEDS",
    "//   k |",
    "//   Persian |",
    "//   MaineCoon |",
    "//   Siamese |",
    "//   Bengal |",
    "//",
    "// #macro ENUM(name, t)",
    "//   // {{name}}.h",
    "//   typedef enum",
    "//   {",
    "//   {{~#for r,_i of t~}}",
    "//     {{name}}_{{r.k}},",
    "//   {{~/for~}}",
    "//     {{name}}__COUNT",
    "//   } {{name}};",
    "//",
    "//   extern char* {{name}}__STRINGS[{{#t}}];",
    "//",
    "//   // {{name}}.c",
    "//   char* {{name}}__STRINGS[{{#t}}] =",
    "//   {",
    "//   {{~#for r of t~}}",
    '//     "{{r.k}}",',
    "//   {{~/for~}}",
    "//   };",
    "//",
    "// ENUM(CatBreed, T_CAT_BREEDS)",
    "// #metagen",
]

CAT_BREEDS_GENERATED = [
    "// CatBreed.h",
    "typedef enum",
    "{",
    "  CatBreed_Persian,",
    "  CatBreed_MaineCoon,",
    "  CatBreed_Siamese,",
    "  CatBreed_Bengal,",
    "  CatBreed__COUNT",
    "} CatBreed;",
    "",
    "extern char* CatBreed__STRINGS[4];",
    "",
    "// CatBreed.c",
    "char* CatBreed__STRINGS[4] =",
    "{",
    '  "Persian",',
    '  "MaineCoon",',
    '  "Siamese",',
    '  "Bengal",',
    "};",
]

CAT_BREEDS_TRAILER = [
    "// #metaend",
    "",
    "int main(void) { return 0; }",
]


def test_translation_unit_cat_breeds() -> None:
    text = _source(*CAT_BREEDS_DIRECTIVES, "stale output", *CAT_BREEDS_TRAILER)
    expected = _source(*CAT_BREEDS_DIRECTIVES, *CAT_BREEDS_GENERATED, *CAT_BREEDS_TRAILER)
    assert compile_translation_unit(text, PATH) == expected


def test_translation_unit_is_idempotent() -> None:
    text = _source(*CAT_BREEDS_DIRECTIVES, *CAT_BREEDS_TRAILER)
    generated = compile_translation_unit(text, PATH)
    assert generated != text
    assert compile_translation_unit(generated, PATH) == generated


def test_translation_unit_preserves_crlf() -> None:
    text = "\r\n".join([*CAT_BREEDS_DIRECTIVES, *CAT_BREEDS_TRAILER]) + "\r\n"
    expected = "\r\n".join([*CAT_BREEDS_DIRECTIVES, *CAT_BREEDS_GENERATED, *CAT_BREEDS_TRAILER]) + "\r\n"
    assert compile_translation_unit(text, PATH) == expected


def test_translation_unit_without_blocks_is_untouched() -> None:
    text = "int x;\n// just a comment\n\n"
    assert not has_metacode_block(text)
    assert compile_translation_unit(text, PATH) == text


def test_translation_unit_has_metacode_block() -> None:
    assert has_metacode_block("x\n// #metacode\n")
    assert has_metacode_block("//#metacode\r\n")
    assert not has_metacode_block("// #metacode is described in docs\n")
    assert not has_metacode_block("# #metacode\n")
    assert has_metacode_block("# #metacode\n", SyntaxConfig(comment_prefix="#"))


def test_translation_unit_custom_comment_prefix() -> None:
    text = _source(
        "# #metacode",
        "# #table T",
        "#   k",
        "#   a",
        "#   b",
        "# #macro CONSTANTS(t)",
        "#   {{#for r,i of t}}{{r.k}} = {{i}}",
        "#   {{/for~}}",
        "# CONSTANTS(T)",
        "# #metagen",
        "# #metaend",
    )
    expected = text.replace("# #metaend", "a = 0\nb = 1\n# #metaend")
    config = SyntaxConfig(comment_prefix="#")
    assert compile_translation_unit(text, Path("constants.py"), config) == expected


def test_translation_unit_multiple_invocations_are_concatenated() -> None:
    text = _source(
        *_definitions(),
        "// GREET(World)",
        "// GREET(Cats)",
        "// #metagen",
        "// #metaend",
    )
    expected = text.replace("// #metaend", "hello World\nhello Cats\n// #metaend")
    assert compile_translation_unit(text, PATH) == expected


def test_translation_unit_definitions_visible_in_later_blocks() -> None:
    text = _source(
        *_definitions(),
        "",
        "int x;",
        "",
        "// #metacode",
        "// LIST(T)",
        "// #metagen",
        "old",
        "// #metaend",
    )
    expected = text.replace("old\n", "a;b;\n")
    assert compile_translation_unit(text, PATH) == expected


def test_translation_unit_consecutive_metacode_blocks() -> None:
    text = _source(
        "// #metacode",
        "// #table T",
        "//   k",
        "//   a",
        "// #metacode",
        "// #macro ONE(t)",
        "//   {{#t}}",
        "// ONE(T)",
        "// #metagen",
        "// #metaend",
    )
    expected = text.replace("// #metaend", "1\n// #metaend")
    assert compile_translation_unit(text, PATH) == expected


def test_translation_unit_empty_generated_region() -> None:
    text = _source(*_definitions(), "// #metagen", "stale", "// #metaend")
    expected = _source(*_definitions(), "// #metagen", "// #metaend")
    assert compile_translation_unit(text, PATH) == expected


def test_translation_unit_blank_lines_inside_body() -> None:
    text = _source(
        "// #metacode",
        "// #macro PAIR(a)",
        "//   {{a}}",
        "//",
        "//   {{a}}",
        "//",
        "//",
        "// PAIR(x)",
        "// #metagen",
        "// #metaend",
    )
    expected = text.replace("// #metaend", "x\n\nx\n// #metaend")
    assert compile_translation_unit(text, PATH) == expected


@pytest.mark.parametrize(
    ("lines", "error_line"),
    [
        (["// #metagen", "// #metaend"], 0),
        (["// #metaend"], 0),
        (["// #metacode", "// #metaend"], 1),
        (["// #metacode", "// #metagen", "// #metacode"], 2),
        (["// #metacode", "// #metagen", "// #metagen"], 2),
        (["// #metacode", "// #metagen", "generated"], 1),
        (["// #metacode", "//   stray body"], 1),
    ],
)
def test_translation_unit_block_structure_errors(lines: list[str], error_line: int) -> None:
    with pytest.raises(MetacodeBlockError) as e:
        compile_translation_unit(_source(*lines), PATH)
    assert e.value.location.line_number == error_line
    assert "[metacode-block-error]" in repr(e.value)


def test_translation_unit_form_feed_keeps_line_numbers() -> None:
    text = _source("int a;\f", "\f", "// #metagen")
    with pytest.raises(MetacodeBlockError) as e:
        compile_translation_unit(text, PATH)
    assert e.value.location.line_number == 2


def test_translation_unit_code_inside_block_with_invocations() -> None:
    text = _source(*_definitions(), "// GREET(x)", "int x;", "// #metagen", "// #metaend")
    with pytest.raises(MetacodeBlockError) as e:
        compile_translation_unit(text, PATH)
    assert e.value.line == "int x;"


def test_translation_unit_block_with_invocations_never_generated() -> None:
    text = _source(*_definitions(), "// GREET(x)")
    with pytest.raises(MetacodeBlockError) as e:
        compile_translation_unit(text, PATH)
    assert e.value.location.line_number == 0


def test_translation_unit_definitions_only_block_at_end_of_file() -> None:
    text = _source(*_definitions())
    assert compile_translation_unit(text, PATH) == text


@pytest.mark.parametrize(
    "lines",
    [
        ["// #metacode", "// #include <x.h>"],
        ["// #metacode", "// #macro"],
        ["// #metacode", "// #macro A(x)"],
        ["// #metacode", "// #macro A(x", "//   {{x}}"],
        ["// #metacode", "// #table"],
        ["// #metacode", "// #table T U"],
        ["// #metacode", "// not an invocation"],
    ],
)
def test_translation_unit_malformed_directives(lines: list[str]) -> None:
    with pytest.raises(MalformedDirectiveError) as e:
        compile_translation_unit(_source(*lines), PATH)
    assert e.value.location.line_number == 1


def test_translation_unit_table_without_body() -> None:
    with pytest.raises(MalformedTableError):
        compile_translation_unit(_source("// #metacode", "// #table T", "// #metacode"), PATH)


def test_translation_unit_table_error_location() -> None:
    text = _source("// #metacode", "// #table T", "//   a | b", "//   1 | 2 | 3")
    with pytest.raises(MalformedTableError) as e:
        compile_translation_unit(text, PATH)
    assert repr(e.value.location) == "'breeds.c:4:6'"


def test_translation_unit_template_error_location() -> None:
    text = _source("// #metacode", "// #macro A(x)", "//   ok", "//     {{/for}}")
    with pytest.raises(MalformedTemplateError) as e:
        compile_translation_unit(text, PATH)
    assert "'breeds.c:4:8'" in repr(e.value)


def test_translation_unit_redefinitions() -> None:
    with pytest.raises(MacroRedefinedError):
        compile_translation_unit(
            _source(*_definitions(), "// #macro GREET(x)", "//   {{x}}"),
            PATH,
        )
    with pytest.raises(TableRedefinedError):
        compile_translation_unit(
            _source(*_definitions(), "// #table T", "//   k", "//   a"),
            PATH,
        )


def test_translation_unit_unknown_macro() -> None:
    text = _source(*_definitions(), "// MISSING(T)", "// #metagen", "// #metaend")
    with pytest.raises(UnknownMacroError) as e:
        compile_translation_unit(text, PATH)
    assert e.value.defined == ["GREET", "LIST"]


def _definitions() -> list[str]:
    return [
        "// #metacode",
        "// #table T",
        "//   k",
        "//   a",
        "//   b",
        "//",
        "// #macro GREET(who)",
        "//   hello {{who}}",
        "//",
        "// #macro LIST(t)",
        "//   {{~#for r of t}}{{r.k}};{{/for~}}",
        "//",
    ]


def _source(*lines: str) -> str:
    return "".join(f"{line}\n" for line in lines)
