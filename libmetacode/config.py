from __future__ import annotations

from dataclasses import dataclass

from libmetacode.tables.parser import TABLE_CELL_DELIMITER

DEFAULT_COMMENT_PREFIX = "//"
DEFAULT_BODY_INDENT = 2


@dataclass(frozen=True)
class SyntaxConfig:
    """Configuration of directive block syntax within host source files."""

    # Line comment of an host language, all directive lines must begin with it
    comment_prefix: str = DEFAULT_COMMENT_PREFIX

    # Indentation (in spaces, after single space separator) of macro and table bodies
    body_indent: int = DEFAULT_BODY_INDENT

    table_cell_delimiter: str = TABLE_CELL_DELIMITER

    @property
    def body_prefix(self) -> str:
        """Text which begins each body line, right after comment prefix."""
        return " " * (1 + self.body_indent)


def build_syntax_config(
    *,
    comment_prefix: str | None = None,
    body_indent: int | None = None,
) -> SyntaxConfig:
    """Construct syntax config with defaults for everything that is not specified."""
    config = SyntaxConfig(
        comment_prefix=comment_prefix or DEFAULT_COMMENT_PREFIX,
        body_indent=DEFAULT_BODY_INDENT if body_indent is None else body_indent,
    )
    assert config.comment_prefix.strip(), "Comment prefix must not be blank"
    assert config.body_indent >= 0
    return config
