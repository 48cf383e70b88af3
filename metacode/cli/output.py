from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

ANSI_RESET = "\033[0m"
LEVEL_TO_ANSI_COLOR: dict[MESSAGE_LEVEL, str] = {
    "INFO": "\033[36m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}


def cli_message(level: MESSAGE_LEVEL, text: str, *, verbose: bool = True) -> None:
    """Emit toolchain message into stderr, info messages are emitted only when verbose."""
    if level == "INFO" and not verbose:
        return

    prefix = f"[{level}]"
    if sys.stderr.isatty():
        prefix = f"{LEVEL_TO_ANSI_COLOR[level]}{prefix}{ANSI_RESET}"
    print(prefix, text, file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and exit abnormally."""
    cli_message("ERROR", text)
    sys.exit(1)
