from __future__ import annotations

import sys
from pathlib import Path

MODULE_INVOCATION_PROG = "python -m metacode"


def cli_get_executable_program(*, override: str | None = None) -> str:
    """Program name shown in usage, either console script name or module invocation."""
    if override:
        return override

    executable = Path(sys.argv[0]).name
    if executable == "__main__.py":
        return MODULE_INVOCATION_PROG
    return executable
