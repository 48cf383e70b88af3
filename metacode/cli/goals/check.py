from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from metacode.cli.output import cli_message
from metacode.cli.threaded import process_input_files_threaded

if TYPE_CHECKING:
    from metacode.cli.parser.arguments import CLIArguments


def cli_perform_check_goal(args: CLIArguments) -> NoReturn:
    """Perform check goal that validates generated output of files is up to date (CI mostly)."""
    results = process_input_files_threaded(
        args.source_filepaths,
        config=args.syntax,
        max_thread_workers=args.max_thread_workers,
    )

    stale = [result for result in results if result.changed]
    for result in stale:
        cli_message("ERROR", f"Generated output in `{result.path}` is out of date")

    if stale:
        cli_message(
            "ERROR",
            f"{len(stale)} of {len(results)} file(s) must be regenerated, exiting abnormally (exit code 1)",
        )
        return sys.exit(1)

    cli_message(
        "INFO",
        f"All {len(results)} file(s) are up to date",
        verbose=args.verbose,
    )
    return sys.exit(0)
