from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libmetacode.metacode import apply_generation_result
from metacode.cli.output import cli_message
from metacode.cli.threaded import process_input_files_threaded

if TYPE_CHECKING:
    from libmetacode.metacode import GenerationResult
    from metacode.cli.parser.arguments import CLIArguments


def cli_perform_inject_goal(args: CLIArguments) -> NoReturn:
    """Perform default goal that injects regenerated output into source files in place."""
    cli_message(
        level="INFO",
        text=f"Processing {len(args.source_filepaths)} input file(s)...",
        verbose=args.verbose,
    )
    results = process_input_files_threaded(
        args.source_filepaths,
        config=args.syntax,
        max_thread_workers=args.max_thread_workers,
    )

    for result in results:
        cli_inject_generation_result(result, verbose=args.verbose)
    return sys.exit(0)


def cli_inject_generation_result(result: GenerationResult, *, verbose: bool) -> None:
    """Write regenerated output into file and report about it."""
    if result.skipped:
        cli_message("WARNING", f"No metacode block found in `{result.path}`")
        return

    if not apply_generation_result(result):
        cli_message(
            "INFO",
            f"Generated output in `{result.path}` is up to date",
            verbose=verbose,
        )
        return

    cli_message("INFO", f"Generated output injected into `{result.path}`")
