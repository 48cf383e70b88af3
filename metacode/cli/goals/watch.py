from __future__ import annotations

import time
from typing import TYPE_CHECKING, NoReturn

from libmetacode.exceptions import MetacodeError
from libmetacode.metacode import process_input_file
from metacode.cli.goals.inject import cli_inject_generation_result
from metacode.cli.output import cli_message

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from metacode.cli.parser.arguments import CLIArguments


def cli_perform_watch_goal(args: CLIArguments) -> NoReturn:
    """Perform watch goal that regenerates files each time they are modified, until interrupted."""
    for path in args.source_filepaths:
        cli_watch_regenerate_file(path, args)

    modification_times = get_modification_times(args.source_filepaths)
    cli_message("INFO", f"Watching {len(modification_times)} file(s) for changes...")

    while True:
        time.sleep(args.watch_interval_seconds)

        current = get_modification_times(args.source_filepaths)
        for path in find_modified_files(modification_times, current):
            cli_message(
                "INFO",
                f"File changed: `{path}`, regenerating...",
                verbose=args.verbose,
            )
            cli_watch_regenerate_file(path, args)

        # Writing regenerated output modifies file itself, which must not trigger next regeneration
        modification_times = get_modification_times(args.source_filepaths)


def cli_watch_regenerate_file(path: Path, args: CLIArguments) -> None:
    """Regenerate single file, errors are reported without stopping the watcher."""
    try:
        result = process_input_file(path, args.syntax)
    except MetacodeError as me:
        if not args.cli_debug_user_friendly_errors:
            raise
        cli_message("ERROR", repr(me))
        return
    cli_inject_generation_result(result, verbose=args.verbose)


def get_modification_times(paths: Iterable[Path]) -> dict[Path, int]:
    """Get modification time of each existing file (removed files are not watched)."""
    return {path: path.stat().st_mtime_ns for path in paths if path.is_file()}


def find_modified_files(
    previous: Mapping[Path, int],
    current: Mapping[Path, int],
) -> list[Path]:
    return [
        path
        for path, modified_at in current.items()
        if previous.get(path) != modified_at
    ]
