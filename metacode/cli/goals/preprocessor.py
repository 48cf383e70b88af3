from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from metacode.cli.threaded import process_input_files_threaded

if TYPE_CHECKING:
    from metacode.cli.parser.arguments import CLIArguments


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess only goal that emits regenerated files into stdout without writing them."""
    assert args.preprocess_only, (
        "Cannot perform preprocessor goal with no preprocessor flag set!"
    )

    results = process_input_files_threaded(
        args.source_filepaths,
        config=args.syntax,
        max_thread_workers=args.max_thread_workers,
    )
    for result in results:
        sys.stdout.write(result.generated)

    return sys.exit(0)
