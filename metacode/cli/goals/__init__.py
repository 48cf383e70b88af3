"""Goals for CLI (e.g inject, check, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from metacode.cli.goals.check import cli_perform_check_goal
from metacode.cli.goals.inject import cli_perform_inject_goal
from metacode.cli.goals.preprocessor import cli_perform_preprocess_goal
from metacode.cli.goals.version import cli_perform_version_goal
from metacode.cli.goals.watch import cli_perform_watch_goal
from metacode.cli.output import cli_message
from metacode.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments, by default fall into inject goal."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        if args.preprocess_only:
            return cli_perform_preprocess_goal(args)

        if args.check:
            return cli_perform_check_goal(args)

        if args.watch:
            return cli_perform_watch_goal(args)

        return cli_perform_inject_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.2f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
