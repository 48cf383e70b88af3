from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from libmetacode.config import SyntaxConfig, build_syntax_config
from metacode.cli.output import cli_fatal_abort
from metacode.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    source_filepaths = _process_source_filepaths(args)
    syntax = _process_syntax_config(args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        preprocess_only=bool(args.preprocess_only),
        check=bool(args.check),
        watch=bool(args.watch),
        # Rest of these are mostly goal-specific
        source_filepaths=source_filepaths,
        watch_interval_seconds=_process_watch_interval(args),
        syntax=syntax,
        max_thread_workers=_process_max_thread_workers(args),
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    if sum([args.version, args.preprocess_only, args.check, args.watch]) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _process_source_filepaths(args: Namespace) -> list[Path]:
    """Process input source files as paths and validate it."""
    paths = [Path(f) for f in args.source_files]
    if args.version:
        return paths

    if len(paths) == 0:
        return cli_fatal_abort("Expected source files to process!")

    if any(not p.is_file() for p in paths):
        missing = ", ".join(f"`{p}`" for p in paths if not p.is_file())
        return cli_fatal_abort(
            text=f"Input source file(s) {missing} is not exists, aborting as safe mechanism.",
        )

    # Same file given twice would be processed (and written) concurrently
    return list(dict.fromkeys(paths))


def _process_syntax_config(args: Namespace) -> SyntaxConfig:
    comment_prefix = str(args.comment_prefix)
    if not comment_prefix.strip() or comment_prefix != comment_prefix.strip():
        return cli_fatal_abort(
            "Comment prefix must be non-empty and must not contain surrounding whitespace!",
        )

    if args.body_indent < 0:
        return cli_fatal_abort("Body indent must not be negative!")

    return build_syntax_config(
        comment_prefix=comment_prefix,
        body_indent=int(args.body_indent),
    )


def _process_watch_interval(args: Namespace) -> float:
    if args.watch_interval <= 0:
        return cli_fatal_abort("Watch interval must be positive!")
    return float(args.watch_interval)


def _process_max_thread_workers(args: Namespace) -> int:
    if args.max_thread_workers < 1:
        return cli_fatal_abort("Amount of jobs must be at least 1!")
    return int(args.max_thread_workers)
