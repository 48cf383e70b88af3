import argparse
from argparse import ArgumentParser

from libmetacode.config import DEFAULT_BODY_INDENT, DEFAULT_COMMENT_PREFIX

DEFAULT_WATCH_INTERVAL_SECONDS = 0.5


def add_goals_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with goal options (what to do with files) into given parser."""
    group = parser.add_argument_group(
        "Goals",
        "By default generated output is injected into given files in place",
    )
    group.add_argument(
        "--stdout",
        "-E",
        dest="preprocess_only",
        default=False,
        action="store_true",
        help="If passed will emit regenerated text of an source into stdout instead of writing it",
    )
    group.add_argument(
        "--check",
        default=False,
        action="store_true",
        help="If passed will not write anything and exit abnormally if any file has stale generated output",
    )
    group.add_argument(
        "--watch",
        "-w",
        default=False,
        action="store_true",
        help="If passed will keep watching files for modifications and regenerate them",
    )
    group.add_argument(
        "--watch-interval",
        dest="watch_interval",
        type=float,
        default=DEFAULT_WATCH_INTERVAL_SECONDS,
        required=False,
        help=f"Interval (in seconds) between checks for modification when watching (defaults to {DEFAULT_WATCH_INTERVAL_SECONDS})",
    )


def add_syntax_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with directive syntax options into given parser."""
    group = parser.add_argument_group("Syntax", "Directive blocks syntax within source files")
    group.add_argument(
        "--comment-prefix",
        "-c",
        type=str,
        default=DEFAULT_COMMENT_PREFIX,
        required=False,
        help=f"Line comment of an host language which begins each directive line (defaults to `{DEFAULT_COMMENT_PREFIX}`)",
    )
    group.add_argument(
        "--body-indent",
        type=int,
        default=DEFAULT_BODY_INDENT,
        required=False,
        help=f"Indentation (in spaces) of macro and table bodies after comment prefix and space (defaults to {DEFAULT_BODY_INDENT})",
    )


def add_performance_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with performance options into given parser."""
    group = parser.add_argument_group("Performance")
    group.add_argument(
        "--jobs",
        "-j",
        dest="max_thread_workers",
        type=int,
        default=1,
        required=False,
        help="Maximum amount of threads to process several files concurrently (defaults to 1)",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from toolchain.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
