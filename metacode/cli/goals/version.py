import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from metacode.cli.parser.arguments import CLIArguments

DISTRIBUTION_NAME = "metacode"


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Metacode toolchain]")
    print(f"\tVersion: {get_toolchain_version()}")
    print("Syntax:")
    print(f"\tComment prefix: {args.syntax.comment_prefix}")
    print(f"\tBody indent: {args.syntax.body_indent}")
    print(f"\tTable cell delimiter: {args.syntax.table_cell_delimiter}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def get_toolchain_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "(not installed)"
