from argparse import ArgumentParser

from metacode.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Metacode Toolkit - CLI for regenerating table-driven macro output inside source files",
        usage=f"{prog} files... [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input source files with directive blocks (`#metacode` ... `#metagen` ... `#metaend`)",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_goals_group(parser)
    groups.add_syntax_group(parser)
    groups.add_performance_group(parser)
    groups.add_logging_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
