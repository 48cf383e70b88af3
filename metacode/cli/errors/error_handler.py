import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libmetacode.exceptions import MetacodeError
from metacode.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_metacode_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit Metacode internal errors."""
    try:
        yield
    except MetacodeError as me:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(me))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except OSError as oe:
        if not debug_user_friendly_errors:
            raise
        return cli_fatal_abort(f"Unable to access file `{oe.filename}`: {oe.strerror}")
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
