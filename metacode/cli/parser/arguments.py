from dataclasses import dataclass
from pathlib import Path

from libmetacode.config import SyntaxConfig


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Metacode toolchain process."""

    source_filepaths: list[Path]

    # Goals
    version: bool
    preprocess_only: bool
    check: bool
    watch: bool

    watch_interval_seconds: float

    syntax: SyntaxConfig

    max_thread_workers: int

    verbose: bool
    cli_debug_user_friendly_errors: bool
