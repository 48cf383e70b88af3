from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from libmetacode.metacode import process_input_file

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libmetacode.config import SyntaxConfig
    from libmetacode.metacode import GenerationResult


def process_input_files_threaded(
    paths: Sequence[Path],
    *,
    config: SyntaxConfig,
    max_thread_workers: int,
) -> list[GenerationResult]:
    """Regenerate given files, concurrently if allowed (files are independent of each other).

    Results are in same order as given paths, first error is propagated.
    """

    def process_single_file(path: Path) -> GenerationResult:
        return process_input_file(path, config)

    max_workers = max(1, min(len(paths), max_thread_workers))

    if max_workers <= 1:
        return [process_single_file(path) for path in paths]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(process_single_file, path) for path in paths]

        return [future.result() for future in futures]
