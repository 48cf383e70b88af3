from pathlib import Path

from libmetacode.errors import SourceFileEncodingError
from libmetacode.location import SourceLocation

SOURCE_FILE_ENCODING = "utf-8"


def read_source_file(path: Path) -> str:
    """Read whole source file, preserving its line terminators."""
    data = path.read_bytes()
    try:
        return data.decode(SOURCE_FILE_ENCODING)
    except UnicodeDecodeError as e:
        raise SourceFileEncodingError(
            location=_byte_offset_location(path, data, e.start),
            encoding=SOURCE_FILE_ENCODING,
            reason=e.reason,
        ) from e


def write_source_file(path: Path, text: str) -> None:
    """Write whole source file as-is (line terminators are not translated)."""
    with path.open("w", encoding=SOURCE_FILE_ENCODING, newline="") as f:
        f.write(text)


def _byte_offset_location(path: Path, data: bytes, offset: int) -> SourceLocation:
    # Column is in bytes, as text of that line cannot be decoded
    preceding = data[:offset]
    line_start = preceding.rfind(b"\n") + 1
    return SourceLocation(
        line_number=preceding.count(b"\n"),
        col_number=offset - line_start,
        filepath=path,
    )
