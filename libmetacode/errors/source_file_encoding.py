from libmetacode.exceptions import MetacodeError
from libmetacode.location import SourceLocation


class SourceFileEncodingError(MetacodeError):
    def __init__(self, location: SourceLocation, encoding: str, reason: str) -> None:
        self.location = location
        self.encoding = encoding
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Source file is not valid {self.encoding} text at {self.location}!

Decoder failed with: {self.reason}
Source files must be saved as {self.encoding}, consider converting that file.

{self.generic_error_name}"""
