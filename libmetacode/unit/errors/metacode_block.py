from libmetacode.location import SourceLocation
from libmetacode.unit.exceptions import TranslationUnitError


class MetacodeBlockError(TranslationUnitError):
    def __init__(self, location: SourceLocation, line: str, reason: str) -> None:
        self.location = location
        self.line = line
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Invalid directive block structure at {self.location}!

    {self.line.strip()}

{self.reason}
Directive blocks are `#metacode` (definitions and invocations), `#metagen` (generated output) and `#metaend`.

{self.generic_error_name}"""
