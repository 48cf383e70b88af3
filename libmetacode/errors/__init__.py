from .source_file_encoding import SourceFileEncodingError

__all__ = ["SourceFileEncodingError"]
