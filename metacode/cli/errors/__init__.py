from .error_handler import cli_metacode_error_handler

__all__ = ["cli_metacode_error_handler"]
