from .metacode_block import MetacodeBlockError

__all__ = ["MetacodeBlockError"]
