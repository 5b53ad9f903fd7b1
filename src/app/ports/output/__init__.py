from .output_buffer import IOutputBuffer
from .random_source import IRandomSource

__all__ = [
    "IOutputBuffer",
    "IRandomSource",
]
