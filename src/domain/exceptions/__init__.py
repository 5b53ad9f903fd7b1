from .datagen import DatagenError, InvalidGeneratorConfig, InvalidWriteOffset

__all__ = [
    "DatagenError",
    "InvalidGeneratorConfig",
    "InvalidWriteOffset",
]
