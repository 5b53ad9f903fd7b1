class DatagenError(Exception):
    """Base exception for value generation failures."""


class InvalidWriteOffset(DatagenError):
    """Raised when a patch-back write targets bytes that were never written."""


class InvalidGeneratorConfig(DatagenError):
    """Raised when a generator config cannot be turned into a generator."""
