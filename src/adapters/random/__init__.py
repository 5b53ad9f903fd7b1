from .pcg64_random_source import Pcg64RandomSource

__all__ = ["Pcg64RandomSource"]
