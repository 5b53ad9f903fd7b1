from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from src.app.ports.output import IRandomSource


@dataclass(slots=True)
class Pcg64RandomSource(IRandomSource):
    """PCG64 bit generator from numpy, seeded once and advanced per draw.

    Not thread-safe: give each worker its own instance.
    """

    seed: int = 0

    _bit_generator: np.random.PCG64 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._bit_generator = np.random.PCG64(self.seed)

    def random(self) -> int:
        return int(self._bit_generator.random_raw())
