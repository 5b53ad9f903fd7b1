from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from src.app.ports.output import IOutputBuffer, IRandomSource
from src.app.services.position_generator import (
    PositionGenerator,
    new_position_generator,
)
from src.domain.exceptions import InvalidGeneratorConfig
from src.domain.models import BoundingBox

OutputFormat = Literal["text", "bson"]


@dataclass(frozen=True, slots=True)
class SampleBatch:
    box: BoundingBox
    values: tuple[bytes, ...]


@dataclass(slots=True)
class PositionSamplingService:
    """Application service producing a batch of encoded positions.

    Each call builds a fresh buffer and random source, so batches with the
    same seed and corners are byte-identical.
    """

    buffer_factory: Callable[[], IOutputBuffer]
    random_source_factory: Callable[[int], IRandomSource]
    max_samples: int = 10_000

    def sample(
        self,
        *,
        count: int,
        seed: int,
        output_format: OutputFormat = "text",
        top_left: Sequence[float] | None = None,
        bottom_right: Sequence[float] | None = None,
    ) -> SampleBatch:
        if count < 1 or count > self.max_samples:
            raise InvalidGeneratorConfig(
                f"count must be between 1 and {self.max_samples}, got {count}"
            )

        buffer = self.buffer_factory()
        generator = new_position_generator(
            buffer,
            self.random_source_factory(seed),
            top_left=top_left,
            bottom_right=bottom_right,
        )
        encode = _encoder_for(generator, output_format)

        # Values are written back to back; record offsets to split them again.
        offsets = [len(buffer)]
        for _ in range(count):
            encode()
            offsets.append(len(buffer))

        data = buffer.bytes()
        values = tuple(data[a:b] for a, b in zip(offsets, offsets[1:]))
        return SampleBatch(box=generator.box, values=values)


def _encoder_for(
    generator: PositionGenerator, output_format: str
) -> Callable[[], None]:
    if output_format == "text":
        return generator.encode_value_as_string
    if output_format == "bson":
        return generator.encode_value
    raise InvalidGeneratorConfig(f"Unsupported output format: {output_format}")
