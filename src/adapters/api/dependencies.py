from __future__ import annotations

from src.adapters.buffer import DocumentBuffer
from src.adapters.config import DatagenRuntimeConfig
from src.adapters.random import Pcg64RandomSource
from src.app.services.position_sampling_service import PositionSamplingService


def get_runtime_config() -> DatagenRuntimeConfig:
    return DatagenRuntimeConfig.from_env()


def get_sampling_service() -> PositionSamplingService:
    cfg = get_runtime_config()
    return PositionSamplingService(
        buffer_factory=DocumentBuffer,
        random_source_factory=lambda seed: Pcg64RandomSource(seed=seed),
        max_samples=cfg.max_samples,
    )
