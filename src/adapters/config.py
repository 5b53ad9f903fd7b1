from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class DatagenRuntimeConfig:
    seed: int
    max_samples: int
    reveal_errors: bool

    @staticmethod
    def from_env() -> "DatagenRuntimeConfig":
        """Read runtime settings.

        Env vars:
          - DATAGEN_SEED: seed used when a request does not carry one (default 0)
          - DATAGEN_MAX_SAMPLES: upper bound on values per request (default 10000)
          - DATAGEN_REVEAL_ERRORS: 1|true to return raw error messages from the API
        """

        seed = _env_int("DATAGEN_SEED", 0)
        if seed < 0:
            raise RuntimeError("DATAGEN_SEED must be non-negative")

        max_samples = _env_int("DATAGEN_MAX_SAMPLES", 10_000)
        if max_samples < 1:
            raise RuntimeError("DATAGEN_MAX_SAMPLES must be at least 1")

        return DatagenRuntimeConfig(
            seed=seed,
            max_samples=max_samples,
            reveal_errors=_env_bool("DATAGEN_REVEAL_ERRORS", False),
        )
