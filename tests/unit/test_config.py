from __future__ import annotations

import pytest

from src.adapters.config import DatagenRuntimeConfig


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATAGEN_SEED", "DATAGEN_MAX_SAMPLES", "DATAGEN_REVEAL_ERRORS"):
        monkeypatch.delenv(name, raising=False)

    cfg = DatagenRuntimeConfig.from_env()

    assert cfg == DatagenRuntimeConfig(seed=0, max_samples=10_000, reveal_errors=False)


def test_reads_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATAGEN_SEED", " 42 ")
    monkeypatch.setenv("DATAGEN_MAX_SAMPLES", "50")
    monkeypatch.setenv("DATAGEN_REVEAL_ERRORS", "yes")

    cfg = DatagenRuntimeConfig.from_env()

    assert cfg.seed == 42
    assert cfg.max_samples == 50
    assert cfg.reveal_errors is True


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DATAGEN_SEED", "abc"),
        ("DATAGEN_SEED", "-1"),
        ("DATAGEN_MAX_SAMPLES", "0"),
    ],
)
def test_rejects_bad_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError):
        DatagenRuntimeConfig.from_env()
