from __future__ import annotations

import logging

import pytest

from mentalitty.config import LOG_LEVEL_ENV, SEED_ENV, GameConfig
from mentalitty.logging_utils import configure_logging


def test_defaults_from_empty_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SEED_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    cfg = GameConfig.from_env()

    assert cfg.seed is None
    assert cfg.log_level == "WARNING"
    assert cfg.tick_interval_s == pytest.approx(1.0)
    assert cfg.frame_interval_s == pytest.approx(1.0 / 60.0)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEED_ENV, " 42 ")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    cfg = GameConfig.from_env()

    assert cfg.seed == 42
    assert cfg.log_level == "DEBUG"


def test_bad_seed_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEED_ENV, "abc")
    with pytest.raises(ValueError):
        GameConfig.from_env()


@pytest.mark.parametrize("field", ["tick_interval_s", "frame_interval_s"])
def test_intervals_must_be_positive(field: str) -> None:
    with pytest.raises(ValueError):
        GameConfig(**{field: 0.0})


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    old_level = root.level
    try:
        configure_logging(level="info")
        assert root.level == logging.INFO
    finally:
        root.setLevel(old_level)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging(level="chatty")
