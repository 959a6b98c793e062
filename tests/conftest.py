"""Shared fixtures for the CaesarKit test suite."""

from __future__ import annotations

import pytest

from shared.config import KitConfig
from caesar.core.engine import CaesarEngine

# Long enough for letter frequencies to look like English.
DICKENS = (
    "It was the best of times, it was the worst of times, it was the age "
    "of wisdom, it was the age of foolishness, it was the epoch of belief, "
    "it was the epoch of incredulity."
)

PANGRAM = "The quick brown fox jumps over the lazy dog"


@pytest.fixture
def dickens() -> str:
    return DICKENS


@pytest.fixture
def pangram() -> str:
    return PANGRAM


@pytest.fixture
def quiet_config() -> KitConfig:
    config = KitConfig()
    config.global_settings.log_level = "WARNING"
    return config


@pytest.fixture
def engine(quiet_config: KitConfig) -> CaesarEngine:
    return CaesarEngine(quiet_config)
