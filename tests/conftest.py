"""Shared fixtures for chat-input tests."""
from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from chat_input.config.loader import default_properties
from chat_input.config.properties import PropertyStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # no stray chat-input.yaml, CHAT_INPUT_* vars or cached store from another test
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("CHAT_INPUT_"):
            monkeypatch.delenv(name)
    default_properties.cache_clear()
    yield
    default_properties.cache_clear()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def properties() -> PropertyStore:
    return PropertyStore({
        "url": {"replicate": {"base": "https://replicate.test"}},
        "models": {
            "openai": {"chat": "gpt-4o-mini"},
            "replicate": {
                "llama": {
                    "13b": "13b-chat",
                    "70b": "70b-chat",
                    "13b-chat-version": "v13",
                    "70b-chat-version": "v70",
                },
            },
        },
    })
