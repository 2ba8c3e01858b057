"""Tests for chunk parse configuration."""

from __future__ import annotations

import pytest

from pngstego.chunk.config import MAX_LENGTH, ChunkCfg
from pngstego.exceptions import ConfigurationError, PngStegoError


def test_defaults() -> None:
    cfg = ChunkCfg()
    assert cfg.max_length == MAX_LENGTH == 2**31 - 1
    assert cfg.require_valid_type is False
    assert cfg.placeholder == "[data]"


def test_dict_roundtrip() -> None:
    cfg = ChunkCfg(max_length=1024, require_valid_type=True, placeholder="?")
    assert ChunkCfg.from_dict(cfg.to_dict()) == cfg
    assert ChunkCfg.from_dict(None) == ChunkCfg()


@pytest.mark.parametrize(
    "data",
    [
        {"max_length": -1},
        {"max_length": MAX_LENGTH + 1},
        {"max_length": "10"},
        {"max_length": True},
        {"require_valid_type": "yes"},
        {"placeholder": None},
    ],
)
def test_invalid_values(data) -> None:
    with pytest.raises(ConfigurationError):
        ChunkCfg.from_dict(data)


def test_from_dict_requires_mapping() -> None:
    with pytest.raises(ConfigurationError):
        ChunkCfg.from_dict([("max_length", 1)])  # type: ignore[arg-type]


def test_from_env() -> None:
    cfg = ChunkCfg.from_env(
        {"PNGSTEGO_MAX_CHUNK_LENGTH": "4096", "PNGSTEGO_REQUIRE_VALID_TYPE": "on"}
    )
    assert cfg.max_length == 4096
    assert cfg.require_valid_type is True
    assert ChunkCfg.from_env({}) == ChunkCfg()
    assert ChunkCfg.from_env({"PNGSTEGO_REQUIRE_VALID_TYPE": "0"}).require_valid_type is False


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("PNGSTEGO_MAX_CHUNK_LENGTH", "12")
    monkeypatch.delenv("PNGSTEGO_REQUIRE_VALID_TYPE", raising=False)
    assert ChunkCfg.from_env().max_length == 12


@pytest.mark.parametrize(
    "environ",
    [
        {"PNGSTEGO_MAX_CHUNK_LENGTH": "lots"},
        {"PNGSTEGO_MAX_CHUNK_LENGTH": str(2**31)},
        {"PNGSTEGO_REQUIRE_VALID_TYPE": "maybe"},
    ],
)
def test_from_env_rejects_bad_values(environ) -> None:
    with pytest.raises(PngStegoError):
        ChunkCfg.from_env(environ)
