"""Parse policy for chunk decoding."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..exceptions import ConfigurationError

MAX_LENGTH = (1 << 31) - 1
"""Largest payload length a chunk may declare."""

DEFAULT_PLACEHOLDER = "[data]"

ENV_MAX_LENGTH = "PNGSTEGO_MAX_CHUNK_LENGTH"
ENV_REQUIRE_VALID_TYPE = "PNGSTEGO_REQUIRE_VALID_TYPE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ChunkCfg:
    """Limits and checks applied when chunks are parsed or rendered."""

    max_length: int = MAX_LENGTH
    require_valid_type: bool = False
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ConfigurationError("'max_length' must be an integer")
        if not 0 <= self.max_length <= MAX_LENGTH:
            raise ConfigurationError(f"'max_length' must be between 0 and {MAX_LENGTH}")
        if not isinstance(self.require_valid_type, bool):
            raise ConfigurationError("'require_valid_type' must be a boolean")
        if not isinstance(self.placeholder, str):
            raise ConfigurationError("'placeholder' must be a string")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_length": self.max_length,
            "require_valid_type": self.require_valid_type,
            "placeholder": self.placeholder,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ChunkCfg":
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError("chunk configuration must be a mapping")
        return cls(
            max_length=data.get("max_length", MAX_LENGTH),
            require_valid_type=data.get("require_valid_type", False),
            placeholder=data.get("placeholder", DEFAULT_PLACEHOLDER),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ChunkCfg":
        """Build a configuration from ``PNGSTEGO_*`` environment variables."""

        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        raw_length = env.get(ENV_MAX_LENGTH)
        if raw_length is not None:
            try:
                data["max_length"] = int(raw_length)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_MAX_LENGTH} must be an integer, got {raw_length!r}"
                ) from None

        raw_flag = env.get(ENV_REQUIRE_VALID_TYPE)
        if raw_flag is not None:
            flag = raw_flag.strip().lower()
            if flag in _TRUTHY:
                data["require_valid_type"] = True
            elif flag in _FALSY:
                data["require_valid_type"] = False
            else:
                raise ConfigurationError(
                    f"{ENV_REQUIRE_VALID_TYPE} must be a boolean flag, got {raw_flag!r}"
                )

        return cls.from_dict(data)


DEFAULT_CFG = ChunkCfg()

__all__ = [
    "DEFAULT_CFG",
    "DEFAULT_PLACEHOLDER",
    "ENV_MAX_LENGTH",
    "ENV_REQUIRE_VALID_TYPE",
    "MAX_LENGTH",
    "ChunkCfg",
]
