"""Configuration manager — read/write TOML config, resolve output format."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from microdot_labels.config.constants import (
    CONFIG_FILE,
    DEFAULT_FORMAT,
    ENV_OUTPUT_FORMAT,
)
from microdot_labels.config.models import CLIConfig
from microdot_labels.errors import ConfigurationError

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Cannot read {self.config_path}: {exc}") from exc
        try:
            return CLIConfig(
                default_format=data.get("default_format", DEFAULT_FORMAT),
            )
        except ValidationError as exc:
            message = exc.errors()[0]["msg"]
            raise ConfigurationError(f"Invalid config {self.config_path}: {message}") from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {}
        if self.config.default_format != DEFAULT_FORMAT:
            data["default_format"] = self.config.default_format
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        temp.write_bytes(tomli_w.dumps(data).encode())
        temp.replace(self.config_path)

    def set_format(self, fmt: str) -> str:
        try:
            self._config = CLIConfig(default_format=fmt)
        except ValidationError as exc:
            raise ConfigurationError(exc.errors()[0]["msg"]) from exc
        self.save()
        return self.config.default_format

    def reset(self) -> bool:
        self._config = CLIConfig()
        if not self.config_path.exists():
            return False
        self.config_path.unlink()
        return True

    def resolve_format(self, fmt: str | None = None) -> str:
        """Resolve the output format.

        Precedence: CLI flag > env var > config file.
        """
        env_fmt = os.environ.get(ENV_OUTPUT_FORMAT)
        resolved = fmt or env_fmt or self.config.default_format
        try:
            return CLIConfig(default_format=resolved).default_format
        except ValidationError as exc:
            raise ConfigurationError(exc.errors()[0]["msg"]) from exc
