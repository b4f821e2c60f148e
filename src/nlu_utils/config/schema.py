"""Typed configuration schema and loader for the nlu_utils package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from nlu_utils.language import Language
from nlu_utils.utils.errors import ConfigError
from nlu_utils.utils.logging import get_logger, level_from_str

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging verbosity for the command line."""

    level: str
    level_env: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level_from_str(value)
        return value.strip().upper()


class OutputSettings(BaseModel):
    """Rendering defaults for command output."""

    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    language: str
    language_env: str
    logging: LoggingSettings
    output: OutputSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        return str(Language.parse(value))

    @property
    def language_tag(self) -> Language:
        return Language.parse(self.language)


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variables named by ``language_env`` and ``logging.level_env``.
    """

    with (
        importlib_resources.files("nlu_utils.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        overrides = _read_yaml(Path(path))
        merged = deep_merge_dicts(defaults, overrides)
        logger.debug("merged config overrides from %s", path)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    language_env = merged.get("language_env")
    if isinstance(language_env, str) and language_env in environ:
        merged = deep_merge_dicts(merged, {"language": environ[language_env]})
    logging_cfg = merged.get("logging")
    level_env = logging_cfg.get("level_env") if isinstance(logging_cfg, dict) else None
    if isinstance(level_env, str) and level_env in environ:
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env]}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "LoggingSettings",
    "OutputSettings",
    "deep_merge_dicts",
    "load_config",
]
