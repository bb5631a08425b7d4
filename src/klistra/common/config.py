"""Storage configuration and the file loader that produces it.

Loads settings from ``~/.config/klistra/config.toml`` (or a path given on
the command line). YAML files are accepted as well. Credentials missing
from the file fall back to environment variables.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, ValidationError

from .errors import ConfigurationInvalid, ConfigurationNotFound

# === Paths ===
CONFIG_DIR_NAME = "klistra"
CONFIG_FILE_NAME = "config.toml"

# Environment fallbacks for the credential pair
ACCESS_KEY_ENV = "KLISTRA_ACCESS_KEY_ID"
SECRET_KEY_ENV = "KLISTRA_SECRET_ACCESS_KEY"


class StorageConfig(BaseModel):
    """Object storage settings for one invocation."""
    model_config = ConfigDict(frozen=True)

    domain: str
    bucket: str
    region: str
    prefix: str
    access_key_id: str
    secret_access_key: SecretStr


class AppConfig(BaseModel):
    """Top-level configuration file shape: a single ``[s3]`` table."""
    model_config = ConfigDict(frozen=True)

    s3: StorageConfig


def default_config_path() -> Path:
    """Return ``$HOME/.config/klistra/config.toml``."""
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_raw(path: Path) -> Any:
    """Parse the file by extension. TOML unless it ends in .yaml/.yml."""
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise ConfigurationInvalid(f"Could not parse config file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationInvalid(f"Could not read config file {path}: {e}") from e


def _apply_env_credentials(data: dict) -> dict:
    """Fill missing credentials from the environment."""
    s3 = data.get("s3")
    if not isinstance(s3, dict):
        return data
    s3 = dict(s3)
    for field_name, env_name in (
        ("access_key_id", ACCESS_KEY_ENV),
        ("secret_access_key", SECRET_KEY_ENV),
    ):
        if field_name not in s3 and os.getenv(env_name):
            s3[field_name] = os.environ[env_name]
    return {**data, "s3": s3}


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


def parse_config(data: Any, source: str = "<config>") -> AppConfig:
    """Validate already-parsed key/value data into an ``AppConfig``.

    Raises:
        ConfigurationInvalid: a field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise ConfigurationInvalid(
            f"Invalid config in {source}: expected a table of settings"
        )
    try:
        return AppConfig.model_validate(_apply_env_credentials(data))
    except ValidationError as e:
        raise ConfigurationInvalid(
            f"Invalid config in {source}: {_describe_validation_error(e)}"
        ) from e


def load_config(path: Path | None = None) -> AppConfig:
    """Load and validate the configuration file.

    Args:
        path: Explicit config path. Defaults to ``default_config_path()``.

    Raises:
        ConfigurationNotFound: the file does not exist.
        ConfigurationInvalid: the file cannot be parsed or validated.
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        raise ConfigurationNotFound(f"Config file not found at {config_path}")
    return parse_config(_read_raw(config_path), source=str(config_path))
