# Common utilities and shared modules
"""
Shared components:
- Error kinds
- Storage configuration (pydantic models + file loader)
- Logging configuration
"""

from .config import AppConfig, StorageConfig, default_config_path, load_config
from .errors import (
    ConfigurationInvalid,
    ConfigurationNotFound,
    KlistraError,
    LocalWriteFailed,
    RemoteUploadFailed,
    SourceUnreadable,
)
from .logging import setup_logging

__all__ = [
    "AppConfig",
    "StorageConfig",
    "default_config_path",
    "load_config",
    "ConfigurationInvalid",
    "ConfigurationNotFound",
    "KlistraError",
    "LocalWriteFailed",
    "RemoteUploadFailed",
    "SourceUnreadable",
    "setup_logging",
]
