"""Shared test fixtures for klistra."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure the src layout is importable without installing
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from klistra.common.config import StorageConfig


SAMPLE_MARKDOWN = """# Weekend notes

Some *emphasis* and a [link](https://example.com).

| Name | Value |
|------|-------|
| a    | 1     |

```
x = 1 < 2
```
"""

SAMPLE_CONFIG_TOML = """[s3]
domain = "https://example.com"
bucket = "b"
region = "r"
prefix = "docs/"
access_key_id = "key-id"
secret_access_key = "very-secret"
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep operator credentials and handlers out of the tests."""
    monkeypatch.delenv("KLISTRA_ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("KLISTRA_SECRET_ACCESS_KEY", raising=False)
    yield
    logger = logging.getLogger("klistra")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def sample_markdown() -> str:
    return SAMPLE_MARKDOWN


@pytest.fixture
def source_file(tmp_path) -> Path:
    """Write a markdown source into a temporary directory."""
    path = tmp_path / "weekend-notes.md"
    path.write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return path


@pytest.fixture
def sample_config_toml() -> str:
    return SAMPLE_CONFIG_TOML


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE_CONFIG_TOML, encoding="utf-8")
    return path


@pytest.fixture
def storage_config() -> StorageConfig:
    return StorageConfig(
        domain="https://example.com",
        bucket="b",
        region="r",
        prefix="docs/",
        access_key_id="key-id",
        secret_access_key="very-secret",
    )
