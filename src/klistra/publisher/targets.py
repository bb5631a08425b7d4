"""Publish target resolution: local file or object storage key.

Resolution is pure apart from the unique identifier draw, which goes
through an injectable ``id_factory`` so callers can pin it.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Callable, Optional

from klistra.common.config import StorageConfig
from klistra.common.errors import ConfigurationInvalid

from .models import LocalTarget, PublishTarget, RemoteTarget

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]

LOCAL_SUFFIX = ".html"
INDEX_DOCUMENT = "index.html"
PUBLIC_SEGMENT = "p"


def new_unique_id() -> str:
    """Return a random UUID v4 string (os.urandom backed)."""
    return str(uuid.uuid4())


def local_output_path(source_path: str | Path) -> Path:
    """``notes/post.md`` -> ``notes/post.html``."""
    return Path(source_path).with_suffix(LOCAL_SUFFIX)


def build_object_key(prefix: str, unique_id: str) -> str:
    """Object key ``<prefix>/p/<id>/index.html``; trailing slashes on prefix are dropped."""
    return f"{prefix.rstrip('/')}/{PUBLIC_SEGMENT}/{unique_id}/{INDEX_DOCUMENT}"


def build_public_url(domain: str, unique_id: str) -> str:
    """Public URL ``<domain>/p/<id>``; the host serves index.html by default."""
    return f"{domain}/{PUBLIC_SEGMENT}/{unique_id}"


def resolve_target(
    local_output_requested: bool,
    source_path: str | Path,
    config: Optional[StorageConfig] = None,
    id_factory: IdFactory = new_unique_id,
) -> PublishTarget:
    """Decide where the rendered page goes.

    Args:
        local_output_requested: Write next to the source instead of uploading
        source_path: Path of the markdown source
        config: Storage settings, required for remote targets
        id_factory: Source of the unique path segment

    Returns:
        LocalTarget or RemoteTarget

    Raises:
        ConfigurationInvalid: remote publishing without storage settings
    """
    if local_output_requested:
        target = LocalTarget(path=local_output_path(source_path))
        logger.debug("Resolved local target: %s", target.path)
        return target

    if config is None:
        raise ConfigurationInvalid("Remote publishing requires an [s3] configuration")

    unique_id = id_factory()
    target = RemoteTarget(
        bucket=config.bucket,
        key=build_object_key(config.prefix, unique_id),
        domain=config.domain,
        unique_id=unique_id,
        public_url=build_public_url(config.domain, unique_id),
    )
    logger.debug("Resolved remote target: s3://%s/%s", target.bucket, target.key)
    return target
