# Publisher - target resolution, local output and object storage upload
"""
Publisher module for rendered pages.

Resolves where a page goes (local file next to the source, or a fresh
``<prefix>/p/<uuid>/index.html`` key in object storage), writes it without
overwriting, or uploads it and reports the public URL.
"""

from .local import write_if_absent
from .models import (
    LocalTarget,
    OutcomeKind,
    PublishOutcome,
    PublishTarget,
    RemoteTarget,
    RenderedPage,
    SourceDocument,
)
from .pipeline import PublishPipeline, read_source
from .storage import ObjectStoragePublisher
from .targets import (
    build_object_key,
    build_public_url,
    local_output_path,
    new_unique_id,
    resolve_target,
)

__all__ = [
    "LocalTarget",
    "ObjectStoragePublisher",
    "OutcomeKind",
    "PublishOutcome",
    "PublishPipeline",
    "PublishTarget",
    "RemoteTarget",
    "RenderedPage",
    "SourceDocument",
    "build_object_key",
    "build_public_url",
    "local_output_path",
    "new_unique_id",
    "read_source",
    "resolve_target",
    "write_if_absent",
]
