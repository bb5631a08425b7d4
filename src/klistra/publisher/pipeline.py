"""Full publishing pipeline: markdown file to local HTML or public URL.

Orchestrates the complete flow:
source file -> MarkupRenderer -> PageTemplater -> resolve target -> write/upload

Usage:
    pipeline = PublishPipeline(config=app_config.s3)
    outcome = pipeline.run("notes/post.md")
    print(outcome.message)
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from klistra.common.config import StorageConfig
from klistra.common.errors import SourceUnreadable
from klistra.renderer import MarkupRenderer, PageTemplater, derive_title, format_date_label

from .local import write_if_absent
from .models import LocalTarget, PublishOutcome, RenderedPage, SourceDocument
from .storage import ObjectStoragePublisher
from .targets import IdFactory, new_unique_id, resolve_target

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> SourceDocument:
    """Read a markdown source file.

    Raises:
        SourceUnreadable: the file is missing, unreadable or not UTF-8
    """
    source_path = Path(path)
    try:
        text = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(f"Could not read {source_path}: {e}") from e
    return SourceDocument(path=source_path, text=text, title=derive_title(source_path))


class PublishPipeline:
    """End-to-end pipeline for one document.

    Steps:
    1. Read the markdown source
    2. Render markdown to an HTML fragment
    3. Wrap it in the styled page template
    4. Resolve the publish target (local path or bucket key)
    5. Write locally (never overwriting) or upload
    """

    def __init__(
        self,
        config: Optional[StorageConfig] = None,
        id_factory: IdFactory = new_unique_id,
        today: Optional[date] = None,
        renderer: MarkupRenderer | None = None,
        templater: PageTemplater | None = None,
        storage: ObjectStoragePublisher | None = None,
    ):
        self.config = config
        self.id_factory = id_factory
        self.today = today
        self.renderer = renderer or MarkupRenderer()
        self.templater = templater or PageTemplater()
        self._storage = storage

    @property
    def storage(self) -> ObjectStoragePublisher:
        if self._storage is None:
            self._storage = ObjectStoragePublisher(self.config)
        return self._storage

    def render(self, document: SourceDocument) -> RenderedPage:
        """Render a source document into the final HTML page."""
        fragment = self.renderer.render(document.text)
        html = self.templater.wrap(
            title=document.title,
            date_label=format_date_label(self.today),
            fragment=fragment,
        )
        return RenderedPage(title=document.title, html=html)

    def run(self, source_path: str | Path, local_output: bool = False) -> PublishOutcome:
        """Execute the pipeline for one source file.

        Args:
            source_path: Markdown file to publish
            local_output: Write <source>.html instead of uploading

        Returns:
            PublishOutcome with the local path or the public URL

        Raises:
            KlistraError: any failure; nothing is retried
        """
        logger.info("Step 1: Reading %s", source_path)
        document = read_source(source_path)

        logger.info("Step 2: Rendering '%s'", document.title)
        page = self.render(document)

        # Must happen before any write
        target = resolve_target(
            local_output_requested=local_output,
            source_path=document.path,
            config=self.config,
            id_factory=self.id_factory,
        )

        logger.info("Step 3: Publishing")
        if isinstance(target, LocalTarget):
            return write_if_absent(target.path, page.html)
        return self.storage.publish(target, page.to_bytes())
