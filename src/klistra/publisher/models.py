"""Data models for the publisher module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class SourceDocument:
    """Markdown source read from disk."""
    path: Path
    text: str
    title: str  # file stem, or "Document"


@dataclass(frozen=True)
class RenderedPage:
    """Final HTML document for one source."""
    title: str
    html: str

    def to_bytes(self) -> bytes:
        return self.html.encode("utf-8")


@dataclass(frozen=True)
class LocalTarget:
    """Write the page next to the source, extension replaced by .html."""
    path: Path


@dataclass(frozen=True)
class RemoteTarget:
    """Upload the page to object storage."""
    bucket: str
    key: str  # "<prefix>/p/<unique_id>/index.html"
    domain: str
    unique_id: str
    public_url: str  # "<domain>/p/<unique_id>"


PublishTarget = Union[LocalTarget, RemoteTarget]


class OutcomeKind(str, Enum):
    """How a publish finished. All three are successes."""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    UPLOADED = "uploaded"


@dataclass(frozen=True)
class PublishOutcome:
    """Result of one invocation: a local path or a public URL.

    Failures are not outcomes; they are raised as ``KlistraError``.
    """
    kind: OutcomeKind
    location: str  # file path or public URL

    @property
    def message(self) -> str:
        """Human-readable line for stdout."""
        if self.kind is OutcomeKind.CREATED:
            return f"Local HTML file created: {self.location}"
        if self.kind is OutcomeKind.ALREADY_EXISTS:
            return f"Local file '{self.location}' already exists. Not overwriting."
        return f"File uploaded successfully: {self.location}"
