"""Error kinds raised by the render-and-publish pipeline.

All of them propagate to the command-line entry point, which reports the
message and exits with a non-zero status. None are retried.
"""

from __future__ import annotations


class KlistraError(Exception):
    """Base class for every failure klistra reports to the operator."""


class ConfigurationNotFound(KlistraError):
    """The configuration file does not exist."""


class ConfigurationInvalid(KlistraError):
    """The configuration file is unparseable or has missing/mistyped fields."""


class SourceUnreadable(KlistraError):
    """The markdown source file cannot be read."""


class LocalWriteFailed(KlistraError):
    """Writing the local HTML file failed."""


class RemoteUploadFailed(KlistraError):
    """The object storage PUT failed (network, auth or service error)."""
