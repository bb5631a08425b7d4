"""Object storage publisher for S3-compatible buckets (Backblaze B2).

Uploads one rendered page with a single PUT and reports its public URL.

Usage:
    from klistra.publisher.storage import ObjectStoragePublisher

    publisher = ObjectStoragePublisher(config.s3)
    outcome = publisher.publish(target, page.to_bytes())
    print(outcome.location)
"""

from __future__ import annotations

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from klistra.common.config import StorageConfig
from klistra.common.errors import ConfigurationInvalid, RemoteUploadFailed

from .models import OutcomeKind, PublishOutcome, RemoteTarget

logger = logging.getLogger(__name__)

PROVIDER_HOST = "backblazeb2.com"
CONTENT_TYPE = "text/html"


class ObjectStoragePublisher:
    """Upload rendered pages to an S3-compatible bucket.

    Uses path-style addressing and static credentials. Each publish is
    exactly one PUT; botocore retries are disabled.
    """

    def __init__(self, config: StorageConfig, client=None):
        self._config = config
        self._client = client

    @property
    def endpoint_url(self) -> str:
        """``https://s3.<region>.backblazeb2.com``."""
        return f"https://s3.{self._config.region}.{PROVIDER_HOST}"

    def _get_client(self):
        """Lazy-initialize the boto3 S3 client.

        Raises:
            ConfigurationInvalid: botocore rejects the region or endpoint.
        """
        if self._client is not None:
            return self._client
        try:
            self._client = boto3.client(
                "s3",
                region_name=self._config.region,
                endpoint_url=self.endpoint_url,
                aws_access_key_id=self._config.access_key_id,
                aws_secret_access_key=self._config.secret_access_key.get_secret_value(),
                config=Config(
                    s3={"addressing_style": "path"},
                    request_checksum_calculation="when_required",
                    response_checksum_validation="when_required",
                    retries={"total_max_attempts": 1, "mode": "standard"},
                ),
            )
        except (BotoCoreError, ValueError) as e:
            raise ConfigurationInvalid(
                f"Invalid storage settings (region {self._config.region!r}): {e}"
            ) from e
        return self._client

    def publish(self, target: RemoteTarget, content: bytes) -> PublishOutcome:
        """Upload ``content`` to ``target.bucket``/``target.key``.

        Args:
            target: Resolved remote target (bucket, key, public URL).
            content: Encoded HTML document.

        Returns:
            PublishOutcome carrying the public URL.

        Raises:
            ConfigurationInvalid: the client cannot be built from the settings.
            RemoteUploadFailed: any transport, auth or service error.
        """
        client = self._get_client()
        logger.info("Uploading %d bytes to %s/%s", len(content), target.bucket, target.key)
        try:
            client.put_object(
                Bucket=target.bucket,
                Key=target.key,
                Body=content,
                ContentType=CONTENT_TYPE,
            )
        except (ClientError, BotoCoreError) as e:
            logger.debug("Upload failed for %s: %s", target.key, e)
            raise RemoteUploadFailed(f"Upload to {target.bucket}/{target.key} failed: {e}") from e

        logger.info("Uploaded: %s -> %s", target.key, target.public_url)
        return PublishOutcome(kind=OutcomeKind.UPLOADED, location=target.public_url)
