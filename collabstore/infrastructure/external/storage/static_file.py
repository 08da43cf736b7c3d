"""Static file store over an S3-compatible object store (AWS S3, MinIO, etc.)."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from opentelemetry import trace

from collabstore.core.config import Settings
from collabstore.core.constants import DEFAULT_CONTENT_TYPE, SPAN_PREFIX_STATIC
from collabstore.domain.exceptions import (
    FileCreateError,
    FileDeleteError,
    FileReadError,
    FileUpdateError,
    NoBucketError,
    NoClientError,
    StaticFileNotFoundError,
)
from collabstore.shared.telemetry.tracing import TracedOperation, span_name

module_logger = logging.getLogger(__name__)

# Error codes S3 (and compatibles) return for a missing object.
_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


def _is_not_found(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES


def guess_content_type(path: str) -> str:
    """Content type from the path's extension; octet-stream when unknown."""
    content_type, _ = mimetypes.guess_type(path)
    return content_type or DEFAULT_CONTENT_TYPE


class StaticFileStore:
    """Byte blobs keyed by path in a single bucket.

    Uses boto3 (sync) via asyncio.to_thread for async API. Empty payloads
    are stored like any other.
    """

    component = "StaticFileStore"

    def __init__(
        self,
        client: Any,
        bucket: str,
        *,
        logger: logging.Logger | None = None,
        tracer: trace.Tracer | None = None,
    ) -> None:
        """Initialize with a boto3 S3 client and the bucket name.

        Raises:
            NoClientError: If client is None.
            NoBucketError: If bucket is empty.
        """
        if client is None:
            raise NoClientError()
        if not bucket:
            raise NoBucketError()
        self._client = client
        self.bucket = bucket
        self.logger = logger or module_logger
        self.tracer = tracer or trace.get_tracer(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        logger: logging.Logger | None = None,
        tracer: trace.Tracer | None = None,
    ) -> StaticFileStore:
        extra = {} if settings.s3_endpoint_url is None else {"endpoint_url": settings.s3_endpoint_url}
        client = boto3.client(
            "s3",
            region_name=settings.s3_region,
            aws_access_key_id=settings.s3_access_key,
            aws_secret_access_key=(
                settings.s3_secret_key.get_secret_value() if settings.s3_secret_key else None
            ),
            **extra,
        )
        return cls(client, settings.s3_bucket, logger=logger, tracer=tracer)

    def _span(self, operation: str, path: str) -> TracedOperation:
        return TracedOperation(
            span_name(SPAN_PREFIX_STATIC, self.component, operation),
            {"file.path": path},
            tracer=self.tracer,
        )

    def _put(self, path: str, data: bytes) -> None:
        self._client.put_object(
            Bucket=self.bucket,
            Key=path,
            Body=data,
            ContentType=guess_content_type(path),
        )

    async def create(self, path: str, data: bytes) -> None:
        """Store data at path.

        Raises:
            FileCreateError: If the upload fails.
        """
        with self._span("Create", path):
            try:
                await asyncio.to_thread(self._put, path, data)
            except (ClientError, BotoCoreError) as e:
                self.logger.error("Failed to create static file %s: %s", path, e)
                raise FileCreateError(path, str(e)) from e
            self.logger.info("Static file created: %s (%d bytes)", path, len(data))

    async def get(self, path: str) -> bytes:
        """Return the bytes stored at path.

        Raises:
            StaticFileNotFoundError: If nothing is stored at path.
            FileReadError: If the download fails.
        """

        def _get() -> bytes:
            resp = self._client.get_object(Bucket=self.bucket, Key=path)
            return resp["Body"].read()

        with self._span("Get", path):
            try:
                return await asyncio.to_thread(_get)
            except ClientError as e:
                if _is_not_found(e):
                    raise StaticFileNotFoundError(path) from e
                self.logger.error("Failed to get static file %s: %s", path, e)
                raise FileReadError(path, str(e)) from e
            except BotoCoreError as e:
                self.logger.error("Failed to get static file %s: %s", path, e)
                raise FileReadError(path, str(e)) from e

    async def update(self, path: str, data: bytes) -> None:
        """Replace the bytes at path; creates the file when absent.

        Raises:
            FileUpdateError: If the upload fails.
        """
        with self._span("Update", path):
            try:
                await asyncio.to_thread(self._put, path, data)
            except (ClientError, BotoCoreError) as e:
                self.logger.error("Failed to update static file %s: %s", path, e)
                raise FileUpdateError(path, str(e)) from e
            self.logger.info("Static file updated: %s (%d bytes)", path, len(data))

    async def delete(self, path: str) -> None:
        """Remove the file at path.

        Raises:
            StaticFileNotFoundError: If nothing is stored at path.
            FileDeleteError: If the removal fails.
        """

        def _delete() -> None:
            self._client.head_object(Bucket=self.bucket, Key=path)
            self._client.delete_object(Bucket=self.bucket, Key=path)

        with self._span("Delete", path):
            try:
                await asyncio.to_thread(_delete)
            except ClientError as e:
                if _is_not_found(e):
                    raise StaticFileNotFoundError(path) from e
                self.logger.error("Failed to delete static file %s: %s", path, e)
                raise FileDeleteError(path, str(e)) from e
            except BotoCoreError as e:
                self.logger.error("Failed to delete static file %s: %s", path, e)
                raise FileDeleteError(path, str(e)) from e
            self.logger.info("Static file deleted: %s", path)
