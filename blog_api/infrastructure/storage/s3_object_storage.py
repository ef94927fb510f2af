"""S3-compatible object storage (AWS S3, DigitalOcean Spaces, MinIO) via boto3.

Object URLs:
    <cdn_base_url>/<key>                 — when a CDN base is configured
    <endpoint>/<bucket>/<key>            — when the endpoint is an http(s) URL
    https://<bucket>.digitaloceanspaces.com/<key>  — otherwise
"""

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from blog_api.application.interfaces import ObjectStorage
from blog_api.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


def _quote_key(key: str) -> str:
    return quote(key, safe="/-_.~")


class S3ObjectStorage(ObjectStorage):
    """Infrastructure adapter for an S3-compatible bucket.

    boto3 is blocking, so each call is pushed to a worker thread.
    """

    def __init__(
        self,
        bucket: str,
        endpoint: str = "",
        access_key: str = "",
        secret_key: str = "",
        region: str = "us-east-1",
        cdn_base_url: str = "",
        use_http: bool = False,
        client: Any | None = None,
    ):
        self._bucket = bucket
        self._endpoint = endpoint
        self._cdn_base_url = cdn_base_url
        self._client = client or boto3.client(
            "s3",
            endpoint_url=endpoint or None,
            aws_access_key_id=access_key or None,
            aws_secret_access_key=secret_key or None,
            region_name=region,
            use_ssl=not use_http,
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": "virtual"},
            ),
        )

    # ── Upload / Delete ─────────────────────────────────────────────

    async def upload(
        self, content: bytes, key: str, content_type: str, public: bool = True
    ) -> str:
        if not key or not key.strip():
            raise ValueError("Key is required")
        params: dict[str, Any] = {
            "Bucket": self._bucket,
            "Key": key,
            "Body": content,
            "ContentType": content_type or "application/octet-stream",
        }
        if public:
            params["ACL"] = "public-read"

        try:
            response = await asyncio.to_thread(self._client.put_object, **params)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Upload of %s to bucket %s failed: %s", key, self._bucket, exc)
            raise StorageError("upload", key, str(exc)) from exc

        status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        logger.info("Uploaded object %s to bucket %s. HTTP %s", key, self._bucket, status)
        return self.get_url(key)

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(
                self._client.delete_object, Bucket=self._bucket, Key=key
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Delete of %s from bucket %s failed: %s", key, self._bucket, exc)
            raise StorageError("delete", key, str(exc)) from exc
        logger.info("Deleted object %s from bucket %s", key, self._bucket)

    # ── URLs ────────────────────────────────────────────────────────

    def get_url(self, key: str) -> str:
        quoted = _quote_key(key)
        if self._cdn_base_url.strip():
            return f"{self._cdn_base_url.rstrip('/')}/{quoted}"
        if self._endpoint.startswith("http"):
            return f"{self._endpoint.rstrip('/')}/{self._bucket}/{quoted}"
        return f"https://{self._bucket}.digitaloceanspaces.com/{quoted}"
