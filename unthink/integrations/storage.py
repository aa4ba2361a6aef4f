from __future__ import annotations

import logging
from typing import Optional

import httpx

from unthink.core.errors import ExternalServiceError


class StorageClient:
    """
    Thin async HTTP client for the hosted object storage REST API.

    Responsibilities:
    - upload an object to a bucket
    - build the public URL of an object

    Buckets, their policies and the storage engine itself live in the hosted
    service; this client only uses its public interface.
    """

    def __init__(
        self,
        base_url: str,
        *,
        service_key: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    def _headers(self, content_type: str, upsert: bool) -> dict[str, str]:
        headers: dict[str, str] = {
            "Content-Type": content_type,
            "x-upsert": "true" if upsert else "false",
            "Cache-Control": "max-age=3600",
        }
        if self.service_key:
            headers["Authorization"] = f"Bearer {self.service_key}"
            headers["apikey"] = self.service_key
        return headers

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        *,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        """Store ``data`` at ``bucket/path`` and return the object path.

        Raises:
            ExternalServiceError: if the storage API rejects the upload
        """
        url = f"{self.base_url}/storage/v1/object/{bucket}/{path}"
        try:
            self._logger.debug("StorageClient.upload: POST %s (%d bytes, upsert=%s)", url, len(data), upsert)
            r = await self._client.post(url, headers=self._headers(content_type, upsert), content=data)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                f"Storage upload failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Storage upload failed: {e}") from e
        self._logger.debug("StorageClient.upload: stored %s/%s", bucket, path)
        return path

    def public_url(self, bucket: str, path: str) -> str:
        """Public URL of an object in a public bucket."""
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"

    async def aclose(self) -> None:
        await self._client.aclose()
