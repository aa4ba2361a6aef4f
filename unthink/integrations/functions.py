from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from unthink.core.errors import ExternalServiceError


class FunctionsClient:
    """
    Thin async HTTP client for the hosted serverless functions.

    Used for the ``text-to-speech`` function and the newsletter sender. Each
    function takes a JSON body and answers with a JSON object.
    """

    def __init__(
        self,
        base_url: str,
        *,
        service_key: Optional[str] = None,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self.service_key:
            headers["Authorization"] = f"Bearer {self.service_key}"
            headers["apikey"] = self.service_key
        return headers

    async def invoke(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Invoke function ``name`` with ``body`` and return its JSON response.

        Raises:
            ExternalServiceError: on transport failures, non-2xx answers, a
                response that is not a JSON object, or an ``error`` field in it
        """
        url = f"{self.base_url}/functions/v1/{name}"
        try:
            self._logger.debug("FunctionsClient.invoke: POST %s keys=%s", url, sorted(body))
            r = await self._client.post(url, headers=self._headers(), json=body)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                f"Function {name} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Function {name} failed: {e}") from e

        try:
            data = r.json()
        except ValueError as e:
            raise ExternalServiceError(
                f"Function {name} returned a non-JSON response", status_code=r.status_code, details=r.text
            ) from e
        if not isinstance(data, dict):
            raise ExternalServiceError(
                f"Unexpected response shape from function {name}", status_code=r.status_code, details=data
            )
        if data.get("error"):
            raise ExternalServiceError(f"Function {name} reported an error", status_code=r.status_code, details=data)
        self._logger.debug("FunctionsClient.invoke: %s answered keys=%s", name, sorted(data))
        return data

    async def aclose(self) -> None:
        await self._client.aclose()
