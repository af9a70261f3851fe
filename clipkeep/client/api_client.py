"""Async HTTP client for the ClipKeep API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from clipkeep.client.schemas import Clip, ClipFormData

logger = logging.getLogger(__name__)


class ClipApiError(Exception):
    """Raised when an API call fails or the server cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ClipApiClient:
    """Thin wrapper over the clips endpoints."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: API root, e.g. ``http://localhost:3001/api``.
            http_client: Optional preconfigured client. Its lifetime stays with the caller.
            timeout_seconds: Request timeout when building our own client.
        """
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)
        self._base_url = base_url.rstrip("/")

    async def aclose(self) -> None:
        """Close the underlying HTTP client if we created it."""
        if self._owns_client:
            await self._http.aclose()

    async def _request(self, method: str, endpoint: str, payload: ClipFormData | None = None) -> Any:
        url = f"{self._base_url}{endpoint}"
        try:
            response = await self._http.request(
                method,
                url,
                json=payload.model_dump() if payload is not None else None,
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            msg = "Network error"
            raise ClipApiError(msg) from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            detail = body.get("detail", "Request failed") if isinstance(body, dict) else "Request failed"
            raise ClipApiError(str(detail), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            msg = "Invalid response from server"
            raise ClipApiError(msg, status_code=response.status_code) from e

    @staticmethod
    def _to_clip(data: Any) -> Clip:
        try:
            return Clip.model_validate(data)
        except ValidationError as e:
            logger.error("Unexpected clip payload: %s", e)
            msg = "Invalid response from server"
            raise ClipApiError(msg) from e

    async def get_clips(self) -> list[Clip]:
        data = await self._request("GET", "/clips")
        if not isinstance(data, list):
            msg = "Invalid response from server"
            raise ClipApiError(msg)
        return [self._to_clip(item) for item in data]

    async def create_clip(self, data: ClipFormData) -> Clip:
        return self._to_clip(await self._request("POST", "/clips", data))

    async def update_clip(self, clip_id: str, data: ClipFormData) -> Clip:
        return self._to_clip(await self._request("PUT", f"/clips/{clip_id}", data))

    async def delete_clip(self, clip_id: str) -> None:
        await self._request("DELETE", f"/clips/{clip_id}")

    async def health(self) -> dict[str, Any]:
        """Fetch the server health report."""
        return await self._request("GET", "/health")
