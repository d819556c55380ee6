"""HTTP client for the Tavus REST API."""

import logging
from typing import Any, Dict, Optional

import httpx

from .config import TavusSettings

logger = logging.getLogger(__name__)


class TavusAPIError(Exception):
    """Raised when a Tavus API call fails, at HTTP or transport level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(error: httpx.HTTPError) -> str:
    """Prefer the error text Tavus puts in the body over the httpx message"""
    if isinstance(error, httpx.HTTPStatusError):
        try:
            details = error.response.json()
        except ValueError:
            details = None
        if isinstance(details, dict):
            message = details.get("error") or details.get("message")
            if message:
                return str(message)
    return str(error)


class TavusClient:
    """Single pre-configured client shared by every tool handler.

    The underlying httpx.AsyncClient is bound to one base URL, one
    ``x-api-key`` header and one timeout. There is no retry policy: a failed
    call raises TavusAPIError straight away.
    """

    def __init__(self, settings: TavusSettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.api_url
        headers = {
            "x-api-key": settings.api_key,
            "Content-Type": "application/json",
        }
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=settings.timeout,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    async def _make_request(self, method: str, path: str, **kwargs) -> Any:
        """Make HTTP request to the Tavus API and decode the body"""
        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            status_code = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            message = _error_message(e)
            logger.error(f"HTTP error for {method} {path}: {message}")
            raise TavusAPIError(message, status_code=status_code) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._make_request("GET", path, params=params)

    async def post(self, path: str, json: Optional[Any] = None) -> Any:
        return await self._make_request("POST", path, json=json)

    async def patch(self, path: str, json: Optional[Any] = None) -> Any:
        return await self._make_request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self._make_request("DELETE", path)
