import asyncio
import json
import logging
from typing import Any

import aiohttp
from aiohttp.client import DEFAULT_TIMEOUT

import config
from exceptions.api import ApiRequestException

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin JSON-over-HTTP wrapper around aiohttp for the bookstore backend."""

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    # aiohttp default: 5 minutes total, 30s to connect
    TIMEOUT = DEFAULT_TIMEOUT

    @staticmethod
    def build_url(path: str) -> str:
        return f"{config.API_BASE_URL}/{path.lstrip('/')}"

    @staticmethod
    async def fetch_api_request(
        url: str,
        method: str = "GET",
        data: str | None = None,
        params: dict | None = None,
        headers: dict | None = None
    ) -> Any:
        """
        Perform one HTTP request and return the decoded JSON body.

        Args:
            url: Absolute URL
            method: HTTP method
            data: Pre-serialized JSON body
            params: Query string parameters
            headers: Extra headers (merged over the JSON defaults)

        Returns:
            Decoded JSON (dict, list, ...), or None for an empty body

        Raises:
            ApiRequestException: On connection errors, timeouts, non-2xx status or invalid JSON
        """
        request_headers = {**ApiClient.DEFAULT_HEADERS, **(headers or {})}
        logger.debug(f"[API] {method} {url} params={params}")

        try:
            async with aiohttp.ClientSession(timeout=ApiClient.TIMEOUT) as session:
                async with session.request(method, url, data=data, params=params,
                                           headers=request_headers) as response:
                    body = await response.text()
                    if response.status >= 400:
                        raise ApiRequestException(method, url, reason=body[:200] or response.reason or "",
                                                  status=response.status)
        except asyncio.TimeoutError as e:
            raise ApiRequestException(method, url, reason="timeout") from e
        except aiohttp.ClientError as e:
            raise ApiRequestException(method, url, reason=str(e) or type(e).__name__) from e

        if not body.strip():
            return None
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ApiRequestException(method, url, reason=f"invalid JSON response: {e}",
                                      status=response.status) from e
