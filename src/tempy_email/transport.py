# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""JSON over HTTP transport for the tempy.email REST API.

Each request opens a short-lived ``aiohttp.ClientSession``. Failures are
translated into the client's error types:

- a non-2xx status raises ``ApiError`` (``Failed to {action}: {status} {reason}``)
- connection problems, timeouts and undecodable bodies raise ``SourceError``
  chained to the original exception
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import aiohttp

from .config import DEFAULT_BASE_URL
from .errors import ApiError, SourceError
from .logger import get_logger

logger = get_logger(__name__)


class ApiTransport:
    """Sends requests to the API and decodes the JSON answers.

    Attributes:
        base_url: API root, without trailing slash.
        request_timeout: Total timeout in seconds for one request.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, request_timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout

    def _headers(self, with_body: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        action: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path below ``base_url``, starting with ``/``.
            action: Short description used in error messages
                (e.g. "get messages").
            params: Query string parameters.
            payload: JSON body.

        Returns:
            The decoded body, or ``None`` for an empty body.

        Raises:
            ApiError: If the service answers with a non-2xx status.
            SourceError: If the request could not be completed or decoded.
        """
        url = f"{self.base_url}{path}"
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)
        logger.debug(f"{method} {url} params={params}")
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    method,
                    url,
                    params=params,
                    json=payload,
                    headers=self._headers(payload is not None),
                ) as response:
                    if response.status >= 400:
                        raise ApiError(action, response.status, response.reason)
                    body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise SourceError(f"Failed to {action}: {type(exc).__name__}: {exc}") from exc

        if not body:
            return None
        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as exc:
            raise SourceError(f"Failed to {action}: invalid JSON response") from exc

    async def get(self, path: str, *, action: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, action=action, params=params)

    async def post(
        self,
        path: str,
        *,
        action: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, action=action, params=params, payload=payload)

    async def patch(self, path: str, *, action: str, payload: dict[str, Any] | None = None) -> Any:
        return await self.request("PATCH", path, action=action, payload=payload)

    async def delete(self, path: str, *, action: str) -> Any:
        return await self.request("DELETE", path, action=action)


__all__ = ["ApiTransport"]
