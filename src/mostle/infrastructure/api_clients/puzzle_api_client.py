"""
Async HTTP client for the Mostle API.

Used by the assignment board to fetch today's puzzle and submit assignments.
Requests are never retried; any failure surfaces as TransportFailure.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientTimeout

from mostle.domain.assignment import Assignment
from mostle.domain.errors import TransportFailure
from mostle.domain.puzzle import DailyPuzzle
from mostle.domain.score import ScoreResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class PuzzleAPIClient:
    """aiohttp client for `/api/daily` and `/api/check`."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: int = 15,
    ):
        self.base_url = (base_url or os.getenv("MOSTLE_API_BASE_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout = ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": "Mostle/0.1", "Cache-Control": "no-store"},
            )
        return self._session

    async def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        session = await self._get_session()

        try:
            async with session.request(method, url, json=json_data) as response:
                if 200 <= response.status < 300:
                    return await response.json()
                text = await response.text()
                logger.error(f"API error {response.status} for {url}: {text[:200]}")
                raise TransportFailure(text or f"HTTP {response.status}", status=response.status)
        except asyncio.TimeoutError as e:
            logger.error(f"Request timeout: {url}")
            raise TransportFailure(f"Request timeout: {url}") from e
        except aiohttp.ClientError as e:
            logger.error(f"Request failed: {url} - {e}")
            raise TransportFailure(str(e) or f"Request failed: {url}") from e

    async def fetch_daily(self) -> DailyPuzzle:
        data = await self._request("GET", "/api/daily")
        return DailyPuzzle.from_dict(data)

    async def check(self, assignment: Assignment) -> ScoreResult:
        data = await self._request(
            "POST", "/api/check", json_data={"assignment": assignment.to_payload()}
        )
        return ScoreResult.from_dict(data)

    async def close(self):
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
