"""
Overpass HTTP client.

Sends street queries to the configured Overpass endpoint one at a time.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from yarl import URL

from config import get_overpass_api_url, get_overpass_user_agent
from core.http.request import request_json
from core.http.session import get_session
from overpass.query import build_query_url

logger = logging.getLogger(__name__)


class OverpassClient:
    def __init__(
        self,
        endpoint: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._endpoint = endpoint or get_overpass_api_url()
        self._user_agent = user_agent or get_overpass_user_agent()
        # Public endpoints are shared; never run two queries at once.
        self._query_lock = asyncio.Lock()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent}

    async def fetch(self, ring_lat_lon: Sequence[Sequence[float]]) -> Any:
        """Run the streets query for a ring and return the decoded JSON body.

        Raises:
            QueryFailure: on transport errors, non-2xx responses or a body
                that is not JSON.
        """
        url = build_query_url(self._endpoint, ring_lat_lon)
        async with self._query_lock:
            session = await get_session()
            logger.debug("Querying Overpass (%d chars)", len(url))
            return await request_json(
                "GET",
                URL(url, encoded=True),
                session=session,
                headers=self._headers(),
                service_name="Overpass",
            )
