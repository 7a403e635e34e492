"""
Shared HTTP request helpers for service backends.

Keeps JSON request/response handling and error mapping consistent for the
query service client.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from core.exceptions import QueryFailure

logger = logging.getLogger(__name__)


def _is_success(status: int) -> bool:
    return 200 <= status < 300


async def request_json(
    method: str,
    url: Any,
    *,
    session: Any,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    service_name: str = "Service",
) -> Any:
    """Send a request and decode the JSON body.

    Any non-2xx status, undecodable body or transport error is raised as
    ``QueryFailure`` carrying the status and URL where known.
    """
    method_upper = method.upper()
    if method_upper == "GET":
        request_fn = session.get
    elif method_upper == "POST":
        request_fn = session.post
    else:
        msg = f"{service_name} request error: unsupported method {method_upper}"
        raise QueryFailure(msg, {"url": str(url)})

    request_kwargs: dict[str, Any] = {}
    if params is not None:
        request_kwargs["params"] = params
    if headers is not None:
        request_kwargs["headers"] = headers

    try:
        async with request_fn(url, **request_kwargs) as response:
            if not _is_success(response.status):
                body = await response.text()
                msg = f"{service_name} error: {response.status}"
                raise QueryFailure(
                    msg,
                    {
                        "status": response.status,
                        "body": body,
                        "url": str(getattr(response, "url", url)),
                    },
                )
            try:
                return await response.json(content_type=None)
            except (json.JSONDecodeError, ValueError) as exc:
                msg = f"{service_name} error: response is not valid JSON"
                raise QueryFailure(
                    msg,
                    {"status": response.status, "url": str(url)},
                ) from exc
    except aiohttp.ClientError as exc:
        msg = f"{service_name} request failed: {exc}"
        raise QueryFailure(msg, {"url": str(url)}) from exc
    except asyncio.TimeoutError as exc:
        msg = f"{service_name} request timed out"
        raise QueryFailure(msg, {"url": str(url)}) from exc
