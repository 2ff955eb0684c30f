"""HTTP connection shared by the catalog, favorites and orders adapters.
"""

from typing import Any, Optional, Type
import logging

import httpx

from app.config import settings
from app.exceptions import AppError

logger = logging.getLogger("gorestaurant.http")


# ------------------ Connection ------------------
def create_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Build the AsyncClient used by every adapter.

    A timeout of None waits for the upstream indefinitely.
    """
    base_url = base_url or settings.catalog_api_url
    timeout = settings.http_timeout_sec if timeout is None else timeout
    logger.info("Creating HTTP client for %s (timeout=%s)", base_url, timeout)
    return httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    error_cls: Type[AppError],
    **kwargs: Any,
) -> httpx.Response:
    """Issue one request; transport failures are raised as ``error_cls``."""
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        logger.warning("%s %s failed: %s", method, url, exc)
        raise error_cls(
            f"{method} {url} failed: {exc}", details={"url": url}
        ) from exc
    logger.debug("%s %s -> %s", method, url, response.status_code)
    return response


def raise_for_status(response: httpx.Response, error_cls: Type[AppError]) -> None:
    """Raise ``error_cls`` for any 4xx/5xx response."""
    if response.is_error:
        request = response.request
        raise error_cls(
            f"{request.method} {request.url.path} returned HTTP {response.status_code}",
            details={"url": request.url.path, "status_code": response.status_code},
        )
