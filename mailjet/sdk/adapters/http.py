"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

HTTP/REST transport adapter (default).
"""

from __future__ import annotations

import time
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from mailjet.exceptions import TransportError
from mailjet.logging_config import get_logger
from mailjet.sdk.adapters.base import BaseAdapter, RawResponse, TransportRequest

logger = get_logger(__name__)


class RequestsAdapter(BaseAdapter):
    """Default HTTP transport using a pooled ``requests.Session``.

    The session is mounted without any retry policy: every call is exactly
    one round trip.

    Args:
        timeout: Request timeout in seconds.
        pool_connections: Number of connection pools to cache.
        pool_maxsize: Maximum connections kept per pool.
        session: Optional pre-configured session (e.g. for proxies).
    """

    def __init__(
        self,
        timeout: float = 30,
        pool_connections: int = 10,
        pool_maxsize: int = 20,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout
        self._pool_connections = pool_connections
        self._pool_maxsize = pool_maxsize
        self._session = session
        self._connected = True

    @property
    def timeout(self) -> float:
        return self._timeout

    def _ensure_session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=self._pool_connections,
                pool_maxsize=self._pool_maxsize,
            )
            session.mount("http://", adapter)
            session.mount("https://", adapter)
            self._session = session
        self._connected = True
        return self._session

    def send(self, request: TransportRequest) -> RawResponse:
        session = self._ensure_session()
        headers = dict(request.headers)
        if request.content_type:
            headers["Content-Type"] = request.content_type

        start = time.monotonic()
        try:
            resp = session.request(
                method=request.method,
                url=request.url,
                headers=headers,
                params=request.params or None,
                data=request.body,
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timeout: {request.method} {request.url}: {e}", original=e) from e
        except requests.exceptions.SSLError as e:
            raise TransportError(f"TLS error: {request.method} {request.url}: {e}", original=e) from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection error: {request.method} {request.url}: {e}", original=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {request.method} {request.url}: {e}", original=e) from e
        elapsed = (time.monotonic() - start) * 1000

        # The API always answers UTF-8 JSON; don't let requests guess latin-1.
        if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
            resp.encoding = "utf-8"

        return RawResponse(
            status_code=resp.status_code,
            text=resp.text,
            headers=dict(resp.headers),
            method=request.method,
            url=resp.url or request.full_url,
            elapsed_ms=round(elapsed, 2),
        )

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.debug("Closed HTTP transport session")
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
