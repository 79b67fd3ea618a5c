"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Mailjet SDK Client.

``MailjetClient`` turns a :class:`MailjetRequest` into an authenticated
GET/POST/PUT/DELETE call and normalizes the answer into a
:class:`MailjetResponse`. Three debug modes change how a call is handled:

    - ``NO_DEBUG``: usual call.
    - ``VERBOSE_DEBUG``: usual call; every request and response goes to the
      request logger.
    - ``NOCALL_DEBUG``: no network call; the response body describes what
      would have been sent and the status code is ``0``.

The debug mode is the only mutable state of a client. Calls may be issued
from several threads; changing the mode while other threads dispatch
requires external synchronization.
"""

from __future__ import annotations

import json
import re
from enum import IntEnum
from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit

from mailjet._version import __version__
from mailjet.config.settings import DEFAULT_BASE_URL, MailjetConfig
from mailjet.exceptions import InvalidUrlError
from mailjet.logging_config import get_logger
from mailjet.sdk.adapters.base import BaseAdapter, TransportRequest
from mailjet.sdk.adapters.http import RequestsAdapter
from mailjet.sdk.auth import AuthContext
from mailjet.sdk.request import (
    JSON_CONTENT_TYPE,
    MailjetRequest,
    build_path,
    build_payload,
    build_query_string,
    query_params,
)
from mailjet.sdk.request_logger import (
    ConsoleRequestLogger,
    NullRequestLogger,
    RequestLogger,
)
from mailjet.sdk.response import MailjetResponse

logger = get_logger(__name__)

USER_AGENT = f"mailjet-apiv3-python/v{__version__}"

_UNSAFE_URL_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


class DebugMode(IntEnum):
    """How the client handles a call."""

    NO_DEBUG = 0
    VERBOSE_DEBUG = 1
    NOCALL_DEBUG = 2

    @classmethod
    def parse(cls, value: Union[DebugMode, int, str]) -> DebugMode:
        """Accept a mode, its integer value, or a name such as ``"nocall"``."""
        if isinstance(value, str):
            name = value.strip().lower().replace("-", "_")
            aliases = {
                "none": cls.NO_DEBUG,
                "no_debug": cls.NO_DEBUG,
                "verbose": cls.VERBOSE_DEBUG,
                "verbose_debug": cls.VERBOSE_DEBUG,
                "nocall": cls.NOCALL_DEBUG,
                "no_call": cls.NOCALL_DEBUG,
                "nocall_debug": cls.NOCALL_DEBUG,
            }
            if name not in aliases:
                raise ValueError(f"Unknown debug mode: '{value}'")
            return aliases[name]
        return cls(value)


def validate_url(url: str) -> str:
    """
    Check that ``url`` is an absolute http(s) URL.
    
    Raises:
        InvalidUrlError: On whitespace or control characters, a missing
            scheme or host, a non-string value or an unparsable URL.
    """
    if not isinstance(url, str):
        raise InvalidUrlError(f"URL must be a string, got {type(url).__name__}")
    if _UNSAFE_URL_CHARS.search(url):
        raise InvalidUrlError(f"Malformed URL: {url!r}")
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidUrlError(f"Malformed URL: {url!r}: {e}") from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidUrlError(f"Malformed URL: {url!r}")
    return url


class MailjetClient:
    """Client for the Mailjet v3 REST API.

    Example::

        client = MailjetClient("api-key", "api-secret")
        client.set_debug(MailjetClient.VERBOSE_DEBUG)
        response = client.delete(MailjetRequest(Resource.CONTACTSLIST).filter("id", 1))
        print(response)

    Args:
        api_key: Public API key.
        api_secret: Private API key.
        base_url: Root URL of the API.
        adapter: Transport adapter; defaults to :class:`RequestsAdapter`.
        request_logger: Sink for verbose traffic logging. When omitted, a
            :class:`ConsoleRequestLogger` is installed on entering verbose mode.
        debug: Initial debug mode.
        user_agent: ``User-Agent`` header value.

    Raises:
        InvalidCredentialsError: If a credential is empty or malformed.
        InvalidUrlError: If ``base_url`` is not an absolute http(s) URL.
    """

    NO_DEBUG = DebugMode.NO_DEBUG
    VERBOSE_DEBUG = DebugMode.VERBOSE_DEBUG
    NOCALL_DEBUG = DebugMode.NOCALL_DEBUG

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        adapter: Optional[BaseAdapter] = None,
        request_logger: Optional[RequestLogger] = None,
        debug: Union[DebugMode, int, str] = DebugMode.NO_DEBUG,
        user_agent: Optional[str] = None,
    ) -> None:
        self._auth = AuthContext(api_key, api_secret)
        self._base_url = validate_url(
            base_url.rstrip("/") if isinstance(base_url, str) else base_url
        )
        self._adapter = adapter or RequestsAdapter()
        self._request_logger: RequestLogger = request_logger or NullRequestLogger()
        self._debug = DebugMode.NO_DEBUG
        self._headers: Dict[str, str] = {
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": user_agent or USER_AGENT,
            "Authorization": self._auth.authorization_header(),
        }
        self.set_debug(debug)
        logger.debug("MailjetClient initialized", base_url=self._base_url)

    @classmethod
    def from_config(
        cls,
        config: MailjetConfig,
        adapter: Optional[BaseAdapter] = None,
        request_logger: Optional[RequestLogger] = None,
    ) -> MailjetClient:
        """Build a client from a loaded :class:`MailjetConfig`."""
        return cls(
            api_key=config.api.api_key,
            api_secret=config.api.api_secret,
            base_url=config.api.base_url,
            adapter=adapter or RequestsAdapter(timeout=config.api.timeout),
            request_logger=request_logger,
            debug=config.debug.mode,
            user_agent=config.api.user_agent or None,
        )

    # -- Settings ----------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> AuthContext:
        return self._auth

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    @property
    def request_logger(self) -> RequestLogger:
        return self._request_logger

    @property
    def debug_mode(self) -> DebugMode:
        return self._debug

    @debug_mode.setter
    def debug_mode(self, mode: Union[DebugMode, int, str]) -> None:
        self.set_debug(mode)

    def set_debug(self, mode: Union[DebugMode, int, str]) -> None:
        """
        Set the debug level.
        
        Args:
            mode:
                VERBOSE_DEBUG: prints every URL/payload and response.
                NOCALL_DEBUG: returns the URL + payload without calling the API.
                NO_DEBUG: usual call.
        """
        mode = DebugMode.parse(mode)
        if mode is DebugMode.VERBOSE_DEBUG and not self._request_logger.is_logging_enabled:
            self._request_logger = ConsoleRequestLogger()
        self._debug = mode
        logger.debug("Debug mode set", debug_mode=mode.name)

    def set_request_logger(self, request_logger: RequestLogger) -> None:
        """Replace the sink used in verbose mode."""
        self._request_logger = request_logger

    # -- Verbs -------------------------------------------------------------

    def get(self, request: MailjetRequest) -> MailjetResponse:
        """Perform a GET request; filters are sent as query parameters."""
        mode = self._debug
        url = self._url_for(request)
        params = query_params(request)

        if mode is DebugMode.NOCALL_DEBUG:
            return MailjetResponse(0, {"url": url + build_query_string(request)})

        return self._dispatch(
            TransportRequest(method="GET", url=url, headers=dict(self._headers), params=params),
            mode,
        )

    def post(self, request: MailjetRequest) -> MailjetResponse:
        """Perform a POST request with the request body as JSON payload."""
        return self._write("POST", request)

    def put(self, request: MailjetRequest) -> MailjetResponse:
        """Perform a PUT request with the request body as JSON payload."""
        return self._write("PUT", request)

    def delete(self, request: MailjetRequest) -> MailjetResponse:
        """Perform a DELETE request; filters are sent as query parameters.

        The dry-run URL is the bare resource URL, without filters.
        """
        mode = self._debug
        url = self._url_for(request)
        params = query_params(request)

        if mode is DebugMode.NOCALL_DEBUG:
            return MailjetResponse(0, {"url": url})

        return self._dispatch(
            TransportRequest(method="DELETE", url=url, headers=dict(self._headers), params=params),
            mode,
        )

    # -- Internals ---------------------------------------------------------

    def _url_for(self, request: MailjetRequest) -> str:
        return validate_url(self._base_url + build_path(request))

    def _write(self, method: str, request: MailjetRequest) -> MailjetResponse:
        mode = self._debug
        url = self._url_for(request)
        payload = build_payload(request)

        if mode is DebugMode.NOCALL_DEBUG:
            # Decoded from the sent bytes, detached from the caller's body.
            return MailjetResponse(0, {"url": url, "payload": json.loads(payload.decode("utf-8"))})

        return self._dispatch(
            TransportRequest(
                method=method,
                url=url,
                headers=dict(self._headers),
                content_type=request.content_type,
                body=payload,
            ),
            mode,
        )

    def _dispatch(self, transport_request: TransportRequest, mode: DebugMode) -> MailjetResponse:
        verbose = mode is DebugMode.VERBOSE_DEBUG
        if verbose:
            self._request_logger.log_request(transport_request)

        raw = self._adapter.send(transport_request)

        if verbose:
            self._request_logger.log_response(raw)
        return MailjetResponse.from_text(raw.status_code, raw.text)

    # -- Lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Release transport resources."""
        self._adapter.close()
        logger.debug("MailjetClient closed")

    def __enter__(self) -> MailjetClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"MailjetClient(base_url={self._base_url!r}, "
            f"api_key={self._auth.api_key!r}, debug_mode={self._debug.name})"
        )
