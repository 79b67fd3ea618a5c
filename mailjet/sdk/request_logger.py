"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Request loggers for verbose debug mode.

The client hands every outgoing request and incoming response to its
request logger when verbose debug mode is active. The default logger does
nothing; ``ConsoleRequestLogger`` prints the traffic and
``StructlogRequestLogger`` routes it into structured logging.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

import structlog

from mailjet.logging_config import get_logger, log_api_call
from mailjet.sdk.adapters.base import RawResponse, TransportRequest

_MASKED_HEADERS = {"authorization"}


def _masked(name: str, value: str) -> str:
    if name.lower() in _MASKED_HEADERS:
        scheme, _, _ = value.partition(" ")
        return f"{scheme} ***"
    return value


def _decode(body: Optional[bytes]) -> str:
    if not body:
        return ""
    return body.decode("utf-8", errors="replace")


class RequestLogger(ABC):
    """Sink for request/response traffic."""

    @property
    def is_logging_enabled(self) -> bool:
        return True

    @abstractmethod
    def log(self, message: str) -> None:
        """Write a free-form message."""
        ...

    @abstractmethod
    def log_request(self, request: TransportRequest) -> None:
        """Record an outgoing request."""
        ...

    @abstractmethod
    def log_response(self, response: RawResponse) -> None:
        """Record an incoming response."""
        ...


class NullRequestLogger(RequestLogger):
    """Discards everything."""

    @property
    def is_logging_enabled(self) -> bool:
        return False

    def log(self, message: str) -> None:
        pass

    def log_request(self, request: TransportRequest) -> None:
        pass

    def log_response(self, response: RawResponse) -> None:
        pass


class ConsoleRequestLogger(RequestLogger):
    """Prints every URL, payload and response to a text stream.

    Args:
        stream: Destination stream. Defaults to ``sys.stdout`` at write time.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def log(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(message, file=stream)

    def log_request(self, request: TransportRequest) -> None:
        self.log("=== HTTP Request ===")
        self.log(f"{request.method} {request.full_url}")
        for name, value in request.headers.items():
            self.log(f"{name}: {_masked(name, value)}")
        if request.content_type:
            self.log(f"Content-Type: {request.content_type}")
        payload = _decode(request.body)
        if payload:
            self.log(payload)

    def log_response(self, response: RawResponse) -> None:
        self.log("=== HTTP Response ===")
        self.log(f"Receive url: {response.url}")
        self.log(f"Status: {response.status_code}")
        if response.text:
            self.log(response.text)


class StructlogRequestLogger(RequestLogger):
    """Emits traffic as structured log events."""

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None) -> None:
        self._logger = logger or get_logger("mailjet.sdk.traffic")

    def log(self, message: str) -> None:
        self._logger.info(message)

    def log_request(self, request: TransportRequest) -> None:
        self._logger.info(
            "api_request",
            method=request.method,
            url=request.full_url,
            payload=_decode(request.body) or None,
        )

    def log_response(self, response: RawResponse) -> None:
        log_api_call(
            self._logger,
            method=response.method,
            url=response.url,
            status_code=response.status_code,
            duration_ms=response.elapsed_ms,
            body=response.text,
        )
