"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

SDK Transport Adapter base class and data structures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode


@dataclass
class TransportRequest:
    """Outbound request handed to a transport adapter."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: List[Tuple[str, str]] = field(default_factory=list)
    content_type: Optional[str] = None
    body: Optional[bytes] = None

    @property
    def full_url(self) -> str:
        """URL including the encoded query parameters."""
        if not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params)}"


@dataclass
class RawResponse:
    """Inbound response as returned by the transport, body still unparsed."""
    status_code: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = ""
    url: str = ""
    elapsed_ms: float = 0.0


class BaseAdapter(ABC):
    """Abstract base for all transport adapters.

    Subclasses implement :meth:`send`; the verb helpers build the
    :class:`TransportRequest` for them.
    """

    @abstractmethod
    def send(self, request: TransportRequest) -> RawResponse:
        """Send a request and return the response."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...

    def get(
        self,
        url: str,
        params: Optional[List[Tuple[str, str]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> RawResponse:
        return self.send(TransportRequest(
            method="GET", url=url, headers=dict(headers or {}), params=list(params or []),
        ))

    def post(
        self,
        url: str,
        content_type: str,
        body: bytes,
        headers: Optional[Dict[str, str]] = None,
    ) -> RawResponse:
        return self.send(TransportRequest(
            method="POST", url=url, headers=dict(headers or {}),
            content_type=content_type, body=body,
        ))

    def put(
        self,
        url: str,
        content_type: str,
        body: bytes,
        headers: Optional[Dict[str, str]] = None,
    ) -> RawResponse:
        return self.send(TransportRequest(
            method="PUT", url=url, headers=dict(headers or {}),
            content_type=content_type, body=body,
        ))

    def delete(
        self,
        url: str,
        params: Optional[List[Tuple[str, str]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> RawResponse:
        return self.send(TransportRequest(
            method="DELETE", url=url, headers=dict(headers or {}), params=list(params or []),
        ))
