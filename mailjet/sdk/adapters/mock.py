"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from mailjet.sdk.adapters.base import BaseAdapter, RawResponse, TransportRequest


class MockAdapter(BaseAdapter):
    """In-memory mock adapter for unit tests.

    Args:
        responses: Mapping from ``(method, url)`` tuples to ``RawResponse``
            instances. ``url`` excludes the query string.

    Example::

        adapter = MockAdapter({
            ("POST", "https://api.mailjet.com/v3/contactslist"):
                RawResponse(status_code=201, text='{"ID": 42}'),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], RawResponse]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], RawResponse] = dict(responses or {})
        self._sent: List[TransportRequest] = []

    def add_response(self, method: str, url: str, status_code: int, text: str = "") -> None:
        """Register a canned response for ``method`` on ``url``."""
        self._responses[(method.upper(), url)] = RawResponse(status_code=status_code, text=text)

    def send(self, request: TransportRequest) -> RawResponse:
        self._sent.append(request)
        key = (request.method.upper(), request.url)
        if key in self._responses:
            canned = self._responses[key]
            return RawResponse(
                status_code=canned.status_code,
                text=canned.text,
                headers=dict(canned.headers),
                method=request.method,
                url=request.full_url,
                elapsed_ms=canned.elapsed_ms,
            )
        return RawResponse(
            status_code=404,
            text='{"error": "not mocked"}',
            method=request.method,
            url=request.full_url,
        )

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def sent_requests(self) -> List[TransportRequest]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)
