"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Request description and URL construction.

A ``MailjetRequest`` names the target resource, an optional identifier,
ordered filters and an optional JSON body. The module-level builders turn
it into the path, query string, query parameters and payload bytes that
the client sends.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote_plus

from mailjet.exceptions import EncodingError, InvalidUrlError

JSON_CONTENT_TYPE = "application/json"

Filter = Tuple[str, Any]


@dataclass(frozen=True)
class MailjetRequest:
    """Immutable description of one API call.

    Example::

        request = MailjetRequest(Resource.CONTACTSLIST).filter("Limit", 10)
        request = MailjetRequest(Resource.CONTACT, id=42)
        request = MailjetRequest(Resource.CONTACTSLIST, body={"Name": "VIP"})

    Args:
        resource: Wire path segment of the target collection.
        id: Optional identifier of a single element of the collection.
        filters: Ordered ``(key, value)`` pairs; duplicate keys are kept.
            A mapping is accepted and read in iteration order.
        body: JSON-serializable payload for POST and PUT.
    """
    resource: str
    id: Optional[Union[str, int]] = None
    filters: Tuple[Filter, ...] = ()
    body: Any = None

    def __post_init__(self) -> None:
        filters = self.filters
        if isinstance(filters, Mapping):
            filters = filters.items()
        pairs = []
        for entry in filters:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise TypeError(f"filter must be a (key, value) pair, got {entry!r}")
            pairs.append((entry[0], entry[1]))
        object.__setattr__(self, "filters", tuple(pairs))

    def filter(self, key: str, value: Any) -> MailjetRequest:
        """Return a copy of this request with one more filter appended."""
        return replace(self, filters=self.filters + ((key, value),))

    def with_id(self, id: Union[str, int]) -> MailjetRequest:
        """Return a copy of this request targeting a single element."""
        return replace(self, id=id)

    def with_body(self, body: Any) -> MailjetRequest:
        """Return a copy of this request carrying ``body``."""
        return replace(self, body=body)

    @property
    def content_type(self) -> str:
        return JSON_CONTENT_TYPE

    @property
    def payload(self) -> Any:
        """Body to send for writes; an absent body is an empty object."""
        return {} if self.body is None else self.body

    def build_url(self) -> str:
        return build_path(self)

    def query_string(self) -> str:
        return build_query_string(self)


def build_path(request: MailjetRequest) -> str:
    """
    Build the path of ``request`` relative to the API base URL.
    
    Returns:
        ``"/<resource>"`` or ``"/<resource>/<id>"``.
    
    Raises:
        InvalidUrlError: If the resource is missing.
    """
    if not isinstance(request.resource, str) or not request.resource:
        raise InvalidUrlError("Request resource is required")
    path = "/" + request.resource
    if request.id is not None:
        path += "/" + str(request.id)
    return path


def build_query_string(request: MailjetRequest) -> str:
    """
    Build the percent-encoded query string of ``request``.
    
    Filters keep their original order and repeated keys are emitted as
    separate pairs.
    
    Returns:
        ``""`` without filters, otherwise ``"?k1=v1&k2=v2..."``.
    
    Raises:
        EncodingError: If a key or value cannot be encoded as UTF-8.
    """
    if not request.filters:
        return ""
    pairs = [
        f"{_quote(key)}={_quote(value)}" for key, value in query_params(request)
    ]
    return "?" + "&".join(pairs)


def query_params(request: MailjetRequest) -> List[Tuple[str, str]]:
    """Return the filters as ordered text pairs, ready for the transport."""
    params = []
    for key, value in request.filters:
        key_text, value_text = _as_text(key), _as_text(value)
        _check_encodable(key_text)
        _check_encodable(value_text)
        params.append((key_text, value_text))
    return params


def build_payload(request: MailjetRequest) -> bytes:
    """
    Serialize the request body to UTF-8 JSON bytes.
    
    Raises:
        EncodingError: If the body is not JSON serializable or not encodable.
    """
    try:
        return json.dumps(request.payload, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Request body cannot be encoded as UTF-8: {e}") from e
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Request body is not JSON serializable: {e}") from e


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _check_encodable(text: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Filter cannot be encoded as UTF-8: {text!r}") from e


def _quote(text: str) -> str:
    try:
        return quote_plus(text, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Filter cannot be encoded as UTF-8: {text!r}") from e
