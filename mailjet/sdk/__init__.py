"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Mailjet SDK - public API surface.

Quick start::

    from mailjet.sdk import MailjetClient, MailjetRequest
    client = MailjetClient("api-key", "api-secret")
    response = client.post(MailjetRequest("contactslist", body={"Name": "VIP"}))
"""

from mailjet.sdk.adapters import BaseAdapter, MockAdapter, RawResponse, RequestsAdapter, TransportRequest
from mailjet.sdk.auth import AuthContext
from mailjet.sdk.client import DebugMode, MailjetClient
from mailjet.sdk.request import MailjetRequest, build_path, build_query_string
from mailjet.sdk.request_logger import (
    ConsoleRequestLogger,
    NullRequestLogger,
    RequestLogger,
    StructlogRequestLogger,
)
from mailjet.sdk.response import MailjetResponse

__all__ = [
    "MailjetClient",
    "DebugMode",
    "MailjetRequest",
    "MailjetResponse",
    "AuthContext",
    "build_path",
    "build_query_string",
    "RequestLogger",
    "NullRequestLogger",
    "ConsoleRequestLogger",
    "StructlogRequestLogger",
    "BaseAdapter",
    "TransportRequest",
    "RawResponse",
    "RequestsAdapter",
    "MockAdapter",
]
