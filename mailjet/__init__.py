"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Mailjet REST client - authenticated JSON-over-HTTPS access to the Mailjet v3 API.

Quick start::

    from mailjet import MailjetClient, MailjetRequest, Resource
    client = MailjetClient("api-key", "api-secret")
    response = client.get(MailjetRequest(Resource.CONTACT, id=1))
"""

from mailjet._version import __version__
from mailjet.exceptions import (
    EncodingError,
    ErrorKind,
    InvalidCredentialsError,
    InvalidUrlError,
    MailjetError,
    ResponseParseError,
    TransportError,
)
from mailjet.resources import Resource, resolve_resource
from mailjet.sdk import (
    AuthContext,
    DebugMode,
    MailjetClient,
    MailjetRequest,
    MailjetResponse,
)

__all__ = [
    "__version__",
    "MailjetClient",
    "MailjetRequest",
    "MailjetResponse",
    "AuthContext",
    "DebugMode",
    "Resource",
    "resolve_resource",
    "ErrorKind",
    "MailjetError",
    "InvalidCredentialsError",
    "InvalidUrlError",
    "EncodingError",
    "TransportError",
    "ResponseParseError",
]
