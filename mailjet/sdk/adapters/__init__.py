"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

SDK Transport Adapters.
"""

from mailjet.sdk.adapters.base import BaseAdapter, RawResponse, TransportRequest
from mailjet.sdk.adapters.http import RequestsAdapter
from mailjet.sdk.adapters.mock import MockAdapter

__all__ = [
    "BaseAdapter",
    "TransportRequest",
    "RawResponse",
    "RequestsAdapter",
    "MockAdapter",
]
