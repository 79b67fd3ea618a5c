"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

HTTP Basic credentials for the Mailjet API.
"""

from __future__ import annotations

import base64

from mailjet.exceptions import InvalidCredentialsError


class AuthContext:
    """
    API key/secret pair and the derived ``Authorization`` header value.

    The digest is computed once at construction; instances are read-only.

    Raises:
        InvalidCredentialsError: If either credential is empty, not a
            string, or cannot be encoded as UTF-8.
    """

    __slots__ = ("_api_key", "_api_secret", "_credential_digest")

    def __init__(self, api_key: str, api_secret: str) -> None:
        if not isinstance(api_key, str) or not api_key:
            raise InvalidCredentialsError("api_key is required")
        if not isinstance(api_secret, str) or not api_secret:
            raise InvalidCredentialsError("api_secret is required")

        try:
            raw = f"{api_key}:{api_secret}".encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidCredentialsError(
                "API credentials cannot be encoded as UTF-8"
            ) from e

        object.__setattr__(self, "_api_key", api_key)
        object.__setattr__(self, "_api_secret", api_secret)
        object.__setattr__(
            self, "_credential_digest", base64.b64encode(raw).decode("ascii")
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_secret(self) -> str:
        return self._api_secret

    @property
    def credential_digest(self) -> str:
        return self._credential_digest

    def authorization_header(self) -> str:
        """Value of the ``Authorization`` header sent with every call."""
        return "Basic " + self._credential_digest

    def __repr__(self) -> str:
        return f"AuthContext(api_key={self._api_key!r}, api_secret='***')"
