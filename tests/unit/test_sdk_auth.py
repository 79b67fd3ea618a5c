"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Tests for API credentials.
"""

import base64

import pytest

from mailjet.exceptions import ErrorKind, InvalidCredentialsError
from mailjet.sdk.auth import AuthContext


class TestAuthContext:
    @pytest.mark.parametrize(
        "key,secret",
        [
            ("4e4f93d73a19e4c61210aa2e7cddd193", "e200b7563144d92754ed7b71e06a027c"),
            ("k", "s"),
            ("clé", "sécret:with:colons"),
        ],
    )
    def test_header_round_trips(self, key, secret):
        auth = AuthContext(key, secret)
        header = auth.authorization_header()

        scheme, _, digest = header.partition(" ")
        assert scheme == "Basic"
        assert base64.b64decode(digest).decode("utf-8") == f"{key}:{secret}"

    def test_header_is_stable(self):
        auth = AuthContext("key", "secret")
        assert auth.authorization_header() == auth.authorization_header()
        assert auth.authorization_header() == "Basic " + auth.credential_digest

    def test_accessors(self):
        auth = AuthContext("key", "secret")
        assert auth.api_key == "key"
        assert auth.api_secret == "secret"

    def test_immutable(self):
        auth = AuthContext("key", "secret")
        with pytest.raises(AttributeError):
            auth._api_key = "other"

    def test_repr_hides_secret(self):
        text = repr(AuthContext("key", "s3cr3t-value"))
        assert "s3cr3t-value" not in text
        assert "***" in text

    @pytest.mark.parametrize("key,secret", [("", "s"), ("k", ""), (None, "s"), ("k", None)])
    def test_missing_credentials_raise(self, key, secret):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            AuthContext(key, secret)
        assert exc_info.value.kind is ErrorKind.INVALID_CREDENTIALS

    def test_unencodable_credentials_raise(self):
        with pytest.raises(InvalidCredentialsError):
            AuthContext("key\ud800", "secret")
