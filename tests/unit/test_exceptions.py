"""
Unit tests for exception hierarchy.
"""

import pytest

from mailjet.exceptions import (
    ConfigurationError,
    EncodingError,
    ErrorKind,
    InvalidConfigurationError,
    InvalidCredentialsError,
    InvalidUrlError,
    MailjetError,
    ResponseParseError,
    TransportError,
    UnknownResourceError,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correctly defined."""
    
    def test_base_exception(self):
        error = MailjetError("test error")
        assert isinstance(error, Exception)
        assert str(error) == "test error"
    
    @pytest.mark.parametrize(
        "cls",
        [
            InvalidCredentialsError,
            InvalidUrlError,
            EncodingError,
            TransportError,
            ResponseParseError,
            ConfigurationError,
            UnknownResourceError,
        ],
    )
    def test_errors_inherit_from_base(self, cls):
        assert issubclass(cls, MailjetError)
    
    def test_configuration_errors(self):
        assert issubclass(InvalidConfigurationError, ConfigurationError)


class TestErrorKinds:
    @pytest.mark.parametrize(
        "error,kind",
        [
            (InvalidCredentialsError("x"), ErrorKind.INVALID_CREDENTIALS),
            (InvalidUrlError("x"), ErrorKind.INVALID_URL),
            (EncodingError("x"), ErrorKind.ENCODING),
            (TransportError("x"), ErrorKind.TRANSPORT),
            (ResponseParseError("x"), ErrorKind.RESPONSE_PARSE),
            (InvalidConfigurationError("x"), ErrorKind.CONFIGURATION),
            (UnknownResourceError("x"), ErrorKind.UNKNOWN_RESOURCE),
        ],
    )
    def test_every_error_carries_its_kind(self, error, kind):
        assert error.kind is kind
    
    def test_kinds_are_matchable(self):
        labels = {ErrorKind.TRANSPORT: "network", ErrorKind.RESPONSE_PARSE: "bad body"}

        def describe(error: MailjetError) -> str:
            return labels.get(error.kind, "request")

        assert describe(TransportError("down")) == "network"
        assert describe(ResponseParseError("oops")) == "bad body"
        assert describe(InvalidUrlError("x")) == "request"
    
    def test_transport_error_keeps_original(self):
        original = OSError("refused")
        error = TransportError("connection failed", original=original)
        assert error.original is original
    
    def test_response_parse_error_details(self):
        error = ResponseParseError("bad", status_code=500, text="<html>")
        assert error.status_code == 500
        assert error.text == "<html>"
