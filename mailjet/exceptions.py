"""
Exception hierarchy for the Mailjet REST client.

All custom exceptions inherit from MailjetError base class. Every exception
carries an ``ErrorKind`` so callers can branch on ``err.kind`` instead of
catching individual classes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the client."""

    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_URL = "invalid_url"
    ENCODING = "encoding"
    TRANSPORT = "transport"
    RESPONSE_PARSE = "response_parse"
    CONFIGURATION = "configuration"
    UNKNOWN_RESOURCE = "unknown_resource"


class MailjetError(Exception):
    """Base exception for all Mailjet client errors."""
    kind: ErrorKind


# Client construction errors
class InvalidCredentialsError(MailjetError):
    """Raised when the API key or secret is empty or malformed."""
    kind = ErrorKind.INVALID_CREDENTIALS


# Request construction errors
class InvalidUrlError(MailjetError):
    """Raised when base URL and resource path do not form a well-formed URL."""
    kind = ErrorKind.INVALID_URL


class EncodingError(MailjetError):
    """Raised when a filter, body or header cannot be encoded as text."""
    kind = ErrorKind.ENCODING


# Dispatch errors
class TransportError(MailjetError):
    """Raised when the transport fails (connection, TLS, timeout)."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class ResponseParseError(MailjetError):
    """Raised when a non-empty response body is not valid JSON."""
    kind = ErrorKind.RESPONSE_PARSE

    def __init__(self, message: str, status_code: int = 0, text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.text = text


# Configuration errors
class ConfigurationError(MailjetError):
    """Base exception for configuration-related errors."""
    kind = ErrorKind.CONFIGURATION


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


# Resource catalog errors
class UnknownResourceError(MailjetError):
    """Raised when a resource name is not in the catalog."""
    kind = ErrorKind.UNKNOWN_RESOURCE
