"""
Utility functions and errors for the OneTimeSecret API.
"""

from typing import Optional
from urllib.parse import quote


class OneTimeSecretError(RuntimeError):
    """
    Base class of all errors raised by the client. The http method and url of the
    failed call, when known, are kept as attributes and shown in the message.
    """

    def __init__(self, message, method=None, url=None):
        super().__init__(message)
        self.method = method
        self.url = url

    def __str__(self):
        details = ", ".join(
            f"{key.replace('_', ' ').title()}: {value}"
            for key, value in (("method", self.method), ("url", self.url))
            if value
        )
        return f"{self.args[0]} ({details})" if details else self.args[0]


class TransportError(OneTimeSecretError):
    """
    The request could not be built or sent, or no response was received.
    """


class ReadError(OneTimeSecretError):
    """
    A response was received, but its body could not be read in full.
    """


class DecodeError(OneTimeSecretError):
    """
    The response body was read, but could not be decoded into the expected shape.
    The undecodable body is kept as `body` for inspection.
    """

    def __init__(self, message, method=None, url=None, body: Optional[str] = None):
        super().__init__(message, method, url)
        self.body = body


class ServiceUnavailable(OneTimeSecretError):
    """
    The status endpoint reported that the OneTimeSecret servers are offline.
    """

    def __init__(self, method=None, url=None):
        super().__init__("server is offline, try again later", method, url)


def create_uri(base: str, route: str) -> str:
    """
    Joins the api base url and a route relative to it.
    """
    return f"{base.rstrip('/')}/{route.lstrip('/')}"


def quote_key(key: str) -> str:
    """
    Quotes a secret or metadata key so that it stays a single path segment.
    """
    return quote(key, safe="")
