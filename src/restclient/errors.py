"""Exceptions raised by restclient."""

from typing import Optional


class RestClientError(Exception):
    """Base client error."""


class TransportError(RestClientError):
    """Transport/network layer error (connection, DNS, timeout, bad URL)."""


class HttpStatusError(RestClientError):
    """Response received with a status code of 400 or above."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"HTTP error: {status_code}")
        self.status_code = status_code
        self.body = body


class NoResponseError(RestClientError):
    """Decoding requested before any response was received."""

    def __init__(self, message: str = "No response to decode. Make a request first."):
        super().__init__(message)


class JsonDecodeError(RestClientError, ValueError):
    """Stored response body is not valid JSON."""

    def __init__(self, message: str):
        super().__init__(f"JSON decoding error: {message}")
        self.reason = message
