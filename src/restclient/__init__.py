"""
restclient - A fluent wrapper around httpx for JSON REST APIs.

This package provides a small chainable client for GET/POST/PUT/DELETE
requests with optional cookie-jar persistence, file downloads, and JSON
response decoding.
"""

__version__ = "1.0.0"

from restclient.client import RestClient
from restclient.config import DEFAULT_COOKIE_FILE, ClientConfig
from restclient.errors import (
    HttpStatusError,
    JsonDecodeError,
    NoResponseError,
    RestClientError,
    TransportError,
)

__all__ = [
    "RestClient",
    "ClientConfig",
    "DEFAULT_COOKIE_FILE",
    "RestClientError",
    "TransportError",
    "HttpStatusError",
    "NoResponseError",
    "JsonDecodeError",
    "__version__",
]
