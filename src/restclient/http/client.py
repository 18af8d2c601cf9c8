"""HTTP client utilities using httpx directly.

This module provides helper functions for composing request URLs, encoding
JSON payloads, and creating httpx clients with proper configuration from
ClientConfig objects.
"""

import json
import re
from http.cookiejar import CookieJar
from typing import Any, Optional

import httpx

from restclient.config import ClientConfig

ABSOLUTE_URL_RE = re.compile(r'^(?:f|ht)tps?://', re.IGNORECASE)


def is_absolute_url(endpoint: str) -> bool:
    """Check whether an endpoint is a full http(s) or ftp(s) URL."""
    return bool(ABSOLUTE_URL_RE.match(endpoint))


def compose_url(base_url: Optional[str], endpoint: str) -> str:
    """Build the request target from the base URL and an endpoint.

    Absolute endpoints are returned unchanged. Relative endpoints are joined
    to the base URL with exactly one slash between them. An unset base URL is
    treated as empty, which produces a relative URL the transport rejects.

    Args:
        base_url: Prefix for relative endpoints
        endpoint: Absolute URL or path segment

    Returns:
        URL to request

    Example:
        >>> compose_url("https://api.example.com/v1/", "/users")
        'https://api.example.com/v1/users'
    """
    if is_absolute_url(endpoint):
        return endpoint
    return (base_url or '').rstrip('/') + '/' + endpoint.lstrip('/')


def has_payload(data: Any) -> bool:
    """Check whether data should be sent as a request body.

    None and empty strings, bytes and containers mean "no body". Other falsy
    values such as 0 or False are valid JSON documents and are sent.
    """
    if data is None:
        return False
    if isinstance(data, (str, bytes, list, tuple, dict)) and not data:
        return False
    return True


def encode_payload(data: Any) -> Optional[bytes]:
    """JSON-encode a request payload.

    Args:
        data: Any JSON-representable value

    Returns:
        UTF-8 encoded JSON, or None when there is nothing to send
    """
    if not has_payload(data):
        return None
    return json.dumps(data).encode('utf-8')


def create_client(
    config: ClientConfig,
    cookies: Optional[CookieJar] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create an httpx client from configuration.

    Args:
        config: Configuration object
        cookies: Cookie jar the client reads from and stores new cookies into
        transport: Optional transport replacing the network layer

    Returns:
        Configured httpx.Client instance

    Example:
        >>> config = ClientConfig()
        >>> with create_client(config) as client:
        ...     response = client.get(url)
    """
    # Build default headers
    headers = {}
    if config.user_agent:
        headers['User-Agent'] = config.user_agent

    return httpx.Client(
        headers=headers,
        cookies=cookies,
        timeout=config.timeout,
        verify=config.verify_ssl,
        follow_redirects=config.follow_redirects,
        http2=config.http2,
        proxy=config.proxy,
        transport=transport,
        trust_env=False,
    )
