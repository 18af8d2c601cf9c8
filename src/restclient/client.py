"""Fluent REST client built on httpx.

RestClient holds a ClientConfig that the fluent setters mutate. Every request
reads the current configuration, performs exactly one HTTP exchange through a
short-lived httpx.Client, and classifies the outcome:

- a response body (stored as the last response and returned),
- a download completion flag when a download target is configured,
- or an exception from restclient.errors.

Example:
    >>> client = RestClient().set_base_url("https://api.example.com")
    >>> client.get("/users").decode_json()
"""

import dataclasses
import json
import logging
from typing import Any, Iterable, Optional, Union

import httpx

from restclient.config import ClientConfig
from restclient.errors import (
    HttpStatusError,
    JsonDecodeError,
    NoResponseError,
    TransportError,
)
from restclient.http.client import compose_url, create_client, encode_payload
from restclient.http.cookies import open_cookie_jar, save_cookie_jar
from restclient.http.download import prepare_download_path, stream_to_file
from restclient.http.headers import HeaderSpec, load_headers_from_file, normalize_headers

logger = logging.getLogger(__name__)


class RestClient:
    """HTTP client with chainable configuration and JSON helpers.

    Not safe for concurrent use: setters and requests on one handle must be
    serialized by the caller.

    Attributes:
        config: Configuration read on every request
        transport: Optional httpx transport used instead of the network
    """

    def __init__(
        self,
        cookie_file: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize client.

        Args:
            cookie_file: Path of the persisted cookie jar (overrides config)
            config: Prepared configuration, copied so the handle owns its own;
                a default one is created if omitted
            transport: httpx transport handed to every client this handle builds
        """
        self.config = dataclasses.replace(config) if config is not None else ClientConfig()
        self.config.headers = normalize_headers(self.config.headers)
        if cookie_file is not None:
            self.config.cookie_file = cookie_file
        self.transport = transport
        self._response: Optional[str] = None

    def set_base_url(self, base_url: Optional[str]) -> 'RestClient':
        self.config.base_url = base_url
        return self

    def set_use_cookies(self, use_cookies: bool = True) -> 'RestClient':
        self.config.use_cookies = use_cookies
        return self

    def set_user_agent(self, user_agent: Optional[str]) -> 'RestClient':
        self.config.user_agent = user_agent
        return self

    def set_headers(self, headers: Iterable[HeaderSpec]) -> 'RestClient':
        """Replace all request headers.

        Args:
            headers: (name, value) pairs, 'Name: value' strings, or a mapping

        Returns:
            self, for chaining
        """
        self.config.headers = normalize_headers(headers)
        return self

    def set_headers_from_file(self, header_file: str) -> 'RestClient':
        """Replace all request headers with those listed in a header file."""
        self.config.headers = load_headers_from_file(header_file)
        return self

    def download(self, download_path: Optional[str]) -> 'RestClient':
        """Send following response bodies to a file; None switches back to memory."""
        self.config.download_path = download_path
        return self

    def get(self, endpoint: str) -> 'RestClient':
        self.execute('GET', endpoint)
        return self

    def post(self, endpoint: str, data: Any = None) -> 'RestClient':
        self.execute('POST', endpoint, data)
        return self

    def put(self, endpoint: str, data: Any = None) -> 'RestClient':
        self.execute('PUT', endpoint, data)
        return self

    def delete(self, endpoint: str) -> 'RestClient':
        self.execute('DELETE', endpoint)
        return self

    @property
    def last_response(self) -> Optional[str]:
        return self._response

    def get_response(self) -> Optional[str]:
        """Return the raw body of the most recent successful request."""
        return self._response

    def decode_json(self) -> Any:
        """Decode the last response body as JSON.

        Returns:
            Decoded value (dict, list, scalar, or None for a literal null)

        Raises:
            NoResponseError: If no request has produced a response yet
            JsonDecodeError: If the body is not valid JSON
        """
        if self._response is None:
            raise NoResponseError()
        try:
            return json.loads(self._response)
        except json.JSONDecodeError as e:
            raise JsonDecodeError(e.msg) from e

    def execute(self, method: str, endpoint: str, data: Any = None) -> Union[str, bool]:
        """Send one HTTP request and interpret the response.

        Args:
            method: HTTP method, not validated
            endpoint: Absolute URL or path relative to the base URL
            data: Payload to JSON-encode as the request body

        Returns:
            Response body text, or for downloads True if any bytes were
            written and False if the response body was empty

        Raises:
            TransportError: On connection, DNS, timeout or URL errors
            HttpStatusError: If the response status is 400 or above
        """
        config = self.config
        url = compose_url(config.base_url, endpoint)
        content = encode_payload(data)

        jar = open_cookie_jar(config.cookie_file) if config.use_cookies else None
        dest_path = None
        if config.download_path:
            dest_path = prepare_download_path(config.download_path)

        logger.debug(f"{method.upper()} {url}")

        try:
            with create_client(config, cookies=jar, transport=self.transport) as client:
                with client.stream(
                    method.upper(),
                    url,
                    content=content,
                    headers=config.headers,
                ) as response:
                    logger.debug(f"{method.upper()} {url} -> {response.status_code}")

                    if jar is not None:
                        save_cookie_jar(jar)

                    if response.status_code >= 400:
                        response.read()
                        raise HttpStatusError(response.status_code, response.text or None)

                    if dest_path is not None:
                        written = stream_to_file(
                            response,
                            dest_path,
                            chunk_size=config.chunk_size,
                            show_progress=config.show_progress,
                        )
                        return written > 0

                    response.read()
                    body = response.text
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"Transport error: {e}") from e

        self._response = body
        return body
