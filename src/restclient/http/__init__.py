"""HTTP infrastructure for restclient.

Uses httpx directly; cookie files and header files use the formats curl reads.
"""

from restclient.http.client import (
    compose_url,
    create_client,
    encode_payload,
    is_absolute_url,
)
from restclient.http.cookies import load_cookies_from_file, open_cookie_jar, save_cookie_jar
from restclient.http.download import prepare_download_path, stream_to_file
from restclient.http.headers import load_headers_from_file, normalize_headers

__all__ = [
    "compose_url",
    "create_client",
    "encode_payload",
    "is_absolute_url",
    "load_cookies_from_file",
    "open_cookie_jar",
    "save_cookie_jar",
    "prepare_download_path",
    "stream_to_file",
    "load_headers_from_file",
    "normalize_headers",
]
