"""Configuration management for restclient."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

DEFAULT_COOKIE_FILE = "/tmp/rest_client_cookies.txt"


def default_headers() -> List[Tuple[str, str]]:
    """Headers sent with every request unless replaced."""
    return [("Content-Type", "application/json")]


@dataclass
class ClientConfig:
    """Configuration held by a RestClient handle.

    Every field is read again on each request, so changes made through the
    fluent setters apply to the next call and persist until changed again.
    """

    # Request composition
    base_url: Optional[str] = None
    headers: List[Tuple[str, str]] = field(default_factory=default_headers)
    user_agent: Optional[str] = None

    # Cookie jar persistence (Netscape format)
    use_cookies: bool = False
    cookie_file: str = DEFAULT_COOKIE_FILE

    # Download target; response body goes to this file instead of memory
    download_path: Optional[str] = None
    chunk_size: int = 64 * 1024
    show_progress: bool = False

    # HTTP settings
    timeout: float = 300  # seconds
    verify_ssl: bool = True
    proxy: Optional[str] = None
    follow_redirects: bool = False
    http2: bool = False
