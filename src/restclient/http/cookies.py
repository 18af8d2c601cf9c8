"""Cookie file utilities.

Supports the Netscape cookie file format used by browsers and tools like curl.
The same file is read before a request and written back after it.
"""

import logging
from http.cookiejar import Cookie, MozillaCookieJar
from pathlib import Path
from typing import List

from restclient.utils.file import ensure_dir

logger = logging.getLogger(__name__)

HTTPONLY_PREFIX = '#HttpOnly_'
NETSCAPE_HEADER = (
    '# Netscape HTTP Cookie File\n'
    '# This is a generated file! Do not edit.\n\n'
)


def load_cookies_from_file(cookie_file: str) -> List[Cookie]:
    """Load cookies from Netscape cookie file format.

    The Netscape cookie format is:
    # domain flag path secure expiration name value

    Lines curl writes for HttpOnly cookies carry a '#HttpOnly_' prefix on the
    domain and are kept. An expiration of 0 or an empty field marks a session
    cookie.

    Args:
        cookie_file: Path to cookie file

    Returns:
        List of Cookie objects

    Example file format:
        # Netscape HTTP Cookie File
        .example.com    TRUE    /    FALSE    1735689600    sessionid    abc123
    """
    cookies = []
    cookie_path = Path(cookie_file)

    if not cookie_path.exists():
        return cookies

    with open(cookie_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.rstrip('\r\n')

            http_only = line.startswith(HTTPONLY_PREFIX)
            if http_only:
                line = line[len(HTTPONLY_PREFIX):]

            # Skip comments and empty lines
            if not line.strip() or line.startswith('#'):
                continue

            parts = line.split('\t')
            if len(parts) < 7:
                continue

            domain, flag, path, secure, expiration, name, value = parts[:7]

            try:
                expires = int(expiration) or None
            except ValueError:
                expires = None

            cookie = Cookie(
                version=0,
                name=name,
                value=value,
                port=None,
                port_specified=False,
                domain=domain,
                domain_specified=flag.upper() == 'TRUE',
                domain_initial_dot=domain.startswith('.'),
                path=path,
                path_specified=True,
                secure=secure.upper() == 'TRUE',
                expires=expires,
                discard=expires is None,
                comment=None,
                comment_url=None,
                rest={'HttpOnly': None} if http_only else {},
                rfc2109=False,
            )
            cookies.append(cookie)

    return cookies


def open_cookie_jar(cookie_file: str) -> MozillaCookieJar:
    """Create a cookie jar bound to a file and fill it from that file.

    A missing file yields an empty jar; the file is created on save.

    Args:
        cookie_file: Path used for both reading and writing

    Returns:
        MozillaCookieJar holding the persisted cookies
    """
    jar = MozillaCookieJar(cookie_file)
    for cookie in load_cookies_from_file(cookie_file):
        jar.set_cookie(cookie)
    logger.debug(f"Loaded {len(jar)} cookies from {cookie_file}")
    return jar


def _format_cookie_line(cookie: Cookie) -> str:
    domain = cookie.domain
    if cookie.has_nonstandard_attr('HttpOnly'):
        domain = HTTPONLY_PREFIX + domain

    name, value = cookie.name, cookie.value
    if value is None:
        # Nameless cookie: the Netscape format stores the value in the name slot
        name, value = '', cookie.name

    return '\t'.join([
        domain,
        'TRUE' if cookie.domain.startswith('.') else 'FALSE',
        cookie.path,
        'TRUE' if cookie.secure else 'FALSE',
        str(cookie.expires) if cookie.expires is not None else '',
        name,
        value,
    ])


def save_cookie_jar(jar: MozillaCookieJar) -> None:
    """Write every cookie in the jar, session cookies included, to its file.

    HttpOnly cookies are written with curl's '#HttpOnly_' domain prefix so the
    flag survives a load/save cycle through load_cookies_from_file.

    Args:
        jar: Jar created by open_cookie_jar
    """
    cookie_path = Path(jar.filename)
    ensure_dir(cookie_path.parent)

    with open(cookie_path, 'w', encoding='utf-8') as f:
        f.write(NETSCAPE_HEADER)
        for cookie in jar:
            f.write(_format_cookie_line(cookie) + '\n')

    logger.debug(f"Saved {len(jar)} cookies to {jar.filename}")
