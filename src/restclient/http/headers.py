"""Header parsing utilities.

Headers are kept as an ordered list of (name, value) pairs so that repeated
names survive and are sent in the order given.
"""

from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple, Union

HeaderPair = Tuple[str, str]
HeaderSpec = Union[str, HeaderPair]


def parse_header_line(line: str) -> Optional[HeaderPair]:
    """Split a 'Name: value' line into a pair.

    Args:
        line: Raw header line

    Returns:
        (name, value) tuple, or None if the line has no colon
    """
    if ':' not in line:
        return None
    name, value = line.split(':', 1)
    return name.strip(), value.strip()


def normalize_headers(
    headers: Union[Mapping[str, str], Iterable[HeaderSpec], None],
) -> List[HeaderPair]:
    """Convert any accepted header form into an ordered list of pairs.

    Accepts a mapping, an iterable of (name, value) pairs, or an iterable of
    'Name: value' strings (the form curl-style tools use). Strings without a
    colon are dropped. No deduplication or validation is performed.

    Args:
        headers: Headers in any accepted form

    Returns:
        List of (name, value) tuples
    """
    if not headers:
        return []

    if isinstance(headers, Mapping):
        return [(str(name), str(value)) for name, value in headers.items()]

    pairs = []
    for item in headers:
        if isinstance(item, str):
            pair = parse_header_line(item)
            if pair is not None:
                pairs.append(pair)
        else:
            name, value = item
            pairs.append((str(name), str(value)))
    return pairs


def load_headers_from_file(header_file: str) -> List[HeaderPair]:
    """Load HTTP headers from file.

    File format is simple key: value pairs, one per line.

    Args:
        header_file: Path to header file

    Returns:
        List of (name, value) tuples in file order

    Example file format:
        Accept: application/json
        Authorization: Bearer token123
        X-Custom-Header: value
    """
    header_path = Path(header_file)

    if not header_path.exists():
        return []

    lines = []
    with open(header_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()

            # Skip comments and empty lines
            if not line or line.startswith('#'):
                continue

            lines.append(line)

    return normalize_headers(lines)
