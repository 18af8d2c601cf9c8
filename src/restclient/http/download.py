"""Streaming a response body to disk."""

import logging
from pathlib import Path
from typing import Optional

import httpx
from tqdm import tqdm

from restclient.utils.file import ensure_dir

logger = logging.getLogger(__name__)


def prepare_download_path(download_path: str) -> Path:
    """Resolve the download target and create its parent directory.

    Args:
        download_path: Destination file path

    Returns:
        Destination as a Path
    """
    dest_path = Path(download_path)
    ensure_dir(dest_path.parent)
    return dest_path


def _content_length(response: httpx.Response) -> Optional[int]:
    try:
        return int(response.headers['Content-Length'])
    except (KeyError, ValueError):
        return None


def stream_to_file(
    response: httpx.Response,
    dest_path: Path,
    chunk_size: int = 64 * 1024,
    show_progress: bool = False,
) -> int:
    """Write a streamed response body to a file.

    The file is truncated before writing and closed on every exit path,
    including errors raised by the transport mid-stream.

    Args:
        response: Response opened with httpx.Client.stream()
        dest_path: Destination file path
        chunk_size: Bytes per chunk
        show_progress: Whether to show a progress bar

    Returns:
        Number of bytes written
    """
    written = 0
    with open(dest_path, 'wb') as f, tqdm(
        total=_content_length(response),
        desc=dest_path.name,
        unit='B',
        unit_scale=True,
        disable=not show_progress,
    ) as pbar:
        for chunk in response.iter_bytes(chunk_size=chunk_size):
            f.write(chunk)
            written += len(chunk)
            pbar.update(len(chunk))

    logger.debug(f"Downloaded {written} bytes: {response.url} -> {dest_path}")
    return written
