"""File operation utilities."""

from pathlib import Path


def ensure_dir(path: Path, mode: int = 0o777) -> Path:
    """Ensure directory exists, creating it and any parents if necessary.

    Args:
        path: Directory path to ensure exists
        mode: Permission bits for created directories (umask still applies)

    Returns:
        The path object
    """
    path.mkdir(mode=mode, parents=True, exist_ok=True)
    return path
