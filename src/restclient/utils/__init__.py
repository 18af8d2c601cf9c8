"""Utility functions for restclient."""

from restclient.utils.file import ensure_dir

__all__ = [
    "ensure_dir",
]
