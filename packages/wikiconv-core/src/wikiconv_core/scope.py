"""Folder-scope policy deciding which notes are converted automatically."""

from __future__ import annotations

from collections.abc import Iterable

ROOT_SCOPE = "/"
MARKDOWN_EXTENSION = "md"


def normalize_scope(folder: str) -> str:
    """Strip whitespace and trailing slashes; the root sentinel is kept as is."""
    folder = folder.strip()
    if folder == ROOT_SCOPE:
        return folder
    return folder.rstrip("/")


def is_in_scope(path: str, extension: str, scopes: Iterable[str]) -> bool:
    """Return True if a note at ``path`` is eligible for automatic conversion.

    Only markdown notes qualify. A scope matches the folder itself or any
    descendant, never a sibling sharing a prefix: ``"blog"`` covers
    ``"blog/x.md"`` but not ``"blogposts/x.md"``. ``"/"`` covers the whole
    vault and an empty scope list covers nothing.
    """
    if extension != MARKDOWN_EXTENSION:
        return False

    folders = [normalize_scope(f) for f in scopes]
    if ROOT_SCOPE in folders:
        return True

    return any(
        path == folder or path.startswith(folder + "/")
        for folder in folders
        if folder
    )
