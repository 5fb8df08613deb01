"""Playlist detection for user-supplied URLs.

The check is a plain substring test on ``list=``. The URL is not parsed, so
``list=`` inside a path segment or fragment also counts as a playlist; the
downloader is told to stay on the single referenced video either way.
"""

from __future__ import annotations

from .models import UrlClassification

PLAYLIST_MARKER = "list="


def is_playlist_url(url: str) -> bool:
    return PLAYLIST_MARKER in url


def classify(url: str) -> UrlClassification:
    return UrlClassification(is_playlist=is_playlist_url(url or ""))


__all__ = ["classify", "is_playlist_url", "PLAYLIST_MARKER"]
