"""Build download requests and the yt-dlp arguments they map to."""

from __future__ import annotations

from typing import List, Sequence

from .models import DownloadRequest

VIDEO_CODECS = ("h264",)
AUDIO_CODECS = ("aac",)
OUTPUT_CONTAINER = "mp4"

SORT_FLAG = "-S"
MERGE_FLAG = "--merge-output-format"
NO_PLAYLIST_FLAG = "--no-playlist"


class StreamSelector:
    """
    Build a yt-dlp format-sort expression from codec preferences.

    Video codecs come first, then audio codecs, each in priority order:
      ("h264",), ("aac",) -> "vcodec:h264,acodec:aac"
    yt-dlp still falls back to other streams when a preferred codec is
    missing, so the expression never makes a download fail by itself.
    """

    def __init__(self, video_codecs: Sequence[str], audio_codecs: Sequence[str]):
        self.video_codecs = tuple(video_codecs)
        self.audio_codecs = tuple(audio_codecs)

    def build(self) -> str:
        fields = [f"vcodec:{c}" for c in self.video_codecs]
        fields.extend(f"acodec:{c}" for c in self.audio_codecs)
        return ",".join(fields)


def build(url: str, is_playlist: bool) -> DownloadRequest:
    return DownloadRequest(
        raw_url=url,
        is_playlist=is_playlist,
        skip_playlist_expansion=is_playlist,
        video_codec_preference=VIDEO_CODECS,
        audio_codec_preference=AUDIO_CODECS,
        output_container=OUTPUT_CONTAINER,
    )


def request_arguments(request: DownloadRequest) -> List[str]:
    """Return the downloader arguments for ``request``; the URL is always last."""
    selector = StreamSelector(
        request.video_codec_preference, request.audio_codec_preference
    )
    args = [SORT_FLAG, selector.build(), MERGE_FLAG, request.output_container]
    if request.skip_playlist_expansion:
        args.append(NO_PLAYLIST_FLAG)
    args.append(request.raw_url)
    return args


__all__ = [
    "StreamSelector",
    "build",
    "request_arguments",
    "NO_PLAYLIST_FLAG",
    "MERGE_FLAG",
    "SORT_FLAG",
]
