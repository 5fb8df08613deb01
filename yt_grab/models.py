from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Core data models for the download menu


@dataclass(frozen=True)
class UrlClassification:
    is_playlist: bool


@dataclass(frozen=True)
class DownloadRequest:
    raw_url: str
    is_playlist: bool
    skip_playlist_expansion: bool
    video_codec_preference: Tuple[str, ...] = ("h264",)
    audio_codec_preference: Tuple[str, ...] = ("aac",)
    output_container: str = "mp4"

    def __post_init__(self):
        # Never expand a playlist: only the referenced video is fetched
        if self.skip_playlist_expansion != self.is_playlist:
            raise ValueError(
                "skip_playlist_expansion must match is_playlist "
                f"(got {self.skip_playlist_expansion} / {self.is_playlist})"
            )


@dataclass(frozen=True)
class InvocationResult:
    exit_code: int
    succeeded: bool

    @classmethod
    def from_exit_code(cls, exit_code: int) -> "InvocationResult":
        return cls(exit_code=exit_code, succeeded=exit_code == 0)

    def __post_init__(self):
        if self.succeeded != (self.exit_code == 0):
            raise ValueError(
                f"succeeded={self.succeeded} does not match exit code {self.exit_code}"
            )


class MenuChoice(Enum):
    INSTALL_TOOLS = "1"
    DOWNLOAD = "2"
    UPDATE_TOOL = "3"
    EXIT = "4"
    INVALID = "invalid"


class SessionState(Enum):
    MENU_DISPLAYED = "menu_displayed"
    AWAITING_CHOICE = "awaiting_choice"
    INSTALLING = "installing"
    DOWNLOADING = "downloading"
    UPDATING = "updating"
    EXITING = "exiting"
    EXITED = "exited"


__all__ = [
    "UrlClassification",
    "DownloadRequest",
    "InvocationResult",
    "MenuChoice",
    "SessionState",
]
