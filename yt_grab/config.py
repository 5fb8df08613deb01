"""Configuration for the interactive downloader."""

from __future__ import annotations

import shlex
import sys
from dataclasses import dataclass, field
from typing import List

DEFAULT_TOOL_NAME = "yt-dlp"


def _pip_upgrade() -> List[str]:
    return [sys.executable, "-m", "pip", "install", "-U", "yt-dlp"]


def default_install_commands() -> List[List[str]]:
    return [
        ["sudo", "apt", "update", "-y"],
        ["sudo", "apt", "install", "-y", "python3-pip", "ffmpeg"],
        _pip_upgrade(),
    ]


def default_update_commands() -> List[List[str]]:
    return [_pip_upgrade()]


@dataclass
class AppConfig:
    tool_name: str = DEFAULT_TOOL_NAME
    install_commands: List[List[str]] = field(default_factory=default_install_commands)
    update_commands: List[List[str]] = field(default_factory=default_update_commands)
    clear_screen: bool = True
    pause_seconds: float = 1.0  # after an invalid choice and before fetching
    log_level: str = "WARNING"

    def __post_init__(self):
        # Accept tuples / strings from callers; subprocess wants lists of str
        self.install_commands = [a for a in map(self._as_argv, self.install_commands) if a]
        self.update_commands = [a for a in map(self._as_argv, self.update_commands) if a]
        self.log_level = str(self.log_level).upper()
        if self.pause_seconds < 0:
            self.pause_seconds = 0.0

    @staticmethod
    def _as_argv(command) -> List[str]:
        if isinstance(command, str):
            return shlex.split(command)
        return [str(part) for part in command]
