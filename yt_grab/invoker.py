"""Run the external downloader and maintenance commands as subprocesses."""

from __future__ import annotations

import importlib.util
import shutil
import subprocess
import sys
from typing import List, Optional, Protocol, Sequence

from .builder import request_arguments
from .config import AppConfig
from .logging_utils import get_logger
from .models import DownloadRequest, InvocationResult

EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


class Invoker(Protocol):
    def invoke(self, request: DownloadRequest) -> InvocationResult: ...

    def run_command(self, argv: Sequence[str]) -> InvocationResult: ...


def resolve_tool_command(config: AppConfig) -> List[str]:
    """Locate the downloader: PATH first, then the installed yt_dlp module."""
    if shutil.which(config.tool_name):
        return [config.tool_name]
    if importlib.util.find_spec("yt_dlp") is not None:
        return [sys.executable, "-m", "yt_dlp"]
    # Leave the bare name; launching it reports the missing tool
    return [config.tool_name]


class ToolInvoker:
    """Blocking subprocess runner; output is passed through to the terminal."""

    def __init__(self, tool_command: Optional[Sequence[str]] = None):
        self.tool_command = list(tool_command or ["yt-dlp"])
        self._log = get_logger()

    def build_argv(self, request: DownloadRequest) -> List[str]:
        return self.tool_command + request_arguments(request)

    def invoke(self, request: DownloadRequest) -> InvocationResult:
        return self.run_command(self.build_argv(request))

    def run_command(self, argv: Sequence[str]) -> InvocationResult:
        argv = list(argv)
        if not argv:
            self._log.error("Empty command; nothing to run")
            return InvocationResult.from_exit_code(EXIT_NOT_FOUND)
        self._log.debug("Running: %s", " ".join(argv))
        try:
            completed = subprocess.run(argv, check=False)
        except FileNotFoundError:
            self._log.error("Command not found: %s", argv[0])
            return InvocationResult.from_exit_code(EXIT_NOT_FOUND)
        except OSError as e:  # PermissionError, exec format errors
            self._log.error("Cannot execute %s: %s", argv[0], e)
            return InvocationResult.from_exit_code(EXIT_NOT_EXECUTABLE)
        result = InvocationResult.from_exit_code(completed.returncode)
        if not result.succeeded:
            self._log.warning("%s exited with code %d", argv[0], result.exit_code)
        return result


__all__ = [
    "Invoker",
    "ToolInvoker",
    "resolve_tool_command",
    "EXIT_NOT_FOUND",
    "EXIT_NOT_EXECUTABLE",
]
