"""Interactive single-video downloader package root.

Public surface kept intentionally small; internal modules may evolve.
"""

from .builder import build, request_arguments
from .classifier import classify
from .config import AppConfig
from .invoker import ToolInvoker
from .models import DownloadRequest, InvocationResult, MenuChoice, SessionState
from .session import SessionController

__all__ = [
    "AppConfig",
    "DownloadRequest",
    "InvocationResult",
    "MenuChoice",
    "SessionController",
    "SessionState",
    "ToolInvoker",
    "build",
    "classify",
    "request_arguments",
]


def main():
    """Run the interactive menu."""
    import sys

    from .cli import run_cli

    sys.exit(run_cli())
