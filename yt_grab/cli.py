"""Command-line entry: wire config, invoker and the interactive session."""

from __future__ import annotations

import argparse
from typing import Optional

from rich.console import Console

from .config import AppConfig
from .invoker import Invoker, ToolInvoker, resolve_tool_command
from .logging_utils import configure_logging
from .session import SessionController


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="yt-grab",
        description=(
            "Interactive single-video downloader. Fetches H.264/AAC streams "
            "merged into MP4; playlist URLs download only the referenced video."
        ),
    )


def run_cli(
    argv: list[str] | None = None,
    config: Optional[AppConfig] = None,
    invoker: Optional[Invoker] = None,
    console: Optional[Console] = None,
) -> int:
    build_parser().parse_args(argv)
    config = config or AppConfig()
    console = console or Console()
    if invoker is None:
        invoker = ToolInvoker(resolve_tool_command(config))
    log = configure_logging(console, config.log_level)
    log.debug("Starting session (tool=%s)", config.tool_name)
    session = SessionController(invoker, config=config, console=console)
    return session.run()
