"""Install / update actions: opaque command sequences, pass or fail."""

from __future__ import annotations

from typing import Sequence

from .config import AppConfig
from .invoker import Invoker
from .logging_utils import get_logger
from .models import InvocationResult


def run_sequence(invoker: Invoker, commands: Sequence[Sequence[str]]) -> InvocationResult:
    """Run commands in order, stopping at the first failure."""
    log = get_logger()
    result = InvocationResult.from_exit_code(0)
    for idx, command in enumerate(commands, start=1):
        result = invoker.run_command(command)
        if not result.succeeded:
            log.warning(
                "Step %d/%d failed (exit %d); skipping the rest",
                idx,
                len(commands),
                result.exit_code,
            )
            break
    return result


def install_tools(invoker: Invoker, config: AppConfig) -> InvocationResult:
    return run_sequence(invoker, config.install_commands)


def update_tool(invoker: Invoker, config: AppConfig) -> InvocationResult:
    return run_sequence(invoker, config.update_commands)


__all__ = ["run_sequence", "install_tools", "update_tool"]
