"""Interactive menu session, modelled as an explicit state machine.

Each ``step`` takes the current ``SessionState``, performs that state's side
effects (drawing the menu, reading input, running a download...) and returns
the next state. ``run`` drives ``step`` until ``EXITED``.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from .builder import build
from .classifier import classify
from .config import AppConfig
from .invoker import Invoker
from .logging_utils import get_logger
from .maintenance import install_tools, update_tool
from .models import InvocationResult, MenuChoice, SessionState

Reader = Callable[[str], str]

MENU_OPTIONS = [
    (MenuChoice.INSTALL_TOOLS, "Install required tools"),
    (MenuChoice.DOWNLOAD, "Download a video"),
    (MenuChoice.UPDATE_TOOL, "Update yt-dlp"),
    (MenuChoice.EXIT, "Exit"),
]

_TRANSITIONS: Dict[MenuChoice, SessionState] = {
    MenuChoice.INSTALL_TOOLS: SessionState.INSTALLING,
    MenuChoice.DOWNLOAD: SessionState.DOWNLOADING,
    MenuChoice.UPDATE_TOOL: SessionState.UPDATING,
    MenuChoice.EXIT: SessionState.EXITING,
    MenuChoice.INVALID: SessionState.MENU_DISPLAYED,
}


def parse_choice(raw: str) -> MenuChoice:
    value = (raw or "").strip()
    for choice in MenuChoice:
        if choice is not MenuChoice.INVALID and choice.value == value:
            return choice
    return MenuChoice.INVALID


def next_state(choice: MenuChoice) -> SessionState:
    return _TRANSITIONS[choice]


class SessionController:
    def __init__(
        self,
        invoker: Invoker,
        config: Optional[AppConfig] = None,
        console: Optional[Console] = None,
        reader: Optional[Reader] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.invoker = invoker
        self.config = config or AppConfig()
        self.console = console or Console()
        self._read = reader or self._prompt
        self._sleep = sleep
        self._log = get_logger()
        self.last_result: InvocationResult | None = None

    def _prompt(self, message: str) -> str:
        return Prompt.ask(message, console=self.console)

    def _pause(self) -> None:
        if self.config.pause_seconds:
            self._sleep(self.config.pause_seconds)

    # State machine -----------------------------------------------------------

    def run(self) -> int:
        state = SessionState.MENU_DISPLAYED
        while state is not SessionState.EXITED:
            state = self.step(state)
        return 0

    def step(self, state: SessionState) -> SessionState:
        self._log.debug("Session state: %s", state.value)
        handler = {
            SessionState.MENU_DISPLAYED: self._show_menu,
            SessionState.AWAITING_CHOICE: self._await_choice,
            SessionState.INSTALLING: self._install,
            SessionState.DOWNLOADING: self._download,
            SessionState.UPDATING: self._update,
            SessionState.EXITING: self._exit,
        }.get(state)
        if handler is None:
            return SessionState.EXITED
        return handler()

    def _show_menu(self) -> SessionState:
        if self.config.clear_screen:
            self.console.clear()
        lines = "\n".join(
            f"[bold cyan]{choice.value}[/]  {label}" for choice, label in MENU_OPTIONS
        )
        self.console.print(Panel(lines, title="YouTube Downloader", expand=False))
        return SessionState.AWAITING_CHOICE

    def _await_choice(self) -> SessionState:
        try:
            raw = self._read(f"Choose an option [1-{len(MENU_OPTIONS)}]")
        except EOFError:
            self._log.info("End of input at menu; exiting")
            return SessionState.EXITING
        choice = parse_choice(raw)
        if choice is MenuChoice.INVALID:
            self.console.print("[red]Invalid option. Try again.[/red]")
            self._pause()
        return next_state(choice)

    def _install(self) -> SessionState:
        self.console.print("[cyan]Installing required tools...[/cyan]")
        result = install_tools(self.invoker, self.config)
        self._report(result, "Installation complete!", "Installation failed")
        return SessionState.MENU_DISPLAYED

    def _update(self) -> SessionState:
        self.console.print(f"[cyan]Updating {self.config.tool_name}...[/cyan]")
        result = update_tool(self.invoker, self.config)
        self._report(
            result, f"{self.config.tool_name} updated!", "Update failed"
        )
        return SessionState.MENU_DISPLAYED

    def _download(self) -> SessionState:
        try:
            url = self._read("Enter video URL").strip()
        except EOFError:
            self.console.print("[yellow]No URL entered; download cancelled[/yellow]")
            return SessionState.MENU_DISPLAYED
        self.console.print("[cyan]Fetching video info...[/cyan]")
        self._pause()
        result = self.download(url)
        self._report(result, "Download complete!", "Download failed")
        if not result.succeeded:
            self.console.print(
                f"[dim]If this keeps happening, try option "
                f"{MenuChoice.UPDATE_TOOL.value} to update {self.config.tool_name}.[/dim]"
            )
        return SessionState.MENU_DISPLAYED

    def _exit(self) -> SessionState:
        self.console.print("Bye!")
        return SessionState.EXITED

    # Actions -----------------------------------------------------------------

    def download(self, url: str) -> InvocationResult:
        """Classify ``url``, build the request and hand it to the invoker."""
        classification = classify(url)
        if classification.is_playlist:
            self.console.print(
                "[yellow]Detected playlist URL - downloading only this video...[/yellow]"
            )
        request = build(url, classification.is_playlist)
        result = self.invoker.invoke(request)
        self.last_result = result
        return result

    def _report(self, result: InvocationResult, ok: str, failed: str) -> None:
        self.last_result = result
        if result.succeeded:
            self.console.print(f"[green]{ok}[/green]")
        else:
            self.console.print(f"[bold red]{failed}[/] (exit code {result.exit_code})")


__all__ = ["SessionController", "parse_choice", "next_state", "MENU_OPTIONS"]
