import io
import sys
from pathlib import Path
import pytest

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console  # noqa: E402

from yt_grab.config import AppConfig  # noqa: E402
from yt_grab.models import InvocationResult  # noqa: E402


class FakeInvoker:
    """Records requests / commands and answers with scripted exit codes."""

    def __init__(self, exit_codes=None):
        self.exit_codes = list(exit_codes or [])
        self.requests = []
        self.commands = []

    def _next(self):
        code = self.exit_codes.pop(0) if self.exit_codes else 0
        return InvocationResult.from_exit_code(code)

    def invoke(self, request):
        self.requests.append(request)
        return self._next()

    def run_command(self, argv):
        self.commands.append(list(argv))
        return self._next()


class ScriptedReader:
    """Stand-in for the interactive prompt; raises EOFError when exhausted."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture()
def fake_invoker():
    return FakeInvoker


@pytest.fixture()
def scripted_reader():
    return ScriptedReader


@pytest.fixture()
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture()
def quiet_config():
    return AppConfig(
        install_commands=[["apt", "update"], ["pip", "install", "-U", "yt-dlp"]],
        update_commands=[["pip", "install", "-U", "yt-dlp"]],
        clear_screen=False,
        pause_seconds=0,
    )


@pytest.fixture()
def run_cli(monkeypatch, quiet_config, console, capsys):
    """Run the CLI entry with scripted menu input; returns (code, out, err)."""
    from yt_grab.cli import run_cli as _run_cli

    def _run(args, answers=("4",), invoker=None):
        reader = ScriptedReader(answers)
        monkeypatch.setattr(
            "yt_grab.session.SessionController._prompt",
            lambda self, message: reader(message),
        )
        inv = invoker or FakeInvoker()
        try:
            code = _run_cli(args, config=quiet_config, invoker=inv, console=console)
        except SystemExit as e:
            code = e.code
        return code, console.file.getvalue(), capsys.readouterr().err

    return _run
