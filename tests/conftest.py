"""Shared fixtures for the authenticator CLI tests."""

import io

import pytest
from rich.console import Console

from safe_auth_cli.environment import BACKEND_ENV_VAR
from safe_auth_cli.environment import PASSWORD_ENV_VAR
from safe_auth_cli.environment import SECRET_ENV_VAR
from safe_auth_cli.models import AppExchangeInfo
from safe_auth_cli.models import AuthedApp
from safe_auth_cli.models import Permission
from safe_auth_cli.ui.surface import ConsolePromptSurface


def make_console(width: int = 200) -> Console:
    """Console writing plain text into an in-memory buffer."""
    return Console(file=io.StringIO(), width=width, color_system=None, force_terminal=False)


def console_output(console: Console) -> str:
    return console.file.getvalue()


def column_text(output: str, index: int) -> str:
    """Join the body cells of one table column, undoing folding.

    Body rows are the lines drawn with ``│``; header rows use ``┃``.
    """
    parts = []
    for line in output.splitlines():
        if "│" not in line:
            continue
        cells = line.split("│")[1:-1]
        if index < len(cells):
            parts.append(cells[index].strip())
    return "".join(parts)


class ScriptedSurface(ConsolePromptSurface):
    """Prompt surface with scripted input and captured output."""

    def __init__(self, input_text: str = "", width: int = 200):
        super().__init__(make_console(width), stdin=io.StringIO(input_text))
        self.stdin = self._stdin

    @property
    def output(self) -> str:
        return console_output(self.console)

    @property
    def consumed(self) -> int:
        """Number of input characters read so far."""
        return self.stdin.tell()


class FakeBackend:
    """In-memory authenticator backend recording every call."""

    def __init__(self, request=None, apps=None, balance=(3, 100)):
        self.request = request
        self.apps = apps or []
        self.balance = balance
        self.calls: list[tuple] = []

    def create_account(self, invite, secret, password):
        self.calls.append(("create_account", invite, secret, password))
        return "authenticator"

    def log_in(self, secret, password):
        self.calls.append(("log_in", secret, password))
        return "authenticator"

    def decode_request(self, token):
        self.calls.append(("decode_request", token))
        return self.request

    def authorise(self, authenticator, request, allow):
        self.calls.append(("authorise", authenticator, request, allow))
        return "bAEAAAAResponse" if allow else "bAEAAAADenied"

    def account_info(self, authenticator):
        self.calls.append(("account_info", authenticator))
        return self.balance

    def revoke(self, authenticator, app_id):
        self.calls.append(("revoke", authenticator, app_id))

    def list_authorised_apps(self, authenticator):
        self.calls.append(("list_authorised_apps", authenticator))
        return self.apps

    def serve(self, port, authenticator):
        self.calls.append(("serve", port, authenticator))

    def called(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove credential and backend env vars that leak between tests."""
    for key in [SECRET_ENV_VAR, PASSWORD_ENV_VAR, BACKEND_ENV_VAR]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_surface():
    """Factory for scripted prompt surfaces."""
    return ScriptedSurface


@pytest.fixture
def make_backend():
    """Factory for fake backends."""
    return FakeBackend


@pytest.fixture
def make_test_console():
    """Factory for in-memory consoles."""
    return make_console


@pytest.fixture
def table_column():
    """Helper returning the unfolded text of a rendered table column."""
    return column_text


@pytest.fixture
def sample_app():
    return AppExchangeInfo(id="net.maidsafe.test", name="Test App", vendor="MaidSafe")


@pytest.fixture
def sample_authed_apps():
    return [
        AuthedApp(
            app=AppExchangeInfo(id="a1", name="App", vendor="V"),
            containers={"docs": {Permission.INSERT, Permission.UPDATE}},
        ),
        AuthedApp(
            app=AppExchangeInfo(id="a2", name="Photos", vendor="Pics Inc"),
            containers={
                "_public": {Permission.MANAGE_PERMISSIONS, Permission.INSERT},
                "_photos": {Permission.DELETE},
            },
        ),
    ]
