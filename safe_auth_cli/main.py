"""safe-auth - manage SAFE Network authorisations and accounts."""

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from .backend import load_backend
from .console import console
from .console import err_console
from .credentials import CredentialResolver
from .environment import BACKEND_ENV_VAR
from .environment import AuthEnvironment
from .errors import AuthCliError
from .ui.app_list import PARSABLE_HEADER
from .ui.app_list import ListMode
from .ui.app_list import format_authed_apps
from .ui.consent import ConsentEngine
from .ui.surface import ConsolePromptSurface

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="A config file to read secret/password from. Not recommended: "
    "storing login information unencrypted is not secure.",
)
@click.option("--req", "-r", "req_str", help="The encoded authorisation request string")
@click.option("--invite-token", "-i", "invite", help="Invitation token for creating a new account")
@click.option("--balance", "-b", is_flag=True, help="Get account's balance")
@click.option("--apps", "-a", is_flag=True, help="Get list of authorised apps")
@click.option("--revoke", "-k", "app_id", help="The application's ID to revoke all authorised permissions from")
@click.option("--pretty", "-y", is_flag=True, help="Pretty print")
@click.option(
    "--daemon",
    "-d",
    "port",
    type=click.IntRange(0, 65535),
    help="Port number where the authenticator service shall be listening",
)
@click.option(
    "--backend",
    "backend_name",
    envvar=BACKEND_ENV_VAR,
    help="Authenticator backend to use (entry point name)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show informational log output")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    req_str: str | None,
    invite: str | None,
    balance: bool,
    apps: bool,
    app_id: str | None,
    pretty: bool,
    port: int | None,
    backend_name: str | None,
    verbose: bool,
) -> None:
    """Manage SAFE Network authorisations and accounts."""
    _configure_logging(verbose)

    try:
        # Load the backend before prompting so a missing one fails fast
        backend = load_backend(backend_name)
        login = CredentialResolver().resolve(AuthEnvironment.from_env(), config_path)

        # The same authenticator serves every later step, daemon included
        if invite is not None:
            authenticator = backend.create_account(invite, login.secret, login.password)
            if pretty:
                console.print("Account was created successfully!")
        else:
            authenticator = backend.log_in(login.secret, login.password)
            if pretty:
                console.print("Logged in the SAFE Network successfully!")

        if req_str is not None:
            request = backend.decode_request(req_str)
            engine = ConsentEngine(ConsolePromptSurface(console))
            allow = engine.present(request)
            response = backend.authorise(authenticator, request, allow)
            if pretty:
                click.echo("Authorisation response string: ", nl=False)
            click.echo(response)

        if balance:
            mutations_done, mutations_available = backend.account_info(authenticator)
            if pretty:
                click.echo("Account's current balance (PUTs done/available): ", nl=False)
            click.echo(f"{mutations_done}/{mutations_available}")

        if app_id is not None:
            backend.revoke(authenticator, app_id)
            if pretty:
                console.print(f"Authorised permissions were revoked for app '{escape(app_id)}'")

        if apps:
            authed_apps = backend.list_authorised_apps(authenticator)
            if pretty:
                click.echo(format_authed_apps(authed_apps, ListMode.PRETTY, width=console.width))
            else:
                click.echo(PARSABLE_HEADER)
                if authed_apps:
                    click.echo(format_authed_apps(authed_apps, ListMode.PARSABLE))

        if port is not None:
            logger.info(f"Starting authenticator service on port {port}")
            backend.serve(port, authenticator)

    except AuthCliError as e:
        logger.debug(f"Command failed: {e!r}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(1)


if __name__ == "__main__":
    main()
