"""Login credential resolution.

Sources, in order of precedence:

1. The ``SAFE_AUTH_SECRET`` / ``SAFE_AUTH_PASSWORD`` environment pair
   (both or neither).
2. A JSON config file supplied by the caller, holding ``secret`` and
   ``password`` string fields.
3. An interactive prompt with hidden input.

The first source that applies provides both values; fields are never mixed
across sources. A config file that was asked for but cannot be used is an
error, not a reason to fall back to prompting.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import StrictStr
from pydantic import ValidationError
from rich.console import Console
from rich.prompt import Prompt

from .console import err_console
from .environment import PASSWORD_ENV_VAR
from .environment import SECRET_ENV_VAR
from .environment import AuthEnvironment
from .errors import ConfigFieldMissingError
from .errors import ConfigMalformedError
from .errors import ConfigUnreadableError
from .errors import EmptyCredentialError
from .errors import InconsistentEnvError
from .models import LoginDetails

logger = logging.getLogger(__name__)

PLAINTEXT_WARNING = (
    "Warning! Storing your secret/password in plaintext in a config file is not secure."
)

# Field order matters: a missing secret is reported before a missing password
_CONFIG_FIELDS = ("secret", "password")


class _ConfigFileCredentials(BaseModel):
    """Shape of the credential config file. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    secret: StrictStr
    password: StrictStr


class CredentialResolver:
    """Resolves the secret/password pair used to log in or create an account."""

    def __init__(
        self,
        prompt: Callable[[str], str] | None = None,
        console: Console | None = None,
    ):
        """
        Args:
            prompt: Reads one value with echo disabled, given its label.
                Defaults to a hidden Rich prompt on the terminal.
            console: Where the plaintext config warning is printed.
                Defaults to the shared stderr console.
        """
        self.console = console or err_console
        self._prompt = prompt or self._prompt_hidden

    def resolve(self, env: AuthEnvironment, config_path: Path | str | None = None) -> LoginDetails:
        """Resolve the credential pair.

        Args:
            env: Credential values read from the environment.
            config_path: Optional JSON config file to read the pair from.

        Returns:
            The resolved login details, both fields non-empty.

        Raises:
            InconsistentEnvError: Exactly one environment variable is set.
            ConfigUnreadableError: The config file could not be read.
            ConfigMalformedError: The config file is not a JSON object with
                string fields.
            ConfigFieldMissingError: ``secret`` or ``password`` is missing.
            EmptyCredentialError: A resolved value is empty.
        """
        if env.is_partial:
            raise InconsistentEnvError()

        if env.is_complete:
            logger.info(f"Using secret from provided env var: {SECRET_ENV_VAR}")
            logger.info(f"Using password from provided env var: {PASSWORD_ENV_VAR}")
            details = LoginDetails(secret=env.secret, password=env.password)
        elif config_path is not None:
            details = self._read_config_file(Path(config_path))
        else:
            details = self._prompt_for_details()

        if not details.secret or not details.password:
            raise EmptyCredentialError()
        return details

    def _read_config_file(self, path: Path) -> LoginDetails:
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigMalformedError(f"Error parsing config file. {e}", path=path) from e
        except OSError as e:
            raise ConfigUnreadableError(f"Error reading config file. {e}", path=path) from e

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ConfigMalformedError(f"Error parsing config file. {e}", path=path) from e

        if not isinstance(data, dict):
            raise ConfigMalformedError(
                "Error parsing config file. Expected a JSON object with 'secret' and 'password' fields.",
                path=path,
            )

        self.console.print(f"[yellow]{PLAINTEXT_WARNING}[/yellow]")
        logger.info(f"Using secret and password from config file: {path}")

        try:
            parsed = _ConfigFileCredentials.model_validate(data)
        except ValidationError as e:
            missing = {err["loc"][0] for err in e.errors() if err["type"] == "missing"}
            for field in _CONFIG_FIELDS:
                if field in missing:
                    raise ConfigFieldMissingError(field, path=path) from e
            bad_fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise ConfigMalformedError(
                f"Error parsing config file. Fields must be strings: {bad_fields}",
                path=path,
            ) from e

        return LoginDetails(secret=parsed.secret, password=parsed.password)

    def _prompt_for_details(self) -> LoginDetails:
        try:
            secret = self._prompt("Secret")
            password = self._prompt("Password")
        except EOFError as e:
            raise EmptyCredentialError(
                "No secret/password entered: input was closed before both were read."
            ) from e
        return LoginDetails(secret=secret, password=password)

    def _prompt_hidden(self, label: str) -> str:
        # Prompts go to the stderr console so piped stdout stays clean
        return Prompt.ask(label, password=True, console=self.console)


__all__ = [
    "CredentialResolver",
    "PLAINTEXT_WARNING",
]
