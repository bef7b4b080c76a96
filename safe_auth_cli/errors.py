"""Error taxonomy for the authenticator CLI.

Credential errors describe why a login pair could not be resolved. Backend
errors carry the message of an external collaborator (account creation,
login, request decoding, revocation, ...) verbatim.

Every error raised here is terminal for the run: the CLI prints the message
and exits non-zero. Nothing is retried.

Backends translate their native failures into ``BackendError`` using
``raise BackendError(...) from native_error`` so the original exception
stays available via ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class AuthCliError(Exception):
    """Base for all errors raised by the authenticator CLI."""


class CredentialError(AuthCliError):
    """The secret/password pair could not be resolved."""


class InconsistentEnvError(CredentialError):
    """Only one of the two credential environment variables is set."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Both the secret and password environment variables must be set to be used for login."
        )


class ConfigFileError(CredentialError):
    """Base for failures reading the credential config file.

    Attributes:
        path: The config file the caller supplied.
    """

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __repr__(self) -> str:
        parts = [repr(str(self))]
        if self.path is not None:
            parts.append(f"path={str(self.path)!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


class ConfigUnreadableError(ConfigFileError):
    """The config file could not be opened or read."""


class ConfigMalformedError(ConfigFileError):
    """The config file is not a JSON object with string credential fields."""


class ConfigFieldMissingError(ConfigFileError):
    """A required key is absent from the config file.

    Attributes:
        field: Name of the missing key ("secret" or "password").
    """

    def __init__(self, field: str, *, path: Path | str | None = None) -> None:
        super().__init__(f"The config file's {field} field cannot be empty", path=path)
        self.field = field


class EmptyCredentialError(CredentialError):
    """The resolved secret or password is empty."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Neither the secret nor password can be empty.")


class BackendError(AuthCliError):
    """Failure reported by the external authenticator backend.

    Attributes:
        operation: Backend operation that failed (e.g. "log_in"), if known.
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation

    def __repr__(self) -> str:
        parts = [repr(str(self))]
        if self.operation is not None:
            parts.append(f"operation={self.operation!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


__all__ = [
    "AuthCliError",
    "BackendError",
    "ConfigFieldMissingError",
    "ConfigFileError",
    "ConfigMalformedError",
    "ConfigUnreadableError",
    "CredentialError",
    "EmptyCredentialError",
    "InconsistentEnvError",
]
