"""Authenticator backend interface and loader.

Account creation, login, request decoding, authorisation, revocation,
app listing and the daemon listener live in a backend package. The CLI
only talks to it through ``AuthenticatorBackend``.

Backends register a zero-argument factory under the
``safe_auth_cli.backends`` entry point group::

    [project.entry-points."safe_auth_cli.backends"]
    safe = "safe_auth_backend:SafeBackend"
"""

import importlib.metadata
import logging
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from .errors import BackendError
from .models import AuthedApp
from .models import IpcRequest

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "safe_auth_cli.backends"


@runtime_checkable
class AuthenticatorBackend(Protocol):
    """Interface for authenticator backends.

    The ``authenticator`` values are opaque handles returned by
    ``create_account`` / ``log_in`` and passed back unchanged. Every method
    raises ``BackendError`` on failure.
    """

    def create_account(self, invite: str, secret: str, password: str) -> Any:
        """Create a new account with an invitation token and log into it."""
        ...

    def log_in(self, secret: str, password: str) -> Any:
        """Log into an existing account."""
        ...

    def decode_request(self, token: str) -> IpcRequest:
        """Decode an encoded authorisation request string."""
        ...

    def authorise(self, authenticator: Any, request: IpcRequest, allow: bool) -> str:
        """Answer a decoded request and return the encoded response string."""
        ...

    def account_info(self, authenticator: Any) -> tuple[int, int]:
        """Return ``(mutations_done, mutations_available)``."""
        ...

    def revoke(self, authenticator: Any, app_id: str) -> None:
        """Revoke all permissions granted to an app."""
        ...

    def list_authorised_apps(self, authenticator: Any) -> list[AuthedApp]:
        """List apps holding permissions, in backend order."""
        ...

    def serve(self, port: int, authenticator: Any) -> None:
        """Serve authenticator operations on ``port`` until stopped."""
        ...


def _available_entry_points() -> list[importlib.metadata.EntryPoint]:
    return list(importlib.metadata.entry_points(group=ENTRY_POINT_GROUP))


def load_backend(name: str | None = None) -> AuthenticatorBackend:
    """Load and instantiate an authenticator backend.

    Args:
        name: Entry point name. When omitted, the single installed backend
            is used.

    Returns:
        The backend instance.

    Raises:
        BackendError: No matching backend, an ambiguous choice, or the
            backend failed to load.
    """
    eps = _available_entry_points()
    installed = sorted(ep.name for ep in eps)
    logger.debug(f"Installed authenticator backends: {installed}")

    if name is not None:
        matches = [ep for ep in eps if ep.name == name]
        if not matches:
            available = ", ".join(installed) or "none"
            raise BackendError(
                f"Unknown authenticator backend '{name}' (installed: {available})",
                operation="load_backend",
            )
        ep = matches[0]
    elif len(eps) == 1:
        ep = eps[0]
    elif not eps:
        raise BackendError(
            "No authenticator backend installed. Install a package providing "
            f"the '{ENTRY_POINT_GROUP}' entry point.",
            operation="load_backend",
        )
    else:
        raise BackendError(
            f"Several authenticator backends installed ({', '.join(installed)}); "
            "choose one with --backend",
            operation="load_backend",
        )

    try:
        factory = ep.load()
        backend = factory()
    except Exception as e:
        raise BackendError(
            f"Could not load authenticator backend '{ep.name}': {e}",
            operation="load_backend",
        ) from e

    logger.info(f"Loaded authenticator backend '{ep.name}'")
    return backend


__all__ = ["AuthenticatorBackend", "ENTRY_POINT_GROUP", "load_backend"]
