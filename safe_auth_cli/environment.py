"""Environment-provided settings.

The credential pair is read once from the process environment into an
immutable value and then passed explicitly to the resolver, so resolution
never looks at ``os.environ`` itself.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

SECRET_ENV_VAR = "SAFE_AUTH_SECRET"
PASSWORD_ENV_VAR = "SAFE_AUTH_PASSWORD"
BACKEND_ENV_VAR = "SAFE_AUTH_BACKEND"


@dataclass(frozen=True)
class AuthEnvironment:
    """Credential values found in the environment. Empty means unset."""

    secret: str = ""
    password: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AuthEnvironment":
        """Read the credential variables from ``environ`` (default: ``os.environ``)."""
        if environ is None:
            environ = os.environ
        return cls(
            secret=environ.get(SECRET_ENV_VAR, ""),
            password=environ.get(PASSWORD_ENV_VAR, ""),
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.secret) and bool(self.password)

    @property
    def is_partial(self) -> bool:
        return bool(self.secret) != bool(self.password)

    def __repr__(self) -> str:
        # Values are secrets; only report which ones are present
        return (
            f"AuthEnvironment(secret={'set' if self.secret else 'unset'}, "
            f"password={'set' if self.password else 'unset'})"
        )


__all__ = [
    "AuthEnvironment",
    "BACKEND_ENV_VAR",
    "PASSWORD_ENV_VAR",
    "SECRET_ENV_VAR",
]
