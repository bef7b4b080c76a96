"""Interactive consent for authorisation requests.

The operator sees exactly what an app asks for and answers a single
``[y/N]`` prompt. The decision fails closed: only an answer of exactly
``y`` (any case) allows; empty input, ``yes``, unreadable input and
anything else deny.

Unregistered requests carry no identity or permissions and are allowed
without prompting.
"""

import logging
from typing import assert_never

from ..models import AuthRequest
from ..models import ContainersRequest
from ..models import IpcRequest
from ..models import MDataPermissionSet
from ..models import PERMISSION_ORDER
from ..models import ShareMData
from ..models import ShareMDataRequest
from ..models import UnregisteredRequest
from .surface import PromptSurface
from .tables import add_identity_row
from .tables import container_lines
from .tables import create_identity_table

logger = logging.getLogger(__name__)

PROMPT_TEXT = "Allow authorisation? [y/N]: "
ALLOWED_MESSAGE = "Authorisation will be allowed"
DENIED_MESSAGE = "Authorisation will be denied"


def is_affirmative(answer: str) -> bool:
    """Return True iff ``answer`` is exactly "y" or "Y" after line-ending removal.

    One trailing newline is stripped, then one trailing carriage return.
    No other whitespace is trimmed.
    """
    if answer.endswith("\n"):
        answer = answer[:-1]
    if answer.endswith("\r"):
        answer = answer[:-1]
    return answer.lower() == "y"


def describe_mdata_permissions(perms: MDataPermissionSet) -> str:
    """List allowed actions in display order, each preceded by a space.

    Actions whose state cannot be determined are treated as not allowed.
    """
    phrase = ""
    for action in PERMISSION_ORDER:
        allowed = perms.is_allowed(action)
        if allowed is None:
            logger.warning(f"Permission '{action.value}' could not be evaluated; treating it as not granted")
            continue
        if allowed:
            phrase += f" {action.value}"
    return phrase


def _describe_share_mdata(entry: ShareMData) -> str:
    return (
        f"Type tag: {entry.type_tag}\n"
        f"XoR name: {entry.xor_name}\n"
        f"Permissions:{describe_mdata_permissions(entry.perms)}\n"
    )


class ConsentEngine:
    """Renders authorisation requests and collects the operator's decision."""

    def __init__(self, surface: PromptSurface):
        self.surface = surface

    def present(self, request: IpcRequest) -> bool:
        """Show ``request`` and ask whether to allow it.

        Args:
            request: Decoded authorisation request.

        Returns:
            True if the operator allowed the request.
        """
        if isinstance(request, UnregisteredRequest):
            logger.info("Allowing unregistered authorisation request without prompting")
            return True

        if isinstance(request, AuthRequest):
            self._show_auth_request(request)
        elif isinstance(request, ContainersRequest):
            self._show_containers_request(request)
        elif isinstance(request, ShareMDataRequest):
            self._show_share_mdata_request(request)
        else:
            assert_never(request)

        return self._ask()

    def _show_auth_request(self, request: AuthRequest) -> None:
        self.surface.show("The following application authorisation request was received:")
        own_container = "yes" if request.app_container else "no"
        lines = [f"Own container: {own_container}", "Default containers:"]
        lines.extend(f"  {line}" for line in container_lines(request.containers))

        table = create_identity_table("Permissions requested")
        add_identity_row(table, request.app, "\n".join(lines))
        self.surface.show(table)

    def _show_containers_request(self, request: ContainersRequest) -> None:
        self.surface.show("The following authorisation request for containers was received:")
        table = create_identity_table("Permissions requested")
        add_identity_row(table, request.app, "\n".join(container_lines(request.containers)))
        self.surface.show(table)

    def _show_share_mdata_request(self, request: ShareMDataRequest) -> None:
        self.surface.show("The following authorisation request to share a MutableData was received:")
        cell = "\n".join(_describe_share_mdata(entry) for entry in request.mdata)
        table = create_identity_table("MutableData's requested to share")
        add_identity_row(table, request.app, cell.rstrip("\n"))
        self.surface.show(table)

    def _ask(self) -> bool:
        self.surface.write(PROMPT_TEXT)
        try:
            answer = self.surface.read_line()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read authorisation answer: {e}")
            answer = ""

        if is_affirmative(answer):
            self.surface.show(ALLOWED_MESSAGE)
            return True
        self.surface.show(DENIED_MESSAGE)
        return False


__all__ = [
    "ALLOWED_MESSAGE",
    "ConsentEngine",
    "DENIED_MESSAGE",
    "PROMPT_TEXT",
    "describe_mdata_permissions",
    "is_affirmative",
]
