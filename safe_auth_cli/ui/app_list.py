"""Rendering of authorised-app listings.

Two interchangeable modes: a human-readable table and a tab-separated
line format meant for scripts::

    id<TAB>name<TAB>vendor<TAB>[container:Perm|Perm,container2:Perm]
"""

import io
from collections.abc import Sequence
from enum import Enum

from rich.console import Console
from rich.table import Table

from ..models import AuthedApp
from ..models import ordered_permissions
from .tables import add_identity_row
from .tables import container_lines
from .tables import create_identity_table

PARSABLE_HEADER = "APP ID\tNAME\tVENDOR\tPERMISSIONS"
DEFAULT_WIDTH = 120


class ListMode(str, Enum):
    PRETTY = "pretty"
    PARSABLE = "parsable"


def create_authed_apps_table(apps: Sequence[AuthedApp]) -> Table:
    table = create_identity_table("Permissions", title="Authorised Applications")
    for authed in apps:
        add_identity_row(table, authed.app, "\n".join(container_lines(authed.containers)))
    return table


def parsable_line(authed: AuthedApp) -> str:
    """Render one app as a tab-separated line."""
    containers = ",".join(
        f"{name}:" + "|".join(perm.value for perm in ordered_permissions(perms))
        for name, perms in authed.containers.items()
    )
    return f"{authed.app.id}\t{authed.app.name}\t{authed.app.vendor}\t[{containers}]"


def format_authed_apps(
    apps: Sequence[AuthedApp],
    mode: ListMode,
    *,
    width: int | None = None,
) -> str:
    """Render ``apps`` in the given mode, preserving input order.

    Args:
        apps: Authorised apps as listed by the backend.
        mode: Table or tab-separated lines.
        width: Table width in columns (pretty mode only).

    Returns:
        The rendered text without a trailing newline.
    """
    if mode is ListMode.PARSABLE:
        return "\n".join(parsable_line(authed) for authed in apps)

    buffer = io.StringIO()
    render_console = Console(
        file=buffer,
        width=width or DEFAULT_WIDTH,
        color_system=None,
        force_terminal=False,
    )
    render_console.print(create_authed_apps_table(apps))
    return buffer.getvalue().rstrip("\n")


__all__ = [
    "ListMode",
    "PARSABLE_HEADER",
    "create_authed_apps_table",
    "format_authed_apps",
    "parsable_line",
]
