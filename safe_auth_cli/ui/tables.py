"""Table helpers shared by the consent prompt and the authorised-apps listing.

Cells are built from ``Text`` objects so that app-supplied names and
permission lists like ``[Insert, Update]`` are never interpreted as markup.
Every column folds overflowing text, so nothing the operator is asked to
approve is truncated on a narrow terminal.
"""

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from ..models import AppExchangeInfo
from ..models import ContainerPermissions
from ..models import Permission
from ..models import ordered_permissions

IDENTITY_COLUMNS = ("Id", "Name", "Vendor")


def format_permission_list(perms: Iterable[Permission]) -> str:
    """Render a permission set as ``[Insert, Update]`` in display order."""
    return "[" + ", ".join(perm.value for perm in ordered_permissions(perms)) + "]"


def container_lines(containers: ContainerPermissions) -> list[str]:
    """One ``name: [Perm, ...]`` line per container, in mapping order."""
    return [f"{name}: {format_permission_list(perms)}" for name, perms in containers.items()]


def create_identity_table(last_column: str, title: str | None = None) -> Table:
    """Create an Id / Name / Vendor / <last_column> table."""
    table = Table(title=title, show_header=True, header_style="bold", show_lines=True)
    # Long ids and XoR names fold onto further lines instead of being cut off
    for column in IDENTITY_COLUMNS:
        table.add_column(column, overflow="fold")
    table.add_column(last_column, overflow="fold")
    return table


def add_identity_row(table: Table, app: AppExchangeInfo, cell: str) -> None:
    table.add_row(Text(app.id), Text(app.name), Text(app.vendor), Text(cell))


__all__ = [
    "IDENTITY_COLUMNS",
    "add_identity_row",
    "container_lines",
    "create_identity_table",
    "format_permission_list",
]
