"""Data models for login details, authorisation requests and authorised apps.

Authorisation requests form a closed tagged union (``IpcRequest``)
discriminated on ``kind``. Consumers dispatch over the four variants
exhaustively; a new variant has to be added here and handled explicitly.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Annotated
from typing import Any
from typing import Literal
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import TypeAdapter
from pydantic import field_validator

XOR_NAME_LEN = 32


class Permission(str, Enum):
    """Capability that can be requested for a container or shared data."""

    INSERT = "Insert"
    UPDATE = "Update"
    DELETE = "Delete"
    MANAGE_PERMISSIONS = "ManagePermissions"


# Fixed display order, independent of set iteration order
PERMISSION_ORDER: tuple[Permission, ...] = (
    Permission.INSERT,
    Permission.UPDATE,
    Permission.DELETE,
    Permission.MANAGE_PERMISSIONS,
)


def ordered_permissions(perms: Iterable[Permission]) -> list[Permission]:
    """Return the permissions present in ``perms`` in display order."""
    present = set(perms)
    return [perm for perm in PERMISSION_ORDER if perm in present]


ContainerPermissions = dict[str, set[Permission]]


class LoginDetails(BaseModel):
    """Resolved credential pair. Never persisted, never printed."""

    model_config = ConfigDict(frozen=True)

    secret: str = Field(repr=False)
    password: str = Field(repr=False)


class AppExchangeInfo(BaseModel):
    """Identity of an application asking for (or holding) access."""

    model_config = ConfigDict(frozen=True)

    id: str
    scope: str | None = None
    name: str
    vendor: str


class MDataPermissionSet(BaseModel):
    """Per-action permission entries for a shared MutableData.

    Each action is explicitly allowed, explicitly denied, or unset. An unset
    action cannot be decided and ``is_allowed`` reports ``None`` for it.
    """

    model_config = ConfigDict(frozen=True)

    actions: dict[Permission, bool] = Field(default_factory=dict)

    @classmethod
    def allow(cls, *actions: Permission) -> "MDataPermissionSet":
        """Allow ``actions`` and deny every other action."""
        return cls(actions={perm: perm in actions for perm in PERMISSION_ORDER})

    @classmethod
    def deny(cls, *actions: Permission) -> "MDataPermissionSet":
        """Deny ``actions`` and allow every other action."""
        return cls(actions={perm: perm not in actions for perm in PERMISSION_ORDER})

    def is_allowed(self, action: Permission) -> bool | None:
        return self.actions.get(action)


class ShareMData(BaseModel):
    """A single MutableData an app asks to share."""

    model_config = ConfigDict(frozen=True)

    type_tag: int
    name: bytes = Field(min_length=XOR_NAME_LEN, max_length=XOR_NAME_LEN)
    perms: MDataPermissionSet = Field(default_factory=MDataPermissionSet)

    @field_validator("name", mode="before")
    @classmethod
    def _decode_hex_name(cls, value: Any) -> Any:
        # Decoded payloads carry the address as a hex string
        if isinstance(value, str):
            try:
                return bytes.fromhex(value)
            except ValueError as e:
                raise ValueError(f"name is not a valid hex string: {e}") from e
        return value

    @property
    def xor_name(self) -> str:
        return self.name.hex()


class AuthRequest(BaseModel):
    """An app asks to be authorised, optionally with its own container."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["auth"] = "auth"
    app: AppExchangeInfo
    app_container: bool = False
    containers: ContainerPermissions = Field(default_factory=dict)


class ContainersRequest(BaseModel):
    """An already authorised app asks for access to more containers."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["containers"] = "containers"
    app: AppExchangeInfo
    containers: ContainerPermissions = Field(default_factory=dict)


class ShareMDataRequest(BaseModel):
    """An app asks for permissions on MutableData owned by the user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["share_mdata"] = "share_mdata"
    app: AppExchangeInfo
    mdata: list[ShareMData] = Field(default_factory=list)


class UnregisteredRequest(BaseModel):
    """Request from an unregistered client. Carries no identity."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unregistered"] = "unregistered"
    extra_data: bytes = b""


IpcRequest = Annotated[
    Union[
        AuthRequest,
        ContainersRequest,
        ShareMDataRequest,
        UnregisteredRequest,
    ],
    Field(discriminator="kind"),
]

_ipc_request_adapter: TypeAdapter[IpcRequest] = TypeAdapter(IpcRequest)


def parse_ipc_request(payload: dict[str, Any]) -> IpcRequest:
    """Validate a decoded request payload into one of the request variants.

    Raises:
        pydantic.ValidationError: Unknown ``kind`` or invalid fields.
    """
    return _ipc_request_adapter.validate_python(payload)


class AuthedApp(BaseModel):
    """An app holding permissions, as listed by the backend."""

    model_config = ConfigDict(frozen=True)

    app: AppExchangeInfo
    containers: ContainerPermissions = Field(default_factory=dict)


__all__ = [
    "AppExchangeInfo",
    "AuthRequest",
    "AuthedApp",
    "ContainerPermissions",
    "ContainersRequest",
    "IpcRequest",
    "LoginDetails",
    "MDataPermissionSet",
    "PERMISSION_ORDER",
    "Permission",
    "ShareMData",
    "ShareMDataRequest",
    "UnregisteredRequest",
    "XOR_NAME_LEN",
    "ordered_permissions",
    "parse_ipc_request",
]
