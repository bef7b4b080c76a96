"""Tests for request and app models."""

import pytest
from pydantic import ValidationError

from safe_auth_cli.models import AuthRequest
from safe_auth_cli.models import ContainersRequest
from safe_auth_cli.models import LoginDetails
from safe_auth_cli.models import MDataPermissionSet
from safe_auth_cli.models import Permission
from safe_auth_cli.models import ShareMData
from safe_auth_cli.models import ShareMDataRequest
from safe_auth_cli.models import UnregisteredRequest
from safe_auth_cli.models import ordered_permissions
from safe_auth_cli.models import parse_ipc_request

APP = {"id": "net.maidsafe.test", "name": "Test App", "vendor": "MaidSafe"}


class TestParseIpcRequest:
    def test_auth_request(self):
        request = parse_ipc_request(
            {
                "kind": "auth",
                "app": APP,
                "app_container": True,
                "containers": {"_documents": ["Insert", "Update"]},
            }
        )
        assert isinstance(request, AuthRequest)
        assert request.app.name == "Test App"
        assert request.app_container is True
        assert request.containers == {"_documents": {Permission.INSERT, Permission.UPDATE}}

    def test_containers_request(self):
        request = parse_ipc_request(
            {"kind": "containers", "app": APP, "containers": {"_public": ["Delete"]}}
        )
        assert isinstance(request, ContainersRequest)
        assert request.containers["_public"] == {Permission.DELETE}

    def test_share_mdata_request_with_hex_name(self):
        name = "ab" * 32
        request = parse_ipc_request(
            {
                "kind": "share_mdata",
                "app": APP,
                "mdata": [
                    {
                        "type_tag": 15000,
                        "name": name,
                        "perms": {"actions": {"Insert": True, "Update": False}},
                    }
                ],
            }
        )
        assert isinstance(request, ShareMDataRequest)
        entry = request.mdata[0]
        assert entry.type_tag == 15000
        assert entry.name == bytes.fromhex(name)
        assert entry.xor_name == name
        assert entry.perms.is_allowed(Permission.INSERT) is True
        assert entry.perms.is_allowed(Permission.UPDATE) is False
        assert entry.perms.is_allowed(Permission.DELETE) is None

    def test_unregistered_request(self):
        request = parse_ipc_request({"kind": "unregistered"})
        assert isinstance(request, UnregisteredRequest)
        assert request.extra_data == b""

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            parse_ipc_request({"kind": "revoke", "app": APP})

    def test_unknown_permission_rejected(self):
        with pytest.raises(ValidationError):
            parse_ipc_request({"kind": "containers", "app": APP, "containers": {"c": ["Read"]}})


class TestShareMData:
    @pytest.mark.parametrize("name", [b"short", bytes(33), "zz" * 32])
    def test_name_must_be_32_bytes_or_hex(self, name):
        with pytest.raises(ValidationError):
            ShareMData(type_tag=1, name=name)

    def test_default_perms_are_undetermined(self):
        entry = ShareMData(type_tag=1, name=bytes(32))
        assert entry.perms.is_allowed(Permission.INSERT) is None


class TestMDataPermissionSet:
    def test_allow_denies_the_rest(self):
        perms = MDataPermissionSet.allow(Permission.INSERT)
        assert perms.is_allowed(Permission.INSERT) is True
        assert perms.is_allowed(Permission.MANAGE_PERMISSIONS) is False

    def test_deny_allows_the_rest(self):
        perms = MDataPermissionSet.deny(Permission.DELETE)
        assert perms.is_allowed(Permission.DELETE) is False
        assert perms.is_allowed(Permission.UPDATE) is True


def test_ordered_permissions():
    perms = {Permission.DELETE, Permission.INSERT, Permission.MANAGE_PERMISSIONS}
    assert ordered_permissions(perms) == [
        Permission.INSERT,
        Permission.DELETE,
        Permission.MANAGE_PERMISSIONS,
    ]


def test_login_details_are_frozen():
    details = LoginDetails(secret="s", password="p")
    with pytest.raises(ValidationError):
        details.secret = "other"
