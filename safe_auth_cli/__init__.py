"""SAFE Authenticator CLI.

Resolves login credentials, asks the operator to approve authorisation
requests, and lists authorised apps. Account and network operations are
delegated to an authenticator backend.
"""

from .credentials import CredentialResolver
from .environment import AuthEnvironment
from .errors import AuthCliError
from .errors import BackendError
from .errors import ConfigFieldMissingError
from .errors import ConfigMalformedError
from .errors import ConfigUnreadableError
from .errors import CredentialError
from .errors import EmptyCredentialError
from .errors import InconsistentEnvError
from .models import AppExchangeInfo
from .models import AuthedApp
from .models import AuthRequest
from .models import ContainersRequest
from .models import IpcRequest
from .models import LoginDetails
from .models import MDataPermissionSet
from .models import Permission
from .models import ShareMData
from .models import ShareMDataRequest
from .models import UnregisteredRequest
from .ui.app_list import ListMode
from .ui.app_list import format_authed_apps
from .ui.consent import ConsentEngine

__version__ = "0.3.0"

__all__ = [
    "AppExchangeInfo",
    "AuthCliError",
    "AuthEnvironment",
    "AuthRequest",
    "AuthedApp",
    "BackendError",
    "ConfigFieldMissingError",
    "ConfigMalformedError",
    "ConfigUnreadableError",
    "ConsentEngine",
    "ContainersRequest",
    "CredentialError",
    "CredentialResolver",
    "EmptyCredentialError",
    "InconsistentEnvError",
    "IpcRequest",
    "ListMode",
    "LoginDetails",
    "MDataPermissionSet",
    "Permission",
    "ShareMData",
    "ShareMDataRequest",
    "UnregisteredRequest",
    "format_authed_apps",
]
