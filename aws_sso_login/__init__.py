"""
aws-sso-login: repackage AWS CLI SSO credentials for shells, SDKs and the
web console.
"""

__version__ = "0.1.0"

from .errors import SSOLoginError
from .profiles import SSOProfile, retrieve_profile
from .credentials import RoleCredential, get_role_credentials
from .commands import export_credentials, process_credentials, import_credentials, open_console

__all__ = [
    '__version__',
    'SSOLoginError',
    'SSOProfile',
    'retrieve_profile',
    'RoleCredential',
    'get_role_credentials',
    'export_credentials',
    'process_credentials',
    'import_credentials',
    'open_console',
]
