"""
Role credentials: the AWS CLI cache and the refresh policy around it.
"""

from .model import RoleCredential
from .cache import (
    cache_key,
    cache_file_path,
    read_cached_credentials,
    parse_expiration,
    is_expired,
)
from .resolver import get_role_credentials, update_cached_role_credentials

__all__ = [
    'RoleCredential',
    'cache_key',
    'cache_file_path',
    'read_cached_credentials',
    'parse_expiration',
    'is_expired',
    'get_role_credentials',
    'update_cached_role_credentials',
]
