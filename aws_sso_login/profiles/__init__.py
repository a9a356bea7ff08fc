"""
SSO profile lookup and validation.
"""

from .profile_manager import (
    REQUIRED_KEYS,
    SSOProfile,
    load_config,
    retrieve_profile,
)

__all__ = [
    'REQUIRED_KEYS',
    'SSOProfile',
    'load_config',
    'retrieve_profile',
]
