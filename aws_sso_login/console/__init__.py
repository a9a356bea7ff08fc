"""
AWS console sign-in through the federation endpoint.
"""

from .federation import (
    FEDERATION_ENDPOINT,
    console_url,
    console_logout_url,
    get_signin_token,
    generate_signin_url,
)

__all__ = [
    'FEDERATION_ENDPOINT',
    'console_url',
    'console_logout_url',
    'get_signin_token',
    'generate_signin_url',
]
