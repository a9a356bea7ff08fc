"""
Exceptions raised by aws-sso-login.

Library code raises these; only the CLI turns them into an exit status.
"""

from typing import Optional


class SSOLoginError(Exception):
    """Base class for all aws-sso-login errors."""


class ProfileNotSpecifiedError(SSOLoginError):
    """No profile name was given on the command line."""

    def __init__(self):
        super().__init__("must specify --profile")


class ConfigFileError(SSOLoginError):
    """The AWS config file is missing or cannot be parsed."""


class ProfileNotFoundError(SSOLoginError):
    """The requested profile section does not exist."""


class MissingProfileAttributeError(SSOLoginError):
    """A profile exists but lacks one of the required SSO attributes."""

    def __init__(self, attribute: str, profile_name: str):
        self.attribute = attribute
        self.profile_name = profile_name
        super().__init__(f'missing required attribute "{attribute}" in profile {profile_name}')


class CredentialRefreshError(SSOLoginError):
    """The AWS CLI could not refresh its credential cache."""

    def __init__(self, message: str, stderr: Optional[str] = None):
        self.stderr = stderr
        super().__init__(message)


class CredentialsUnavailableError(SSOLoginError):
    """No cached credentials could be read, even after a refresh."""


class CredentialsExpiredError(SSOLoginError):
    """Cached credentials are still expired after a refresh."""


class FederationError(SSOLoginError):
    """The federation endpoint did not return a usable sign-in token."""


class CredentialsWriteError(SSOLoginError):
    """The shared credentials file could not be written."""
