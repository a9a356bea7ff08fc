"""
Credential resolution for SSO profiles.

Cached credentials are used while they are valid. Otherwise the AWS CLI is
asked to refresh its cache once, by running a lightweight identity check
for the profile, and the cache is read again.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..errors import CredentialRefreshError, CredentialsExpiredError, CredentialsUnavailableError
from ..logger import mask_string
from ..profiles.profile_manager import SSOProfile
from ..utils.paths import get_aws_cli_executable
from ..utils.runner import CommandRunner
from .cache import is_expired, read_cached_credentials
from .model import RoleCredential

logger = logging.getLogger(__name__)


def _login_hint(profile_name: str) -> str:
    return f"please login with 'aws sso login --profile={profile_name}'"


def refresh_command(profile_name: str, executable: Optional[str] = None) -> List[str]:
    """Build the AWS CLI call that makes it refresh its cached role credentials."""
    return [
        executable or get_aws_cli_executable(),
        "sts", "get-caller-identity",
        "--query", "Arn",
        "--output", "text",
        "--profile", profile_name,
    ]


def update_cached_role_credentials(profile_name: str,
                                   runner: CommandRunner,
                                   silent: bool = False,
                                   out: Optional[TextIO] = None) -> None:
    """
    Ask the AWS CLI to refresh its credential cache for a profile.

    Args:
        profile_name: Name of the SSO profile
        runner: Command runner used to invoke the AWS CLI
        silent: Suppress the confirmation line on the writer
        out: Writer for the confirmation line (stdout if None)

    Raises:
        CredentialRefreshError: If the AWS CLI is missing or the call fails
    """
    cmd = refresh_command(profile_name)
    if not runner.is_available(cmd[0]):
        raise CredentialRefreshError(
            f"AWS CLI '{cmd[0]}' is not installed or not in PATH; "
            f"install it, then {_login_hint(profile_name)}"
        )

    result = runner.run(cmd)
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        logger.error(stderr)
        raise CredentialRefreshError(_login_hint(profile_name), stderr=stderr)

    if not silent:
        print(f"Updated credentials for: {(result.stdout or '').strip()}", file=out or sys.stdout)


def get_role_credentials(profile: SSOProfile,
                         runner: Optional[CommandRunner] = None,
                         silent: bool = False,
                         out: Optional[TextIO] = None,
                         cache_dir: Optional[Path] = None) -> RoleCredential:
    """
    Return unexpired role credentials for a profile.

    Args:
        profile: The SSO profile
        runner: Command runner used for the refresh call (a CommandRunner if None)
        silent: Suppress the refresh confirmation line
        out: Writer for the refresh confirmation line (stdout if None)
        cache_dir: AWS CLI cache directory (uses ~/.aws/cli/cache if None)

    Returns:
        RoleCredential: Credentials that have not yet expired

    Raises:
        CredentialRefreshError: If the refresh call fails
        CredentialsUnavailableError: If the cache cannot be read after the refresh
        CredentialsExpiredError: If the cached credentials are still expired after the refresh
    """
    runner = runner or CommandRunner()

    credential = read_cached_credentials(profile, cache_dir)
    if credential is not None and not is_expired(credential.expiration):
        logger.info("Using cached credentials %s for profile %s",
                    mask_string(credential.access_key_id), profile.name)
        return credential

    if credential is None:
        logger.info("No cached credentials for profile %s, refreshing", profile.name)
    else:
        logger.info("Cached credentials for profile %s expired at %s, refreshing",
                    profile.name, credential.expiration)

    update_cached_role_credentials(profile.name, runner, silent=silent, out=out)

    credential = read_cached_credentials(profile, cache_dir)
    if credential is None:
        raise CredentialsUnavailableError(
            f"could not retrieve credentials for '{profile.name}'; {_login_hint(profile.name)}"
        )
    if is_expired(credential.expiration):
        raise CredentialsExpiredError(
            f"credentials for '{profile.name}' are expired; {_login_hint(profile.name)}"
        )
    return credential
