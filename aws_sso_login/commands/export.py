import logging
import shlex
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..credentials.resolver import get_role_credentials
from ..profiles.profile_manager import retrieve_profile
from ..utils.runner import CommandRunner

logger = logging.getLogger(__name__)


def print_env_variable(name: str, value: Optional[str], out: TextIO) -> None:
    """Write a shell export line, skipping empty values."""
    if value:
        print(f"export {name}={shlex.quote(value)}", file=out)


def export_credentials(profile_name: str,
                       runner: Optional[CommandRunner] = None,
                       out: Optional[TextIO] = None,
                       config_path: Optional[Path] = None,
                       cache_dir: Optional[Path] = None) -> None:
    """
    Print a profile's credentials as shell export statements.

    Intended for `eval "$(aws-sso-login export --profile NAME)"`, so
    nothing but export lines is written to the output.
    """
    out = out or sys.stdout
    profile = retrieve_profile(profile_name, config_path)
    credential = get_role_credentials(profile, runner, silent=True, out=out, cache_dir=cache_dir)

    print_env_variable("AWS_ACCESS_KEY_ID", credential.access_key_id, out)
    print_env_variable("AWS_SECRET_ACCESS_KEY", credential.secret_access_key, out)
    print_env_variable("AWS_SESSION_TOKEN", credential.session_token, out)
    print_env_variable("AWS_SECURITY_TOKEN", credential.session_token, out)
    print_env_variable("AWS_DEFAULT_REGION", profile.region, out)
    logger.info("Exported credentials for profile %s", profile_name)
