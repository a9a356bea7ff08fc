import json
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..credentials.resolver import get_role_credentials
from ..profiles.profile_manager import retrieve_profile
from ..utils.runner import CommandRunner

logger = logging.getLogger(__name__)


def process_credentials(profile_name: str,
                        runner: Optional[CommandRunner] = None,
                        out: Optional[TextIO] = None,
                        config_path: Optional[Path] = None,
                        cache_dir: Optional[Path] = None) -> None:
    """
    Print a profile's credentials as credential_process JSON.

    Use from another profile with:
        credential_process = aws-sso-login process --profile NAME
    """
    out = out or sys.stdout
    logger.info("Processing credentials for profile: %s", profile_name)

    profile = retrieve_profile(profile_name, config_path)
    credential = get_role_credentials(profile, runner, silent=True, out=out, cache_dir=cache_dir)

    print(json.dumps(credential.to_process_payload()), file=out)
