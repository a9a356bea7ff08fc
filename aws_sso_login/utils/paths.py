"""
Locations of the files aws-sso-login reads and writes.

The config and credentials paths follow the same environment overrides
as the AWS SDKs, so they are resolved through botocore's session
variables rather than hard-coded.
"""

import os
from pathlib import Path

from botocore.session import Session

AWS_CLI_ENV_VAR = "AWS_SSO_LOGIN_AWS_CLI"
DEFAULT_AWS_CLI = "aws"


def get_aws_config_path() -> Path:
    """Get the path to the AWS config file (honours AWS_CONFIG_FILE)."""
    return Path(os.path.expanduser(Session().get_config_variable("config_file")))


def get_aws_credentials_path() -> Path:
    """Get the path to the AWS credentials file (honours AWS_SHARED_CREDENTIALS_FILE)."""
    return Path(os.path.expanduser(Session().get_config_variable("credentials_file")))


def get_aws_cli_cache_dir() -> Path:
    """Get the path to the AWS CLI's credential cache directory."""
    aws_dir = Path.home() / ".aws"
    return aws_dir / "cli" / "cache"


def get_aws_cli_executable() -> str:
    """Get the name or path of the AWS CLI executable."""
    return os.environ.get(AWS_CLI_ENV_VAR) or DEFAULT_AWS_CLI
