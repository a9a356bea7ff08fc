"""
Utility functions and capabilities shared by the commands.
"""

from .paths import (
    get_aws_config_path,
    get_aws_credentials_path,
    get_aws_cli_cache_dir,
    get_aws_cli_executable,
)
from .runner import CommandRunner
from .browser import open_browser

__all__ = [
    'get_aws_config_path',
    'get_aws_credentials_path',
    'get_aws_cli_cache_dir',
    'get_aws_cli_executable',
    'CommandRunner',
    'open_browser',
]
