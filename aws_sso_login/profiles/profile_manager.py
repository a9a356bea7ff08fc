"""
SSO Profile Manager

This module reads SSO profiles from the AWS config file and validates that
they carry everything needed to look up the AWS CLI's cached role
credentials for them.
"""

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..errors import ConfigFileError, MissingProfileAttributeError, ProfileNotFoundError
from ..utils.paths import get_aws_config_path

__all__ = [
    'REQUIRED_KEYS',
    'SSOProfile',
    'load_config',
    'retrieve_profile',
]

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("sso_start_url", "sso_account_id", "sso_role_name", "sso_region")


@dataclass(frozen=True)
class SSOProfile:
    """An SSO profile section from the AWS config file."""
    name: str
    sso_start_url: str
    sso_account_id: str
    sso_role_name: str
    sso_region: str
    region: Optional[str] = None

    def cache_key_args(self) -> Dict[str, str]:
        """Return the attributes the AWS CLI hashes into its cache file name."""
        return {
            "startUrl": self.sso_start_url,
            "roleName": self.sso_role_name,
            "accountId": self.sso_account_id,
        }

    def __str__(self) -> str:
        region_str = f" - {self.region}" if self.region else ""
        return f"{self.name} ({self.sso_role_name}@{self.sso_account_id}){region_str}"


def _section_name(profile_name: str, config: configparser.ConfigParser) -> Optional[str]:
    section = f"profile {profile_name}"
    if section in config:
        return section
    # The default profile may be written without the "profile " prefix
    if profile_name == "default" and config.has_section("default"):
        return "default"
    return None


def load_config(config_path: Optional[Path] = None) -> configparser.ConfigParser:
    """
    Load the AWS config file.

    Args:
        config_path: Path to the config file (uses AWS_CONFIG_FILE or ~/.aws/config if None)

    Returns:
        The parsed config

    Raises:
        ConfigFileError: If the file is missing, unreadable or cannot be parsed
    """
    path = Path(config_path) if config_path else get_aws_config_path()
    if not path.exists():
        logger.error("AWS config file not found at %s", path)
        raise ConfigFileError(f"cannot load AWS config file {path}: file not found")

    config = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, "r", encoding="utf-8") as f:
            config.read_file(f)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        logger.error("Failed to load AWS config file at %s: %s", path, e)
        raise ConfigFileError(f"cannot load AWS config file {path}: {e}") from e
    return config


def retrieve_profile(profile_name: str, config_path: Optional[Path] = None) -> SSOProfile:
    """
    Retrieve and validate an SSO profile from the AWS config file.

    Args:
        profile_name: Name of the profile (without the "profile " prefix)
        config_path: Path to the config file (uses AWS_CONFIG_FILE or ~/.aws/config if None)

    Returns:
        The validated profile

    Raises:
        ConfigFileError: If the config file cannot be loaded
        ProfileNotFoundError: If the profile section does not exist
        MissingProfileAttributeError: If a required SSO attribute is empty or absent
    """
    path = Path(config_path) if config_path else get_aws_config_path()
    config = load_config(path)

    section = _section_name(profile_name, config)
    if section is None:
        logger.error("Profile [profile %s] not found in config file: %s", profile_name, path)
        raise ProfileNotFoundError(f"cannot find profile [profile {profile_name}] in {path}")

    values = {}
    for key in REQUIRED_KEYS:
        value = config.get(section, key, fallback="").strip()
        if not value:
            raise MissingProfileAttributeError(key, profile_name)
        values[key] = value

    region = config.get(section, "region", fallback="").strip() or None

    logger.info("Retrieved profile %s from %s", profile_name, path)
    return SSOProfile(name=profile_name, region=region, **values)
