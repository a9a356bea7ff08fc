"""
Read access to the AWS CLI's role credential cache.

The AWS CLI stores role credentials obtained through SSO under
~/.aws/cli/cache, one JSON file per (start URL, role, account), named after
the SHA-1 of the sorted JSON encoding of those three attributes. This
module only reads that cache; its lifecycle belongs to the AWS CLI.
"""

import json
import logging
from datetime import datetime, timezone
from hashlib import sha1
from pathlib import Path
from typing import Mapping, Optional

from botocore.utils import JSONFileCache

from ..logger import mask_string
from ..profiles.profile_manager import SSOProfile
from ..utils.paths import get_aws_cli_cache_dir
from .model import RoleCredential

logger = logging.getLogger(__name__)

# Tried in order. %z accepts "Z", "+0000" and "+00:00".
EXPIRATION_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%SUTC",
)


def cache_key(args: Mapping[str, str]) -> str:
    """
    Compute the AWS CLI cache key for a set of SSO role attributes.

    Args:
        args: Mapping of startUrl, roleName and accountId

    Returns:
        str: Hex SHA-1 digest, independent of the mapping's key order
    """
    encoded = json.dumps(dict(args), sort_keys=True, separators=(",", ":"))
    return sha1(encoded.encode("utf-8")).hexdigest()


def cache_file_path(profile: SSOProfile, cache_dir: Optional[Path] = None) -> Path:
    """Return the cache file the AWS CLI uses for a profile's role credentials."""
    directory = Path(cache_dir) if cache_dir else get_aws_cli_cache_dir()
    return directory / f"{cache_key(profile.cache_key_args())}.json"


def read_cached_credentials(profile: SSOProfile, cache_dir: Optional[Path] = None) -> Optional[RoleCredential]:
    """
    Read a profile's role credentials from the AWS CLI cache.

    Args:
        profile: The SSO profile
        cache_dir: Cache directory (uses ~/.aws/cli/cache if None)

    Returns:
        The cached credential, or None if the file is missing, unreadable
        or does not hold a complete credential
    """
    path = cache_file_path(profile, cache_dir)

    try:
        data = JSONFileCache(working_dir=str(path.parent))[path.stem]
    except KeyError:
        logger.info("No readable cache entry %s", path)
        return None

    try:
        credential = RoleCredential.from_cache(data["Credentials"])
    except (KeyError, TypeError):
        logger.warning("Cache entry %s does not contain role credentials", path)
        return None

    logger.debug("Read cached credentials %s for profile %s",
                 mask_string(credential.access_key_id), profile.name)
    return credential


def parse_expiration(expiration: str) -> datetime:
    """
    Parse an expiration timestamp against the accepted formats.

    Returns:
        A timezone-aware datetime

    Raises:
        ValueError: If no format matches
    """
    for fmt in EXPIRATION_FORMATS:
        try:
            parsed = datetime.strptime(expiration, fmt)
        except (ValueError, TypeError):
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise ValueError(f"unable to parse expiration time {expiration!r}")


def is_expired(expiration: str, now: Optional[datetime] = None) -> bool:
    """
    Check whether an expiration timestamp has passed.

    An unparsable timestamp counts as expired, so the caller re-authenticates
    instead of trusting a credential of unknown age.
    """
    try:
        expires_at = parse_expiration(expiration)
    except ValueError:
        logger.info("Unparsable expiration %r, treating as expired", expiration)
        return True
    current = now or datetime.now(timezone.utc)
    return current > expires_at
