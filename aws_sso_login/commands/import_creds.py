"""
Write SSO role credentials into the shared credentials file.

The file is edited line by line so that comments, key case and every
entry other than the credential keys of the target section survive.
"""

import configparser
import logging
import os
import re
import sys
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, TextIO, Tuple

from ..credentials.model import RoleCredential
from ..credentials.resolver import get_role_credentials
from ..errors import CredentialsWriteError
from ..profiles.profile_manager import retrieve_profile
from ..utils.paths import get_aws_credentials_path
from ..utils.runner import CommandRunner

logger = logging.getLogger(__name__)

SECTION_RE = re.compile(r"^\s*\[(?P<name>[^\]]+)\]")
OPTION_RE = re.compile(r"^(?P<key>[^\s=:#;][^=:]*?)\s*[=:]")

CREDENTIAL_KEYS = (
    "aws_access_key_id",
    "aws_secret_access_key",
    "aws_session_token",
    "aws_security_token",
)


def _credential_values(credential: RoleCredential) -> Dict[str, str]:
    return dict(zip(CREDENTIAL_KEYS, (
        credential.access_key_id,
        credential.secret_access_key,
        credential.session_token,
        credential.session_token,
    )))


def read_credentials_lines(credentials_path: Path) -> List[str]:
    """
    Read the credentials file and check that it parses.

    Returns:
        The file's lines, or an empty list if it does not exist

    Raises:
        CredentialsWriteError: If the file exists but cannot be read, decoded or parsed
    """
    if not credentials_path.exists():
        return []
    try:
        with open(credentials_path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialsWriteError(f"cannot read credentials file {credentials_path}: {e}") from e

    # Keep keys like 'x-expiration' intact
    config = configparser.ConfigParser(interpolation=None, inline_comment_prefixes=())
    config.optionxform = str
    try:
        config.read_string("".join(lines), source=str(credentials_path))
    except configparser.Error as e:
        raise CredentialsWriteError(f"cannot parse credentials file {credentials_path}: {e}") from e
    return lines


def _section_range(lines: List[str], section_name: str) -> Optional[Tuple[int, int]]:
    start = None
    for index, line in enumerate(lines):
        match = SECTION_RE.match(line)
        if not match:
            continue
        if start is not None:
            return start, index
        if match.group("name").strip() == section_name:
            start = index + 1
    return (start, len(lines)) if start is not None else None


def update_section_lines(lines: List[str], section_name: str, values: Dict[str, str]) -> List[str]:
    """
    Set keys in one section of INI lines, leaving every other line as it is.

    Existing keys keep their position and spelling and get the new value
    (continuation lines of the old value are dropped). Missing keys go after
    the section's last entry; a missing section is appended at the end.
    """
    lines = [line if line.endswith("\n") else line + "\n" for line in lines]
    bounds = _section_range(lines, section_name)

    if bounds is None:
        if lines and lines[-1].strip():
            lines.append("\n")
        lines.append(f"[{section_name}]\n")
        lines.extend(f"{key} = {value}\n" for key, value in values.items())
        return lines

    start, end = bounds
    pending = dict(values)
    section = []
    last_entry = 0
    index = start
    while index < end:
        line = lines[index]
        index += 1
        match = OPTION_RE.match(line)
        if match and match.group("key").strip().lower() in pending:
            key = match.group("key").strip()
            section.append(f"{key} = {pending.pop(key.lower())}\n")
            while index < end and lines[index][:1].isspace() and lines[index].strip():
                index += 1
            last_entry = len(section)
            continue
        section.append(line)
        stripped = line.strip()
        if stripped and not stripped.startswith(("#", ";")):
            last_entry = len(section)

    section[last_entry:last_entry] = [f"{key} = {value}\n" for key, value in pending.items()]
    return lines[:start] + section + lines[end:]


def write_credentials_file(profile_name: str, credential: RoleCredential, credentials_path: Path) -> None:
    """
    Store credentials in a profile section of the credentials file.

    Only the credential keys of the section are set; other keys, comments
    and sections are left as they are. The file is replaced atomically.

    Raises:
        CredentialsWriteError: If the file cannot be read or written
    """
    lines = read_credentials_lines(credentials_path)
    lines = update_section_lines(lines, profile_name, _credential_values(credential))

    try:
        credentials_path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(dir=credentials_path.parent, prefix=".credentials.", suffix=".tmp")
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.writelines(lines)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(temp_path, 0o600)
            os.replace(temp_path, credentials_path)
        except OSError:
            os.unlink(temp_path)
            raise
    except OSError as e:
        raise CredentialsWriteError(f"failed to write credentials to {credentials_path}: {e}") from e


def import_credentials(profile_name: str,
                       runner: Optional[CommandRunner] = None,
                       out: Optional[TextIO] = None,
                       config_path: Optional[Path] = None,
                       credentials_path: Optional[Path] = None,
                       cache_dir: Optional[Path] = None) -> Path:
    """
    Fetch a profile's credentials and write them to the credentials file.

    Returns:
        Path: The credentials file that was written
    """
    out = out or sys.stdout
    profile = retrieve_profile(profile_name, config_path)
    credential = get_role_credentials(profile, runner, silent=False, out=out, cache_dir=cache_dir)

    path = Path(credentials_path) if credentials_path else get_aws_credentials_path()
    write_credentials_file(profile_name, credential, path)

    print(f"Wrote credentials to profile [{profile_name}] in {path}", file=out)
    return path
