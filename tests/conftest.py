"""
Shared test fixtures and configuration.
"""

import json
import logging
import os
import subprocess
import sys
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

# Add the parent directory to the path so we can import the aws_sso_login package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aws_sso_login.credentials.cache import cache_key

SAMPLE_CONFIG = """
[default]
region = us-east-1

[profile dev]
sso_start_url = https://x.awsapps.com/start
sso_account_id = 123456789012
sso_role_name = Admin
sso_region = eu-west-1
region = eu-central-1

[profile no-region]
sso_start_url = https://x.awsapps.com/start
sso_account_id = 123456789012
sso_role_name = ReadOnly
sso_region = eu-west-1

[profile broken]
sso_start_url = https://x.awsapps.com/start
sso_account_id = 123456789012
sso_region = eu-west-1
"""

DEV_CACHE_ARGS = {
    "startUrl": "https://x.awsapps.com/start",
    "roleName": "Admin",
    "accountId": "123456789012",
}

CALLER_ARN = "arn:aws:sts::123456789012:assumed-role/AWSReservedSSO_Admin_0123/user@example.com"


def iso(delta: timedelta) -> str:
    """Format now + delta the way the AWS CLI writes expirations."""
    return (datetime.now(timezone.utc) + delta).strftime("%Y-%m-%dT%H:%M:%SZ")


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.aws directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(home / ".aws" / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(home / ".aws" / "credentials"))
    monkeypatch.delenv("AWS_SSO_LOGIN_AWS_CLI", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("aws_sso_login")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_file(isolated_home):
    """Write the sample AWS config file."""
    path = isolated_home / ".aws" / "config"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture
def credentials_file(isolated_home):
    return isolated_home / ".aws" / "credentials"


@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def write_cache(cache_dir):
    """Return a helper writing an AWS CLI cache entry for the dev profile."""
    def _write(expiration, access_key_id="ASIAEXAMPLE1234", args=None):
        data = {
            "ProviderType": "sso",
            "Credentials": {
                "AccessKeyId": access_key_id,
                "SecretAccessKey": "secret/key+value",
                "SessionToken": "session-token",
                "Expiration": expiration,
            },
        }
        path = cache_dir / f"{cache_key(args or DEV_CACHE_ARGS)}.json"
        path.write_text(json.dumps(data))
        return path
    return _write


@pytest.fixture
def mock_runner():
    """Command runner whose AWS CLI calls succeed without touching the cache."""
    runner = MagicMock()
    runner.is_available.return_value = True
    runner.run.return_value = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=CALLER_ARN + "\n", stderr=""
    )
    return runner


@pytest.fixture
def refreshing_runner(mock_runner, write_cache):
    """Command runner that behaves like the AWS CLI refreshing its cache."""
    def side_effect(cmd):
        write_cache(iso(timedelta(hours=1)), access_key_id="ASIAREFRESHED999")
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout=CALLER_ARN + "\n", stderr="")
    mock_runner.run.side_effect = side_effect
    return mock_runner
