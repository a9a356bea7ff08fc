import re
from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest
from aws_sso_login import __version__
from aws_sso_login.cli import build_parser, main
from aws_sso_login.errors import CredentialRefreshError

from conftest import iso


@pytest.mark.parametrize("command", ["console", "export", "import", "process"])
def test_missing_profile(command, capsys):
    """Test that every credential command requires --profile."""
    with pytest.raises(SystemExit) as exc:
        main([command])

    assert exc.value.code == 1
    assert "must specify --profile" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 0
    assert "usage:" in capsys.readouterr().out


def test_version(capsys):
    main(["version"])
    assert capsys.readouterr().out == f"aws-sso-login {__version__}\n"


def test_console_defaults():
    """Test console option defaults and overrides."""
    args = build_parser().parse_args(["console", "--profile", "dev"])
    assert args.force_logout is True
    assert args.logout_wait == 1

    args = build_parser().parse_args(["console", "--profile", "dev", "--no-force-logout", "--logout-wait", "5"])
    assert args.force_logout is False
    assert args.logout_wait == 5


@patch('aws_sso_login.cli.open_console')
def test_console_dispatch(mock_console):
    main(["console", "--profile", "dev", "--no-force-logout", "--logout-wait", "0"])
    mock_console.assert_called_once_with("dev", force_logout=False, logout_wait=0)


@patch('aws_sso_login.cli.process_credentials')
def test_error_exit(mock_process, capsys):
    """Test that library errors become a message and exit status 1."""
    mock_process.side_effect = CredentialRefreshError("please login with 'aws sso login --profile=dev'")

    with pytest.raises(SystemExit) as exc:
        main(["process", "--profile", "dev"])

    assert exc.value.code == 1
    assert "aws sso login --profile=dev" in capsys.readouterr().err


@patch('aws_sso_login.credentials.cache.get_aws_cli_cache_dir')
def test_export_end_to_end(mock_cache_dir, config_file, cache_dir, write_cache, capsys):
    """Test the export command against real config and cache files."""
    mock_cache_dir.return_value = cache_dir
    write_cache(iso(timedelta(hours=1)))

    main(["export", "--profile", "dev"])

    captured = capsys.readouterr()
    assert "export AWS_ACCESS_KEY_ID=ASIAEXAMPLE1234\n" in captured.out
    assert captured.err == ""


def test_version_has_a_single_source():
    """Test that setup.py reads the version from the package."""
    root = Path(__file__).resolve().parent.parent
    setup_source = (root / "setup.py").read_text()
    init_source = (root / "aws_sso_login" / "__init__.py").read_text()

    assert "version=version" in setup_source
    assert '"0.1.0"' not in setup_source
    assert re.search(r'^__version__ = "([^"]+)"', init_source, re.M).group(1) == __version__
