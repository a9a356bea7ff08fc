import io
from datetime import timedelta

import pytest
from aws_sso_login.commands.export import export_credentials, print_env_variable
from aws_sso_login.errors import MissingProfileAttributeError

from conftest import iso


def test_export_credentials(config_file, cache_dir, write_cache, mock_runner):
    """Test shell export output for a profile with a region."""
    write_cache(iso(timedelta(hours=1)))
    out = io.StringIO()

    export_credentials("dev", runner=mock_runner, out=out, cache_dir=cache_dir)

    assert out.getvalue().splitlines() == [
        "export AWS_ACCESS_KEY_ID=ASIAEXAMPLE1234",
        "export AWS_SECRET_ACCESS_KEY=secret/key+value",
        "export AWS_SESSION_TOKEN=session-token",
        "export AWS_SECURITY_TOKEN=session-token",
        "export AWS_DEFAULT_REGION=eu-central-1",
    ]
    mock_runner.run.assert_not_called()


def test_export_skips_empty_region(config_file, tmp_path, mock_runner, write_cache, cache_dir):
    """Test that no line is printed for an empty value."""
    args = {"startUrl": "https://x.awsapps.com/start", "roleName": "ReadOnly", "accountId": "123456789012"}
    write_cache(iso(timedelta(hours=1)), args=args)
    out = io.StringIO()

    export_credentials("no-region", runner=mock_runner, out=out, cache_dir=cache_dir)

    assert "AWS_DEFAULT_REGION" not in out.getvalue()
    assert len(out.getvalue().splitlines()) == 4


def test_export_after_refresh_is_silent(config_file, cache_dir, refreshing_runner):
    """Test that a refresh adds nothing but export lines to the output."""
    out = io.StringIO()

    export_credentials("dev", runner=refreshing_runner, out=out, cache_dir=cache_dir)

    assert all(line.startswith("export ") for line in out.getvalue().splitlines())
    assert "ASIAREFRESHED999" in out.getvalue()


def test_print_env_variable_quotes_values():
    out = io.StringIO()

    print_env_variable("TOKEN", "a b$c", out)
    print_env_variable("EMPTY", "", out)
    print_env_variable("NONE", None, out)

    assert out.getvalue() == "export TOKEN='a b$c'\n"


def test_export_invalid_profile(config_file, cache_dir, mock_runner):
    with pytest.raises(MissingProfileAttributeError):
        export_credentials("broken", runner=mock_runner, out=io.StringIO(), cache_dir=cache_dir)
    mock_runner.run.assert_not_called()
