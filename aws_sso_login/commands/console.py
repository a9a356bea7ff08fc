import logging
import sys
import time
from pathlib import Path
from typing import Callable, Optional, TextIO

from ..console.federation import console_logout_url, generate_signin_url, get_signin_token
from ..credentials.resolver import get_role_credentials
from ..profiles.profile_manager import retrieve_profile
from ..utils.browser import open_browser
from ..utils.runner import CommandRunner

logger = logging.getLogger(__name__)

Browser = Callable[[str], bool]


def _open(url: str, browser: Browser, out: TextIO) -> None:
    if not browser(url):
        print(f"Please open your browser and navigate to: {url}", file=out)


def handle_logout(region: str, force_logout: bool, logout_wait: int, browser: Browser, out: TextIO) -> None:
    """Open the console logout page and wait, if requested."""
    if force_logout or logout_wait > 0:
        _open(console_logout_url(region), browser, out)
        if logout_wait > 0:
            logger.info("Waiting %d second(s) for the console logout", logout_wait)
            time.sleep(logout_wait)


def open_console(profile_name: str,
                 force_logout: bool = True,
                 logout_wait: int = 1,
                 runner: Optional[CommandRunner] = None,
                 browser: Optional[Browser] = None,
                 out: Optional[TextIO] = None,
                 config_path: Optional[Path] = None,
                 cache_dir: Optional[Path] = None) -> str:
    """
    Sign into the AWS web console for a profile in the default browser.

    Args:
        profile_name: Name of the SSO profile
        force_logout: Log out of any existing console session first
        logout_wait: Seconds to wait after the logout before signing in
        runner: Command runner for the credential refresh
        browser: Callable opening a URL, returning False on failure
        out: Writer for user-facing messages (stdout if None)

    Returns:
        str: The sign-in URL that was opened
    """
    out = out or sys.stdout
    browser = browser or open_browser

    profile = retrieve_profile(profile_name, config_path)
    credential = get_role_credentials(profile, runner, silent=False, out=out, cache_dir=cache_dir)

    signin_token = get_signin_token(credential)
    signin_url = generate_signin_url(profile.sso_account_id, profile.sso_region, signin_token)

    handle_logout(profile.sso_region, force_logout, logout_wait, browser, out)
    _open(signin_url, browser, out)
    return signin_url
