"""
AWS console federation.

Exchanges role credentials for a one-time sign-in token at the AWS
federation endpoint and builds the console sign-in and logout URLs.
"""

import json
import logging
from urllib.parse import urlencode

import requests

from ..credentials.model import RoleCredential
from ..errors import FederationError

logger = logging.getLogger(__name__)

FEDERATION_ENDPOINT = "https://signin.aws.amazon.com/federation"
SESSION_DURATION = "43200"  # 12 hours
SIGNIN_ISSUER = "-aws-sso-console"


def console_url(region: str) -> str:
    return f"https://{region}.console.aws.amazon.com/"


def console_logout_url(region: str) -> str:
    return f"https://{region}.console.aws.amazon.com/console/logout!doLogout"


def get_signin_token(credential: RoleCredential) -> str:
    """
    Obtain a sign-in token from the AWS federation endpoint.

    Args:
        credential: Role credentials to exchange

    Returns:
        str: The sign-in token

    Raises:
        FederationError: On transport errors, error statuses or an unusable response
    """
    session = {
        "sessionId": credential.access_key_id,
        "sessionKey": credential.secret_access_key,
        "sessionToken": credential.session_token,
    }
    params = {
        "Action": "getSigninToken",
        "SessionDuration": SESSION_DURATION,
        "Session": json.dumps(session),
    }

    try:
        response = requests.get(FEDERATION_ENDPOINT, params=params)
        response.raise_for_status()
        token = response.json()["SigninToken"]
    except requests.RequestException as e:
        raise FederationError(f"federation request failed: {e}") from e
    except (ValueError, KeyError, TypeError) as e:
        raise FederationError(f"unexpected response from federation endpoint: {e}") from e

    logger.info("Got sign-in token from the AWS federation endpoint")
    return token


def generate_signin_url(account_id: str, region: str, signin_token: str) -> str:
    """Build the console sign-in URL for a sign-in token."""
    params = {
        "Action": "login",
        "Issuer": SIGNIN_ISSUER,
        "Destination": console_url(region),
        "SigninToken": signin_token,
    }
    query = urlencode(sorted(params.items()))
    return f"https://{account_id}.signin.aws.amazon.com/federation?{query}"
