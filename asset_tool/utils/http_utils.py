"""HTTP helpers for talking to the GitHub releases API"""

import os
from typing import Optional

import requests

from ..constants import USER_AGENT, ENV_GITHUB_TOKEN, ENV_GITHUB_TOKEN_FALLBACK


def get_github_token() -> Optional[str]:
    """Return the GitHub token from the environment, if any"""
    for name in (ENV_GITHUB_TOKEN, ENV_GITHUB_TOKEN_FALLBACK):
        token = os.environ.get(name, "").strip()
        if token:
            return token
    return None


def create_session(token: Optional[str] = None) -> requests.Session:
    """
    Create a requests session for upstream calls

    Args:
        token: Optional GitHub token sent as an Authorization header

    Returns:
        Configured session
    """
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    if token:
        session.headers["Authorization"] = f"token {token}"
    return session
