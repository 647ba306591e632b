"""
Random token helpers for the registration flow.
"""

import secrets

from devicereg.config import get_settings


def generate_state(nbytes: int | None = None) -> str:
    """
    Generate a cryptographically secure random state parameter.

    Args:
        nbytes: Random bytes to draw (defaults to the STATE_LENGTH setting)

    Returns:
        str: URL-safe random string
    """
    return secrets.token_urlsafe(nbytes or get_settings().state_length)
