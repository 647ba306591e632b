"""
PKCE (Proof Key for Code Exchange) helpers for authorization requests.
"""

import base64
import hashlib
import secrets

CODE_CHALLENGE_METHOD_S256 = "S256"


def generate_code_verifier(length: int = 64) -> str:
    """
    Generates a random code verifier for PKCE.

    Args:
        length: Length of the code verifier (43-128 characters)

    Returns:
        Code verifier in base64url format

    Raises:
        ValueError: If length is outside the range allowed by RFC 7636
    """
    if not 43 <= length <= 128:
        raise ValueError("Length must be between 43 and 128")

    code_verifier = base64.urlsafe_b64encode(secrets.token_bytes(96)).decode("ascii")
    return code_verifier[:length]


def generate_code_challenge(code_verifier: str) -> str:
    """
    Derives the S256 code challenge for a code verifier.

    Args:
        code_verifier: Generated code verifier

    Returns:
        Code challenge in unpadded base64url format
    """
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
