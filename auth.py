from __future__ import annotations

import time
from typing import Optional

import jwt
from fastapi import Request

JWT_ALGORITHM = "HS256"


def generateToken(subject: str, secret: str, ttlSeconds: int = 3600, now: Optional[float] = None) -> str:
    """
    Issue an HS256 JWT for ``subject`` that expires ``ttlSeconds`` from ``now``.

    Args:
        subject (str): Value of the ``sub`` claim.
        secret (str): Shared signing secret.
        ttlSeconds (int): Token lifetime in seconds.
        now (float | None): Issue time as a UNIX timestamp; defaults to the current time.

    Returns:
        str: The encoded token.
    """
    issuedAt = int(time.time() if now is None else now)
    claims = {"sub": subject, "iat": issuedAt, "exp": issuedAt + ttlSeconds}
    return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)


def validateToken(token: str, secret: str, now: Optional[float] = None) -> bool:
    """Return True if ``token`` is an unexpired HS256 JWT signed with ``secret``."""
    # An explicit ``now`` replaces the library's wall-clock expiry check
    options = {"require": ["exp"], "verify_exp": now is None}
    try:
        claims = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM], options=options)
    except jwt.InvalidTokenError:
        return False
    if now is not None:
        expiresAt = claims["exp"]
        return isinstance(expiresAt, (int, float)) and expiresAt > now
    return True


class JwtAuthorizer:
    """Authorizes requests that carry a valid ``Authorization: Bearer <token>`` header."""

    def __init__(self, secret: str):
        self.secret = secret

    def isAuthorized(self, request: Request) -> bool:
        tokenString = request.headers.get("Authorization", "")
        if not tokenString:
            return False
        tokenString = tokenString.removeprefix("Bearer ").strip()
        return validateToken(tokenString, self.secret)


class AllowAllAuthorizer:
    """Used when no JWT secret is configured."""

    def isAuthorized(self, request: Request) -> bool:
        return True
