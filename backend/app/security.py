"""
Bearer token issuing and verification.

Tokens are HS256 JWTs signed with ``SECRET_KEY``. They only identify the
caller (``sub`` = username); roles are looked up from the users table on
every request.
"""

import time
from typing import Optional

from authlib.jose import JoseError, JsonWebToken

from app.config import settings

_jwt = JsonWebToken([settings.JWT_ALGORITHM])


class InvalidTokenError(Exception):
    pass


def create_access_token(username: str, ttl_seconds: Optional[int] = None) -> str:
    now = int(time.time())
    ttl = ttl_seconds if ttl_seconds is not None else settings.ACCESS_TOKEN_TTL_SECONDS
    header = {"alg": settings.JWT_ALGORITHM, "typ": "JWT"}
    claims = {"sub": username, "iat": now, "exp": now + ttl}
    token = _jwt.encode(header, claims, settings.SECRET_KEY)
    return token.decode("utf-8")


def decode_access_token(token: str) -> str:
    """
    Verify ``token`` and return the username it was issued for.

    Raises:
        InvalidTokenError: bad signature, malformed, expired or missing ``sub``.
    """
    try:
        claims = _jwt.decode(token, settings.SECRET_KEY)
        claims.validate()
    except (JoseError, ValueError) as e:
        raise InvalidTokenError(str(e)) from e
    username = claims.get("sub")
    if not username:
        raise InvalidTokenError("Token has no subject")
    return username
