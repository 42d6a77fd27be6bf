"""Resolve the caller identity from the bearer credential."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

logger = logging.getLogger(__name__)

IDENTITY_CLAIMS = ("username", "sub")

security = HTTPBearer(auto_error=False)


def identity_from_token(token: str) -> Optional[str]:
    """Read the identity claim from a JWT.

    The signature is not checked here; the backend that issued the credential
    verifies it on every data call.
    """

    try:
        claims: Dict[str, Any] = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as exc:
        logger.info("Rejected unparseable credential: %s", exc)
        return None
    for claim in IDENTITY_CLAIMS:
        value = claims.get(claim)
        if isinstance(value, str) and value:
            return value
    return None


def current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """FastAPI dependency; ``None`` when the credential is missing or unparseable."""

    if credentials is None or not credentials.credentials:
        return None
    return identity_from_token(credentials.credentials)
