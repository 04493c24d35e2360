import logging
from typing import Optional

from fastapi import Header, HTTPException, Request, status

from hirenow.utils.security import InvalidToken, decode_access_token

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def verify_token(request: Request, authorization: Optional[str] = Header(None)) -> dict:
    """
    Gate a route behind a bearer token.

    The token is whatever follows the first space of the Authorization
    header; the scheme word itself is not checked. On success the decoded
    claim is stored on request.state.user and returned.
    """
    if not authorization or not authorization.strip():
        logger.warning("Rejected %s %s: no token", request.method, request.url.path)
        raise _unauthorized("Token is null")

    parts = authorization.strip().split(" ", 1)
    token = parts[1].strip() if len(parts) == 2 else ""

    try:
        claim = decode_access_token(token)
    except InvalidToken:
        logger.warning("Rejected %s %s: token not valid", request.method, request.url.path)
        raise _unauthorized("Token not match")

    request.state.user = claim
    return claim


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Domains are case-insensitive; the local part is kept as written."""
    if not email:
        return email
    local, at, domain = email.strip().rpartition("@")
    if not at:
        return email.strip()
    return f"{local}@{domain.lower()}"


def require_self(claim_email: str, supplied_email: Optional[str]):
    """Only the owner of an email may act on resources filed under it."""
    if not supplied_email or normalize_email(claim_email) != normalize_email(supplied_email):
        logger.warning("Forbidden: %s tried to act as %s", claim_email, supplied_email)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access")
