import os
from datetime import datetime, timedelta

from dotenv import load_dotenv
from jose import JWTError, jwt

load_dotenv()

# 1. THE KEYS
SECRET_KEY = os.getenv("ACCESS_TOKEN_SECRET", "hirenow_dev_secret_CHANGE_THIS")
ALGORITHM = "HS256"
TOKEN_EXPIRE_DAYS = 365


class InvalidToken(Exception):
    """Raised when a bearer token cannot be trusted."""


# 2. THE TOKEN TOOLS
def create_access_token(email: str, expires_delta: timedelta = None) -> str:
    """Sign an {email} claim. Tokens live for a year unless told otherwise."""
    expire = datetime.utcnow() + (expires_delta or timedelta(days=TOKEN_EXPIRE_DAYS))
    to_encode = {"email": email, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Verify a token and return its claim.

    Raises InvalidToken for a bad signature, an expired token, garbage input,
    or a claim with no email in it.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    if not payload.get("email"):
        raise InvalidToken("Token has no email claim")

    return payload
