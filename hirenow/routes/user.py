# ========================================
# hirenow/routes/user.py - TOKENS & ACCOUNTS
# ========================================

import logging

from fastapi import APIRouter, Depends, HTTPException

from hirenow.database import get_db
from hirenow.schemas.user import RegisterResponse, TokenRequest, TokenResponse, UserCreate, UserLookup
from hirenow.utils.auth import require_self, verify_token
from hirenow.utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


# ✅ 1. ISSUE TOKEN
@router.post("/token", response_model=TokenResponse)
async def issue_token(body: TokenRequest):
    """Sign a bearer token for an email. Nothing is looked up or stored."""
    token = create_access_token(body.email)
    logger.info("Issued token for %s", body.email)
    return {"token": token}


# ✅ 2. REGISTER
@router.post("/auth/register", response_model=RegisterResponse, response_model_exclude_none=True)
async def register_user(user: UserCreate, db=Depends(get_db)):
    """
    Register an employer or job seeker.

    Registering an email twice is not an error: the second call answers
    200 with created=false and leaves the stored account alone.
    """
    existing_user = await db.users.find_one({"email": user.email})
    if existing_user:
        return {"created": False, "message": "User already registered"}

    user_dict = user.dict(exclude_unset=True)
    user_dict.pop("_id", None)

    result = await db.users.insert_one(user_dict)
    logger.info("Registered %s as %s", user.email, user.role or "unspecified role")

    return {"created": True, "insertedId": str(result.inserted_id)}


# ✅ 3. GET MY ACCOUNT
@router.post("/auth/me")
async def get_me(body: UserLookup, claim: dict = Depends(verify_token), db=Depends(get_db)):
    require_self(claim["email"], body.email)

    user = await db.users.find_one({"email": body.email}, {"_id": 0})
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user
