from pydantic import BaseModel, EmailStr
from typing import Optional


# 1. For Token Issuance (Input)
class TokenRequest(BaseModel):
    email: EmailStr


class TokenResponse(BaseModel):
    token: str


# 2. For Registration (Input)
class UserCreate(BaseModel):
    email: EmailStr
    role: Optional[str] = None  # employer / job seeker
    companyName: Optional[str] = None

    # name, photo... are stored as sent
    class Config:
        extra = "allow"


# 3. For "who am I" lookups (Input)
class UserLookup(BaseModel):
    email: EmailStr


# 4. For Registration (Output)
class RegisterResponse(BaseModel):
    created: bool
    insertedId: Optional[str] = None
    message: Optional[str] = None
