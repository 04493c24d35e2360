from pydantic import BaseModel
from typing import Optional


# 1. Input: Submit Application
class ApplicationCreate(BaseModel):
    """Whatever the job seeker fills in; the server adds status, date and email."""
    jobId: Optional[str] = None

    class Config:
        extra = "allow"
