# ========================================
# hirenow/routes/application.py - JOB APPLICATIONS
# ========================================

import logging
from datetime import datetime
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Query

from hirenow.database import get_db, insert_result, serialize_doc
from hirenow.schemas.application import ApplicationCreate
from hirenow.utils.auth import require_self, verify_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Applications"])


# ✅ 1. GET MY APPLICATIONS (Job seeker)
@router.get("/applications")
async def list_my_applications(
    email: Optional[str] = Query(None, description="Must match the token's email when given"),
    claim: dict = Depends(verify_token),
    db=Depends(get_db),
):
    """
    Applications submitted by the caller, newest first.

    The lookup always uses the token's email. A client-supplied email is
    only compared against it.
    """
    if email is not None:
        require_self(claim["email"], email)

    applications = await db.applications.find(
        {"jobSeekerEmail": claim["email"]}, sort=[("date", -1), ("_id", -1)]
    ).to_list(None)

    return [serialize_doc(app) for app in applications]


# ✅ 2. GET APPLICATION DETAILS (Job seeker)
@router.get("/applications/{application_id}")
async def get_application(
    application_id: str,
    claim: dict = Depends(verify_token),
    db=Depends(get_db),
):
    if not ObjectId.is_valid(application_id):
        raise HTTPException(status_code=400, detail="Invalid application ID")

    application = await db.applications.find_one({"_id": ObjectId(application_id)})
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    require_self(claim["email"], application.get("jobSeekerEmail"))

    return serialize_doc(application)


# ✅ 3. APPLY FOR JOB (Job seeker)
@router.post("/applications")
async def create_application(
    application: ApplicationCreate,
    claim: dict = Depends(verify_token),
    db=Depends(get_db),
):
    """Store an application. Status, date and applicant email come from the server."""

    application_data = application.dict(exclude_unset=True)
    application_data.pop("_id", None)

    application_data["status"] = "Applied"
    application_data["date"] = datetime.utcnow()
    application_data["jobSeekerEmail"] = claim["email"]

    result = await db.applications.insert_one(application_data)
    logger.info("Application %s submitted by %s for job %s",
                result.inserted_id, claim["email"], application_data.get("jobId"))

    return insert_result(result)
