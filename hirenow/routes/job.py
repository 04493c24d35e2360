# ========================================
# hirenow/routes/job.py - JOB LISTINGS
# ========================================

import logging
from datetime import datetime
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, Header, HTTPException, Query

from hirenow.database import delete_result, get_db, insert_result, serialize_doc, update_result
from hirenow.schemas.job import JobCreate, JobListResponse, JobUpdate
from hirenow.utils.auth import require_self, verify_token
from hirenow.utils.filters import build_job_filter, paginate, parse_company_list, parse_salary_range

logger = logging.getLogger(__name__)

router = APIRouter()

# Set by the server only; clients cannot write them
SERVER_FIELDS = ("_id", "postedAt", "applied")

# _id breaks ties between postings made in the same instant
NEWEST_FIRST = [("postedAt", -1), ("_id", -1)]


def parse_job_id(job_id: str) -> ObjectId:
    if not ObjectId.is_valid(job_id):
        raise HTTPException(status_code=400, detail="Invalid job ID")
    return ObjectId(job_id)


# ===========================
# PUBLIC ENDPOINTS
# ===========================

# ✅ 1. LIST JOBS WITH SEARCH, FILTERS AND PAGINATION (Public)
@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    search: Optional[str] = Query(None, description="Case-insensitive match on the title"),
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: Optional[int] = Query(None, ge=1, description="Page length; omit for everything"),
    sort: Optional[str] = Query(None, description="Remote, On-Site or Default (filters by location)"),
    salaryRange: Optional[str] = Query(None, description="MIN-MAX, inclusive"),
    company: Optional[str] = Query(None, description='JSON array of company names, e.g. ["Acme"]'),
    db=Depends(get_db),
):
    """List job postings. totalCount ignores pagination; companyNames ignores filters."""

    try:
        salary_range = parse_salary_range(salaryRange)
        companies = parse_company_list(company)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    query = build_job_filter(search=search, salary_range=salary_range, companies=companies, sort=sort)
    skip, limit = paginate(page, size)

    jobs = await db.jobs.find(query, skip=skip, limit=limit, sort=NEWEST_FIRST).to_list(None)
    total_count = await db.jobs.count_documents(query)

    company_names = await db.users.distinct("companyName", {"role": "employer"})

    return {
        "jobs": [serialize_doc(job) for job in jobs],
        "totalCount": total_count,
        "companyNames": [name for name in company_names if isinstance(name, str) and name],
    }


# ✅ 2. GET SINGLE JOB DETAILS (Public)
@router.get("/jobs/{job_id}")
async def get_job(job_id: str, db=Depends(get_db)):
    job = await db.jobs.find_one({"_id": parse_job_id(job_id)})

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return serialize_doc(job)


# ✅ 3. UPDATE JOB (Public)
@router.put("/jobs/{job_id}")
async def update_job(job_id: str, job_update: JobUpdate, db=Depends(get_db)):
    """Merge the supplied fields over the stored posting."""

    oid = parse_job_id(job_id)

    update_data = job_update.dict(exclude_unset=True)
    for field in SERVER_FIELDS:
        update_data.pop(field, None)

    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")

    result = await db.jobs.update_one({"_id": oid}, {"$set": update_data})
    logger.info("Updated job %s (%s)", job_id, ", ".join(sorted(update_data)))

    return update_result(result)


# ✅ 4. DELETE JOB (Public)
@router.delete("/jobs/{job_id}")
async def delete_job(job_id: str, db=Depends(get_db)):
    """Deleting a job that is already gone reports deletedCount 0."""

    result = await db.jobs.delete_one({"_id": parse_job_id(job_id)})
    logger.info("Deleted job %s (deleted: %d)", job_id, result.deleted_count)

    return delete_result(result)


# ✅ 5. COUNT AN APPLICATION (Public)
@router.patch("/count-application-number/{job_id}")
async def count_application(job_id: str, db=Depends(get_db)):
    """Bump the applied counter by one with an atomic $inc."""

    result = await db.jobs.update_one({"_id": parse_job_id(job_id)}, {"$inc": {"applied": 1}})
    return update_result(result)


# ===========================
# EMPLOYER ENDPOINTS
# ===========================

# ✅ 6. POST A JOB (Employer)
@router.post("/jobs")
async def create_job(job: JobCreate, claim: dict = Depends(verify_token), db=Depends(get_db)):
    """Create a job posting on behalf of the token's owner."""

    new_job = job.dict(exclude_unset=True)
    for field in SERVER_FIELDS:
        new_job.pop(field, None)

    profile = new_job.get("profile") or {}
    if profile.get("email"):
        require_self(claim["email"], profile["email"])
    # Stored in the same form as the token claim so /posted-jobs finds it
    profile["email"] = claim["email"]
    new_job["profile"] = profile

    new_job["postedAt"] = datetime.utcnow()
    new_job["applied"] = 0
    new_job["jobStatus"] = "Open"

    result = await db.jobs.insert_one(new_job)
    logger.info("Job %s posted by %s", result.inserted_id, claim["email"])

    return insert_result(result)


# ✅ 7. GET MY POSTED JOBS (Employer)
@router.get("/posted-jobs")
async def list_posted_jobs(
    email: Optional[str] = Header(None),
    claim: dict = Depends(verify_token),
    db=Depends(get_db),
):
    """Jobs whose employer profile carries the caller's email."""

    if not email:
        raise HTTPException(status_code=400, detail="email header is required")

    require_self(claim["email"], email)

    jobs = await db.jobs.find({"profile.email": claim["email"]}, sort=NEWEST_FIRST).to_list(None)
    return [serialize_doc(job) for job in jobs]
