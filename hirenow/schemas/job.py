from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional, Union


def to_salary(value: Any):
    """Salaries arrive as numbers or numeric strings; store them as numbers."""
    if value is None:
        return value
    if isinstance(value, bool):
        raise ValueError("salary must be a number")
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(str(value).strip().replace(",", ""))
    except ValueError:
        raise ValueError("salary must be a number")
    return int(number) if number.is_integer() else number


# 1. Nested: Who posted the job
class EmployerProfile(BaseModel):
    companyName: Optional[str] = None
    email: Optional[str] = None

    class Config:
        extra = "allow"


# 2. Input: What the employer sends
class JobCreate(BaseModel):
    title: str
    salary: Union[int, float]
    location: Optional[str] = None
    profile: Optional[EmployerProfile] = None

    class Config:
        extra = "allow"

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, v):
        return to_salary(v)


# 3. Input: Partial update of an existing job
class JobUpdate(BaseModel):
    """Only the fields the client actually sends are written."""
    title: Optional[str] = None
    salary: Optional[Union[int, float]] = None
    location: Optional[str] = None
    jobStatus: Optional[str] = None
    profile: Optional[EmployerProfile] = None

    class Config:
        extra = "allow"

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, v):
        return to_salary(v)


# 4. Output: One page of the public listing
class JobListResponse(BaseModel):
    jobs: List[dict] = Field(default_factory=list)
    totalCount: int = 0
    companyNames: List[str] = Field(default_factory=list)
