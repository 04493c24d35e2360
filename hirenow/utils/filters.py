"""
Query construction for the public job listing.

These helpers are pure: they take raw query-string values and return MongoDB
filter documents, so they can be tested without a server or a database.
"""

import json
import re
from typing import List, Optional, Tuple

# "sort" values that actually narrow the listing to one location.
# Anything else (including "Default") leaves the listing untouched.
LOCATION_SORTS = ("Remote", "On-Site")


def parse_salary_range(raw: Optional[str]) -> Optional[Tuple[float, float]]:
    """
    Parse a "MIN-MAX" salary range.

    Returns None when nothing was given. Raises ValueError for anything that
    is not two numbers separated by a dash.
    """
    if raw is None or not raw.strip():
        return None

    parts = raw.strip().split("-")
    if len(parts) != 2:
        raise ValueError(f"Salary range must look like MIN-MAX, got {raw!r}")

    try:
        low, high = (_to_number(p.strip()) for p in parts)
    except ValueError:
        raise ValueError(f"Salary range must look like MIN-MAX, got {raw!r}")

    if low > high:
        low, high = high, low
    return low, high


def parse_company_list(raw: Optional[str]) -> List[str]:
    """Decode the JSON array of company names sent by the listing page."""
    if raw is None or not raw.strip():
        return []

    try:
        companies = json.loads(raw)
    except json.JSONDecodeError:
        raise ValueError("company must be a JSON array of names")

    if not isinstance(companies, list) or not all(isinstance(c, str) for c in companies):
        raise ValueError("company must be a JSON array of names")

    return companies


def build_job_filter(
    search: Optional[str] = None,
    salary_range: Optional[Tuple[float, float]] = None,
    companies: Optional[List[str]] = None,
    sort: Optional[str] = None,
) -> dict:
    query = {}

    # Literal substring match on the title, ignoring case
    if search:
        query["title"] = {"$regex": re.escape(search), "$options": "i"}

    if salary_range:
        low, high = salary_range
        query["salary"] = {"$gte": low, "$lte": high}

    if companies:
        query["profile.companyName"] = {"$in": companies}

    # NOTE: "sort" filters by location, it never reorders results
    if sort in LOCATION_SORTS:
        query["location"] = sort

    return query


def paginate(page: Optional[int] = None, size: Optional[int] = None) -> Tuple[int, int]:
    """
    Turn zero-based page/size into (skip, limit).

    Without a size the listing is unbounded; limit 0 means "no limit" to
    MongoDB.
    """
    if not size:
        return 0, 0
    return (page or 0) * size, size


def _to_number(value: str):
    number = float(value)
    return int(number) if number.is_integer() else number
