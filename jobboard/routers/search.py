import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.schemas.job import JobResponse
from jobboard.services.job_search import search_jobs

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=list[JobResponse])
def search(query: str | None = None, db: Session = Depends(get_db)):
    """
    Search approved jobs. A numeric query ("50000", "50k") matches salaries
    within 15%; anything else is a keyword match on title, company,
    description, location and salary.
    """
    try:
        return search_jobs(db, query, approved_only=True)
    except Exception as e:
        logger.exception("Search failed for query=%r: %s", query, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to search jobs") from e
