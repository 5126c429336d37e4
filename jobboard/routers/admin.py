import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import AuthContext, get_current_admin
from jobboard.repos.admin_repo import get_stats
from jobboard.repos.job_repo import get_by_id as get_job_by_id, set_approved
from jobboard.schemas.job import JobResponse
from jobboard.services.job_search import search_jobs

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/stats")
def get_admin_stats(
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_admin),
):
    """Return dashboard stats. Admin only."""
    try:
        return get_stats(db)
    except Exception as e:
        logger.exception("Admin stats failed for admin=%s: %s", user.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to load admin stats") from e


@router.get("/jobs", response_model=list[JobResponse])
def list_all_jobs(
    query: str | None = None,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_admin),
):
    """All jobs including pending ones, optionally searched. Admin only."""
    try:
        return search_jobs(db, query, approved_only=False)
    except Exception as e:
        logger.exception("Admin job listing failed for admin=%s: %s", user.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch jobs") from e


@router.get("/jobs/{job_id}", response_model=JobResponse)
def get_job_admin(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_admin),
):
    job = get_job_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


@router.patch("/jobs/{job_id}/approve", response_model=JobResponse)
def approve_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_admin),
):
    """Make a pending job publicly visible. Admin only."""
    try:
        job = set_approved(db, job_id, approved=True)
    except Exception as e:
        logger.exception("Approving job %s failed: %s", job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to approve job") from e
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    logger.info("Admin %s approved job %s", user.email, job_id)
    return job
