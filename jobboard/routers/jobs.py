import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.core.validators import format_phone, is_valid_email, is_valid_phone
from jobboard.database import get_db
from jobboard.dependencies import AuthContext, get_current_user
from jobboard.models.job import JobCategory
from jobboard.repos import application_repo
from jobboard.repos.job_repo import (
    get_by_id as get_job_by_id,
    list_jobs,
    create as create_job,
    update as update_job,
    delete as delete_job,
)
from jobboard.schemas.job import ApplicationResponse, JobCreate, JobResponse, JobUpdate
from jobboard.services.email_service import send_application_confirmation
from jobboard.services.logo_service import resolve_logo
from jobboard.services.uploads import UploadRejected, read_resume, save_resume

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])

EMAIL_WARNING = "Confirmation email could not be sent"


def _require_job(db: Session, job_id: str):
    job = get_job_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


def _require_owner_or_admin(job, user: AuthContext, action: str) -> None:
    if job.user_id != user.id and not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Not authorized to {action}")


@router.get("", response_model=list[JobResponse])
def get_jobs(db: Session = Depends(get_db)):
    """Public listing: approved jobs, newest first."""
    try:
        return list_jobs(db, approved_only=True)
    except Exception as e:
        logger.exception("Listing jobs failed: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch jobs") from e


@router.get("/my-postings", response_model=list[JobResponse])
def get_my_postings(
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    """Every job the caller posted, approved or not."""
    try:
        jobs = list_jobs(db, approved_only=False, user_id=user.id)
        logger.debug("GET /api/jobs/my-postings user=%s count=%d", user.id, len(jobs))
        return jobs
    except Exception as e:
        logger.exception("Listing postings failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch user jobs") from e


@router.get("/category/{category}", response_model=list[JobResponse])
def get_jobs_by_category(category: str, db: Session = Depends(get_db)):
    try:
        parsed = JobCategory(category.strip().upper())
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid job category")
    try:
        return list_jobs(db, approved_only=True, category=parsed)
    except Exception as e:
        logger.exception("Listing category %s failed: %s", parsed.value, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch jobs") from e


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    return _require_job(db, job_id)


@router.post("", response_model=JobResponse)
def post_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    """Create a posting owned by the caller. Pending moderation unless auto-approval is on."""
    logo = resolve_logo(body.company)
    try:
        return create_job(
            db,
            user_id=user.id,
            title=body.title,
            company=body.company,
            description=body.description,
            location=body.location,
            category=body.category,
            salary=body.salary,
            logo=logo,
            is_approved=settings.auto_approve_jobs,
        )
    except Exception as e:
        logger.exception("Creating job failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create job posting") from e


@router.patch("/{job_id}", response_model=JobResponse)
def patch_job(
    job_id: str,
    body: JobUpdate,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    job = _require_job(db, job_id)
    _require_owner_or_admin(job, user, "update this job")
    try:
        updated = update_job(
            db,
            job_id,
            title=body.title,
            company=body.company,
            description=body.description,
            location=body.location,
            category=body.category,
            salary=body.salary,
        )
    except Exception as e:
        logger.exception("Updating job %s failed: %s", job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update job") from e
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    logger.info("Job updated: id=%s by=%s", job_id, user.id)
    return updated


@router.delete("/{job_id}")
def remove_job(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    job = _require_job(db, job_id)
    _require_owner_or_admin(job, user, "delete this job")
    try:
        delete_job(db, job_id)
    except Exception as e:
        logger.exception("Deleting job %s failed: %s", job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete job") from e
    logger.info("Job deleted: id=%s by=%s", job_id, user.id)
    return {"message": "Job deleted successfully"}


@router.post("/{job_id}/apply", status_code=status.HTTP_201_CREATED)
def apply_to_job(
    job_id: str,
    name: str = Form(..., min_length=1, max_length=100),
    email: str = Form(...),
    phone: str = Form(...),
    comments: str | None = Form(None, max_length=5000),
    resume: UploadFile | None = File(None, description="Resume (.pdf, .doc, .docx)"),
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    """
    Submit an application with an optional resume file.
    A failed confirmation email does not fail the request; it adds a "warning" field.
    """
    if not is_valid_email(email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email format")
    if not is_valid_phone(phone):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid phone number format")

    content = None
    if resume is not None and resume.filename:
        try:
            content = read_resume(resume)
        except UploadRejected as e:
            raise HTTPException(status_code=e.status_code, detail=e.message) from e

    job = _require_job(db, job_id)
    if not job.is_approved:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot apply to unapproved jobs")
    if job.user_id == user.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot apply to your own job posting")

    try:
        resume_url = save_resume(resume.filename, content) if content is not None else None
        application = application_repo.create(
            db,
            job_id=job.id,
            user_id=user.id,
            name=name,
            email=email,
            phone=format_phone(phone),
            resume_url=resume_url,
            comments=comments,
        )
    except Exception as e:
        logger.exception("Application failed for job=%s user=%s: %s", job_id, user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to submit application") from e
    logger.info("Application created: id=%s job=%s user=%s", application.id, job.id, user.id)

    result = {"application": ApplicationResponse.model_validate(application)}
    try:
        sent, error = send_application_confirmation(email, name, job.title)
    except Exception as e:
        sent, error = False, str(e)
    if not sent:
        logger.warning("Confirmation email for application %s not sent: %s", application.id, error)
        result["warning"] = EMAIL_WARNING
    return result


@router.get("/{job_id}/applications", response_model=list[ApplicationResponse])
def get_applications(
    job_id: str,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    """Applications for a posting, newest first. Owner or admin only."""
    job = _require_job(db, job_id)
    _require_owner_or_admin(job, user, "view applications")
    try:
        return application_repo.list_for_job(db, job_id)
    except Exception as e:
        logger.exception("Listing applications for job=%s failed: %s", job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch applications") from e
