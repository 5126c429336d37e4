from sqlalchemy.orm import Session

from jobboard.core.security import generate_id
from jobboard.models.job_application import JobApplication


def create(
    db: Session,
    *,
    job_id: str,
    user_id: str,
    name: str,
    email: str,
    phone: str,
    resume_url: str | None = None,
    comments: str | None = None,
) -> JobApplication:
    application = JobApplication(
        id=generate_id(),
        job_id=job_id,
        user_id=user_id,
        name=name,
        email=email,
        phone=phone,
        resume_url=resume_url,
        comments=comments,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def list_for_job(db: Session, job_id: str) -> list[JobApplication]:
    return (
        db.query(JobApplication)
        .filter(JobApplication.job_id == job_id)
        .order_by(JobApplication.created_at.desc())
        .all()
    )
