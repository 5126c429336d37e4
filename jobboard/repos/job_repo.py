import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from jobboard.core.security import generate_id
from jobboard.models.job import Job, JobCategory

logger = logging.getLogger(__name__)

# Text fields a search query is matched against.
SEARCHABLE_COLUMNS = (Job.title, Job.company, Job.description, Job.location, Job.salary)


def _base_query(db: Session, approved_only: bool):
    q = db.query(Job).options(joinedload(Job.user))
    if approved_only:
        q = q.filter(Job.is_approved == True)
    return q


def get_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).options(joinedload(Job.user)).filter(Job.id == job_id).first()


def list_jobs(
    db: Session,
    approved_only: bool = True,
    category: JobCategory | None = None,
    user_id: str | None = None,
) -> list[Job]:
    """Jobs newest first, optionally narrowed to one category or one owner."""
    q = _base_query(db, approved_only)
    if category is not None:
        q = q.filter(Job.category == category)
    if user_id is not None:
        q = q.filter(Job.user_id == user_id)
    return q.order_by(Job.created_at.desc()).all()


def search_text(db: Session, query: str, approved_only: bool = True) -> list[Job]:
    """Case-insensitive substring match on any searchable column, newest first."""
    q = _base_query(db, approved_only).filter(
        or_(*(col.icontains(query, autoescape=True) for col in SEARCHABLE_COLUMNS))
    )
    return q.order_by(Job.created_at.desc()).all()


def create(
    db: Session,
    *,
    user_id: str,
    title: str,
    company: str,
    category: JobCategory,
    description: str | None = None,
    location: str | None = None,
    salary: str | None = None,
    logo: str | None = None,
    is_approved: bool = False,
) -> Job:
    job = Job(
        id=generate_id(),
        user_id=user_id,
        title=title,
        company=company,
        description=description,
        location=location,
        category=category,
        salary=salary,
        logo=logo,
        is_approved=is_approved,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("Job created: id=%s owner=%s approved=%s", job.id, user_id, is_approved)
    return job


def update(
    db: Session,
    job_id: str,
    *,
    title: str | None = None,
    company: str | None = None,
    description: str | None = None,
    location: str | None = None,
    category: JobCategory | None = None,
    salary: str | None = None,
) -> Job | None:
    job = get_by_id(db, job_id)
    if not job:
        return None
    if title is not None:
        job.title = title
    if company is not None:
        job.company = company
    if description is not None:
        job.description = description
    if location is not None:
        job.location = location
    if category is not None:
        job.category = category
    if salary is not None:
        job.salary = salary
    db.commit()
    db.refresh(job)
    return job


def set_approved(db: Session, job_id: str, approved: bool = True) -> Job | None:
    job = get_by_id(db, job_id)
    if not job:
        return None
    job.is_approved = approved
    db.commit()
    db.refresh(job)
    return job


def delete(db: Session, job_id: str) -> bool:
    from jobboard.models.job_application import JobApplication

    job = get_by_id(db, job_id)
    if not job:
        return False
    # Remove applications explicitly; SQLite does not enforce ON DELETE CASCADE by default.
    db.query(JobApplication).filter(JobApplication.job_id == job_id).delete(synchronize_session=False)
    db.delete(job)
    db.commit()
    return True
