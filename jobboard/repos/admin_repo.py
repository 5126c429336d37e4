"""Admin-specific repository functions for dashboard counts."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.models.job import Job
from jobboard.models.job_application import JobApplication
from jobboard.models.user import User


def get_stats(db: Session) -> dict:
    """Return admin dashboard stats."""
    user_count = db.query(func.count(User.id)).scalar() or 0
    admin_count = db.query(func.count(User.id)).filter(User.is_admin == True).scalar() or 0
    job_count = db.query(func.count(Job.id)).scalar() or 0
    approved_count = db.query(func.count(Job.id)).filter(Job.is_approved == True).scalar() or 0
    application_count = db.query(func.count(JobApplication.id)).scalar() or 0
    return {
        "users_total": user_count,
        "admins": admin_count,
        "jobs_total": job_count,
        "jobs_approved": approved_count,
        "jobs_pending": job_count - approved_count,
        "applications": application_count,
    }
