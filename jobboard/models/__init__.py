from jobboard.models.user import User
from jobboard.models.job import Job, JobCategory
from jobboard.models.job_application import JobApplication

__all__ = [
    "User",
    "Job",
    "JobCategory",
    "JobApplication",
]
