"""
Job search: keyword match, or salary proximity when the query reads as a number.

A query such as "50000", "50k" or "45k-55k" parses to a positive salary. In that
case the keyword results are thrown away and every listable job whose own salary
is within SALARY_MATCH_TOLERANCE of the query value is returned instead.
"""

import logging
import re

from sqlalchemy.orm import Session

from jobboard.models.job import Job
from jobboard.repos import job_repo
from jobboard.services.salary import parse_salary

logger = logging.getLogger(__name__)

SALARY_MATCH_TOLERANCE = 0.15
_DIGIT_RE = re.compile(r"\d")


def salary_within_tolerance(job_salary: float, search_salary: float) -> bool:
    if job_salary == 0 or search_salary <= 0:
        return False
    return abs(job_salary - search_salary) / search_salary <= SALARY_MATCH_TOLERANCE


def filter_by_salary(jobs: list[Job], search_salary: float) -> list[Job]:
    """Keep jobs (order preserved) whose parsed salary is close to search_salary."""
    return [j for j in jobs if salary_within_tolerance(parse_salary(j.salary), search_salary)]


def search_jobs(db: Session, query: str | None, approved_only: bool = True) -> list[Job]:
    """Return matching jobs newest first. approved_only=False is the moderation view."""
    if not query:
        return job_repo.list_jobs(db, approved_only=approved_only)

    if _DIGIT_RE.search(query):
        search_salary = parse_salary(query)
        if search_salary > 0:
            candidates = job_repo.list_jobs(db, approved_only=approved_only)
            matched = filter_by_salary(candidates, search_salary)
            logger.debug("Salary search q=%r value=%s matched=%d", query, search_salary, len(matched))
            return matched

    matched = job_repo.search_text(db, query, approved_only=approved_only)
    logger.debug("Text search q=%r matched=%d", query, len(matched))
    return matched
