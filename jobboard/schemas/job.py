from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from jobboard.core.validators import SALARY_RULES, is_valid_salary_display
from jobboard.models.job import JobCategory
from jobboard.services.salary import format_salary_display


def _normalize_salary(v: str) -> str:
    formatted = format_salary_display(v)
    if not is_valid_salary_display(formatted):
        raise ValueError(SALARY_RULES)
    return formatted


def _normalize_category(v):
    return v.strip().upper() if isinstance(v, str) else v


class JobCreate(BaseModel):
    title: str = Field(min_length=3, max_length=100)
    company: str = Field(min_length=2, max_length=50)
    description: str = Field(default="", max_length=5000)
    location: str = Field(min_length=2, max_length=100)
    category: JobCategory
    salary: str

    @field_validator("category", mode="before")
    @classmethod
    def category_upper(cls, v):
        return _normalize_category(v)

    @field_validator("salary")
    @classmethod
    def salary_display(cls, v: str) -> str:
        return _normalize_salary(v)


class JobUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=3, max_length=100)
    company: str | None = Field(default=None, min_length=2, max_length=50)
    description: str | None = Field(default=None, max_length=5000)
    location: str | None = Field(default=None, min_length=2, max_length=100)
    category: JobCategory | None = None
    salary: str | None = None

    @field_validator("category", mode="before")
    @classmethod
    def category_upper(cls, v):
        return _normalize_category(v)

    @field_validator("salary")
    @classmethod
    def salary_display(cls, v: str | None) -> str | None:
        return None if v is None else _normalize_salary(v)


class JobOwner(BaseModel):
    name: str | None = None
    email: str

    class Config:
        from_attributes = True


class JobResponse(BaseModel):
    id: str
    title: str
    company: str
    description: str | None = None
    location: str | None = None
    category: JobCategory
    salary: str | None = None
    logo: str | None = None
    is_approved: bool
    user_id: str
    created_at: datetime | None = None
    user: JobOwner | None = None

    class Config:
        from_attributes = True


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    user_id: str
    name: str
    email: str
    phone: str
    resume_url: str | None = None
    comments: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
