import enum

from sqlalchemy import Column, String, Text, Boolean, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base


class JobCategory(str, enum.Enum):
    TECH = "TECH"
    EDUCATION = "EDUCATION"
    TRADE = "TRADE"
    MARKETING = "MARKETING"
    OTHER = "OTHER"


class Job(Base):
    """A posted opening. Hidden from public listings until approved."""

    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    description = Column(Text)
    location = Column(String)
    category = Column(Enum(JobCategory), nullable=False, default=JobCategory.OTHER)
    salary = Column(String)  # display string, e.g. "$50,000 - $70,000"
    logo = Column(String)
    is_approved = Column(Boolean, default=False, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="jobs")
    applications = relationship(
        "JobApplication",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
