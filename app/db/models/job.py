"""
Job model for the public job board listing.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func
from app.db.base import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    company = Column(String, nullable=False, index=True)
    location = Column(String, nullable=True)
    job_type = Column(String, nullable=True)  # "full_time", "part_time", "internship", ...
    description = Column(Text, nullable=True)
    apply_url = Column(String, nullable=True)
    posted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    __table_args__ = (
        Index('idx_job_company_title', 'company', 'title'),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, company='{self.company}', title='{self.title}')>"
