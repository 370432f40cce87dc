"""
app/db/models.py

ORM tables for the candidate aggregate.

A Candidate owns any number of educations and work experiences and at
most one résumé per intake request; sub-rows reference candidates.id.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.db.database import Base


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(40), nullable=True)
    address = Column(String(100), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    educations = relationship("Education", back_populates="candidate")
    work_experiences = relationship("WorkExperience", back_populates="candidate")
    resumes = relationship("Resume", back_populates="candidate")


class Education(Base):
    __tablename__ = "educations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False)
    school = Column(String(100), nullable=False)
    degree = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    candidate = relationship("Candidate", back_populates="educations")


class WorkExperience(Base):
    __tablename__ = "work_experiences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False)
    company = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    description = Column(String(200), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    candidate = relationship("Candidate", back_populates="work_experiences")


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False)
    file_path = Column(String(500), nullable=False)
    file_type = Column(String(100), nullable=False)
    upload_date = Column(DateTime, server_default=func.now())

    candidate = relationship("Candidate", back_populates="resumes")
