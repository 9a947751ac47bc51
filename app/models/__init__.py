"""
数据库模型模块
"""
from .base import BaseModel, TimestampMixin
from .company import Company
from .jobpost import Jobpost, JobpostStatus
from .applicant import Applicant, Gender, ApplicantEducation
from .application import Application, ApplicationStatus

__all__ = [
    # Base
    "BaseModel",
    "TimestampMixin",
    # Company
    "Company",
    # Jobpost
    "Jobpost",
    "JobpostStatus",
    # Applicant
    "Applicant",
    "Gender",
    "ApplicantEducation",
    # Application
    "Application",
    "ApplicationStatus",
]
