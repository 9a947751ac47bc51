"""
CRUD 操作模块
"""
from .company import company_crud
from .jobpost import jobpost_crud
from .applicant import applicant_crud
from .application import application_crud

__all__ = [
    "company_crud",
    "jobpost_crud",
    "applicant_crud",
    "application_crud",
]
