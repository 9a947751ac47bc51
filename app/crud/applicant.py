"""
应聘者 CRUD 操作
"""
from app.models.applicant import Applicant
from .base import CRUDBase


applicant_crud = CRUDBase(Applicant)
