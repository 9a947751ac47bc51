"""
应聘申请相关 Schema
"""
from datetime import datetime
from typing import Dict, Optional
from pydantic import EmailStr, Field

from app.models.application import Application, ApplicationStatus
from .base import BaseSchema, RequestSchema


class ApplicationStatusUpdate(RequestSchema):
    """变更应聘申请状态请求"""

    application_id: str = Field(..., description="应聘申请ID")
    status: ApplicationStatus = Field(..., description="目标状态")


class ApplicantInfoResponse(BaseSchema):
    """应聘者信息响应"""

    application_id: str
    applicant_id: str
    applicant_name: str
    applicant_email: EmailStr
    phone: Optional[str] = None
    birth: str
    gender: str
    education: str
    jobpost_id: str
    jobpost_title: str
    status: ApplicationStatus
    applied_at: datetime

    @classmethod
    def from_application(cls, application: Application) -> "ApplicantInfoResponse":
        applicant = application.applicant
        return cls(
            application_id=application.id,
            applicant_id=applicant.id,
            applicant_name=applicant.name,
            applicant_email=applicant.email,
            phone=applicant.phone,
            birth=applicant.birth,
            gender=applicant.gender.label,
            education=applicant.education.label,
            jobpost_id=application.jobpost_id,
            jobpost_title=application.jobpost.title,
            status=application.status,
            applied_at=application.created_at,
        )


class StatisticsResponse(BaseSchema):
    """应聘者统计响应（四个维度的频次表）"""

    applicant_age_count: Dict[str, int] = Field(default_factory=dict, description="年龄段分布")
    applicant_gender_count: Dict[str, int] = Field(default_factory=dict, description="性别分布")
    applicant_education_count: Dict[str, int] = Field(default_factory=dict, description="学历分布")
    jobpost_title_count: Dict[str, int] = Field(default_factory=dict, description="公告申请数")

    @property
    def is_empty(self) -> bool:
        """是否尚无应聘者"""
        return not self.applicant_age_count
