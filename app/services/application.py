"""
应聘申请服务

应聘者统计（年龄段、性别、学历、公告标题四个维度）、应聘者列表与申请状态变更
"""
from collections import Counter
from datetime import date
from typing import Iterable, List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AccessDenied, NotFoundApplication
from app.crud import application_crud
from app.crud.application import StatsRow
from app.models.applicant import Gender, ApplicantEducation
from app.schemas.application import (
    ApplicantInfoResponse,
    ApplicationStatusUpdate,
    StatisticsResponse,
)
from .company import get_company_or_raise

# 从高到低依次判断，阈值为严格大于
AGE_RANGES = (
    (50, "50s+"),
    (40, "40s"),
    (30, "30s"),
    (20, "20s"),
)
UNDER_TWENTY = "teens-or-under20"


def age_range(age: int) -> str:
    """年龄 -> 年龄段标签（51 岁为 50s+，50 岁为 40s）"""
    for threshold, label in AGE_RANGES:
        if age > threshold:
            return label
    return UNDER_TWENTY


def build_statistics(rows: Iterable[StatsRow], current_year: int) -> StatisticsResponse:
    """
    单次遍历统计原始行

    参数:
        rows: (出生日期, 性别, 学历, 公告标题) 元组，出生日期前四位为年份
        current_year: 计算年龄用的当前年份

    返回:
        四个维度的频次表，无数据时均为空
    """
    age_count: Counter = Counter()
    gender_count: Counter = Counter()
    education_count: Counter = Counter()
    title_count: Counter = Counter()

    for birth, gender, education, title in rows:
        age = current_year - int(birth[:4])
        age_count[age_range(age)] += 1
        gender_count[Gender(gender).label] += 1
        education_count[ApplicantEducation(education).label] += 1
        title_count[title] += 1

    return StatisticsResponse(
        applicant_age_count=dict(age_count),
        applicant_gender_count=dict(gender_count),
        applicant_education_count=dict(education_count),
        jobpost_title_count=dict(title_count),
    )


class ApplicationService:
    """应聘申请服务"""

    async def statistics_for_company(
        self,
        db: AsyncSession,
        company_id: str,
        current_year: Optional[int] = None,
    ) -> StatisticsResponse:
        """某企业收到的全部申请的应聘者统计"""
        rows = await application_crud.get_stats_rows_for_company(db, company_id)
        return build_statistics(rows, current_year or date.today().year)

    async def list_applicants(self, db: AsyncSession, email: str) -> List[ApplicantInfoResponse]:
        """投递到本企业公告的应聘者列表"""
        company = await get_company_or_raise(db, email)
        applications = await application_crud.get_by_company(db, company.id)
        return [ApplicantInfoResponse.from_application(a) for a in applications]

    async def change_application_status(
        self,
        db: AsyncSession,
        email: str,
        data: ApplicationStatusUpdate,
    ) -> ApplicantInfoResponse:
        """变更申请状态，任意目标状态均可"""
        company = await get_company_or_raise(db, email)

        application = await application_crud.get(db, data.application_id)
        if not application:
            raise NotFoundApplication(data.application_id)
        if application.jobpost.company_id != company.id:
            raise AccessDenied(data.application_id)

        application.update_status(data.status)
        application = await application_crud.save(db, application)
        logger.info(f"申请状态已变更: {application.id} -> {application.status.value}")
        return ApplicantInfoResponse.from_application(application)


application_service = ApplicationService()
