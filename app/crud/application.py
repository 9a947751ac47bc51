"""
应聘申请 CRUD 操作
"""
from typing import List, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.applicant import Applicant, Gender, ApplicantEducation
from app.models.application import Application
from app.models.jobpost import Jobpost
from .base import CRUDBase

StatsRow = Tuple[str, Gender, ApplicantEducation, str]


class CRUDApplication(CRUDBase[Application]):
    """应聘申请 CRUD 操作类"""

    async def get_all(self, db: AsyncSession) -> List[Application]:
        """获取系统内全部申请"""
        result = await db.execute(
            select(self.model).order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_company(
        self,
        db: AsyncSession,
        company_id: str
    ) -> List[Application]:
        """获取投递到某企业公告的申请"""
        result = await db.execute(
            select(self.model)
            .join(Jobpost, self.model.jobpost_id == Jobpost.id)
            .where(Jobpost.company_id == company_id)
            .order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_stats_rows_for_company(
        self,
        db: AsyncSession,
        company_id: str
    ) -> List[StatsRow]:
        """
        查询统计用原始行

        返回 (出生日期, 性别, 学历, 公告标题) 元组列表
        """
        result = await db.execute(
            select(
                Applicant.birth,
                Applicant.gender,
                Applicant.education,
                Jobpost.title,
            )
            .select_from(self.model)
            .join(Applicant, self.model.applicant_id == Applicant.id)
            .join(Jobpost, self.model.jobpost_id == Jobpost.id)
            .where(Jobpost.company_id == company_id)
        )
        return [tuple(row) for row in result.all()]


application_crud = CRUDApplication(Application)
