"""
招聘公告 CRUD 操作
"""
from typing import List
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.jobpost import Jobpost
from .base import CRUDBase


class CRUDJobpost(CRUDBase[Jobpost]):
    """招聘公告 CRUD 操作类"""

    async def get_by_company(
        self,
        db: AsyncSession,
        company_id: str
    ) -> List[Jobpost]:
        """获取某企业的所有公告（含已废弃）"""
        result = await db.execute(
            select(self.model)
            .where(self.model.company_id == company_id)
            .order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def count_by_file_path(
        self,
        db: AsyncSession,
        file_path: str
    ) -> int:
        """引用某个附件路径的公告数量"""
        result = await db.execute(
            select(func.count())
            .select_from(self.model)
            .where(self.model.file_path == file_path)
        )
        return result.scalar_one()


jobpost_crud = CRUDJobpost(Jobpost)
