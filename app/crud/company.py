"""
企业 CRUD 操作
"""
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.company import Company
from .base import CRUDBase


class CRUDCompany(CRUDBase[Company]):
    """企业 CRUD 操作类"""

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str
    ) -> Optional[Company]:
        """根据登录邮箱查找企业"""
        result = await db.execute(
            select(self.model).where(self.model.email == email)
        )
        return result.scalar_one_or_none()


company_crud = CRUDCompany(Company)
