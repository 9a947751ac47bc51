"""
CRUD 基类模块

封装按主键查询、创建与保存，业务删除一律走状态变更
"""
from typing import Generic, TypeVar, Type, Optional, Any, Dict
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """CRUD 基类"""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: str) -> Optional[ModelType]:
        """根据 ID 获取单条记录"""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: Dict[str, Any]
    ) -> ModelType:
        """创建记录"""
        db_obj = self.model(**obj_in)
        return await self.save(db, db_obj)

    async def save(self, db: AsyncSession, db_obj: ModelType) -> ModelType:
        """
        保存记录

        新对象加入会话，已有对象直接刷新到数据库，提交由请求级会话负责
        """
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj
