"""
企业资料服务
"""
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from app.core.exceptions import NotFoundUser
from app.crud import company_crud
from app.models.company import Company
from app.schemas.company import CompanyInfoResponse, CompanyInfoUpdate


async def get_company_or_raise(db: AsyncSession, email: str) -> Company:
    """根据认证邮箱获取企业，不存在则抛出 NotFoundUser"""
    company = await company_crud.get_by_email(db, email)
    if not company:
        raise NotFoundUser(email)
    return company


class CompanyService:
    """企业资料读取与修改"""

    async def get_profile(self, db: AsyncSession, email: str) -> CompanyInfoResponse:
        company = await get_company_or_raise(db, email)
        return CompanyInfoResponse.from_company(company)

    async def update_profile(
        self,
        db: AsyncSession,
        email: str,
        data: CompanyInfoUpdate,
    ) -> CompanyInfoResponse:
        company = await get_company_or_raise(db, email)
        company.update_info(data)
        company = await company_crud.save(db, company)
        logger.info(f"企业资料已更新: {company.id}")
        return CompanyInfoResponse.from_company(company)


company_service = CompanyService()
