"""
企业资料 API 路由
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.response import success_response, ResponseModel
from app.core.security import get_current_email
from app.schemas.company import CompanyInfoResponse, CompanyInfoUpdate
from app.services.company import company_service

router = APIRouter()


@router.get("/info", summary="获取企业资料", response_model=ResponseModel[CompanyInfoResponse])
async def get_company_info(
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
):
    info = await company_service.get_profile(db, email)
    return success_response(data=info.model_dump())


@router.put("/info", summary="修改企业资料", response_model=ResponseModel[CompanyInfoResponse])
async def update_company_info(
    data: CompanyInfoUpdate,
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
):
    info = await company_service.update_profile(db, email, data)
    return success_response(
        data=info.model_dump(),
        message="企业资料修改成功"
    )
