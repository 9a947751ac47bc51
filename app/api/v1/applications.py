"""
应聘者管理 API 路由
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.response import success_response, error_response, ResponseModel
from app.core.security import get_current_email
from app.schemas.application import (
    ApplicantInfoResponse,
    ApplicationStatusUpdate,
    StatisticsResponse,
)
from app.services.application import application_service
from app.services.company import get_company_or_raise

router = APIRouter()


@router.get("/applications", summary="获取应聘者列表", response_model=ResponseModel[List[ApplicantInfoResponse]])
async def list_applicants(
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
):
    applicants = await application_service.list_applicants(db, email)
    return success_response(
        data=[a.model_dump(mode="json") for a in applicants],
        message="应聘者列表查询成功"
    )


@router.patch("/applications/status", summary="变更申请状态", response_model=ResponseModel[ApplicantInfoResponse])
async def change_application_status(
    data: ApplicationStatusUpdate,
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
):
    application = await application_service.change_application_status(db, email, data)
    return success_response(
        data=application.model_dump(mode="json"),
        message="申请状态变更成功"
    )


@router.get("/applications/statistics", summary="应聘者统计", response_model=ResponseModel[StatisticsResponse])
async def application_statistics(
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
):
    """
    按年龄段、性别、学历、公告标题统计本企业的应聘者

    尚无应聘者时返回 success=false（非异常）
    """
    company = await get_company_or_raise(db, email)
    statistics = await application_service.statistics_for_company(db, company.id)
    if statistics.is_empty:
        return error_response(message="暂无应聘者", code=404)
    return success_response(
        data=statistics.model_dump(),
        message="应聘者统计查询成功"
    )
