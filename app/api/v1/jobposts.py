"""
招聘公告管理 API 路由

创建与修改接口为 multipart 表单：request_dto 为 JSON 字符串，jobpost_file 为可选附件
"""
from typing import List, Optional, Type, TypeVar
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.response import success_response, ResponseModel
from app.core.security import get_current_email
from app.schemas.jobpost import (
    JobpostCreate,
    JobpostUpdate,
    JobpostShortResponse,
    JobpostLongResponse,
)
from app.services.jobpost import JobpostService, get_jobpost_service

router = APIRouter()

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def parse_request_dto(schema: Type[SchemaType], raw: str) -> SchemaType:
    """按请求类型校验表单中的 JSON 字段"""
    try:
        return schema.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


@router.post("/jobposts", summary="创建招聘公告", response_model=ResponseModel[JobpostLongResponse])
async def create_jobpost(
    request_dto: str = Form(..., description="公告内容(JSON)"),
    jobpost_file: Optional[UploadFile] = File(None, description="公告文件"),
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
    service: JobpostService = Depends(get_jobpost_service),
):
    """
    创建招聘公告，附件按 {时间}_{企业名}.{扩展名} 保存
    """
    data = parse_request_dto(JobpostCreate, request_dto)
    jobpost = await service.create_jobpost(db, email, data, jobpost_file)
    return success_response(
        data=jobpost.model_dump(mode="json"),
        message="招聘公告创建成功"
    )


@router.get("/jobposts", summary="获取本企业公告列表", response_model=ResponseModel[List[JobpostShortResponse]])
async def list_jobposts(
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
    service: JobpostService = Depends(get_jobpost_service),
):
    jobposts = await service.list_jobposts(db, email)
    return success_response(
        data=[j.model_dump(mode="json") for j in jobposts],
        message="公告列表查询成功"
    )


@router.get("/jobposts/{post_id}", summary="获取招聘公告详情", response_model=ResponseModel[JobpostLongResponse])
async def get_jobpost(
    post_id: str,
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
    service: JobpostService = Depends(get_jobpost_service),
):
    jobpost = await service.get_jobpost_detail(db, email, post_id)
    return success_response(data=jobpost.model_dump(mode="json"))


@router.put("/jobposts/{post_id}", summary="修改招聘公告", response_model=ResponseModel[JobpostLongResponse])
async def update_jobpost(
    post_id: str,
    request_dto: str = Form(..., description="修改内容(JSON)"),
    jobpost_file: Optional[UploadFile] = File(None, description="新的公告文件"),
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
    service: JobpostService = Depends(get_jobpost_service),
):
    """
    修改招聘公告，上传新附件时替换旧文件
    """
    data = parse_request_dto(JobpostUpdate, request_dto)
    jobpost = await service.update_jobpost(db, email, post_id, data, jobpost_file)
    return success_response(
        data=jobpost.model_dump(mode="json"),
        message="招聘公告修改成功"
    )


@router.delete("/jobposts/{post_id}", summary="废弃招聘公告", response_model=ResponseModel[JobpostLongResponse])
async def discard_jobpost(
    post_id: str,
    email: str = Depends(get_current_email),
    db: AsyncSession = Depends(get_db),
    service: JobpostService = Depends(get_jobpost_service),
):
    """
    废弃招聘公告（不删除数据，仅将状态改为 DISCARD）
    """
    jobpost = await service.change_status(db, email, post_id)
    return success_response(
        data=jobpost.model_dump(mode="json"),
        message="公告状态变更成功"
    )
