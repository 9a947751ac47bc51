"""
招聘公告生命周期服务

创建、查询、修改、废弃招聘公告，并处理公告附件文件
"""
from typing import List, Optional

from fastapi import Depends, UploadFile
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AccessDenied, NotFoundPost
from app.crud import jobpost_crud
from app.models.company import Company
from app.models.jobpost import Jobpost, JobpostStatus
from app.schemas.jobpost import (
    JobpostCreate,
    JobpostUpdate,
    JobpostShortResponse,
    JobpostLongResponse,
)
from .company import get_company_or_raise
from .storage import JobpostFileStorage, get_file_storage


class JobpostService:
    """招聘公告服务"""

    def __init__(self, storage: JobpostFileStorage):
        self.storage = storage

    async def _get_owned_jobpost(
        self,
        db: AsyncSession,
        company: Company,
        post_id: str,
    ) -> Jobpost:
        jobpost = await jobpost_crud.get(db, post_id)
        if not jobpost:
            raise NotFoundPost(post_id)
        if jobpost.company_id != company.id:
            raise AccessDenied(post_id)
        return jobpost

    async def create_jobpost(
        self,
        db: AsyncSession,
        email: str,
        data: JobpostCreate,
        upload: Optional[UploadFile] = None,
    ) -> JobpostLongResponse:
        """创建招聘公告，附件可选"""
        company = await get_company_or_raise(db, email)

        file_path = None
        if upload is not None:
            file_path = self.storage.save(upload, company.name)

        jobpost = Jobpost(
            **data.model_dump(),
            company=company,
            file_path=file_path,
            status=JobpostStatus.ACTIVE,
        )
        jobpost = await jobpost_crud.save(db, jobpost)
        logger.info(f"招聘公告已创建: {jobpost.id} | 企业: {company.id}")
        return JobpostLongResponse.from_jobpost(jobpost)

    async def list_jobposts(self, db: AsyncSession, email: str) -> List[JobpostShortResponse]:
        """企业本人的公告列表"""
        company = await get_company_or_raise(db, email)
        jobposts = await jobpost_crud.get_by_company(db, company.id)
        return [JobpostShortResponse.model_validate(j) for j in jobposts]

    async def get_jobpost_detail(
        self,
        db: AsyncSession,
        email: str,
        post_id: str,
    ) -> JobpostLongResponse:
        company = await get_company_or_raise(db, email)
        jobpost = await self._get_owned_jobpost(db, company, post_id)
        return JobpostLongResponse.from_jobpost(jobpost)

    async def update_jobpost(
        self,
        db: AsyncSession,
        email: str,
        post_id: str,
        data: JobpostUpdate,
        upload: Optional[UploadFile] = None,
    ) -> JobpostLongResponse:
        """
        修改招聘公告

        上传新附件时按创建规则重新命名保存；提交成功后删除被替换且
        不再被任何公告引用的旧文件
        """
        company = await get_company_or_raise(db, email)
        jobpost = await self._get_owned_jobpost(db, company, post_id)

        previous_path = jobpost.file_path
        jobpost.update_jobpost(data)
        if upload is not None:
            jobpost.file_path = self.storage.save(upload, company.name)

        jobpost = await jobpost_crud.save(db, jobpost)
        await db.commit()

        if previous_path and previous_path != jobpost.file_path:
            if await jobpost_crud.count_by_file_path(db, previous_path) == 0:
                self.storage.remove(previous_path)
            else:
                logger.warning(f"旧附件仍被其他公告引用，保留: {previous_path}")

        logger.info(f"招聘公告已修改: {jobpost.id}")
        return JobpostLongResponse.from_jobpost(jobpost)

    async def change_status(
        self,
        db: AsyncSession,
        email: str,
        post_id: str,
    ) -> JobpostLongResponse:
        """废弃招聘公告（软删除），已废弃时抛出 AlreadyDiscarded"""
        company = await get_company_or_raise(db, email)
        jobpost = await self._get_owned_jobpost(db, company, post_id)

        jobpost.discard()
        jobpost = await jobpost_crud.save(db, jobpost)
        logger.info(f"招聘公告已废弃: {jobpost.id}")
        return JobpostLongResponse.from_jobpost(jobpost)


def get_jobpost_service(
    storage: JobpostFileStorage = Depends(get_file_storage),
) -> JobpostService:
    """招聘公告服务依赖注入"""
    return JobpostService(storage)
