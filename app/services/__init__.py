"""
服务层模块
"""
from .storage import JobpostFileStorage, get_file_storage
from .company import CompanyService, company_service, get_company_or_raise
from .jobpost import JobpostService, get_jobpost_service
from .application import (
    ApplicationService,
    application_service,
    age_range,
    build_statistics,
)

__all__ = [
    # 文件存储
    "JobpostFileStorage",
    "get_file_storage",
    # 企业资料
    "CompanyService",
    "company_service",
    "get_company_or_raise",
    # 招聘公告
    "JobpostService",
    "get_jobpost_service",
    # 应聘申请
    "ApplicationService",
    "application_service",
    "age_range",
    "build_statistics",
]
