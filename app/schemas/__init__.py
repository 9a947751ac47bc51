"""
Pydantic Schemas 模块

定义 API 请求/响应的数据验证模型
"""
from .base import BaseSchema, RequestSchema, TimestampSchema
from .jobpost import (
    JobpostCreate,
    JobpostUpdate,
    JobpostShortResponse,
    JobpostLongResponse,
)
from .application import (
    ApplicationStatusUpdate,
    ApplicantInfoResponse,
    StatisticsResponse,
)
from .company import (
    CompanyInfoResponse,
    CompanyInfoUpdate,
)

__all__ = [
    # Base
    "BaseSchema",
    "RequestSchema",
    "TimestampSchema",
    # Jobpost
    "JobpostCreate",
    "JobpostUpdate",
    "JobpostShortResponse",
    "JobpostLongResponse",
    # Application
    "ApplicationStatusUpdate",
    "ApplicantInfoResponse",
    "StatisticsResponse",
    # Company
    "CompanyInfoResponse",
    "CompanyInfoUpdate",
]
