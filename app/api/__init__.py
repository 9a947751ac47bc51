"""
API 路由模块
"""
from fastapi import APIRouter

from .v1 import jobposts, applications, company_info

# 创建主路由
api_router = APIRouter()

# 注册各模块路由（均为企业端接口）
api_router.include_router(
    jobposts.router,
    prefix="/company",
    tags=["招聘公告管理"]
)
api_router.include_router(
    applications.router,
    prefix="/company",
    tags=["应聘者管理"]
)
api_router.include_router(
    company_info.router,
    prefix="/company",
    tags=["企业资料"]
)
