"""
API v1 路由模块
"""
from . import jobposts, applications, company_info

__all__ = [
    "jobposts",
    "applications",
    "company_info",
]
