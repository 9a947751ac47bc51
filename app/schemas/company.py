"""
企业资料相关 Schema
"""
from typing import Optional
from pydantic import EmailStr, Field

from app.models.company import Company
from .base import BaseSchema, RequestSchema


class CompanyInfoResponse(BaseSchema):
    """企业资料响应"""

    company_id: str
    email: EmailStr
    name: str
    contact: Optional[str]
    reg_num: Optional[str]
    address: Optional[str]
    representative_name: Optional[str]
    url: Optional[str]

    @classmethod
    def from_company(cls, company: Company) -> "CompanyInfoResponse":
        return cls(
            company_id=company.id,
            email=company.email,
            name=company.name,
            contact=company.contact,
            reg_num=company.reg_num,
            address=company.address,
            representative_name=company.representative_name,
            url=company.url,
        )


class CompanyInfoUpdate(RequestSchema):
    """更新企业资料请求（邮箱为登录标识，不可修改）"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    contact: Optional[str] = Field(None, max_length=30)
    reg_num: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    representative_name: Optional[str] = Field(None, max_length=50)
    url: Optional[str] = Field(None, max_length=255)
