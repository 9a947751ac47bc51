"""
招聘公告相关 Schema
"""
from datetime import date
from typing import Optional
from pydantic import Field, model_validator

from app.models.jobpost import Jobpost, JobpostStatus
from .base import RequestSchema, TimestampSchema


def check_period_order(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise ValueError("截止日期不能早于开始日期")


class JobpostBase(RequestSchema):
    """招聘公告基础字段"""

    title: str = Field(..., min_length=1, max_length=100, description="公告标题")
    content: Optional[str] = Field(None, description="公告正文")
    position: Optional[str] = Field(None, max_length=100, description="招聘岗位")
    career: Optional[str] = Field(None, max_length=50, description="经验要求")
    education: Optional[str] = Field(None, max_length=50, description="学历要求")
    recruit_num: int = Field(1, ge=1, description="招聘人数")
    salary: Optional[str] = Field(None, max_length=50, description="薪资")
    start_date: Optional[date] = Field(None, description="开始日期")
    end_date: Optional[date] = Field(None, description="截止日期")

    @model_validator(mode="after")
    def check_period(self):
        check_period_order(self.start_date, self.end_date)
        return self


class JobpostCreate(JobpostBase):
    """创建招聘公告请求"""
    pass


class JobpostUpdate(RequestSchema):
    """更新招聘公告请求 - 所有字段可选"""

    title: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[str] = None
    position: Optional[str] = Field(None, max_length=100)
    career: Optional[str] = Field(None, max_length=50)
    education: Optional[str] = Field(None, max_length=50)
    recruit_num: Optional[int] = Field(None, ge=1)
    salary: Optional[str] = Field(None, max_length=50)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def check_period(self):
        check_period_order(self.start_date, self.end_date)
        return self


class JobpostShortResponse(TimestampSchema):
    """招聘公告列表项响应（简化版）"""

    title: str
    position: Optional[str]
    status: JobpostStatus
    start_date: Optional[date]
    end_date: Optional[date]


class JobpostLongResponse(TimestampSchema):
    """招聘公告详情响应"""

    company_id: str
    company_name: Optional[str] = None
    title: str
    content: Optional[str]
    position: Optional[str]
    career: Optional[str]
    education: Optional[str]
    recruit_num: int
    salary: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    file_path: Optional[str]
    status: JobpostStatus

    @classmethod
    def from_jobpost(cls, jobpost: Jobpost) -> "JobpostLongResponse":
        response = cls.model_validate(jobpost)
        if jobpost.company:
            response.company_name = jobpost.company.name
        return response
