"""
招聘公告模型模块

公告只做软删除：状态从 ACTIVE 变为 DISCARD，且不可逆
"""
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import String, Text, Integer, Date, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.exceptions import AlreadyDiscarded, InvalidPeriod
from .base import BaseModel

if TYPE_CHECKING:
    from .company import Company
    from .application import Application
    from app.schemas.jobpost import JobpostUpdate


class JobpostStatus(str, Enum):
    """招聘公告状态枚举"""
    ACTIVE = "ACTIVE"      # 招聘中
    DISCARD = "DISCARD"    # 已废弃


class Jobpost(BaseModel):
    """
    招聘公告模型

    关联关系:
    - N:1 -> Company (一个企业有多个公告)
    - 1:N -> Application (一个公告有多个申请)
    """
    __tablename__ = "jobposts"

    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("companies.id"),
        nullable=False,
        index=True,
        comment="企业ID"
    )

    # ========== 公告内容 ==========
    title: Mapped[str] = mapped_column(String(100), nullable=False, index=True, comment="公告标题")
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True, comment="公告正文")
    position: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, comment="招聘岗位")
    career: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, comment="经验要求")
    education: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, comment="学历要求")
    recruit_num: Mapped[int] = mapped_column(Integer, default=1, comment="招聘人数")
    salary: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, comment="薪资")
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, comment="开始日期")
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, comment="截止日期")

    # ========== 附件与状态 ==========
    file_path: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="公告文件路径"
    )
    status: Mapped[JobpostStatus] = mapped_column(
        SAEnum(JobpostStatus, native_enum=False, length=20),
        default=JobpostStatus.ACTIVE,
        index=True,
        comment="公告状态"
    )

    # ========== 关联关系 ==========
    company: Mapped["Company"] = relationship(
        "Company",
        back_populates="jobposts",
        lazy="selectin"
    )
    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="jobpost"
    )

    def update_jobpost(self, data: "JobpostUpdate") -> "Jobpost":
        """
        应用修改请求中已设置的字段

        以合并后的起止日期校验招聘期，不合法时不修改任何字段
        """
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        start_date = changes.get("start_date", self.start_date)
        end_date = changes.get("end_date", self.end_date)
        if start_date and end_date and end_date < start_date:
            raise InvalidPeriod(f"{start_date} ~ {end_date}")

        for field, value in changes.items():
            setattr(self, field, value)
        return self

    def discard(self) -> "Jobpost":
        """废弃公告（软删除）"""
        if self.status == JobpostStatus.DISCARD:
            raise AlreadyDiscarded(self.id)
        self.status = JobpostStatus.DISCARD
        return self

    def __repr__(self) -> str:
        return f"<Jobpost(id={self.id}, title={self.title}, status={self.status})>"
