"""
应聘申请模型模块

Application 连接应聘者和招聘公告，状态由企业端变更
"""
from enum import Enum
from typing import TYPE_CHECKING
from sqlalchemy import String, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .applicant import Applicant
    from .jobpost import Jobpost


class ApplicationStatus(str, Enum):
    """应聘申请状态枚举"""
    SUBMITTED = "SUBMITTED"    # 已投递
    REVIEWED = "REVIEWED"      # 已查看
    ACCEPTED = "ACCEPTED"      # 已通过
    REJECTED = "REJECTED"      # 已拒绝


class Application(BaseModel):
    """
    应聘申请模型

    关联关系:
    - N:1 -> Applicant (一个应聘者可投多个公告)
    - N:1 -> Jobpost (一个公告有多个申请)
    """
    __tablename__ = "applications"

    # ========== 外键关联 ==========
    applicant_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("applicants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="应聘者ID"
    )
    jobpost_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("jobposts.id"),
        nullable=False,
        index=True,
        comment="招聘公告ID"
    )

    # ========== 状态管理 ==========
    status: Mapped[ApplicationStatus] = mapped_column(
        SAEnum(ApplicationStatus, native_enum=False, length=20),
        default=ApplicationStatus.SUBMITTED,
        index=True,
        comment="申请状态"
    )

    # ========== 关联关系 ==========
    applicant: Mapped["Applicant"] = relationship(
        "Applicant",
        back_populates="applications",
        lazy="selectin"
    )
    jobpost: Mapped["Jobpost"] = relationship(
        "Jobpost",
        back_populates="applications",
        lazy="selectin"
    )

    def update_status(self, status: ApplicationStatus) -> "Application":
        """变更申请状态，不校验状态流转"""
        self.status = status
        return self

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, status={self.status})>"
