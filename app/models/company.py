"""
企业模型模块
"""
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .jobpost import Jobpost
    from app.schemas.company import CompanyInfoUpdate


class Company(BaseModel):
    """
    企业模型

    邮箱是登录标识，一个企业拥有多个招聘公告（Jobpost）
    """
    __tablename__ = "companies"

    email: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="登录邮箱"
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="企业名称"
    )
    contact: Mapped[Optional[str]] = mapped_column(
        String(30),
        nullable=True,
        comment="联系电话"
    )
    reg_num: Mapped[Optional[str]] = mapped_column(
        String(30),
        nullable=True,
        comment="营业执照编号"
    )
    address: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="企业地址"
    )
    representative_name: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        comment="法人代表"
    )
    url: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="企业主页"
    )

    jobposts: Mapped[List["Jobpost"]] = relationship(
        "Jobpost",
        back_populates="company",
        lazy="selectin"
    )

    def update_info(self, data: "CompanyInfoUpdate") -> "Company":
        """应用资料修改请求中已设置的字段"""
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(self, field, value)
        return self

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, email={self.email})>"
