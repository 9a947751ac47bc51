"""
应聘者模型模块

应聘者由个人端创建，此处只读，用于申请列表和统计
"""
from enum import Enum
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .application import Application


class Gender(str, Enum):
    """性别枚举"""
    MALE = "MALE"
    FEMALE = "FEMALE"

    @property
    def label(self) -> str:
        return _GENDER_LABELS[self]


_GENDER_LABELS = {
    Gender.MALE: "male",
    Gender.FEMALE: "female",
}


class ApplicantEducation(str, Enum):
    """最高学历枚举"""
    HIGH_SCHOOL = "HIGH_SCHOOL"
    ASSOCIATE = "ASSOCIATE"
    BACHELOR = "BACHELOR"
    MASTER = "MASTER"
    DOCTORATE = "DOCTORATE"

    @property
    def label(self) -> str:
        return _EDUCATION_LABELS[self]


_EDUCATION_LABELS = {
    ApplicantEducation.HIGH_SCHOOL: "high school",
    ApplicantEducation.ASSOCIATE: "associate degree",
    ApplicantEducation.BACHELOR: "bachelor's degree",
    ApplicantEducation.MASTER: "master's degree",
    ApplicantEducation.DOCTORATE: "doctorate",
}


class Applicant(BaseModel):
    """应聘者模型"""
    __tablename__ = "applicants"

    email: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="电子邮箱"
    )
    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="姓名"
    )
    # 前四位为出生年份，如 1990-05-01
    birth: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="出生日期"
    )
    gender: Mapped[Gender] = mapped_column(
        SAEnum(Gender, native_enum=False, length=10),
        nullable=False,
        comment="性别"
    )
    education: Mapped[ApplicantEducation] = mapped_column(
        SAEnum(ApplicantEducation, native_enum=False, length=20),
        nullable=False,
        comment="最高学历"
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
        comment="联系电话"
    )

    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="applicant"
    )

    def __repr__(self) -> str:
        return f"<Applicant(id={self.id}, name={self.name})>"
