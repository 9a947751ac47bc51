"""
测试配置文件

提供测试用的 fixtures：内存数据库、临时文件目录、测试客户端、测试数据工厂等
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, enable_sqlite_foreign_keys, get_db
from app.core.security import create_access_token
from app.crud import company_crud, applicant_crud, application_crud
from app.main import create_app
from app.models import Gender, ApplicantEducation
from app.services.storage import JobpostFileStorage, get_file_storage


# ========== 测试数据工厂 ==========

@dataclass
class DataFactory:
    """
    测试数据工厂类

    企业、应聘者、申请由其他服务创建，这里直接写库；
    招聘公告走企业端 API 创建
    """
    client: AsyncClient
    db: AsyncSession
    _counter: int = field(default=0, repr=False)

    def _next_id(self) -> str:
        """生成唯一后缀，避免数据冲突"""
        self._counter += 1
        return str(self._counter)

    @staticmethod
    def auth_headers(email: str) -> dict:
        """生成认证请求头"""
        return {"Authorization": f"Bearer {create_access_token(email)}"}

    async def create_company(self, **overrides) -> dict:
        """创建企业，返回 id/email/name"""
        suffix = self._next_id()
        data = {
            "email": f"company{suffix}@example.com",
            "name": f"TestCorp{suffix}",
            "contact": "02-1234-5678",
            "reg_num": f"123-45-{suffix.zfill(5)}",
            "address": "Seoul, Gangnam-gu",
            "representative_name": "Kim",
            "url": f"https://corp{suffix}.example.com",
            **overrides
        }
        company = await company_crud.create(self.db, obj_in=data)
        await self.db.commit()
        return {"id": company.id, "email": company.email, "name": company.name}

    async def create_jobpost(
        self,
        email: str,
        file: Optional[tuple] = None,
        **overrides
    ) -> dict:
        """通过 API 创建招聘公告，返回详情数据"""
        suffix = self._next_id()
        data = {
            "title": f"测试公告{suffix}",
            "content": "测试用公告正文",
            "position": "Backend Engineer",
            "career": "3年以上",
            "education": "本科",
            "recruit_num": 2,
            "salary": "面议",
            "start_date": "2026-10-01",
            "end_date": "2026-11-30",
            **overrides
        }
        resp = await self.client.post(
            "/api/v1/company/jobposts",
            data={"request_dto": json.dumps(data)},
            files={"jobpost_file": file} if file else None,
            headers=self.auth_headers(email),
        )
        assert resp.status_code == 200, f"创建公告失败: {resp.text}"
        return resp.json()["data"]

    async def create_applicant(
        self,
        birth: str = "1995-03-15",
        gender: Gender = Gender.MALE,
        education: ApplicantEducation = ApplicantEducation.BACHELOR,
        **overrides
    ) -> str:
        """创建应聘者，返回 ID"""
        suffix = self._next_id()
        data = {
            "email": f"applicant{suffix}@example.com",
            "name": f"应聘者{suffix}",
            "birth": birth,
            "gender": gender,
            "education": education,
            "phone": f"010{suffix.zfill(8)}",
            **overrides
        }
        applicant = await applicant_crud.create(self.db, obj_in=data)
        await self.db.commit()
        return applicant.id

    async def create_application(
        self,
        jobpost_id: str,
        applicant_id: Optional[str] = None,
        **applicant_fields
    ) -> str:
        """创建应聘申请，未指定应聘者时自动创建，返回 ID"""
        if applicant_id is None:
            applicant_id = await self.create_applicant(**applicant_fields)
        application = await application_crud.create(
            self.db,
            obj_in={"jobpost_id": jobpost_id, "applicant_id": applicant_id},
        )
        await self.db.commit()
        return application.id


# 使用内存 SQLite 作为测试数据库
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    为每个测试函数提供独立的数据库

    每个测试使用新的内存库，测试结束后释放引擎
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """公告文件的临时存储目录"""
    return tmp_path / "jobposts"


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession, storage_dir: Path) -> AsyncGenerator[AsyncClient, None]:
    """
    提供测试用的 HTTP 客户端

    覆盖 get_db 与 get_file_storage 依赖
    """
    app = create_app()

    async def override_get_db():
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_file_storage] = lambda: JobpostFileStorage(storage_dir)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def factory(client: AsyncClient, db_session: AsyncSession) -> DataFactory:
    """提供测试数据工厂实例"""
    return DataFactory(client=client, db=db_session)
