"""
应聘者管理 API 测试

应聘者列表、申请状态变更、应聘者统计
"""
from datetime import date

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from app.crud import application_crud
from app.models import Gender, ApplicantEducation
from tests.conftest import DataFactory


def birth_for_age(age: int) -> str:
    """按当前年份倒推出生日期"""
    return f"{date.today().year - age}-06-15"


@pytest.mark.asyncio
async def test_list_applicants(client: AsyncClient, factory: DataFactory):
    """只返回投递到本企业公告的申请"""
    company = await factory.create_company()
    other = await factory.create_company()
    post = await factory.create_jobpost(company["email"], title="Engineer")
    other_post = await factory.create_jobpost(other["email"])

    application_id = await factory.create_application(
        post["id"], name="Lee", gender=Gender.FEMALE, education=ApplicantEducation.MASTER
    )
    await factory.create_application(other_post["id"])

    response = await client.get(
        "/api/v1/company/applications",
        headers=factory.auth_headers(company["email"]),
    )
    assert response.status_code == 200
    items = response.json()["data"]
    assert len(items) == 1
    item = items[0]
    assert item["application_id"] == application_id
    assert item["applicant_name"] == "Lee"
    assert item["gender"] == "female"
    assert item["education"] == "master's degree"
    assert item["jobpost_title"] == "Engineer"
    assert item["status"] == "SUBMITTED"


@pytest.mark.asyncio
async def test_list_applicants_unknown_company(client: AsyncClient, factory: DataFactory):
    response = await client.get(
        "/api/v1/company/applications",
        headers=factory.auth_headers("nobody@example.com"),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_change_application_status(client: AsyncClient, factory: DataFactory):
    """任意目标状态均可设置"""
    company = await factory.create_company()
    post = await factory.create_jobpost(company["email"])
    application_id = await factory.create_application(post["id"])
    headers = factory.auth_headers(company["email"])

    for status in ("ACCEPTED", "SUBMITTED", "REJECTED"):
        response = await client.patch(
            "/api/v1/company/applications/status",
            json={"application_id": application_id, "status": status},
            headers=headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["status"] == status

    response = await client.get("/api/v1/company/applications", headers=headers)
    assert response.json()["data"][0]["status"] == "REJECTED"


@pytest.mark.asyncio
async def test_change_application_status_errors(client: AsyncClient, factory: DataFactory):
    company = await factory.create_company()
    other = await factory.create_company()
    other_post = await factory.create_jobpost(other["email"])
    foreign_application = await factory.create_application(other_post["id"])
    headers = factory.auth_headers(company["email"])

    # 申请不存在
    response = await client.patch(
        "/api/v1/company/applications/status",
        json={"application_id": "not-exist", "status": "REVIEWED"},
        headers=headers,
    )
    assert response.status_code == 404

    # 其他企业的申请
    response = await client.patch(
        "/api/v1/company/applications/status",
        json={"application_id": foreign_application, "status": "REVIEWED"},
        headers=headers,
    )
    assert response.status_code == 403

    # 非法状态值
    response = await client.patch(
        "/api/v1/company/applications/status",
        json={"application_id": foreign_application, "status": "HIRED"},
        headers=headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_statistics_no_applicants(client: AsyncClient, factory: DataFactory):
    """没有应聘者时返回非成功响应而不是异常"""
    company = await factory.create_company()
    await factory.create_jobpost(company["email"])

    response = await client.get(
        "/api/v1/company/applications/statistics",
        headers=factory.auth_headers(company["email"]),
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None


@pytest.mark.asyncio
async def test_statistics(client: AsyncClient, factory: DataFactory):
    company = await factory.create_company()
    other = await factory.create_company()
    backend = await factory.create_jobpost(company["email"], title="Backend")
    frontend = await factory.create_jobpost(company["email"], title="Frontend")
    other_post = await factory.create_jobpost(other["email"], title="Backend")

    await factory.create_application(backend["id"], birth=birth_for_age(51))
    await factory.create_application(backend["id"], birth=birth_for_age(50), gender=Gender.FEMALE)
    await factory.create_application(
        frontend["id"], birth=birth_for_age(25), education=ApplicantEducation.HIGH_SCHOOL
    )
    await factory.create_application(other_post["id"], birth=birth_for_age(30))

    response = await client.get(
        "/api/v1/company/applications/statistics",
        headers=factory.auth_headers(company["email"]),
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["applicant_age_count"] == {"50s+": 1, "40s": 1, "20s": 1}
    assert data["applicant_gender_count"] == {"male": 2, "female": 1}
    assert data["applicant_education_count"] == {"bachelor's degree": 2, "high school": 1}
    assert data["jobpost_title_count"] == {"Backend": 2, "Frontend": 1}


@pytest.mark.asyncio
async def test_repository_queries(db_session, factory: DataFactory):
    """全量申请与企业范围查询"""
    company = await factory.create_company()
    other = await factory.create_company()
    post = await factory.create_jobpost(company["email"], title="Backend")
    other_post = await factory.create_jobpost(other["email"])
    mine = await factory.create_application(post["id"], birth="1990-01-01")
    theirs = await factory.create_application(other_post["id"])

    all_ids = {a.id for a in await application_crud.get_all(db_session)}
    assert all_ids == {mine, theirs}

    scoped = await application_crud.get_by_company(db_session, company["id"])
    assert [a.id for a in scoped] == [mine]

    rows = await application_crud.get_stats_rows_for_company(db_session, company["id"])
    assert rows == [("1990-01-01", Gender.MALE, ApplicantEducation.BACHELOR, "Backend")]


@pytest.mark.asyncio
async def test_application_requires_existing_jobpost(db_session, factory: DataFactory):
    """外键约束生效：不能投递到不存在的公告"""
    applicant_id = await factory.create_applicant()

    with pytest.raises(IntegrityError):
        await application_crud.create(
            db_session,
            obj_in={"jobpost_id": "not-exist", "applicant_id": applicant_id},
        )
    await db_session.rollback()
