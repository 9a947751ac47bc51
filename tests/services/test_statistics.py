"""
应聘者统计单元测试

不经过数据库，直接验证年龄段划分和频次累加
"""
import itertools

import pytest

from app.models import Gender, ApplicantEducation
from app.services.application import age_range, build_statistics, UNDER_TWENTY


@pytest.mark.parametrize(
    "age, expected",
    [
        (70, "50s+"),
        (51, "50s+"),
        (50, "40s"),
        (41, "40s"),
        (40, "30s"),
        (31, "30s"),
        (30, "20s"),
        (21, "20s"),
        (20, UNDER_TWENTY),
        (19, UNDER_TWENTY),
        (0, UNDER_TWENTY),
    ],
)
def test_age_range_boundaries(age, expected):
    """阈值为严格大于"""
    assert age_range(age) == expected


def test_build_statistics_empty():
    statistics = build_statistics([], current_year=2026)
    assert statistics.is_empty
    assert statistics.applicant_age_count == {}
    assert statistics.applicant_gender_count == {}
    assert statistics.applicant_education_count == {}
    assert statistics.jobpost_title_count == {}


def test_build_statistics_counts():
    rows = [
        ("1975-01-01", Gender.MALE, ApplicantEducation.BACHELOR, "Backend"),
        ("1976-12-31", Gender.FEMALE, ApplicantEducation.MASTER, "Backend"),
        ("2000-05-05", "FEMALE", "DOCTORATE", "Frontend"),
    ]
    statistics = build_statistics(rows, current_year=2026)

    assert not statistics.is_empty
    assert statistics.applicant_age_count == {"50s+": 1, "40s": 1, "20s": 1}
    assert statistics.applicant_gender_count == {"male": 1, "female": 2}
    assert statistics.applicant_education_count == {
        "bachelor's degree": 1,
        "master's degree": 1,
        "doctorate": 1,
    }
    assert statistics.jobpost_title_count == {"Backend": 2, "Frontend": 1}


def test_build_statistics_order_independent():
    rows = [
        ("1990-03-01", Gender.MALE, ApplicantEducation.HIGH_SCHOOL, "A"),
        ("1960-03-01", Gender.FEMALE, ApplicantEducation.ASSOCIATE, "B"),
        ("2010-03-01", Gender.MALE, ApplicantEducation.BACHELOR, "A"),
        ("1985-03-01", Gender.FEMALE, ApplicantEducation.BACHELOR, "C"),
    ]
    expected = build_statistics(rows, current_year=2026)
    for permutation in itertools.permutations(rows):
        assert build_statistics(permutation, current_year=2026) == expected
