"""データモデルのユニットテスト"""

from jobportal_client.exceptions import ApiError, ApiErrorCodes
from jobportal_client.models import (
    JobResponse,
    JobSearchRequest,
    JobStatus,
    Page,
    ProfileCompletionResponse,
    SkillResponse,
    UpdateUserRequest,
)


def test_update_user_request_partial() -> None:
    """未指定の項目は送らないこと。"""
    assert UpdateUserRequest(name="Asha").to_dict() == {"name": "Asha"}


def test_profile_completion_alternate_key() -> None:
    """percentage キーでも読めること。"""
    assert ProfileCompletionResponse.from_dict({"percentage": 60}).completion_percentage == 60
    assert ProfileCompletionResponse.from_dict({}).completion_percentage == 0


def test_job_search_cache_key_is_stable() -> None:
    """同じ条件なら同じキャッシュキー。"""
    a = JobSearchRequest(job_title="python", location="Pune")
    b = JobSearchRequest(location="Pune", job_title="python")
    assert a.cache_key() == b.cache_key()
    assert a.cache_key() != JobSearchRequest(job_title="rust").cache_key()
    hash(a.cache_key())


def test_page_from_dict() -> None:
    """ページの各項目。"""
    page = Page.from_dict(
        {"content": [{"jobId": 1, "jobTitle": "QA"}], "totalElements": 1, "totalPages": 1},
        JobResponse.from_dict,
    )
    assert page.content[0].job_status is JobStatus.ACTIVE
    assert page.total_pages == 1
    assert page.number == 0


def test_skill_response_from_dict() -> None:
    """スキル応答の変換。"""
    skill = SkillResponse.from_dict(
        {"id": 1, "skillId": 2, "skillName": "Go", "proficiencyLevel": "BEGINNER"}
    )
    assert skill.skill_name == "Go"
    assert skill.years_of_experience == 0


def test_api_error_str_and_flags() -> None:
    """ApiError の文字列表現と判定プロパティ。"""
    error = ApiError(ApiErrorCodes.UNAUTHORIZED, "Unauthorized", status=401)
    assert str(error) == "UNAUTHORIZED: Unauthorized"
    assert error.is_auth_failure is True
    assert error.is_transport_error is False
