"""ProfileService のユニットテスト（respx モック）"""

import json

import httpx
import pytest
import respx
from jobportal_client.exceptions import ApiError, ApiErrorCodes
from jobportal_client.models import (
    AddSkillRequest,
    CompanyRequest,
    CompanyReviewRequest,
    CompanySize,
    EducationRequest,
    EmployerProfileRequest,
    ProficiencyLevel,
    UpdateSkillRequest,
    WorkExperienceRequest,
)
from jobportal_client.profile_service import ProfileService
from jobportal_client.service_client import create_service_client
from jobportal_client.storage import InMemoryStorage
from jobportal_client.token_store import TokenStore

BASE_URL = "http://profile-service:8081"
JOBSEEKER = f"{BASE_URL}/api/v1/profiles/jobseeker"
EMPLOYER = f"{BASE_URL}/api/v1/profiles/employer"
COMPANIES = f"{BASE_URL}/api/v1/companies"


def make_service() -> ProfileService:
    store = TokenStore(InMemoryStorage())
    store.set("T1", 1)
    return ProfileService(create_service_client(BASE_URL, store))


@respx.mock
async def test_get_my_profile_not_found() -> None:
    """プロフィール未作成は NOT_FOUND。"""
    respx.get(f"{JOBSEEKER}/me").mock(
        return_value=httpx.Response(404, json={"message": "Profile not found"})
    )
    with pytest.raises(ApiError) as exc_info:
        await make_service().get_my_jobseeker_profile()
    assert exc_info.value.code == ApiErrorCodes.NOT_FOUND
    assert exc_info.value.message == "Profile not found"


@respx.mock
async def test_profile_exists() -> None:
    """exists は真偽値で返ること。"""
    respx.get(f"{JOBSEEKER}/exists").mock(
        return_value=httpx.Response(200, json={"exists": True})
    )
    assert await make_service().jobseeker_profile_exists() is True


@respx.mock
async def test_profile_completion() -> None:
    """完成度の取得。"""
    respx.get(f"{JOBSEEKER}/me/completion").mock(
        return_value=httpx.Response(200, json={"completionPercentage": 75})
    )
    assert (await make_service().get_profile_completion()).completion_percentage == 75


@respx.mock
async def test_skills_catalog_and_search() -> None:
    """スキルマスタの一覧と検索。"""
    respx.get(f"{BASE_URL}/api/v1/skills").mock(
        return_value=httpx.Response(200, json=[{"skillId": 1, "skillName": "Python"}])
    )
    search = respx.get(f"{BASE_URL}/api/v1/skills/search").mock(
        return_value=httpx.Response(200, json=[{"skillId": 2, "skillName": "Rust"}])
    )
    service = make_service()
    assert (await service.get_skills_catalog())[0].skill_name == "Python"
    found = await service.search_skills("ru")
    assert found[0].skill_id == 2
    assert search.calls.last.request.url.params["name"] == "ru"


@respx.mock
async def test_add_update_remove_skill() -> None:
    """スキルの追加・更新・削除。"""
    skill = {"id": 10, "skillId": 1, "skillName": "Python", "proficiencyLevel": "ADVANCED"}
    add = respx.post(f"{JOBSEEKER}/skills").mock(return_value=httpx.Response(201, json=skill))
    update = respx.put(f"{JOBSEEKER}/skills/10").mock(
        return_value=httpx.Response(200, json={**skill, "proficiencyLevel": "EXPERT"})
    )
    remove = respx.delete(f"{JOBSEEKER}/skills/10").mock(return_value=httpx.Response(204))
    service = make_service()

    added = await service.add_skill(AddSkillRequest(1, ProficiencyLevel.ADVANCED, 3))
    assert added.id == 10
    assert json.loads(add.calls.last.request.content) == {
        "skillId": 1,
        "proficiencyLevel": "ADVANCED",
        "yearsOfExperience": 3,
    }
    updated = await service.update_skill(10, UpdateSkillRequest(ProficiencyLevel.EXPERT))
    assert updated.proficiency_level == "EXPERT"
    assert json.loads(update.calls.last.request.content) == {"proficiencyLevel": "EXPERT"}
    assert await service.remove_skill(10) is None
    assert remove.called


@respx.mock
async def test_education_crud() -> None:
    """学歴の追加と一覧。"""
    education = {"educationId": 4, "degree": "B.Tech", "institutionName": "IIT"}
    respx.post(f"{JOBSEEKER}/education").mock(
        return_value=httpx.Response(201, json=education)
    )
    respx.get(f"{JOBSEEKER}/education").mock(
        return_value=httpx.Response(200, json=[education])
    )
    delete = respx.delete(f"{JOBSEEKER}/education/4").mock(return_value=httpx.Response(204))
    service = make_service()
    request = EducationRequest(degree="B.Tech", institution_name="IIT")
    assert (await service.add_education(request)).education_id == 4
    assert len(await service.get_my_education()) == 1
    await service.delete_education(4)
    assert delete.called


@respx.mock
async def test_work_experience_update() -> None:
    """職歴の更新。"""
    experience = {"experienceId": 8, "companyName": "Acme", "jobTitle": "Engineer"}
    route = respx.put(f"{JOBSEEKER}/work-experience/8").mock(
        return_value=httpx.Response(200, json=experience)
    )
    request = WorkExperienceRequest(company_name="Acme", job_title="Engineer")
    result = await make_service().update_work_experience(8, request)
    assert result.experience_id == 8
    assert route.calls.last.request.headers["Authorization"] == "Bearer T1"


EMPLOYER_PROFILE = {
    "employerId": 4,
    "userId": 1,
    "companyName": "Acme",
    "companySize": "SIZE11_50",
    "isVerified": True,
    "rating": 4.5,
    "totalReviews": 12,
}
COMPANY = {"companyId": 7, "companyName": "Acme", "adminUserId": 1, "reviewCount": 2}
REVIEW = {
    "reviewId": 30,
    "companyId": 7,
    "overallRating": 4,
    "reviewTitle": "Good place",
    "isApproved": False,
}


@respx.mock
async def test_profile_summary() -> None:
    """概要にプロフィール・各区分・完成度が含まれること。"""
    respx.get(f"{JOBSEEKER}/me/summary").mock(
        return_value=httpx.Response(
            200,
            json={
                "profile": {"profileId": 2, "userId": 1, "firstName": "A", "lastName": "B"},
                "skills": [
                    {"id": 1, "skillId": 3, "skillName": "Python", "proficiencyLevel": "EXPERT"}
                ],
                "education": [],
                "experience": None,
                "completionPercentage": 55,
            },
        )
    )
    summary = await make_service().get_profile_summary()
    assert summary.profile.profile_id == 2
    assert summary.skills[0].skill_name == "Python"
    assert summary.experience == []
    assert summary.completion_percentage == 55


@respx.mock
async def test_employer_profile_create_and_get() -> None:
    """採用担当者プロフィールの作成と取得。"""
    create = respx.post(EMPLOYER).mock(return_value=httpx.Response(201, json=EMPLOYER_PROFILE))
    respx.get(f"{EMPLOYER}/4").mock(return_value=httpx.Response(200, json=EMPLOYER_PROFILE))
    service = make_service()
    created = await service.create_employer_profile(
        EmployerProfileRequest(company_name="Acme", company_size=CompanySize.SIZE11_50)
    )
    assert created.employer_id == 4
    assert created.total_reviews == 12
    assert json.loads(create.calls.last.request.content) == {
        "companyName": "Acme",
        "companySize": "SIZE11_50",
    }
    assert (await service.get_employer_profile(4)).is_verified is True


@respx.mock
async def test_employer_profile_update_delete_exists() -> None:
    """更新・削除と存在確認（真偽値そのものの本文）。"""
    update = respx.put(f"{EMPLOYER}/me").mock(
        return_value=httpx.Response(200, json={**EMPLOYER_PROFILE, "industry": "IT"})
    )
    delete = respx.delete(f"{EMPLOYER}/me").mock(return_value=httpx.Response(204))
    respx.get(f"{EMPLOYER}/exists").mock(return_value=httpx.Response(200, json=False))
    service = make_service()
    updated = await service.update_my_employer_profile(EmployerProfileRequest(industry="IT"))
    assert updated.industry == "IT"
    assert json.loads(update.calls.last.request.content) == {"industry": "IT"}
    await service.delete_my_employer_profile()
    assert delete.called
    assert await service.employer_profile_exists() is False


@respx.mock
async def test_companies_list_search_and_mine() -> None:
    """企業の一覧・検索・自分の企業。"""
    listing = respx.get(COMPANIES).mock(
        return_value=httpx.Response(200, json={"content": [COMPANY], "totalElements": 1})
    )
    search = respx.get(f"{COMPANIES}/search").mock(
        return_value=httpx.Response(200, json=[COMPANY])
    )
    respx.get(f"{COMPANIES}/my-companies").mock(return_value=httpx.Response(200, json=[]))
    service = make_service()

    page = await service.get_companies(page=1, size=5)
    assert page.content[0].company_name == "Acme"
    assert listing.calls.last.request.url.params["page"] == "1"
    assert (await service.search_companies("Ac"))[0].company_id == 7
    assert search.calls.last.request.url.params["name"] == "Ac"
    assert await service.get_my_companies() == []


@respx.mock
async def test_company_create_update_delete() -> None:
    """企業の作成・更新・削除。"""
    create = respx.post(COMPANIES).mock(return_value=httpx.Response(201, json=COMPANY))
    respx.put(f"{COMPANIES}/7").mock(
        return_value=httpx.Response(200, json={**COMPANY, "foundedYear": 1999})
    )
    delete = respx.delete(f"{COMPANIES}/7").mock(return_value=httpx.Response(204))
    service = make_service()
    await service.create_company(CompanyRequest(company_name="Acme", employee_count=40))
    assert json.loads(create.calls.last.request.content) == {
        "companyName": "Acme",
        "employeeCount": 40,
    }
    updated = await service.update_company(7, CompanyRequest(founded_year=1999))
    assert updated.founded_year == 1999
    await service.delete_company(7)
    assert delete.called


@respx.mock
async def test_company_reviews() -> None:
    """レビューの投稿・一覧（承認済みフラグ）・自分のレビュー。"""
    submit = respx.post(f"{COMPANIES}/7/reviews").mock(
        return_value=httpx.Response(201, json=REVIEW)
    )
    listing = respx.get(f"{COMPANIES}/7/reviews").mock(
        return_value=httpx.Response(200, json=[REVIEW])
    )
    respx.get(f"{COMPANIES}/reviews/my-reviews").mock(
        return_value=httpx.Response(200, json=[REVIEW])
    )
    service = make_service()

    review = await service.submit_review(
        7, CompanyReviewRequest(overall_rating=4, review_title="Good place", is_anonymous=True)
    )
    assert review.review_id == 30
    assert json.loads(submit.calls.last.request.content) == {
        "overallRating": 4,
        "reviewTitle": "Good place",
        "isAnonymous": True,
    }
    await service.get_company_reviews(7)
    assert listing.calls.last.request.url.params["onlyApproved"] == "true"
    await service.get_company_reviews(7, only_approved=False)
    assert listing.calls.last.request.url.params["onlyApproved"] == "false"
    assert (await service.get_my_reviews())[0].company_id == 7


@respx.mock
async def test_review_moderation() -> None:
    """レビューの承認・却下・更新・削除。"""
    respx.patch(f"{COMPANIES}/reviews/30/approve").mock(
        return_value=httpx.Response(200, json={**REVIEW, "isApproved": True})
    )
    respx.patch(f"{COMPANIES}/reviews/30/reject").mock(
        return_value=httpx.Response(200, json=REVIEW)
    )
    respx.put(f"{COMPANIES}/reviews/30").mock(
        return_value=httpx.Response(200, json={**REVIEW, "pros": "Team"})
    )
    delete = respx.delete(f"{COMPANIES}/reviews/30").mock(return_value=httpx.Response(204))
    service = make_service()
    assert (await service.approve_review(30)).is_approved is True
    assert (await service.reject_review(30)).is_approved is False
    assert (await service.update_review(30, CompanyReviewRequest(pros="Team"))).pros == "Team"
    await service.delete_review(30)
    assert delete.called


@respx.mock
async def test_review_forbidden() -> None:
    """権限のない承認は 403 の HTTP_ERROR。"""
    respx.patch(f"{COMPANIES}/reviews/30/approve").mock(
        return_value=httpx.Response(403, json={"error": "Admin only"})
    )
    with pytest.raises(ApiError) as exc_info:
        await make_service().approve_review(30)
    assert exc_info.value.code == ApiErrorCodes.HTTP_ERROR
    assert exc_info.value.status == 403
    assert exc_info.value.message == "Admin only"
