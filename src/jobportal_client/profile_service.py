"""プロフィールサービスの呼び出し"""

from __future__ import annotations

from typing import Any

from .models import (
    AddSkillRequest,
    CompanyRequest,
    CompanyResponse,
    CompanyReviewRequest,
    CompanyReviewResponse,
    EducationRequest,
    EducationResponse,
    EmployerProfileRequest,
    EmployerProfileResponse,
    JobseekerProfileRequest,
    JobseekerProfileResponse,
    MasterSkill,
    Page,
    ProfileCompletionResponse,
    ProfileSummaryResponse,
    SkillResponse,
    UpdateSkillRequest,
    WorkExperienceRequest,
    WorkExperienceResponse,
)
from .service_client import ServiceClient

_JOBSEEKER = "/api/v1/profiles/jobseeker"
_EMPLOYER = "/api/v1/profiles/employer"
_COMPANIES = "/api/v1/companies"
_REVIEWS = "/api/v1/companies/reviews"


class ProfileService:
    """求職者・採用担当者プロフィール、スキル・学歴・職歴、企業とレビューの API。"""

    def __init__(self, client: ServiceClient) -> None:
        self._client = client

    # プロフィール

    async def create_jobseeker_profile(
        self, request: JobseekerProfileRequest
    ) -> JobseekerProfileResponse:
        data: dict[str, Any] = await self._client.post(_JOBSEEKER, request.to_dict())
        return JobseekerProfileResponse.from_dict(data)

    async def get_my_jobseeker_profile(self) -> JobseekerProfileResponse:
        data: dict[str, Any] = await self._client.get(f"{_JOBSEEKER}/me")
        return JobseekerProfileResponse.from_dict(data)

    async def get_jobseeker_profile(self, profile_id: int) -> JobseekerProfileResponse:
        data: dict[str, Any] = await self._client.get(f"{_JOBSEEKER}/{profile_id}")
        return JobseekerProfileResponse.from_dict(data)

    async def update_my_jobseeker_profile(
        self, request: JobseekerProfileRequest
    ) -> JobseekerProfileResponse:
        data: dict[str, Any] = await self._client.put(f"{_JOBSEEKER}/me", request.to_dict())
        return JobseekerProfileResponse.from_dict(data)

    async def delete_my_jobseeker_profile(self) -> None:
        await self._client.delete(f"{_JOBSEEKER}/me")

    async def jobseeker_profile_exists(self) -> bool:
        data = await self._client.get(f"{_JOBSEEKER}/exists")
        if isinstance(data, dict):
            return bool(data.get("exists", False))
        return bool(data)

    async def get_profile_completion(self) -> ProfileCompletionResponse:
        data: dict[str, Any] = await self._client.get(f"{_JOBSEEKER}/me/completion")
        return ProfileCompletionResponse.from_dict(data)

    async def get_profile_summary(self) -> ProfileSummaryResponse:
        """プロフィール・スキル・学歴・職歴と完成度を 1 回で取得する。"""
        data: dict[str, Any] = await self._client.get(f"{_JOBSEEKER}/me/summary")
        return ProfileSummaryResponse.from_dict(data)

    # スキル

    async def get_skills_catalog(self, page: int = 0, size: int = 50) -> list[MasterSkill]:
        data: list[dict[str, Any]] = await self._client.get(
            "/api/v1/skills", params={"page": page, "size": size}
        )
        return [MasterSkill.from_dict(d) for d in data or []]

    async def search_skills(self, name: str) -> list[MasterSkill]:
        data: list[dict[str, Any]] = await self._client.get(
            "/api/v1/skills/search", params={"name": name}
        )
        return [MasterSkill.from_dict(d) for d in data or []]

    async def get_skill(self, skill_id: int) -> MasterSkill:
        data: dict[str, Any] = await self._client.get(f"/api/v1/skills/{skill_id}")
        return MasterSkill.from_dict(data)

    async def add_skill(self, request: AddSkillRequest) -> SkillResponse:
        data: dict[str, Any] = await self._client.post(
            f"{_JOBSEEKER}/skills", request.to_dict()
        )
        return SkillResponse.from_dict(data)

    async def get_my_skills(self) -> list[SkillResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_JOBSEEKER}/skills")
        return [SkillResponse.from_dict(d) for d in data or []]

    async def update_skill(self, id: int, request: UpdateSkillRequest) -> SkillResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_JOBSEEKER}/skills/{id}", request.to_dict()
        )
        return SkillResponse.from_dict(data)

    async def remove_skill(self, id: int) -> None:
        await self._client.delete(f"{_JOBSEEKER}/skills/{id}")

    # 学歴

    async def add_education(self, request: EducationRequest) -> EducationResponse:
        data: dict[str, Any] = await self._client.post(
            f"{_JOBSEEKER}/education", request.to_dict()
        )
        return EducationResponse.from_dict(data)

    async def get_my_education(self) -> list[EducationResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_JOBSEEKER}/education")
        return [EducationResponse.from_dict(d) for d in data or []]

    async def update_education(
        self, education_id: int, request: EducationRequest
    ) -> EducationResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_JOBSEEKER}/education/{education_id}", request.to_dict()
        )
        return EducationResponse.from_dict(data)

    async def delete_education(self, education_id: int) -> None:
        await self._client.delete(f"{_JOBSEEKER}/education/{education_id}")

    # 職歴

    async def add_work_experience(
        self, request: WorkExperienceRequest
    ) -> WorkExperienceResponse:
        data: dict[str, Any] = await self._client.post(
            f"{_JOBSEEKER}/work-experience", request.to_dict()
        )
        return WorkExperienceResponse.from_dict(data)

    async def get_my_work_experience(self) -> list[WorkExperienceResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_JOBSEEKER}/work-experience")
        return [WorkExperienceResponse.from_dict(d) for d in data or []]

    async def update_work_experience(
        self, experience_id: int, request: WorkExperienceRequest
    ) -> WorkExperienceResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_JOBSEEKER}/work-experience/{experience_id}", request.to_dict()
        )
        return WorkExperienceResponse.from_dict(data)

    async def delete_work_experience(self, experience_id: int) -> None:
        await self._client.delete(f"{_JOBSEEKER}/work-experience/{experience_id}")

    # 採用担当者プロフィール

    async def create_employer_profile(
        self, request: EmployerProfileRequest
    ) -> EmployerProfileResponse:
        data: dict[str, Any] = await self._client.post(_EMPLOYER, request.to_dict())
        return EmployerProfileResponse.from_dict(data)

    async def get_my_employer_profile(self) -> EmployerProfileResponse:
        data: dict[str, Any] = await self._client.get(f"{_EMPLOYER}/me")
        return EmployerProfileResponse.from_dict(data)

    async def get_employer_profile(self, employer_id: int) -> EmployerProfileResponse:
        data: dict[str, Any] = await self._client.get(f"{_EMPLOYER}/{employer_id}")
        return EmployerProfileResponse.from_dict(data)

    async def update_my_employer_profile(
        self, request: EmployerProfileRequest
    ) -> EmployerProfileResponse:
        data: dict[str, Any] = await self._client.put(f"{_EMPLOYER}/me", request.to_dict())
        return EmployerProfileResponse.from_dict(data)

    async def delete_my_employer_profile(self) -> None:
        await self._client.delete(f"{_EMPLOYER}/me")

    async def employer_profile_exists(self) -> bool:
        data = await self._client.get(f"{_EMPLOYER}/exists")
        if isinstance(data, dict):
            return bool(data.get("exists", False))
        return bool(data)

    # 企業

    async def create_company(self, request: CompanyRequest) -> CompanyResponse:
        data: dict[str, Any] = await self._client.post(_COMPANIES, request.to_dict())
        return CompanyResponse.from_dict(data)

    async def get_company(self, company_id: int) -> CompanyResponse:
        data: dict[str, Any] = await self._client.get(f"{_COMPANIES}/{company_id}")
        return CompanyResponse.from_dict(data)

    async def get_companies(self, page: int = 0, size: int = 10) -> Page[CompanyResponse]:
        data: dict[str, Any] = await self._client.get(
            _COMPANIES, params={"page": page, "size": size}
        )
        return Page.from_dict(data, CompanyResponse.from_dict)

    async def search_companies(self, name: str) -> list[CompanyResponse]:
        data: list[dict[str, Any]] = await self._client.get(
            f"{_COMPANIES}/search", params={"name": name}
        )
        return [CompanyResponse.from_dict(d) for d in data or []]

    async def get_my_companies(self) -> list[CompanyResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_COMPANIES}/my-companies")
        return [CompanyResponse.from_dict(d) for d in data or []]

    async def update_company(self, company_id: int, request: CompanyRequest) -> CompanyResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_COMPANIES}/{company_id}", request.to_dict()
        )
        return CompanyResponse.from_dict(data)

    async def delete_company(self, company_id: int) -> None:
        await self._client.delete(f"{_COMPANIES}/{company_id}")

    # 企業レビュー

    async def submit_review(
        self, company_id: int, request: CompanyReviewRequest
    ) -> CompanyReviewResponse:
        data: dict[str, Any] = await self._client.post(
            f"{_COMPANIES}/{company_id}/reviews", request.to_dict()
        )
        return CompanyReviewResponse.from_dict(data)

    async def get_company_reviews(
        self, company_id: int, only_approved: bool = True
    ) -> list[CompanyReviewResponse]:
        """企業のレビュー一覧。only_approved=False は管理者向け。"""
        data: list[dict[str, Any]] = await self._client.get(
            f"{_COMPANIES}/{company_id}/reviews",
            params={"onlyApproved": "true" if only_approved else "false"},
        )
        return [CompanyReviewResponse.from_dict(d) for d in data or []]

    async def get_my_reviews(self) -> list[CompanyReviewResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_REVIEWS}/my-reviews")
        return [CompanyReviewResponse.from_dict(d) for d in data or []]

    async def update_review(
        self, review_id: int, request: CompanyReviewRequest
    ) -> CompanyReviewResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_REVIEWS}/{review_id}", request.to_dict()
        )
        return CompanyReviewResponse.from_dict(data)

    async def delete_review(self, review_id: int) -> None:
        await self._client.delete(f"{_REVIEWS}/{review_id}")

    async def approve_review(self, review_id: int) -> CompanyReviewResponse:
        data: dict[str, Any] = await self._client.patch(f"{_REVIEWS}/{review_id}/approve")
        return CompanyReviewResponse.from_dict(data)

    async def reject_review(self, review_id: int) -> CompanyReviewResponse:
        data: dict[str, Any] = await self._client.patch(f"{_REVIEWS}/{review_id}/reject")
        return CompanyReviewResponse.from_dict(data)
