"""サービス別リクエスト/レスポンスのデータモデル

ワイヤ上のキーは camelCase、Python 側は snake_case。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """値が None の項目を取り除く（部分更新リクエスト用）。"""
    return {k: v for k, v in data.items() if v is not None}


# ---------------------------------------------------------------------------
# user service
# ---------------------------------------------------------------------------


class UserType(StrEnum):
    """ユーザー種別。"""

    JOBSEEKER = "JOBSEEKER"
    EMPLOYER = "EMPLOYER"
    COMPANY_ADMIN = "COMPANY_ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


class OtpPurpose(StrEnum):
    """OTP 再送の用途。"""

    REGISTRATION = "registration"
    LOGIN = "login"
    PASSWORD_RESET = "password_reset"


@dataclass
class RegisterRequest:
    """ユーザー登録リクエスト。"""

    email: str
    password: str
    phone: str
    user_type: UserType
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "password": self.password,
            "phone": self.phone,
            "userType": str(self.user_type),
            "name": self.name,
        }


@dataclass
class LoginRequest:
    """ログインリクエスト。"""

    email: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "password": self.password}


@dataclass
class OtpRequest:
    """OTP 検証リクエスト（登録・ログイン・パスワードリセット共通）。"""

    phone: str
    otp: str

    def to_dict(self) -> dict[str, Any]:
        return {"phone": self.phone, "otp": self.otp}


@dataclass
class ResendOtpRequest:
    phone: str
    purpose: OtpPurpose

    def to_dict(self) -> dict[str, Any]:
        return {"phone": self.phone, "purpose": str(self.purpose)}


@dataclass
class ForgotPasswordRequest:
    phone: str

    def to_dict(self) -> dict[str, Any]:
        return {"phone": self.phone}


@dataclass
class ResetPasswordRequest:
    reset_token: str
    new_password: str

    def to_dict(self) -> dict[str, Any]:
        return {"resetToken": self.reset_token, "newPassword": self.new_password}


@dataclass
class ChangePasswordRequest:
    current_password: str
    new_password: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentPassword": self.current_password,
            "newPassword": self.new_password,
        }


@dataclass
class UpdateUserRequest:
    """ユーザー情報更新リクエスト。email/phone の変更は再検証が必要。"""

    name: str | None = None
    email: str | None = None
    phone: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "email": self.email, "phone": self.phone})


@dataclass
class DeactivateAccountRequest:
    password: str
    reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"password": self.password, "reason": self.reason}


@dataclass
class AuthResponse:
    """OTP 検証成功時の認証レスポンス。"""

    token: str
    user_id: int
    name: str = ""
    email: str = ""
    user_type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthResponse:
        return cls(
            token=data["token"],
            user_id=data["userId"],
            name=data.get("name", ""),
            email=data.get("email", ""),
            user_type=data.get("userType", ""),
        )


@dataclass
class UserResponse:
    """ユーザー情報。"""

    user_id: int
    name: str
    email: str
    phone: str = ""
    user_type: str = ""
    is_verified: bool = False
    is_active: bool = False
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserResponse:
        return cls(
            user_id=data["userId"],
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone") or "",
            user_type=data.get("userType", ""),
            is_verified=bool(data.get("isVerified", False)),
            is_active=bool(data.get("isActive", False)),
            created_at=data.get("createdAt", ""),
        )


@dataclass
class LoginHistoryResponse:
    """ログイン履歴。"""

    login_id: int
    login_time: str
    status: str
    phone: str = ""
    email: str = ""
    ip_address: str = ""
    browser: str = ""
    failure_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoginHistoryResponse:
        return cls(
            login_id=data["loginId"],
            login_time=data.get("loginTime", ""),
            status=data.get("status", ""),
            phone=data.get("phone", ""),
            email=data.get("email", ""),
            ip_address=data.get("ipAddress", ""),
            browser=data.get("browser", ""),
            failure_reason=data.get("failureReason"),
        )


# ---------------------------------------------------------------------------
# profile service
# ---------------------------------------------------------------------------


class Gender(StrEnum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class NoticePeriod(StrEnum):
    IMMEDIATE = "IMMEDIATE"
    DAYS_15 = "DAYS_15"
    MONTH_1 = "MONTH_1"
    MONTH_2 = "MONTH_2"
    MONTH_3 = "MONTH_3"


class ProficiencyLevel(StrEnum):
    """スキル習熟度。"""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


@dataclass
class JobseekerProfileRequest:
    """求職者プロフィール作成・更新リクエスト。

    作成時は first_name / last_name が必須。更新時は指定した項目のみ送る。
    """

    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    gender: Gender | None = None
    current_location: str | None = None
    preferred_location: str | None = None
    bio: str | None = None
    total_experience_months: int | None = None
    current_salary: float | None = None
    expected_salary: float | None = None
    notice_period: NoticePeriod | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "firstName": self.first_name,
                "lastName": self.last_name,
                "dateOfBirth": self.date_of_birth,
                "gender": str(self.gender) if self.gender else None,
                "currentLocation": self.current_location,
                "preferredLocation": self.preferred_location,
                "bio": self.bio,
                "totalExperienceMonths": self.total_experience_months,
                "currentSalary": self.current_salary,
                "expectedSalary": self.expected_salary,
                "noticePeriod": str(self.notice_period) if self.notice_period else None,
            }
        )


@dataclass
class JobseekerProfileResponse:
    """求職者プロフィール。"""

    profile_id: int
    user_id: int
    first_name: str
    last_name: str
    date_of_birth: str | None = None
    gender: str | None = None
    current_location: str | None = None
    preferred_location: str | None = None
    bio: str | None = None
    total_experience_months: int | None = None
    current_salary: float | None = None
    expected_salary: float | None = None
    notice_period: str | None = None
    is_profile_complete: bool = False
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobseekerProfileResponse:
        return cls(
            profile_id=data["profileId"],
            user_id=data["userId"],
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            date_of_birth=data.get("dateOfBirth"),
            gender=data.get("gender"),
            current_location=data.get("currentLocation"),
            preferred_location=data.get("preferredLocation"),
            bio=data.get("bio"),
            total_experience_months=data.get("totalExperienceMonths"),
            current_salary=data.get("currentSalary"),
            expected_salary=data.get("expectedSalary"),
            notice_period=data.get("noticePeriod"),
            is_profile_complete=bool(data.get("isProfileComplete", False)),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class ProfileCompletionResponse:
    completion_percentage: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProfileCompletionResponse:
        return cls(
            completion_percentage=int(
                data.get("completionPercentage", data.get("percentage", 0))
            )
        )


@dataclass
class MasterSkill:
    """スキルマスタの 1 件。"""

    skill_id: int
    skill_name: str
    category: str = ""
    description: str = ""
    is_active: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MasterSkill:
        return cls(
            skill_id=data["skillId"],
            skill_name=data.get("skillName", ""),
            category=data.get("category") or "",
            description=data.get("description") or "",
            is_active=bool(data.get("isActive", True)),
        )


@dataclass
class AddSkillRequest:
    skill_id: int
    proficiency_level: ProficiencyLevel
    years_of_experience: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "skillId": self.skill_id,
            "proficiencyLevel": str(self.proficiency_level),
            "yearsOfExperience": self.years_of_experience,
        }


@dataclass
class UpdateSkillRequest:
    proficiency_level: ProficiencyLevel | None = None
    years_of_experience: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "proficiencyLevel": (
                    str(self.proficiency_level) if self.proficiency_level else None
                ),
                "yearsOfExperience": self.years_of_experience,
            }
        )


@dataclass
class SkillResponse:
    """プロフィールに紐づくスキル。"""

    id: int
    skill_id: int
    skill_name: str
    proficiency_level: str
    years_of_experience: int = 0
    profile_id: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SkillResponse:
        return cls(
            id=data["id"],
            skill_id=data["skillId"],
            skill_name=data.get("skillName", ""),
            proficiency_level=data.get("proficiencyLevel", ""),
            years_of_experience=int(data.get("yearsOfExperience", 0)),
            profile_id=data.get("profileId"),
        )


@dataclass
class EducationRequest:
    """学歴の追加・更新リクエスト。"""

    degree: str | None = None
    field_of_study: str | None = None
    institution_name: str | None = None
    university: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    percentage_or_cgpa: float | None = None
    description: str | None = None
    is_current: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "degree": self.degree,
                "fieldOfStudy": self.field_of_study,
                "institutionName": self.institution_name,
                "university": self.university,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "percentageOrCgpa": self.percentage_or_cgpa,
                "description": self.description,
                "isCurrent": self.is_current,
            }
        )


@dataclass
class EducationResponse:
    education_id: int
    degree: str
    institution_name: str
    field_of_study: str = ""
    university: str = ""
    start_date: str = ""
    end_date: str | None = None
    percentage_or_cgpa: float | None = None
    description: str = ""
    is_current: bool = False
    profile_id: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EducationResponse:
        return cls(
            education_id=data["educationId"],
            degree=data.get("degree", ""),
            institution_name=data.get("institutionName", ""),
            field_of_study=data.get("fieldOfStudy") or "",
            university=data.get("university") or "",
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate"),
            percentage_or_cgpa=data.get("percentageOrCgpa"),
            description=data.get("description") or "",
            is_current=bool(data.get("isCurrent", False)),
            profile_id=data.get("profileId"),
        )


@dataclass
class WorkExperienceRequest:
    """職歴の追加・更新リクエスト。"""

    company_name: str | None = None
    job_title: str | None = None
    employment_type: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool | None = None
    job_description: str | None = None
    location: str | None = None
    salary: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "companyName": self.company_name,
                "jobTitle": self.job_title,
                "employmentType": self.employment_type,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "isCurrent": self.is_current,
                "jobDescription": self.job_description,
                "location": self.location,
                "salary": self.salary,
            }
        )


@dataclass
class WorkExperienceResponse:
    experience_id: int
    company_name: str
    job_title: str
    employment_type: str = ""
    start_date: str = ""
    end_date: str | None = None
    is_current: bool = False
    job_description: str = ""
    location: str = ""
    salary: float | None = None
    profile_id: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WorkExperienceResponse:
        return cls(
            experience_id=data["experienceId"],
            company_name=data.get("companyName", ""),
            job_title=data.get("jobTitle", ""),
            employment_type=data.get("employmentType", ""),
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate"),
            is_current=bool(data.get("isCurrent", False)),
            job_description=data.get("jobDescription") or "",
            location=data.get("location") or "",
            salary=data.get("salary"),
            profile_id=data.get("profileId"),
        )


@dataclass
class ProfileSummaryResponse:
    """プロフィール・スキル・学歴・職歴と完成度をまとめた概要。"""

    profile: JobseekerProfileResponse
    skills: list[SkillResponse] = field(default_factory=list)
    education: list[EducationResponse] = field(default_factory=list)
    experience: list[WorkExperienceResponse] = field(default_factory=list)
    completion_percentage: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProfileSummaryResponse:
        return cls(
            profile=JobseekerProfileResponse.from_dict(data["profile"]),
            skills=[SkillResponse.from_dict(d) for d in data.get("skills") or []],
            education=[EducationResponse.from_dict(d) for d in data.get("education") or []],
            experience=[
                WorkExperienceResponse.from_dict(d) for d in data.get("experience") or []
            ],
            completion_percentage=int(data.get("completionPercentage", 0)),
        )


class CompanySize(StrEnum):
    SIZE1_10 = "SIZE1_10"
    SIZE11_50 = "SIZE11_50"
    SIZE51_200 = "SIZE51_200"
    SIZE201_500 = "SIZE201_500"
    SIZE500PLUS = "SIZE500PLUS"


@dataclass
class EmployerProfileRequest:
    """採用担当者プロフィール作成・更新リクエスト。作成時は company_name が必須。"""

    company_name: str | None = None
    company_website: str | None = None
    company_description: str | None = None
    industry: str | None = None
    company_size: CompanySize | None = None
    headquarters_location: str | None = None
    contact_person_name: str | None = None
    contact_person_designation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "companyName": self.company_name,
                "companyWebsite": self.company_website,
                "companyDescription": self.company_description,
                "industry": self.industry,
                "companySize": str(self.company_size) if self.company_size else None,
                "headquartersLocation": self.headquarters_location,
                "contactPersonName": self.contact_person_name,
                "contactPersonDesignation": self.contact_person_designation,
            }
        )


@dataclass
class EmployerProfileResponse:
    employer_id: int
    user_id: int
    company_name: str
    company_website: str = ""
    company_description: str = ""
    industry: str = ""
    company_size: str = ""
    headquarters_location: str = ""
    contact_person_name: str = ""
    contact_person_designation: str = ""
    is_verified: bool = False
    rating: float | None = None
    total_reviews: int = 0
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmployerProfileResponse:
        return cls(
            employer_id=data["employerId"],
            user_id=data["userId"],
            company_name=data.get("companyName", ""),
            company_website=data.get("companyWebsite") or "",
            company_description=data.get("companyDescription") or "",
            industry=data.get("industry") or "",
            company_size=data.get("companySize") or "",
            headquarters_location=data.get("headquartersLocation") or "",
            contact_person_name=data.get("contactPersonName") or "",
            contact_person_designation=data.get("contactPersonDesignation") or "",
            is_verified=bool(data.get("isVerified", False)),
            rating=data.get("rating"),
            total_reviews=int(data.get("totalReviews") or 0),
            created_at=data.get("createdAt", ""),
        )


@dataclass
class CompanyRequest:
    """企業の作成・更新リクエスト。"""

    company_name: str | None = None
    website: str | None = None
    description: str | None = None
    industry: str | None = None
    size: str | None = None
    headquarters: str | None = None
    founded_year: int | None = None
    employee_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "companyName": self.company_name,
                "website": self.website,
                "description": self.description,
                "industry": self.industry,
                "size": self.size,
                "headquarters": self.headquarters,
                "foundedYear": self.founded_year,
                "employeeCount": self.employee_count,
            }
        )


@dataclass
class CompanyResponse:
    """企業。"""

    company_id: int
    company_name: str
    admin_user_id: int | None = None
    website: str = ""
    description: str = ""
    industry: str = ""
    size: str = ""
    headquarters: str = ""
    founded_year: int | None = None
    employee_count: int | None = None
    rating: float | None = None
    review_count: int = 0
    is_verified: bool = False
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompanyResponse:
        return cls(
            company_id=data["companyId"],
            company_name=data.get("companyName", ""),
            admin_user_id=data.get("adminUserId"),
            website=data.get("website") or "",
            description=data.get("description") or "",
            industry=data.get("industry") or "",
            size=data.get("size") or "",
            headquarters=data.get("headquarters") or "",
            founded_year=data.get("foundedYear"),
            employee_count=data.get("employeeCount"),
            rating=data.get("rating"),
            review_count=int(data.get("reviewCount") or 0),
            is_verified=bool(data.get("isVerified", False)),
            created_at=data.get("createdAt", ""),
        )


@dataclass
class CompanyReviewRequest:
    """企業レビューの投稿・更新リクエスト。

    評価項目は 1〜5。更新時は指定した項目のみ送る。
    """

    overall_rating: int | None = None
    work_life_balance: int | None = None
    salary_benefits: int | None = None
    career_growth: int | None = None
    management: int | None = None
    culture: int | None = None
    review_title: str | None = None
    pros: str | None = None
    cons: str | None = None
    advice_to_management: str | None = None
    job_title: str | None = None
    employment_status: str | None = None
    location: str | None = None
    is_current_employee: bool | None = None
    is_anonymous: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "overallRating": self.overall_rating,
                "workLifeBalance": self.work_life_balance,
                "salaryBenefits": self.salary_benefits,
                "careerGrowth": self.career_growth,
                "management": self.management,
                "culture": self.culture,
                "reviewTitle": self.review_title,
                "pros": self.pros,
                "cons": self.cons,
                "adviceToManagement": self.advice_to_management,
                "jobTitle": self.job_title,
                "employmentStatus": self.employment_status,
                "location": self.location,
                "isCurrentEmployee": self.is_current_employee,
                "isAnonymous": self.is_anonymous,
            }
        )


@dataclass
class CompanyReviewResponse:
    review_id: int
    company_id: int
    overall_rating: int
    profile_id: int | None = None
    work_life_balance: int | None = None
    salary_benefits: int | None = None
    career_growth: int | None = None
    management: int | None = None
    culture: int | None = None
    review_title: str = ""
    pros: str = ""
    cons: str = ""
    advice_to_management: str = ""
    job_title: str = ""
    employment_status: str = ""
    location: str = ""
    is_current_employee: bool = False
    is_anonymous: bool = False
    is_approved: bool = False
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompanyReviewResponse:
        return cls(
            review_id=data["reviewId"],
            company_id=data["companyId"],
            overall_rating=int(data.get("overallRating", 0)),
            profile_id=data.get("profileId"),
            work_life_balance=data.get("workLifeBalance"),
            salary_benefits=data.get("salaryBenefits"),
            career_growth=data.get("careerGrowth"),
            management=data.get("management"),
            culture=data.get("culture"),
            review_title=data.get("reviewTitle") or "",
            pros=data.get("pros") or "",
            cons=data.get("cons") or "",
            advice_to_management=data.get("adviceToManagement") or "",
            job_title=data.get("jobTitle") or "",
            employment_status=data.get("employmentStatus") or "",
            location=data.get("location") or "",
            is_current_employee=bool(data.get("isCurrentEmployee", False)),
            is_anonymous=bool(data.get("isAnonymous", False)),
            is_approved=bool(data.get("isApproved", False)),
            created_at=data.get("createdAt", ""),
        )


# ---------------------------------------------------------------------------
# job service
# ---------------------------------------------------------------------------


class JobStatus(StrEnum):
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"
    PAUSED = "PAUSED"
    DELETED = "DELETED"


class ApplicationStatus(StrEnum):
    """応募ステータス。"""

    APPLIED = "APPLIED"
    SHORTLISTED = "SHORTLISTED"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    REJECTED = "REJECTED"
    HIRED = "HIRED"
    WITHDRAWN = "WITHDRAWN"


@dataclass
class Page(Generic[T]):
    """ページ付きレスポンス（0 始まりのページ番号）。"""

    content: list[T]
    total_elements: int = 0
    total_pages: int = 0
    size: int = 0
    number: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any], item: Callable[[dict[str, Any]], T]) -> Page[T]:
        return cls(
            content=[item(d) for d in data.get("content", [])],
            total_elements=int(data.get("totalElements", 0)),
            total_pages=int(data.get("totalPages", 0)),
            size=int(data.get("size", 0)),
            number=int(data.get("number", 0)),
        )


@dataclass
class JobSkillRequirement:
    skill_id: int
    importance: str = "REQUIRED"
    min_experience_years: int = 0
    skill_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "skillId": self.skill_id,
                "skillName": self.skill_name,
                "importance": self.importance,
                "minExperienceYears": self.min_experience_years,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobSkillRequirement:
        return cls(
            skill_id=data["skillId"],
            importance=data.get("importance", "REQUIRED"),
            min_experience_years=int(data.get("minExperienceYears", 0)),
            skill_name=data.get("skillName"),
        )


@dataclass
class JobRequest:
    """求人の作成・更新リクエスト。更新時は指定した項目のみ送る。"""

    job_title: str | None = None
    job_description: str | None = None
    job_requirements: str | None = None
    employment_type: str | None = None
    experience_level: str | None = None
    min_experience_years: int | None = None
    max_experience_years: int | None = None
    min_salary: float | None = None
    max_salary: float | None = None
    job_location: str | None = None
    is_remote: bool | None = None
    industry: str | None = None
    department: str | None = None
    number_of_openings: int | None = None
    application_deadline: str | None = None
    skills: list[JobSkillRequirement] | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "jobTitle": self.job_title,
                "jobDescription": self.job_description,
                "jobRequirements": self.job_requirements,
                "employmentType": self.employment_type,
                "experienceLevel": self.experience_level,
                "minExperienceYears": self.min_experience_years,
                "maxExperienceYears": self.max_experience_years,
                "minSalary": self.min_salary,
                "maxSalary": self.max_salary,
                "jobLocation": self.job_location,
                "isRemote": self.is_remote,
                "industry": self.industry,
                "department": self.department,
                "numberOfOpenings": self.number_of_openings,
                "applicationDeadline": self.application_deadline,
                "skills": (
                    [s.to_dict() for s in self.skills] if self.skills is not None else None
                ),
            }
        )


@dataclass
class JobResponse:
    """求人。"""

    job_id: int
    job_title: str
    employer_id: int | None = None
    company_name: str = ""
    job_description: str = ""
    employment_type: str = ""
    experience_level: str = ""
    min_salary: float | None = None
    max_salary: float | None = None
    job_location: str = ""
    is_remote: bool = False
    job_status: JobStatus = JobStatus.ACTIVE
    number_of_openings: int = 0
    applications_count: int = 0
    views_count: int = 0
    application_deadline: str = ""
    posted_at: str = ""
    skills: list[JobSkillRequirement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobResponse:
        return cls(
            job_id=data["jobId"],
            job_title=data.get("jobTitle", ""),
            employer_id=data.get("employerId"),
            company_name=data.get("companyName", ""),
            job_description=data.get("jobDescription", ""),
            employment_type=data.get("employmentType", ""),
            experience_level=data.get("experienceLevel", ""),
            min_salary=data.get("minSalary"),
            max_salary=data.get("maxSalary"),
            job_location=data.get("jobLocation", ""),
            is_remote=bool(data.get("isRemote", False)),
            job_status=JobStatus(data.get("jobStatus", "ACTIVE")),
            number_of_openings=int(data.get("numberOfOpenings", 0)),
            applications_count=int(data.get("applicationsCount", 0)),
            views_count=int(data.get("viewsCount", 0)),
            application_deadline=data.get("applicationDeadline", ""),
            posted_at=data.get("postedAt", ""),
            skills=[JobSkillRequirement.from_dict(s) for s in data.get("skills") or []],
        )


@dataclass
class JobSearchRequest:
    """求人検索条件。"""

    job_title: str | None = None
    location: str | None = None
    industry: str | None = None
    employment_type: str | None = None
    experience_level: str | None = None
    min_salary: float | None = None
    max_salary: float | None = None
    is_remote: bool | None = None
    company_name: str | None = None
    page: int = 0
    size: int = 10

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "jobTitle": self.job_title,
                "location": self.location,
                "industry": self.industry,
                "employmentType": self.employment_type,
                "experienceLevel": self.experience_level,
                "minSalary": self.min_salary,
                "maxSalary": self.max_salary,
                "isRemote": self.is_remote,
                "companyName": self.company_name,
                "page": self.page,
                "size": self.size,
            }
        )

    def cache_key(self) -> tuple[tuple[str, Any], ...]:
        """クエリキャッシュのキーに使える不変表現。"""
        return tuple(sorted(self.to_dict().items()))


@dataclass
class JobStatisticsResponse:
    active_jobs: int = 0
    closed_jobs: int = 0
    paused_jobs: int = 0
    total_jobs: int = 0
    total_views_last_30_days: int = 0
    total_applications_last_30_days: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobStatisticsResponse:
        return cls(
            active_jobs=int(data.get("activeJobs", 0)),
            closed_jobs=int(data.get("closedJobs", 0)),
            paused_jobs=int(data.get("pausedJobs", 0)),
            total_jobs=int(data.get("totalJobs", 0)),
            total_views_last_30_days=int(data.get("totalViewsLast30Days", 0)),
            total_applications_last_30_days=int(
                data.get("totalApplicationsLast30Days", 0)
            ),
        )


@dataclass
class ApplicationResponse:
    """求人への応募。"""

    application_id: int
    job_id: int
    application_status: ApplicationStatus
    job_title: str = ""
    profile_id: int | None = None
    candidate_name: str = ""
    company_name: str = ""
    cover_letter: str = ""
    applied_at: str = ""
    status_notes: str | None = None
    rating: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplicationResponse:
        return cls(
            application_id=data["applicationId"],
            job_id=data["jobId"],
            application_status=ApplicationStatus(data.get("applicationStatus", "APPLIED")),
            job_title=data.get("jobTitle", ""),
            profile_id=data.get("profileId"),
            candidate_name=data.get("candidateName", ""),
            company_name=data.get("companyName", ""),
            cover_letter=data.get("coverLetter") or "",
            applied_at=data.get("appliedAt", ""),
            status_notes=data.get("statusNotes"),
            rating=data.get("rating"),
        )


@dataclass
class UpdateApplicationStatusRequest:
    status: ApplicationStatus
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"status": str(self.status), "notes": self.notes})


@dataclass
class RateCandidateRequest:
    rating: int
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({"rating": self.rating, "notes": self.notes})


@dataclass
class ApplicationStatisticsResponse:
    """応募件数のステータス別集計（求職者・採用担当者共通）。"""

    total_applications: int = 0
    applied_count: int = 0
    shortlisted_count: int = 0
    interview_scheduled_count: int = 0
    rejected_count: int = 0
    hired_count: int = 0
    withdrawn_count: int = 0
    status_breakdown: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplicationStatisticsResponse:
        return cls(
            total_applications=int(data.get("totalApplications", 0)),
            applied_count=int(data.get("appliedCount", 0)),
            shortlisted_count=int(data.get("shortlistedCount", 0)),
            interview_scheduled_count=int(data.get("interviewScheduledCount", 0)),
            rejected_count=int(data.get("rejectedCount", 0)),
            hired_count=int(data.get("hiredCount", 0)),
            withdrawn_count=int(data.get("withdrawnCount", 0)),
            status_breakdown={
                k: int(v) for k, v in (data.get("statusBreakdown") or {}).items()
            },
        )


# ---------------------------------------------------------------------------
# interviews
# ---------------------------------------------------------------------------


class InterviewStatus(StrEnum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    RESCHEDULED = "RESCHEDULED"


@dataclass
class ScheduleInterviewRequest:
    interview_type: str
    scheduled_datetime: str
    location_or_link: str
    interviewer_details: str
    instructions: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "interviewType": self.interview_type,
                "scheduledDatetime": self.scheduled_datetime,
                "locationOrLink": self.location_or_link,
                "interviewerDetails": self.interviewer_details,
                "instructions": self.instructions,
            }
        )


@dataclass
class UpdateInterviewRequest:
    scheduled_datetime: str | None = None
    location_or_link: str | None = None
    interviewer_details: str | None = None
    instructions: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "scheduledDatetime": self.scheduled_datetime,
                "locationOrLink": self.location_or_link,
                "interviewerDetails": self.interviewer_details,
                "instructions": self.instructions,
            }
        )


@dataclass
class InterviewResponse:
    """面接。"""

    interview_id: int
    application_id: int
    status: InterviewStatus
    job_id: int | None = None
    job_title: str = ""
    candidate_name: str = ""
    employer_id: int | None = None
    interview_type: str = ""
    scheduled_datetime: str = ""
    location_or_link: str = ""
    interviewer_details: str = ""
    instructions: str = ""
    created_at: str = ""
    feedback: str | None = None
    rating: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InterviewResponse:
        return cls(
            interview_id=data["interviewId"],
            application_id=data["applicationId"],
            status=InterviewStatus(data.get("status", "SCHEDULED")),
            job_id=data.get("jobId"),
            job_title=data.get("jobTitle", ""),
            candidate_name=data.get("candidateName", ""),
            employer_id=data.get("employerId"),
            interview_type=data.get("interviewType", ""),
            scheduled_datetime=data.get("scheduledDatetime", ""),
            location_or_link=data.get("locationOrLink") or "",
            interviewer_details=data.get("interviewerDetails") or "",
            instructions=data.get("instructions") or "",
            created_at=data.get("createdAt", ""),
            feedback=data.get("feedback"),
            rating=data.get("rating"),
        )


# ---------------------------------------------------------------------------
# job alerts
# ---------------------------------------------------------------------------


class AlertFrequency(StrEnum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    INSTANT = "INSTANT"


@dataclass
class JobAlertRequest:
    """求人アラートの作成・更新リクエスト。作成時は alert_name と frequency が必須。"""

    alert_name: str | None = None
    frequency: AlertFrequency | None = None
    keywords: str | None = None
    location: str | None = None
    industry: str | None = None
    employment_type: str | None = None
    min_salary: float | None = None
    max_salary: float | None = None
    experience_level: str | None = None
    is_remote: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "alertName": self.alert_name,
                "frequency": str(self.frequency) if self.frequency else None,
                "keywords": self.keywords,
                "location": self.location,
                "industry": self.industry,
                "employmentType": self.employment_type,
                "minSalary": self.min_salary,
                "maxSalary": self.max_salary,
                "experienceLevel": self.experience_level,
                "isRemote": self.is_remote,
            }
        )


@dataclass
class JobAlertResponse:
    alert_id: int
    alert_name: str
    frequency: AlertFrequency
    is_active: bool = True
    profile_id: int | None = None
    keywords: str = ""
    location: str = ""
    industry: str = ""
    employment_type: str = ""
    min_salary: float | None = None
    max_salary: float | None = None
    experience_level: str = ""
    is_remote: bool = False
    created_at: str = ""
    last_sent: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobAlertResponse:
        return cls(
            alert_id=data["alertId"],
            alert_name=data.get("alertName", ""),
            frequency=AlertFrequency(data.get("frequency", "DAILY")),
            is_active=bool(data.get("isActive", True)),
            profile_id=data.get("profileId"),
            keywords=data.get("keywords") or "",
            location=data.get("location") or "",
            industry=data.get("industry") or "",
            employment_type=data.get("employmentType") or "",
            min_salary=data.get("minSalary"),
            max_salary=data.get("maxSalary"),
            experience_level=data.get("experienceLevel") or "",
            is_remote=bool(data.get("isRemote", False)),
            created_at=data.get("createdAt", ""),
            last_sent=data.get("lastSent"),
        )


# ---------------------------------------------------------------------------
# messaging / notifications
# ---------------------------------------------------------------------------


@dataclass
class MessageThreadResponse:
    """応募ごとの採用担当者と候補者のやり取り。"""

    thread_id: int
    job_id: int | None = None
    job_title: str = ""
    candidate_id: int | None = None
    candidate_name: str = ""
    employer_id: int | None = None
    employer_name: str = ""
    last_message: str = ""
    last_message_time: str = ""
    unread_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageThreadResponse:
        return cls(
            thread_id=data["threadId"],
            job_id=data.get("jobId"),
            job_title=data.get("jobTitle", ""),
            candidate_id=data.get("candidateId"),
            candidate_name=data.get("candidateName", ""),
            employer_id=data.get("employerId"),
            employer_name=data.get("employerName", ""),
            last_message=data.get("lastMessage") or "",
            last_message_time=data.get("lastMessageTime") or "",
            unread_count=int(data.get("unreadCount", 0)),
        )


@dataclass
class MessageResponse:
    message_id: int
    thread_id: int
    message_text: str
    sender_id: int | None = None
    sender_name: str = ""
    receiver_id: int | None = None
    sent_at: str = ""
    is_read: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageResponse:
        return cls(
            message_id=data["messageId"],
            thread_id=data["threadId"],
            message_text=data.get("messageText", ""),
            sender_id=data.get("senderId"),
            sender_name=data.get("senderName", ""),
            receiver_id=data.get("receiverId"),
            sent_at=data.get("sentAt", ""),
            is_read=bool(data.get("isRead", False)),
        )


@dataclass
class NotificationResponse:
    notification_id: int
    title: str
    message: str
    type: str = ""
    user_id: int | None = None
    related_entity_id: int | None = None
    is_read: bool = False
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NotificationResponse:
        return cls(
            notification_id=data["notificationId"],
            title=data.get("title", ""),
            message=data.get("message", ""),
            type=data.get("type", ""),
            user_id=data.get("userId"),
            related_entity_id=data.get("relatedEntityId"),
            is_read=bool(data.get("isRead", False)),
            created_at=data.get("createdAt", ""),
        )
