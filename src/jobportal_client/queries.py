"""サービス呼び出しをクエリキーとミューテーションに束ねるファサード"""

from __future__ import annotations

from typing import Any

from .job_service import JobService
from .models import (
    AddSkillRequest,
    ApplicationResponse,
    ApplicationStatisticsResponse,
    ApplicationStatus,
    AuthResponse,
    ChangePasswordRequest,
    CompanyRequest,
    CompanyResponse,
    CompanyReviewRequest,
    CompanyReviewResponse,
    DeactivateAccountRequest,
    EducationRequest,
    EducationResponse,
    EmployerProfileRequest,
    EmployerProfileResponse,
    InterviewResponse,
    InterviewStatus,
    JobAlertRequest,
    JobAlertResponse,
    JobRequest,
    JobResponse,
    JobSearchRequest,
    JobseekerProfileRequest,
    JobseekerProfileResponse,
    JobStatisticsResponse,
    LoginHistoryResponse,
    MasterSkill,
    MessageResponse,
    MessageThreadResponse,
    NotificationResponse,
    OtpRequest,
    Page,
    ProfileCompletionResponse,
    ProfileSummaryResponse,
    RateCandidateRequest,
    ScheduleInterviewRequest,
    SkillResponse,
    UpdateApplicationStatusRequest,
    UpdateInterviewRequest,
    UpdateSkillRequest,
    UpdateUserRequest,
    UserResponse,
    WorkExperienceRequest,
    WorkExperienceResponse,
)
from .profile_service import ProfileService
from .query_cache import Mutation, QueryClient
from .token_store import TokenStore
from .user_service import UserService

# stale_time（秒）
CURRENT_USER_STALE_TIME = 5 * 60
LOGIN_HISTORY_STALE_TIME = 10 * 60
HEALTH_STALE_TIME = 30
UNREAD_COUNT_STALE_TIME = 60


class QueryKeys:
    """クエリキーの定数。パラメータ付きのキーはこの接頭辞にパラメータを連結する。"""

    CURRENT_USER = ("current-user",)
    LOGIN_HISTORY = ("login-history",)
    USER_SERVICE_HEALTH = ("user-service-health",)

    MY_JOBSEEKER_PROFILE = ("my-jobseeker-profile",)
    JOBSEEKER_PROFILE = ("jobseeker-profile",)
    JOBSEEKER_PROFILE_EXISTS = ("jobseeker-profile-exists",)
    PROFILE_COMPLETION = ("profile-completion",)
    PROFILE_SUMMARY = ("profile-summary",)
    SKILLS_CATALOG = ("skills-catalog",)
    SKILL = ("skill",)
    MY_SKILLS = ("my-skills",)
    MY_EDUCATION = ("my-education",)
    MY_WORK_EXPERIENCE = ("my-work-experience",)

    MY_EMPLOYER_PROFILE = ("my-employer-profile",)
    EMPLOYER_PROFILE = ("employer-profile",)
    EMPLOYER_PROFILE_EXISTS = ("employer-profile-exists",)
    COMPANIES = ("companies",)
    COMPANY = ("company",)
    COMPANIES_SEARCH = ("companies-search",)
    MY_COMPANIES = ("my-companies",)
    COMPANY_REVIEWS = ("company-reviews",)
    MY_REVIEWS = ("my-reviews",)

    JOB = ("job",)
    MY_JOBS = ("my-jobs",)
    JOBS_SEARCH = ("jobs-search",)
    JOB_STATISTICS = ("job-statistics",)
    MY_APPLICATIONS = ("my-applications",)
    APPLICATION = ("application",)
    HAS_APPLIED = ("has-applied",)
    JOB_APPLICATIONS = ("job-applications",)
    ALL_APPLICATIONS = ("all-applications",)
    APPLICATION_STATS = ("application-stats",)

    SAVED_JOBS = ("saved-jobs",)
    IS_JOB_SAVED = ("is-job-saved",)
    SAVED_JOBS_COUNT = ("saved-jobs-count",)

    # 面接の一覧はすべて INTERVIEWS の下に置き、まとめて無効化できるようにする
    INTERVIEW = ("interview",)
    INTERVIEWS = ("interviews",)

    MY_JOB_ALERTS = ("my-job-alerts",)
    MATCHING_JOBS = ("matching-jobs",)

    MESSAGE_THREADS = ("message-threads",)
    THREAD_MESSAGES = ("thread-messages",)
    UNREAD_MESSAGES = ("unread-messages",)
    NOTIFICATIONS = ("notifications",)
    UNREAD_NOTIFICATIONS = ("unread-notifications",)


def _job_keys(job_id: int, *_: Any) -> tuple[tuple[Any, ...], ...]:
    return (QueryKeys.JOB + (job_id,), QueryKeys.MY_JOBS)


def _section_keys(
    key: tuple[Any, ...], completion: bool = False
) -> tuple[tuple[Any, ...], ...]:
    """プロフィールの 1 区分を変更したときの無効化対象。件数が変わる場合は完成度も含める。"""
    keys = (key, QueryKeys.PROFILE_SUMMARY)
    return keys + (QueryKeys.PROFILE_COMPLETION,) if completion else keys


def _company_keys(company_id: int, *_: Any) -> tuple[tuple[Any, ...], ...]:
    return (
        QueryKeys.COMPANY + (company_id,),
        QueryKeys.COMPANIES,
        QueryKeys.COMPANIES_SEARCH,
        QueryKeys.MY_COMPANIES,
    )


def _saved_job_keys(job_id: int) -> tuple[tuple[Any, ...], ...]:
    return (
        QueryKeys.SAVED_JOBS,
        QueryKeys.IS_JOB_SAVED + (job_id,),
        QueryKeys.SAVED_JOBS_COUNT,
    )


def _interview_keys(interview_id: int, *_: Any) -> tuple[tuple[Any, ...], ...]:
    return (QueryKeys.INTERVIEW + (interview_id,), QueryKeys.INTERVIEWS)


def _job_alert_keys(alert_id: int, *_: Any) -> tuple[tuple[Any, ...], ...]:
    return (QueryKeys.MY_JOB_ALERTS, QueryKeys.MATCHING_JOBS + (alert_id,))


class JobPortalQueries:
    """読み取りはキャッシュ経由、書き込みは無効化対象を宣言したミューテーション経由で呼ぶ。"""

    def __init__(
        self,
        users: UserService,
        profiles: ProfileService,
        jobs: JobService,
        query_client: QueryClient,
        token_store: TokenStore,
    ) -> None:
        self._users = users
        self._profiles = profiles
        self._jobs = jobs
        self._query_client = query_client
        self._token_store = token_store

        self.verify_registration_otp_mutation = Mutation(
            users.verify_registration_otp,
            invalidates=(QueryKeys.CURRENT_USER,),
            on_success=self._store_session,
        )
        self.verify_login_otp_mutation = Mutation(
            users.verify_login_otp,
            invalidates=(QueryKeys.CURRENT_USER,),
            on_success=self._store_session,
        )
        self.update_current_user_mutation = Mutation(
            users.update_current_user,
            on_success=self._put_current_user,
        )
        self.verify_updated_phone_mutation = Mutation(
            users.verify_updated_phone,
            on_success=self._put_current_user,
        )
        self.deactivate_account_mutation = Mutation(
            users.deactivate_account,
            on_success=self._drop_session,
        )

        self.create_profile_mutation = Mutation(
            profiles.create_jobseeker_profile,
            invalidates=(QueryKeys.MY_JOBSEEKER_PROFILE, QueryKeys.JOBSEEKER_PROFILE_EXISTS),
        )
        self.update_profile_mutation = Mutation(
            profiles.update_my_jobseeker_profile,
            invalidates=(
                QueryKeys.MY_JOBSEEKER_PROFILE,
                QueryKeys.PROFILE_COMPLETION,
                QueryKeys.PROFILE_SUMMARY,
            ),
        )
        self.delete_profile_mutation = Mutation(
            profiles.delete_my_jobseeker_profile,
            invalidates=(
                QueryKeys.MY_JOBSEEKER_PROFILE,
                QueryKeys.JOBSEEKER_PROFILE_EXISTS,
                QueryKeys.PROFILE_SUMMARY,
            ),
        )
        self.add_skill_mutation = Mutation(
            profiles.add_skill,
            invalidates=_section_keys(QueryKeys.MY_SKILLS, completion=True),
        )
        self.update_skill_mutation = Mutation(
            profiles.update_skill,
            invalidates=_section_keys(QueryKeys.MY_SKILLS),
        )
        self.remove_skill_mutation = Mutation(
            profiles.remove_skill,
            invalidates=_section_keys(QueryKeys.MY_SKILLS, completion=True),
        )
        self.add_education_mutation = Mutation(
            profiles.add_education,
            invalidates=_section_keys(QueryKeys.MY_EDUCATION, completion=True),
        )
        self.update_education_mutation = Mutation(
            profiles.update_education,
            invalidates=_section_keys(QueryKeys.MY_EDUCATION),
        )
        self.delete_education_mutation = Mutation(
            profiles.delete_education,
            invalidates=_section_keys(QueryKeys.MY_EDUCATION),
        )
        self.add_work_experience_mutation = Mutation(
            profiles.add_work_experience,
            invalidates=_section_keys(QueryKeys.MY_WORK_EXPERIENCE, completion=True),
        )
        self.update_work_experience_mutation = Mutation(
            profiles.update_work_experience,
            invalidates=_section_keys(QueryKeys.MY_WORK_EXPERIENCE),
        )
        self.delete_work_experience_mutation = Mutation(
            profiles.delete_work_experience,
            invalidates=_section_keys(QueryKeys.MY_WORK_EXPERIENCE),
        )

        self.create_employer_profile_mutation = Mutation(
            profiles.create_employer_profile,
            invalidates=(QueryKeys.MY_EMPLOYER_PROFILE, QueryKeys.EMPLOYER_PROFILE_EXISTS),
        )
        self.update_employer_profile_mutation = Mutation(
            profiles.update_my_employer_profile,
            invalidates=(QueryKeys.MY_EMPLOYER_PROFILE, QueryKeys.EMPLOYER_PROFILE),
        )
        self.delete_employer_profile_mutation = Mutation(
            profiles.delete_my_employer_profile,
            invalidates=(
                QueryKeys.MY_EMPLOYER_PROFILE,
                QueryKeys.EMPLOYER_PROFILE,
                QueryKeys.EMPLOYER_PROFILE_EXISTS,
            ),
        )
        self.create_company_mutation = Mutation(
            profiles.create_company,
            invalidates=(QueryKeys.COMPANIES, QueryKeys.MY_COMPANIES),
        )
        self.update_company_mutation = Mutation(profiles.update_company, invalidates=_company_keys)
        self.delete_company_mutation = Mutation(profiles.delete_company, invalidates=_company_keys)
        self.submit_review_mutation = Mutation(
            profiles.submit_review,
            invalidates=lambda company_id, *_: (
                QueryKeys.COMPANY_REVIEWS + (company_id,),
                QueryKeys.COMPANY + (company_id,),
                QueryKeys.MY_REVIEWS,
            ),
        )
        self.update_review_mutation = Mutation(
            profiles.update_review,
            invalidates=(QueryKeys.COMPANY_REVIEWS, QueryKeys.MY_REVIEWS),
        )
        self.delete_review_mutation = Mutation(
            profiles.delete_review,
            invalidates=(QueryKeys.COMPANY_REVIEWS, QueryKeys.MY_REVIEWS),
        )
        self.approve_review_mutation = Mutation(
            profiles.approve_review,
            invalidates=(QueryKeys.COMPANY_REVIEWS, QueryKeys.COMPANY),
        )
        self.reject_review_mutation = Mutation(
            profiles.reject_review,
            invalidates=(QueryKeys.COMPANY_REVIEWS,),
        )

        self.create_job_mutation = Mutation(
            jobs.create_job,
            invalidates=(QueryKeys.MY_JOBS,),
        )
        self.update_job_mutation = Mutation(
            jobs.update_job,
            invalidates=_job_keys,
        )
        self.delete_job_mutation = Mutation(
            jobs.delete_job,
            invalidates=_job_keys,
        )
        self.close_job_mutation = Mutation(jobs.close_job, invalidates=_job_keys)
        self.pause_job_mutation = Mutation(jobs.pause_job, invalidates=_job_keys)
        self.reopen_job_mutation = Mutation(jobs.reopen_job, invalidates=_job_keys)
        self.apply_to_job_mutation = Mutation(
            jobs.apply_to_job,
            invalidates=lambda job_id, *_: (
                QueryKeys.MY_APPLICATIONS,
                QueryKeys.HAS_APPLIED + (job_id,),
                QueryKeys.APPLICATION_STATS,
            ),
        )
        self.update_application_status_mutation = Mutation(
            jobs.update_application_status,
            invalidates=lambda application_id, *_: (
                QueryKeys.APPLICATION + (application_id,),
                QueryKeys.MY_APPLICATIONS,
                QueryKeys.JOB_APPLICATIONS,
                QueryKeys.ALL_APPLICATIONS,
                QueryKeys.APPLICATION_STATS,
            ),
        )
        self.rate_candidate_mutation = Mutation(
            jobs.rate_candidate,
            invalidates=lambda application_id, *_: (
                QueryKeys.APPLICATION + (application_id,),
                QueryKeys.JOB_APPLICATIONS,
                QueryKeys.ALL_APPLICATIONS,
            ),
        )
        self.withdraw_application_mutation = Mutation(
            jobs.withdraw_application,
            invalidates=lambda application_id: (
                QueryKeys.APPLICATION + (application_id,),
                QueryKeys.MY_APPLICATIONS,
                QueryKeys.HAS_APPLIED,
                QueryKeys.APPLICATION_STATS,
            ),
        )

        self.save_job_mutation = Mutation(jobs.save_job, invalidates=_saved_job_keys)
        self.unsave_job_mutation = Mutation(jobs.unsave_job, invalidates=_saved_job_keys)
        self.clear_saved_jobs_mutation = Mutation(
            jobs.clear_saved_jobs,
            invalidates=(QueryKeys.SAVED_JOBS, QueryKeys.IS_JOB_SAVED, QueryKeys.SAVED_JOBS_COUNT),
        )

        self.schedule_interview_mutation = Mutation(
            jobs.schedule_interview,
            invalidates=lambda application_id, *_: (
                QueryKeys.INTERVIEWS,
                QueryKeys.APPLICATION + (application_id,),
                QueryKeys.JOB_APPLICATIONS,
                QueryKeys.ALL_APPLICATIONS,
            ),
        )
        self.update_interview_mutation = Mutation(
            jobs.update_interview, invalidates=_interview_keys
        )
        self.cancel_interview_mutation = Mutation(
            jobs.cancel_interview, invalidates=_interview_keys
        )
        self.reschedule_interview_mutation = Mutation(
            jobs.reschedule_interview, invalidates=_interview_keys
        )
        self.submit_interview_feedback_mutation = Mutation(
            jobs.submit_interview_feedback, invalidates=_interview_keys
        )

        self.create_job_alert_mutation = Mutation(
            jobs.create_job_alert,
            invalidates=(QueryKeys.MY_JOB_ALERTS,),
        )
        self.update_job_alert_mutation = Mutation(
            jobs.update_job_alert, invalidates=_job_alert_keys
        )
        self.delete_job_alert_mutation = Mutation(
            jobs.delete_job_alert, invalidates=_job_alert_keys
        )
        self.toggle_job_alert_mutation = Mutation(
            jobs.toggle_job_alert,
            invalidates=(QueryKeys.MY_JOB_ALERTS,),
        )

        self.send_message_mutation = Mutation(
            jobs.send_message,
            invalidates=lambda thread_id, *_: (
                QueryKeys.THREAD_MESSAGES + (thread_id,),
                QueryKeys.MESSAGE_THREADS,
            ),
        )
        self.mark_message_read_mutation = Mutation(
            jobs.mark_message_read,
            invalidates=(
                QueryKeys.THREAD_MESSAGES,
                QueryKeys.MESSAGE_THREADS,
                QueryKeys.UNREAD_MESSAGES,
            ),
        )
        self.mark_notification_read_mutation = Mutation(
            jobs.mark_notification_read,
            invalidates=(QueryKeys.NOTIFICATIONS, QueryKeys.UNREAD_NOTIFICATIONS),
        )
        self.mark_all_notifications_read_mutation = Mutation(
            jobs.mark_all_notifications_read,
            invalidates=(QueryKeys.NOTIFICATIONS, QueryKeys.UNREAD_NOTIFICATIONS),
        )
        self.delete_notification_mutation = Mutation(
            jobs.delete_notification,
            invalidates=(QueryKeys.NOTIFICATIONS, QueryKeys.UNREAD_NOTIFICATIONS),
        )

    @property
    def query_client(self) -> QueryClient:
        return self._query_client

    # ミューテーションの成功時処理

    def _store_session(self, auth: AuthResponse, *_: Any) -> None:
        self._token_store.set(auth.token, auth.user_id)

    def _put_current_user(self, user: UserResponse, *_: Any) -> None:
        self._query_client.set_query_data(QueryKeys.CURRENT_USER, user)

    def _drop_session(self, *_: Any) -> None:
        self._token_store.remove()
        self._query_client.clear()

    # ユーザー

    async def current_user(self) -> UserResponse:
        return await self._query_client.fetch_query(
            QueryKeys.CURRENT_USER,
            self._users.get_current_user,
            stale_time=CURRENT_USER_STALE_TIME,
        )

    async def login_history(self, limit: int = 10) -> list[LoginHistoryResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.LOGIN_HISTORY + (limit,),
            lambda: self._users.get_login_history(limit),
            stale_time=LOGIN_HISTORY_STALE_TIME,
        )

    async def user_service_health(self) -> Any:
        return await self._query_client.fetch_query(
            QueryKeys.USER_SERVICE_HEALTH,
            self._users.check_health,
            stale_time=HEALTH_STALE_TIME,
        )

    async def verify_registration_otp(self, request: OtpRequest) -> AuthResponse:
        """登録 OTP を検証し、成功したらセッショントークンを保存する。"""
        return await self._query_client.mutate(self.verify_registration_otp_mutation, request)

    async def verify_login_otp(self, request: OtpRequest) -> AuthResponse:
        """ログイン OTP を検証し、成功したらセッショントークンを保存する。"""
        return await self._query_client.mutate(self.verify_login_otp_mutation, request)

    async def update_current_user(self, request: UpdateUserRequest) -> UserResponse:
        return await self._query_client.mutate(self.update_current_user_mutation, request)

    async def verify_updated_phone(self, otp: str) -> UserResponse:
        return await self._query_client.mutate(self.verify_updated_phone_mutation, otp)

    async def change_password(self, request: ChangePasswordRequest) -> str:
        return await self._users.change_password(request)

    async def deactivate_account(self, request: DeactivateAccountRequest) -> str:
        """アカウントを無効化し、トークンとキャッシュをすべて破棄する。"""
        return await self._query_client.mutate(self.deactivate_account_mutation, request)

    # プロフィール

    async def my_jobseeker_profile(self) -> JobseekerProfileResponse:
        return await self._query_client.fetch_query(
            QueryKeys.MY_JOBSEEKER_PROFILE, self._profiles.get_my_jobseeker_profile
        )

    async def jobseeker_profile(self, profile_id: int) -> JobseekerProfileResponse:
        return await self._query_client.fetch_query(
            QueryKeys.JOBSEEKER_PROFILE + (profile_id,),
            lambda: self._profiles.get_jobseeker_profile(profile_id),
        )

    async def jobseeker_profile_exists(self) -> bool:
        return await self._query_client.fetch_query(
            QueryKeys.JOBSEEKER_PROFILE_EXISTS, self._profiles.jobseeker_profile_exists
        )

    async def profile_completion(self) -> ProfileCompletionResponse:
        return await self._query_client.fetch_query(
            QueryKeys.PROFILE_COMPLETION, self._profiles.get_profile_completion
        )

    async def profile_summary(self) -> ProfileSummaryResponse:
        return await self._query_client.fetch_query(
            QueryKeys.PROFILE_SUMMARY, self._profiles.get_profile_summary
        )

    async def create_jobseeker_profile(
        self, request: JobseekerProfileRequest
    ) -> JobseekerProfileResponse:
        return await self._query_client.mutate(self.create_profile_mutation, request)

    async def update_my_jobseeker_profile(
        self, request: JobseekerProfileRequest
    ) -> JobseekerProfileResponse:
        return await self._query_client.mutate(self.update_profile_mutation, request)

    async def delete_my_jobseeker_profile(self) -> None:
        await self._query_client.mutate(self.delete_profile_mutation)

    # スキル

    async def skills_catalog(self, page: int = 0, size: int = 50) -> list[MasterSkill]:
        return await self._query_client.fetch_query(
            QueryKeys.SKILLS_CATALOG + (page, size),
            lambda: self._profiles.get_skills_catalog(page, size),
        )

    async def skill(self, skill_id: int) -> MasterSkill:
        return await self._query_client.fetch_query(
            QueryKeys.SKILL + (skill_id,),
            lambda: self._profiles.get_skill(skill_id),
        )

    async def my_skills(self) -> list[SkillResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_SKILLS, self._profiles.get_my_skills
        )

    async def add_skill(self, request: AddSkillRequest) -> SkillResponse:
        return await self._query_client.mutate(self.add_skill_mutation, request)

    async def update_skill(self, id: int, request: UpdateSkillRequest) -> SkillResponse:
        return await self._query_client.mutate(self.update_skill_mutation, id, request)

    async def remove_skill(self, id: int) -> None:
        await self._query_client.mutate(self.remove_skill_mutation, id)

    # 学歴・職歴

    async def my_education(self) -> list[EducationResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_EDUCATION, self._profiles.get_my_education
        )

    async def add_education(self, request: EducationRequest) -> EducationResponse:
        return await self._query_client.mutate(self.add_education_mutation, request)

    async def update_education(
        self, education_id: int, request: EducationRequest
    ) -> EducationResponse:
        return await self._query_client.mutate(
            self.update_education_mutation, education_id, request
        )

    async def delete_education(self, education_id: int) -> None:
        await self._query_client.mutate(self.delete_education_mutation, education_id)

    async def my_work_experience(self) -> list[WorkExperienceResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_WORK_EXPERIENCE, self._profiles.get_my_work_experience
        )

    async def add_work_experience(
        self, request: WorkExperienceRequest
    ) -> WorkExperienceResponse:
        return await self._query_client.mutate(self.add_work_experience_mutation, request)

    async def update_work_experience(
        self, experience_id: int, request: WorkExperienceRequest
    ) -> WorkExperienceResponse:
        return await self._query_client.mutate(
            self.update_work_experience_mutation, experience_id, request
        )

    async def delete_work_experience(self, experience_id: int) -> None:
        await self._query_client.mutate(self.delete_work_experience_mutation, experience_id)

    # 採用担当者プロフィール

    async def my_employer_profile(self) -> EmployerProfileResponse:
        return await self._query_client.fetch_query(
            QueryKeys.MY_EMPLOYER_PROFILE, self._profiles.get_my_employer_profile
        )

    async def employer_profile(self, employer_id: int) -> EmployerProfileResponse:
        return await self._query_client.fetch_query(
            QueryKeys.EMPLOYER_PROFILE + (employer_id,),
            lambda: self._profiles.get_employer_profile(employer_id),
        )

    async def employer_profile_exists(self) -> bool:
        return await self._query_client.fetch_query(
            QueryKeys.EMPLOYER_PROFILE_EXISTS, self._profiles.employer_profile_exists
        )

    async def create_employer_profile(
        self, request: EmployerProfileRequest
    ) -> EmployerProfileResponse:
        return await self._query_client.mutate(self.create_employer_profile_mutation, request)

    async def update_my_employer_profile(
        self, request: EmployerProfileRequest
    ) -> EmployerProfileResponse:
        return await self._query_client.mutate(self.update_employer_profile_mutation, request)

    async def delete_my_employer_profile(self) -> None:
        await self._query_client.mutate(self.delete_employer_profile_mutation)

    # 企業・レビュー

    async def companies(self, page: int = 0, size: int = 10) -> Page[CompanyResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.COMPANIES + (page, size),
            lambda: self._profiles.get_companies(page, size),
        )

    async def company(self, company_id: int) -> CompanyResponse:
        return await self._query_client.fetch_query(
            QueryKeys.COMPANY + (company_id,),
            lambda: self._profiles.get_company(company_id),
        )

    async def search_companies(self, name: str) -> list[CompanyResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.COMPANIES_SEARCH + (name,),
            lambda: self._profiles.search_companies(name),
        )

    async def my_companies(self) -> list[CompanyResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_COMPANIES, self._profiles.get_my_companies
        )

    async def create_company(self, request: CompanyRequest) -> CompanyResponse:
        return await self._query_client.mutate(self.create_company_mutation, request)

    async def update_company(self, company_id: int, request: CompanyRequest) -> CompanyResponse:
        return await self._query_client.mutate(
            self.update_company_mutation, company_id, request
        )

    async def delete_company(self, company_id: int) -> None:
        await self._query_client.mutate(self.delete_company_mutation, company_id)

    async def company_reviews(
        self, company_id: int, only_approved: bool = True
    ) -> list[CompanyReviewResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.COMPANY_REVIEWS + (company_id, only_approved),
            lambda: self._profiles.get_company_reviews(company_id, only_approved),
        )

    async def my_reviews(self) -> list[CompanyReviewResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_REVIEWS, self._profiles.get_my_reviews
        )

    async def submit_review(
        self, company_id: int, request: CompanyReviewRequest
    ) -> CompanyReviewResponse:
        return await self._query_client.mutate(
            self.submit_review_mutation, company_id, request
        )

    async def update_review(
        self, review_id: int, request: CompanyReviewRequest
    ) -> CompanyReviewResponse:
        return await self._query_client.mutate(self.update_review_mutation, review_id, request)

    async def delete_review(self, review_id: int) -> None:
        await self._query_client.mutate(self.delete_review_mutation, review_id)

    async def approve_review(self, review_id: int) -> CompanyReviewResponse:
        """レビューを承認する（管理者のみ）。"""
        return await self._query_client.mutate(self.approve_review_mutation, review_id)

    async def reject_review(self, review_id: int) -> CompanyReviewResponse:
        return await self._query_client.mutate(self.reject_review_mutation, review_id)

    # 求人

    async def job(self, job_id: int) -> JobResponse:
        return await self._query_client.fetch_query(
            QueryKeys.JOB + (job_id,), lambda: self._jobs.get_job(job_id)
        )

    async def my_jobs(self, page: int = 0, size: int = 10) -> Page[JobResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_JOBS + (page, size),
            lambda: self._jobs.get_my_jobs(page, size),
        )

    async def search_jobs(self, criteria: JobSearchRequest) -> Page[JobResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.JOBS_SEARCH + (criteria.cache_key(),),
            lambda: self._jobs.search_jobs(criteria),
        )

    async def job_statistics(self) -> JobStatisticsResponse:
        return await self._query_client.fetch_query(
            QueryKeys.JOB_STATISTICS, self._jobs.get_job_statistics
        )

    async def create_job(self, request: JobRequest) -> JobResponse:
        return await self._query_client.mutate(self.create_job_mutation, request)

    async def update_job(self, job_id: int, request: JobRequest) -> JobResponse:
        return await self._query_client.mutate(self.update_job_mutation, job_id, request)

    async def delete_job(self, job_id: int) -> None:
        await self._query_client.mutate(self.delete_job_mutation, job_id)

    async def close_job(self, job_id: int) -> JobResponse:
        return await self._query_client.mutate(self.close_job_mutation, job_id)

    async def pause_job(self, job_id: int) -> JobResponse:
        return await self._query_client.mutate(self.pause_job_mutation, job_id)

    async def reopen_job(self, job_id: int) -> JobResponse:
        return await self._query_client.mutate(self.reopen_job_mutation, job_id)

    # 応募

    async def has_applied(self, job_id: int) -> bool:
        return await self._query_client.fetch_query(
            QueryKeys.HAS_APPLIED + (job_id,), lambda: self._jobs.has_applied(job_id)
        )

    async def my_applications(
        self,
        page: int = 0,
        size: int = 10,
        status: ApplicationStatus | None = None,
    ) -> Page[ApplicationResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_APPLICATIONS + (page, size, str(status) if status else None),
            lambda: self._jobs.get_my_applications(page, size, status),
        )

    async def application(self, application_id: int) -> ApplicationResponse:
        return await self._query_client.fetch_query(
            QueryKeys.APPLICATION + (application_id,),
            lambda: self._jobs.get_application(application_id),
        )

    async def apply_to_job(self, job_id: int, cover_letter: str) -> ApplicationResponse:
        return await self._query_client.mutate(
            self.apply_to_job_mutation, job_id, cover_letter
        )

    async def update_application_status(
        self, application_id: int, request: UpdateApplicationStatusRequest
    ) -> ApplicationResponse:
        return await self._query_client.mutate(
            self.update_application_status_mutation, application_id, request
        )

    async def withdraw_application(self, application_id: int) -> None:
        await self._query_client.mutate(self.withdraw_application_mutation, application_id)

    async def job_applications(
        self,
        job_id: int,
        page: int = 0,
        size: int = 10,
        status: ApplicationStatus | None = None,
    ) -> Page[ApplicationResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.JOB_APPLICATIONS + (job_id, page, size, str(status) if status else None),
            lambda: self._jobs.get_job_applications(job_id, page, size, status),
        )

    async def all_employer_applications(
        self, page: int = 0, size: int = 10
    ) -> Page[ApplicationResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.ALL_APPLICATIONS + (page, size),
            lambda: self._jobs.get_all_employer_applications(page, size),
        )

    async def application_statistics(self, audience: str) -> ApplicationStatisticsResponse:
        return await self._query_client.fetch_query(
            QueryKeys.APPLICATION_STATS + (audience,),
            lambda: self._jobs.get_application_statistics(audience),
        )

    async def rate_candidate(
        self, application_id: int, request: RateCandidateRequest
    ) -> ApplicationResponse:
        return await self._query_client.mutate(
            self.rate_candidate_mutation, application_id, request
        )

    # 保存済み求人

    async def saved_jobs(self, page: int = 0, size: int = 10) -> Page[JobResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.SAVED_JOBS + (page, size),
            lambda: self._jobs.get_saved_jobs(page, size),
        )

    async def is_job_saved(self, job_id: int) -> bool:
        return await self._query_client.fetch_query(
            QueryKeys.IS_JOB_SAVED + (job_id,), lambda: self._jobs.is_job_saved(job_id)
        )

    async def saved_jobs_count(self) -> int:
        return await self._query_client.fetch_query(
            QueryKeys.SAVED_JOBS_COUNT, self._jobs.get_saved_jobs_count
        )

    async def save_job(self, job_id: int) -> None:
        await self._query_client.mutate(self.save_job_mutation, job_id)

    async def unsave_job(self, job_id: int) -> None:
        await self._query_client.mutate(self.unsave_job_mutation, job_id)

    async def clear_saved_jobs(self) -> None:
        await self._query_client.mutate(self.clear_saved_jobs_mutation)

    # 面接

    async def interview(self, interview_id: int) -> InterviewResponse:
        return await self._query_client.fetch_query(
            QueryKeys.INTERVIEW + (interview_id,),
            lambda: self._jobs.get_interview(interview_id),
        )

    async def employer_interviews(
        self,
        page: int = 0,
        size: int = 10,
        status: InterviewStatus | None = None,
    ) -> Page[InterviewResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.INTERVIEWS + ("employer", page, size, str(status) if status else None),
            lambda: self._jobs.get_employer_interviews(page, size, status),
        )

    async def candidate_interviews(
        self, page: int = 0, size: int = 10
    ) -> Page[InterviewResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.INTERVIEWS + ("candidate", page, size),
            lambda: self._jobs.get_candidate_interviews(page, size),
        )

    async def upcoming_interviews(self) -> list[InterviewResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.INTERVIEWS + ("upcoming",), self._jobs.get_upcoming_interviews
        )

    async def schedule_interview(
        self, application_id: int, request: ScheduleInterviewRequest
    ) -> InterviewResponse:
        return await self._query_client.mutate(
            self.schedule_interview_mutation, application_id, request
        )

    async def update_interview(
        self, interview_id: int, request: UpdateInterviewRequest
    ) -> InterviewResponse:
        return await self._query_client.mutate(
            self.update_interview_mutation, interview_id, request
        )

    async def cancel_interview(self, interview_id: int, reason: str) -> InterviewResponse:
        return await self._query_client.mutate(
            self.cancel_interview_mutation, interview_id, reason
        )

    async def reschedule_interview(
        self, interview_id: int, new_datetime: str, reason: str | None = None
    ) -> InterviewResponse:
        return await self._query_client.mutate(
            self.reschedule_interview_mutation, interview_id, new_datetime, reason
        )

    async def submit_interview_feedback(
        self, interview_id: int, feedback: str, rating: int
    ) -> InterviewResponse:
        return await self._query_client.mutate(
            self.submit_interview_feedback_mutation, interview_id, feedback, rating
        )

    # 求人アラート

    async def my_job_alerts(self) -> list[JobAlertResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MY_JOB_ALERTS, self._jobs.get_my_job_alerts
        )

    async def matching_jobs(
        self, alert_id: int, page: int = 0, size: int = 10
    ) -> Page[JobResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MATCHING_JOBS + (alert_id, page, size),
            lambda: self._jobs.get_matching_jobs(alert_id, page, size),
        )

    async def create_job_alert(self, request: JobAlertRequest) -> JobAlertResponse:
        return await self._query_client.mutate(self.create_job_alert_mutation, request)

    async def update_job_alert(
        self, alert_id: int, request: JobAlertRequest
    ) -> JobAlertResponse:
        return await self._query_client.mutate(
            self.update_job_alert_mutation, alert_id, request
        )

    async def delete_job_alert(self, alert_id: int) -> None:
        await self._query_client.mutate(self.delete_job_alert_mutation, alert_id)

    async def toggle_job_alert(self, alert_id: int) -> JobAlertResponse:
        return await self._query_client.mutate(self.toggle_job_alert_mutation, alert_id)

    # メッセージ・通知

    async def message_threads(
        self, page: int = 0, size: int = 20
    ) -> Page[MessageThreadResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.MESSAGE_THREADS + (page, size),
            lambda: self._jobs.get_my_threads(page, size),
        )

    async def thread_messages(
        self, thread_id: int, page: int = 0, size: int = 50
    ) -> Page[MessageResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.THREAD_MESSAGES + (thread_id, page, size),
            lambda: self._jobs.get_thread_messages(thread_id, page, size),
        )

    async def unread_message_count(self) -> int:
        return await self._query_client.fetch_query(
            QueryKeys.UNREAD_MESSAGES,
            self._jobs.get_unread_message_count,
            stale_time=UNREAD_COUNT_STALE_TIME,
        )

    async def send_message(self, thread_id: int, message_text: str) -> MessageResponse:
        return await self._query_client.mutate(
            self.send_message_mutation, thread_id, message_text
        )

    async def mark_message_read(self, message_id: int) -> None:
        await self._query_client.mutate(self.mark_message_read_mutation, message_id)

    async def notifications(
        self, page: int = 0, size: int = 20
    ) -> Page[NotificationResponse]:
        return await self._query_client.fetch_query(
            QueryKeys.NOTIFICATIONS + (page, size),
            lambda: self._jobs.get_notifications(page, size),
        )

    async def unread_notification_count(self) -> int:
        return await self._query_client.fetch_query(
            QueryKeys.UNREAD_NOTIFICATIONS,
            self._jobs.get_unread_notification_count,
            stale_time=UNREAD_COUNT_STALE_TIME,
        )

    async def mark_notification_read(self, notification_id: int) -> None:
        await self._query_client.mutate(self.mark_notification_read_mutation, notification_id)

    async def mark_all_notifications_read(self) -> None:
        await self._query_client.mutate(self.mark_all_notifications_read_mutation)

    async def delete_notification(self, notification_id: int) -> None:
        await self._query_client.mutate(self.delete_notification_mutation, notification_id)
