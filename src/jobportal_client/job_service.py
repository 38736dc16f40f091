"""求人サービスの呼び出し"""

from __future__ import annotations

from typing import Any

from .models import (
    ApplicationResponse,
    ApplicationStatisticsResponse,
    ApplicationStatus,
    InterviewResponse,
    InterviewStatus,
    JobAlertRequest,
    JobAlertResponse,
    JobRequest,
    JobResponse,
    JobSearchRequest,
    JobStatisticsResponse,
    MessageResponse,
    MessageThreadResponse,
    NotificationResponse,
    Page,
    RateCandidateRequest,
    ScheduleInterviewRequest,
    UpdateApplicationStatusRequest,
    UpdateInterviewRequest,
)
from .service_client import ServiceClient

STATISTICS_AUDIENCES: frozenset[str] = frozenset({"jobseeker", "employer"})

_INTERVIEWS = "/api/v1/interviews"
_JOB_ALERTS = "/api/v1/job-alerts"
_MESSAGES = "/api/v1/messages"
_NOTIFICATIONS = "/api/v1/notifications"


def _count(data: Any) -> int:
    """{"count": n} 形式、または数値そのものの本文から件数を取り出す。"""
    if isinstance(data, dict):
        return int(data.get("count", 0))
    return int(data or 0)


class JobService:
    """求人・応募・面接・アラート・メッセージ・通知 API。"""

    def __init__(self, client: ServiceClient) -> None:
        self._client = client

    # 求人管理

    async def create_job(self, request: JobRequest) -> JobResponse:
        data: dict[str, Any] = await self._client.post("/api/v1/jobs", request.to_dict())
        return JobResponse.from_dict(data)

    async def get_job(self, job_id: int) -> JobResponse:
        data: dict[str, Any] = await self._client.get(f"/api/v1/jobs/{job_id}")
        return JobResponse.from_dict(data)

    async def get_my_jobs(self, page: int = 0, size: int = 10) -> Page[JobResponse]:
        data: dict[str, Any] = await self._client.get(
            "/api/v1/jobs/my-jobs", params={"page": page, "size": size}
        )
        return Page.from_dict(data, JobResponse.from_dict)

    async def update_job(self, job_id: int, request: JobRequest) -> JobResponse:
        data: dict[str, Any] = await self._client.put(
            f"/api/v1/jobs/{job_id}", request.to_dict()
        )
        return JobResponse.from_dict(data)

    async def delete_job(self, job_id: int) -> None:
        await self._client.delete(f"/api/v1/jobs/{job_id}")

    async def close_job(self, job_id: int) -> JobResponse:
        data: dict[str, Any] = await self._client.patch(f"/api/v1/jobs/{job_id}/close")
        return JobResponse.from_dict(data)

    async def pause_job(self, job_id: int) -> JobResponse:
        data: dict[str, Any] = await self._client.patch(f"/api/v1/jobs/{job_id}/pause")
        return JobResponse.from_dict(data)

    async def reopen_job(self, job_id: int) -> JobResponse:
        data: dict[str, Any] = await self._client.patch(f"/api/v1/jobs/{job_id}/reopen")
        return JobResponse.from_dict(data)

    async def search_jobs(self, request: JobSearchRequest) -> Page[JobResponse]:
        data: dict[str, Any] = await self._client.post(
            "/api/v1/jobs/search", request.to_dict()
        )
        return Page.from_dict(data, JobResponse.from_dict)

    async def get_job_statistics(self) -> JobStatisticsResponse:
        data: dict[str, Any] = await self._client.get("/api/v1/jobs/statistics")
        return JobStatisticsResponse.from_dict(data)

    # 応募

    async def apply_to_job(self, job_id: int, cover_letter: str) -> ApplicationResponse:
        data: dict[str, Any] = await self._client.post(
            f"/api/v1/jobs/{job_id}/apply", {"coverLetter": cover_letter}
        )
        return ApplicationResponse.from_dict(data)

    async def has_applied(self, job_id: int) -> bool:
        data = await self._client.get(f"/api/v1/jobs/{job_id}/has-applied")
        # 本文が真偽値そのもの、またはテキストで返る場合もある
        if isinstance(data, dict):
            return bool(data.get("hasApplied", False))
        if isinstance(data, str):
            return data.strip().lower() == "true"
        return bool(data)

    async def get_my_applications(
        self,
        page: int = 0,
        size: int = 10,
        status: ApplicationStatus | None = None,
    ) -> Page[ApplicationResponse]:
        data: dict[str, Any] = await self._client.get(
            "/api/v1/applications/my-applications",
            params={
                "page": page,
                "size": size,
                "status": str(status) if status else None,
            },
        )
        return Page.from_dict(data, ApplicationResponse.from_dict)

    async def get_application(self, application_id: int) -> ApplicationResponse:
        data: dict[str, Any] = await self._client.get(
            f"/api/v1/applications/{application_id}"
        )
        return ApplicationResponse.from_dict(data)

    async def update_application_status(
        self, application_id: int, request: UpdateApplicationStatusRequest
    ) -> ApplicationResponse:
        data: dict[str, Any] = await self._client.patch(
            f"/api/v1/applications/{application_id}/status", request.to_dict()
        )
        return ApplicationResponse.from_dict(data)

    async def withdraw_application(self, application_id: int) -> None:
        await self._client.delete(f"/api/v1/applications/{application_id}")

    async def get_job_applications(
        self,
        job_id: int,
        page: int = 0,
        size: int = 10,
        status: ApplicationStatus | None = None,
    ) -> Page[ApplicationResponse]:
        """求人 1 件に届いた応募一覧（採用担当者向け）。"""
        data: dict[str, Any] = await self._client.get(
            f"/api/v1/jobs/{job_id}/applications",
            params={
                "page": page,
                "size": size,
                "status": str(status) if status else None,
            },
        )
        return Page.from_dict(data, ApplicationResponse.from_dict)

    async def get_all_employer_applications(
        self, page: int = 0, size: int = 10
    ) -> Page[ApplicationResponse]:
        data: dict[str, Any] = await self._client.get(
            "/api/v1/applications/employer/all", params={"page": page, "size": size}
        )
        return Page.from_dict(data, ApplicationResponse.from_dict)

    async def rate_candidate(
        self, application_id: int, request: RateCandidateRequest
    ) -> ApplicationResponse:
        data: dict[str, Any] = await self._client.post(
            f"/api/v1/applications/{application_id}/rate", request.to_dict()
        )
        return ApplicationResponse.from_dict(data)

    async def get_application_statistics(self, audience: str) -> ApplicationStatisticsResponse:
        """応募集計を取得する。

        Args:
            audience: "jobseeker" または "employer"

        Raises:
            ValueError: audience が上記以外の場合
        """
        if audience not in STATISTICS_AUDIENCES:
            raise ValueError(f"Unsupported statistics audience: {audience}")
        data: dict[str, Any] = await self._client.get(
            f"/api/v1/applications/statistics/{audience}"
        )
        return ApplicationStatisticsResponse.from_dict(data)

    # 保存済み求人

    async def save_job(self, job_id: int) -> None:
        await self._client.post(f"/api/v1/jobs/{job_id}/save")

    async def unsave_job(self, job_id: int) -> None:
        await self._client.delete(f"/api/v1/jobs/{job_id}/unsave")

    async def get_saved_jobs(self, page: int = 0, size: int = 10) -> Page[JobResponse]:
        data: dict[str, Any] = await self._client.get(
            "/api/v1/jobs/saved", params={"page": page, "size": size}
        )
        return Page.from_dict(data, JobResponse.from_dict)

    async def is_job_saved(self, job_id: int) -> bool:
        data = await self._client.get(f"/api/v1/jobs/{job_id}/is-saved")
        if isinstance(data, dict):
            return bool(data.get("isSaved", False))
        return bool(data)

    async def get_saved_jobs_count(self) -> int:
        return _count(await self._client.get("/api/v1/jobs/saved/count"))

    async def clear_saved_jobs(self) -> None:
        await self._client.delete("/api/v1/jobs/saved/clear-all")

    # 面接

    async def schedule_interview(
        self, application_id: int, request: ScheduleInterviewRequest
    ) -> InterviewResponse:
        data: dict[str, Any] = await self._client.post(
            f"/api/v1/applications/{application_id}/interviews", request.to_dict()
        )
        return InterviewResponse.from_dict(data)

    async def get_interview(self, interview_id: int) -> InterviewResponse:
        data: dict[str, Any] = await self._client.get(f"{_INTERVIEWS}/{interview_id}")
        return InterviewResponse.from_dict(data)

    async def get_employer_interviews(
        self,
        page: int = 0,
        size: int = 10,
        status: InterviewStatus | None = None,
    ) -> Page[InterviewResponse]:
        data: dict[str, Any] = await self._client.get(
            f"{_INTERVIEWS}/employer/my-interviews",
            params={"page": page, "size": size, "status": str(status) if status else None},
        )
        return Page.from_dict(data, InterviewResponse.from_dict)

    async def get_candidate_interviews(
        self, page: int = 0, size: int = 10
    ) -> Page[InterviewResponse]:
        data: dict[str, Any] = await self._client.get(
            f"{_INTERVIEWS}/candidate/my-interviews", params={"page": page, "size": size}
        )
        return Page.from_dict(data, InterviewResponse.from_dict)

    async def get_upcoming_interviews(self) -> list[InterviewResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_INTERVIEWS}/employer/upcoming")
        return [InterviewResponse.from_dict(d) for d in data or []]

    async def update_interview(
        self, interview_id: int, request: UpdateInterviewRequest
    ) -> InterviewResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_INTERVIEWS}/{interview_id}", request.to_dict()
        )
        return InterviewResponse.from_dict(data)

    async def cancel_interview(self, interview_id: int, reason: str) -> InterviewResponse:
        data: dict[str, Any] = await self._client.patch(
            f"{_INTERVIEWS}/{interview_id}/cancel", {"reason": reason}
        )
        return InterviewResponse.from_dict(data)

    async def reschedule_interview(
        self, interview_id: int, new_datetime: str, reason: str | None = None
    ) -> InterviewResponse:
        body: dict[str, Any] = {"newDatetime": new_datetime}
        if reason is not None:
            body["reason"] = reason
        data: dict[str, Any] = await self._client.patch(
            f"{_INTERVIEWS}/{interview_id}/reschedule", body
        )
        return InterviewResponse.from_dict(data)

    async def submit_interview_feedback(
        self, interview_id: int, feedback: str, rating: int
    ) -> InterviewResponse:
        data: dict[str, Any] = await self._client.post(
            f"{_INTERVIEWS}/{interview_id}/feedback", {"feedback": feedback, "rating": rating}
        )
        return InterviewResponse.from_dict(data)

    # 求人アラート

    async def create_job_alert(self, request: JobAlertRequest) -> JobAlertResponse:
        data: dict[str, Any] = await self._client.post(_JOB_ALERTS, request.to_dict())
        return JobAlertResponse.from_dict(data)

    async def get_my_job_alerts(self) -> list[JobAlertResponse]:
        data: list[dict[str, Any]] = await self._client.get(f"{_JOB_ALERTS}/my-alerts")
        return [JobAlertResponse.from_dict(d) for d in data or []]

    async def update_job_alert(self, alert_id: int, request: JobAlertRequest) -> JobAlertResponse:
        data: dict[str, Any] = await self._client.put(
            f"{_JOB_ALERTS}/{alert_id}", request.to_dict()
        )
        return JobAlertResponse.from_dict(data)

    async def delete_job_alert(self, alert_id: int) -> None:
        await self._client.delete(f"{_JOB_ALERTS}/{alert_id}")

    async def toggle_job_alert(self, alert_id: int) -> JobAlertResponse:
        """アラートの有効・無効を切り替える。"""
        data: dict[str, Any] = await self._client.patch(f"{_JOB_ALERTS}/{alert_id}/toggle")
        return JobAlertResponse.from_dict(data)

    async def get_matching_jobs(
        self, alert_id: int, page: int = 0, size: int = 10
    ) -> Page[JobResponse]:
        data: dict[str, Any] = await self._client.get(
            f"{_JOB_ALERTS}/{alert_id}/matching-jobs", params={"page": page, "size": size}
        )
        return Page.from_dict(data, JobResponse.from_dict)

    # メッセージ

    async def get_my_threads(
        self, page: int = 0, size: int = 20
    ) -> Page[MessageThreadResponse]:
        data: dict[str, Any] = await self._client.get(
            f"{_MESSAGES}/my-threads", params={"page": page, "size": size}
        )
        return Page.from_dict(data, MessageThreadResponse.from_dict)

    async def get_thread_messages(
        self, thread_id: int, page: int = 0, size: int = 50
    ) -> Page[MessageResponse]:
        data: dict[str, Any] = await self._client.get(
            f"{_MESSAGES}/threads/{thread_id}", params={"page": page, "size": size}
        )
        return Page.from_dict(data, MessageResponse.from_dict)

    async def send_message(self, thread_id: int, message_text: str) -> MessageResponse:
        data: dict[str, Any] = await self._client.post(
            f"{_MESSAGES}/send", {"threadId": thread_id, "messageText": message_text}
        )
        return MessageResponse.from_dict(data)

    async def mark_message_read(self, message_id: int) -> None:
        await self._client.patch(f"{_MESSAGES}/{message_id}/read")

    async def get_unread_message_count(self) -> int:
        return _count(await self._client.get(f"{_MESSAGES}/unread-count"))

    # 通知

    async def get_notifications(
        self, page: int = 0, size: int = 20
    ) -> Page[NotificationResponse]:
        data: dict[str, Any] = await self._client.get(
            _NOTIFICATIONS, params={"page": page, "size": size}
        )
        return Page.from_dict(data, NotificationResponse.from_dict)

    async def mark_notification_read(self, notification_id: int) -> None:
        await self._client.patch(f"{_NOTIFICATIONS}/{notification_id}/read")

    async def mark_all_notifications_read(self) -> None:
        await self._client.patch(f"{_NOTIFICATIONS}/read-all")

    async def get_unread_notification_count(self) -> int:
        return _count(await self._client.get(f"{_NOTIFICATIONS}/unread-count"))

    async def delete_notification(self, notification_id: int) -> None:
        await self._client.delete(f"{_NOTIFICATIONS}/{notification_id}")
