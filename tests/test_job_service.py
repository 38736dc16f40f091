"""JobService のユニットテスト（respx モック）"""

import json

import httpx
import pytest
import respx
from jobportal_client.exceptions import ApiError
from jobportal_client.job_service import JobService
from jobportal_client.models import (
    AlertFrequency,
    ApplicationStatus,
    InterviewStatus,
    JobAlertRequest,
    JobRequest,
    JobSearchRequest,
    JobSkillRequirement,
    JobStatus,
    RateCandidateRequest,
    ScheduleInterviewRequest,
    UpdateApplicationStatusRequest,
)
from jobportal_client.service_client import create_service_client
from jobportal_client.storage import InMemoryStorage
from jobportal_client.token_store import TokenStore

BASE_URL = "http://job-service:8082"

JOB = {
    "jobId": 5,
    "jobTitle": "Backend Engineer",
    "companyName": "Acme",
    "jobStatus": "ACTIVE",
    "skills": [{"skillId": 1, "skillName": "Python", "importance": "REQUIRED"}],
}

APPLICATION = {"applicationId": 9, "jobId": 5, "applicationStatus": "SHORTLISTED"}
INTERVIEW = {
    "interviewId": 12,
    "applicationId": 9,
    "jobId": 5,
    "status": "SCHEDULED",
    "interviewType": "VIDEO",
    "scheduledDatetime": "2026-11-02T10:00:00",
}
ALERT = {"alertId": 3, "alertName": "Python remote", "frequency": "DAILY", "isActive": True}


def make_service() -> JobService:
    store = TokenStore(InMemoryStorage())
    store.set("T1", 1)
    return JobService(create_service_client(BASE_URL, store))


@respx.mock
async def test_create_job() -> None:
    """求人作成で None の項目を送らないこと。"""
    route = respx.post(f"{BASE_URL}/api/v1/jobs").mock(
        return_value=httpx.Response(201, json=JOB)
    )
    request = JobRequest(
        job_title="Backend Engineer",
        number_of_openings=2,
        skills=[JobSkillRequirement(skill_id=1)],
    )
    job = await make_service().create_job(request)
    assert job.job_id == 5
    assert job.skills[0].skill_name == "Python"
    body = json.loads(route.calls.last.request.content)
    assert body == {
        "jobTitle": "Backend Engineer",
        "numberOfOpenings": 2,
        "skills": [{"skillId": 1, "importance": "REQUIRED", "minExperienceYears": 0}],
    }


@respx.mock
async def test_search_jobs_paged() -> None:
    """検索結果のページ情報。"""
    route = respx.post(f"{BASE_URL}/api/v1/jobs/search").mock(
        return_value=httpx.Response(
            200,
            json={"content": [JOB], "totalElements": 11, "totalPages": 2, "size": 10, "number": 0},
        )
    )
    page = await make_service().search_jobs(JobSearchRequest(job_title="engineer", is_remote=True))
    assert page.total_elements == 11
    assert page.content[0].job_title == "Backend Engineer"
    body = json.loads(route.calls.last.request.content)
    assert body["isRemote"] is True
    assert "location" not in body


@respx.mock
async def test_pause_and_reopen_job() -> None:
    """求人の一時停止と再開。"""
    respx.patch(f"{BASE_URL}/api/v1/jobs/5/pause").mock(
        return_value=httpx.Response(200, json={**JOB, "jobStatus": "PAUSED"})
    )
    respx.patch(f"{BASE_URL}/api/v1/jobs/5/reopen").mock(
        return_value=httpx.Response(200, json=JOB)
    )
    service = make_service()
    assert (await service.pause_job(5)).job_status is JobStatus.PAUSED
    assert (await service.reopen_job(5)).job_status is JobStatus.ACTIVE


@respx.mock
async def test_job_statistics() -> None:
    """求人統計。"""
    respx.get(f"{BASE_URL}/api/v1/jobs/statistics").mock(
        return_value=httpx.Response(200, json={"activeJobs": 3, "totalJobs": 5})
    )
    stats = await make_service().get_job_statistics()
    assert stats.active_jobs == 3
    assert stats.closed_jobs == 0


@respx.mock
async def test_apply_and_has_applied() -> None:
    """応募と応募済み確認。"""
    apply = respx.post(f"{BASE_URL}/api/v1/jobs/5/apply").mock(
        return_value=httpx.Response(
            201, json={"applicationId": 9, "jobId": 5, "applicationStatus": "APPLIED"}
        )
    )
    respx.get(f"{BASE_URL}/api/v1/jobs/5/has-applied").mock(
        return_value=httpx.Response(200, json={"hasApplied": True})
    )
    service = make_service()
    application = await service.apply_to_job(5, "I am interested")
    assert application.application_status is ApplicationStatus.APPLIED
    assert json.loads(apply.calls.last.request.content) == {"coverLetter": "I am interested"}
    assert await service.has_applied(5) is True


@respx.mock
async def test_has_applied_non_object_bodies() -> None:
    """応募済み確認の本文がオブジェクト以外でも真偽値を返すこと。"""
    route = respx.get(f"{BASE_URL}/api/v1/jobs/5/has-applied")
    service = make_service()

    route.mock(return_value=httpx.Response(200, json=True))
    assert await service.has_applied(5) is True
    route.mock(return_value=httpx.Response(200, text="false"))
    assert await service.has_applied(5) is False
    route.mock(return_value=httpx.Response(200, text="TRUE "))
    assert await service.has_applied(5) is True
    route.mock(return_value=httpx.Response(200))
    assert await service.has_applied(5) is False


@respx.mock
async def test_apply_duplicate() -> None:
    """重複応募はサーバーのメッセージで失敗すること。"""
    respx.post(f"{BASE_URL}/api/v1/jobs/5/apply").mock(
        return_value=httpx.Response(409, json={"message": "Already applied"})
    )
    with pytest.raises(ApiError) as exc_info:
        await make_service().apply_to_job(5, "again")
    assert exc_info.value.message == "Already applied"
    assert exc_info.value.status == 409


@respx.mock
async def test_my_applications_status_filter() -> None:
    """ステータス指定があればクエリパラメータに含めること。"""
    route = respx.get(f"{BASE_URL}/api/v1/applications/my-applications").mock(
        return_value=httpx.Response(200, json={"content": []})
    )
    service = make_service()
    await service.get_my_applications(status=ApplicationStatus.SHORTLISTED)
    assert route.calls.last.request.url.params["status"] == "SHORTLISTED"
    await service.get_my_applications()
    assert "status" not in route.calls.last.request.url.params


@respx.mock
async def test_update_application_status() -> None:
    """応募ステータス更新。"""
    route = respx.patch(f"{BASE_URL}/api/v1/applications/9/status").mock(
        return_value=httpx.Response(
            200, json={"applicationId": 9, "jobId": 5, "applicationStatus": "HIRED"}
        )
    )
    result = await make_service().update_application_status(
        9, UpdateApplicationStatusRequest(ApplicationStatus.HIRED)
    )
    assert result.application_status is ApplicationStatus.HIRED
    assert json.loads(route.calls.last.request.content) == {"status": "HIRED"}


@respx.mock
async def test_withdraw_application() -> None:
    """応募の取り下げ。"""
    route = respx.delete(f"{BASE_URL}/api/v1/applications/9").mock(
        return_value=httpx.Response(204)
    )
    await make_service().withdraw_application(9)
    assert route.called


@respx.mock
async def test_job_applications_for_employer() -> None:
    """求人別の応募一覧と採用担当者の全応募。"""
    per_job = respx.get(f"{BASE_URL}/api/v1/jobs/5/applications").mock(
        return_value=httpx.Response(200, json={"content": [APPLICATION], "totalElements": 1})
    )
    respx.get(f"{BASE_URL}/api/v1/applications/employer/all").mock(
        return_value=httpx.Response(200, json={"content": [APPLICATION, APPLICATION]})
    )
    service = make_service()
    page = await service.get_job_applications(5, status=ApplicationStatus.SHORTLISTED)
    assert page.content[0].application_status is ApplicationStatus.SHORTLISTED
    assert per_job.calls.last.request.url.params["status"] == "SHORTLISTED"
    assert len((await service.get_all_employer_applications()).content) == 2


@respx.mock
async def test_rate_candidate() -> None:
    """候補者の評価。notes 未指定なら送らないこと。"""
    route = respx.post(f"{BASE_URL}/api/v1/applications/9/rate").mock(
        return_value=httpx.Response(200, json={**APPLICATION, "rating": 4})
    )
    result = await make_service().rate_candidate(9, RateCandidateRequest(rating=4))
    assert result.rating == 4
    assert json.loads(route.calls.last.request.content) == {"rating": 4}


@respx.mock
async def test_application_statistics() -> None:
    """応募集計の取得と、未対応の対象の拒否。"""
    route = respx.get(f"{BASE_URL}/api/v1/applications/statistics/employer").mock(
        return_value=httpx.Response(
            200,
            json={
                "totalApplications": 6,
                "hiredCount": 1,
                "statusBreakdown": {"APPLIED": 5, "HIRED": 1},
            },
        )
    )
    service = make_service()
    stats = await service.get_application_statistics("employer")
    assert stats.total_applications == 6
    assert stats.status_breakdown == {"APPLIED": 5, "HIRED": 1}
    assert stats.rejected_count == 0
    with pytest.raises(ValueError):
        await service.get_application_statistics("admin")
    assert route.call_count == 1


@respx.mock
async def test_saved_jobs() -> None:
    """求人の保存・解除・一覧・件数・全削除。"""
    save = respx.post(f"{BASE_URL}/api/v1/jobs/5/save").mock(return_value=httpx.Response(201))
    unsave = respx.delete(f"{BASE_URL}/api/v1/jobs/5/unsave").mock(
        return_value=httpx.Response(204)
    )
    respx.get(f"{BASE_URL}/api/v1/jobs/saved").mock(
        return_value=httpx.Response(200, json={"content": [JOB], "totalElements": 1})
    )
    respx.get(f"{BASE_URL}/api/v1/jobs/5/is-saved").mock(
        return_value=httpx.Response(200, json={"isSaved": True})
    )
    respx.get(f"{BASE_URL}/api/v1/jobs/saved/count").mock(
        return_value=httpx.Response(200, json={"count": 1})
    )
    clear = respx.delete(f"{BASE_URL}/api/v1/jobs/saved/clear-all").mock(
        return_value=httpx.Response(204)
    )
    service = make_service()
    await service.save_job(5)
    assert save.called
    assert (await service.get_saved_jobs()).content[0].job_id == 5
    assert await service.is_job_saved(5) is True
    assert await service.get_saved_jobs_count() == 1
    await service.unsave_job(5)
    await service.clear_saved_jobs()
    assert unsave.called
    assert clear.called


@respx.mock
async def test_schedule_and_reschedule_interview() -> None:
    """面接の設定と日時変更。理由が無ければ送らないこと。"""
    schedule = respx.post(f"{BASE_URL}/api/v1/applications/9/interviews").mock(
        return_value=httpx.Response(201, json=INTERVIEW)
    )
    reschedule = respx.patch(f"{BASE_URL}/api/v1/interviews/12/reschedule").mock(
        return_value=httpx.Response(200, json={**INTERVIEW, "status": "RESCHEDULED"})
    )
    service = make_service()
    interview = await service.schedule_interview(
        9,
        ScheduleInterviewRequest(
            interview_type="VIDEO",
            scheduled_datetime="2026-11-02T10:00:00",
            location_or_link="https://meet.example.com/x",
            interviewer_details="Hiring manager",
        ),
    )
    assert interview.status is InterviewStatus.SCHEDULED
    assert "instructions" not in json.loads(schedule.calls.last.request.content)

    moved = await service.reschedule_interview(12, "2026-11-03T10:00:00")
    assert moved.status is InterviewStatus.RESCHEDULED
    assert json.loads(reschedule.calls.last.request.content) == {
        "newDatetime": "2026-11-03T10:00:00"
    }


@respx.mock
async def test_interview_lists_cancel_and_feedback() -> None:
    """面接一覧・キャンセル・フィードバック。"""
    employer = respx.get(f"{BASE_URL}/api/v1/interviews/employer/my-interviews").mock(
        return_value=httpx.Response(200, json={"content": [INTERVIEW]})
    )
    respx.get(f"{BASE_URL}/api/v1/interviews/candidate/my-interviews").mock(
        return_value=httpx.Response(200, json={"content": []})
    )
    respx.get(f"{BASE_URL}/api/v1/interviews/employer/upcoming").mock(
        return_value=httpx.Response(200, json=[INTERVIEW])
    )
    cancel = respx.patch(f"{BASE_URL}/api/v1/interviews/12/cancel").mock(
        return_value=httpx.Response(200, json={**INTERVIEW, "status": "CANCELLED"})
    )
    feedback = respx.post(f"{BASE_URL}/api/v1/interviews/12/feedback").mock(
        return_value=httpx.Response(
            200, json={**INTERVIEW, "status": "COMPLETED", "feedback": "Strong", "rating": 5}
        )
    )
    service = make_service()

    await service.get_employer_interviews(status=InterviewStatus.SCHEDULED)
    assert employer.calls.last.request.url.params["status"] == "SCHEDULED"
    assert (await service.get_candidate_interviews()).content == []
    assert (await service.get_upcoming_interviews())[0].interview_id == 12

    cancelled = await service.cancel_interview(12, "Position filled")
    assert cancelled.status is InterviewStatus.CANCELLED
    assert json.loads(cancel.calls.last.request.content) == {"reason": "Position filled"}

    done = await service.submit_interview_feedback(12, "Strong", 5)
    assert done.rating == 5
    assert json.loads(feedback.calls.last.request.content) == {"feedback": "Strong", "rating": 5}


@respx.mock
async def test_job_alerts() -> None:
    """求人アラートの作成・切り替え・一致求人。"""
    create = respx.post(f"{BASE_URL}/api/v1/job-alerts").mock(
        return_value=httpx.Response(201, json=ALERT)
    )
    respx.patch(f"{BASE_URL}/api/v1/job-alerts/3/toggle").mock(
        return_value=httpx.Response(200, json={**ALERT, "isActive": False})
    )
    respx.get(f"{BASE_URL}/api/v1/job-alerts/my-alerts").mock(
        return_value=httpx.Response(200, json=[ALERT])
    )
    matching = respx.get(f"{BASE_URL}/api/v1/job-alerts/3/matching-jobs").mock(
        return_value=httpx.Response(200, json={"content": [JOB]})
    )
    delete = respx.delete(f"{BASE_URL}/api/v1/job-alerts/3").mock(
        return_value=httpx.Response(204)
    )
    service = make_service()

    alert = await service.create_job_alert(
        JobAlertRequest(
            alert_name="Python remote", frequency=AlertFrequency.DAILY, is_remote=True
        )
    )
    assert alert.frequency is AlertFrequency.DAILY
    assert json.loads(create.calls.last.request.content) == {
        "alertName": "Python remote",
        "frequency": "DAILY",
        "isRemote": True,
    }
    assert (await service.toggle_job_alert(3)).is_active is False
    assert (await service.get_my_job_alerts())[0].alert_id == 3
    await service.get_matching_jobs(3, page=2)
    assert matching.calls.last.request.url.params["page"] == "2"
    await service.delete_job_alert(3)
    assert delete.called


@respx.mock
async def test_messages() -> None:
    """スレッド一覧・送信・既読・未読件数。"""
    respx.get(f"{BASE_URL}/api/v1/messages/my-threads").mock(
        return_value=httpx.Response(
            200, json={"content": [{"threadId": 40, "jobId": 5, "unreadCount": 2}]}
        )
    )
    send = respx.post(f"{BASE_URL}/api/v1/messages/send").mock(
        return_value=httpx.Response(
            201, json={"messageId": 100, "threadId": 40, "messageText": "Hello"}
        )
    )
    read = respx.patch(f"{BASE_URL}/api/v1/messages/100/read").mock(
        return_value=httpx.Response(204)
    )
    respx.get(f"{BASE_URL}/api/v1/messages/unread-count").mock(
        return_value=httpx.Response(200, json={"count": 3})
    )
    service = make_service()

    threads = await service.get_my_threads()
    assert threads.content[0].unread_count == 2
    message = await service.send_message(40, "Hello")
    assert message.message_text == "Hello"
    assert json.loads(send.calls.last.request.content) == {
        "threadId": 40,
        "messageText": "Hello",
    }
    await service.mark_message_read(100)
    assert read.called
    assert await service.get_unread_message_count() == 3


@respx.mock
async def test_notifications() -> None:
    """通知一覧・既読・全既読・削除・未読件数（数値そのものの本文）。"""
    respx.get(f"{BASE_URL}/api/v1/notifications").mock(
        return_value=httpx.Response(
            200,
            json={
                "content": [
                    {"notificationId": 1, "title": "Shortlisted", "message": "Hi"}
                ]
            },
        )
    )
    read = respx.patch(f"{BASE_URL}/api/v1/notifications/1/read").mock(
        return_value=httpx.Response(204)
    )
    read_all = respx.patch(f"{BASE_URL}/api/v1/notifications/read-all").mock(
        return_value=httpx.Response(204)
    )
    delete = respx.delete(f"{BASE_URL}/api/v1/notifications/1").mock(
        return_value=httpx.Response(204)
    )
    respx.get(f"{BASE_URL}/api/v1/notifications/unread-count").mock(
        return_value=httpx.Response(200, json=4)
    )
    service = make_service()

    page = await service.get_notifications()
    assert page.content[0].is_read is False
    await service.mark_notification_read(1)
    await service.mark_all_notifications_read()
    await service.delete_notification(1)
    assert read.called
    assert read_all.called
    assert delete.called
    assert await service.get_unread_notification_count() == 4
