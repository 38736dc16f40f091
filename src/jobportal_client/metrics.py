"""OpenTelemetry による API 呼び出しメトリクス定義"""

from __future__ import annotations

from opentelemetry import metrics

_meter = metrics.get_meter("jobportal_client", version="0.1.0")

api_requests_total = _meter.create_counter(
    name="api_requests_total",
    description="Total number of backend API requests",
    unit="1",
)

api_request_errors_total = _meter.create_counter(
    name="api_request_errors_total",
    description="Total number of failed backend API requests",
    unit="1",
)

api_request_duration_seconds = _meter.create_histogram(
    name="api_request_duration_seconds",
    description="Backend API request duration in seconds",
    unit="s",
)


def record_request(
    service: str,
    method: str,
    status: int | None,
    duration_seconds: float,
) -> None:
    """1 リクエスト分のメトリクスを記録する。status None はトランスポート失敗。"""
    attributes = {
        "service": service,
        "method": method,
        "status": str(status) if status is not None else "transport_error",
    }
    api_requests_total.add(1, attributes)
    api_request_duration_seconds.record(duration_seconds, attributes)
    if status is None or status >= 400:
        api_request_errors_total.add(1, attributes)
