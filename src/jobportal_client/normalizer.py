"""HTTP 応答とトランスポート例外を ApiError へ正規化する"""

from __future__ import annotations

from typing import Any

import httpx

from .exceptions import ApiError, ApiErrorCodes


def decode_body(resp: httpx.Response) -> Any:
    """応答本文をデコードする。

    空本文は None、JSON として解釈できれば解析結果、できなければ生テキストを返す。
    """
    text = resp.text
    if not text:
        return None
    try:
        return resp.json()
    except ValueError:
        return text


def _server_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    for field in ("message", "error"):
        value = payload.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def _validation_errors(payload: Any) -> dict[str, list[str]] | None:
    if not isinstance(payload, dict):
        return None
    raw = payload.get("errors")
    if not isinstance(raw, dict) or not raw:
        return None
    errors: dict[str, list[str]] = {}
    for field, value in raw.items():
        if isinstance(value, (list, tuple)):
            errors[str(field)] = [str(v) for v in value]
        else:
            errors[str(field)] = [str(value)]
    return errors


def _code_for_status(status: int) -> str:
    if status == 401:
        return ApiErrorCodes.UNAUTHORIZED
    if status == 404:
        return ApiErrorCodes.NOT_FOUND
    return ApiErrorCodes.HTTP_ERROR


def error_from_response(resp: httpx.Response, payload: Any = None) -> ApiError:
    """非 2xx 応答から ApiError を生成する。"""
    return ApiError(
        code=_code_for_status(resp.status_code),
        message=_server_message(payload) or f"HTTP {resp.status_code}",
        status=resp.status_code,
        errors=_validation_errors(payload),
        payload=payload,
    )


def error_from_exception(exc: Exception) -> ApiError:
    """トランスポート層の例外から ApiError を生成する。"""
    if isinstance(exc, ApiError):
        return exc
    code = (
        ApiErrorCodes.TIMEOUT
        if isinstance(exc, httpx.TimeoutException)
        else ApiErrorCodes.TRANSPORT_ERROR
    )
    message = str(exc) or type(exc).__name__
    return ApiError(code=code, message=message, cause=exc)
