"""サービス別 HTTP クライアントとファクトリ"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from .config import ClientConfig, resolve_timeout_ms
from .exceptions import ApiError
from .metrics import record_request
from .middleware import (
    MiddlewarePipeline,
    SessionObserver,
    bearer_token_interceptor,
    session_guard_interceptor,
)
from .normalizer import decode_body, error_from_exception, error_from_response
from .token_store import TokenStore

ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

logger = structlog.get_logger(__name__)


class ServiceClient:
    """1 つのバックエンドサービスに束縛された httpx クライアント。

    生成後は不変。同じサービスへの呼び出しはすべて同じインスタンスを経由させ、
    インターセプタの挙動を揃える。成功時はデコード済みの本文を返し、失敗時は
    必ず ApiError を送出する。
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int,
        pipeline: MiddlewarePipeline,
        name: str = "",
    ) -> None:
        self._base_url = base_url
        self._timeout_ms = timeout_ms
        self._pipeline = pipeline
        self._name = name or base_url
        self._headers: dict[str, str] = {"Content-Type": "application/json"}

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    @property
    def pipeline(self) -> MiddlewarePipeline:
        return self._pipeline

    @property
    def name(self) -> str:
        return self._name

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout_ms / 1000,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """リクエストを送信し、本文のペイロードを返す。

        Raises:
            ApiError: HTTP 失敗 (非 2xx) またはトランスポート失敗の場合
            ValueError: 未対応の HTTP メソッドの場合
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        if params is not None:
            params = {k: v for k, v in params.items() if v is not None}

        started = time.perf_counter()
        status: int | None = None
        try:
            async with self._make_client() as client:
                request = client.build_request(method, path, json=json, params=params)
                request = self._pipeline.apply_request(request)
                resp = await client.send(request)
            status = resp.status_code
            resp = self._pipeline.apply_response(resp)
            payload = decode_body(resp)
            if not resp.is_success:
                raise error_from_response(resp, payload)
            return payload
        except ApiError as e:
            logger.warning(
                "api.request_failed",
                service=self._name,
                method=method,
                path=path,
                status=e.status,
                code=e.code,
            )
            raise
        except Exception as e:
            error = error_from_exception(e)
            logger.warning(
                "api.request_failed",
                service=self._name,
                method=method,
                path=path,
                status=None,
                code=error.code,
            )
            raise error from e
        finally:
            record_request(self._name, method, status, time.perf_counter() - started)

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, json: Any = None, *, params: dict[str, Any] | None = None
    ) -> Any:
        return await self.request("POST", path, json=json, params=params)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str, json: Any = None) -> Any:
        return await self.request("DELETE", path, json=json)


def create_service_client(
    base_url: str,
    token_store: TokenStore,
    *,
    timeout_ms: Any = None,
    session_observer: SessionObserver | None = None,
    name: str = "",
) -> ServiceClient:
    """トークン付与とセッションガードを組み込んだ ServiceClient を生成する。"""
    pipeline = MiddlewarePipeline().with_request(bearer_token_interceptor(token_store))
    if session_observer is not None:
        pipeline = pipeline.with_response(session_guard_interceptor(session_observer))
    return ServiceClient(
        base_url=base_url,
        timeout_ms=resolve_timeout_ms(timeout_ms),
        pipeline=pipeline,
        name=name,
    )


@dataclass(frozen=True)
class ServiceClients:
    """プロセス起動時に生成するサービス別クライアントの組。"""

    user: ServiceClient
    profile: ServiceClient
    job: ServiceClient


def create_service_clients(
    config: ClientConfig,
    token_store: TokenStore,
    session_observer: SessionObserver | None = None,
) -> ServiceClients:
    """設定からユーザー・プロフィール・求人の 3 クライアントを生成する。"""

    def build(name: str, base_url: str) -> ServiceClient:
        return create_service_client(
            base_url,
            token_store,
            timeout_ms=config.timeout_ms,
            session_observer=session_observer,
            name=name,
        )

    return ServiceClients(
        user=build("user", config.services.user),
        profile=build("profile", config.services.profile),
        job=build("job", config.services.job),
    )
