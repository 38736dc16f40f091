"""リクエスト/レスポンスのミドルウェアパイプライン

インターセプタは ``httpx.Request -> httpx.Request`` もしくは
``httpx.Response -> httpx.Response`` の単純な関数として順序付きで保持する。
セッション失効の判定 (classify_response) と、その結果としての副作用
(SessionObserver) は分離してある。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

import httpx
import structlog

from .capabilities import Navigator
from .token_store import TokenStore

RequestInterceptor = Callable[[httpx.Request], httpx.Request]
ResponseInterceptor = Callable[[httpx.Response], httpx.Response]

AUTH_FAILURE_STATUSES: frozenset[int] = frozenset({401})

logger = structlog.get_logger(__name__)


class ResponseClass(StrEnum):
    """レスポンス分類。"""

    OK = "ok"
    HTTP_FAILURE = "http_failure"
    AUTH_FAILURE = "auth_failure"


def classify_response(resp: httpx.Response) -> ResponseClass:
    """ステータスコードからレスポンスを分類する。"""
    if resp.status_code in AUTH_FAILURE_STATUSES:
        return ResponseClass.AUTH_FAILURE
    if 200 <= resp.status_code < 300:
        return ResponseClass.OK
    return ResponseClass.HTTP_FAILURE


@dataclass(frozen=True)
class MiddlewarePipeline:
    """順序付きインターセプタ列。"""

    request_interceptors: tuple[RequestInterceptor, ...] = ()
    response_interceptors: tuple[ResponseInterceptor, ...] = ()

    def with_request(self, *interceptors: RequestInterceptor) -> MiddlewarePipeline:
        """リクエストインターセプタを末尾に追加した新しいパイプラインを返す。"""
        return MiddlewarePipeline(
            self.request_interceptors + interceptors,
            self.response_interceptors,
        )

    def with_response(self, *interceptors: ResponseInterceptor) -> MiddlewarePipeline:
        """レスポンスインターセプタを末尾に追加した新しいパイプラインを返す。"""
        return MiddlewarePipeline(
            self.request_interceptors,
            self.response_interceptors + interceptors,
        )

    def apply_request(self, request: httpx.Request) -> httpx.Request:
        for interceptor in self.request_interceptors:
            request = interceptor(request)
        return request

    def apply_response(self, resp: httpx.Response) -> httpx.Response:
        for interceptor in self.response_interceptors:
            resp = interceptor(resp)
        return resp


def bearer_token_interceptor(token_store: TokenStore) -> RequestInterceptor:
    """送信時点のトークンを Authorization ヘッダーに付与するインターセプタ。

    トークンが無ければヘッダーを付けないだけで、リクエストは失敗させない。
    """

    def intercept(request: httpx.Request) -> httpx.Request:
        token = token_store.get()
        if token is not None:
            request.headers["Authorization"] = f"Bearer {token}"
        return request

    return intercept


class SessionObserver:
    """認証失敗時にセッションを破棄し、入口画面へ遷移させる。

    同じストアに対する破棄は冪等なので、並行する 401 応答が競合しても安全。
    """

    def __init__(self, token_store: TokenStore, navigator: Navigator | None = None) -> None:
        self._token_store = token_store
        self._navigator = navigator

    def on_auth_failure(self, resp: httpx.Response) -> None:
        logger.info(
            "session.expired",
            status=resp.status_code,
            url=str(resp.request.url),
        )
        self._token_store.remove()
        if self._navigator is not None:
            self._navigator.redirect_to_entry_point()


def session_guard_interceptor(observer: SessionObserver) -> ResponseInterceptor:
    """レスポンスを分類し、認証失敗なら observer に通知するインターセプタ。

    応答そのものは変更せずに返すので、失敗は通常どおり呼び出し側へ伝播する。
    """

    def intercept(resp: httpx.Response) -> httpx.Response:
        if classify_response(resp) is ResponseClass.AUTH_FAILURE:
            observer.on_auth_failure(resp)
        return resp

    return intercept
