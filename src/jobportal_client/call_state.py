"""非同期呼び出しの loading / error 状態を追跡するラッパー"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

import structlog

from .capabilities import NotificationKind, Notifier
from .exceptions import ApiError

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "An error occurred"

logger = structlog.get_logger(__name__)


@dataclass
class CallState:
    """1 つのフックインスタンスが持つ呼び出し状態。"""

    loading: bool = False
    error: str | None = None


def error_message(exc: BaseException, fallback: str = DEFAULT_ERROR_MESSAGE) -> str:
    """表示用のエラーメッセージを導出する。

    サーバーのメッセージ (ApiError.message) → 例外メッセージ → 既定文言の順。
    """
    if isinstance(exc, ApiError) and exc.message:
        return exc.message
    return str(exc) or fallback


async def with_state(
    state: CallState,
    call: Callable[[], Awaitable[T]],
    *,
    fallback_message: str = DEFAULT_ERROR_MESSAGE,
    notifier: Notifier | None = None,
) -> T:
    """call を実行し、その前後で state の loading / error を更新する。

    失敗時は error を設定したうえで元の例外をそのまま再送出する。
    """
    state.loading = True
    state.error = None
    try:
        return await call()
    except Exception as e:
        message = error_message(e, fallback_message)
        state.error = message
        logger.debug("call_state.failed", error=message)
        if notifier is not None:
            notifier.notify(NotificationKind.ERROR, message)
        raise
    finally:
        state.loading = False


class CallStateWrapper:
    """loading / error を公開する再利用可能なラッパー。

    同一インスタンスで呼び出しを重ねた場合、最後に完了した呼び出しの結果が残る。
    厳密な順序が必要なら呼び出し側で直列化するか、呼び出しごとにインスタンスを分ける。
    """

    def __init__(
        self,
        notifier: Notifier | None = None,
        fallback_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        self._state = CallState()
        self._notifier = notifier
        self._fallback_message = fallback_message

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def state(self) -> CallState:
        """現在の状態のスナップショット。"""
        return CallState(loading=self._state.loading, error=self._state.error)

    def clear_error(self) -> None:
        self._state.error = None

    async def run(self, call: Callable[[], Awaitable[T]]) -> T:
        return await with_state(
            self._state,
            call,
            fallback_message=self._fallback_message,
            notifier=self._notifier,
        )

    async def __call__(self, call: Callable[[], Awaitable[T]]) -> T:
        return await self.run(call)
