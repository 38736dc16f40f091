"""UI 側が提供する画面遷移・通知機能の抽象"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Callable


class NotificationKind(StrEnum):
    """通知種別。"""

    SUCCESS = "success"
    ERROR = "error"
    LOADING = "loading"
    INFO = "info"


class Navigator(ABC):
    """画面遷移機能の抽象基底クラス。"""

    @abstractmethod
    def redirect_to_entry_point(self) -> None:
        """未認証時の入口画面（ログイン）へ遷移する。"""
        ...


class Notifier(ABC):
    """通知表示機能の抽象基底クラス。"""

    @abstractmethod
    def notify(self, kind: NotificationKind | str, message: str) -> None:
        """通知を表示する。"""
        ...


class CallbackNavigator(Navigator):
    """任意の関数へ遷移処理を委譲する Navigator。"""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def redirect_to_entry_point(self) -> None:
        self._callback()


class CallbackNotifier(Notifier):
    """任意の関数へ通知処理を委譲する Notifier。"""

    def __init__(self, callback: Callable[[str, str], None]) -> None:
        self._callback = callback

    def notify(self, kind: NotificationKind | str, message: str) -> None:
        self._callback(str(kind), message)
