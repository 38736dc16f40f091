"""セッショントークンストア"""

from __future__ import annotations

import structlog

from .storage import KeyValueStorage

TOKEN_KEY = "auth_token"
USER_ID_KEY = "user_id"

logger = structlog.get_logger(__name__)


class TokenStore:
    """現在のセッショントークンとユーザー ID を保持する唯一の場所。

    トークンが存在することだけが認証済みの条件であり、期限切れの検出は
    401 応答を受けたときに限る。ストレージの失敗はログに残して「トークンなし」
    として扱い、呼び出し側へは送出しない。
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    def get(self) -> str | None:
        """保存済みトークンを返す。取得できなければ None。"""
        try:
            return self._storage.get_item(TOKEN_KEY)
        except Exception as e:
            logger.warning("token_store.get_failed", error=str(e))
            return None

    def set(self, token: str, user_id: str | int | None = None) -> None:
        """トークンを保存する。user_id は指定された場合のみ上書きする。"""
        try:
            self._storage.set_item(TOKEN_KEY, token)
            if user_id is not None:
                self._storage.set_item(USER_ID_KEY, str(user_id))
        except Exception as e:
            logger.warning("token_store.set_failed", error=str(e))

    def remove(self) -> None:
        """トークンとユーザー ID を削除する。既に空でも何もしない。"""
        try:
            self._storage.remove_item(TOKEN_KEY)
            self._storage.remove_item(USER_ID_KEY)
        except Exception as e:
            logger.warning("token_store.remove_failed", error=str(e))

    def get_user_id(self) -> str | None:
        try:
            return self._storage.get_item(USER_ID_KEY)
        except Exception as e:
            logger.warning("token_store.get_user_id_failed", error=str(e))
            return None

    def get_auth_header(self) -> str | None:
        """Authorization ヘッダー値 (Bearer) を返す。"""
        token = self.get()
        return f"Bearer {token}" if token is not None else None

    def is_authenticated(self) -> bool:
        return self.get() is not None

    def clear_auth(self) -> None:
        """ログアウト時の全認証情報クリア。"""
        self.remove()
