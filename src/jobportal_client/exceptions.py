"""jobportal_client の例外型定義"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """API 呼び出し失敗を正規化したエラー。

    トランスポート層 (httpx) の例外は ``__cause__`` にのみ保持し、
    呼び出し側には ``message`` / ``status`` / ``errors`` だけを公開する。
    """

    def __init__(
        self,
        code: str,
        message: str,
        status: int | None = None,
        errors: dict[str, list[str]] | None = None,
        payload: Any = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.errors = errors
        self.payload = payload
        if cause is not None:
            self.__cause__ = cause

    @property
    def is_transport_error(self) -> bool:
        """HTTP ステータスを持たない（ネットワーク・タイムアウト）失敗か。"""
        return self.status is None

    @property
    def is_auth_failure(self) -> bool:
        return self.code == ApiErrorCodes.UNAUTHORIZED

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"message": self.message}
        if self.status is not None:
            data["status"] = self.status
        if self.errors:
            data["errors"] = self.errors
        return data

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ApiErrorCodes:
    """ApiError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    TIMEOUT: str = "TIMEOUT"
    HTTP_ERROR: str = "HTTP_ERROR"
    NOT_FOUND: str = "NOT_FOUND"
    UNAUTHORIZED: str = "UNAUTHORIZED"


class StorageError(Exception):
    """キーバリューストレージのエラー。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class StorageErrorCodes:
    """StorageError のエラーコード定数。"""

    READ_FAILED: str = "READ_FAILED"
    WRITE_FAILED: str = "WRITE_FAILED"


class ConfigError(Exception):
    """設定読み込みのエラー。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigErrorCodes:
    """ConfigError のエラーコード定数。"""

    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
