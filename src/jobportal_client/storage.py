"""永続キーバリューストレージ"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

from .exceptions import StorageError, StorageErrorCodes


class KeyValueStorage(ABC):
    """同期キーバリューストレージ抽象基底クラス。"""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """キーに対応する値を取得する。存在しなければ None。"""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """キーと値を保存する。"""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """キーを削除する。存在しなくてもエラーにしない。"""
        ...


class InMemoryStorage(KeyValueStorage):
    """テスト用インメモリストレージ。"""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._store.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove_item(self, key: str) -> None:
        self._store.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """JSON ファイル 1 つに全キーを保存するストレージ。

    プロセス再起動をまたいで値を保持する。書き込みは毎回ファイル全体を置き換える。
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(
                code=StorageErrorCodes.READ_FAILED,
                message=f"Failed to read storage file: {self._path}",
                cause=e,
            ) from e
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except ValueError as e:
            raise StorageError(
                code=StorageErrorCodes.READ_FAILED,
                message=f"Storage file is not valid JSON: {self._path}",
                cause=e,
            ) from e
        if not isinstance(data, dict):
            raise StorageError(
                code=StorageErrorCodes.READ_FAILED,
                message=f"Storage file must contain a JSON object: {self._path}",
            )
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as e:
            raise StorageError(
                code=StorageErrorCodes.WRITE_FAILED,
                message=f"Failed to write storage file: {self._path}",
                cause=e,
            ) from e

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)
