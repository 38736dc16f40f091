"""クライアント設定（pydantic BaseModel）と読み込み"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError, ConfigErrorCodes

DEFAULT_TIMEOUT_MS = 10_000

ENV_PREFIX = "JOBPORTAL_"
_ENV_FIELDS: dict[str, tuple[str, ...]] = {
    "USER_SERVICE_URL": ("services", "user"),
    "PROFILE_SERVICE_URL": ("services", "profile"),
    "JOB_SERVICE_URL": ("services", "job"),
    "TIMEOUT_MS": ("timeout_ms",),
    "LOG_LEVEL": ("log", "level"),
    "LOG_FORMAT": ("log", "format"),
}


def resolve_timeout_ms(value: Any) -> int:
    """タイムアウト値 (ms) を解釈する。未設定・非数値・非正値は既定値。"""
    if value is None or isinstance(value, bool):
        return DEFAULT_TIMEOUT_MS
    try:
        timeout = int(float(value))
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT_MS
    return timeout if timeout > 0 else DEFAULT_TIMEOUT_MS


class ServicesSection(BaseModel):
    """バックエンドサービスのベース URL。"""

    user: str = "http://localhost:8080"
    profile: str = "http://localhost:8081"
    job: str = "http://localhost:8082"


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ClientConfig(BaseModel):
    """API クライアント設定全体。"""

    services: ServicesSection = Field(default_factory=ServicesSection)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    log: LogSection = Field(default_factory=LogSection)

    @field_validator("timeout_ms", mode="before")
    @classmethod
    def _fallback_timeout(cls, value: Any) -> int:
        return resolve_timeout_ms(value)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for suffix, path in _ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is None or value == "":
            continue
        node = data
        for part in path[:-1]:
            node = node.setdefault(part, {})
        node[path[-1]] = value
    return data


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def _validate(data: dict[str, Any]) -> ClientConfig:
    try:
        return ClientConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e


def load_from_env(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """環境変数 (JOBPORTAL_*) から設定を読み込む。"""
    env = os.environ if environ is None else environ
    return _validate(_env_overrides(env))


def load(path: Path | str, environ: Mapping[str, str] | None = None) -> ClientConfig:
    """YAML 設定ファイルを読み込み、環境変数で上書きして ClientConfig を返す。"""
    env = os.environ if environ is None else environ
    data = _merge(_read_yaml(Path(path)), _env_overrides(env))
    return _validate(data)
