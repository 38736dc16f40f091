"""設定読み込みのユニットテスト"""

from pathlib import Path

import pytest
from jobportal_client.config import (
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    load,
    load_from_env,
    resolve_timeout_ms,
)
from jobportal_client.exceptions import ConfigError, ConfigErrorCodes


def test_defaults() -> None:
    """既定値。"""
    config = ClientConfig()
    assert config.services.user == "http://localhost:8080"
    assert config.services.profile == "http://localhost:8081"
    assert config.services.job == "http://localhost:8082"
    assert config.timeout_ms == DEFAULT_TIMEOUT_MS
    assert config.timeout_seconds == 10.0
    assert config.log.level == "INFO"


def test_resolve_timeout_ms() -> None:
    """未設定・非数値・非正値は 10000ms。"""
    assert resolve_timeout_ms(None) == 10_000
    assert resolve_timeout_ms("abc") == 10_000
    assert resolve_timeout_ms(0) == 10_000
    assert resolve_timeout_ms(-1) == 10_000
    assert resolve_timeout_ms(True) == 10_000
    assert resolve_timeout_ms("2500") == 2500
    assert resolve_timeout_ms(1500.7) == 1500


def test_load_from_env() -> None:
    """JOBPORTAL_* 環境変数から読み込むこと。"""
    config = load_from_env(
        {
            "JOBPORTAL_USER_SERVICE_URL": "http://users:9000",
            "JOBPORTAL_TIMEOUT_MS": "5000",
            "JOBPORTAL_LOG_FORMAT": "text",
            "UNRELATED": "x",
        }
    )
    assert config.services.user == "http://users:9000"
    assert config.services.job == "http://localhost:8082"
    assert config.timeout_ms == 5000
    assert config.log.format == "text"


def test_load_from_env_invalid_timeout() -> None:
    """不正なタイムアウトは既定値にフォールバックすること。"""
    assert load_from_env({"JOBPORTAL_TIMEOUT_MS": "soon"}).timeout_ms == 10_000


def test_load_yaml_with_env_override(tmp_path: Path) -> None:
    """YAML の値を環境変数が上書きすること。"""
    config_file = tmp_path / "client.yaml"
    config_file.write_text(
        "services:\n  user: http://file-user:8080\n  job: http://file-job:8082\ntimeout_ms: 3000\n"
    )
    config = load(config_file, {"JOBPORTAL_JOB_SERVICE_URL": "http://env-job:8082"})
    assert config.services.user == "http://file-user:8080"
    assert config.services.job == "http://env-job:8082"
    assert config.timeout_ms == 3000


def test_load_file_not_found(tmp_path: Path) -> None:
    """存在しないファイルで ConfigError(READ_FILE_ERROR) が発生すること。"""
    with pytest.raises(ConfigError) as exc_info:
        load(tmp_path / "missing.yaml", {})
    assert exc_info.value.code == ConfigErrorCodes.READ_FILE


def test_load_invalid_yaml(tmp_path: Path) -> None:
    """不正 YAML で ConfigError(PARSE_YAML_ERROR) が発生すること。"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("services: {invalid: yaml: content:\n")
    with pytest.raises(ConfigError) as exc_info:
        load(bad_file, {})
    assert exc_info.value.code == ConfigErrorCodes.PARSE_YAML


def test_load_validation_error(tmp_path: Path) -> None:
    """バリデーション失敗で ConfigError(VALIDATION_ERROR) が発生すること。"""
    bad_config = tmp_path / "bad_config.yaml"
    bad_config.write_text("log:\n  format: xml\n")
    with pytest.raises(ConfigError) as exc_info:
        load(bad_config, {})
    assert exc_info.value.code == ConfigErrorCodes.VALIDATION
