"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LogSection

LOGGER_NAME = "jobportal_client"


def _renderer(format: str) -> list[structlog.types.Processor]:
    if format == "json":
        return [structlog.processors.StackInfoRenderer(), structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer()]


def _attach_handler(log_level: int) -> logging.Logger:
    """ライブラリ名前空間の stdlib ロガーに出力先を 1 つだけ付ける。"""
    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(log_level)
    if not any(getattr(h, "_jobportal", False) for h in base.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._jobportal = True  # type: ignore[attr-defined]
        base.addHandler(handler)
    return base


def new_logger(level: str = "INFO", format: str = "json") -> structlog.stdlib.BoundLogger:
    """jobportal_client 配下のロガーを構成し、ルートのロガーを返す。

    出力先とレベルは "jobportal_client" 名前空間にだけ設定するため、
    ホストアプリケーションのルートロガー設定には触れない。
    再度呼び出すと、既存のモジュールロガーにも新しい設定が反映される。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    _attach_handler(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return structlog.stdlib.get_logger(LOGGER_NAME)


def configure_logging(section: LogSection) -> structlog.stdlib.BoundLogger:
    """設定セクションの level / format でロガーを構成する。"""
    return new_logger(level=section.level, format=section.format)
