"""Sentry エラートラッキングの初期化."""

from __future__ import annotations

import logging

from typing import TYPE_CHECKING

import sentry_sdk


if TYPE_CHECKING:
    from repfinder.infrastructure.config.settings import Settings


logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> bool:
    """DSN が設定されていれば Sentry を初期化する.

    Returns:
        初期化した場合 True。DSN 未設定なら何もせず False。
    """
    if not settings.sentry_dsn:
        logger.debug("SENTRY_DSN が未設定のため Sentry を無効化します")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.mode,
        traces_sample_rate=0.0,
        send_default_pii=False,
    )
    logger.info("Sentry を初期化しました (environment=%s)", settings.mode)
    return True


def capture_exception(error: BaseException) -> None:
    """例外を Sentry に送信する（未初期化時は何もしない）."""
    sentry_sdk.capture_exception(error)
