"""ロギング設定."""

import logging


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """ルートロガーを一度だけ設定する.

    2回目以降の呼び出しではレベルのみ更新する。
    """
    global _configured
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    if not _configured:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
        # httpx はリクエストごとにINFOを出すため抑制
        logging.getLogger("httpx").setLevel(logging.WARNING)
        _configured = True
    else:
        logging.getLogger().setLevel(numeric_level)
