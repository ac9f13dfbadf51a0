"""
Configuration module for repfinder.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from repfinder.infrastructure.config.logging_config import setup_logging
from repfinder.infrastructure.config.sentry import capture_exception, init_sentry
from repfinder.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
    settings,
)


__all__ = [
    # Settings
    "Settings",
    "settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
    # Logging
    "setup_logging",
    # Sentry
    "init_sentry",
    "capture_exception",
]
