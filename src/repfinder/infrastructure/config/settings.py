"""アプリケーション設定.

環境変数と .env ファイルから設定を読み込む唯一のエントリーポイント。
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file() -> Path | None:
    """カレントディレクトリから上位に向かって .env を探す."""
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """repfinder の設定."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Congress.gov API
    congress_api_key: str | None = Field(
        default=None,
        validation_alias="CONGRESS_API_KEY",
        description="api.data.gov で発行したAPIキー",
    )
    congress_api_base_url: str = Field(
        default="https://api.congress.gov/v3",
        validation_alias="CONGRESS_API_BASE_URL",
    )
    request_timeout_seconds: float = Field(
        default=15.0, gt=0, validation_alias="REQUEST_TIMEOUT_SECONDS"
    )
    member_fetch_limit: int = Field(
        default=75, ge=1, le=250, validation_alias="MEMBER_FETCH_LIMIT"
    )
    member_cache_ttl_seconds: float = Field(
        default=3600.0, gt=0, validation_alias="MEMBER_CACHE_TTL_SECONDS"
    )

    # 動作モード: "real" 以外はすべてモックデータ
    mode: str = Field(default="mock", validation_alias="MODE")

    # 運用
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    sentry_dsn: str | None = Field(default=None, validation_alias="SENTRY_DSN")
    cors_allowed_origins: str = Field(
        default="*", validation_alias="CORS_ALLOWED_ORIGINS"
    )

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v: object) -> str:
        if v is None:
            return "mock"
        return str(v).strip().lower()

    @field_validator("congress_api_key", "sentry_dsn", mode="before")
    @classmethod
    def _blank_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_real_mode(self) -> bool:
        """ライブAPIを使用するモードかどうか."""
        return self.mode == "real"

    def get_cors_origins(self) -> list[str]:
        """CORS許可オリジンをリストで返す."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """プロセス内で共有する設定インスタンスを返す."""
    return Settings()


def reload_settings() -> Settings:
    """キャッシュを破棄して設定を読み直す."""
    global settings
    get_settings.cache_clear()
    settings = get_settings()
    return settings


settings = get_settings()
