"""Congress.gov v3 APIクライアント.

httpx asyncベースのHTTPクライアント。APIキーをクエリに付与し、
ネットワーク障害のみ線形バックオフでリトライする。
"""

from __future__ import annotations

import asyncio
import logging

from typing import Any

import httpx

from repfinder.infrastructure.config.settings import get_settings

from .errors import ConfigError, TransportError, UpstreamError


logger = logging.getLogger(__name__)


class CongressApiClient:
    """Congress.gov v3 APIクライアント (httpx async)."""

    BASE_URL = "https://api.congress.gov/v3"
    MAX_ATTEMPTS = 3
    RETRY_BACKOFF_SECONDS = 0.5
    REQUEST_TIMEOUT_SECONDS = 15.0
    # エラー時に保持するレスポンス本文の上限
    MAX_ERROR_BODY_BYTES = 2048

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        max_attempts: int = MAX_ATTEMPTS,
        retry_backoff: float = RETRY_BACKOFF_SECONDS,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._external_client = client
        self._owns_client = client is None
        self._api_key = api_key
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._max_attempts = max_attempts
        self._retry_backoff = retry_backoff
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTPクライアントを取得（外部注入 or 自動生成）."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout)

    def _resolve_api_key(self) -> str:
        """APIキーを解決する。未設定ならリトライせず即座に失敗."""
        key = self._api_key or get_settings().congress_api_key
        if not key:
            raise ConfigError(
                "CONGRESS_API_KEY 環境変数が設定されていません"
                "（api.data.gov でキーを取得してください）"
            )
        return key

    def build_url(self, path: str) -> str:
        """ベースURLとパスを結合する."""
        return f"{self._base_url}/{path.lstrip('/')}"

    async def fetch(self, path: str, params: dict[str, Any] | None = None) -> bytes:
        """GETリクエストを実行しレスポンス本文をそのまま返す.

        Args:
            path: "/member/NY" のようなエンドポイントパス
            params: APIキー以外のクエリパラメータ

        Raises:
            ConfigError: APIキー未設定
            TransportError: 全試行がネットワーク障害で失敗
            UpstreamError: 200以外のステータス（リトライしない）
        """
        api_key = self._resolve_api_key()
        query: dict[str, Any] = dict(params or {})
        query["api_key"] = api_key
        url = self.build_url(path)

        client = await self._get_client()
        try:
            response = await self._send_with_retry(client, url, query)
        finally:
            if self._owns_client:
                await client.aclose()

        if response.status_code != httpx.codes.OK:
            snippet = response.content[: self.MAX_ERROR_BODY_BYTES].decode(
                "utf-8", errors="replace"
            )
            logger.error(
                "APIが異常ステータスを返しました: %s %d", path, response.status_code
            )
            raise UpstreamError(response.status_code, snippet)

        return response.content

    async def _send_with_retry(
        self, client: httpx.AsyncClient, url: str, query: dict[str, Any]
    ) -> httpx.Response:
        """ネットワーク障害時のみ線形バックオフでリトライする."""
        for attempt in range(1, self._max_attempts):
            try:
                return await client.get(url, params=query, timeout=self._timeout)
            except httpx.TransportError as e:
                delay = self._retry_backoff * attempt
                logger.warning(
                    "HTTPリクエスト失敗 (%d/%d回目), %.1f秒後にリトライ: %s",
                    attempt,
                    self._max_attempts,
                    delay,
                    e,
                )
                await asyncio.sleep(delay)

        try:
            return await client.get(url, params=query, timeout=self._timeout)
        except httpx.TransportError as e:
            raise TransportError(
                f"HTTPリクエストが{self._max_attempts}回失敗しました: {e}",
                attempts=self._max_attempts,
            ) from e
