"""Congress.gov APIクライアントのエラー定義."""

from __future__ import annotations


class CongressApiError(Exception):
    """Congress.gov API 連携で発生するエラーの基底クラス."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigError(CongressApiError):
    """APIキー未設定など、リトライしても解決しない設定エラー."""


class TransportError(CongressApiError):
    """リトライ上限までネットワーク障害が続いた."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class UpstreamError(CongressApiError):
    """APIが200以外のステータスを返した（リトライしない）."""

    def __init__(self, status_code: int, body_snippet: str) -> None:
        super().__init__(
            f"APIが異常ステータスを返しました: {status_code}: {body_snippet}",
            status_code=status_code,
        )
        self.body_snippet = body_snippet


class SchemaError(CongressApiError):
    """レスポンスにデータ配列が見つからない、または形式が想定と異なる."""
