"""Sentry 初期化のテスト."""

from unittest.mock import patch

from repfinder.infrastructure.config.sentry import capture_exception, init_sentry
from repfinder.infrastructure.config.settings import Settings


_SDK_PATH = "repfinder.infrastructure.config.sentry.sentry_sdk"


class TestInitSentry:
    def test_disabled_without_dsn(self) -> None:
        with patch(_SDK_PATH) as mock_sdk:
            assert init_sentry(Settings(_env_file=None, sentry_dsn="")) is False

        mock_sdk.init.assert_not_called()

    def test_initializes_with_dsn(self) -> None:
        settings = Settings(
            _env_file=None, sentry_dsn="https://key@example.invalid/1", mode="real"
        )

        with patch(_SDK_PATH) as mock_sdk:
            assert init_sentry(settings) is True

        kwargs = mock_sdk.init.call_args.kwargs
        assert kwargs["dsn"] == "https://key@example.invalid/1"
        assert kwargs["environment"] == "real"
        assert kwargs["send_default_pii"] is False


def test_capture_exception_forwards_to_sdk() -> None:
    error = RuntimeError("boom")

    with patch(_SDK_PATH) as mock_sdk:
        capture_exception(error)

    mock_sdk.capture_exception.assert_called_once_with(error)
