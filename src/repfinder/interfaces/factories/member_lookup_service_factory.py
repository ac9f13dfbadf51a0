"""議員検索サービスファクトリー

MODE 設定に基づいてライブAPI実装またはモック実装を提供します。
起動時に一度だけ選択し、以降は同じインスタンスを使い回します。
"""

import logging

from repfinder.domain.services.interfaces.member_lookup_service import (
    IMemberLookupService,
)
from repfinder.infrastructure.cache.ttl_cache import TTLCache
from repfinder.infrastructure.config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


class MemberLookupServiceFactory:
    """議員検索サービスファクトリー"""

    @staticmethod
    def create(
        settings: Settings | None = None,
        cache: TTLCache | None = None,
    ) -> IMemberLookupService:
        """設定に基づいてサービスを作成

        Args:
            settings: 省略時は get_settings() を使用
            cache: ライブAPI実装に注入するキャッシュ（省略時は新規作成）

        Returns:
            IMemberLookupService: MODE=real ならライブAPI実装、それ以外はモック実装
        """
        settings = settings or get_settings()

        if settings.is_real_mode():
            logger.info("Creating Congress.gov member lookup service")
            from repfinder.infrastructure.external.congress_api.client import (
                CongressApiClient,
            )
            from repfinder.infrastructure.external.congress_api.service import (
                CongressMemberLookupService,
            )

            client = CongressApiClient(
                api_key=settings.congress_api_key,
                base_url=settings.congress_api_base_url,
                timeout=settings.request_timeout_seconds,
            )
            return CongressMemberLookupService(
                client=client,
                cache=cache if cache is not None else TTLCache(),
                fetch_limit=settings.member_fetch_limit,
                cache_ttl=settings.member_cache_ttl_seconds,
            )

        logger.info("Creating mock member lookup service (MODE=%s)", settings.mode)
        from repfinder.infrastructure.external.mock_member_lookup_service import (
            MockMemberLookupService,
        )

        return MockMemberLookupService()
