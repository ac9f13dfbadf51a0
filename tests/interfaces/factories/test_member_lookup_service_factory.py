"""MemberLookupServiceFactory のテスト."""

from repfinder.infrastructure.cache.ttl_cache import TTLCache
from repfinder.infrastructure.config.settings import Settings
from repfinder.infrastructure.external.congress_api.service import (
    CongressMemberLookupService,
)
from repfinder.infrastructure.external.mock_member_lookup_service import (
    MockMemberLookupService,
)
from repfinder.interfaces.factories.member_lookup_service_factory import (
    MemberLookupServiceFactory,
)


def _make_settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[arg-type]


class TestCreate:
    """create のテスト."""

    def test_default_mode_is_mock(self) -> None:
        service = MemberLookupServiceFactory.create(_make_settings())

        assert isinstance(service, MockMemberLookupService)

    def test_unknown_mode_falls_back_to_mock(self) -> None:
        service = MemberLookupServiceFactory.create(_make_settings(mode="staging"))

        assert isinstance(service, MockMemberLookupService)

    def test_real_mode(self) -> None:
        service = MemberLookupServiceFactory.create(
            _make_settings(mode="REAL", congress_api_key="k")
        )

        assert isinstance(service, CongressMemberLookupService)

    def test_real_mode_uses_injected_cache(self) -> None:
        cache: TTLCache = TTLCache()

        service = MemberLookupServiceFactory.create(
            _make_settings(mode="real", member_cache_ttl_seconds=60), cache=cache
        )

        assert isinstance(service, CongressMemberLookupService)
        assert service._cache is cache
        assert service._cache_ttl == 60
