"""IMemberLookupService のインフラストラクチャ実装.

CongressApiClient をラップし、キャッシュ確認 → API取得 → デコード →
州名フィルタ → 現職議員への変換 → キャッシュ保存 を行う。
"""

from __future__ import annotations

import logging

from repfinder.domain.entities.member import Member
from repfinder.domain.value_objects.jurisdiction import (
    get_jurisdiction_name,
    normalize_jurisdiction_code,
)
from repfinder.infrastructure.cache.ttl_cache import TTLCache
from repfinder.infrastructure.external.congress_api.client import CongressApiClient
from repfinder.infrastructure.external.congress_api.converter import (
    CongressMemberConverter,
)
from repfinder.infrastructure.external.congress_api.decoder import decode_members


logger = logging.getLogger(__name__)

MemberCache = TTLCache[tuple[Member, ...]]


class CongressMemberLookupService:
    """IMemberLookupService の具象実装（Congress.gov ライブデータ）."""

    DEFAULT_FETCH_LIMIT = 75
    DEFAULT_CACHE_TTL_SECONDS = 3600.0

    def __init__(
        self,
        client: CongressApiClient | None = None,
        cache: MemberCache | None = None,
        *,
        fetch_limit: int = DEFAULT_FETCH_LIMIT,
        cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        self._client = client or CongressApiClient()
        self._cache: MemberCache = cache if cache is not None else TTLCache()
        self._fetch_limit = fetch_limit
        self._cache_ttl = cache_ttl

    async def lookup(self, code: str) -> list[Member]:
        """州コードに対応する現職議員を返す.

        取得・デコードのエラーはそのまま送出し、キャッシュは更新しない。
        """
        code = normalize_jurisdiction_code(code)
        state_name = get_jurisdiction_name(code)
        if state_name is None:
            logger.info("未知の州コードのため空リストを返します: %s", code)
            return []

        cached, found = self._cache.get(code)
        if found and cached is not None:
            logger.debug("キャッシュヒット: %s (%d件)", code, len(cached))
            return list(cached)

        logger.debug("キャッシュミス: %s", code)
        raw = await self._client.fetch(
            f"/member/{code}",
            {"format": "json", "limit": str(self._fetch_limit)},
        )
        api_members = decode_members(raw)

        members: list[Member] = []
        for api_member in api_members:
            if api_member.state != state_name:
                continue
            member = CongressMemberConverter.to_member(api_member)
            if member is not None:
                members.append(member)

        self._cache.set(code, tuple(members), self._cache_ttl)
        logger.info(
            "%s の現職議員を %d 件取得しました（API %d 件）",
            code,
            len(members),
            len(api_members),
        )
        return members
