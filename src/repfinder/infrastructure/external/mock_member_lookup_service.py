"""開発・デモ用のモック議員データソース.

実在しない議員の固定データを返す。キャッシュは使用しない。
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from repfinder.domain.entities.member import Member
from repfinder.domain.value_objects.jurisdiction import normalize_jurisdiction_code


MOCK_MEMBERS: Mapping[str, tuple[Member, ...]] = MappingProxyType(
    {
        "NY": (
            Member("rep-ny-1", "Alex", "Johnson", "(D)", "District 1 Rep."),
            Member("rep-ny-2", "Riley", "Martinez", "(R)", "District 2 Rep."),
        ),
        "CA": (
            Member("rep-ca-12", "Morgan", "Lee", "(D)", "District 12 Rep."),
            Member("rep-ca-14", "Taylor", "Nguyen", "(D)", "District 14 Rep."),
        ),
        "TX": (Member("rep-tx-7", "Sam", "Williams", "(R)", "District 7 Rep."),),
        "DC": (Member("del-dc", "Jamie", "Green", "(I)", "At-Large Rep."),),
    }
)


class MockMemberLookupService:
    """IMemberLookupService のモック実装."""

    def __init__(self, data: Mapping[str, tuple[Member, ...]] = MOCK_MEMBERS) -> None:
        self._data = data

    async def lookup(self, code: str) -> list[Member]:
        """固定データから州コードに対応する議員を返す。該当なしは空リスト."""
        return list(self._data.get(normalize_jurisdiction_code(code), ()))
