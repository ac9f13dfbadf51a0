"""州別議員検索サービスのインターフェース."""

from __future__ import annotations

from typing import Protocol

from repfinder.domain.entities.member import Member


class IMemberLookupService(Protocol):
    """州コードから現職議員一覧を取得するサービスのインターフェース.

    ライブAPI実装とモック実装がこのインターフェースを共有する。
    """

    async def lookup(self, code: str) -> list[Member]:
        """州コードに対応する現職議員を返す.

        未知の州コードはエラーではなく空リストを返す。
        """
        ...
