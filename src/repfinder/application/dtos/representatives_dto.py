"""州別議員検索関連のDTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from repfinder.domain.entities.member import Member


@dataclass
class GetRepresentativesInputDTO:
    """議員検索入力DTO."""

    # 州コード（"ny" のような小文字・前後空白も許容）
    state: str


@dataclass
class GetRepresentativesOutputDTO:
    """議員検索出力DTO."""

    state: str
    members: list[Member] = field(default_factory=list)

    def to_list(self) -> list[dict[str, str]]:
        """クライアント向けJSON配列に変換する."""
        return [m.to_dict() for m in self.members]
