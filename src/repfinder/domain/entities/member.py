"""Member entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """クライアントに返す現職議員の表示用エンティティ.

    現職（最後の任期に終了年がない）議員のみがこの形で生成される。
    """

    id: str
    first_name: str
    last_name: str
    party: str
    district: str

    def to_dict(self) -> dict[str, str]:
        """クライアント向けJSON形式（キャメルケース）に変換する."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "party": self.party,
            "district": self.district,
        }

    def __str__(self) -> str:
        parts = [p for p in (self.first_name, self.last_name, self.party) if p]
        return f"{' '.join(parts)} - {self.district}"
