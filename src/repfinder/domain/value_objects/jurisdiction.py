"""州コードと州名の対応表."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Jurisdiction:
    """州（またはDC）を表す値オブジェクト."""

    code: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name}


# 50州 + コロンビア特別区。表示順を保持する
_JURISDICTIONS: tuple[Jurisdiction, ...] = (
    Jurisdiction("AL", "Alabama"),
    Jurisdiction("AK", "Alaska"),
    Jurisdiction("AZ", "Arizona"),
    Jurisdiction("AR", "Arkansas"),
    Jurisdiction("CA", "California"),
    Jurisdiction("CO", "Colorado"),
    Jurisdiction("CT", "Connecticut"),
    Jurisdiction("DE", "Delaware"),
    Jurisdiction("FL", "Florida"),
    Jurisdiction("GA", "Georgia"),
    Jurisdiction("HI", "Hawaii"),
    Jurisdiction("ID", "Idaho"),
    Jurisdiction("IL", "Illinois"),
    Jurisdiction("IN", "Indiana"),
    Jurisdiction("IA", "Iowa"),
    Jurisdiction("KS", "Kansas"),
    Jurisdiction("KY", "Kentucky"),
    Jurisdiction("LA", "Louisiana"),
    Jurisdiction("ME", "Maine"),
    Jurisdiction("MD", "Maryland"),
    Jurisdiction("MA", "Massachusetts"),
    Jurisdiction("MI", "Michigan"),
    Jurisdiction("MN", "Minnesota"),
    Jurisdiction("MS", "Mississippi"),
    Jurisdiction("MO", "Missouri"),
    Jurisdiction("MT", "Montana"),
    Jurisdiction("NE", "Nebraska"),
    Jurisdiction("NV", "Nevada"),
    Jurisdiction("NH", "New Hampshire"),
    Jurisdiction("NJ", "New Jersey"),
    Jurisdiction("NM", "New Mexico"),
    Jurisdiction("NY", "New York"),
    Jurisdiction("NC", "North Carolina"),
    Jurisdiction("ND", "North Dakota"),
    Jurisdiction("OH", "Ohio"),
    Jurisdiction("OK", "Oklahoma"),
    Jurisdiction("OR", "Oregon"),
    Jurisdiction("PA", "Pennsylvania"),
    Jurisdiction("RI", "Rhode Island"),
    Jurisdiction("SC", "South Carolina"),
    Jurisdiction("SD", "South Dakota"),
    Jurisdiction("TN", "Tennessee"),
    Jurisdiction("TX", "Texas"),
    Jurisdiction("UT", "Utah"),
    Jurisdiction("VT", "Vermont"),
    Jurisdiction("VA", "Virginia"),
    Jurisdiction("WA", "Washington"),
    Jurisdiction("WV", "West Virginia"),
    Jurisdiction("WI", "Wisconsin"),
    Jurisdiction("WY", "Wyoming"),
    Jurisdiction("DC", "District of Columbia"),
)

JURISDICTION_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {j.code: j.name for j in _JURISDICTIONS}
)


def normalize_jurisdiction_code(code: str) -> str:
    """州コードを前後空白除去・大文字化する."""
    return code.strip().upper()


def get_jurisdiction_name(code: str) -> str | None:
    """州コードから州名を返す。未知のコードは None."""
    return JURISDICTION_NAMES.get(normalize_jurisdiction_code(code))


def list_jurisdictions() -> list[Jurisdiction]:
    """州一覧を表示順で返す."""
    return list(_JURISDICTIONS)
