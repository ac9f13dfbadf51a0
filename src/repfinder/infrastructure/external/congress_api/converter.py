"""Congress.gov APIレスポンスをドメインエンティティに変換するコンバーター.

純粋な変換ロジックのみ担当。現職判定・氏名分割・政党/選挙区ラベル生成を行う。
"""

from __future__ import annotations

from repfinder.domain.entities.member import Member

from .types import ApiMember, ApiTerm


# 主要政党の略称ラベル
_PARTY_LABELS: dict[str, str] = {
    "Democratic": "(D)",
    "Republican": "(R)",
    "Independent": "(I)",
    "Libertarian": "(L)",
    "Green": "(G)",
}

SENATE_CHAMBER = "Senate"
SENATOR_LABEL = "Senator"
AT_LARGE_LABEL = "At-Large Rep."


class CongressMemberConverter:
    """Congress.gov member レコードの純粋変換ロジック."""

    @staticmethod
    def current_term(member: ApiMember) -> ApiTerm | None:
        """現職であれば最後の任期を返す.

        リスト順で最後の任期に終了年がなければ現職とみなす。
        それより前の任期の終了年は判定に使わない。
        """
        if not member.terms.item:
            return None
        last_term = member.terms.item[-1]
        if last_term.end_year is not None:
            return None
        return last_term

    @staticmethod
    def split_name(name: str) -> tuple[str, str]:
        """"Last, First Middle" 形式の氏名を (名, 姓) に分割する.

        カンマがない場合は全体を姓とし、名は空文字にする。
        """
        last, sep, rest = name.partition(",")
        if not sep:
            return "", name.strip()
        tokens = rest.split()
        first = tokens[0] if tokens else ""
        return first, last.strip()

    @staticmethod
    def format_party(party_name: str) -> str:
        """政党名を "(D)" のような表示ラベルに変換する.

        例: "Democratic" → "(D)", "Conservative" → "(Conservative)", "" → ""
        """
        if party_name in _PARTY_LABELS:
            return _PARTY_LABELS[party_name]
        if party_name:
            return f"({party_name})"
        return ""

    @staticmethod
    def format_district(district: int, chamber: str) -> str:
        """選挙区番号と院名から役職ラベルを生成する.

        例: (0, "Senate") → "Senator", (0, "House") → "At-Large Rep.",
        (5, "House") → "District 5 Rep."
        """
        if district == 0:
            if chamber.casefold() == SENATE_CHAMBER.casefold():
                return SENATOR_LABEL
            return AT_LARGE_LABEL
        return f"District {district} Rep."

    @staticmethod
    def to_member(member: ApiMember) -> Member | None:
        """API member → Member エンティティに変換する.

        現職でない（任期なし、または最後の任期に終了年がある）場合は None。
        """
        term = CongressMemberConverter.current_term(member)
        if term is None:
            return None

        first_name, last_name = CongressMemberConverter.split_name(member.name)
        return Member(
            id=member.bioguide_id,
            first_name=first_name,
            last_name=last_name,
            party=CongressMemberConverter.format_party(member.party_name),
            district=CongressMemberConverter.format_district(
                member.district, term.chamber
            ),
        )
