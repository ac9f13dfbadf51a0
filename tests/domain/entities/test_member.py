"""Member エンティティのテスト."""

import dataclasses

import pytest

from repfinder.domain.entities.member import Member


class TestMember:
    """Member のテスト."""

    def test_to_dict_uses_camel_case(self) -> None:
        member = Member("S000148", "Charles", "Schumer", "(D)", "Senator")

        assert member.to_dict() == {
            "id": "S000148",
            "firstName": "Charles",
            "lastName": "Schumer",
            "party": "(D)",
            "district": "Senator",
        }

    def test_str(self) -> None:
        member = Member("S000148", "Charles", "Schumer", "(D)", "Senator")

        assert str(member) == "Charles Schumer (D) - Senator"

    def test_str_without_first_name_and_party(self) -> None:
        member = Member("X000001", "", "Smith", "", "At-Large Rep.")

        assert str(member) == "Smith - At-Large Rep."

    def test_immutable(self) -> None:
        member = Member("S000148", "Charles", "Schumer", "(D)", "Senator")

        with pytest.raises(dataclasses.FrozenInstanceError):
            member.party = "(R)"  # type: ignore[misc]
