"""GetRepresentativesUseCase のユニットテスト."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from repfinder.application.dtos.representatives_dto import GetRepresentativesInputDTO
from repfinder.application.usecases.get_representatives_usecase import (
    GetRepresentativesUseCase,
    InvalidJurisdictionCodeError,
    RepresentativeLookupError,
)
from repfinder.domain.entities.member import Member
from repfinder.infrastructure.external.congress_api.errors import (
    ConfigError,
    SchemaError,
    TransportError,
    UpstreamError,
)


_USECASE_PATH = "repfinder.application.usecases.get_representatives_usecase"


@pytest.fixture()
def lookup_service() -> AsyncMock:
    """モック議員検索サービスを生成."""
    return AsyncMock()


@pytest.fixture()
def usecase(lookup_service: AsyncMock) -> GetRepresentativesUseCase:
    return GetRepresentativesUseCase(lookup_service)


class TestExecute:
    """execute のテスト."""

    @pytest.mark.asyncio
    async def test_returns_members(
        self, usecase: GetRepresentativesUseCase, lookup_service: AsyncMock
    ) -> None:
        member = Member("S000148", "Charles", "Schumer", "(D)", "Senator")
        lookup_service.lookup.return_value = [member]

        result = await usecase.execute(GetRepresentativesInputDTO(state=" ny "))

        lookup_service.lookup.assert_awaited_once_with("NY")
        assert result.state == "NY"
        assert result.members == [member]
        assert result.to_list() == [member.to_dict()]

    @pytest.mark.asyncio
    async def test_blank_state_rejected(
        self, usecase: GetRepresentativesUseCase, lookup_service: AsyncMock
    ) -> None:
        with pytest.raises(InvalidJurisdictionCodeError):
            await usecase.execute(GetRepresentativesInputDTO(state="  "))

        lookup_service.lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_state_is_empty_not_error(
        self, usecase: GetRepresentativesUseCase, lookup_service: AsyncMock
    ) -> None:
        lookup_service.lookup.return_value = []

        result = await usecase.execute(GetRepresentativesInputDTO(state="ZZ"))

        assert result.members == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            ConfigError("CONGRESS_API_KEY missing"),
            TransportError("down", attempts=3),
            UpstreamError(503, "secret upstream detail"),
            SchemaError("no data key"),
        ],
    )
    async def test_api_errors_become_generic(
        self,
        usecase: GetRepresentativesUseCase,
        lookup_service: AsyncMock,
        error: Exception,
    ) -> None:
        """エラー種別は呼び出し元に公開せず汎用エラーに変換する."""
        lookup_service.lookup.side_effect = error

        with patch(f"{_USECASE_PATH}.capture_exception") as mock_capture:
            with pytest.raises(RepresentativeLookupError) as exc_info:
                await usecase.execute(GetRepresentativesInputDTO(state="NY"))

        assert "secret upstream detail" not in str(exc_info.value)
        assert exc_info.value.__cause__ is error
        mock_capture.assert_called_once_with(error)

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(
        self, usecase: GetRepresentativesUseCase, lookup_service: AsyncMock
    ) -> None:
        lookup_service.lookup.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await usecase.execute(GetRepresentativesInputDTO(state="NY"))
