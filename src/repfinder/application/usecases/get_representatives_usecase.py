"""州別議員検索ユースケース.

ルーティング層（CLI / HTTP）と議員検索サービスの境界。
エラー種別は内部ログとSentryにのみ残し、呼び出し元には汎用エラーを返す。
"""

from __future__ import annotations

import logging

from repfinder.application.dtos.representatives_dto import (
    GetRepresentativesInputDTO,
    GetRepresentativesOutputDTO,
)
from repfinder.domain.services.interfaces.member_lookup_service import (
    IMemberLookupService,
)
from repfinder.domain.value_objects.jurisdiction import normalize_jurisdiction_code
from repfinder.infrastructure.config.sentry import capture_exception
from repfinder.infrastructure.external.congress_api.errors import CongressApiError


logger = logging.getLogger(__name__)


class InvalidJurisdictionCodeError(ValueError):
    """州コードが空."""


class RepresentativeLookupError(Exception):
    """議員検索に失敗した（詳細は呼び出し元に公開しない）."""


class GetRepresentativesUseCase:
    """州コードから現職議員一覧を取得するユースケース."""

    def __init__(self, lookup_service: IMemberLookupService) -> None:
        self._lookup_service = lookup_service

    async def execute(
        self, input_dto: GetRepresentativesInputDTO
    ) -> GetRepresentativesOutputDTO:
        """州コードを正規化して検索する.

        Raises:
            InvalidJurisdictionCodeError: 州コードが空
            RepresentativeLookupError: 外部API連携に失敗
        """
        state = normalize_jurisdiction_code(input_dto.state)
        if not state:
            raise InvalidJurisdictionCodeError(
                "missing required 'state' query parameter (e.g. ?state=NY)"
            )

        try:
            members = await self._lookup_service.lookup(state)
        except CongressApiError as e:
            logger.error(
                "州 %s の議員取得に失敗しました (%s): %s", state, type(e).__name__, e
            )
            capture_exception(e)
            raise RepresentativeLookupError(
                "internal server error while fetching representatives"
            ) from e

        return GetRepresentativesOutputDTO(state=state, members=members)
