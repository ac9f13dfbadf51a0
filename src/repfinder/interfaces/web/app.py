"""HTTP API (FastAPI).

GET /states と GET /representatives?state=XX を提供する。
CORS はローカル開発用に GET/OPTIONS を許可する。
"""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from repfinder.application.dtos.representatives_dto import GetRepresentativesInputDTO
from repfinder.application.usecases.get_representatives_usecase import (
    GetRepresentativesUseCase,
    InvalidJurisdictionCodeError,
    RepresentativeLookupError,
)
from repfinder.domain.services.interfaces.member_lookup_service import (
    IMemberLookupService,
)
from repfinder.domain.value_objects.jurisdiction import list_jurisdictions
from repfinder.infrastructure.config.logging_config import setup_logging
from repfinder.infrastructure.config.sentry import init_sentry
from repfinder.infrastructure.config.settings import Settings, get_settings
from repfinder.interfaces.factories.member_lookup_service_factory import (
    MemberLookupServiceFactory,
)


logger = logging.getLogger(__name__)


def get_usecase(request: Request) -> GetRepresentativesUseCase:
    """アプリ起動時に選択したサービスでユースケースを組み立てる."""
    return GetRepresentativesUseCase(request.app.state.lookup_service)


def create_app(
    service: IMemberLookupService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """FastAPIアプリを作成する.

    Args:
        service: 議員検索サービス（省略時は設定の MODE に従いファクトリーで作成）
        settings: 省略時は get_settings() を使用
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    init_sentry(settings)

    app = FastAPI(title="repfinder")
    app.state.lookup_service = service or MemberLookupServiceFactory.create(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.get("/states")
    async def get_states() -> list[dict[str, str]]:
        return [j.to_dict() for j in list_jurisdictions()]

    @app.get("/representatives")
    async def get_representatives(
        state: str | None = Query(default=None),
        usecase: GetRepresentativesUseCase = Depends(get_usecase),
    ) -> list[dict[str, str]]:
        try:
            result = await usecase.execute(GetRepresentativesInputDTO(state=state or ""))
        except InvalidJurisdictionCodeError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        except RepresentativeLookupError as e:
            raise HTTPException(status_code=500, detail=str(e)) from e
        return result.to_list()

    logger.info("HTTP API を作成しました (MODE=%s)", settings.mode)
    return app
