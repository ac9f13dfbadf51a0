"""州・議員検索コマンド."""

from __future__ import annotations

import asyncio
import json

import click

from repfinder.interfaces.cli.base import with_error_handling


@click.command()
def states():
    """州コードと州名の一覧をJSONで表示する."""
    from repfinder.domain.value_objects.jurisdiction import list_jurisdictions

    payload = [j.to_dict() for j in list_jurisdictions()]
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@click.command()
@click.option("--state", "state", type=str, required=True, help="州コード（例: NY）")
@click.option(
    "--mode",
    type=click.Choice(["mock", "real"], case_sensitive=False),
    default=None,
    help="データソース（省略時は MODE 環境変数）",
)
@with_error_handling
def representatives(state: str, mode: str | None):
    """指定した州の現職議員をJSONで表示する."""
    payload = asyncio.run(_run_lookup(state, mode))
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


async def _run_lookup(state: str, mode: str | None) -> list[dict[str, str]]:
    from repfinder.application.dtos.representatives_dto import (
        GetRepresentativesInputDTO,
    )
    from repfinder.application.usecases.get_representatives_usecase import (
        GetRepresentativesUseCase,
    )
    from repfinder.infrastructure.config.settings import get_settings
    from repfinder.interfaces.factories.member_lookup_service_factory import (
        MemberLookupServiceFactory,
    )

    settings = get_settings()
    if mode is not None:
        settings = settings.model_copy(update={"mode": mode.lower()})

    service = MemberLookupServiceFactory.create(settings)
    usecase = GetRepresentativesUseCase(service)
    result = await usecase.execute(GetRepresentativesInputDTO(state=state))
    return result.to_list()
