"""repfinder CLI エントリーポイント."""

import click

from repfinder.infrastructure.config.logging_config import setup_logging
from repfinder.infrastructure.config.sentry import init_sentry
from repfinder.infrastructure.config.settings import get_settings
from repfinder.interfaces.cli.commands.representatives import (
    representatives,
    states,
)


@click.group()
@click.option("--log-level", type=str, default=None, help="ログレベル（例: DEBUG）")
def cli(log_level: str | None):
    """Congress.gov 現職議員検索ツール."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)
    init_sentry(settings)


@cli.command()
@click.option("--host", type=str, default="127.0.0.1", help="バインドするホスト")
@click.option("--port", type=int, default=8080, help="ポート番号")
def serve(host: str, port: int):
    """HTTP API サーバーを起動する."""
    import uvicorn

    from repfinder.interfaces.web.app import create_app

    uvicorn.run(create_app(), host=host, port=port)


cli.add_command(states)
cli.add_command(representatives)


if __name__ == "__main__":
    cli()
