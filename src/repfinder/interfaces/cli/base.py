"""CLIコマンド共通処理."""

import functools
import logging

from collections.abc import Callable
from typing import Any, TypeVar

import click

from repfinder.application.usecases.get_representatives_usecase import (
    InvalidJurisdictionCodeError,
    RepresentativeLookupError,
)


F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def with_error_handling(func: F) -> F:
    """既知のエラーをユーザー向けメッセージに変換して終了コードを設定する."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except InvalidJurisdictionCodeError as e:
            raise click.UsageError(str(e)) from e
        except RepresentativeLookupError as e:
            raise click.ClickException(str(e)) from e
        except KeyboardInterrupt:
            click.echo("\n中断しました", err=True)
            raise SystemExit(130) from None

    return wrapper  # type: ignore[return-value]
