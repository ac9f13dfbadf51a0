"""Congress.gov APIレスポンスのデコーダー.

Congress.gov はデータ配列を "members" "bills" などエンドポイントごとに異なる
キー名で返す。"request" "pagination" などのメタデータキーを除外し、
値が配列である最初のキーをデータ配列として扱う。
配列以外の未知フィールド（スカラーやオブジェクト）は読み飛ばす。
"""

from __future__ import annotations

import json
import logging

from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import SchemaError
from .types import ApiMember


logger = logging.getLogger(__name__)

# データ配列ではない既知のメタデータキー
METADATA_KEYS: frozenset[str] = frozenset({"request", "pagination"})

_MEMBER_LIST_ADAPTER = TypeAdapter(list[ApiMember])


def find_data_key(document: dict[str, Any]) -> str | None:
    """メタデータキーを除き、値が配列である最初のキー名を返す.

    JSONオブジェクトの出現順で判定するため結果は決定的。
    """
    for key, value in document.items():
        if key in METADATA_KEYS:
            continue
        if isinstance(value, list):
            return key
    return None


def decode_members(raw: bytes | str) -> list[ApiMember]:
    """APIレスポンスのバイト列から member レコード配列を取り出す.

    Raises:
        SchemaError: JSONとして不正、データキーが存在しない、
            またはデータ配列がレコード形式に変換できない場合
    """
    try:
        document = json.loads(raw)
    except ValueError as e:
        raise SchemaError(f"不正なJSON構造です: {e}") from e

    if not isinstance(document, dict):
        raise SchemaError("トップレベルがJSONオブジェクトではありません")

    key = find_data_key(document)
    if key is None:
        raise SchemaError("APIレスポンスにデータ配列が見つかりません")

    try:
        members = _MEMBER_LIST_ADAPTER.validate_python(document[key])
    except ValidationError as e:
        raise SchemaError(
            f"キー '{key}' のデータをmemberレコードに変換できません: {e}"
        ) from e

    logger.debug("キー '%s' から %d 件のレコードをデコードしました", key, len(members))
    return members
