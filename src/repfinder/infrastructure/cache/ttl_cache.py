"""スレッドセーフなインメモリTTLキャッシュ.

期限切れは読み出し時にのみ判定し、能動的な削除は行わない。
エントリは常に丸ごと差し替えるため、読み出し側が書き込み途中の
状態を観測することはない。
"""

from __future__ import annotations

import threading
import time

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar


V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """キャッシュ値と有効期限（clock基準の絶対時刻）."""

    value: V
    expires_at: float


class TTLCache(Generic[V]):
    """キーごとに有効期限付きで値を保持するキャッシュ."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._items: dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> tuple[V | None, bool]:
        """値を取得する.

        Returns:
            (値, 存在フラグ)。未設定または期限切れの場合は (None, False)。
        """
        with self._lock:
            entry = self._items.get(key)
        if entry is None or self._clock() >= entry.expires_at:
            return None, False
        return entry.value, True

    def set(self, key: str, value: V, ttl: float) -> None:
        """値をTTL（秒）付きで保存する。既存エントリは差し替える."""
        entry = CacheEntry(value=value, expires_at=self._clock() + ttl)
        with self._lock:
            self._items[key] = entry

    def __len__(self) -> int:
        """期限切れを含む保持エントリ数."""
        with self._lock:
            return len(self._items)
