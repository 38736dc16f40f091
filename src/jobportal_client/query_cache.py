"""読み取りクエリのキャッシュとミューテーションによる無効化"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, Sequence, TypeVar, Union

import structlog

T = TypeVar("T")

QueryKey = tuple[Any, ...]
KeyLike = Union[QueryKey, list[Any], str]
Invalidations = Union[Sequence[KeyLike], Callable[..., Iterable[KeyLike]]]

logger = structlog.get_logger(__name__)


def normalize_key(key: KeyLike) -> QueryKey:
    """リスト・文字列のキーをタプルに揃える。"""
    if isinstance(key, tuple):
        return key
    if isinstance(key, list):
        return tuple(key)
    return (key,)


def key_matches(key: QueryKey, prefix: QueryKey) -> bool:
    """key が prefix で始まるか（前方一致）。"""
    return key[: len(prefix)] == prefix


class _QueryEntry:
    __slots__ = ("value", "fetched_at", "stale")

    def __init__(self, value: Any, stale: bool = False) -> None:
        self.value = value
        self.fetched_at = time.monotonic()
        self.stale = stale

    def is_fresh(self, stale_time: float | None) -> bool:
        if self.stale:
            return False
        if stale_time is None:
            return True
        return time.monotonic() - self.fetched_at < stale_time


@dataclass(frozen=True)
class Mutation(Generic[T]):
    """書き込み操作と、成功時に無効化するクエリキーの宣言。

    invalidates はキーの列、または mutate に渡した引数からキーの列を返す関数。
    """

    fn: Callable[..., Awaitable[T]]
    invalidates: Invalidations = ()
    on_success: Callable[..., None] | None = None

    def invalidation_keys(self, *args: Any, **kwargs: Any) -> list[QueryKey]:
        keys = self.invalidates(*args, **kwargs) if callable(self.invalidates) else self.invalidates
        return [normalize_key(k) for k in keys]


class QueryClient:
    """クエリキー単位で最後に成功した応答を保持するキャッシュ。

    stale_time が None のエントリは無効化されるまで新鮮とみなす。
    同一キーへの同時取得は 1 回の呼び出しにまとめる。失敗はキャッシュしない。
    """

    def __init__(self, default_stale_time: float | None = None) -> None:
        self._default_stale_time = default_stale_time
        self._entries: dict[QueryKey, _QueryEntry] = {}
        self._generations: dict[QueryKey, int] = {}
        self._in_flight: dict[QueryKey, asyncio.Future[Any]] = {}
        self._epoch = 0

    async def fetch_query(
        self,
        key: KeyLike,
        fn: Callable[[], Awaitable[T]],
        *,
        stale_time: float | None = None,
    ) -> T:
        """キャッシュが新鮮ならそれを返し、そうでなければ fn で取得して保存する。"""
        qkey = normalize_key(key)
        ttl = stale_time if stale_time is not None else self._default_stale_time
        entry = self._entries.get(qkey)
        if entry is not None and entry.is_fresh(ttl):
            return entry.value

        task = self._in_flight.get(qkey)
        if task is None:
            task = asyncio.ensure_future(
                self._fetch(qkey, fn, self._epoch, self._generations.get(qkey, 0))
            )
            self._in_flight[qkey] = task
            task.add_done_callback(lambda t, k=qkey: self._finish(k, t))
        return await task

    async def _fetch(
        self,
        key: QueryKey,
        fn: Callable[[], Awaitable[T]],
        epoch: int,
        generation: int,
    ) -> T:
        logger.debug("query.fetch", key=key)
        value = await fn()
        if epoch != self._epoch:
            # clear() 後に完了した取得結果は保存しない
            return value
        # 取得中に無効化された場合は stale として保存し、次回の読み取りで再取得させる
        stale = self._generations.get(key, 0) != generation
        current = self._entries.get(key)
        if stale and current is not None and not current.stale:
            # 無効化後に始まった取得がすでに新しい値を保存している
            return value
        self._entries[key] = _QueryEntry(value, stale=stale)
        return value

    def _finish(self, key: QueryKey, task: asyncio.Future[Any]) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]

    def invalidate_queries(self, key: KeyLike) -> int:
        """key で始まるすべてのエントリを stale にする。無効化した件数を返す。"""
        prefix = normalize_key(key)
        count = 0
        for qkey, entry in self._entries.items():
            if key_matches(qkey, prefix):
                entry.stale = True
                count += 1
        for qkey in set(self._in_flight) | set(self._entries):
            if key_matches(qkey, prefix):
                self._generations[qkey] = self._generations.get(qkey, 0) + 1
        self._detach_in_flight(prefix)
        logger.debug("query.invalidated", key=prefix, count=count)
        return count

    def _detach_in_flight(self, prefix: QueryKey) -> None:
        # 以降の読み取りは無効化前に始まった取得に合流せず、新しく取得する
        for qkey in [k for k in self._in_flight if key_matches(k, prefix)]:
            del self._in_flight[qkey]

    def is_stale(self, key: KeyLike) -> bool:
        entry = self._entries.get(normalize_key(key))
        return entry is None or entry.stale

    def get_query_data(self, key: KeyLike) -> Any:
        entry = self._entries.get(normalize_key(key))
        return entry.value if entry is not None else None

    def set_query_data(self, key: KeyLike, value: Any) -> None:
        """キャッシュを直接更新する（ミューテーション応答の反映用）。"""
        self._entries[normalize_key(key)] = _QueryEntry(value)

    def remove_queries(self, key: KeyLike) -> int:
        prefix = normalize_key(key)
        targets = [k for k in self._entries if key_matches(k, prefix)]
        for k in targets:
            del self._entries[k]
        for k in self._in_flight:
            if key_matches(k, prefix):
                self._generations[k] = self._generations.get(k, 0) + 1
        self._detach_in_flight(prefix)
        return len(targets)

    def clear(self) -> None:
        self._entries.clear()
        self._generations.clear()
        self._in_flight.clear()
        self._epoch += 1

    async def mutate(self, mutation: Mutation[T], *args: Any, **kwargs: Any) -> T:
        """ミューテーションを実行し、成功時に宣言されたキーを無効化する。

        失敗時は何も無効化せず、例外をそのまま送出する。
        """
        result = await mutation.fn(*args, **kwargs)
        for key in mutation.invalidation_keys(*args, **kwargs):
            self.invalidate_queries(key)
        if mutation.on_success is not None:
            mutation.on_success(result, *args, **kwargs)
        return result
