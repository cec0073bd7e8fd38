"""ヒーローストアのサービスモジュール."""

import asyncio
import logging
import secrets
import string
import time
from collections.abc import Awaitable
from datetime import UTC, datetime
from functools import lru_cache
from typing import NoReturn, TypeVar

from hero_store.common.log_prefix import LogPrefix
from hero_store.hero.exceptions import HeroNotFoundError
from hero_store.hero.model import Hero, HeroCreate, HeroUpdate
from hero_store.settings.settings import get_settings

T = TypeVar("T")

ID_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
ID_SUFFIX_LENGTH = 9

logger = logging.getLogger(__name__)


def _initial_heroes() -> tuple[Hero, ...]:
    """初期データ(3件固定)を生成."""
    return (
        Hero(
            id="1",
            name="Superman",
            description="Man of Steel",
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
        ),
        Hero(
            id="2",
            name="Spiderman",
            description="Your friendly neighborhood Spider-Man",
            created_at=datetime(2024, 1, 2, tzinfo=UTC),
        ),
        Hero(
            id="3",
            name="Batman",
            description="The Dark Knight",
            created_at=datetime(2024, 1, 3, tzinfo=UTC),
        ),
    )


class HeroService:
    """インメモリのヒーローストア.

    ヒーロー一覧の唯一の所有者かつ更新者。状態の変更は呼び出し時点で
    同期的に確定し、結果の通知だけを擬似遅延の後に Awaitable で返す。

    Attributes
    ----------
        delay: 非同期操作の擬似遅延(秒)

    """

    def __init__(self, delay: float | None = None) -> None:
        """HeroServiceを初期化.

        Args:
        ----
            delay: 擬似遅延(秒)。省略時は設定値を使用する

        """
        if delay is None:
            delay = get_settings().hero_async_delay_seconds
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._delay = delay
        self._heroes = _initial_heroes()
        self._issued_ids = {hero.id for hero in self._heroes}

    @property
    def delay(self) -> float:
        """擬似遅延(秒)."""
        return self._delay

    @property
    def heroes(self) -> tuple[Hero, ...]:
        """現在のヒーロー一覧のスナップショット.

        読み取り専用。以降の更新で既に取得したスナップショットが
        変化することはない。
        """
        return self._heroes

    # --- 問い合わせ ---

    def get_all(self) -> Awaitable[list[Hero]]:
        """全ヒーローを登録順で取得.

        Returns
        -------
            呼び出し時点のヒーロー一覧を返す Awaitable

        """
        heroes = list(self._heroes)
        logger.debug(f"{LogPrefix.HERO_QUERY} get_all count={len(heroes)}")
        return self._deliver(heroes)

    def get_by_id(self, hero_id: str) -> Awaitable[Hero | None]:
        """IDでヒーローを取得.

        Args:
        ----
            hero_id: ヒーローID

        Returns:
        -------
            該当ヒーロー、存在しなければ None を返す Awaitable

        """
        hero = next((h for h in self._heroes if h.id == hero_id), None)
        logger.debug(
            f"{LogPrefix.HERO_QUERY} get_by_id id={hero_id} found={hero is not None}"
        )
        return self._deliver(hero)

    def search_by_name(self, term: str) -> Awaitable[list[Hero]]:
        """名前で検索(大文字小文字を区別しない部分一致).

        前後の空白を除去して小文字化した検索語が空の場合は
        get_all と同じ結果を返す。

        Args:
        ----
            term: 検索語

        Returns:
        -------
            一致したヒーロー(登録順)を返す Awaitable

        """
        normalized = term.strip().lower()
        if not normalized:
            return self.get_all()

        matched = [h for h in self._heroes if normalized in h.name.lower()]
        logger.debug(
            f"{LogPrefix.HERO_QUERY} search_by_name term={normalized!r} "
            f"count={len(matched)}"
        )
        return self._deliver(matched)

    # --- 更新 ---

    def create(self, dto: HeroCreate) -> Awaitable[Hero]:
        """ヒーローを作成して末尾に追加.

        Args:
        ----
            dto: 作成リクエスト

        Returns:
        -------
            作成したヒーローを返す Awaitable

        """
        hero = Hero(
            id=self._generate_id(),
            name=dto.name,
            description=dto.description,
            created_at=datetime.now(UTC),
        )
        self._heroes = (*self._heroes, hero)
        logger.debug(f"{LogPrefix.HERO_MUTATION} created id={hero.id}")
        return self._deliver(hero)

    def update(self, hero_id: str, dto: HeroUpdate) -> Awaitable[Hero]:
        """ヒーローを部分更新.

        指定されたフィールドのみ上書きし、元の位置で置き換える。

        Args:
        ----
            hero_id: 更新対象のヒーローID
            dto: 更新リクエスト

        Returns:
        -------
            更新後のヒーローを返す Awaitable。
            存在しない場合は HeroNotFoundError を送出する Awaitable

        """
        index = self._index_of(hero_id)
        if index is None:
            return self._fail(HeroNotFoundError(hero_id))

        patch = dto.model_dump(exclude_unset=True)
        updated = self._heroes[index].model_copy(update=patch)
        self._heroes = (
            *self._heroes[:index],
            updated,
            *self._heroes[index + 1 :],
        )
        logger.debug(
            f"{LogPrefix.HERO_MUTATION} updated id={hero_id} fields={sorted(patch)}"
        )
        return self._deliver(updated)

    def delete(self, hero_id: str) -> Awaitable[None]:
        """ヒーローを削除.

        Args:
        ----
            hero_id: 削除対象のヒーローID

        Returns:
        -------
            完了を通知する Awaitable。
            存在しない場合は HeroNotFoundError を送出する Awaitable

        """
        if self._index_of(hero_id) is None:
            return self._fail(HeroNotFoundError(hero_id))

        self._heroes = tuple(h for h in self._heroes if h.id != hero_id)
        logger.debug(f"{LogPrefix.HERO_MUTATION} deleted id={hero_id}")
        return self._deliver(None)

    def reset_to_initial_state(self) -> None:
        """初期データに戻す(テストの独立性確保用)."""
        self._heroes = _initial_heroes()
        logger.info(f"{LogPrefix.HERO_STORE} reset to initial state")

    # --- プライベートメソッド ---

    def _index_of(self, hero_id: str) -> int | None:
        """IDに一致するヒーローの位置を返す."""
        for index, hero in enumerate(self._heroes):
            if hero.id == hero_id:
                return index
        return None

    def _generate_id(self) -> str:
        """新しいヒーローIDを採番.

        時刻(ミリ秒)とランダムな英数字の組み合わせ。
        これまでに発行したIDと重複した場合は再生成する。
        """
        while True:
            suffix = "".join(
                secrets.choice(ID_SUFFIX_ALPHABET) for _ in range(ID_SUFFIX_LENGTH)
            )
            hero_id = f"{time.time_ns() // 1_000_000}-{suffix}"
            if hero_id not in self._issued_ids:
                self._issued_ids.add(hero_id)
                return hero_id

    async def _deliver(self, value: T) -> T:
        """擬似遅延の後に計算済みの結果を返す."""
        await asyncio.sleep(self._delay)
        return value

    async def _fail(self, error: Exception) -> NoReturn:
        """擬似遅延の後に例外を送出する."""
        await asyncio.sleep(self._delay)
        raise error


@lru_cache
def get_hero_service() -> HeroService:
    """HeroServiceの共有インスタンスを取得する.

    プロセス内で同一インスタンスを再利用する。
    FastAPIの依存性注入ファクトリとしても使用できる。

    Returns
    -------
        HeroService

    """
    return HeroService()
