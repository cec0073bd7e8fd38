"""ヒーローリポジトリのプロトコル定義."""

from collections.abc import Awaitable
from typing import Protocol

from hero_store.hero.model import Hero, HeroCreate, HeroUpdate


class HeroRepository(Protocol):
    """ヒーローデータアクセスのインターフェース.

    すべての問い合わせ・更新操作は Awaitable を返す。
    """

    @property
    def heroes(self) -> tuple[Hero, ...]:
        """現在のヒーロー一覧のスナップショット."""
        ...

    def get_all(self) -> Awaitable[list[Hero]]:
        """全ヒーローを取得."""
        ...

    def get_by_id(self, hero_id: str) -> Awaitable[Hero | None]:
        """IDでヒーローを取得."""
        ...

    def search_by_name(self, term: str) -> Awaitable[list[Hero]]:
        """名前の部分一致でヒーローを検索."""
        ...

    def create(self, dto: HeroCreate) -> Awaitable[Hero]:
        """ヒーローを作成."""
        ...

    def update(self, hero_id: str, dto: HeroUpdate) -> Awaitable[Hero]:
        """ヒーローを部分更新."""
        ...

    def delete(self, hero_id: str) -> Awaitable[None]:
        """ヒーローを削除."""
        ...
