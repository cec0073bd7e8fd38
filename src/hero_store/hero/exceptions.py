"""ヒーローストアの例外定義."""


class HeroStoreError(Exception):
    """ヒーローストアの基底例外."""


class HeroNotFoundError(HeroStoreError):
    """指定IDのヒーローが存在しない.

    Attributes
    ----------
        hero_id: 見つからなかったヒーローのID

    """

    def __init__(self, hero_id: str) -> None:
        """HeroNotFoundErrorを初期化.

        Args:
        ----
            hero_id: 見つからなかったヒーローのID

        """
        super().__init__(f"Hero with id {hero_id} not found")
        self.hero_id = hero_id
