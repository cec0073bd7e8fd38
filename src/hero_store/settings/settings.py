"""アプリケーション設定を管理するモジュール."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション全体の設定を管理するクラス.

    環境変数(および .env ファイル)から設定値を読み込む。

    Attributes
    ----------
        environment: 実行環境(development, production等)
        hero_async_delay_ms: 非同期操作の擬似遅延(ミリ秒、デフォルト: 500)
        log_level: ログレベル(デフォルト: INFO)

    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: str = "development"

    hero_async_delay_ms: int = Field(default=500, ge=0)

    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hero_async_delay_seconds(self) -> float:
        """擬似遅延を秒単位で返す.

        Returns
        -------
            float: asyncio.sleep に渡す遅延秒数

        """
        return self.hero_async_delay_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """アプリケーション設定のシングルトンインスタンスを取得する.

    LRUキャッシュにより同一インスタンスを再利用し、
    環境変数の読み込みコストを削減する。

    Returns
    -------
        Settings: アプリケーション設定オブジェクト

    """
    return Settings()
