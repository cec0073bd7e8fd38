"""ログプレフィックス定数."""

import logging

from hero_store.settings.settings import get_settings


class LogPrefix:
    """ロギング用プレフィックス定数."""

    HERO_STORE = "[HERO_STORE]"
    HERO_QUERY = "[HERO_QUERY]"
    HERO_MUTATION = "[HERO_MUTATION]"


def configure_logging(level: str | None = None) -> None:
    """ルートロガーを設定する.

    Args:
    ----
        level: ログレベル名。省略時は設定値 ``log_level`` を使用する

    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
