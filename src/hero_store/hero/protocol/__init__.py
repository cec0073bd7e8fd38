"""ヒーロー関連のプロトコル定義."""

from .hero_repository import HeroRepository

__all__ = ["HeroRepository"]
