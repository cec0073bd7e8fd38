"""ヒーロー関連のモデルを一括エクスポートするモジュール."""

from .hero import Hero, HeroBase, HeroCreate, HeroUpdate

__all__ = ["Hero", "HeroBase", "HeroCreate", "HeroUpdate"]
