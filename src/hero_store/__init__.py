"""インメモリのヒーローストア."""

from hero_store.hero.exceptions import HeroNotFoundError, HeroStoreError
from hero_store.hero.model import Hero, HeroCreate, HeroUpdate
from hero_store.hero.protocol import HeroRepository
from hero_store.hero.service import HeroService, get_hero_service

__version__ = "0.1.0"
__all__ = [
    "Hero",
    "HeroCreate",
    "HeroNotFoundError",
    "HeroRepository",
    "HeroService",
    "HeroStoreError",
    "HeroUpdate",
    "get_hero_service",
]
