import pytest

from hero_store.hero.service import HeroService


@pytest.fixture
def service() -> HeroService:
    svc = HeroService(delay=0)
    # Each test starts from the three seed heroes
    svc.reset_to_initial_state()
    return svc
