import logging

from hero_store.common import log_prefix
from hero_store.common.log_prefix import LogPrefix, configure_logging
from hero_store.hero.model import HeroCreate
from hero_store.hero.service import HeroService


def test_configure_logging_uses_given_level(monkeypatch):
    calls = []
    monkeypatch.setattr(log_prefix.logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging("debug")

    assert calls[0]["level"] == logging.DEBUG


async def test_mutations_are_logged_with_prefix(caplog):
    service = HeroService(delay=0)
    with caplog.at_level(logging.DEBUG, logger="hero_store.hero.service"):
        hero = await service.create(HeroCreate(name="Flash"))

    assert f"{LogPrefix.HERO_MUTATION} created id={hero.id}" in caplog.text
