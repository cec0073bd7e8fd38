from hero_store.settings.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("HERO_ASYNC_DELAY_MS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.environment == "development"
    assert settings.hero_async_delay_ms == 500
    assert settings.hero_async_delay_seconds == 0.5
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("HERO_ASYNC_DELAY_MS", "0")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.hero_async_delay_seconds == 0
    assert settings.log_level == "DEBUG"
