from config.settings import Settings


def test_settings_defaults(monkeypatch):
    for name in ("DEFAULT_PAGE", "DEFAULT_PER_PAGE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.DEFAULT_PAGE == 1
    assert s.DEFAULT_PER_PAGE == 100
    assert s.LOG_LEVEL == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_PER_PAGE", "20")
    monkeypatch.setenv("ALLOWED_ORIGINS", '["https://example.org"]')

    s = Settings(_env_file=None)

    assert s.DEFAULT_PER_PAGE == 20
    assert s.ALLOWED_ORIGINS == ["https://example.org"]
