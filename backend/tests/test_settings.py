from settings import DEFAULT_PORT, get_settings


def test_defaults(monkeypatch):
    for name in ["PORT", "HOST", "BOOKS_DB_PATH", "CORS_ORIGINS", "DOCS_URL", "LOG_LEVEL", "REQUEST_LOGGING", "SERVER_URL"]:
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.PORT == DEFAULT_PORT == 4000
    assert settings.BOOKS_DB_PATH == "db.json"
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.DOCS_URL == "/api-docs"
    assert settings.REQUEST_LOGGING is True
    assert settings.SERVER_URL == "http://localhost:4000"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "5050")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("REQUEST_LOGGING", "off")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("SERVER_URL", raising=False)

    settings = get_settings()

    assert settings.PORT == 5050
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]
    assert settings.REQUEST_LOGGING is False
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SERVER_URL == "http://localhost:5050"


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    assert get_settings().PORT == DEFAULT_PORT
