from unittest.mock import patch

from permittrack.config import Settings, settings
from permittrack.main import run


def test_run_serves_app_with_settings():
    with patch("permittrack.main.uvicorn.run") as uvicorn_run:
        run()

    uvicorn_run.assert_called_once_with(
        "permittrack.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = Settings()
    assert config.port == 9000
    assert config.log_level == "DEBUG"
