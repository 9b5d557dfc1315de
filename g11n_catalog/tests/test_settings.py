from __future__ import annotations

import pytest

from g11n_catalog import settings as settings_module
from g11n_catalog.settings import configure_logging, reload_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("G11N_CATALOG_PATH", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    reload_settings()


def test_settings_defaults() -> None:
    settings = reload_settings()

    assert settings.catalog_path is None
    assert settings.logging.log_level == "INFO"


def test_settings_read_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text(
        "G11N_CATALOG_PATH=/srv/catalogs\nLOG_LEVEL=DEBUG\nLOG_FORMAT=%(message)s\n",
        encoding="utf-8",
    )

    settings = reload_settings()

    assert str(settings.catalog_path) == "/srv/catalogs"
    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.log_format == "%(message)s"


def test_environment_overrides_dotenv_file(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    assert reload_settings().logging.log_level == "warning"


def test_configure_logging_applies_level_and_format(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=debug\nLOG_FORMAT=%(message)s\n", encoding="utf-8")
    calls: list[dict] = []
    monkeypatch.setattr(
        settings_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs)
    )

    configure_logging(reload_settings())

    assert calls == [{"level": "DEBUG", "format": "%(message)s"}]
