"""Tests for environment-driven configuration."""
import importlib
import logging
import warnings

import pytest

import bookmark_api.config as config_module


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ('DB_PATH', 'PORT', 'CORS_ORIGINS', 'LOG_LEVEL', 'FLASK_DEBUG'):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setattr('dotenv.load_dotenv', lambda *args, **kwargs: False)
        return importlib.reload(config_module).Config

    yield _reload
    monkeypatch.undo()
    importlib.reload(config_module)


def test_defaults(reload_config) -> None:
    config = reload_config()
    assert config.DATABASE_PATH == 'bookmarks.db'
    assert config.PORT == 4000
    assert config.DEBUG is False


def test_environment_overrides(reload_config) -> None:
    config = reload_config(DB_PATH='/tmp/other.db', PORT='8080', FLASK_DEBUG='1')
    assert config.DATABASE_PATH == '/tmp/other.db'
    assert config.PORT == 8080
    assert config.DEBUG is True


def test_app_uses_configured_database(app, tmp_path) -> None:
    assert app.database.db_name == str(tmp_path / 'bookmarks.db')
    assert (tmp_path / 'bookmarks.db').exists()


def test_log_level_is_case_insensitive(reload_config) -> None:
    config = reload_config(LOG_LEVEL='debug')
    assert config.LOG_LEVEL == 'DEBUG'


def test_lowercase_log_level_in_app_config(tmp_path) -> None:
    from bookmark_api import create_app
    from bookmark_api.config import TestingConfig

    class Config(TestingConfig):
        DATABASE_PATH = str(tmp_path / 'levels.db')
        LOG_LEVEL = 'warning'

    app = create_app(Config)
    try:
        assert app.logger.level == logging.WARNING
    finally:
        app.database.close()


def test_app_build_emits_no_deprecated_404_setting(tmp_path) -> None:
    from bookmark_api import create_app
    from bookmark_api.config import TestingConfig

    class Config(TestingConfig):
        DATABASE_PATH = str(tmp_path / 'warnings.db')

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        app = create_app(Config)
    try:
        assert 'ERROR_404_HELP' not in app.config
        assert app.config['RESTX_ERROR_404_HELP'] is False
        assert not [w for w in caught if 'ERROR_404_HELP' in str(w.message)]
    finally:
        app.database.close()
