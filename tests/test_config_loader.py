import pytest
from pydantic import ValidationError

from products_api.utils.config_loader import AppConfig, load_app_config


def test_loads_repository_config():
    cfg = load_app_config()
    assert isinstance(cfg, AppConfig)
    assert cfg.api_prefix == "/api/v1"
    assert cfg.logging.level == "INFO"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "app_config.yml"
    path.write_text("", encoding="utf-8")

    cfg = load_app_config(path)
    assert cfg.title == "Products API"
    assert cfg.cors.allow_origins == ["*"]


def test_values_are_read_from_yaml(tmp_path):
    path = tmp_path / "app_config.yml"
    path.write_text("title: Loja\napi_prefix: /api\nlogging:\n  level: DEBUG\n", encoding="utf-8")

    cfg = load_app_config(path)
    assert cfg.title == "Loja"
    assert cfg.api_prefix == "/api"
    assert cfg.logging.level == "DEBUG"


def test_env_var_selects_config_file(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("version: 2.0.0\n", encoding="utf-8")
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))

    assert load_app_config().version == "2.0.0"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "missing.yml")


def test_invalid_log_level_raises(tmp_path):
    path = tmp_path / "app_config.yml"
    path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_app_config(path)
