"""Tests for configuration loading."""

from pathlib import Path

import pytest

from golfezz.config.settings import ConfigurationManager
from golfezz.config.settings import load_config
from golfezz.config.utils import deep_merge
from golfezz.config.utils import parse_timeout
from golfezz.config.utils import validate_api_url
from golfezz.exceptions import ConfigError


def write_config(config_dir: Path, content: str) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(content, encoding="utf-8")


def test_defaults_without_config_file(tmp_path):
    """Test that a missing config file gives the defaults."""
    config = load_config(str(tmp_path / "missing"))

    assert config.api_url == "http://localhost:8080/api/v1"
    assert config.timeout == 10.0
    assert config.session_file == str(tmp_path / "missing" / "session.json")
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_config_file_values(tmp_path):
    write_config(tmp_path, """
api:
  url: https://golf.example.com/api/v1/
  timeout: 5
session:
  file: state/session.json
logging:
  default_level: INFO
""")

    config = load_config(str(tmp_path))

    assert config.api_url == "https://golf.example.com/api/v1"
    assert config.timeout == 5.0
    assert config.session_file == str(tmp_path / "state" / "session.json")
    assert config.log_level == "INFO"


def test_environment_overrides_file(tmp_path, monkeypatch):
    write_config(tmp_path, "api:\n  url: https://file.example.com/api/v1\n")
    monkeypatch.setenv("GOLFEZZ_API_URL", "https://env.example.com/api/v1")
    monkeypatch.setenv("GOLFEZZ_TIMEOUT", "2.5")

    config = load_config(str(tmp_path))

    assert config.api_url == "https://env.example.com/api/v1"
    assert config.timeout == 2.5


def test_config_dir_from_environment(tmp_path, monkeypatch):
    config_dir = tmp_path / "from-env"
    write_config(config_dir, "logging:\n  default_level: DEBUG\n")
    monkeypatch.setenv("GOLFEZZ_CONFIG_DIR", str(config_dir))

    config = load_config()

    assert config.config_dir == str(config_dir)
    assert config.log_level == "DEBUG"


def test_overrides_take_precedence(tmp_path):
    config = load_config(str(tmp_path), {"api": {"url": "http://127.0.0.1:9000/api/v1"}})
    assert config.api_url == "http://127.0.0.1:9000/api/v1"


@pytest.mark.parametrize("content", [
    "api:\n  timeout: soon\n",
    "api:\n  timeout: -1\n",
    "api:\n  url: ftp://golf.example.com\n",
    "api:\n  url: not a url\n",
])
def test_invalid_values_raise(tmp_path, content):
    write_config(tmp_path, content)
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))


def test_invalid_timeout_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("GOLFEZZ_TIMEOUT", "0")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))


def test_malformed_yaml(tmp_path):
    write_config(tmp_path, "api: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))


def test_non_mapping_yaml(tmp_path):
    write_config(tmp_path, "- just\n- a list\n")
    with pytest.raises(ConfigError, match="expected a mapping"):
        load_config(str(tmp_path))


def test_configuration_manager_caches(tmp_path):
    manager = ConfigurationManager()
    first = manager.load_config(str(tmp_path))
    assert ConfigurationManager() is manager
    assert manager.load_config(str(tmp_path / "other")) is first
    assert manager.reload_config() is not first


def test_config_not_loaded():
    with pytest.raises(RuntimeError):
        ConfigurationManager().config


def test_deep_merge():
    base = {"api": {"url": "a", "timeout": 1}, "logging": {"file": None}}
    merged = deep_merge(base, {"api": {"timeout": 2}})
    assert merged == {"api": {"url": "a", "timeout": 2}, "logging": {"file": None}}
    assert base["api"]["timeout"] == 1


def test_validators():
    validate_api_url("https://golf.example.com/api/v1")
    with pytest.raises(ValueError):
        validate_api_url("")
    assert parse_timeout("3") == 3.0
    with pytest.raises(ValueError):
        parse_timeout(None)


def test_error_aggregation_settings(tmp_path):
    write_config(tmp_path, """
errors:
  error_threshold: 2
  time_threshold: 60
""")
    settings = load_config(str(tmp_path)).error_aggregation

    assert settings.enabled is True
    assert settings.error_threshold == 2
    assert settings.time_threshold == 60
