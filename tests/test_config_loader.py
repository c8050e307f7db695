"""Tests for service configuration loading."""

from pathlib import Path

import pytest
import yaml

from src.utils.config_loader import (
    ServiceSettings,
    load_service_settings,
    load_yaml,
    settings_from_dict,
)


def test_bundled_config_matches_defaults() -> None:
    """config/service.yaml ships the same values as the built-in defaults."""
    settings = load_service_settings("config/service.yaml")
    assert settings == ServiceSettings()


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    assert load_service_settings(tmp_path / "absent.yaml") == ServiceSettings()


def test_env_var_overrides_path(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "service.yaml"
    path.write_text("resolver:\n  default_key: fallback\nserver:\n  port: 8080\n", encoding="utf-8")
    monkeypatch.setenv("COUNTRY_SERVICE_CONFIG", str(path))

    settings = load_service_settings()
    assert settings.default_key == "fallback"
    assert settings.port == 8080
    assert settings.blocked_marker == "not_@llowed"


def test_settings_from_dict_reads_all_sections() -> None:
    settings = settings_from_dict({
        "resolver": {
            "channel_prefixes": ["whatsapp:", "sms:"],
            "markers": {"blocked": "not_allowed", "allowed": "allowed"},
        },
        "logging": {"level": "DEBUG", "file": "logs/service.log"},
        "cors": {"allow_origins": ["https://example.com"]},
    })
    assert settings.channel_prefixes == ["whatsapp:", "sms:"]
    assert settings.blocked_marker == "not_allowed"
    assert settings.allowed_marker == "allowed"
    assert settings.log_level == "DEBUG"
    assert settings.log_file == Path("logs/service.log")
    assert settings.allow_origins == ["https://example.com"]


def test_empty_yaml_returns_empty_dict(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml(path) == {}


def test_malformed_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("resolver: [unclosed", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_yaml(path)


def test_null_values_keep_defaults(tmp_path: Path) -> None:
    """Keys present with no value fall back to the built-in defaults."""
    path = tmp_path / "service.yaml"
    path.write_text(
        "resolver:\n  default_key:\n  channel_prefixes:\n  markers:\n    blocked:\n"
        "server:\n  port:\ncors:\n  allow_origins:\n",
        encoding="utf-8",
    )
    assert load_service_settings(path) == ServiceSettings()


def test_empty_prefix_list_disables_stripping() -> None:
    settings = settings_from_dict({"resolver": {"channel_prefixes": []}})
    assert settings.channel_prefixes == []
