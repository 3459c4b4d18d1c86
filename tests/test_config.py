"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from linkalias.config import Config, load_config


def test_defaults():
    config = Config(_env_file=None)

    assert config.short_code_length == 6
    assert config.custom_code_min_length == 3
    assert config.custom_code_max_length == 20
    assert config.default_validity_minutes == 30
    assert config.max_batch_size == 5
    assert config.purge_interval_seconds == 60


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BASE_URL", "https://sho.rt")
    monkeypatch.setenv("DEFAULT_VALIDITY_MINUTES", "15")
    monkeypatch.setenv("LOG_JSON", "true")

    config = load_config()

    assert config.base_url == "https://sho.rt"
    assert config.default_validity_minutes == 15
    assert config.log_json is True


def test_rejects_non_positive_values():
    with pytest.raises(ValidationError):
        Config(_env_file=None, default_validity_minutes=0)
