from pathlib import Path

import pytest

from secretsift.env import EnvConfig


def test_env_config_min_severity():
    config = EnvConfig.load({"SECRET_SCANNER_MIN_SEVERITY": "high"})
    assert config.min_severity == "high"


def test_env_config_no_color():
    config = EnvConfig.load({"SECRET_SCANNER_NO_COLOR": "1"})
    assert config.no_color is True


@pytest.mark.parametrize("value, expected", [("TRUE", True), ("true", True), ("0", False), ("no", False)])
def test_env_config_no_color_values(value, expected):
    assert EnvConfig.load({"SECRET_SCANNER_NO_COLOR": value}).no_color is expected


def test_env_config_none_when_unset():
    config = EnvConfig.load({})
    assert config.min_severity is None
    assert config.no_color is None
    assert config.config_path is None


def test_env_config_path():
    config = EnvConfig.load({"SECRET_SCANNER_CONFIG": "conf/custom.yaml"})
    assert config.config_path == Path("conf/custom.yaml")


def test_load_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SECRET_SCANNER_MIN_SEVERITY", "medium")
    monkeypatch.delenv("SECRET_SCANNER_NO_COLOR", raising=False)
    config = EnvConfig.load()
    assert config.min_severity == "medium"
    assert config.no_color is None


def test_no_color_env():
    assert EnvConfig.no_color_env({"NO_COLOR": ""})
    assert EnvConfig.no_color_env({"SECRET_SCANNER_NO_COLOR": "0"})
    assert not EnvConfig.no_color_env({})