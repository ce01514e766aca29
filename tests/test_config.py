"""Tests for Settings loading and validation."""

import pytest
from pydantic import ValidationError

from expr_eval.config import DEMO_EXPRESSION, Settings, get_settings


class TestDefaults:
    """Test default settings."""

    def test_defaults(self, settings):
        assert settings.int_bits == 32
        assert settings.strict is True
        assert settings.log_level == "WARNING"
        assert settings.log_format == "text"
        assert settings.log_file is None
        assert settings.demo_expression == DEMO_EXPRESSION

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestEnvironment:
    """Test EXPR_EVAL_* environment variables."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("EXPR_EVAL_INT_BITS", "64")
        monkeypatch.setenv("EXPR_EVAL_STRICT", "false")
        monkeypatch.setenv("EXPR_EVAL_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.int_bits == 64
        assert settings.strict is False
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("EXPR_EVAL_LOG_FORMAT=json\n")
        assert Settings().log_format == "json"


class TestValidation:
    """Test field validation."""

    def test_int_bits_too_small(self):
        with pytest.raises(ValidationError):
            Settings(int_bits=1)

    def test_int_bits_unbounded(self):
        assert Settings(int_bits=None).int_bits is None

    def test_unknown_log_format(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")


class TestYaml:
    """Test Settings.from_yaml()."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("int_bits: 16\nstrict: false\ndemo_expression: '1 + 1'\n")
        settings = Settings.from_yaml(path)
        assert settings.int_bits == 16
        assert settings.strict is False
        assert settings.demo_expression == "1 + 1"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Settings.from_yaml(path).int_bits == 32

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            Settings.from_yaml(path)
