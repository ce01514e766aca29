"""
Shared pytest fixtures for the expr_eval tests.

This module provides:
- Settings fixtures isolated from the process environment
- A helper for asserting that evaluation raises a given error
"""

import pytest
from typing import Type

from expr_eval import ExprError, Settings, evaluate


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep EXPR_EVAL_* variables and a stray .env file out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("EXPR_EVAL_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    from expr_eval.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings: 32-bit integers, strict input."""
    return Settings()


@pytest.fixture
def unbounded() -> Settings:
    """Settings with unbounded integers."""
    return Settings(int_bits=None)


@pytest.fixture
def assert_eval_error(settings):
    """Helper to assert that evaluating a source raises the expected error."""
    def _assert_error(
        source: str,
        error_type: Type[ExprError],
        message: str | None = None,
        settings_override: Settings | None = None,
    ) -> ExprError:
        with pytest.raises(error_type) as exc_info:
            evaluate(source, settings_override or settings)

        if message is not None:
            assert exc_info.value.message == message
        return exc_info.value

    return _assert_error


@pytest.fixture
def over_limit_digits() -> int:
    """A digit count int() refuses to convert; skipped where there is no such limit."""
    import sys

    limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
    if not limit:
        pytest.skip("interpreter has no int/str conversion limit")
    return limit + 1
