"""
Evaluator configuration.

Settings come from environment variables (prefixed with EXPR_EVAL_), an
optional .env file, or a YAML file loaded with Settings.from_yaml().
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEMO_EXPRESSION = "92 + 5 + 5 * 27 - (92 - 12) / 4 + 26"


class Settings(BaseSettings):
    """Evaluator settings"""

    model_config = SettingsConfigDict(
        env_prefix="EXPR_EVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Arithmetic
    int_bits: Optional[int] = 32  # None means unbounded integers
    strict: bool = True  # trailing unrecognised text is a parse error

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"
    log_file: Optional[str] = None

    # Demo
    demo_expression: str = DEMO_EXPRESSION

    @field_validator("int_bits")
    @classmethod
    def validate_int_bits(cls, v):
        """A signed integer needs a sign bit and at least one value bit"""
        if v is not None and v < 2:
            raise ValueError("int_bits must be at least 2")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            path: Path to a YAML mapping of setting names to values

        Returns:
            Settings instance (environment variables still fill unset fields)
        """
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")

        return cls(**data)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
