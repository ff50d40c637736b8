# core/config.py
"""
Configuration settings for modelgen.
"""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Centralized settings for modelgen.
    All settings can be overridden by environment variables or a .env file.
    """
    # --- Application ---
    APP_NAME: str = "Model Code Generator"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # --- Server ---
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DOCS_ENABLED: bool = True

    # --- Defaults for new model descriptions ---
    DEFAULT_MODULE_STYLE: str = "esm"  # esm | commonjs
    DEFAULT_USE_TIMESTAMPS: bool = True

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, v):
        return v.upper()

    @field_validator("DEFAULT_MODULE_STYLE")
    def validate_module_style(cls, v):
        v = v.lower()
        if v not in ("esm", "commonjs"):
            raise ValueError("DEFAULT_MODULE_STYLE must be 'esm' or 'commonjs'")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get settings with caching."""
    return Settings()


# Global settings instance
settings = get_settings()

__all__ = ["Settings", "settings", "get_settings"]
