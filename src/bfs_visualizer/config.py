"""Configuration management using Pydantic Settings.

This module provides centralized, type-safe configuration for the BFS Visualizer.
Configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(env_prefix="APP_")

    name: str = "bfs-visualizer"
    env: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"


class APISettings(BaseSettings):
    """API server settings."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    reload: bool = True


class GraphSettings(BaseSettings):
    """Graph construction and layout settings.

    When ``definition_path`` is unset the built-in 13-node graph is used.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPH_")

    definition_path: Path | None = None
    center_x: int = 500
    center_y: int = 400
    layout_radius: int = Field(default=250, ge=1)
    node_diameter: int = Field(default=50, ge=2, le=500)

    @field_validator("definition_path")
    @classmethod
    def validate_definition_path(cls, v: Path | None) -> Path | None:
        """Treat an empty path as unset."""
        if v is not None and str(v).strip() in ("", "."):
            return None
        return v

    @property
    def node_radius(self) -> float:
        """Hit radius of every node."""
        return self.node_diameter / 2


class Settings(BaseSettings):
    """Main settings container aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    api: APISettings = Field(default_factory=APISettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
