"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from stickpose.models.enums import ViewMode


def _default_config_dir() -> Path:
    return Path.home() / ".stickpose"


class CanvasSettings(BaseSettings):
    """Canvas geometry and drawing style."""

    model_config = SettingsConfigDict(env_prefix="STICKPOSE_CANVAS_")

    width: int = Field(default=720, gt=0)
    height: int = Field(default=480, gt=0)
    unit_scale: float = Field(default=120.0, gt=0)
    figure_spacing: float = Field(default=180.0, ge=0)
    joint_radius: int = Field(default=10, ge=0)
    rotate_handle_offset: float = 24.0
    handle_radius: int = Field(default=8, ge=0)
    line_width: int = Field(default=4, gt=0)
    active_line_width: int = Field(default=6, gt=0)
    background: str = "#ffffff"
    grid_color: str = "#e5e7eb"
    grid_step: int = Field(default=40, gt=0)


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STICKPOSE_",
        env_nested_delimiter="__",
    )

    canvas: CanvasSettings = Field(default_factory=CanvasSettings)
    default_view_mode: ViewMode = ViewMode.FLAT

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))


def load_config() -> AppConfig:
    """Load application config."""
    return AppConfig()
