from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from domain.models import (
    DEFAULT_CONTAINER,
    DEFAULT_SVG_CLASS,
    ChartLayoutConfig,
    LabelsUpdate,
    MarginSpec,
)

DEFAULT_CONFIG_PATH = Path("config/chart_layout.yaml")


class LayoutSettings(BaseModel):
    width: float | None = None
    height: float | None = None
    aspect_ratio: float | None = None
    margins: MarginSpec | None = None
    labels: LabelsUpdate | None = None
    strict: bool = False
    container: str = DEFAULT_CONTAINER
    svg_class: str = DEFAULT_SVG_CLASS
    output_path: Path = Path("data/chart_layout.svg")

    @field_validator("container", mode="before")
    @classmethod
    def normalize_container(cls, value: object) -> str:
        raw = str(value or "").strip()
        return raw or DEFAULT_CONTAINER

    @field_validator("svg_class", mode="before")
    @classmethod
    def normalize_svg_class(cls, value: object) -> str:
        raw = str(value or "").strip()
        return raw or DEFAULT_SVG_CLASS

    def to_layout_config(self) -> ChartLayoutConfig:
        return ChartLayoutConfig(
            aspect_ratio=self.aspect_ratio,
            width=self.width,
            height=self.height,
            margins=self.margins,
            labels=self.labels,
            strict=self.strict,
        )


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHART_LAYOUT_", env_nested_delimiter="__")

    layout: LayoutSettings = Field(default_factory=LayoutSettings)

    _yaml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv("CHART_LAYOUT_CONFIG_PATH")
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous
