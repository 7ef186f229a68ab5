"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

# 96 DPI pixels per millimetre
PX_PER_MM = 3.779528

ORIENTATIONS = ("portrait", "landscape")


@dataclass(frozen=True)
class PageConfig:
    orientation: str = "portrait"
    portrait_content_height: float = 257 * PX_PER_MM
    landscape_content_height: float = 167 * PX_PER_MM
    max_pages: int = 10

    def __post_init__(self) -> None:
        if self.orientation not in ORIENTATIONS:
            raise ValueError(
                f"orientation must be one of {ORIENTATIONS}, got {self.orientation!r}"
            )
        if self.portrait_content_height <= 0:
            raise ValueError("portrait_content_height must be positive")
        if self.landscape_content_height <= 0:
            raise ValueError("landscape_content_height must be positive")
        if not 1 <= self.max_pages <= 100:
            raise ValueError(f"max_pages must be between 1 and 100, got {self.max_pages}")

    def content_height(self, orientation: str | None = None) -> float:
        """Usable content height for an orientation (portrait when unknown)."""
        if (orientation or self.orientation) == "landscape":
            return self.landscape_content_height
        return self.portrait_content_height


@dataclass(frozen=True)
class PaginationConfig:
    min_available_height: float = 100
    section_title_allowance: float = 30
    max_split_iterations: int = 20

    def __post_init__(self) -> None:
        if self.min_available_height < 0:
            raise ValueError("min_available_height must not be negative")
        if self.section_title_allowance < 0:
            raise ValueError("section_title_allowance must not be negative")
        if not 1 <= self.max_split_iterations <= 1000:
            raise ValueError(
                f"max_split_iterations must be between 1 and 1000, got {self.max_split_iterations}"
            )


@dataclass(frozen=True)
class MeasurementConfig:
    section_title_height: float = 30
    item_margin: float = 16
    safety_margin: float = 40
    default_item_height: float = 40
    achievement_item_height: float = 60

    def __post_init__(self) -> None:
        for name in ("section_title_height", "item_margin", "safety_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        for name in ("default_item_height", "achievement_item_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")


@dataclass(frozen=True)
class AppConfig:
    page: PageConfig = field(default_factory=PageConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    measurement: MeasurementConfig = field(default_factory=MeasurementConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get("CV_LAYOUT_CONFIG")
        candidates = [Path(env_path)] if env_path else []
        # Look for config.yaml relative to the project root
        candidates += [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        page=PageConfig(**raw.get("page", {})),
        pagination=PaginationConfig(**raw.get("pagination", {})),
        measurement=MeasurementConfig(**raw.get("measurement", {})),
    )
