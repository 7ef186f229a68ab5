"""Pydantic models for CV template sections and field mappings."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class SectionType(str, Enum):
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    ACHIEVEMENTS = "achievements"
    TRAINING = "training"
    GENERAL = "general"
    TECHNICAL_SKILLS = "technical_skills"
    SPECIALIZED_SKILLS = "specialized_skills"
    PAGE_BREAK = "page_break"  # sentinel, only forces a page boundary


class LayoutPlacement(str, Enum):
    MAIN = "main"
    SIDEBAR = "sidebar"


class StylingConfig(BaseModel):
    """Per-section styling options. Only the fields below drive pagination."""

    layout_placement: LayoutPlacement = LayoutPlacement.MAIN
    projects_to_view: int | None = None

    model_config = {"extra": "allow"}

    @field_validator("layout_placement", mode="before")
    @classmethod
    def _coerce_placement(cls, value: Any) -> Any:
        if value in (LayoutPlacement.SIDEBAR, LayoutPlacement.SIDEBAR.value):
            return LayoutPlacement.SIDEBAR
        return LayoutPlacement.MAIN

    @field_validator("projects_to_view", mode="before")
    @classmethod
    def _non_positive_means_no_cap(cls, value: Any) -> Any:
        if value is None or (isinstance(value, (int, float)) and value <= 0):
            return None
        return value


class TemplateSection(BaseModel):
    id: str
    section_type: str  # a SectionType value, or any custom type
    display_order: int = 0
    is_required: bool = False
    field_mapping: dict[str, Any] = Field(default_factory=dict)
    styling_config: StylingConfig = Field(default_factory=StylingConfig)

    @field_validator("section_type", mode="before")
    @classmethod
    def _enum_to_str(cls, value: Any) -> Any:
        return value.value if isinstance(value, SectionType) else value

    @field_validator("styling_config", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def placement(self) -> LayoutPlacement:
        return self.styling_config.layout_placement

    @property
    def is_page_break(self) -> bool:
        return self.section_type == SectionType.PAGE_BREAK.value


class FieldMapping(BaseModel):
    original_field_name: str
    display_name: str
    section_type: str
    is_masked: bool = False
    mask_value: str | None = None
    field_order: int = 0
    visibility_rules: dict[str, Any] = Field(default_factory=dict)
