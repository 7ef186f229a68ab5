"""Data models for CV pagination."""

from cv_layout.models.page import Page, PartialSectionRecord
from cv_layout.models.section import (
    FieldMapping,
    LayoutPlacement,
    SectionType,
    StylingConfig,
    TemplateSection,
)

__all__ = [
    "FieldMapping",
    "LayoutPlacement",
    "Page",
    "PartialSectionRecord",
    "SectionType",
    "StylingConfig",
    "TemplateSection",
]
