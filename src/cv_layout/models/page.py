"""Pydantic models for paginated output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cv_layout.models.section import TemplateSection


class PartialSectionRecord(BaseModel):
    """The slice of a splittable section's items rendered on one page."""

    items: list[Any]
    start_index: int
    total_items: int
    is_partial: bool
    title: str

    @property
    def end_index(self) -> int:
        return self.start_index + len(self.items)


class Page(BaseModel):
    page_number: int
    sections: list[TemplateSection] = Field(default_factory=list)
    partial_sections: dict[str, PartialSectionRecord] = Field(default_factory=dict)

    @property
    def has_content(self) -> bool:
        return bool(self.sections)

    def has_section(self, section_id: str) -> bool:
        return any(s.id == section_id for s in self.sections)

    def section_ids(self) -> list[str]:
        return [s.id for s in self.sections]
