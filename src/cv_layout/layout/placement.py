"""Column placement of sections and layout classification."""

from __future__ import annotations

from typing import Sequence

from cv_layout.models.section import LayoutPlacement, SectionType, TemplateSection

SKILL_SECTION_TYPES = frozenset(
    {SectionType.TECHNICAL_SKILLS.value, SectionType.SPECIALIZED_SKILLS.value}
)


def sort_sections(sections: Sequence[TemplateSection]) -> list[TemplateSection]:
    """Sort by display order; ties keep their input order."""
    return sorted(sections, key=lambda s: s.display_order)


def partition(
    sections: Sequence[TemplateSection],
) -> tuple[list[TemplateSection], list[TemplateSection]]:
    """Split sections into (main, sidebar) columns, each in display order."""
    main: list[TemplateSection] = []
    sidebar: list[TemplateSection] = []
    for section in sort_sections(sections):
        if section.placement == LayoutPlacement.SIDEBAR:
            sidebar.append(section)
        else:
            main.append(section)
    return main, sidebar


def classify_layout(
    main_sections: Sequence[TemplateSection],
    sidebar_sections: Sequence[TemplateSection],
) -> str:
    """'sidebar' when the sidebar column holds a skills section, else 'two-column'."""
    if any(s.section_type in SKILL_SECTION_TYPES for s in sidebar_sections):
        return "sidebar"
    return "two-column"
