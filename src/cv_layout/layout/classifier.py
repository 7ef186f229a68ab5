"""Section classification: splittability and display titles."""

from __future__ import annotations

from typing import Sequence

from cv_layout.models.section import FieldMapping, SectionType, TemplateSection

SPLITTABLE_SECTION_TYPES: frozenset[str] = frozenset(
    {
        SectionType.EXPERIENCE.value,
        SectionType.PROJECTS.value,
        SectionType.EDUCATION.value,
        SectionType.TRAINING.value,
        SectionType.ACHIEVEMENTS.value,
    }
)

DEFAULT_SECTION_TITLES: dict[str, str] = {
    "experience": "Work Experience",
    "education": "Education",
    "projects": "Projects",
    "technical_skills": "Technical Skills",
    "specialized_skills": "Specialized Skills",
    "training": "Training & Certifications",
    "achievements": "Achievements",
    "general": "General Information",
}

SECTION_TITLE_FIELD = "section_title"
CONTINUED_SUFFIX = " (continued)"


def is_splittable(section_type: str) -> bool:
    return section_type in SPLITTABLE_SECTION_TYPES


def resolve_title(section: TemplateSection, field_mappings: Sequence[FieldMapping]) -> str:
    """Display title: field-mapping override, then default table, then raw type."""
    for mapping in field_mappings:
        if (
            mapping.original_field_name == SECTION_TITLE_FIELD
            and mapping.section_type == section.section_type
        ):
            return mapping.display_name
    return DEFAULT_SECTION_TITLES.get(section.section_type, section.section_type)


def continued_title(title: str) -> str:
    return f"{title}{CONTINUED_SUFFIX}"
