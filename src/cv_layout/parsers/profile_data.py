"""Access to section data inside an employee profile data bag."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Section type -> key in the profile mapping
SECTION_DATA_KEYS: dict[str, str] = {
    "experience": "experiences",
    "education": "education",
    "projects": "projects",
    "technical_skills": "technical_skills",
    "specialized_skills": "specialized_skills",
    "training": "trainings",
    "achievements": "achievements",
}


def get_section_data(profile: Mapping[str, Any] | None, section_type: str) -> Any:
    """Return the data backing a section, or None when there is none.

    The general section is rendered from the profile itself.
    """
    if not profile:
        return None
    if section_type == "general":
        return profile
    key = SECTION_DATA_KEYS.get(section_type)
    if key is None:
        return None
    return profile.get(key)


def is_empty(data: Any) -> bool:
    """True for None, empty lists and empty mappings."""
    if data is None:
        return True
    if isinstance(data, (list, tuple, Mapping)):
        return len(data) == 0
    return False


def as_items(data: Any) -> list[Any]:
    """Normalize section data to a list of non-null items."""
    if data is None:
        return []
    if isinstance(data, (list, tuple)):
        return [item for item in data if item is not None]
    return [data]
