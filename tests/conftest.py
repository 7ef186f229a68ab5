"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cv_layout.measurement.types import MeasuredItem, SectionSplit
from cv_layout.models.section import FieldMapping, TemplateSection
from cv_layout.templates.loader import CVTemplate


class StubMeasurementProvider:
    """Fixed heights: one per section type for blocks, one per split item.

    A split fits items while the section title allowance plus the item
    heights stay within the available height.
    """

    def __init__(
        self,
        section_heights: dict[str, float] | None = None,
        item_height: float = 40,
        title_height: float = 30,
        default_section_height: float = 60,
    ):
        self.section_heights = section_heights or {}
        self.item_height = item_height
        self.title_height = title_height
        self.default_section_height = default_section_height
        self.estimate_calls: list[tuple] = []
        self.split_calls: list[tuple] = []

    def estimate_section_height(
        self, section_type, items, layout="single-column", placement="main", orientation="portrait"
    ):
        self.estimate_calls.append((section_type, len(items), layout, placement, orientation))
        return self.section_heights.get(section_type, self.default_section_height)

    def estimate_height(self, section_type, items, orientation="portrait"):
        return self.section_heights.get(section_type, self.default_section_height)

    def split(self, section_type, items, available_height, title, layout="single-column", placement="main"):
        self.split_calls.append((section_type, len(items), available_height, title, layout, placement))
        used = self.title_height
        count = 0
        for _ in items:
            if used + self.item_height > available_height:
                break
            used += self.item_height
            count += 1
        return SectionSplit(
            fitting=[MeasuredItem(i, self.item_height) for i in items[:count]],
            remaining=[MeasuredItem(i, self.item_height) for i in items[count:]],
        )


class NothingFitsProvider(StubMeasurementProvider):
    """Never fits any split item, like an over-estimating height function."""

    def split(self, section_type, items, available_height, title, layout="single-column", placement="main"):
        self.split_calls.append((section_type, len(items), available_height, title, layout, placement))
        return SectionSplit(remaining=[MeasuredItem(i, self.item_height) for i in items])


def make_section(
    section_id: str,
    section_type: str,
    display_order: int,
    placement: str = "main",
    **styling,
) -> TemplateSection:
    return TemplateSection(
        id=section_id,
        section_type=section_type,
        display_order=display_order,
        styling_config={"layout_placement": placement, **styling},
    )


def experiences(count: int) -> list[dict]:
    return [
        {"company": f"Company {i}", "designation": "Engineer", "description": f"Work {i}"}
        for i in range(count)
    ]


@pytest.fixture
def stub_provider() -> StubMeasurementProvider:
    return StubMeasurementProvider(
        section_heights={"general": 60, "technical_skills": 60, "specialized_skills": 60}
    )


@pytest.fixture
def sample_profile() -> dict:
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "employee_id": "EMP-0042",
        "email": "jane.doe@example.com",
        "biography": "<p>Backend engineer focused on data platforms.</p>",
        "experiences": [
            {
                "company_name": "Acme Corp",
                "designation": "Senior Engineer",
                "start_date": "2021-03-01",
                "is_current": True,
                "description": "<ul><li>Built the billing pipeline</li><li>Led a team of four</li></ul>",
            },
            {
                "company_name": "Globex",
                "designation": "Engineer",
                "start_date": "2018-01-01",
                "end_date": "2021-02-28",
                "description": "Maintained payment services and on-call rotation.",
            },
            None,
            {
                "company_name": "Initech",
                "designation": "Intern",
                "start_date": "2017-06-01",
                "end_date": "2017-12-31",
            },
        ],
        "education": [
            {"university": "State University", "degree": "BSc", "department": "CS", "gpa": 3.8},
            {"university": "City College", "degree": "HSC"},
        ],
        "projects": [
            {
                "name": f"Project {i}",
                "role": "Developer",
                "description": "Data ingestion service " * 5,
                "technologies_used": ["Python", "PostgreSQL", "Kafka"],
                "url": "https://example.com" if i % 2 else None,
            }
            for i in range(8)
        ],
        "technical_skills": [
            {"name": "Python", "proficiency": 9},
            {"name": "SQL", "proficiency": 8},
        ],
        "specialized_skills": [{"name": "Distributed systems", "proficiency": 7}],
        "trainings": [
            {"title": "AWS Solutions Architect", "provider": "AWS"},
            {"title": "Kubernetes Fundamentals", "provider": "CNCF"},
        ],
        "achievements": [
            {"title": "Employee of the year", "date": "2022-12-01"},
        ],
    }


@pytest.fixture
def sample_field_mappings() -> list[FieldMapping]:
    return [
        FieldMapping(
            original_field_name="section_title",
            display_name="Professional Experience",
            section_type="experience",
        ),
        FieldMapping(
            original_field_name="company_name",
            display_name="Employer",
            section_type="experience",
        ),
    ]


@pytest.fixture
def sample_template() -> CVTemplate:
    return CVTemplate(
        name="Test",
        sections=[
            make_section("general", "general", 1),
            make_section("experience", "experience", 2),
            make_section("projects", "projects", 3, projects_to_view=3),
            make_section("education", "education", 4),
        ],
    )


@pytest.fixture
def profile_file(tmp_path: Path, sample_profile: dict) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(sample_profile), encoding="utf-8")
    return path
