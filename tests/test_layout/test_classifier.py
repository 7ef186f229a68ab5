"""Tests for section classification and titles."""

import pytest

from conftest import make_section
from cv_layout.layout.classifier import continued_title, is_splittable, resolve_title
from cv_layout.models.section import FieldMapping


class TestIsSplittable:
    @pytest.mark.parametrize(
        "section_type", ["experience", "projects", "education", "training", "achievements"]
    )
    def test_splittable(self, section_type):
        assert is_splittable(section_type)

    @pytest.mark.parametrize(
        "section_type", ["general", "technical_skills", "specialized_skills", "page_break", "hobbies"]
    )
    def test_not_splittable(self, section_type):
        assert not is_splittable(section_type)


class TestResolveTitle:
    def test_field_mapping_override(self, sample_field_mappings):
        section = make_section("exp", "experience", 1)
        assert resolve_title(section, sample_field_mappings) == "Professional Experience"

    def test_override_only_for_matching_type(self, sample_field_mappings):
        section = make_section("edu", "education", 1)
        assert resolve_title(section, sample_field_mappings) == "Education"

    def test_other_fields_ignored(self):
        mappings = [
            FieldMapping(original_field_name="company_name", display_name="Employer", section_type="experience")
        ]
        assert resolve_title(make_section("exp", "experience", 1), mappings) == "Work Experience"

    def test_default_table(self):
        assert resolve_title(make_section("t", "training", 1), []) == "Training & Certifications"
        assert resolve_title(make_section("s", "technical_skills", 1), []) == "Technical Skills"

    def test_unknown_type_uses_raw_type(self):
        assert resolve_title(make_section("h", "hobbies", 1), []) == "hobbies"

    def test_continued_title(self):
        assert continued_title("Projects") == "Projects (continued)"
