"""Tests for pipeline orchestrator."""

import logging

import pytest

from conftest import experiences, make_section
from cv_layout.config import AppConfig, PageConfig
from cv_layout.pipeline.orchestrator import PaginationOrchestrator, PaginationResult, resolve_layout
from cv_layout.templates.loader import CVTemplate, load_template


def _collect(pages, section_id):
    items = []
    for page in pages:
        record = page.partial_sections.get(section_id)
        if record is not None:
            items.extend(record.items)
    return items


class TestResolveLayout:
    def test_single_column_request_kept(self):
        sections = [make_section("skills", "technical_skills", 1, placement="sidebar")]
        assert resolve_layout("single-column", sections) == "single-column"

    def test_unknown_request_is_single_column(self):
        sections = [make_section("skills", "technical_skills", 1, placement="sidebar")]
        assert resolve_layout("magazine", sections) == "single-column"

    def test_dual_request_without_sidebar(self):
        sections = [make_section("exp", "experience", 1)]
        assert resolve_layout("sidebar", sections) == "single-column"

    def test_dual_request_kept(self):
        sections = [make_section("edu", "education", 1, placement="sidebar")]
        assert resolve_layout("sidebar", sections) == "sidebar"
        assert resolve_layout("two-column", sections) == "two-column"

    def test_auto_detect(self):
        skills = [make_section("skills", "technical_skills", 1, placement="sidebar")]
        edu = [make_section("edu", "education", 1, placement="sidebar")]
        assert resolve_layout(None, skills) == "sidebar"
        assert resolve_layout(None, edu) == "two-column"
        assert resolve_layout(None, [make_section("exp", "experience", 1)]) == "single-column"


class TestPaginationOrchestrator:
    def test_run_with_stub(self, stub_provider, sample_template, sample_profile):
        config = AppConfig(page=PageConfig(portrait_content_height=300))
        orchestrator = PaginationOrchestrator(config, stub_provider)
        result = orchestrator.run(sample_template, sample_profile)

        assert isinstance(result, PaginationResult)
        assert result.layout == "single-column"
        assert result.orientation == "portrait"
        assert result.content_height == 300
        assert result.max_pages == 10
        assert result.page_count == len(result.pages) >= 2
        assert [p.page_number for p in result.pages] == list(range(1, result.page_count + 1))
        assert result.pages[0].section_ids()[0] == "general"
        assert len(_collect(result.pages, "projects")) == 3
        assert len(_collect(result.pages, "experience")) == 3
        assert result.metadata == {"template": "Test", "requested_layout": None}

    def test_overrides(self, stub_provider, sample_template, sample_profile):
        orchestrator = PaginationOrchestrator(AppConfig(), stub_provider)
        result = orchestrator.run(
            sample_template, sample_profile, orientation="landscape", max_pages=1
        )
        assert result.orientation == "landscape"
        assert result.content_height == AppConfig().page.landscape_content_height
        assert result.max_pages == 1
        assert result.page_count == 1
        assert stub_provider.estimate_calls[0][4] == "landscape"

    def test_template_settings_beat_config(self, stub_provider, sample_profile):
        template = CVTemplate(
            name="Landscape",
            orientation="landscape",
            max_pages=2,
            sections=[make_section("exp", "experience", 1)],
        )
        result = PaginationOrchestrator(AppConfig(), stub_provider).run(
            template, {"experiences": experiences(40)}
        )
        assert result.orientation == "landscape"
        assert result.max_pages == 2
        assert result.page_count == 2

    def test_config_orientation(self, stub_provider, sample_template, sample_profile):
        config = AppConfig(page=PageConfig(orientation="landscape"))
        result = PaginationOrchestrator(config, stub_provider).run(sample_template, sample_profile)
        assert result.orientation == "landscape"

    def test_layout_override(self, stub_provider, sample_profile):
        template = CVTemplate(
            name="Mixed",
            layout="single-column",
            sections=[
                make_section("exp", "experience", 1),
                make_section("skills", "technical_skills", 2, placement="sidebar"),
            ],
        )
        orchestrator = PaginationOrchestrator(AppConfig(), stub_provider)
        assert orchestrator.run(template, sample_profile).layout == "single-column"
        result = orchestrator.run(template, sample_profile, layout="two-column")
        assert result.layout == "two-column"
        assert result.metadata["requested_layout"] == "two-column"

    def test_empty_profile(self, stub_provider, sample_template):
        result = PaginationOrchestrator(AppConfig(), stub_provider).run(sample_template, {})
        assert result.page_count == 1
        assert result.pages[0].sections == []

    def test_logs_summary(self, stub_provider, sample_template, sample_profile, caplog):
        with caplog.at_level(logging.INFO, logger="cv_layout.pipeline.orchestrator"):
            PaginationOrchestrator(AppConfig(), stub_provider).run(sample_template, sample_profile)
        assert "Paginated Test template" in caplog.text

    def test_logs_page_contents(self, stub_provider, sample_template, sample_profile, caplog):
        config = AppConfig(page=PageConfig(portrait_content_height=300))
        with caplog.at_level(logging.DEBUG, logger="cv_layout.pipeline.orchestrator"):
            PaginationOrchestrator(config, stub_provider).run(sample_template, sample_profile)
        assert "Page 1: general, experience" in caplog.text
        assert "Page 2: projects, education" in caplog.text


class TestPresets:
    @pytest.mark.parametrize("name", ["single_column", "two_column", "sidebar"])
    def test_preset_with_default_measurement(self, name, sample_profile):
        template = load_template(name)
        result = PaginationOrchestrator(AppConfig()).run(template, sample_profile)

        assert 1 <= result.page_count <= template.max_pages
        assert [p.page_number for p in result.pages] == list(range(1, result.page_count + 1))
        experience = [e for e in sample_profile["experiences"] if e is not None]
        assert _collect(result.pages, "experience") == experience
        for page in result.pages:
            assert not any(s.is_page_break for s in page.sections)

    def test_sidebar_preset_layout(self, sample_profile):
        result = PaginationOrchestrator(AppConfig()).run(load_template("sidebar"), sample_profile)
        assert result.layout == "sidebar"
        assert "technical-skills" in result.pages[0].section_ids()
        # projects start after the page break
        assert "projects" not in result.pages[0].section_ids()

    def test_projects_cap_in_preset(self, sample_profile):
        result = PaginationOrchestrator(AppConfig()).run(load_template("two_column"), sample_profile)
        assert len(_collect(result.pages, "projects")) == 4
