"""Pagination pipeline - resolves layout and runs the chosen paginator."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Sequence

from cv_layout.config import AppConfig, load_config
from cv_layout.layout.placement import classify_layout, partition
from cv_layout.layout.strategy import LayoutKind, is_dual_column, select_paginator
from cv_layout.measurement.provider import DefaultMeasurementProvider
from cv_layout.measurement.types import MeasurementProvider
from cv_layout.models.page import Page
from cv_layout.models.section import TemplateSection
from cv_layout.templates.loader import CVTemplate

logger = logging.getLogger(__name__)


@dataclass
class PaginationResult:
    """Pages of one document plus the parameters they were laid out with."""

    pages: list[Page]
    layout: str
    orientation: str
    content_height: float
    max_pages: int
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)


def resolve_layout(requested: str | None, sections: Sequence[TemplateSection]) -> str:
    """Pick the layout kind for a set of sections.

    An explicit single-column request is kept. A two-column kind needs
    sidebar sections; without a request the sections decide.
    """
    if requested is not None and not is_dual_column(requested):
        return LayoutKind.SINGLE_COLUMN.value

    main, sidebar = partition(sections)
    if not sidebar:
        return LayoutKind.SINGLE_COLUMN.value
    if requested is not None:
        return requested
    return classify_layout(main, sidebar)


class PaginationOrchestrator:
    """Runs the pagination flow for one employee and one CV template."""

    def __init__(
        self,
        config: AppConfig | None = None,
        measurement: MeasurementProvider | None = None,
    ):
        self.config = config or load_config()
        self.measurement = measurement or DefaultMeasurementProvider(self.config.measurement)

    def run(
        self,
        template: CVTemplate,
        profile: Mapping[str, Any] | None,
        *,
        orientation: str | None = None,
        max_pages: int | None = None,
        layout: str | None = None,
    ) -> PaginationResult:
        """Paginate a profile with a template.

        Args:
            template: Sections, field mappings and default layout settings.
            profile: Employee data bag keyed by section data keys.
            orientation: Overrides the template orientation.
            max_pages: Overrides the template page cap.
            layout: Overrides the template layout kind.
        """
        start = time.monotonic()

        orientation = orientation or template.orientation or self.config.page.orientation
        max_pages = max_pages or template.max_pages or self.config.page.max_pages
        effective_layout = resolve_layout(layout or template.layout, template.sections)
        content_height = self.config.page.content_height(orientation)

        paginator = select_paginator(effective_layout, self.measurement, self.config.pagination)
        pages = paginator.distribute(
            template.sections,
            template.field_mappings,
            profile,
            content_height,
            max_pages,
            orientation,
        )

        elapsed = time.monotonic() - start
        for page in pages:
            logger.debug("Page %d: %s", page.page_number, ", ".join(page.section_ids()))
        logger.info(
            "Paginated %s template: %d pages (%s, %s)",
            template.name, len(pages), effective_layout, orientation,
        )
        return PaginationResult(
            pages=pages,
            layout=effective_layout,
            orientation=orientation,
            content_height=content_height,
            max_pages=max_pages,
            elapsed_seconds=elapsed,
            metadata={"template": template.name, "requested_layout": layout or template.layout},
        )
