"""Two-column pagination: main and sidebar columns packed independently."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from cv_layout.config import PaginationConfig
from cv_layout.layout.placement import partition
from cv_layout.layout.single_column import SingleColumnPaginator, validate_page_bounds
from cv_layout.measurement.types import MeasurementProvider
from cv_layout.models.page import Page
from cv_layout.models.section import FieldMapping, LayoutPlacement, TemplateSection

logger = logging.getLogger(__name__)


def merge_columns(main_pages: Sequence[Page], sidebar_pages: Sequence[Page]) -> list[Page]:
    """Merge two independently numbered page runs by page index.

    A column shorter than the other contributes nothing to the trailing pages.
    """
    total_pages = max(len(main_pages), len(sidebar_pages), 1)
    merged: list[Page] = []
    for index in range(total_pages):
        page = Page(page_number=index + 1)
        for column in (main_pages, sidebar_pages):
            if index < len(column):
                page.sections.extend(column[index].sections)
                page.partial_sections.update(column[index].partial_sections)
        merged.append(page)
    return merged


class DualColumnPaginator:
    """Paginates main and sidebar columns separately, then merges them."""

    def __init__(
        self,
        layout: str = "two-column",
        measurement: MeasurementProvider | None = None,
        config: PaginationConfig | None = None,
    ):
        self.layout = layout
        self.column_paginator = SingleColumnPaginator(measurement, config)

    def distribute(
        self,
        sections: Sequence[TemplateSection],
        field_mappings: Sequence[FieldMapping],
        employee_data: Mapping[str, Any] | None,
        content_height: float,
        max_pages: int,
        orientation: str = "portrait",
    ) -> list[Page]:
        validate_page_bounds(content_height, max_pages)
        main_sections, sidebar_sections = partition(sections)

        columns = {}
        for placement, column_sections in (
            (LayoutPlacement.MAIN, main_sections),
            (LayoutPlacement.SIDEBAR, sidebar_sections),
        ):
            columns[placement] = self.column_paginator.pack_column(
                column_sections,
                field_mappings,
                employee_data,
                content_height,
                max_pages,
                orientation,
                layout=self.layout,
                placement=placement.value,
            )

        main_pages = columns[LayoutPlacement.MAIN]
        sidebar_pages = columns[LayoutPlacement.SIDEBAR]
        logger.debug(
            "%s layout: main column %d pages, sidebar column %d pages",
            self.layout, len(main_pages), len(sidebar_pages),
        )
        return merge_columns(main_pages, sidebar_pages)
