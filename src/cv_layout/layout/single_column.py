"""Single-column pagination: greedy packing of ordered sections onto pages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from cv_layout.config import PaginationConfig
from cv_layout.layout.accumulator import PageAccumulator
from cv_layout.layout.classifier import continued_title, is_splittable, resolve_title
from cv_layout.layout.placement import sort_sections
from cv_layout.measurement.provider import DefaultMeasurementProvider
from cv_layout.measurement.types import MeasurementProvider
from cv_layout.models.page import Page, PartialSectionRecord
from cv_layout.models.section import FieldMapping, SectionType, TemplateSection
from cv_layout.parsers.profile_data import as_items, get_section_data, is_empty

logger = logging.getLogger(__name__)


def validate_page_bounds(content_height: float, max_pages: int) -> None:
    if max_pages < 1:
        raise ValueError(f"max_pages must be at least 1, got {max_pages}")
    if content_height < 0:
        raise ValueError(f"content_height must not be negative, got {content_height}")


def usable_items(section: TemplateSection, data: Any) -> list[Any]:
    """Items of a section after null filtering and the projects cap.

    Splittable sections need list data; anything else counts as no content.
    """
    if is_empty(data):
        return []
    if is_splittable(section.section_type):
        if not isinstance(data, (list, tuple)):
            return []
        items = as_items(data)
        cap = section.styling_config.projects_to_view
        if section.section_type == SectionType.PROJECTS.value and cap:
            items = items[:cap]
        return items
    if isinstance(data, Mapping):
        return [data]
    return as_items(data)


class SingleColumnPaginator:
    """Packs one ordered stream of sections onto fixed-height pages."""

    layout = "single-column"

    def __init__(
        self,
        measurement: MeasurementProvider | None = None,
        config: PaginationConfig | None = None,
    ):
        self.measurement = measurement or DefaultMeasurementProvider()
        self.config = config or PaginationConfig()

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
        pages = self.pack_column(
            sort_sections(sections),
            field_mappings,
            employee_data,
            content_height,
            max_pages,
            orientation,
            layout=self.layout,
            placement="main",
        )
        return pages or [Page(page_number=1)]

    def pack_column(
        self,
        sections: Sequence[TemplateSection],
        field_mappings: Sequence[FieldMapping],
        employee_data: Mapping[str, Any] | None,
        content_height: float,
        max_pages: int,
        orientation: str = "portrait",
        *,
        layout: str = "single-column",
        placement: str = "main",
    ) -> list[Page]:
        """Pack already-ordered sections into pages numbered from 1.

        Returns an empty list when nothing was placed.
        """
        acc = PageAccumulator(content_height, max_pages)

        for section in sections:
            if section.is_page_break:
                acc.seal()
                continue

            items = usable_items(
                section, get_section_data(employee_data, section.section_type)
            )
            if not items:
                logger.debug("Skipping %s section %s: no content", section.section_type, section.id)
                continue

            if acc.at_capacity:
                logger.warning(
                    "Page limit %d reached, %s section %s not placed",
                    max_pages, section.section_type, section.id,
                )
                continue

            if is_splittable(section.section_type):
                title = resolve_title(section, field_mappings)
                self._place_splittable(acc, section, items, title, layout, placement)
            else:
                self._place_block(acc, section, items, layout, placement, orientation)

        return acc.finish(ensure_page=False)

    def _place_block(
        self,
        acc: PageAccumulator,
        section: TemplateSection,
        items: list[Any],
        layout: str,
        placement: str,
        orientation: str,
    ) -> None:
        estimated = self.measurement.estimate_section_height(
            section.section_type, items, layout, placement, orientation
        )
        if acc.needs_break(estimated):
            acc.seal()
            if acc.at_capacity:
                logger.warning(
                    "Page limit %d reached, %s section %s not placed",
                    acc.max_pages, section.section_type, section.id,
                )
                return
        acc.place(section, estimated)

    def _place_splittable(
        self,
        acc: PageAccumulator,
        section: TemplateSection,
        items: list[Any],
        title: str,
        layout: str,
        placement: str,
    ) -> None:
        cfg = self.config
        total = len(items)
        remaining = items
        first_slice = True
        max_iterations = min(acc.max_pages * 2, cfg.max_split_iterations)
        iterations = 0

        logger.info("Splitting %s section with %d items", section.section_type, total)

        while remaining and not acc.at_capacity:
            if iterations >= max_iterations:
                logger.warning(
                    "Iteration limit %d reached for %s section %s, %d of %d items not placed",
                    max_iterations, section.section_type, section.id, len(remaining), total,
                )
                return
            iterations += 1

            available = acc.available
            if available < cfg.min_available_height and acc.current.has_content:
                logger.debug("Only %.1f left on page %d, starting a new page", available, acc.current.page_number)
                acc.seal()
                continue

            split = self.measurement.split(
                section.section_type, remaining, available, title, layout, placement
            )
            logger.debug(
                "Available height %.1f: %d items fit, %d remaining",
                available, len(split.fitting), len(split.remaining),
            )

            if not split.fitting:
                logger.warning(
                    "No %s items fit in %.1f available height, starting a new page",
                    section.section_type, available,
                )
                acc.seal()
                continue

            next_remaining = [
                item.content for item in split.remaining if item.content is not None
            ]
            record = PartialSectionRecord(
                items=[item.content for item in split.fitting if item.content is not None],
                start_index=total - len(remaining),
                total_items=total,
                is_partial=len(next_remaining) > 0,
                title=title if first_slice else continued_title(title),
            )
            used = split.fitting_height + cfg.section_title_allowance
            acc.record_partial(section, record, used)
            logger.debug("Used height %.1f, page height now %.1f", used, acc.height)

            remaining = next_remaining
            first_slice = False
            if remaining:
                acc.seal()

        if remaining:
            logger.warning(
                "Page limit %d reached, %d of %d %s items not placed",
                acc.max_pages, len(remaining), total, section.section_type,
            )
