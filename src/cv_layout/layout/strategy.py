"""Selection of a pagination strategy from a layout kind."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol, Sequence

from cv_layout.config import PaginationConfig
from cv_layout.layout.dual_column import DualColumnPaginator
from cv_layout.layout.single_column import SingleColumnPaginator
from cv_layout.measurement.types import MeasurementProvider
from cv_layout.models.page import Page
from cv_layout.models.section import FieldMapping, TemplateSection


class LayoutKind(str, Enum):
    SINGLE_COLUMN = "single-column"
    TWO_COLUMN = "two-column"
    SIDEBAR = "sidebar"


SUPPORTED_LAYOUTS: tuple[str, ...] = tuple(kind.value for kind in LayoutKind)


class Paginator(Protocol):
    layout: str

    def distribute(
        self,
        sections: Sequence[TemplateSection],
        field_mappings: Sequence[FieldMapping],
        employee_data: Mapping[str, Any] | None,
        content_height: float,
        max_pages: int,
        orientation: str = "portrait",
    ) -> list[Page]: ...


def is_dual_column(layout: str | None) -> bool:
    return layout in (LayoutKind.TWO_COLUMN.value, LayoutKind.SIDEBAR.value)


def select_paginator(
    layout: str | None,
    measurement: MeasurementProvider | None = None,
    config: PaginationConfig | None = None,
) -> Paginator:
    """Dual-column for two-column/sidebar, single-column for anything else."""
    if is_dual_column(layout):
        return DualColumnPaginator(layout, measurement, config)
    return SingleColumnPaginator(measurement, config)
