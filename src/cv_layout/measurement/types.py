"""Measurement contract consumed by the paginators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence


@dataclass
class MeasuredItem:
    """One section item with its estimated rendered height."""

    content: Any
    estimated_height: float = 0.0


@dataclass
class SectionSplit:
    """Result of splitting a section's items against an available height."""

    fitting: list[MeasuredItem] = field(default_factory=list)
    remaining: list[MeasuredItem] = field(default_factory=list)

    @property
    def fitting_height(self) -> float:
        return sum(item.estimated_height for item in self.fitting)


class MeasurementProvider(Protocol):
    """Estimates rendered heights and splits item lists by available height."""

    def estimate_section_height(
        self,
        section_type: str,
        items: Sequence[Any],
        layout: str = "single-column",
        placement: str = "main",
        orientation: str = "portrait",
    ) -> float: ...

    def estimate_height(
        self,
        section_type: str,
        items: Sequence[Any],
        orientation: str = "portrait",
    ) -> float: ...

    def split(
        self,
        section_type: str,
        items: Sequence[Any],
        available_height: float,
        title: str,
        layout: str = "single-column",
        placement: str = "main",
    ) -> SectionSplit: ...
