"""Default measurement provider built on the bundled estimators."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from cv_layout.config import MeasurementConfig
from cv_layout.measurement.estimators import FlatEstimator, LayoutAwareEstimator
from cv_layout.measurement.splitters import SplitRequest, get_splitter
from cv_layout.measurement.types import SectionSplit

logger = logging.getLogger(__name__)


class DefaultMeasurementProvider:
    """Heuristic heights for A4 CV sections, with per-type item splitting."""

    def __init__(self, config: MeasurementConfig | None = None):
        self.config = config or MeasurementConfig()
        self.layout_estimator = LayoutAwareEstimator(self.config)
        self.flat_estimator = FlatEstimator(self.config)

    def estimate_section_height(
        self,
        section_type: str,
        items: Sequence[Any],
        layout: str = "single-column",
        placement: str = "main",
        orientation: str = "portrait",
    ) -> float:
        return self.layout_estimator.section(section_type, items, layout, placement, orientation)

    def estimate_height(
        self,
        section_type: str,
        items: Sequence[Any],
        orientation: str = "portrait",
    ) -> float:
        return self.flat_estimator.section(section_type, items, orientation)

    def split(
        self,
        section_type: str,
        items: Sequence[Any],
        available_height: float,
        title: str,
        layout: str = "single-column",
        placement: str = "main",
    ) -> SectionSplit:
        request = SplitRequest(
            items=list(items),
            available_height=available_height,
            title=title,
            layout=layout,
            placement=placement,
            estimator=self.layout_estimator,
        )
        result = get_splitter(section_type)(request)
        logger.debug(
            "Split %s (%s/%s) at %.1f: %d fit, %d remaining",
            section_type, layout, placement, available_height,
            len(result.fitting), len(result.remaining),
        )
        return result

    def can_section_fit(self, section_height: float, available_height: float) -> bool:
        return section_height <= available_height - self.config.safety_margin
