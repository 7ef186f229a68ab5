"""Per-section-type item splitting against an available page height."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from cv_layout.config import MeasurementConfig
from cv_layout.measurement.estimators import LayoutAwareEstimator
from cv_layout.measurement.types import MeasuredItem, SectionSplit
from cv_layout.models.section import SectionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitRequest:
    items: Sequence[Any]
    available_height: float
    title: str
    layout: str
    placement: str
    estimator: LayoutAwareEstimator

    @property
    def config(self) -> MeasurementConfig:
        return self.estimator.config


SplitFn = Callable[[SplitRequest], SectionSplit]


def _greedy_split(req: SplitRequest, measure: Callable[[Any], float]) -> SectionSplit:
    """Take items in order while they fit under the safety margin.

    If not even the first item fits it is placed anyway, so every split
    makes progress.
    """
    cfg = req.config
    limit = req.available_height - cfg.safety_margin
    used = cfg.section_title_height
    result = SectionSplit()

    for index, item in enumerate(req.items):
        height = measure(item)
        if used + height + cfg.item_margin <= limit:
            result.fitting.append(MeasuredItem(item, height))
            used += height + cfg.item_margin
            continue
        result.remaining = [MeasuredItem(i, measure(i)) for i in req.items[index:]]
        break

    if not result.fitting and req.items:
        logger.debug("No %s items fit in %.1f, forcing the first one", req.title, req.available_height)
        result.fitting = [MeasuredItem(req.items[0], measure(req.items[0]))]
        result.remaining = [MeasuredItem(i, measure(i)) for i in req.items[1:]]
    return result


def split_experience(req: SplitRequest) -> SectionSplit:
    return _greedy_split(
        req, lambda item: req.estimator.experience_item(item, req.layout, req.placement)
    )


def split_projects(req: SplitRequest) -> SectionSplit:
    return _greedy_split(
        req, lambda item: req.estimator.project_item(item, req.layout, req.placement)
    )


def split_education(req: SplitRequest) -> SectionSplit:
    return _greedy_split(
        req, lambda item: req.estimator.education_item(item, req.layout, req.placement)
    )


def split_achievements(req: SplitRequest) -> SectionSplit:
    """Achievements have a fixed height and no inter-item margin."""
    cfg = req.config
    height = cfg.achievement_item_height
    limit = req.available_height - cfg.safety_margin
    used = cfg.section_title_height

    count = 0
    for _ in req.items:
        if used + height > limit:
            break
        used += height
        count += 1
    if count == 0 and req.items:
        count = 1

    return SectionSplit(
        fitting=[MeasuredItem(i, height) for i in req.items[:count]],
        remaining=[MeasuredItem(i, height) for i in req.items[count:]],
    )


def split_default(req: SplitRequest) -> SectionSplit:
    """Unknown types are not split: everything fits at a flat item height."""
    height = req.config.default_item_height
    return SectionSplit(fitting=[MeasuredItem(i, height) for i in req.items])


SPLITTERS: dict[str, SplitFn] = {
    SectionType.EXPERIENCE.value: split_experience,
    SectionType.PROJECTS.value: split_projects,
    SectionType.EDUCATION.value: split_education,
    SectionType.ACHIEVEMENTS.value: split_achievements,
}


def get_splitter(section_type: str) -> SplitFn:
    return SPLITTERS.get(section_type, split_default)
