"""Height estimation formulas for CV sections.

Heights are in 96 DPI pixels, the same unit as the page content height.
Two families are provided:

- layout-aware estimators, which scale line lengths, line heights and safety
  multipliers by the column the section is rendered in;
- layout-agnostic estimators, which only know the page orientation and assume
  a full-width single column.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence

from cv_layout.config import MeasurementConfig

_TAG_RE = re.compile(r"<[^>]*>")


@dataclass(frozen=True)
class LayoutMetrics:
    """Typographic metrics of one column in one layout kind."""

    chars_per_line: int
    tech_items_per_line: int
    base_line_height: float
    base_item_height: float
    tech_line_height: float
    url_height: float
    safety_multiplier: float
    wrap_multiplier: float
    skills_height: float
    default_item_height: float
    general_multiplier: float


SINGLE_COLUMN = LayoutMetrics(
    chars_per_line=80,
    tech_items_per_line=6,
    base_line_height=20,
    base_item_height=60,
    tech_line_height=25,
    url_height=20,
    safety_multiplier=1.2,
    wrap_multiplier=1.0,
    skills_height=60,
    default_item_height=30,
    general_multiplier=1.0,
)

TWO_COLUMN = LayoutMetrics(
    chars_per_line=45,
    tech_items_per_line=3,
    base_line_height=18,
    base_item_height=50,
    tech_line_height=22,
    url_height=18,
    safety_multiplier=1.3,
    wrap_multiplier=1.15,
    skills_height=65,
    default_item_height=28,
    general_multiplier=1.1,
)

SIDEBAR_MAIN = LayoutMetrics(
    chars_per_line=55,
    tech_items_per_line=4,
    base_line_height=19,
    base_item_height=55,
    tech_line_height=23,
    url_height=18,
    safety_multiplier=1.25,
    wrap_multiplier=1.1,
    skills_height=60,
    default_item_height=28,
    general_multiplier=0.9,
)

# Sidebar content wraps more, so every multiplier is larger
SIDEBAR_SIDEBAR = LayoutMetrics(
    chars_per_line=25,
    tech_items_per_line=2,
    base_line_height=16,
    base_item_height=45,
    tech_line_height=20,
    url_height=15,
    safety_multiplier=1.4,
    wrap_multiplier=1.3,
    skills_height=80,
    default_item_height=25,
    general_multiplier=1.2,
)


def get_layout_metrics(layout: str, placement: str = "main") -> LayoutMetrics:
    """Return the metrics for a layout kind and column placement."""
    if layout == "sidebar":
        return SIDEBAR_SIDEBAR if placement == "sidebar" else SIDEBAR_MAIN
    if layout == "two-column":
        return TWO_COLUMN
    return SINGLE_COLUMN


def item_field(item: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style item."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def as_text(value: Any) -> str:
    """Flatten a field value to text; lists of bullets are joined."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return " ".join(as_text(v) for v in value if v is not None)
    return str(value)


def rich_text_height(
    text: Any,
    chars_per_line: int,
    line_height: float,
    wrap_multiplier: float = 1.0,
) -> float:
    """Estimate the height of an HTML fragment from its plain-text length."""
    if not text:
        return 0.0
    text = as_text(text)
    if not text:
        return 0.0
    plain = _TAG_RE.sub("", text)
    lines = max(1, math.ceil(len(plain) / chars_per_line))
    # Each formatting tag adds a little vertical space
    format_bonus = len(_TAG_RE.findall(text)) * 2
    return lines * line_height * wrap_multiplier + format_bonus


def technologies_height(
    technologies: Any,
    items_per_line: int,
    line_height: float,
) -> float:
    """Height of a technology list; a plain string counts as one entry."""
    if isinstance(technologies, str):
        count = 1 if technologies.strip() else 0
    elif isinstance(technologies, (list, tuple)):
        count = sum(1 for t in technologies if t is not None)
    else:
        count = 0
    if not count:
        return 0.0
    lines = math.ceil(count / items_per_line)
    return lines * line_height + 10  # +10 for the label


class LayoutAwareEstimator:
    """Item and section heights for a given layout kind and column."""

    def __init__(self, config: MeasurementConfig | None = None):
        self.config = config or MeasurementConfig()

    def _rich_text(self, text: str | None, metrics: LayoutMetrics) -> float:
        return rich_text_height(
            text, metrics.chars_per_line, metrics.base_line_height, metrics.wrap_multiplier
        )

    def experience_item(self, item: Any, layout: str, placement: str = "main") -> float:
        m = get_layout_metrics(layout, placement)
        # Experience carries more header lines than other entries
        base = m.base_item_height + 10
        description = self._rich_text(item_field(item, "description"), m)
        return (base + description + self.config.item_margin) * m.safety_multiplier

    def project_item(self, item: Any, layout: str, placement: str = "main") -> float:
        m = get_layout_metrics(layout, placement)
        description = self._rich_text(item_field(item, "description"), m)
        tech = technologies_height(
            item_field(item, "technologies_used"), m.tech_items_per_line, m.tech_line_height
        )
        url = m.url_height if item_field(item, "url") else 0.0
        total = m.base_item_height + description + tech + url + self.config.item_margin
        return total * m.safety_multiplier

    def education_item(self, item: Any, layout: str, placement: str = "main") -> float:
        m = get_layout_metrics(layout, placement)
        base = m.base_item_height - 10
        department = 15 if item_field(item, "department") else 0
        gpa = 15 if item_field(item, "gpa") else 0
        return (base + department + gpa + self.config.item_margin) * m.safety_multiplier

    def section(
        self,
        section_type: str,
        items: Sequence[Any],
        layout: str = "single-column",
        placement: str = "main",
        orientation: str = "portrait",
    ) -> float:
        m = get_layout_metrics(layout, placement)
        if section_type == "experience":
            content = sum(self.experience_item(i, layout, placement) for i in items)
        elif section_type == "projects":
            content = sum(self.project_item(i, layout, placement) for i in items)
        elif section_type == "education":
            content = sum(self.education_item(i, layout, placement) for i in items)
        elif section_type == "general":
            orientation_factor = 0.75 if orientation == "landscape" else 1.0
            content = 80 * m.general_multiplier * orientation_factor
        elif section_type in ("technical_skills", "specialized_skills"):
            content = m.skills_height
        else:
            content = len(items) * m.default_item_height
        return self.config.section_title_height + content + self.config.safety_margin


class FlatEstimator:
    """Layout-agnostic heights: full-width single column, orientation only."""

    def __init__(self, config: MeasurementConfig | None = None):
        self.config = config or MeasurementConfig()

    def experience_item(self, item: Any) -> float:
        description = rich_text_height(item_field(item, "description"), 80, 18)
        return 60 + description + self.config.item_margin

    def project_item(self, item: Any) -> float:
        description = rich_text_height(item_field(item, "description"), 80, 16)
        tech = technologies_height(item_field(item, "technologies_used"), 6, 25)
        url = 20 if item_field(item, "url") else 0
        return 50 + description + tech + url + self.config.item_margin

    def education_item(self, item: Any) -> float:
        department = 15 if item_field(item, "department") else 0
        gpa = 15 if item_field(item, "gpa") else 0
        return 40 + department + gpa + self.config.item_margin

    def section(
        self, section_type: str, items: Sequence[Any], orientation: str = "portrait"
    ) -> float:
        if section_type == "experience":
            content = sum(self.experience_item(i) for i in items)
        elif section_type == "projects":
            content = sum(self.project_item(i) for i in items)
        elif section_type == "education":
            content = sum(self.education_item(i) for i in items)
        elif section_type == "general":
            content = 60 if orientation == "landscape" else 80
        elif section_type in ("technical_skills", "specialized_skills"):
            content = 60
        else:
            content = len(items) * 30
        return self.config.section_title_height + content + self.config.safety_margin
