"""Height measurement and item splitting for CV sections."""
from cv_layout.measurement.provider import DefaultMeasurementProvider
from cv_layout.measurement.types import MeasuredItem, MeasurementProvider, SectionSplit

__all__ = [
    "DefaultMeasurementProvider",
    "MeasuredItem",
    "MeasurementProvider",
    "SectionSplit",
]
