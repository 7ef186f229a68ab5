"""Page layout and pagination of CV sections."""
from cv_layout.layout.dual_column import DualColumnPaginator, merge_columns
from cv_layout.layout.single_column import SingleColumnPaginator
from cv_layout.layout.strategy import SUPPORTED_LAYOUTS, LayoutKind, select_paginator

__all__ = [
    "DualColumnPaginator",
    "LayoutKind",
    "SUPPORTED_LAYOUTS",
    "SingleColumnPaginator",
    "merge_columns",
    "select_paginator",
]
