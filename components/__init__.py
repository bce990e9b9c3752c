"""
UI Components package for the Countries & Continents Streamlit application.

This package contains reusable UI components that can be used across different pages.
"""

from .ui_helpers import (
    print_widget_label,
    info_box,
    warning_box,
    code_span,
    detail_row,
    flag_frame,
    section_header,
    BlockingLoader,
)

__all__ = [
    'print_widget_label',
    'info_box',
    'warning_box',
    'code_span',
    'detail_row',
    'flag_frame',
    'section_header',
    'BlockingLoader',
]
