"""Utility functions."""

from .formatting import (
    format_cell,
    format_change,
    format_row,
    format_submission,
    status_lines,
)
from .terminal import (
    create_table,
    format_cell_color,
    format_change_color,
    format_outcome_color,
    render_snapshot,
)

__all__ = [
    "format_cell",
    "format_change",
    "format_row",
    "format_submission",
    "status_lines",
    "create_table",
    "format_cell_color",
    "format_change_color",
    "format_outcome_color",
    "render_snapshot",
]
