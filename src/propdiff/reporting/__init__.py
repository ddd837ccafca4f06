# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff Reporting

Render comparison results as pandas DataFrames, outcome summaries or text.
"""

from .comparison_report import (
    FRAME_COLUMNS,
    format_report,
    results_to_frame,
    summarize_report,
)

__all__ = [
    "FRAME_COLUMNS",
    "format_report",
    "results_to_frame",
    "summarize_report",
]
