# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular and text rendering of comparison results.

These helpers only read results; they never re-run a comparison.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

import pandas as pd

from ..comparison.results import (
    ComparisonReport,
    PropertyComparisonResult,
    PropertyComparisonResultCollection,
)
from ..core.primitives import Outcome

FRAME_COLUMNS = [
    "name",
    "source_property",
    "target_property",
    "source_value",
    "target_value",
    "outcome",
    "string_coercion",
    "exception",
]

_ResultsLike = Union[ComparisonReport, PropertyComparisonResultCollection, Iterable[PropertyComparisonResult]]


def _results_of(results: _ResultsLike) -> Iterable[PropertyComparisonResult]:
    if isinstance(results, ComparisonReport):
        return results.results
    return results


def results_to_frame(results: _ResultsLike) -> pd.DataFrame:
    """
    One row per property comparison result.

    Args:
        results: A ComparisonReport, a results collection or any iterable of results

    Returns:
        DataFrame with FRAME_COLUMNS, in result order. Values are kept as
        Python objects (object dtype) so mixed property types survive intact.

    Example:
        ```python
        df = results_to_frame(comparer.compare(person, dto))
        print(df[df["outcome"] != "equal"])
        ```
    """
    rows = [
        {
            "name": result.name,
            "source_property": result.source_property.name,
            "target_property": (
                result.target_property.name if result.target_property is not None else None
            ),
            "source_value": result.source_value,
            "target_value": result.target_value,
            "outcome": result.outcome.value,
            "string_coercion": result.string_coercion,
            "exception": repr(result.exception) if result.exception is not None else None,
        }
        for result in _results_of(results)
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["source_value"] = df["source_value"].astype(object)
    df["target_value"] = df["target_value"].astype(object)
    return df


def summarize_report(report: ComparisonReport) -> Dict[str, Any]:
    """
    Count results per outcome.

    Returns:
        Dict with 'is_different', 'total', one count per Outcome value,
        'string_coercions' and 'failures'
    """
    results = list(report.results)
    summary: Dict[str, Any] = {
        "is_different": report.is_different,
        "total": len(results),
    }
    for outcome in Outcome:
        summary[outcome.value] = sum(1 for r in results if r.outcome == outcome)
    summary["string_coercions"] = sum(1 for r in results if r.string_coercion)
    summary["failures"] = sum(1 for r in results if r.exception is not None)
    return summary


_OUTCOME_SYMBOLS = {
    Outcome.LESS_THAN: "<",
    Outcome.EQUAL: "=",
    Outcome.GREATER_THAN: ">",
    Outcome.PROPERTY_NOT_FOUND: "?",
    Outcome.UNDEFINED: "!",
}


def format_report(report: ComparisonReport, title: Optional[str] = None) -> str:
    """
    Format a comparison report as readable text.

    Args:
        report: Report returned by ObjectComparer.compare()
        title: Optional title for the output

    Returns:
        Formatted string suitable for printing or logging
    """
    summary = summarize_report(report)
    output = [f"# {title or 'Property Comparison'}\n"]
    verdict = "DIFFERENT" if report.is_different else "NOT DIFFERENT"
    output.append(f"**Verdict**: {verdict} ({summary['total']} properties compared)")
    output.append("")

    for result in report.results:
        symbol = _OUTCOME_SYMBOLS[result.outcome]
        if result.outcome == Outcome.PROPERTY_NOT_FOUND:
            line = f"- {result.source_property.name} {symbol} (no matching property)"
        else:
            target = result.target_property.name
            line = (
                f"- {result.source_property.name} -> {target}: "
                f"{result.source_value!r} {symbol} {result.target_value!r}"
            )
        if result.string_coercion:
            line += " [as strings]"
        if result.exception is not None:
            line += f" [failed: {result.exception}]"
        output.append(line)

    return "\n".join(output)
