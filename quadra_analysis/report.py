"""
Report formatting for analysis results.

Text output mirrors the console report of a batch run; JSON output is a
single document with every result and the summary.
"""

import json
from typing import List, Sequence

from quadra_geometry import Rectangle

from .schemas import AnalysisSummary, PairAnalysis, RelationType

SEPARATOR = "====="


def _format_number(value: float) -> str:
    # Crossing points carry float noise from the segment parametrisation
    value = round(float(value), 9)
    return str(int(value)) if value.is_integer() else str(value)


def describe_rectangle(label: str, rect: Rectangle) -> str:
    corners = ", ".join(
        f"({_format_number(corner.x)}, {_format_number(corner.y)})"
        for corner in rect.corners
    )
    return (
        f"{label}: origin: ({_format_number(rect.origin.x)}, {_format_number(rect.origin.y)}), "
        f"width: {_format_number(rect.width)}, height: {_format_number(rect.height)}, "
        f"corners: [{corners}]"
    )


def format_text(analysis: PairAnalysis) -> List[str]:
    """Human-readable lines for one analysed pair."""
    lines = [
        SEPARATOR,
        describe_rectangle("Rectangle 1", analysis.first),
        describe_rectangle("Rectangle 2", analysis.second),
    ]

    if analysis.relation is RelationType.CONTAINMENT:
        contained = 3 - analysis.container
        lines.append(
            f"Rectangle {contained} is contained inside Rectangle {analysis.container}"
        )
        return lines
    lines.append("Rectangles have no containment")

    if analysis.relation is RelationType.ADJACENCY:
        lines.append(
            f"Rectangles have adjacency of type: {analysis.adjacency.adjacency_type.value}"
        )
        return lines
    lines.append("Rectangles are not adjacent")

    if analysis.relation is RelationType.INTERSECTION:
        points = ", ".join(
            f"({_format_number(point.x)}, {_format_number(point.y)})"
            for point in analysis.intersections
        )
        lines.append(f"Rectangles intersect at these coordinates: [{points}]")
        return lines
    lines.append("Rectangles have no intersections")

    return lines


def format_summary(summary: AnalysisSummary) -> List[str]:
    lines = [SEPARATOR, f"Processed {summary.rows_processed} rows"]
    if summary.rows_rejected:
        lines.append(f"Rejected {summary.rows_rejected} invalid rows")
    for relation, count in summary.relation_counts.items():
        lines.append(f"  {relation}: {count}")
    return lines


def format_json(results: Sequence[PairAnalysis], summary: AnalysisSummary) -> str:
    """Serialize results and summary as an indented JSON document."""
    return json.dumps(
        {
            "results": [result.to_dict() for result in results],
            "summary": summary.to_dict(),
        },
        indent=2,
    )
