"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging of rectangle analysis runs.

Event Naming Convention:
    <category>.<action>

    category: batch, row, analysis, error

Example Log Query (jq):
    jq 'select(.event == "analysis.adjacency") | .metadata.adjacency_type'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - batch.*: Whole-file processing
    - row.*: Input row handling
    - analysis.*: Relation found for a rectangle pair
    - error.*: Error conditions
    """

    # ========== Batch Events ==========
    BATCH_STARTED = "batch.started"
    """Input file opened, processing begins."""

    BATCH_COMPLETED = "batch.completed"
    """All rows processed, summary available."""

    # ========== Row Events ==========
    ROW_LOADED = "row.loaded"
    """Row parsed into a rectangle pair."""

    ROW_INVALID = "row.invalid"
    """Row rejected (missing column, bad number, bad dimension)."""

    # ========== Analysis Events ==========
    ANALYSIS_CONTAINMENT = "analysis.containment"
    """One rectangle contains the other."""

    ANALYSIS_ADJACENCY = "analysis.adjacency"
    """Rectangles share boundary without overlapping."""

    ANALYSIS_INTERSECTION = "analysis.intersection"
    """Rectangle boundaries cross."""

    ANALYSIS_DISJOINT = "analysis.disjoint"
    """No containment, adjacency or intersection."""

    # ========== Error Events ==========
    INPUT_READ_ERROR = "error.input_read"
    """Input file missing or unreadable."""

    INVALID_DIMENSION_ERROR = "error.invalid_dimension"
    """Rectangle constructed with non-positive width or height."""

    CONFIG_ERROR = "error.config"
    """Configuration could not be loaded or validated."""

