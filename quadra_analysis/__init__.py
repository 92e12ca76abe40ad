"""
Quadra Analysis
===============

Bounded Context: Batch processing of rectangle pairs.

Responsibilities:
- Configuration (YAML)
- CSV loading into RectanglePair records
- Relation analysis (containment -> adjacency -> intersection -> disjoint)
- Text and JSON reports

The geometry itself lives in quadra_geometry; nothing here computes
coordinates.
"""

from .config import AnalysisConfig
from .schemas import (
    CSV_COLUMNS,
    AnalysisSummary,
    LoadResult,
    PairAnalysis,
    RectanglePair,
    RelationType,
)
from .loader import RectangleDataLoader
from .analyzer import PairAnalyzer
from .report import format_json, format_summary, format_text

__all__ = [
    'AnalysisConfig',
    'CSV_COLUMNS',
    'AnalysisSummary',
    'LoadResult',
    'PairAnalysis',
    'RectanglePair',
    'RelationType',
    'RectangleDataLoader',
    'PairAnalyzer',
    'format_json',
    'format_summary',
    'format_text',
]
