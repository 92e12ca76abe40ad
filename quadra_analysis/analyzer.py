"""
Pair Analyzer Module
====================

Applies the geometry queries to rectangle pairs and reports the first
relation that holds:

    containment -> adjacency -> intersection -> disjoint

Later queries are skipped once a relation is found. Geometry stays in
quadra_geometry; this module only orders the queries and logs outcomes.
"""

from typing import Iterable, List, Optional

from quadra_logging import LogEvent, StructuredLogger, create_logger

from .schemas import PairAnalysis, RectanglePair, RelationType


class PairAnalyzer:
    """
    Stateless analyzer for rectangle pairs.

    Usage:
        analyzer = PairAnalyzer()
        result = analyzer.analyze(pair)
        result.relation  # RelationType.ADJACENCY
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self.logger = logger or create_logger("analyzer")

    def analyze(self, pair: RectanglePair) -> PairAnalysis:
        """
        Determine the relation between the two rectangles of a pair.

        Args:
            pair: Rectangles to compare

        Returns:
            PairAnalysis carrying only the data of the relation found
        """
        first, second = pair.first, pair.second
        metadata = {'row_index': pair.row_index}

        first_in_second = first.is_contained_inside(second)
        second_in_first = second.is_contained_inside(first)

        if first_in_second or second_in_first:
            container = 1 if second_in_first else 2
            self.logger.debug(
                event=LogEvent.ANALYSIS_CONTAINMENT,
                message=f"Rectangle {3 - container} is contained inside Rectangle {container}",
                metadata={**metadata, 'container': container}
            )
            return PairAnalysis(
                row_index=pair.row_index,
                first=first,
                second=second,
                relation=RelationType.CONTAINMENT,
                container=container,
            )

        adjacency = first.is_adjacent(second)
        if adjacency.is_adjacent:
            self.logger.debug(
                event=LogEvent.ANALYSIS_ADJACENCY,
                message=f"Rectangles have adjacency of type: {adjacency.adjacency_type.value}",
                metadata={**metadata, 'adjacency_type': adjacency.adjacency_type.value}
            )
            return PairAnalysis(
                row_index=pair.row_index,
                first=first,
                second=second,
                relation=RelationType.ADJACENCY,
                adjacency=adjacency,
            )

        intersections = first.intersecting_points(second)
        if intersections:
            self.logger.debug(
                event=LogEvent.ANALYSIS_INTERSECTION,
                message=f"Rectangles intersect at {len(intersections)} points",
                metadata={**metadata, 'point_count': len(intersections)}
            )
            return PairAnalysis(
                row_index=pair.row_index,
                first=first,
                second=second,
                relation=RelationType.INTERSECTION,
                intersections=tuple(intersections),
            )

        self.logger.debug(
            event=LogEvent.ANALYSIS_DISJOINT,
            message="Rectangles have no containment, adjacency or intersections",
            metadata=metadata
        )
        return PairAnalysis(
            row_index=pair.row_index,
            first=first,
            second=second,
            relation=RelationType.DISJOINT,
        )

    def analyze_all(self, pairs: Iterable[RectanglePair]) -> List[PairAnalysis]:
        return [self.analyze(pair) for pair in pairs]
