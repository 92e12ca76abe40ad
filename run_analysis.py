#!/usr/bin/env python3
"""
Rectangle Analysis - Entry Point
================================

Reads rectangle pairs from a CSV file and reports, for every row, the first
relation that holds between the two rectangles:

    containment -> adjacency -> intersection -> disjoint

Usage:
    python run_analysis.py --config config/analysis.yaml

Lifecycle:
    1. Load configuration from YAML (CLI options override it)
    2. Setup logging (console + optional file)
    3. Load rows (invalid rows skipped or fatal, per config)
    4. Analyse every pair
    5. Print report (text or JSON) and summary

Logs:
    - Console (stderr): configured level
    - File: optional, same level
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO

from quadra_analysis import (
    AnalysisConfig,
    AnalysisSummary,
    PairAnalyzer,
    RectangleDataLoader,
    format_json,
    format_summary,
    format_text,
)
from quadra_logging import LogEvent, create_logger


# ─────────────────────────────────────────────────────────────────────────────
# Logging Setup
# ─────────────────────────────────────────────────────────────────────────────

def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Setup logging for the analysis run.

    Args:
        level: Root logging level
        log_file: Optional path to log file

    Returns:
        Logger instance for the runner
    """
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
            *(
                [logging.FileHandler(log_file)]
                if log_file
                else []
            )
        ]
    )

    return logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application
# ─────────────────────────────────────────────────────────────────────────────

class AnalysisApp:
    """
    Batch analysis wrapper.

    Handles:
    - Logging setup
    - Loading and analysing every row
    - Writing the report to the output stream
    """

    def __init__(self, config: AnalysisConfig, stream: Optional[TextIO] = None):
        self.config = config
        self.stream = stream or sys.stdout
        self.logger = setup_logging(config.level, config.log_file)

        self.events = create_logger("runner", level=config.level)
        self.loader = RectangleDataLoader(create_logger("loader", level=config.level))
        self.analyzer = PairAnalyzer(create_logger("analyzer", level=config.level))

    def _emit(self, lines: List[str]) -> None:
        for line in lines:
            print(line, file=self.stream)

    def run(self) -> int:
        """
        Process the configured data file.

        Returns:
            Exit code (0 on success)

        Raises:
            FileNotFoundError: If the data file does not exist
            ValueError: On unreadable data, or an invalid row when
                skip_invalid_rows is disabled
        """
        self.config.validate_paths()

        self.logger.info(f"Loading rectangles: {self.config.data_path}")
        self.events.info(
            event=LogEvent.BATCH_STARTED,
            message="Processing rectangles",
            metadata={'data_path': str(self.config.data_path)}
        )

        loaded = self.loader.load(
            self.config.data_path,
            skip_invalid=self.config.skip_invalid_rows
        )
        results = self.analyzer.analyze_all(loaded.pairs)
        summary = AnalysisSummary.from_results(results, loaded.rejected)

        if self.config.output_format == "json":
            print(format_json(results, summary), file=self.stream)
        else:
            for result in results:
                self._emit(format_text(result))
            self._emit(format_summary(summary))

        self.events.info(
            event=LogEvent.BATCH_COMPLETED,
            message=f"Processed {summary.rows_processed} rows",
            metadata=summary.to_dict()
        )
        return 0


# ─────────────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace with parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Quadra - rectangle containment, adjacency and intersection report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with the default config
  python run_analysis.py --config config/analysis.yaml

  # Analyse another file, JSON output
  python run_analysis.py --config config/analysis.yaml --data data/other.csv --format json

  # Also write logs to a file
  python run_analysis.py --config config/analysis.yaml --log-file logs/analysis.log
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        required=True,
        help='Path to analysis configuration YAML file'
    )

    parser.add_argument(
        '--data',
        type=Path,
        help='CSV file to analyse (overrides data_path)'
    )

    parser.add_argument(
        '--format',
        choices=['text', 'json'],
        help='Report format (overrides output_format)'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        help='Path to log file (overrides log_file)'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point.

    Workflow:
    1. Parse CLI arguments
    2. Load configuration and apply overrides
    3. Run AnalysisApp
    """
    args = parse_args(argv)

    overrides = {}
    if args.data:
        overrides['data_path'] = args.data
    if args.format:
        overrides['output_format'] = args.format
    if args.log_file:
        overrides['log_file'] = args.log_file

    try:
        config = replace(AnalysisConfig.from_yaml(args.config), **overrides)
    except (FileNotFoundError, ValueError) as e:
        create_logger("runner").error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load configuration",
            metadata={'config_path': str(args.config)},
            exc_info=e
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        exit_code = AnalysisApp(config).run()
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == '__main__':
    main()
