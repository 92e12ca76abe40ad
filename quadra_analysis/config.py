"""
Configuration schema for batch rectangle analysis.

Defines where the input CSV lives, how results are reported and how
invalid rows are handled.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

OUTPUT_FORMATS = {"text", "json"}


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Main configuration for a batch analysis run.

    Loaded from YAML and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    data_path: Path
    output_format: str = "text"  # "text" or "json"
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    skip_invalid_rows: bool = True

    def __post_init__(self):
        """Validate analysis configuration."""
        if not str(self.data_path):
            raise ValueError("data_path cannot be empty")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. "
                f"Must be one of {sorted(OUTPUT_FORMATS)}"
            )

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Invalid log_level: {self.log_level}")

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())

    def validate_paths(self) -> None:
        """
        Check that the input file exists.

        Raises:
            FileNotFoundError: If data_path does not exist
            ValueError: If data_path is a directory
        """
        if not self.data_path.exists():
            raise FileNotFoundError(
                f"Data file not found: {self.data_path}\n"
                f"Create the file or update 'data_path' in config"
            )

        if self.data_path.is_dir():
            raise ValueError(
                f"data_path must be a file, got directory: {self.data_path}"
            )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "AnalysisConfig":
        """
        Load configuration from YAML file.

        Relative data_path and log_file are resolved against the YAML
        file's directory.

        Example YAML:
            data_path: "../data/rectangles.csv"
            output_format: "text"
            log_level: "INFO"
            log_file: null
            skip_invalid_rows: true

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or values fail validation
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if "data_path" not in data:
            raise ValueError(f"Missing required config field 'data_path' in {yaml_path}")

        base_dir = yaml_path.parent

        log_file = data.get("log_file")
        if log_file is not None:
            log_file = _resolve(base_dir, log_file)

        return cls(
            data_path=_resolve(base_dir, data["data_path"]),
            output_format=data.get("output_format", "text"),
            log_level=str(data.get("log_level", "INFO")),
            log_file=log_file,
            skip_invalid_rows=bool(data.get("skip_invalid_rows", True)),
        )


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base_dir / path
