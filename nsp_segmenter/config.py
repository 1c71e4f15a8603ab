"""Configuration management for the segmentation pipeline."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class SegmentationConfig(BaseModel):
    """Configuration for the N-shortest-path engine."""

    n_path: int = Field(default=10, ge=1, description="Number of lightest weight classes to keep")
    max_word_len: int = Field(default=6, ge=2, description="Longest dictionary word matched")
    max_paths: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on materialized paths per clause (None = unbounded)",
    )
    delimiter: str = "-"
    split_clauses: bool = Field(
        default=True,
        description="Split each line on sentence punctuation before segmenting",
    )
    workers: int = Field(default=1, ge=1)


class DictionaryConfig(BaseModel):
    """Where to load the dictionary from."""

    path: Optional[Path] = None

    @field_validator("path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/segmented_output")
    save_single_lines: bool = False  # Create individual CSV files per line
    save_full_files: bool = True     # Create one CSV file with all rows combined


class Config(BaseModel):
    """Main configuration for the segmentation pipeline."""

    input_file: Optional[Path] = None
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping at the top level: {path}")
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
