"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:    str   = "reviewshelf"
    source:      str   = Field(default="reviews", description="Review directory path or http(s) URL of a listing")
    lang:        str   = Field(default="ko",      description="Page language tag; en* selects English, else Korean")
    output_dir:  str   = Field(default="dist",    description="Directory for the generated static site")
    max_workers: int   = Field(default=8,  ge=1,  description="Parallel document fetches while building the catalog")
    timeout:     float = Field(default=10.0, gt=0, description="HTTP source request timeout in seconds")
    site_title:  str   = Field(default="Reviews", description="Title of the generated list page")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then REVIEWSHELF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"REVIEWSHELF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
