from __future__ import annotations

"""Configuration loading and validation for scalebook.

This module loads YAML configuration, applies defaults, and validates
enumerations before building the typed settings model.
"""

import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV_VAR = "SCALEBOOK_CONFIG"

ALLOWED_DOUBLE_SHARPS = {"x", "##"}


class SpellingConfig(BaseModel):
    """Note spelling options.

    - default_octave: octave used for pitch arithmetic when a tonic has none
    - double_sharp: glyph for a +2 alteration ("x" or "##")
    """

    default_octave: int = Field(4, ge=-1, le=9)
    double_sharp: str = "x"


class StepsConfig(BaseModel):
    half: str = Field("H", min_length=1)
    whole: str = Field("W", min_length=1)
    augmented: str = Field("W.", min_length=1)
    close_octave: bool = True


class ScalebookConfig(BaseModel):
    spelling: SpellingConfig = Field(default_factory=SpellingConfig)
    steps: StepsConfig = Field(default_factory=StepsConfig)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        raise


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. Falls back to the
            SCALEBOOK_CONFIG environment variable, then package defaults.

    Returns:
        A dictionary with configuration values.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def validate_config(cfg: Dict[str, Any]) -> ScalebookConfig:
    """Apply defaults and validate configuration values.

    Unsupported enumeration values fall back to defaults with a warning;
    wrongly typed values are rejected by the settings model.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated settings.
    """
    # Shallow defaults for missing sections
    cfg["spelling"] = cfg.get("spelling") or {}
    cfg["steps"] = cfg.get("steps") or {}

    spelling = cfg["spelling"]
    steps = cfg["steps"]

    spelling.setdefault("default_octave", 4)
    spelling.setdefault("double_sharp", "x")

    steps.setdefault("half", "H")
    steps.setdefault("whole", "W")
    steps.setdefault("augmented", "W.")
    steps.setdefault("close_octave", True)

    double_sharp = spelling.get("double_sharp")
    if double_sharp not in ALLOWED_DOUBLE_SHARPS:
        print(f"WARNING: Unsupported double_sharp '{double_sharp}', using 'x'.", file=sys.stderr)
        spelling["double_sharp"] = "x"

    symbols = [steps.get("half"), steps.get("whole"), steps.get("augmented")]
    if len(set(symbols)) != len(symbols):
        print(f"WARNING: Step symbols must be distinct, got {symbols}; using H/W/W.", file=sys.stderr)
        steps.update({"half": "H", "whole": "W", "augmented": "W."})

    return ScalebookConfig(**cfg)


@lru_cache(maxsize=None)
def get_config() -> ScalebookConfig:
    """Process-wide settings, read once."""
    return validate_config(load_config())
