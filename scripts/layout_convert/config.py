"""Output configuration models and loaders."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

MAX_JSON_INDENT = 8


class OutputConfig(BaseModel):
    """How structured (JSON) output is written."""

    json_indent: int = Field(2, ge=0, le=MAX_JSON_INDENT, description="Indent width, 0 for one line")
    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters")
    trailing_newline: bool = Field(True, description="End JSON output with a newline")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents.

    Raises:
        ValueError: If the document is not a mapping
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def load_output_config(path: Path) -> OutputConfig:
    """Load output configuration from the ``output`` section of a YAML file.

    Raises:
        ValueError: If the file or its ``output`` section is not a mapping,
            or a value is out of range (pydantic ValidationError)
    """
    if not path.exists():
        return OutputConfig()

    section = load_yaml(path).get("output") or {}
    if not isinstance(section, dict):
        raise ValueError(f"{path}: 'output' must be a mapping")
    return OutputConfig.model_validate(section)
