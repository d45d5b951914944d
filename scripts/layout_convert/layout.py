"""Layout loading and serialization."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import LayoutDecodeError
from .models import Layout

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_layout(data: bytes | str, path: Path | None = None) -> Layout:
    """Parse a layout from a JSON document.

    Args:
        data: JSON document
        path: Source file, used in error messages

    Returns:
        Parsed Layout

    Raises:
        LayoutDecodeError: If the document is not a valid layout
    """
    try:
        return Layout.model_validate_json(data)
    except ValidationError as exc:
        raise LayoutDecodeError(f"invalid layout: {exc}", path) from exc


def load_layout(path: Path) -> Layout:
    """Load a layout file.

    Files ending in ``.yaml``/``.yml`` are read as YAML, anything else as JSON.

    Args:
        path: Path to the layout file

    Returns:
        Parsed Layout

    Raises:
        LayoutDecodeError: If the file cannot be read or is not a valid layout
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LayoutDecodeError(f"cannot read layout: {exc.strerror}", path) from exc

    if path.suffix.lower() not in YAML_SUFFIXES:
        layout = parse_layout(raw, path)
    else:
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise LayoutDecodeError(f"malformed YAML: {exc}", path) from exc
        try:
            layout = Layout.model_validate(data)
        except ValidationError as exc:
            raise LayoutDecodeError(f"invalid layout: {exc}", path) from exc

    logger.debug("Loaded layout %r from %s (%d keys)", layout.name, path, len(layout.keys))
    return layout


def dump_layout(layout: Layout, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize a layout to its canonical JSON form.

    Timestamps are written as RFC 3339 strings and fingers by name.
    """
    return json.dumps(
        layout.model_dump(mode="json"),
        indent=indent or None,
        ensure_ascii=ensure_ascii,
    )
