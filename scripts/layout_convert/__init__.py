"""
Keyboard layout conversion between analyzer interchange formats.

Reads a canonical JSON layout and writes it as genkey, oxeylyzer or
keymeow.

Usage:
    python -m layout_convert genkey qwerty.json
    python -m layout_convert oxeylyzer qwerty.json
    python -m layout_convert keymeow qwerty.json -o qwerty.keymeow.json
"""

from .config import OutputConfig, load_output_config, load_yaml
from .errors import ConversionError, LayoutDecodeError, LayoutError
from .formats import dump_keymeow, load_keymeow, to_genkey, to_keymeow, to_oxeylyzer
from .layout import dump_layout, load_layout, parse_layout
from .matrix import build_matrix
from .models import Finger, Key, KeymeowComponent, KeymeowLayout, Layout, MatrixKey

__all__ = [
    # Models
    "Finger",
    "Key",
    "Layout",
    "MatrixKey",
    "KeymeowComponent",
    "KeymeowLayout",
    # Errors
    "LayoutError",
    "LayoutDecodeError",
    "ConversionError",
    # Config
    "OutputConfig",
    "load_yaml",
    "load_output_config",
    # Layout
    "parse_layout",
    "load_layout",
    "dump_layout",
    # Matrix
    "build_matrix",
    # Formats
    "to_genkey",
    "to_oxeylyzer",
    "to_keymeow",
    "dump_keymeow",
    "load_keymeow",
]
