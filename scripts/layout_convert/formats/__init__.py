"""Output formats for keyboard layouts."""

from .genkey import genkey_finger_index, to_genkey
from .keymeow import dump_keymeow, load_keymeow, to_keymeow
from .oxeylyzer import to_oxeylyzer
from .utils import format_row

__all__ = [
    # Genkey
    "genkey_finger_index",
    "to_genkey",
    # Oxeylyzer
    "to_oxeylyzer",
    # Keymeow
    "to_keymeow",
    "dump_keymeow",
    "load_keymeow",
    # Utils
    "format_row",
]
