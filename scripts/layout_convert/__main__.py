"""CLI entry point for layout_convert package.

Usage:
    python -m layout_convert genkey qwerty.json
    python -m layout_convert oxeylyzer qwerty.json -o qwerty.txt
    python -m layout_convert keymeow qwerty.json --indent 4
"""

from .cli import main

if __name__ == "__main__":
    main()
