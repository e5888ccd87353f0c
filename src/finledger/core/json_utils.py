#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing with consistent formatting.
Snapshots and reports written by the ledger go through these helpers so
output is pretty-printed and byte-stable for identical input.
"""

import json
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any, indent: int = 2, sort_keys: bool = False) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        indent: Indentation width (default: 2)
        sort_keys: If True, sort dictionary keys (default: False)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(format_json(data, indent=indent, sort_keys=sort_keys))


def format_json(data: Any, indent: int | None = 2, sort_keys: bool = False) -> str:
    """
    Format data as a JSON string.

    Args:
        data: Data to format
        indent: Indentation width, or None for compact output
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        JSON string (non-ASCII characters kept as-is)
    """
    if indent is None:
        return json.dumps(data, ensure_ascii=False, sort_keys=sort_keys, separators=(",", ":"))
    return json.dumps(data, indent=indent, ensure_ascii=False, sort_keys=sort_keys)
