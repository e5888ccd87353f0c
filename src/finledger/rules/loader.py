#!/usr/bin/env python3
"""
Rule File Loader

Loads custom categorization patterns from YAML:

    patterns:
      - pattern: "whole ?foods|grocer"
        category: food
      - pattern: "^AMZN"
        category: shopping
        ignore_case: false

Entries are compiled in file order, which is also their match priority.
"""

import logging
import re
from pathlib import Path

import yaml

from ..core.config import get_config
from ..core.errors import InvalidIdError, ValidationError
from ..core.ids import CategoryId
from .base import RuleEngine
from .categorize import CategoryPattern
from .defaults import default_rules

logger = logging.getLogger(__name__)


def load_patterns(path: str | Path) -> tuple[CategoryPattern, ...]:
    """
    Load categorization patterns from a YAML rules file.

    Args:
        path: Path to the YAML file

    Returns:
        Compiled (pattern, category id) pairs in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file structure, a regex, or a category id is invalid
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid rules file {path}: {e}") from e

    entries = data.get("patterns") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValidationError(f"Rules file {path} must contain a 'patterns' list")

    patterns: list[CategoryPattern] = []
    for index, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict) or "pattern" not in entry or "category" not in entry:
            raise ValidationError(f"Rule #{index} in {path} needs 'pattern' and 'category'")
        flags = re.IGNORECASE if entry.get("ignore_case", True) else 0
        try:
            compiled = re.compile(str(entry["pattern"]), flags)
        except re.error as e:
            raise ValidationError(f"Rule #{index} in {path} has invalid regex: {e}") from e
        try:
            category_id = CategoryId(str(entry["category"]))
        except InvalidIdError as e:
            raise ValidationError(f"Rule #{index} in {path} has invalid category: {e}") from e
        patterns.append((compiled, category_id))

    logger.info("Loaded %d categorization patterns from %s", len(patterns), path)
    return tuple(patterns)


def load_engine(path: str | Path | None = None) -> RuleEngine:
    """
    Build a RuleEngine from a rules file.

    Falls back to the configured LEDGER_RULES_FILE, then to the default
    pattern table when no file is configured.
    """
    if path is None:
        path = get_config().rules.rules_file
    if path is None:
        logger.debug("No rules file configured, using default patterns")
        return RuleEngine(default_rules())
    return RuleEngine(default_rules(load_patterns(path)))
