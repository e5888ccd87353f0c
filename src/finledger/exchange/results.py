#!/usr/bin/env python3
"""
Export and Import Result Types
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..core.models import Budget, Category, Transaction

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True)
class ExportResult:
    """Serialized export payload with its media type and suggested file name."""

    content: bytes
    mime_type: str
    file_name: str

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def write_to(self, destination: str | Path) -> Path:
        """
        Write the payload to disk.

        Args:
            destination: Target file, or a directory to place ``file_name`` in

        Returns:
            Path of the written file
        """
        path = Path(destination)
        if path.is_dir():
            path = path / self.file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.content)
        logger.info("Wrote %d bytes to %s", len(self.content), path)
        return path


@dataclass(frozen=True)
class ImportResult:
    """Entities loaded from an import, plus non-fatal warnings."""

    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    budgets: tuple[Budget, ...] = ()
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


def decode_payload(payload: bytes | str) -> str:
    """Decode UTF-8 input and strip a leading byte-order mark."""
    text = payload.decode("utf-8") if isinstance(payload, (bytes, bytearray)) else payload
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]
    return text


def log_warnings(warnings: list[str], source: str, limit: int) -> None:
    """Log import warnings, capped at ``limit`` lines."""
    for warning in warnings[:limit]:
        logger.warning("%s: %s", source, warning)
    if len(warnings) > limit:
        logger.warning("%s: %d more warnings not shown", source, len(warnings) - limit)
