#!/usr/bin/env python3
"""
Currency Codes and Decimal Handling Utilities

All monetary amounts are fixed-point decimals with exactly two fractional
digits. Nothing in the ledger ever touches floating point.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse strictly: optional minus sign, digits, optional fractional part
- Normalize to scale 2 with ROUND_HALF_UP after every operation
- Render amounts as plain decimal strings (no exponent) for stable exports
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .errors import InvalidAmountError, InvalidCurrencyError

DECIMAL_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")

MONEY_SCALE = 2


@dataclass(frozen=True, order=True)
class CurrencyCode:
    """
    ISO-4217 style currency code (three uppercase ASCII letters).

    Examples:
        >>> str(CurrencyCode("USD"))
        'USD'
        >>> CurrencyCode("usd")
        Traceback (most recent call last):
        ...
        finledger.core.errors.InvalidCurrencyError: Currency code must be uppercase A-Z: 'usd'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 3:
            raise InvalidCurrencyError(f"Currency code must be 3 characters: {self.value!r}")
        if not all("A" <= ch <= "Z" for ch in self.value):
            raise InvalidCurrencyError(f"Currency code must be uppercase A-Z: {self.value!r}")

    @classmethod
    def parse(cls, value: Union[str, "CurrencyCode"]) -> "CurrencyCode":
        """Accept either an existing code or its string form."""
        if isinstance(value, CurrencyCode):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value


USD = CurrencyCode("USD")
EUR = CurrencyCode("EUR")
GBP = CurrencyCode("GBP")
QAR = CurrencyCode("QAR")


def normalize_scale(value: Decimal, places: int = MONEY_SCALE) -> Decimal:
    """
    Quantize a decimal to a fixed number of places using ROUND_HALF_UP.

    Examples:
        normalize_scale(Decimal("10.005")) -> Decimal("10.01")
        normalize_scale(Decimal("1")) -> Decimal("1.00")
    """
    quantized = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    # Rounding a small negative value can produce -0.00
    return quantized if quantized else quantized.copy_abs()


def parse_decimal_or_none(raw: str | None) -> Decimal | None:
    """
    Parse a decimal string normalized to scale 2, or None when invalid.

    Only plain decimal notation is accepted: no currency symbols, no
    thousands separators, no exponents, no leading plus sign.

    Examples:
        parse_decimal_or_none("12.345") -> Decimal("12.35")
        parse_decimal_or_none(" 7 ") -> Decimal("7.00")
        parse_decimal_or_none("not-a-number") -> None
        parse_decimal_or_none("") -> None
    """
    if raw is None:
        return None
    trimmed = str(raw).strip()
    if not trimmed or not DECIMAL_PATTERN.match(trimmed):
        return None
    try:
        return normalize_scale(Decimal(trimmed))
    except InvalidOperation:
        return None


def parse_decimal(raw: str | None) -> Decimal:
    """
    Parse a decimal string normalized to scale 2.

    Raises:
        InvalidAmountError: If the input is empty or not a plain decimal
    """
    value = parse_decimal_or_none(raw)
    if value is None:
        raise InvalidAmountError(f"Invalid decimal value: {raw!r}")
    return value


def format_amount(value: Decimal) -> str:
    """Render a decimal as a plain string, never in scientific notation."""
    return f"{value:f}"
