#!/usr/bin/env python3
"""
Money Primitive Type

Immutable fixed-point money value tagged with a currency.
Amounts always carry exactly two fractional digits; every operation
re-normalizes with ROUND_HALF_UP so values never drift.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from .currency import CurrencyCode, format_amount, normalize_scale, parse_decimal
from .errors import CurrencyMismatchError, DivisionByZeroError, InvalidAmountError, ValidationError

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in a single currency.

    Construct through ``Money.of`` so that input is parsed and rounded; the raw
    constructor only accepts amounts that already have scale 2.

    Examples:
        >>> price = Money.of("10.005", "USD")
        >>> str(price)
        '10.01 USD'

        >>> # Arithmetic keeps scale 2
        >>> str(price * 3)
        '30.03 USD'
        >>> str(Money.of("2.50", "GBP") / 2)
        '1.25 GBP'

        >>> # Mixing currencies is an error
        >>> Money.of("1", "USD") + Money.of("1", "EUR")
        Traceback (most recent call last):
        ...
        finledger.core.errors.CurrencyMismatchError: Currency mismatch: USD vs EUR
    """

    amount: Decimal
    currency: CurrencyCode

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError("Money amount must be a Decimal")
        if not isinstance(self.currency, CurrencyCode):
            raise ValidationError("Money currency must be a CurrencyCode")
        if self.amount.as_tuple().exponent != -2:
            raise ValidationError(f"Money amount must have scale 2: {self.amount}")

    @classmethod
    def of(cls, value: Union[str, Decimal, int], currency: Union[CurrencyCode, str]) -> "Money":
        """
        Create Money from a decimal string, Decimal, or integer.

        Args:
            value: Amount such as "12.34", Decimal("12.345") or 12
            currency: CurrencyCode or its three-letter string

        Returns:
            Money rounded half-up to two decimal places

        Raises:
            InvalidAmountError: If a string value is not a plain decimal
        """
        code = CurrencyCode.parse(currency)
        if isinstance(value, bool):
            raise InvalidAmountError(f"Invalid decimal value: {value!r}")
        if isinstance(value, str):
            return cls(parse_decimal(value), code)
        if isinstance(value, int):
            return cls(normalize_scale(Decimal(value)), code)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidAmountError(f"Invalid decimal value: {value!r}")
            return cls(normalize_scale(value), code)
        raise InvalidAmountError(f"Unsupported amount type: {type(value).__name__}")

    @classmethod
    def zero(cls, currency: Union[CurrencyCode, str]) -> "Money":
        """Zero amount in a currency."""
        return cls(normalize_scale(_ZERO), CurrencyCode.parse(currency))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Money":
        """Create Money from its JSON form ``{"amount": "1.00", "currency": "USD"}``."""
        if "amount" not in data:
            raise ValidationError("Missing amount")
        if "currency" not in data:
            raise ValidationError("Missing currency")
        return cls.of(str(data["amount"]), str(data["currency"]))

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"amount": format_amount(self.amount), "currency": self.currency.value}

    def is_zero(self) -> bool:
        return self.amount == _ZERO

    def is_positive(self) -> bool:
        return self.amount > _ZERO

    def is_negative(self) -> bool:
        return self.amount < _ZERO

    def abs(self) -> "Money":
        """Absolute value."""
        if self.amount >= _ZERO:
            return self
        return Money(-self.amount, self.currency)

    def plus(self, other: "Money") -> "Money":
        """Add an amount of the same currency."""
        self._ensure_same_currency(other)
        return Money(normalize_scale(self.amount + other.amount), self.currency)

    def minus(self, other: "Money") -> "Money":
        """Subtract an amount of the same currency."""
        self._ensure_same_currency(other)
        return Money(normalize_scale(self.amount - other.amount), self.currency)

    def times(self, multiplier: Union[int, Decimal]) -> "Money":
        """Multiply by an integer or decimal, rounding half-up."""
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, Decimal)):
            raise TypeError(f"Cannot multiply Money by {type(multiplier).__name__}")
        return Money(normalize_scale(self.amount * Decimal(multiplier)), self.currency)

    def div(self, divisor: int) -> "Money":
        """
        Divide by an integer, rounding half-up.

        Raises:
            DivisionByZeroError: If divisor is 0
        """
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            raise TypeError(f"Cannot divide Money by {type(divisor).__name__}")
        if divisor == 0:
            raise DivisionByZeroError("Division by zero")
        return Money(normalize_scale(self.amount / Decimal(divisor)), self.currency)

    def compare_to(self, other: "Money") -> int:
        """Return -1, 0 or 1; currencies must match."""
        self._ensure_same_currency(other)
        if self.amount < other.amount:
            return -1
        if self.amount > other.amount:
            return 1
        return 0

    def _ensure_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(f"Currency mismatch: {self.currency} vs {other.currency}")

    def __add__(self, other: "Money") -> "Money":
        return self.plus(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.minus(other)

    def __neg__(self) -> "Money":
        return Money(-self.amount, self.currency)

    def __mul__(self, multiplier: Union[int, Decimal]) -> "Money":
        return self.times(multiplier)

    def __rmul__(self, multiplier: Union[int, Decimal]) -> "Money":
        return self.times(multiplier)

    def __truediv__(self, divisor: int) -> "Money":
        return self.div(divisor)

    def __lt__(self, other: "Money") -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: "Money") -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Money") -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: "Money") -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"{format_amount(self.amount)} {self.currency}"

    def __repr__(self) -> str:
        return f"Money(amount=Decimal('{format_amount(self.amount)}'), currency={self.currency.value!r})"
