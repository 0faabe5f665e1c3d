"""
Fixed-point monetary value.

Money is a signed integer count of ten-thousandths. Arithmetic and
comparison work on that integer, so no value ever passes through a
float. Decimal is only used at the edges, to read and show values.
"""

import re
from dataclasses import dataclass
from decimal import Decimal

from payment_ledger.exceptions import FormatError

SCALE = 4
UNITS_PER_WHOLE = 10 ** SCALE

# Signed 64-bit, the width of the BIGINT column amounts are persisted in
MIN_UNITS = -(2 ** 63)
MAX_UNITS = 2 ** 63 - 1
MAX_WHOLE_DIGITS = len(str(MAX_UNITS // UNITS_PER_WHOLE))

_DECIMAL_TEXT = re.compile(r"^([+-]?)([0-9]*)(?:\.([0-9]*))?$")


@dataclass(frozen=True, order=True)
class Money:
    units: int

    def __post_init__(self):
        if not isinstance(self.units, int) or isinstance(self.units, bool):
            raise TypeError(
                f"Money units must be an int, got {type(self.units).__name__}"
            )

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """
        Parse decimal text such as "10", "2.5" or "-0.0001".

        Raises FormatError for anything that is not a plain decimal
        with at most four fractional digits, or that does not fit
        in a signed 64-bit count of ten-thousandths.
        """
        stripped = text.strip()
        match = _DECIMAL_TEXT.match(stripped)
        if not match:
            raise FormatError(text, "not a decimal number")

        sign, whole, fraction = match.groups()
        fraction = fraction or ""
        if not whole and not fraction:
            raise FormatError(text, "no digits")
        if len(fraction) > SCALE:
            raise FormatError(text, f"more than {SCALE} fractional digits")

        # Bounded before int() so huge inputs fail here and not in the parser
        whole = whole.lstrip("0")
        if len(whole) > MAX_WHOLE_DIGITS:
            raise FormatError(text, "out of range")

        units = int(whole or "0") * UNITS_PER_WHOLE + int(fraction.ljust(SCALE, "0"))
        if sign == "-":
            units = -units
        return cls._checked(units, text)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Money":
        """Build Money from an exact Decimal with at most four places."""
        if not value.is_finite():
            raise FormatError(str(value), "not a finite number")
        scaled = value.scaleb(SCALE)
        if scaled != scaled.to_integral_value():
            raise FormatError(str(value), f"more than {SCALE} fractional digits")
        if scaled.adjusted() >= len(str(MAX_UNITS)):
            raise FormatError(str(value), "out of range")
        return cls._checked(int(scaled), str(value))

    @classmethod
    def _checked(cls, units: int, text: str) -> "Money":
        if not MIN_UNITS <= units <= MAX_UNITS:
            raise FormatError(text, "out of range")
        return cls(units)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.units + other.units)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.units - other.units)

    def __neg__(self) -> "Money":
        return Money(-self.units)

    def add(self, other: "Money") -> "Money":
        return self + other

    def subtract(self, other: "Money") -> "Money":
        return self - other

    def is_negative(self) -> bool:
        return self.units < 0

    def to_decimal(self) -> Decimal:
        return Decimal(self.units).scaleb(-SCALE)

    def to_display_text(self) -> str:
        """Render with exactly four fractional digits, e.g. "-0.5000"."""
        sign = "-" if self.units < 0 else ""
        whole, fraction = divmod(abs(self.units), UNITS_PER_WHOLE)
        return f"{sign}{whole}.{fraction:0{SCALE}d}"

    def __str__(self) -> str:
        return self.to_display_text()

    def __repr__(self) -> str:
        return f"Money('{self.to_display_text()}')"
