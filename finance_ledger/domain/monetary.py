"""Monetary values stored as integer minor units of an asset."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Dict, Optional, Union

from finance_ledger.domain.errors import InvalidParameterError


@dataclass(frozen=True)
class Asset:
    """A denomination: ISO currency or crypto asset."""

    code: str
    decimals: int
    symbol: str

    def __str__(self) -> str:
        return self.code


BRL = Asset("BRL", 2, "R$")
USD = Asset("USD", 2, "$")
EUR = Asset("EUR", 2, "€")
GBP = Asset("GBP", 2, "£")
JPY = Asset("JPY", 0, "¥")
CAD = Asset("CAD", 2, "CA$")
AUD = Asset("AUD", 2, "A$")
BTC = Asset("BTC", 8, "₿")
ETH = Asset("ETH", 18, "Ξ")

ASSETS: Dict[str, Asset] = {
    asset.code: asset for asset in (BRL, USD, EUR, GBP, JPY, CAD, AUD, BTC, ETH)
}

DEFAULT_ACCOUNT_ASSET = BRL

# Amounts are stored in signed 64-bit columns
MAX_MINOR_UNITS = 2 ** 63 - 1


def find_asset(code: Optional[str]) -> Optional[Asset]:
    """Look up an asset by code, case-insensitively."""
    if not code:
        return None
    return ASSETS.get(code.strip().upper())


def get_asset(code: Optional[str]) -> Asset:
    """Like find_asset, but raises InvalidParameterError for unknown codes."""
    asset = find_asset(code)
    if asset is None:
        raise InvalidParameterError("asset", code or "")
    return asset


@dataclass(frozen=True)
class Money:
    """Immutable (asset, minor units) pair.

    ``amount`` is always an int: cents for USD, satoshis for BTC.
    """

    asset: Asset
    amount: int

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Money amount must be an int, got {type(self.amount).__name__}")

    @classmethod
    def zero(cls, asset: Asset) -> "Money":
        return cls(asset, 0)

    @classmethod
    def parse(cls, value: Union[str, int, float, Decimal], asset: Asset) -> "Money":
        """Parse a major-unit amount ("12.34") into minor units of ``asset``."""
        try:
            if isinstance(value, float):
                value = repr(value)
            number = Decimal(str(value).strip())
            if not number.is_finite():
                raise InvalidOperation
            scaled = number.scaleb(asset.decimals)
        except (InvalidOperation, ValueError):
            raise InvalidParameterError("amount", "must be a valid decimal number")
        if abs(scaled) > MAX_MINOR_UNITS:
            raise InvalidParameterError("amount", "out of range")
        minor = scaled.quantize(Decimal(1), rounding=ROUND_HALF_EVEN)
        return cls(asset, int(minor))

    def with_asset(self, asset: Asset) -> "Money":
        """Relabel to another asset, keeping the minor units unchanged."""
        return Money(asset, self.amount)

    def to_decimal(self) -> Decimal:
        return Decimal(self.amount).scaleb(-self.asset.decimals)

    def amount_string(self) -> str:
        """Plain major-unit string, e.g. '-12.50'."""
        return f"{self.to_decimal():.{self.asset.decimals}f}"

    @property
    def sign(self) -> int:
        return (self.amount > 0) - (self.amount < 0)

    def is_zero(self) -> bool:
        return self.amount == 0

    def negate(self) -> "Money":
        return Money(self.asset, -self.amount)

    def abs(self) -> "Money":
        return Money(self.asset, abs(self.amount))

    def _check_asset(self, other: "Money") -> None:
        if self.asset != other.asset:
            raise ValueError(f"cannot combine {self.asset.code} with {other.asset.code}")

    def __add__(self, other: "Money") -> "Money":
        self._check_asset(other)
        return Money(self.asset, self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        self._check_asset(other)
        return Money(self.asset, self.amount - other.amount)

    def __str__(self) -> str:
        sign = "-" if self.amount < 0 else ""
        major = abs(self.to_decimal())
        return f"{sign}{self.asset.symbol}{major:,.{self.asset.decimals}f}"
