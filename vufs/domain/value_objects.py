"""Value Objects for the domain layer.

Payout amounts and listing prices leave the engine as ``Money``: a whole
number of centavos (or cents) tagged with its currency.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

from vufs.domain.base import ValueObject
from vufs.domain.exceptions import NegativeMoneyError

DEFAULT_CURRENCY = "BRL"

CURRENCY_SYMBOLS: dict[str, str] = {"BRL": "R$", "USD": "$", "EUR": "€", "GBP": "£"}

_CENT = Decimal("0.01")


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True)
class Money(ValueObject):
    """An amount settled in minor currency units.

    Attributes:
        amount_cents: Amount in centavos (or the currency's minor unit).
        currency: ISO 4217 code, stored uppercase.
    """

    amount_cents: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Reject negative amounts; payouts and prices are never below zero."""
        if self.amount_cents < 0:
            raise NegativeMoneyError(self.amount_cents)
        object.__setattr__(self, "currency", self.currency.upper())

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: str = DEFAULT_CURRENCY) -> Self:
        """Settle an exact amount to the nearest minor unit.

        Half a centavo rounds up (ROUND_HALF_UP), so R$291.305 settles to
        29131 centavos.

        Args:
            amount: Amount in major units (reais).
            currency: Currency code.

        Returns:
            Money instance.
        """
        cents = amount.quantize(_CENT, rounding=ROUND_HALF_UP).scaleb(2)
        return cls(amount_cents=int(cents), currency=currency)

    def to_decimal(self) -> Decimal:
        """Amount in major units with two places (67970 -> Decimal("679.70"))."""
        return Decimal(self.amount_cents).scaleb(-2)

    def __str__(self) -> str:
        """Display form used in listings, e.g. 'R$29.00 BRL'."""
        symbol = CURRENCY_SYMBOLS.get(self.currency, "")
        return f"{symbol}{self.to_decimal():.2f} {self.currency}"
