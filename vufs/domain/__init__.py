"""Domain layer - value objects and exceptions.

This module exports the building blocks shared by the catalog and
consignment packages:

- **Value Objects**: Immutable objects compared by value (Money)
- **Exceptions**: Engine-specific errors for invalid programmer input

Example usage:
    from decimal import Decimal

    from vufs.domain import Money

    fee = Money.from_decimal(Decimal("29"))
    print(fee)  # R$29.00 BRL
"""

from vufs.domain.base import ValueObject
from vufs.domain.exceptions import (
    CodeError,
    ConsignmentError,
    DomainError,
    InvalidAmountError,
    InvalidCodeInputError,
    InvalidItemError,
    InvalidRateError,
    InvalidSequenceError,
    ItemError,
    MoneyError,
    NegativeMoneyError,
    UnknownDomainError,
)
from vufs.domain.value_objects import DEFAULT_CURRENCY, Money

__all__ = [
    # Base classes
    "ValueObject",
    # Value Objects
    "DEFAULT_CURRENCY",
    "Money",
    # Exceptions
    "DomainError",
    "CodeError",
    "UnknownDomainError",
    "InvalidSequenceError",
    "InvalidCodeInputError",
    "ItemError",
    "InvalidItemError",
    "ConsignmentError",
    "InvalidRateError",
    "InvalidAmountError",
    "MoneyError",
    "NegativeMoneyError",
]
