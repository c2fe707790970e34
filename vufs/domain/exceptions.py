"""Domain exceptions.

All domain-level errors that represent programming or configuration
mistakes. User-facing validation problems are never raised: validators
return lists of messages and code parsers return None. The exceptions
below cover inputs a caller is expected to get right.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching engine errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Code Errors
# ============================================================================


class CodeError(DomainError):
    """Base class for identifier generation errors."""

    pass


class UnknownDomainError(CodeError):
    """Raised when an item domain is not APPAREL or FOOTWEAR."""

    def __init__(self, domain: object) -> None:
        """Initialize unknown domain error.

        Args:
            domain: The rejected domain value.
        """
        super().__init__(
            f"Unknown item domain: {domain!r}",
            details={"domain": str(domain)},
        )


class InvalidSequenceError(CodeError):
    """Raised when a SKU sequence number is not a positive integer."""

    def __init__(self, sequence: object) -> None:
        """Initialize invalid sequence error.

        Args:
            sequence: The rejected sequence value.
        """
        super().__init__(
            f"Invalid SKU sequence {sequence!r}: must be a positive integer",
            details={"sequence": str(sequence)},
        )


class InvalidCodeInputError(CodeError):
    """Raised when a label yields no letters to build a code from."""

    def __init__(self, field: str, value: str) -> None:
        """Initialize invalid code input error.

        Args:
            field: Which input produced the empty code ("brand" or "item_type").
            value: The raw input value.
        """
        super().__init__(
            f"Cannot derive a {field} code from {value!r}",
            details={"field": field, "value": value},
        )


# ============================================================================
# Item Errors
# ============================================================================


class ItemError(DomainError):
    """Base class for catalog item errors."""

    pass


class InvalidItemError(ItemError):
    """Raised when a typed catalog item is built from an invalid record."""

    def __init__(self, errors: list[str]) -> None:
        """Initialize invalid item error.

        Args:
            errors: Every validation message produced for the record.
        """
        super().__init__(
            f"Invalid catalog item: {'; '.join(errors)}",
            details={"errors": list(errors)},
        )
        self.errors = list(errors)


# ============================================================================
# Consignment Errors
# ============================================================================


class ConsignmentError(DomainError):
    """Base class for consignment and payout errors."""

    pass


class InvalidRateError(ConsignmentError):
    """Raised when a commission or fee rate is outside 0-1."""

    def __init__(self, name: str, rate: object) -> None:
        """Initialize invalid rate error.

        Args:
            name: Name of the rate (e.g., "default_commission_rate").
            rate: The rejected value.
        """
        super().__init__(
            f"Invalid rate for {name}: {rate} (must be between 0 and 1)",
            details={"name": name, "rate": str(rate)},
        )


class InvalidAmountError(ConsignmentError):
    """Raised when a currency amount is negative, non-finite or not a number."""

    def __init__(self, amount: object, reason: str = "Amount must be a finite, non-negative number") -> None:
        """Initialize invalid amount error.

        Args:
            amount: The rejected amount.
            reason: Explanation of why the amount is invalid.
        """
        super().__init__(
            f"Invalid amount {amount!r}: {reason}",
            details={"amount": str(amount), "reason": reason},
        )


# ============================================================================
# Money Errors
# ============================================================================


class MoneyError(DomainError):
    """Base class for money-related errors."""

    pass


class NegativeMoneyError(MoneyError):
    """Raised when money amount would be negative."""

    def __init__(self, amount: int) -> None:
        """Initialize negative money error.

        Args:
            amount: The negative amount in minor units.
        """
        super().__init__(
            f"Money amount cannot be negative: {amount}",
            details={"amount": amount},
        )
