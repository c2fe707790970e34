"""Consignment payout calculations.

A consigned sale is split in two steps:

    platform_fee    = gross * channel fee rate
    commission      = (gross - platform_fee) * commission rate
    net_to_owner    = (gross - platform_fee) - commission

All arithmetic is exact Decimal arithmetic; nothing is rounded until a
caller asks for ``FinancialBreakdown.rounded``.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Mapping, Self

import structlog

from vufs.consignment.channels import DEFAULT_PLATFORM_FEE_RATES, ExportChannel, channel_key
from vufs.domain.base import ValueObject
from vufs.domain.exceptions import InvalidAmountError, InvalidRateError
from vufs.domain.value_objects import DEFAULT_CURRENCY, Money
from vufs.infrastructure.config import EngineSettings

logger = structlog.get_logger()

Amount = Decimal | int | float | str


def to_decimal(value: Any) -> Decimal:
    """Convert a currency amount or rate to an exact Decimal.

    Floats go through their shortest repr, so 0.029 becomes
    Decimal("0.029") rather than its binary expansion.

    Raises:
        InvalidAmountError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value, "Booleans are not amounts")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, (int, str)):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            raise InvalidAmountError(value, "Amount must be a number")
    except InvalidOperation as exc:
        raise InvalidAmountError(value, "Amount must be a number") from exc
    if not result.is_finite():
        raise InvalidAmountError(value, "Amount must be finite")
    return result


def _non_negative(value: Any) -> Decimal:
    amount = to_decimal(value)
    if amount < 0:
        raise InvalidAmountError(value, "Amount cannot be negative")
    return amount


def _rate(name: str, value: Any) -> Decimal:
    try:
        rate = to_decimal(value)
    except InvalidAmountError as exc:
        raise InvalidRateError(name, value) from exc
    if not 0 <= rate <= 1:
        raise InvalidRateError(name, value)
    return rate


# ============================================================================
# Settings
# ============================================================================


@dataclass(frozen=True)
class ConsignmentSettings(ValueObject):
    """Immutable consignment configuration snapshot.

    Attributes:
        default_commission_rate: Commission fraction taken after platform fees.
        platform_fee_rates: Fee fraction per export channel identifier.
        payment_terms: Days between sale and payout.
        minimum_payout: Smallest amount paid out to an owner.
        auto_repass_threshold: Amount at or above which payout is automatic.
        currency: Currency payouts are settled in.
    """

    default_commission_rate: Decimal = Decimal("0.30")
    platform_fee_rates: Mapping[str, Decimal] = field(
        default_factory=lambda: DEFAULT_PLATFORM_FEE_RATES,
        hash=False,
    )
    payment_terms: int = 7
    minimum_payout: Decimal = Decimal("50.00")
    auto_repass_threshold: Decimal = Decimal("1000.00")
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Coerce numbers to Decimal and validate ranges."""
        object.__setattr__(
            self,
            "default_commission_rate",
            _rate("default_commission_rate", self.default_commission_rate),
        )
        rates = {
            channel_key(channel): _rate(f"platform_fee_rates[{channel_key(channel)}]", rate)
            for channel, rate in self.platform_fee_rates.items()
        }
        object.__setattr__(self, "platform_fee_rates", MappingProxyType(rates))
        if isinstance(self.payment_terms, bool) or not isinstance(self.payment_terms, int) or self.payment_terms < 0:
            raise InvalidAmountError(self.payment_terms, "Payment terms must be a non-negative number of days")
        object.__setattr__(self, "minimum_payout", _non_negative(self.minimum_payout))
        object.__setattr__(self, "auto_repass_threshold", _non_negative(self.auto_repass_threshold))
        object.__setattr__(self, "currency", self.currency.strip().upper())

    @classmethod
    def default(cls) -> Self:
        """Return the standard settings (30% commission, R$1000 auto-repass)."""
        return cls()

    @classmethod
    def from_engine_settings(cls, settings: EngineSettings) -> Self:
        """Build settings from environment-driven engine configuration.

        Channel fee rates always start from the default schedule.
        """
        return cls(
            default_commission_rate=settings.default_commission_rate,
            payment_terms=settings.payment_terms,
            minimum_payout=settings.minimum_payout,
            auto_repass_threshold=settings.auto_repass_threshold,
            currency=settings.currency,
        )

    def with_overrides(self, **changes: Any) -> Self:
        """Return a copy with some fields replaced.

        ``platform_fee_rates`` is merged into the current schedule rather
        than replacing it.
        """
        if "platform_fee_rates" in changes:
            merged = dict(self.platform_fee_rates)
            merged.update(
                {channel_key(channel): rate for channel, rate in changes["platform_fee_rates"].items()}
            )
            changes["platform_fee_rates"] = merged
        return replace(self, **changes)

    def fee_rate_for(self, channel: ExportChannel | str) -> Decimal | None:
        """Fee rate configured for a channel, or None if it is not configured."""
        return self.platform_fee_rates.get(channel_key(channel))


# ============================================================================
# Breakdown
# ============================================================================


@dataclass(frozen=True)
class FinancialBreakdown(ValueObject):
    """Result of splitting a sale.

    Attributes:
        gross_amount: Sold price.
        platform_fee: Fee kept by the export channel.
        commission: Consignment commission.
        net_to_owner: Amount owed to the item's owner.
        channel: Export channel identifier the sale went through.
        platform_fee_rate: Rate applied, or None when the channel had no
            configured rate and a zero fee was assumed.
        currency: Currency the amounts are in.
    """

    gross_amount: Decimal
    platform_fee: Decimal
    commission: Decimal
    net_to_owner: Decimal
    channel: str = ""
    platform_fee_rate: Decimal | None = None
    currency: str = DEFAULT_CURRENCY

    @property
    def channel_configured(self) -> bool:
        """Whether the fee came from a configured channel rate."""
        return self.platform_fee_rate is not None

    def rounded(self, places: int = 2) -> "FinancialBreakdown":
        """Return a copy with amounts quantized for display (ROUND_HALF_UP)."""
        exponent = Decimal(1).scaleb(-places)

        def q(amount: Decimal) -> Decimal:
            return amount.quantize(exponent, rounding=ROUND_HALF_UP)

        return replace(
            self,
            gross_amount=q(self.gross_amount),
            platform_fee=q(self.platform_fee),
            commission=q(self.commission),
            net_to_owner=q(self.net_to_owner),
        )

    def to_money(self) -> dict[str, Money]:
        """Settle each amount to Money in the breakdown's currency."""
        return {
            "grossAmount": Money.from_decimal(self.gross_amount, self.currency),
            "platformFee": Money.from_decimal(self.platform_fee, self.currency),
            "commission": Money.from_decimal(self.commission, self.currency),
            "netToOwner": Money.from_decimal(self.net_to_owner, self.currency),
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the wire field names; amounts as strings."""
        return {
            "grossAmount": str(self.gross_amount),
            "platformFee": str(self.platform_fee),
            "commission": str(self.commission),
            "netToOwner": str(self.net_to_owner),
            "channel": self.channel,
            "platformFeeRate": None if self.platform_fee_rate is None else str(self.platform_fee_rate),
            "channelConfigured": self.channel_configured,
            "currency": self.currency,
        }


# ============================================================================
# Calculator
# ============================================================================


class FinancialCalculator:
    """Computes payout splits and payout eligibility.

    Example usage:
        calculator = FinancialCalculator()
        breakdown = calculator.calculate(1000, ExportChannel.SHOPIFY)
        breakdown.net_to_owner  # Decimal('679.70000')
    """

    def __init__(self, defaults: ConsignmentSettings | None = None) -> None:
        """Initialize calculator.

        Args:
            defaults: Settings used when a call passes none. Defaults to
                ``ConsignmentSettings.default()``.
        """
        self._defaults = defaults or ConsignmentSettings.default()

    @property
    def defaults(self) -> ConsignmentSettings:
        return self._defaults

    def _settings(self, settings: ConsignmentSettings | None) -> ConsignmentSettings:
        return settings if settings is not None else self._defaults

    def calculate(
        self,
        sold_price: Amount,
        export_channel: ExportChannel | str,
        settings: ConsignmentSettings | None = None,
    ) -> FinancialBreakdown:
        """Split a sale into platform fee, commission and owner payout.

        An unknown channel is charged no platform fee. The breakdown's
        ``platform_fee_rate`` is None in that case so the miss can be
        audited.

        Args:
            sold_price: Sale price.
            export_channel: Channel the item was sold through.
            settings: Settings for this sale; the calculator defaults if None.

        Returns:
            FinancialBreakdown with exact Decimal amounts.

        Raises:
            InvalidAmountError: If the price is negative or not a finite number.
        """
        settings = self._settings(settings)
        channel = channel_key(export_channel)
        gross = _non_negative(sold_price)

        rate = settings.fee_rate_for(channel)
        if rate is None:
            logger.warning(
                "unconfigured_export_channel",
                channel=channel,
                sold_price=str(gross),
            )

        platform_fee = gross * (rate if rate is not None else Decimal(0))
        commission_base = gross - platform_fee
        commission = commission_base * settings.default_commission_rate
        net_to_owner = commission_base - commission

        logger.debug(
            "Financials calculated",
            channel=channel,
            gross_amount=str(gross),
            platform_fee=str(platform_fee),
            commission=str(commission),
            net_to_owner=str(net_to_owner),
        )
        return FinancialBreakdown(
            gross_amount=gross,
            platform_fee=platform_fee,
            commission=commission,
            net_to_owner=net_to_owner,
            channel=channel,
            platform_fee_rate=rate,
            currency=settings.currency,
        )

    def should_auto_repass(self, amount: Amount, settings: ConsignmentSettings | None = None) -> bool:
        """Check whether an amount reaches the auto-repass threshold (inclusive)."""
        return to_decimal(amount) >= self._settings(settings).auto_repass_threshold

    def meets_minimum_payout(self, amount: Amount, settings: ConsignmentSettings | None = None) -> bool:
        """Check whether an amount reaches the minimum payout (inclusive)."""
        return to_decimal(amount) >= self._settings(settings).minimum_payout

    def payout_due_date(
        self,
        sold_at: date | datetime,
        settings: ConsignmentSettings | None = None,
    ) -> date:
        """Date the owner's payout is due, ``payment_terms`` days after the sale."""
        sold_on = sold_at.date() if isinstance(sold_at, datetime) else sold_at
        return sold_on + timedelta(days=self._settings(settings).payment_terms)


def calculate_financials(
    sold_price: Amount,
    export_channel: ExportChannel | str,
    settings: ConsignmentSettings | None = None,
) -> FinancialBreakdown:
    """Split a sale using ``settings`` or the default settings."""
    return FinancialCalculator().calculate(sold_price, export_channel, settings)


def should_auto_repass(amount: Amount, settings: ConsignmentSettings | None = None) -> bool:
    """Check the auto-repass threshold using ``settings`` or the defaults."""
    return FinancialCalculator().should_auto_repass(amount, settings)
