"""Consignment package - payout splits, channels and export payloads."""

from vufs.consignment.channels import DEFAULT_PLATFORM_FEE_RATES, ExportChannel, channel_key
from vufs.consignment.export import (
    PlatformProductData,
    PricingSchema,
    generate_export_filename,
    generate_platform_data,
    generate_slug,
)
from vufs.consignment.financials import (
    ConsignmentSettings,
    FinancialBreakdown,
    FinancialCalculator,
    calculate_financials,
    should_auto_repass,
    to_decimal,
)

__all__ = [
    # Channels
    "DEFAULT_PLATFORM_FEE_RATES",
    "ExportChannel",
    "channel_key",
    # Financials
    "ConsignmentSettings",
    "FinancialBreakdown",
    "FinancialCalculator",
    "calculate_financials",
    "should_auto_repass",
    "to_decimal",
    # Export
    "PlatformProductData",
    "PricingSchema",
    "generate_export_filename",
    "generate_platform_data",
    "generate_slug",
]
