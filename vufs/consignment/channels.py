"""Export channels and their default fee schedule."""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ExportChannel(str, Enum):
    """Sales platforms items can be exported to."""

    NUVEM_SHOP = "nuvem_shop"
    SHOPIFY = "shopify"
    VINTED = "vinted"
    MAGAZINE_LUIZA = "magazine_luiza"
    EBAY = "ebay"
    GOOGLE_SHOPPING = "google_shopping"
    DROPPER = "dropper"


DEFAULT_PLATFORM_FEE_RATES: Mapping[str, Decimal] = MappingProxyType(
    {
        ExportChannel.NUVEM_SHOP.value: Decimal("0.05"),
        ExportChannel.SHOPIFY.value: Decimal("0.029"),
        ExportChannel.VINTED.value: Decimal("0.05"),
        ExportChannel.MAGAZINE_LUIZA.value: Decimal("0.15"),
        ExportChannel.EBAY.value: Decimal("0.10"),
        ExportChannel.GOOGLE_SHOPPING.value: Decimal("0.00"),
        ExportChannel.DROPPER.value: Decimal("0.08"),
    }
)


def channel_key(channel: ExportChannel | str) -> str:
    """Return the plain string identifier of a channel.

    Unknown channels are passed through unchanged.
    """
    if isinstance(channel, ExportChannel):
        return channel.value
    return str(channel)
