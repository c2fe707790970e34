"""Export payloads and filenames for sales channels.

Builds the channel-neutral product data (title, description, tags, slug,
pricing) that channel integrations upload, plus the name of the CSV
file an export batch is written to.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable

import structlog
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vufs.catalog.items import ApparelItem, FootwearItem
from vufs.consignment.channels import ExportChannel, channel_key
from vufs.domain.value_objects import DEFAULT_CURRENCY, Money
from vufs.infrastructure.config import get_settings

logger = structlog.get_logger()

Clock = Callable[[], datetime]

PLATFORM_GENDER_MAPPING: dict[str, dict[str, str]] = {
    ExportChannel.NUVEM_SHOP.value: {
        "Male": "Masculino",
        "Female": "Feminino",
        "Men's": "Masculino",
        "Women's": "Feminino",
        "Unisex": "Unissex",
    },
    ExportChannel.SHOPIFY.value: {
        "Male": "Men",
        "Female": "Women",
        "Men's": "Men",
        "Women's": "Women",
        "Unisex": "Unisex",
    },
    ExportChannel.VINTED.value: {
        "Male": "Men",
        "Female": "Women",
        "Men's": "Men",
        "Women's": "Women",
        "Unisex": "Unisex",
    },
}

NEW_CONDITION = "New"


# ============================================================================
# Schemas
# ============================================================================


class PricingSchema(BaseModel):
    """Price representation for a channel listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    price: Decimal = Field(..., description="Listing price in major units, settled to cents")
    currency: str = Field(default=DEFAULT_CURRENCY, description="Currency code")
    display_price: str = Field(..., description="Formatted price, e.g. R$99.99 BRL")

    @classmethod
    def from_money(cls, money: Money) -> "PricingSchema":
        """Build the pricing block from a settled amount."""
        return cls(price=money.to_decimal(), currency=money.currency, display_price=str(money))


class PlatformProductData(BaseModel):
    """Product payload handed to a channel integration."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    seo_title: str
    slug: str
    handle: str
    pricing: PricingSchema
    platform_category: str
    platform_gender: str
    images: list[str] = Field(default_factory=list)


# ============================================================================
# Builders
# ============================================================================


def generate_slug(text: str) -> str:
    """Build a URL-friendly slug ("Nike Tee (Used)" -> "nike-tee-used")."""
    slug = re.sub(r"[^\w\s-]", "", text.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()


def generate_product_title(item: ApparelItem | FootwearItem) -> str:
    """Brand, model or type, color, size and non-new condition."""
    if isinstance(item, ApparelItem):
        label = item.model or item.piece_type
    else:
        label = item.model_type
    parts = [
        item.brand,
        label,
        item.color,
        item.size,
        f"({item.condition})" if item.condition != NEW_CONDITION else "",
    ]
    return " ".join(part for part in parts if part)


def generate_product_description(item: ApparelItem | FootwearItem) -> str:
    lines = [
        f"{item.brand} {item.type_label}",
        "",
        f"Condition: {item.condition}",
        f"Size: {item.size}",
        f"Color: {item.color}",
        f"Gender: {item.gender}",
        "",
    ]
    if isinstance(item, ApparelItem):
        lines.append(f"Material: {item.material}")
        lines.append(f"Fit: {item.fit}")
        if item.style:
            lines.append(f"Style: {', '.join(item.style)}")
    else:
        lines.append(f"Upper Material: {item.upper_material}")
        lines.append(f"Sole Type: {item.sole_type}")
        lines.append(f"Lace Type: {item.lace_type}")
        if item.heel_height:
            lines.append(f"Heel Height: {item.heel_height}cm")
    return "\n".join(lines) + "\n"


def generate_product_tags(item: ApparelItem | FootwearItem) -> list[str]:
    tags = [item.brand, item.color, item.gender, item.condition]
    if isinstance(item, ApparelItem):
        tags.extend([item.piece_type, item.material, item.fit, *item.style])
    else:
        tags.extend([item.model_type, item.upper_material, item.sole_type])
    return [tag for tag in tags if tag]


def map_platform_category(item: ApparelItem | FootwearItem, channel: ExportChannel | str) -> str:
    """Channel-specific category for an item."""
    if channel_key(channel) == ExportChannel.SHOPIFY.value:
        if isinstance(item, ApparelItem):
            return f"Clothing > {item.piece_type}"
        return "Shoes"
    return item.type_label


def map_platform_gender(gender: str, channel: ExportChannel | str) -> str:
    """Translate a gender label to the channel's vocabulary; unknown labels pass through."""
    return PLATFORM_GENDER_MAPPING.get(channel_key(channel), {}).get(gender, gender)


def generate_platform_data(
    item: ApparelItem | FootwearItem,
    channel: ExportChannel | str,
    images: Iterable[str] = (),
    currency: str | None = None,
) -> PlatformProductData:
    """Build the listing payload for an item on a channel.

    Args:
        item: Typed catalog item (see ``build_vufs_item``).
        channel: Target export channel.
        images: Image URLs, in display order.
        currency: Listing currency; ``EngineSettings.currency`` if omitted.

    Returns:
        PlatformProductData ready for the channel integration.
    """
    currency = currency or get_settings().currency
    title = generate_product_title(item)
    slug = generate_slug(title)
    data = PlatformProductData(
        title=title,
        description=generate_product_description(item),
        tags=generate_product_tags(item),
        seo_title=title,
        slug=slug,
        handle=slug,
        pricing=PricingSchema.from_money(Money.from_decimal(item.price, currency)),
        platform_category=map_platform_category(item, channel),
        platform_gender=map_platform_gender(item.gender, channel),
        images=list(images),
    )
    logger.debug("Platform data generated", sku=item.sku, channel=channel_key(channel))
    return data


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_export_filename(
    channel: ExportChannel | str,
    timestamp: datetime | None = None,
    clock: Clock = _utc_now,
) -> str:
    """Name of the CSV file for an export batch.

    Format: ``vufs_export_{channel}_{YYYY-MM-DD}_{HHMMSS}.csv`` in UTC.
    Naive timestamps are taken to already be UTC.

    Args:
        channel: Export channel.
        timestamp: Moment of the export; read from ``clock`` if omitted.
        clock: Source of the current time.

    Returns:
        Export filename.
    """
    moment = timestamp if timestamp is not None else clock()
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return (
        f"vufs_export_{channel_key(channel)}_"
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}_"
        f"{moment.hour:02d}{moment.minute:02d}{moment.second:02d}.csv"
    )
