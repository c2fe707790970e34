"""Catalog item records and their validation.

Catalog items are a tagged union of apparel and footwear. Typed items
carry an explicit ``domain`` discriminator; partial records submitted by
catalog forms may omit it, in which case the variant is inferred from
which discriminator key (``pieceType`` or ``modelType``) is present.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel, to_snake

from vufs.domain.exceptions import InvalidItemError

logger = structlog.get_logger()


class ItemDomain(str, Enum):
    """Item domains recognised by SKUs and catalog records."""

    APPAREL = "APPAREL"
    FOOTWEAR = "FOOTWEAR"


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# ============================================================================
# Typed Items
# ============================================================================


class _CatalogItemBase(BaseModel):
    """Fields shared by every catalog item."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        protected_namespaces=(),
    )

    sku: RequiredText
    brand: RequiredText
    color: RequiredText
    size: RequiredText
    gender: RequiredText
    condition: RequiredText
    price: Decimal = Field(..., gt=0, allow_inf_nan=False)
    owner: RequiredText
    photographed: bool = False
    sold: bool = False
    repass_status: bool = False


class ApparelItem(_CatalogItemBase):
    """A clothing piece."""

    domain: Literal["APPAREL"] = "APPAREL"
    piece_type: RequiredText
    material: RequiredText
    fit: RequiredText
    model: str | None = None
    style: tuple[str, ...] = ()
    pattern: str | None = None

    @property
    def type_label(self) -> str:
        return self.piece_type


class FootwearItem(_CatalogItemBase):
    """A shoe, boot or sneaker."""

    domain: Literal["FOOTWEAR"] = "FOOTWEAR"
    model_type: RequiredText
    upper_material: RequiredText
    sole_type: RequiredText
    lace_type: RequiredText
    heel_height: Decimal | None = None

    @property
    def type_label(self) -> str:
        return self.model_type


CatalogItem = Annotated[ApparelItem | FootwearItem, Field(discriminator="domain")]

_ITEM_ADAPTER: TypeAdapter[ApparelItem | FootwearItem] = TypeAdapter(CatalogItem)


# ============================================================================
# Validation
# ============================================================================

COMMON_REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("sku", "SKU is required"),
    ("brand", "Brand is required"),
    ("color", "Color is required"),
    ("size", "Size is required"),
    ("gender", "Gender is required"),
    ("condition", "Condition is required"),
)

PRICE_ERROR = "Valid price is required"
OWNER_ERROR = "Owner is required"

DOMAIN_REQUIRED_FIELDS: dict[ItemDomain, tuple[tuple[str, str], ...]] = {
    ItemDomain.APPAREL: (
        ("pieceType", "Piece type is required for apparel"),
        ("material", "Material is required for apparel"),
        ("fit", "Fit is required for apparel"),
    ),
    ItemDomain.FOOTWEAR: (
        ("modelType", "Model type is required for footwear"),
        ("upperMaterial", "Upper material is required for footwear"),
        ("soleType", "Sole type is required for footwear"),
        ("laceType", "Lace type is required for footwear"),
    ),
}

# Key whose presence marks a record as belonging to a domain.
DISCRIMINATOR_KEYS: tuple[tuple[str, ItemDomain], ...] = (
    ("pieceType", ItemDomain.APPAREL),
    ("modelType", ItemDomain.FOOTWEAR),
)


def _has_key(record: Mapping[str, Any], key: str) -> bool:
    return key in record or to_snake(key) in record


def _get(record: Mapping[str, Any], key: str) -> Any:
    if key in record:
        return record[key]
    return record.get(to_snake(key))


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _is_valid_price(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite() and value > 0
    return math.isfinite(value) and value > 0


def _as_record(item: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    if isinstance(item, BaseModel):
        return item.model_dump(by_alias=True)
    return item


def resolve_item_domain(record: Mapping[str, Any]) -> ItemDomain | None:
    """Determine which variant a record belongs to.

    An explicit ``domain`` value wins; otherwise the first discriminator
    key present decides. Unknown explicit domains resolve to None.

    Args:
        record: Partial item record.

    Returns:
        The resolved domain, or None when it cannot be determined.
    """
    explicit = record.get("domain")
    if explicit is not None:
        try:
            return ItemDomain(str(getattr(explicit, "value", explicit)).upper())
        except ValueError:
            return None
    for key, domain in DISCRIMINATOR_KEYS:
        if _has_key(record, key):
            return domain
    return None


def validate_vufs_item(item: Mapping[str, Any] | BaseModel) -> list[str]:
    """Validate a candidate catalog item.

    Every check runs; the returned list holds one message per defect, in
    a fixed order (common fields first, then the variant's fields).

    Args:
        item: Partial record (wire or snake_case keys) or a typed item.

    Returns:
        List of validation error messages. Empty when the item is valid.
    """
    record = _as_record(item)
    errors: list[str] = []

    for key, message in COMMON_REQUIRED_FIELDS:
        if _is_blank(_get(record, key)):
            errors.append(message)
    if not _is_valid_price(_get(record, "price")):
        errors.append(PRICE_ERROR)
    if _is_blank(_get(record, "owner")):
        errors.append(OWNER_ERROR)

    domain = resolve_item_domain(record)
    if domain is None and record.get("domain") is not None:
        errors.append(f"Unknown item domain: {record['domain']}")
    if domain is not None:
        for key, message in DOMAIN_REQUIRED_FIELDS[domain]:
            if _is_blank(_get(record, key)):
                errors.append(message)

    return errors


def build_vufs_item(record: Mapping[str, Any]) -> ApparelItem | FootwearItem:
    """Build a typed catalog item from a submitted record.

    Args:
        record: Item record using wire (camelCase) or snake_case keys.

    Returns:
        ApparelItem or FootwearItem with the discriminator set.

    Raises:
        InvalidItemError: If the record has any validation error or its
            domain cannot be determined.
    """
    errors = validate_vufs_item(record)
    domain = resolve_item_domain(record)
    if domain is None and not errors:
        errors.append("Item domain could not be determined")
    if errors:
        logger.debug("Rejected catalog item", sku=_get(record, "sku"), errors=errors)
        raise InvalidItemError(errors)

    payload = {key: value for key, value in record.items() if key != "domain"}
    payload["domain"] = domain.value
    try:
        return _ITEM_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        messages = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InvalidItemError(messages) from exc
