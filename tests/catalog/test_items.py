"""Tests for catalog item validation and construction."""

from decimal import Decimal
from typing import Any

import pytest
from pydantic import ValidationError

from vufs.catalog.items import (
    ApparelItem,
    FootwearItem,
    ItemDomain,
    build_vufs_item,
    resolve_item_domain,
    validate_vufs_item,
)
from vufs.domain.exceptions import InvalidItemError

APPAREL_MESSAGES = {
    "Piece type is required for apparel",
    "Material is required for apparel",
    "Fit is required for apparel",
}
FOOTWEAR_MESSAGES = {
    "Model type is required for footwear",
    "Upper material is required for footwear",
    "Sole type is required for footwear",
    "Lace type is required for footwear",
}


class TestValidateVufsItem:
    """Tests for validate_vufs_item."""

    def test_complete_apparel_item(self, apparel_record: dict[str, Any]) -> None:
        """A complete apparel record is valid."""
        assert validate_vufs_item(apparel_record) == []

    def test_complete_footwear_item(self, footwear_record: dict[str, Any]) -> None:
        """A complete footwear record is valid."""
        assert validate_vufs_item(footwear_record) == []

    @pytest.mark.parametrize(
        "field,message",
        [
            ("sku", "SKU is required"),
            ("brand", "Brand is required"),
            ("color", "Color is required"),
            ("size", "Size is required"),
            ("gender", "Gender is required"),
            ("condition", "Condition is required"),
            ("price", "Valid price is required"),
            ("owner", "Owner is required"),
        ],
    )
    def test_common_field_required(self, apparel_record: dict[str, Any], field: str, message: str) -> None:
        """Each missing common field has its own message."""
        del apparel_record[field]
        assert validate_vufs_item(apparel_record) == [message]

    @pytest.mark.parametrize("price", [0, -10, None, "99.99", float("nan"), float("inf"), True, Decimal("0")])
    def test_invalid_prices(self, apparel_record: dict[str, Any], price: Any) -> None:
        """Zero, negative, missing, non-numeric and non-finite prices all fail."""
        apparel_record["price"] = price
        assert validate_vufs_item(apparel_record) == ["Valid price is required"]

    def test_decimal_price_accepted(self, apparel_record: dict[str, Any]) -> None:
        """Decimal prices are valid."""
        apparel_record["price"] = Decimal("0.01")
        assert validate_vufs_item(apparel_record) == []

    def test_blank_string_counts_as_missing(self, apparel_record: dict[str, Any]) -> None:
        """Whitespace-only values are treated as missing."""
        apparel_record["color"] = "   "
        assert validate_vufs_item(apparel_record) == ["Color is required"]

    def test_apparel_fields_required(self, apparel_record: dict[str, Any]) -> None:
        """An apparel discriminator without values triggers every apparel check."""
        for key in ("material", "fit"):
            del apparel_record[key]
        apparel_record["pieceType"] = None
        errors = validate_vufs_item(apparel_record)
        assert set(errors) == APPAREL_MESSAGES

    def test_missing_material_reports_only_apparel(self, apparel_record: dict[str, Any]) -> None:
        """Missing material is reported without footwear messages."""
        del apparel_record["material"]
        errors = validate_vufs_item(apparel_record)
        assert "Material is required for apparel" in errors
        assert not FOOTWEAR_MESSAGES & set(errors)

    def test_footwear_fields_required(self, footwear_record: dict[str, Any]) -> None:
        """A footwear discriminator without values triggers every footwear check."""
        for key in ("upperMaterial", "soleType", "laceType"):
            del footwear_record[key]
        footwear_record["modelType"] = ""
        errors = validate_vufs_item(footwear_record)
        assert errors == [
            "Model type is required for footwear",
            "Upper material is required for footwear",
            "Sole type is required for footwear",
            "Lace type is required for footwear",
        ]

    def test_snake_case_keys_accepted(self) -> None:
        """Records may use snake_case keys."""
        record = {
            "sku": "FTW-NIK-SNE-0001",
            "brand": "Nike",
            "color": "Black",
            "size": "42",
            "gender": "Male",
            "condition": "New",
            "price": 10,
            "owner": "user123",
            "model_type": "Sneakers",
            "upper_material": "Leather",
            "sole_type": "Rubber",
        }
        assert validate_vufs_item(record) == ["Lace type is required for footwear"]

    def test_no_discriminator_only_common_errors(self) -> None:
        """Records without a discriminator get only common-field checks."""
        errors = validate_vufs_item({"sku": "APP-NIK-TSH-0001"})
        assert errors == [
            "Brand is required",
            "Color is required",
            "Size is required",
            "Gender is required",
            "Condition is required",
            "Valid price is required",
            "Owner is required",
        ]

    def test_explicit_domain_wins(self, apparel_record: dict[str, Any]) -> None:
        """An explicit domain overrides key-based inference."""
        apparel_record["domain"] = "FOOTWEAR"
        errors = validate_vufs_item(apparel_record)
        assert set(errors) == FOOTWEAR_MESSAGES

    def test_unknown_explicit_domain(self, apparel_record: dict[str, Any]) -> None:
        """Unknown explicit domains are reported."""
        apparel_record["domain"] = "JEWELRY"
        assert validate_vufs_item(apparel_record) == ["Unknown item domain: JEWELRY"]

    def test_typed_item_validates_clean(self, footwear_record: dict[str, Any]) -> None:
        """Built items pass validation."""
        item = build_vufs_item(footwear_record)
        assert validate_vufs_item(item) == []


class TestResolveItemDomain:
    """Tests for resolve_item_domain."""

    def test_piece_type_means_apparel(self) -> None:
        """pieceType selects apparel even when empty."""
        assert resolve_item_domain({"pieceType": None}) is ItemDomain.APPAREL

    def test_model_type_means_footwear(self) -> None:
        """modelType selects footwear."""
        assert resolve_item_domain({"modelType": "Boots"}) is ItemDomain.FOOTWEAR

    def test_explicit_domain_case_insensitive(self) -> None:
        """Explicit domains are matched case-insensitively."""
        assert resolve_item_domain({"domain": "footwear", "pieceType": "Tee"}) is ItemDomain.FOOTWEAR

    def test_no_keys(self) -> None:
        """Nothing to go on resolves to None."""
        assert resolve_item_domain({"sku": "X"}) is None


class TestBuildVufsItem:
    """Tests for build_vufs_item."""

    def test_builds_apparel(self, apparel_record: dict[str, Any]) -> None:
        """Apparel records build ApparelItem with the discriminator set."""
        item = build_vufs_item(apparel_record)
        assert isinstance(item, ApparelItem)
        assert item.domain == "APPAREL"
        assert item.piece_type == "T-Shirts"
        assert item.price == Decimal("99.99")
        assert item.style == ("Casual",)

    def test_builds_footwear(self, footwear_record: dict[str, Any]) -> None:
        """Footwear records build FootwearItem."""
        item = build_vufs_item(footwear_record)
        assert isinstance(item, FootwearItem)
        assert item.domain == "FOOTWEAR"
        assert item.upper_material == "Leather"
        assert item.type_label == "Sneakers"

    def test_serializes_with_wire_names(self, footwear_record: dict[str, Any]) -> None:
        """Items dump back to camelCase keys."""
        dumped = build_vufs_item(footwear_record).model_dump(by_alias=True)
        assert dumped["modelType"] == "Sneakers"
        assert dumped["repassStatus"] is False

    def test_invalid_record_raises_with_all_errors(self, apparel_record: dict[str, Any]) -> None:
        """Invalid records raise with every validation message."""
        del apparel_record["material"]
        apparel_record["price"] = 0
        with pytest.raises(InvalidItemError) as exc_info:
            build_vufs_item(apparel_record)
        assert exc_info.value.errors == [
            "Valid price is required",
            "Material is required for apparel",
        ]

    def test_undetermined_domain_raises(self, apparel_record: dict[str, Any]) -> None:
        """Records without any discriminator cannot be built."""
        for key in ("pieceType", "material", "fit"):
            del apparel_record[key]
        with pytest.raises(InvalidItemError) as exc_info:
            build_vufs_item(apparel_record)
        assert exc_info.value.errors == ["Item domain could not be determined"]

    def test_items_are_immutable(self, apparel_record: dict[str, Any]) -> None:
        """Built items are frozen."""
        item = build_vufs_item(apparel_record)
        with pytest.raises(ValidationError):
            item.color = "Red"  # type: ignore[misc]
