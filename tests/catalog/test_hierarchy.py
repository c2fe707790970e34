"""Tests for category and brand hierarchies."""

import pytest

from vufs.catalog.hierarchy import (
    BrandHierarchy,
    CategoryHierarchy,
    normalize_brand_hierarchy,
    normalize_category_hierarchy,
    normalize_text,
    validate_brand_hierarchy,
    validate_category_hierarchy,
)


def make_category(**overrides: str) -> CategoryHierarchy:
    values = {
        "page": "Clothing",
        "blue_subcategory": "Tops",
        "white_subcategory": "T-Shirts",
        "gray_subcategory": "Basic Tee",
    }
    values.update(overrides)
    return CategoryHierarchy(**values)


class TestCategoryHierarchy:
    """Tests for CategoryHierarchy value object."""

    def test_from_record_wire_keys(self) -> None:
        """Records with wire keys map onto attributes."""
        category = CategoryHierarchy.from_record(
            {
                "page": "Clothing",
                "blueSubcategory": "Tops",
                "whiteSubcategory": "T-Shirts",
                "graySubcategory": "Basic Tee",
            }
        )
        assert category == make_category()

    def test_from_record_missing_levels_become_empty(self) -> None:
        """Missing or null levels are empty strings."""
        category = CategoryHierarchy.from_record({"page": "Clothing", "blueSubcategory": None})
        assert category.blue_subcategory == ""
        assert category.gray_subcategory == ""

    def test_to_dict(self) -> None:
        """Serialization uses wire keys."""
        assert make_category().to_dict() == {
            "page": "Clothing",
            "blueSubcategory": "Tops",
            "whiteSubcategory": "T-Shirts",
            "graySubcategory": "Basic Tee",
        }


class TestValidateCategoryHierarchy:
    """Tests for validate_category_hierarchy."""

    def test_complete_hierarchy_is_valid(self) -> None:
        """A fully populated hierarchy has no errors."""
        assert validate_category_hierarchy(make_category()) == []

    @pytest.mark.parametrize(
        "field,message",
        [
            ("page", "Page category is required"),
            ("blue_subcategory", "Blue subcategory is required"),
            ("white_subcategory", "White subcategory is required"),
            ("gray_subcategory", "Gray subcategory is required"),
        ],
    )
    def test_each_level_required(self, field: str, message: str) -> None:
        """Each empty level produces its own message."""
        assert validate_category_hierarchy(make_category(**{field: ""})) == [message]

    def test_whitespace_only_values(self) -> None:
        """Whitespace-only levels fail, one message per level, in order."""
        errors = validate_category_hierarchy(
            make_category(
                page="   ",
                blue_subcategory="\t",
                white_subcategory="\n",
                gray_subcategory="  \t\n  ",
            )
        )
        assert errors == [
            "Page category is required",
            "Blue subcategory is required",
            "White subcategory is required",
            "Gray subcategory is required",
        ]

    def test_accepts_wire_record(self) -> None:
        """Plain records are validated too."""
        errors = validate_category_hierarchy({"page": "", "blueSubcategory": "Tops"})
        assert errors == [
            "Page category is required",
            "White subcategory is required",
            "Gray subcategory is required",
        ]


class TestNormalizeCategoryHierarchy:
    """Tests for normalize_category_hierarchy."""

    def test_normalizes_text(self) -> None:
        """Levels are trimmed, collapsed and capitalized per word."""
        normalized = normalize_category_hierarchy(
            make_category(
                page="  clothing  ",
                blue_subcategory="TOPS",
                white_subcategory="t-shirts",
                gray_subcategory="basic   tee",
            )
        )
        assert normalized == make_category(white_subcategory="T-shirts")

    def test_collapses_internal_whitespace(self) -> None:
        """Runs of whitespace become single spaces."""
        normalized = normalize_category_hierarchy(
            make_category(page="athletic    wear", gray_subcategory="dry \t fit\n tee")
        )
        assert normalized.page == "Athletic Wear"
        assert normalized.gray_subcategory == "Dry Fit Tee"

    def test_idempotent(self) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize_category_hierarchy(make_category(page=" MEN'S  wear ", white_subcategory="t-SHIRTS"))
        assert normalize_category_hierarchy(once) == once

    def test_idempotent_with_expanding_capitals(self) -> None:
        """Letters whose uppercase form is two characters normalize stably."""
        once = normalize_category_hierarchy(make_category(page="ßport", gray_subcategory="ﬁne knit"))
        assert once.page == "Ssport"
        assert normalize_category_hierarchy(once) == once

    def test_never_raises_on_empty(self) -> None:
        """Empty levels normalize to empty strings."""
        assert normalize_category_hierarchy(make_category(page="   ")).page == ""


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_only_first_character_uppercased(self) -> None:
        """Hyphenated words keep the rest lowercase."""
        assert normalize_text("t-SHIRTS") == "T-shirts"

    def test_glyphs_preserved(self) -> None:
        """Trademark glyphs survive normalization."""
        assert normalize_text("  nike®  ") == "Nike®"


class TestValidateBrandHierarchy:
    """Tests for validate_brand_hierarchy."""

    def test_complete_brand_is_valid(self) -> None:
        """A brand with line and collaboration is valid."""
        brand = BrandHierarchy(brand="Nike®", line="Air Jordan", collaboration="Travis Scott")
        assert validate_brand_hierarchy(brand) == []

    def test_optional_fields_may_be_absent(self) -> None:
        """Absent optional fields are not errors."""
        assert validate_brand_hierarchy(BrandHierarchy(brand="Nike®")) == []
        assert validate_brand_hierarchy({"brand": "Nike®"}) == []

    def test_brand_name_required(self) -> None:
        """Blank brand names are rejected."""
        assert validate_brand_hierarchy(BrandHierarchy(brand="   ", line="Air Jordan")) == [
            "Brand name is required"
        ]

    def test_empty_line_rejected(self) -> None:
        """A supplied but empty line is an error."""
        errors = validate_brand_hierarchy({"brand": "Nike®", "line": "", "collaboration": "Travis Scott"})
        assert errors == ["Brand line cannot be empty if provided"]

    def test_empty_collaboration_rejected(self) -> None:
        """A supplied but blank collaboration is an error."""
        errors = validate_brand_hierarchy(BrandHierarchy(brand="Nike®", collaboration="  "))
        assert errors == ["Brand collaboration cannot be empty if provided"]

    def test_all_errors_reported(self) -> None:
        """Every problem is reported at once."""
        errors = validate_brand_hierarchy(BrandHierarchy(brand="", line="", collaboration=""))
        assert errors == [
            "Brand name is required",
            "Brand line cannot be empty if provided",
            "Brand collaboration cannot be empty if provided",
        ]


class TestNormalizeBrandHierarchy:
    """Tests for normalize_brand_hierarchy."""

    def test_normalizes_all_fields(self) -> None:
        """Every supplied field is normalized."""
        normalized = normalize_brand_hierarchy(
            BrandHierarchy(brand="  nike®  ", line="AIR JORDAN", collaboration="travis scott")
        )
        assert normalized == BrandHierarchy(brand="Nike®", line="Air Jordan", collaboration="Travis Scott")

    def test_absent_fields_stay_absent(self) -> None:
        """Absent optional fields are not turned into empty strings."""
        normalized = normalize_brand_hierarchy({"brand": "  adidas®  "})
        assert normalized == BrandHierarchy(brand="Adidas®")
        assert normalized.line is None
        assert normalized.to_dict() == {"brand": "Adidas®"}

    def test_already_normalized_unchanged(self) -> None:
        """Normalized brands are left as they are."""
        brand = BrandHierarchy(brand="Nike®", line="Air Jordan", collaboration="Travis Scott")
        assert normalize_brand_hierarchy(brand) == brand
