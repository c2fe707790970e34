"""Category and brand hierarchies.

Categories follow a four-level taxonomy:

    page > blue subcategory > white subcategory > gray subcategory
    e.g. Clothing > Tops > T-shirts > Basic Tee

Brands have a required name and optional line and collaboration:

    Nike > Air Jordan > Travis Scott

Validators return every problem at once as a list of messages. Normalizers
never fail; validate first if invalid input must be rejected.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Self

from vufs.domain.base import ValueObject


# ============================================================================
# Hierarchies
# ============================================================================


@dataclass(frozen=True)
class CategoryHierarchy(ValueObject):
    """Four-level category path.

    Attributes:
        page: Top-level page (e.g., "Clothing").
        blue_subcategory: Second level (e.g., "Tops").
        white_subcategory: Third level (e.g., "T-shirts").
        gray_subcategory: Leaf level (e.g., "Basic Tee").
    """

    page: str
    blue_subcategory: str
    white_subcategory: str
    gray_subcategory: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Self:
        """Create from a record keyed by wire or snake_case names.

        Missing or null levels become empty strings so that validation
        can report them.
        """
        values = {}
        for attr, wire_key, _ in CATEGORY_FIELDS:
            value = record.get(wire_key, record.get(attr))
            values[attr] = "" if value is None else str(value)
        return cls(**values)

    def levels(self) -> tuple[str, str, str, str]:
        """Return the levels from page to gray subcategory."""
        return (
            self.page,
            self.blue_subcategory,
            self.white_subcategory,
            self.gray_subcategory,
        )

    def to_dict(self) -> dict[str, str]:
        """Serialize with the wire field names."""
        return {wire_key: getattr(self, attr) for attr, wire_key, _ in CATEGORY_FIELDS}


@dataclass(frozen=True)
class BrandHierarchy(ValueObject):
    """Brand with optional line and collaboration.

    None means the optional field was not supplied; an empty string means
    it was supplied empty, which validation rejects.
    """

    brand: str
    line: str | None = None
    collaboration: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Self:
        """Create from a record; absent optional keys stay None."""
        brand = record.get("brand")
        line = record.get("line")
        collaboration = record.get("collaboration")
        return cls(
            brand="" if brand is None else str(brand),
            line=None if line is None else str(line),
            collaboration=None if collaboration is None else str(collaboration),
        )

    def to_dict(self) -> dict[str, str]:
        """Serialize, omitting absent optional fields."""
        data = {"brand": self.brand}
        if self.line is not None:
            data["line"] = self.line
        if self.collaboration is not None:
            data["collaboration"] = self.collaboration
        return data


# (attribute, wire key, required-field message), in validation order
CATEGORY_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("page", "page", "Page category is required"),
    ("blue_subcategory", "blueSubcategory", "Blue subcategory is required"),
    ("white_subcategory", "whiteSubcategory", "White subcategory is required"),
    ("gray_subcategory", "graySubcategory", "Gray subcategory is required"),
)

BRAND_REQUIRED_ERROR = "Brand name is required"
BRAND_OPTIONAL_FIELDS: tuple[tuple[str, str], ...] = (
    ("line", "Brand line cannot be empty if provided"),
    ("collaboration", "Brand collaboration cannot be empty if provided"),
)


def as_category(category: CategoryHierarchy | Mapping[str, Any]) -> CategoryHierarchy:
    """Accept a CategoryHierarchy or a wire record."""
    if isinstance(category, CategoryHierarchy):
        return category
    return CategoryHierarchy.from_record(category)


def as_brand(brand: BrandHierarchy | Mapping[str, Any]) -> BrandHierarchy:
    """Accept a BrandHierarchy or a wire record."""
    if isinstance(brand, BrandHierarchy):
        return brand
    return BrandHierarchy.from_record(brand)


# ============================================================================
# Normalization
# ============================================================================


def normalize_text(text: str) -> str:
    """Trim, collapse whitespace and capitalize each word.

    Only the first character of each space-separated word is uppercased;
    the rest is lowercased, so "t-shirts" becomes "T-shirts".
    """
    return " ".join(word.capitalize() for word in text.split())


def normalize_category_hierarchy(
    category: CategoryHierarchy | Mapping[str, Any],
) -> CategoryHierarchy:
    """Return a display-ready copy of a category hierarchy."""
    category = as_category(category)
    return CategoryHierarchy(
        page=normalize_text(category.page),
        blue_subcategory=normalize_text(category.blue_subcategory),
        white_subcategory=normalize_text(category.white_subcategory),
        gray_subcategory=normalize_text(category.gray_subcategory),
    )


def normalize_brand_hierarchy(brand: BrandHierarchy | Mapping[str, Any]) -> BrandHierarchy:
    """Return a display-ready copy of a brand hierarchy.

    Absent optional fields remain absent.
    """
    brand = as_brand(brand)
    return BrandHierarchy(
        brand=normalize_text(brand.brand),
        line=None if brand.line is None else normalize_text(brand.line),
        collaboration=None if brand.collaboration is None else normalize_text(brand.collaboration),
    )


# ============================================================================
# Validation
# ============================================================================


def validate_category_hierarchy(category: CategoryHierarchy | Mapping[str, Any]) -> list[str]:
    """Validate that all four category levels are filled in.

    Args:
        category: Category hierarchy or wire record.

    Returns:
        One message per empty level, in page-to-gray order.
    """
    category = as_category(category)
    return [
        message
        for attr, _, message in CATEGORY_FIELDS
        if not getattr(category, attr).strip()
    ]


def validate_brand_hierarchy(brand: BrandHierarchy | Mapping[str, Any]) -> list[str]:
    """Validate a brand hierarchy.

    Args:
        brand: Brand hierarchy or wire record.

    Returns:
        List of validation error messages. Empty when valid.
    """
    brand = as_brand(brand)
    errors: list[str] = []

    if not brand.brand.strip():
        errors.append(BRAND_REQUIRED_ERROR)

    for attr, message in BRAND_OPTIONAL_FIELDS:
        value = getattr(brand, attr)
        if value is not None and not value.strip():
            errors.append(message)

    return errors
