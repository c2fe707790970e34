"""SKU and VUFS code formatting.

Two identifier formats are produced here:

    SKU:        {APP|FTW}-{BRAND}-{TYPE}-{SEQUENCE}   e.g. APP-CK-JEA-0005
    VUFS code:  VG-{CATEGORY}-{BRAND}-{UNIQUE_ID}     e.g. VG-TOPS-NIKE-A1B2C3D4

VUFS codes are a persisted external contract: four hyphen-separated
segments, fixed width, uppercase ASCII letters and digits only.
"""

import re
from dataclasses import dataclass
from typing import Any, Self
from uuid import uuid4

import structlog

from vufs.catalog.hierarchy import BrandHierarchy, CategoryHierarchy, as_brand, as_category
from vufs.catalog.items import ItemDomain
from vufs.domain.base import ValueObject
from vufs.domain.exceptions import InvalidCodeInputError, InvalidSequenceError, UnknownDomainError

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

DOMAIN_PREFIXES: dict[ItemDomain, str] = {
    ItemDomain.APPAREL: "APP",
    ItemDomain.FOOTWEAR: "FTW",
}

TRADEMARK_GLYPHS = "®™©"
_GLYPH_TABLE = str.maketrans("", "", TRADEMARK_GLYPHS)

SKU_CODE_LENGTH = 3
SKU_SEQUENCE_WIDTH = 4

VUFS_PREFIX = "VG"
VUFS_SEGMENT_LENGTH = 4
VUFS_UNIQUE_ID_LENGTH = 8
VUFS_PAD_CHAR = "X"
VUFS_CODE_PATTERN = re.compile(r"VG-([A-Z0-9]{4})-([A-Z0-9]{4})-([A-Z0-9]{8})")
_UNIQUE_ID_PATTERN = re.compile(r"[A-Z0-9]{8}")


# ============================================================================
# SKU
# ============================================================================


def _letters(text: str) -> str:
    return "".join(ch for ch in text if ch.isalpha())


def _coerce_domain(category: ItemDomain | str) -> ItemDomain:
    if isinstance(category, ItemDomain):
        return category
    if isinstance(category, str):
        try:
            return ItemDomain(category.strip().upper())
        except ValueError:
            pass
    raise UnknownDomainError(category)


def brand_code(brand: str, max_words: int = SKU_CODE_LENGTH) -> str:
    """Derive the SKU brand segment.

    Trademark glyphs are dropped. A one-word brand contributes its first
    three letters; a multi-word brand contributes the initial of each of
    its first ``max_words`` words. Words without letters are skipped.

    Raises:
        InvalidCodeInputError: If the brand contains no letters.
    """
    words = [_letters(word) for word in brand.translate(_GLYPH_TABLE).split()]
    words = [word for word in words if word]
    if not words:
        raise InvalidCodeInputError("brand", brand)
    if len(words) == 1:
        return words[0].upper()[:SKU_CODE_LENGTH]
    return "".join(word.upper()[0] for word in words[:max_words])


def type_code(item_type_label: str) -> str:
    """Derive the SKU item-type segment ("T-Shirt" -> "TSH").

    Raises:
        InvalidCodeInputError: If the label contains no letters.
    """
    letters = _letters(item_type_label)
    if not letters:
        raise InvalidCodeInputError("item_type", item_type_label)
    return letters.upper()[:SKU_CODE_LENGTH]


def generate_sku(
    category: ItemDomain | str,
    brand: str,
    item_type_label: str,
    sequence_number: int,
) -> str:
    """Generate a SKU.

    Args:
        category: APPAREL or FOOTWEAR (enum member or case-insensitive name).
        brand: Brand name, trademark glyphs allowed.
        item_type_label: Piece type or footwear type label.
        sequence_number: Positive sequence; padded to four digits, wider
            numbers are kept at full width.

    Returns:
        SKU such as ``FTW-ADI-SNE-0042``.

    Raises:
        UnknownDomainError: If the category is not a known domain.
        InvalidSequenceError: If the sequence is not a positive integer.
        InvalidCodeInputError: If brand or type yield no letters.
    """
    domain = _coerce_domain(category)
    if isinstance(sequence_number, bool) or not isinstance(sequence_number, int) or sequence_number < 1:
        raise InvalidSequenceError(sequence_number)

    sku = "-".join(
        (
            DOMAIN_PREFIXES[domain],
            brand_code(brand),
            type_code(item_type_label),
            f"{sequence_number:0{SKU_SEQUENCE_WIDTH}d}",
        )
    )
    logger.debug("SKU generated", sku=sku, domain=domain.value)
    return sku


# ============================================================================
# VUFS Code
# ============================================================================


@dataclass(frozen=True)
class VUFSCode(ValueObject):
    """A parsed VUFS code.

    Attributes:
        prefix: Always "VG".
        category_code: Four-character category segment.
        brand_code: Four-character brand segment.
        unique_id: Eight-character unique identifier.
    """

    prefix: str
    category_code: str
    brand_code: str
    unique_id: str

    def __str__(self) -> str:
        return f"{self.prefix}-{self.category_code}-{self.brand_code}-{self.unique_id}"

    def to_dict(self) -> dict[str, str]:
        """Serialize with the wire field names."""
        return {
            "prefix": self.prefix,
            "categoryCode": self.category_code,
            "brandCode": self.brand_code,
            "uniqueId": self.unique_id,
        }

    @classmethod
    def parse(cls, code: Any) -> Self | None:
        """Parse a code string; see ``parse_vufs_code``."""
        if not isinstance(code, str):
            return None
        match = VUFS_CODE_PATTERN.fullmatch(code)
        if match is None:
            return None
        category, brand, unique_id = match.groups()
        return cls(
            prefix=VUFS_PREFIX,
            category_code=category,
            brand_code=brand,
            unique_id=unique_id,
        )


def is_valid_vufs_code(code: Any) -> bool:
    """Check whether ``code`` is exactly ``VG-XXXX-YYYY-ZZZZZZZZ``."""
    return isinstance(code, str) and VUFS_CODE_PATTERN.fullmatch(code) is not None


def parse_vufs_code(code: Any) -> VUFSCode | None:
    """Split a VUFS code into its segments.

    Malformed codes are expected input (paste errors and the like), so
    this returns None instead of raising.

    Args:
        code: Candidate code.

    Returns:
        VUFSCode, or None if the code is not valid.
    """
    return VUFSCode.parse(code)


def _code_chars(text: str) -> str:
    return "".join(ch for ch in text if ch.isascii() and ch.isalnum()).upper()


def _segment(text: str) -> str:
    """Leading characters of a one-word ``text`` or its initials, padded with X."""
    words = [_code_chars(word) for word in text.translate(_GLYPH_TABLE).split()]
    words = [word for word in words if word]
    if len(words) == 1:
        segment = words[0][:VUFS_SEGMENT_LENGTH]
    else:
        segment = "".join(word[0] for word in words)[:VUFS_SEGMENT_LENGTH]
    return segment.ljust(VUFS_SEGMENT_LENGTH, VUFS_PAD_CHAR)


def new_unique_id() -> str:
    """Generate a random eight-character unique identifier."""
    return uuid4().hex[:VUFS_UNIQUE_ID_LENGTH].upper()


def generate_vufs_code(
    category: CategoryHierarchy | dict[str, Any],
    brand: BrandHierarchy | dict[str, Any],
    unique_id: str,
) -> VUFSCode:
    """Build a VUFS code from hierarchies.

    The category segment holds the initials of the four category levels;
    the brand segment holds the first four characters of a one-word brand
    or the initials of a multi-word one. Short segments are padded with X.

    Args:
        category: Category hierarchy (value object or wire record).
        brand: Brand hierarchy (value object or wire record).
        unique_id: Eight uppercase letters or digits, see ``new_unique_id``.

    Returns:
        VUFSCode whose string form passes ``is_valid_vufs_code``.

    Raises:
        InvalidCodeInputError: If the unique id has the wrong shape.
    """
    if not isinstance(unique_id, str) or _UNIQUE_ID_PATTERN.fullmatch(unique_id) is None:
        raise InvalidCodeInputError("unique_id", str(unique_id))

    category = as_category(category)
    brand = as_brand(brand)
    initials = "".join(_code_chars(level)[:1] for level in category.levels())
    return VUFSCode(
        prefix=VUFS_PREFIX,
        category_code=initials.ljust(VUFS_SEGMENT_LENGTH, VUFS_PAD_CHAR),
        brand_code=_segment(brand.brand),
        unique_id=unique_id,
    )
