"""Search keyword derivation for the external search index."""

from typing import Any, Mapping

from vufs.catalog.hierarchy import BrandHierarchy, CategoryHierarchy, as_brand, as_category


def generate_search_keywords(
    category: CategoryHierarchy | Mapping[str, Any],
    brand: BrandHierarchy | Mapping[str, Any],
) -> list[str]:
    """Derive lowercase search keywords from a category and a brand.

    Keywords are each category level, each brand field, then the
    "page blue-subcategory" and "brand white-subcategory" pairs (a pair
    is skipped when either half is blank). Duplicates are dropped,
    keeping the first occurrence.

    Args:
        category: Category hierarchy or wire record.
        brand: Brand hierarchy or wire record.

    Returns:
        Ordered, de-duplicated list of lowercase keywords.
    """
    category = as_category(category)
    brand = as_brand(brand)

    candidates = [
        *category.levels(),
        brand.brand,
        brand.line,
        brand.collaboration,
        _pair(category.page, category.blue_subcategory),
        _pair(brand.brand, category.white_subcategory),
    ]

    # dict keeps insertion order
    keywords: dict[str, None] = {}
    for candidate in candidates:
        if candidate and candidate.strip():
            keywords.setdefault(candidate.lower(), None)
    return list(keywords)


def _pair(first: str, second: str) -> str | None:
    """Combined keyword, only when both parts are filled in."""
    if not first.strip() or not second.strip():
        return None
    return f"{first} {second}"
