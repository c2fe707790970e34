"""Catalog package - identifiers, hierarchies, item validation and keywords."""

from vufs.catalog.codes import (
    VUFSCode,
    generate_sku,
    generate_vufs_code,
    is_valid_vufs_code,
    new_unique_id,
    parse_vufs_code,
)
from vufs.catalog.hierarchy import (
    BrandHierarchy,
    CategoryHierarchy,
    normalize_brand_hierarchy,
    normalize_category_hierarchy,
    validate_brand_hierarchy,
    validate_category_hierarchy,
)
from vufs.catalog.items import (
    ApparelItem,
    CatalogItem,
    FootwearItem,
    ItemDomain,
    build_vufs_item,
    resolve_item_domain,
    validate_vufs_item,
)
from vufs.catalog.search import generate_search_keywords

__all__ = [
    # Codes
    "VUFSCode",
    "generate_sku",
    "generate_vufs_code",
    "is_valid_vufs_code",
    "new_unique_id",
    "parse_vufs_code",
    # Hierarchies
    "BrandHierarchy",
    "CategoryHierarchy",
    "normalize_brand_hierarchy",
    "normalize_category_hierarchy",
    "validate_brand_hierarchy",
    "validate_category_hierarchy",
    # Items
    "ApparelItem",
    "CatalogItem",
    "FootwearItem",
    "ItemDomain",
    "build_vufs_item",
    "resolve_item_domain",
    "validate_vufs_item",
    # Search
    "generate_search_keywords",
]
