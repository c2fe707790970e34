"""VUFS engine - fashion item identifiers, catalog validation and consignment payouts.

Example usage:
    from vufs import calculate_financials, generate_sku

    generate_sku("APPAREL", "Calvin Klein®", "Jeans", 5)  # 'APP-CK-JEA-0005'
    calculate_financials(1000, "shopify").net_to_owner  # Decimal('679.70000')
"""

from vufs.catalog import (
    ApparelItem,
    BrandHierarchy,
    CatalogItem,
    CategoryHierarchy,
    FootwearItem,
    ItemDomain,
    VUFSCode,
    build_vufs_item,
    generate_search_keywords,
    generate_sku,
    generate_vufs_code,
    is_valid_vufs_code,
    new_unique_id,
    normalize_brand_hierarchy,
    normalize_category_hierarchy,
    parse_vufs_code,
    resolve_item_domain,
    validate_brand_hierarchy,
    validate_category_hierarchy,
    validate_vufs_item,
)
from vufs.consignment import (
    ConsignmentSettings,
    ExportChannel,
    FinancialBreakdown,
    FinancialCalculator,
    PlatformProductData,
    calculate_financials,
    generate_export_filename,
    generate_platform_data,
    should_auto_repass,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Catalog
    "ApparelItem",
    "BrandHierarchy",
    "CatalogItem",
    "CategoryHierarchy",
    "FootwearItem",
    "ItemDomain",
    "VUFSCode",
    "build_vufs_item",
    "generate_search_keywords",
    "generate_sku",
    "generate_vufs_code",
    "is_valid_vufs_code",
    "new_unique_id",
    "normalize_brand_hierarchy",
    "normalize_category_hierarchy",
    "parse_vufs_code",
    "resolve_item_domain",
    "validate_brand_hierarchy",
    "validate_category_hierarchy",
    "validate_vufs_item",
    # Consignment
    "ConsignmentSettings",
    "ExportChannel",
    "FinancialBreakdown",
    "FinancialCalculator",
    "PlatformProductData",
    "calculate_financials",
    "generate_export_filename",
    "generate_platform_data",
    "should_auto_repass",
]
