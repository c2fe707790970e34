"""Shared fixtures for engine tests."""

from typing import Any

import pytest

from vufs.catalog.hierarchy import BrandHierarchy, CategoryHierarchy
from vufs.consignment.financials import ConsignmentSettings


@pytest.fixture
def apparel_record() -> dict[str, Any]:
    """Complete apparel record as submitted by a catalog form."""
    return {
        "sku": "APP-NIK-TSH-0001",
        "brand": "Nike®",
        "pieceType": "T-Shirts",
        "material": "Cotton",
        "fit": "Regular",
        "color": "Black",
        "size": "M",
        "gender": "Male",
        "condition": "New",
        "price": 99.99,
        "owner": "user123",
        "photographed": True,
        "sold": False,
        "repassStatus": False,
        "style": ["Casual"],
        "pattern": "2 – Lightweight",
    }


@pytest.fixture
def footwear_record() -> dict[str, Any]:
    """Complete footwear record as submitted by a catalog form."""
    return {
        "sku": "FTW-NIK-SNE-0001",
        "brand": "Nike®",
        "modelType": "Sneakers",
        "upperMaterial": "Leather",
        "soleType": "Rubber",
        "laceType": "Laced",
        "color": "Black",
        "size": "42",
        "gender": "Male",
        "condition": "New",
        "price": 199.99,
        "owner": "user123",
        "photographed": True,
        "sold": False,
        "repassStatus": False,
    }


@pytest.fixture
def category() -> CategoryHierarchy:
    """Normalized category hierarchy."""
    return CategoryHierarchy(
        page="Clothing",
        blue_subcategory="Tops",
        white_subcategory="T-Shirts",
        gray_subcategory="Basic Tee",
    )


@pytest.fixture
def brand() -> BrandHierarchy:
    """Brand hierarchy with line and collaboration."""
    return BrandHierarchy(brand="Nike®", line="Sportswear", collaboration="Travis Scott")


@pytest.fixture
def default_settings() -> ConsignmentSettings:
    """Standard consignment settings."""
    return ConsignmentSettings.default()
