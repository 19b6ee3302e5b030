"""Catalog entities and paging.

Services live in ``catalog_admin.catalog.service``.
"""

from catalog_admin.catalog.models import (
    Category,
    CategoryTemplate,
    Manufacturer,
    Product,
    ProductCategory,
    ProductManufacturer,
    ProductType,
)
from catalog_admin.catalog.paging import MAX_PAGE_SIZE, PagedList

__all__ = [
    # Models
    "Category",
    "CategoryTemplate",
    "Manufacturer",
    "Product",
    "ProductCategory",
    "ProductManufacturer",
    "ProductType",
    # Paging
    "MAX_PAGE_SIZE",
    "PagedList",
]
