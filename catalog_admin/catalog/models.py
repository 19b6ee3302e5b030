"""Catalog entities.

Defines Category, Product and the association records between them.
Persistence is owned by the catalog store; these are plain records.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import IntEnum


class ProductType(IntEnum):
    """Kind of product."""

    SIMPLE_PRODUCT = 5
    GROUPED_PRODUCT = 10


@dataclass
class Category:
    """A catalog category.

    Categories form a tree through ``parent_category_id`` (0 = root).

    Attributes:
        id: Category ID.
        name: Display name.
        description: Rich text description.
        category_template_id: Template used to render the category page.
        meta_keywords: SEO meta keywords.
        meta_description: SEO meta description.
        meta_title: SEO meta title.
        se_name: Search engine friendly name (standard language slug).
        parent_category_id: Parent category ID, 0 for root categories.
        picture_id: Picture ID, 0 when none.
        page_size: Products per page on the public category page.
        allow_customers_to_select_page_size: Whether customers choose the page size.
        page_size_options: Comma-separated page sizes offered to customers.
        price_ranges: Price range filter definition.
        show_on_home_page: Whether the category is listed on the home page.
        include_in_top_menu: Whether the category appears in the top menu.
        subject_to_acl: Whether access is limited to customer roles.
        limited_to_stores: Whether the category is limited to some stores.
        published: Whether the category is visible to customers.
        deleted: Soft delete flag.
        display_order: Sort order among siblings.
        applied_discount_ids: Discounts applied to this category.
    """

    id: int
    name: str
    description: str | None = None
    category_template_id: int = 1
    meta_keywords: str | None = None
    meta_description: str | None = None
    meta_title: str | None = None
    se_name: str | None = None
    parent_category_id: int = 0
    picture_id: int = 0
    page_size: int = 6
    allow_customers_to_select_page_size: bool = True
    page_size_options: str | None = None
    price_ranges: str | None = None
    show_on_home_page: bool = False
    include_in_top_menu: bool = False
    subject_to_acl: bool = False
    limited_to_stores: bool = False
    published: bool = True
    deleted: bool = False
    display_order: int = 0
    created_on_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_on_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    applied_discount_ids: list[int] = field(default_factory=list)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"


@dataclass
class Product:
    """A product in the catalog.

    Attributes:
        id: Product ID.
        name: Product name.
        short_description: Short description shown in lists.
        sku: Stock Keeping Unit.
        product_type: Simple or grouped product.
        vendor_id: Vendor ID, 0 when sold by the store owner.
        price: Unit price.
        stock_quantity: Available quantity.
        published: Whether the product is visible to customers.
        deleted: Soft delete flag.
        limited_to_stores: Whether the product is limited to some stores.
        display_order: Sort order.
    """

    id: int
    name: str
    short_description: str | None = None
    sku: str | None = None
    product_type: ProductType = ProductType.SIMPLE_PRODUCT
    vendor_id: int = 0
    price: Decimal = Decimal("0.00")
    stock_quantity: int = 0
    published: bool = True
    deleted: bool = False
    limited_to_stores: bool = False
    display_order: int = 0
    created_on_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]})>"


@dataclass
class ProductCategory:
    """Links a product to a category."""

    id: int
    product_id: int
    category_id: int
    is_featured_product: bool = False
    display_order: int = 0


@dataclass
class ProductManufacturer:
    """Links a product to a manufacturer."""

    id: int
    product_id: int
    manufacturer_id: int
    is_featured_product: bool = False
    display_order: int = 0


@dataclass
class CategoryTemplate:
    """A view template for category pages."""

    id: int
    name: str
    view_path: str = ""
    display_order: int = 0


@dataclass
class Manufacturer:
    """A product manufacturer."""

    id: int
    name: str
    published: bool = True
    deleted: bool = False
    display_order: int = 0
