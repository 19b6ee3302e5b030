"""Shared fixtures: a small hand-built catalog and the factories over it."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog_admin.admin.category_factory import CategoryModelFactory, build_category_model_factory
from catalog_admin.catalog.models import (
    Category,
    CategoryTemplate,
    Manufacturer,
    Product,
    ProductCategory,
    ProductManufacturer,
    ProductType,
)
from catalog_admin.domain.entities import (
    AclRecord,
    CustomerRole,
    Discount,
    DiscountType,
    Language,
    LocaleStringResource,
    LocalizedProperty,
    Store,
    StoreMapping,
    UrlRecord,
    Vendor,
)
from catalog_admin.infrastructure.config import Settings
from catalog_admin.infrastructure.memory import InMemoryDatabase


def build_catalog(db: InMemoryDatabase) -> InMemoryDatabase:
    """Fill ``db`` with a small catalog.

    Category tree (display order in brackets)::

        1 Computers [0]           discount 1, ACL roles 1 and 2
            2 Desktops [0]
            3 Notebooks [1]
        4 Electronics [1]
            5 Cell phones [0]     unpublished
        6 Gift cards [2]          limited to store 2
        7 Old stuff               deleted
    """
    past = datetime.now(timezone.utc) - timedelta(days=30)

    db.add(
        Store(id=1, name="Main store"),
        Store(id=2, name="Outlet", display_order=1),
        Language(id=1, name="English", language_culture="en-US"),
        Language(id=2, name="Deutsch", language_culture="de-DE", display_order=1),
        CustomerRole(id=1, name="Administrators"),
        CustomerRole(id=2, name="Registered"),
        CustomerRole(id=3, name="Guests", active=False),
        CategoryTemplate(id=1, name="Products in Grid or Lines"),
        Manufacturer(id=1, name="Apple"),
        Manufacturer(id=2, name="HP", display_order=1),
        Vendor(id=1, name="Vendor 1"),
        Vendor(id=2, name="Vendor 2", active=False, display_order=1),
        Discount(
            id=1,
            name="Computers 10% off",
            discount_type=DiscountType.ASSIGNED_TO_CATEGORIES,
        ),
        Discount(id=2, name="Order total"),
        Discount(
            id=3,
            name="Expired category sale",
            discount_type=DiscountType.ASSIGNED_TO_CATEGORIES,
            end_date_utc=past,
        ),
    )

    db.add(
        Category(
            id=1,
            name="Computers",
            se_name="computers",
            meta_title="Computers",
            applied_discount_ids=[1],
            subject_to_acl=True,
        ),
        Category(id=2, name="Desktops", parent_category_id=1),
        Category(id=3, name="Notebooks", parent_category_id=1, display_order=1),
        Category(id=4, name="Electronics", display_order=1),
        Category(id=5, name="Cell phones", parent_category_id=4, published=False),
        Category(id=6, name="Gift cards", display_order=2, limited_to_stores=True),
        Category(id=7, name="Old stuff", deleted=True),
        AclRecord(entity_name="Category", entity_id=1, customer_role_id=1),
        AclRecord(entity_name="Category", entity_id=1, customer_role_id=2),
        StoreMapping(entity_name="Category", entity_id=6, store_id=2),
    )

    db.add(
        Product(
            id=1,
            name="Build your own computer",
            sku="COMP_CUST",
            vendor_id=1,
            price=Decimal("1200.00"),
        ),
        Product(id=2, name="Digital Storm VANQUISH", sku="DS_VA3_PC", price=Decimal("1259.00")),
        Product(id=3, name="Lenovo IdeaCentre", published=False),
        Product(
            id=4,
            name="Apple MacBook Pro",
            sku="AP_MBP_13",
            product_type=ProductType.GROUPED_PRODUCT,
        ),
        Product(id=5, name="Broken phone", deleted=True),
        Product(id=6, name="$25 Virtual Gift Card", limited_to_stores=True),
        ProductCategory(id=1, product_id=1, category_id=2, display_order=2),
        ProductCategory(id=2, product_id=2, category_id=2, display_order=1, is_featured_product=True),
        ProductCategory(id=3, product_id=3, category_id=2, display_order=0),
        ProductCategory(id=4, product_id=4, category_id=3),
        ProductCategory(id=5, product_id=5, category_id=2),
        ProductCategory(id=6, product_id=6, category_id=6),
        ProductManufacturer(id=1, product_id=1, manufacturer_id=2),
        ProductManufacturer(id=2, product_id=4, manufacturer_id=1),
        StoreMapping(entity_name="Product", entity_id=6, store_id=2),
    )

    db.add(
        LocalizedProperty(
            entity_name="Category", entity_id=1, language_id=2, key="name", value="Computer"
        ),
        LocalizedProperty(
            entity_name="Category",
            entity_id=1,
            language_id=2,
            key="meta_title",
            value="Computer kaufen",
        ),
        UrlRecord(entity_name="Category", entity_id=1, slug="computers"),
        UrlRecord(entity_name="Category", entity_id=1, slug="computer", language_id=2),
        LocaleStringResource(language_id=1, name="Admin.Common.All", value="All"),
        LocaleStringResource(
            language_id=1, name="Admin.Catalog.Categories.Fields.Parent.None", value="[None]"
        ),
        LocaleStringResource(
            language_id=1, name="Enums.ProductType.SIMPLE_PRODUCT", value="Simple product"
        ),
        LocaleStringResource(language_id=2, name="Admin.Common.All", value="Alle"),
    )

    return db


@pytest.fixture
def catalog_db() -> InMemoryDatabase:
    """Create a store holding the test catalog."""
    return build_catalog(InMemoryDatabase())


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with the stock catalog and grid defaults."""
    return Settings(
        default_category_page_size=6,
        default_category_page_size_options="6, 3, 9",
        default_grid_page_size=15,
        grid_page_sizes="7, 15, 20, 50, 100",
    )


@pytest.fixture
def factory(catalog_db: InMemoryDatabase, test_settings: Settings) -> CategoryModelFactory:
    """Create a category model factory wired over the test catalog."""
    return build_category_model_factory(catalog_db, test_settings)
