"""Demo data for the in-memory store.

Categories come from an embedded taxonomy in the format
``ID - Parent > Child``; the parent of each line is resolved from its
path. Products, stores, languages and the rest are small fixed sets.
"""

import random
from decimal import Decimal

import structlog

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
from catalog_admin.infrastructure.memory import InMemoryDatabase

logger = structlog.get_logger()

EMBEDDED_TAXONOMY = '''
1 - Computers
2 - Computers > Desktops
3 - Computers > Notebooks
4 - Computers > Software
5 - Electronics
6 - Electronics > Camera & photo
7 - Electronics > Cell phones
8 - Electronics > Others
9 - Apparel
10 - Apparel > Shoes
11 - Apparel > Clothing
12 - Apparel > Accessories
13 - Digital downloads
14 - Books
15 - Jewelry
16 - Gift Cards
'''.strip()

RESOURCES = {
    "Admin.Common.All": "All",
    "Admin.Catalog.Categories.Fields.Parent.None": "[None]",
    "Enums.ProductType.SIMPLE_PRODUCT": "Simple product",
    "Enums.ProductType.GROUPED_PRODUCT": "Grouped product (product with variants)",
}

PRODUCT_NAMES = [
    "Build your own computer",
    "Digital Storm VANQUISH 3 Custom Performance PC",
    "Lenovo IdeaCentre 600 All-in-One PC",
    "Apple MacBook Pro 13-inch",
    "Asus N551JK-XO076H Laptop",
    "HP Spectre XT Pro UltraBook",
    "Lenovo Thinkpad X1 Carbon Laptop",
    "Windows 8 Pro",
    "Sound Forge Pro 11",
    "Nikon D5500 DSLR",
    "Leica T Mirrorless Digital Camera",
    "Apple iCam",
    "HTC One M8 Android L 5.0 Lollipop",
    "Nokia Lumia 1020",
    "Beats Pill 2.0 Wireless Speaker",
    "Nike Floral Roshe Customized Running Shoes",
    "adidas Consortium Campus 80s Running Shoes",
    "Levi's 511 Jeans",
    "Ray Ban Aviator Sunglasses",
    "Obey Propaganda Hat",
]


def parse_taxonomy(lines: list[str]) -> list[Category]:
    """Parse taxonomy lines into categories with resolved parents.

    Args:
        lines: Lines in ``ID - Path > To > Category`` format.

    Returns:
        Categories in line order.
    """
    by_path: dict[str, Category] = {}
    categories: list[Category] = []

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or " - " not in line:
            continue

        id_part, path_part = line.split(" - ", 1)
        try:
            category_id = int(id_part.strip())
        except ValueError:
            continue

        parts = [p.strip() for p in path_part.split(">")]
        parent = by_path.get(" > ".join(parts[:-1])) if len(parts) > 1 else None

        category = Category(
            id=category_id,
            name=parts[-1],
            se_name=parts[-1].lower().replace(" & ", "-").replace(" ", "-"),
            parent_category_id=parent.id if parent else 0,
            include_in_top_menu=parent is None,
            display_order=len(categories),
        )
        by_path[" > ".join(parts)] = category
        categories.append(category)

    return categories


def seed_demo_data(db: InMemoryDatabase, seed: int = 42) -> None:
    """Fill the store with a small demo catalog.

    Args:
        db: Store to fill (cleared first).
        seed: Random seed for product prices and associations.
    """
    rng = random.Random(seed)
    db.clear()

    db.add(
        Store(id=1, name="Your store name", url="http://localhost:8000/"),
        Store(id=2, name="Outlet", url="http://outlet.localhost:8000/", display_order=1),
        Language(id=1, name="English", language_culture="en-US"),
        Language(id=2, name="Deutsch", language_culture="de-DE", display_order=1),
        CustomerRole(id=1, name="Administrators", system_name="Administrators"),
        CustomerRole(id=2, name="Registered", system_name="Registered"),
        CustomerRole(id=3, name="Guests", system_name="Guests"),
        CategoryTemplate(
            id=1,
            name="Products in Grid or Lines",
            view_path="CategoryTemplate.ProductsInGridOrLines",
        ),
        Manufacturer(id=1, name="Apple"),
        Manufacturer(id=2, name="HP", display_order=1),
        Manufacturer(id=3, name="Nike", display_order=2),
        Vendor(id=1, name="Vendor 1", email="vendor1email@gmail.com"),
        Vendor(id=2, name="Vendor 2", email="vendor2email@gmail.com", display_order=1),
        Discount(id=1, name="Sample discount with coupon code"),
        Discount(id=2, name="'20% order total' discount", discount_percentage=20.0),
        Discount(
            id=3,
            name="Computers 10% off",
            discount_type=DiscountType.ASSIGNED_TO_CATEGORIES,
            discount_percentage=10.0,
        ),
    )

    for language_id in (1, 2):
        for name, value in RESOURCES.items():
            db.add(LocaleStringResource(language_id=language_id, name=name, value=value))

    categories = parse_taxonomy(EMBEDDED_TAXONOMY.splitlines())
    db.add(*categories)
    for category in categories:
        db.add(
            UrlRecord(entity_name="Category", entity_id=category.id, slug=category.se_name or "")
        )

    # Localized names for the root categories
    german = {
        "Computers": "Computer",
        "Electronics": "Elektronik",
        "Apparel": "Bekleidung",
        "Books": "Bücher",
    }
    for category in categories:
        if category.name in german:
            db.add(
                LocalizedProperty(
                    entity_name="Category",
                    entity_id=category.id,
                    language_id=2,
                    key="name",
                    value=german[category.name],
                )
            )

    computers = categories[0]
    computers.applied_discount_ids = [3]
    computers.subject_to_acl = True
    db.add(AclRecord(entity_name="Category", entity_id=computers.id, customer_role_id=1))
    db.add(AclRecord(entity_name="Category", entity_id=computers.id, customer_role_id=2))

    gift_cards = categories[-1]
    gift_cards.limited_to_stores = True
    db.add(StoreMapping(entity_name="Category", entity_id=gift_cards.id, store_id=1))

    leaf_categories = [c for c in categories if c.parent_category_id != 0]
    for product_id, name in enumerate(PRODUCT_NAMES, start=1):
        product = Product(
            id=product_id,
            name=name,
            sku=f"SKU-{product_id:04d}",
            product_type=(
                ProductType.GROUPED_PRODUCT if product_id == 1 else ProductType.SIMPLE_PRODUCT
            ),
            vendor_id=rng.choice([0, 0, 1, 2]),
            price=Decimal(rng.randint(500, 250000)) / 100,
            stock_quantity=rng.randint(0, 10000),
        )
        db.add(product)

        db.add(
            ProductCategory(
                id=product_id,
                product_id=product_id,
                category_id=rng.choice(leaf_categories).id,
                is_featured_product=rng.random() < 0.2,
                display_order=rng.randint(0, 10),
            )
        )
        db.add(
            ProductManufacturer(
                id=product_id,
                product_id=product_id,
                manufacturer_id=rng.choice([1, 2, 3]),
            )
        )

    logger.info(
        "Seeded demo data",
        categories=len(db.categories),
        products=len(db.products),
    )
