"""Catalog services for category and product lookups.

Read-side services over the catalog store: paged category and product
queries, category breadcrumbs and the option sources used by admin
forms (templates, manufacturers).
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from catalog_admin.application.localization_service import LocalizationService
from catalog_admin.application.store_service import StoreMappingService
from catalog_admin.catalog.models import (
    Category,
    CategoryTemplate,
    Manufacturer,
    Product,
    ProductCategory,
)
from catalog_admin.catalog.paging import MAX_PAGE_SIZE, PagedList
from catalog_admin.infrastructure.memory import InMemoryDatabase, get_database


def sort_categories_for_tree(
    categories: Iterable[Category],
    parent_id: int = 0,
    ignore_without_existing_parent: bool = False,
) -> list[Category]:
    """Order categories so that every child follows its parent.

    Siblings keep their incoming order. Categories whose parent is not
    part of ``categories`` are appended at the end unless
    ``ignore_without_existing_parent`` is set.

    Args:
        categories: Categories to order.
        parent_id: ID of the root to start from.
        ignore_without_existing_parent: Drop orphaned categories.

    Returns:
        Categories in tree order.
    """
    source = list(categories)
    children: dict[int, list[Category]] = {}
    for category in source:
        children.setdefault(category.parent_category_id, []).append(category)

    result: list[Category] = []
    visited: set[int] = set()

    def walk(current_parent: int) -> None:
        for category in children.get(current_parent, []):
            if category.id in visited:
                continue
            visited.add(category.id)
            result.append(category)
            walk(category.id)

    walk(parent_id)

    if not ignore_without_existing_parent and len(result) != len(source):
        result.extend(c for c in source if c.id not in visited)

    return result


class CategoryService:
    """Service for category operations.

    Example usage:
        service = CategoryService()
        page = service.get_all_categories(category_name="comp", page_size=10)
        for category in page:
            print(service.get_formatted_breadcrumb(category))
    """

    def __init__(
        self,
        database: InMemoryDatabase | None = None,
        localization_service: LocalizationService | None = None,
        store_mapping_service: StoreMappingService | None = None,
    ) -> None:
        """Initialize service.

        Args:
            database: Catalog store.
            localization_service: Used to localize breadcrumb names.
            store_mapping_service: Used for store filtering.
        """
        self.db = database or get_database()
        self.localization_service = localization_service or LocalizationService(self.db)
        self.store_mapping_service = store_mapping_service or StoreMappingService(self.db)

    def get_all_categories(
        self,
        category_name: str | None = "",
        store_id: int = 0,
        page_index: int = 0,
        page_size: int = MAX_PAGE_SIZE,
        show_hidden: bool = False,
    ) -> PagedList[Category]:
        """Get a page of categories in tree order.

        Args:
            category_name: Case-insensitive substring filter on name.
            store_id: Only categories visible in this store (0 = any).
            page_index: 0-based page index.
            page_size: Items per page.
            show_hidden: Include unpublished categories.

        Returns:
            Paged categories.
        """
        needle = (category_name or "").strip().lower()

        matches = []
        for category in self.db.categories.values():
            if category.deleted:
                continue
            if not show_hidden and not category.published:
                continue
            if needle and needle not in category.name.lower():
                continue
            if store_id > 0 and not self.store_mapping_service.authorize(category, store_id):
                continue
            matches.append(category)

        matches.sort(key=lambda c: (c.parent_category_id, c.display_order, c.id))
        ordered = sort_categories_for_tree(matches)

        return PagedList.from_sequence(ordered, page_index, page_size)

    def get_category_by_id(self, category_id: int) -> Category | None:
        """Get category by ID.

        Args:
            category_id: Category ID.

        Returns:
            Category if found, None otherwise.
        """
        if category_id == 0:
            return None
        return self.db.categories.get(category_id)

    def get_product_categories_by_category_id(
        self,
        category_id: int,
        page_index: int = 0,
        page_size: int = MAX_PAGE_SIZE,
        show_hidden: bool = False,
    ) -> PagedList[ProductCategory]:
        """Get a page of product associations of a category.

        Args:
            category_id: Category ID.
            page_index: 0-based page index.
            page_size: Items per page.
            show_hidden: Include unpublished products.

        Returns:
            Paged product-category associations ordered by display order.
        """
        if category_id == 0:
            return PagedList.from_sequence([], page_index, page_size)

        matches = []
        for mapping in self.db.product_categories.values():
            if mapping.category_id != category_id:
                continue
            product = self.db.products.get(mapping.product_id)
            if product is None or product.deleted:
                continue
            if not show_hidden and not product.published:
                continue
            matches.append(mapping)

        matches.sort(key=lambda pc: (pc.display_order, pc.id))
        return PagedList.from_sequence(matches, page_index, page_size)

    def get_category_breadcrumb(
        self,
        category: Category,
        show_hidden: bool = False,
    ) -> list[Category]:
        """Get the path from the root category down to ``category``.

        Walking stops at missing, deleted or (unless ``show_hidden``)
        unpublished ancestors, and on cycles.

        Args:
            category: Category to start from.
            show_hidden: Include unpublished ancestors.

        Returns:
            Categories, root first.
        """
        if category is None:
            raise ValueError("category is required")

        result: list[Category] = []
        seen: set[int] = set()
        current: Category | None = category

        while (
            current is not None
            and not current.deleted
            and (show_hidden or current.published)
            and current.id not in seen
        ):
            result.insert(0, current)
            seen.add(current.id)
            current = self.get_category_by_id(current.parent_category_id)

        return result

    def get_formatted_breadcrumb(
        self,
        category: Category,
        separator: str = ">>",
        language_id: int = 0,
    ) -> str:
        """Format the category breadcrumb as display text.

        Args:
            category: Category.
            separator: Separator placed between names.
            language_id: Language used to localize names.

        Returns:
            Breadcrumb text such as ``"Electronics >> Computers"``.
        """
        names = [
            self.localization_service.get_localized(c, "name", language_id) or ""
            for c in self.get_category_breadcrumb(category, show_hidden=True)
        ]
        return f" {separator} ".join(names)


@dataclass
class ProductFilter:
    """Filter parameters for product search.

    Zero IDs and empty collections mean "no filter".

    Attributes:
        category_ids: Products in any of these categories.
        manufacturer_id: Products of this manufacturer.
        store_id: Products visible in this store.
        vendor_id: Products of this vendor.
        product_type: Products of this type (a ProductType value).
        keywords: Case-insensitive name substring or exact SKU.
        show_hidden: Include unpublished products.
    """

    category_ids: list[int] = field(default_factory=list)
    manufacturer_id: int = 0
    store_id: int = 0
    vendor_id: int = 0
    product_type: int | None = None
    keywords: str | None = None
    show_hidden: bool = False


class ProductService:
    """Service for product operations."""

    def __init__(
        self,
        database: InMemoryDatabase | None = None,
        store_mapping_service: StoreMappingService | None = None,
    ) -> None:
        """Initialize service.

        Args:
            database: Catalog store.
            store_mapping_service: Used for store filtering.
        """
        self.db = database or get_database()
        self.store_mapping_service = store_mapping_service or StoreMappingService(self.db)

    def get_product_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        if product_id == 0:
            return None
        return self.db.products.get(product_id)

    def search_products(
        self,
        filters: ProductFilter,
        page_index: int = 0,
        page_size: int = MAX_PAGE_SIZE,
    ) -> PagedList[Product]:
        """Search products with filters and pagination.

        Products filtered by category are ordered by their display order
        in the category, otherwise by name.

        Args:
            filters: Filter parameters.
            page_index: 0-based page index.
            page_size: Items per page.

        Returns:
            Paged products.
        """
        category_ids = [cid for cid in filters.category_ids if cid != 0]
        keywords = (filters.keywords or "").strip().lower()

        category_order: dict[int, int] = {}
        if category_ids:
            for mapping in self.db.product_categories.values():
                if mapping.category_id in category_ids:
                    current = category_order.get(mapping.product_id)
                    if current is None or mapping.display_order < current:
                        category_order[mapping.product_id] = mapping.display_order

        manufacturer_products: set[int] | None = None
        if filters.manufacturer_id > 0:
            manufacturer_products = {
                m.product_id
                for m in self.db.product_manufacturers.values()
                if m.manufacturer_id == filters.manufacturer_id
            }

        matches = []
        for product in self.db.products.values():
            if product.deleted:
                continue
            if not filters.show_hidden and not product.published:
                continue
            if category_ids and product.id not in category_order:
                continue
            if manufacturer_products is not None and product.id not in manufacturer_products:
                continue
            if filters.vendor_id > 0 and product.vendor_id != filters.vendor_id:
                continue
            if filters.product_type is not None and product.product_type != filters.product_type:
                continue
            if keywords and not self._matches_keywords(product, keywords):
                continue
            if filters.store_id > 0 and not self.store_mapping_service.authorize(
                product, filters.store_id
            ):
                continue
            matches.append(product)

        if category_ids:
            matches.sort(key=lambda p: (category_order[p.id], p.name, p.id))
        else:
            matches.sort(key=lambda p: (p.name, p.id))

        return PagedList.from_sequence(matches, page_index, page_size)

    @staticmethod
    def _matches_keywords(product: Product, keywords: str) -> bool:
        if keywords in product.name.lower():
            return True
        return bool(product.sku) and keywords == product.sku.lower()


class CategoryTemplateService:
    """Reads category templates."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_category_templates(self) -> list[CategoryTemplate]:
        """Get templates ordered by display order."""
        return sorted(
            self.db.category_templates.values(), key=lambda t: (t.display_order, t.id)
        )


class ManufacturerService:
    """Reads manufacturers."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_manufacturers(self, show_hidden: bool = False) -> list[Manufacturer]:
        """Get manufacturers that are not deleted.

        Args:
            show_hidden: Include unpublished manufacturers.

        Returns:
            Manufacturers ordered by display order, then name.
        """
        manufacturers = [
            m for m in self.db.manufacturers.values()
            if not m.deleted and (show_hidden or m.published)
        ]
        return sorted(manufacturers, key=lambda m: (m.display_order, m.name, m.id))
