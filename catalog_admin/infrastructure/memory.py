"""In-memory tables backing the reference service implementations.

The admin layer does not own persistence. This store keeps the
records the collaborating services read, keyed by primary key where
the record has one.
"""

from dataclasses import dataclass, field

from catalog_admin.catalog.models import (
    Category,
    CategoryTemplate,
    Manufacturer,
    Product,
    ProductCategory,
    ProductManufacturer,
)
from catalog_admin.domain.entities import (
    AclRecord,
    CustomerRole,
    Discount,
    Language,
    LocaleStringResource,
    LocalizedProperty,
    Store,
    StoreMapping,
    UrlRecord,
    Vendor,
)


@dataclass
class InMemoryDatabase:
    """Process-local tables for catalog and supporting records."""

    categories: dict[int, Category] = field(default_factory=dict)
    products: dict[int, Product] = field(default_factory=dict)
    product_categories: dict[int, ProductCategory] = field(default_factory=dict)
    product_manufacturers: dict[int, ProductManufacturer] = field(default_factory=dict)
    category_templates: dict[int, CategoryTemplate] = field(default_factory=dict)
    manufacturers: dict[int, Manufacturer] = field(default_factory=dict)
    vendors: dict[int, Vendor] = field(default_factory=dict)
    stores: dict[int, Store] = field(default_factory=dict)
    languages: dict[int, Language] = field(default_factory=dict)
    customer_roles: dict[int, CustomerRole] = field(default_factory=dict)
    discounts: dict[int, Discount] = field(default_factory=dict)
    store_mappings: list[StoreMapping] = field(default_factory=list)
    acl_records: list[AclRecord] = field(default_factory=list)
    localized_properties: list[LocalizedProperty] = field(default_factory=list)
    url_records: list[UrlRecord] = field(default_factory=list)
    locale_string_resources: list[LocaleStringResource] = field(default_factory=list)

    def add(self, *records: object) -> None:
        """Insert records into the table matching their type.

        Args:
            records: Entities or mapping records to store.

        Raises:
            TypeError: If a record type has no table.
        """
        for record in records:
            table = self._table_for(record)
            if isinstance(table, dict):
                table[record.id] = record  # type: ignore[attr-defined]
            else:
                table.append(record)

    def clear(self) -> None:
        """Remove all records from every table."""
        for value in vars(self).values():
            value.clear()

    def _table_for(self, record: object) -> dict | list:
        tables: dict[type, dict | list] = {
            Category: self.categories,
            Product: self.products,
            ProductCategory: self.product_categories,
            ProductManufacturer: self.product_manufacturers,
            CategoryTemplate: self.category_templates,
            Manufacturer: self.manufacturers,
            Vendor: self.vendors,
            Store: self.stores,
            Language: self.languages,
            CustomerRole: self.customer_roles,
            Discount: self.discounts,
            StoreMapping: self.store_mappings,
            AclRecord: self.acl_records,
            LocalizedProperty: self.localized_properties,
            UrlRecord: self.url_records,
            LocaleStringResource: self.locale_string_resources,
        }
        try:
            return tables[type(record)]
        except KeyError:
            raise TypeError(f"No table for {type(record).__name__}") from None


def entity_name(entity: object) -> str:
    """Name used to key mapping and localization records for an entity."""
    return type(entity).__name__


# Global database instance
_database: InMemoryDatabase | None = None


def get_database() -> InMemoryDatabase:
    """Get database singleton."""
    global _database
    if _database is None:
        _database = InMemoryDatabase()
    return _database
