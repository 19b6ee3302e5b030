"""Domain layer - supporting entities and exceptions."""

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
from catalog_admin.domain.exceptions import (
    CategoryNotFoundError,
    DomainError,
    MissingArgumentError,
    NotFoundError,
)

__all__ = [
    # Entities
    "AclRecord",
    "CustomerRole",
    "Discount",
    "DiscountType",
    "Language",
    "LocaleStringResource",
    "LocalizedProperty",
    "Store",
    "StoreMapping",
    "UrlRecord",
    "Vendor",
    # Exceptions
    "CategoryNotFoundError",
    "DomainError",
    "MissingArgumentError",
    "NotFoundError",
]
