"""Application layer module.

Contains the services the admin factories consume for stores,
customer roles, discounts, vendors and localization.
"""

from catalog_admin.application.customer_service import AclService, CustomerService
from catalog_admin.application.discount_service import DiscountService
from catalog_admin.application.localization_service import LanguageService, LocalizationService
from catalog_admin.application.store_service import StoreMappingService, StoreService
from catalog_admin.application.vendor_service import VendorService

__all__ = [
    "AclService",
    "CustomerService",
    "DiscountService",
    "LanguageService",
    "LocalizationService",
    "StoreMappingService",
    "StoreService",
    "VendorService",
]
