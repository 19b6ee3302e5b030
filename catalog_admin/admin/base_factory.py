"""Option lists shared by admin forms.

Each ``prepare_*`` method appends select items to a caller-owned list
and optionally prepends a special default item (value ``"0"``).
"""

import structlog

from catalog_admin.admin.models import SelectListItem
from catalog_admin.application.localization_service import LocalizationService
from catalog_admin.application.store_service import StoreService
from catalog_admin.application.vendor_service import VendorService
from catalog_admin.catalog.models import ProductType
from catalog_admin.catalog.service import (
    CategoryService,
    CategoryTemplateService,
    ManufacturerService,
)
from catalog_admin.domain.exceptions import MissingArgumentError

logger = structlog.get_logger()

DEFAULT_ITEM_RESOURCE = "Admin.Common.All"


class BaseAdminModelFactory:
    """Populates drop-down option lists."""

    def __init__(
        self,
        category_service: CategoryService,
        category_template_service: CategoryTemplateService,
        localization_service: LocalizationService,
        manufacturer_service: ManufacturerService,
        store_service: StoreService,
        vendor_service: VendorService,
    ) -> None:
        self.category_service = category_service
        self.category_template_service = category_template_service
        self.localization_service = localization_service
        self.manufacturer_service = manufacturer_service
        self.store_service = store_service
        self.vendor_service = vendor_service

    def prepare_stores(
        self,
        items: list[SelectListItem] | None,
        with_special_default_item: bool = True,
        default_item_text: str | None = None,
    ) -> None:
        """Add all stores to ``items``."""
        self._ensure_items(items)

        for store in self.store_service.get_all_stores():
            items.append(SelectListItem(text=store.name, value=str(store.id)))

        self._prepare_default_item(items, with_special_default_item, default_item_text)

    def prepare_category_templates(
        self,
        items: list[SelectListItem] | None,
        with_special_default_item: bool = True,
        default_item_text: str | None = None,
    ) -> None:
        """Add all category templates to ``items``."""
        self._ensure_items(items)

        for template in self.category_template_service.get_all_category_templates():
            items.append(SelectListItem(text=template.name, value=str(template.id)))

        self._prepare_default_item(items, with_special_default_item, default_item_text)

    def prepare_categories(
        self,
        items: list[SelectListItem] | None,
        with_special_default_item: bool = True,
        default_item_text: str | None = None,
    ) -> None:
        """Add all categories to ``items``, labelled with their breadcrumb."""
        self._ensure_items(items)

        categories = self.category_service.get_all_categories(show_hidden=True)
        for category in categories:
            items.append(
                SelectListItem(
                    text=self.category_service.get_formatted_breadcrumb(category),
                    value=str(category.id),
                )
            )

        self._prepare_default_item(items, with_special_default_item, default_item_text)

    def prepare_manufacturers(
        self,
        items: list[SelectListItem] | None,
        with_special_default_item: bool = True,
        default_item_text: str | None = None,
    ) -> None:
        """Add all manufacturers to ``items``."""
        self._ensure_items(items)

        for manufacturer in self.manufacturer_service.get_all_manufacturers(show_hidden=True):
            items.append(SelectListItem(text=manufacturer.name, value=str(manufacturer.id)))

        self._prepare_default_item(items, with_special_default_item, default_item_text)

    def prepare_vendors(
        self,
        items: list[SelectListItem] | None,
        with_special_default_item: bool = True,
        default_item_text: str | None = None,
    ) -> None:
        """Add all vendors to ``items``."""
        self._ensure_items(items)

        for vendor in self.vendor_service.get_all_vendors(show_hidden=True):
            items.append(SelectListItem(text=vendor.name, value=str(vendor.id)))

        self._prepare_default_item(items, with_special_default_item, default_item_text)

    def prepare_product_types(
        self,
        items: list[SelectListItem] | None,
        with_special_default_item: bool = True,
        default_item_text: str | None = None,
    ) -> None:
        """Add all product types to ``items``."""
        self._ensure_items(items)

        for product_type in ProductType:
            items.append(
                SelectListItem(
                    text=self._enum_text(product_type),
                    value=str(product_type.value),
                )
            )

        self._prepare_default_item(items, with_special_default_item, default_item_text)

    def _enum_text(self, value: ProductType) -> str:
        # Enums.ProductType.SIMPLE_PRODUCT -> "Simple product" when no resource exists
        resource = f"Enums.{type(value).__name__}.{value.name}"
        text = self.localization_service.get_resource(resource)
        if text == resource:
            text = value.name.replace("_", " ").capitalize()
        return text

    def _prepare_default_item(
        self,
        items: list[SelectListItem],
        with_special_default_item: bool,
        default_item_text: str | None,
    ) -> None:
        if not with_special_default_item:
            return

        text = default_item_text or self.localization_service.get_resource(DEFAULT_ITEM_RESOURCE)
        items.insert(0, SelectListItem(text=text, value="0"))

    @staticmethod
    def _ensure_items(items: list[SelectListItem] | None) -> None:
        if items is None:
            logger.warning("Option list preparation rejected", argument="items")
            raise MissingArgumentError("items")
