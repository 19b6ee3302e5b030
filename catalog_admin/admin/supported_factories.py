"""Factories for model mixins shared across admin edit screens.

Fill the locale, discount, customer role and store sections of edit
models that support them.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from catalog_admin.admin.models import (
    AclSupportedModel,
    DiscountSupportedModel,
    LocalizedLocaleModel,
    SelectListItem,
    StoreMappingSupportedModel,
)
from catalog_admin.application.customer_service import AclService, CustomerService
from catalog_admin.application.localization_service import LanguageService
from catalog_admin.application.store_service import StoreMappingService, StoreService
from catalog_admin.domain.entities import Discount
from catalog_admin.domain.exceptions import MissingArgumentError

L = TypeVar("L", bound=LocalizedLocaleModel)


class LocalizedModelFactory:
    """Builds one locale model per language."""

    def __init__(self, language_service: LanguageService) -> None:
        self.language_service = language_service

    def prepare_localized_models(
        self,
        locale_type: type[L],
        configure: Callable[[L, int], None] | None = None,
    ) -> list[L]:
        """Create locale models for every language.

        Args:
            locale_type: Locale model class to instantiate.
            configure: Called with each locale model and its language ID.

        Returns:
            Locale models in language display order.
        """
        locales = []
        for language in self.language_service.get_all_languages(show_hidden=True):
            locale = locale_type(language_id=language.id)
            if configure is not None:
                configure(locale, language.id)
            locales.append(locale)
        return locales


class DiscountSupportedModelFactory:
    """Fills applied and available discounts."""

    def prepare_model_discounts(
        self,
        model: DiscountSupportedModel,
        entity: Any,
        available_discounts: Iterable[Discount],
        ignore_applied_discounts: bool = False,
    ) -> None:
        """Fill discount selection of a model.

        Args:
            model: Model to fill.
            entity: Entity with ``applied_discount_ids``, or None for a new entity.
            available_discounts: Discounts the admin can choose from.
            ignore_applied_discounts: Keep the submitted selection as is.
        """
        if model is None:
            raise MissingArgumentError("model")

        if not ignore_applied_discounts and entity is not None:
            model.selected_discount_ids = list(entity.applied_discount_ids)

        model.available_discounts = [
            SelectListItem(
                text=discount.name,
                value=str(discount.id),
                selected=discount.id in model.selected_discount_ids,
            )
            for discount in available_discounts
        ]


class AclSupportedModelFactory:
    """Fills customer roles that may access an entity."""

    def __init__(self, acl_service: AclService, customer_service: CustomerService) -> None:
        self.acl_service = acl_service
        self.customer_service = customer_service

    def prepare_model_customer_roles(
        self,
        model: AclSupportedModel,
        entity: Any,
        ignore_acl_mappings: bool = False,
    ) -> None:
        """Fill customer role selection of a model.

        Args:
            model: Model to fill.
            entity: Entity subject to ACL, or None for a new entity.
            ignore_acl_mappings: Keep the submitted selection as is.
        """
        if model is None:
            raise MissingArgumentError("model")

        if not ignore_acl_mappings and entity is not None:
            model.selected_customer_role_ids = self.acl_service.get_customer_role_ids_with_access(
                entity
            )

        model.available_customer_roles = [
            SelectListItem(
                text=role.name,
                value=str(role.id),
                selected=role.id in model.selected_customer_role_ids,
            )
            for role in self.customer_service.get_all_customer_roles(show_hidden=True)
        ]


class StoreMappingSupportedModelFactory:
    """Fills stores an entity is limited to."""

    def __init__(
        self,
        store_mapping_service: StoreMappingService,
        store_service: StoreService,
    ) -> None:
        self.store_mapping_service = store_mapping_service
        self.store_service = store_service

    def prepare_model_stores(
        self,
        model: StoreMappingSupportedModel,
        entity: Any,
        ignore_store_mappings: bool = False,
    ) -> None:
        """Fill store selection of a model.

        Args:
            model: Model to fill.
            entity: Entity supporting store mapping, or None for a new entity.
            ignore_store_mappings: Keep the submitted selection as is.
        """
        if model is None:
            raise MissingArgumentError("model")

        if not ignore_store_mappings and entity is not None:
            model.selected_store_ids = self.store_mapping_service.get_stores_ids_with_access(entity)

        model.available_stores = [
            SelectListItem(
                text=store.name,
                value=str(store.id),
                selected=store.id in model.selected_store_ids,
            )
            for store in self.store_service.get_all_stores()
        ]
