"""Category model factory.

Assembles the view-models of the category admin screens: the category
grid, the category edit form, the products-in-category grid and the
product picker used to add products to a category.

Every ``prepare_*`` method rejects a missing required argument with
:class:`MissingArgumentError` before calling any service. Grid page
numbers are 1-based in search models and converted to 0-based page
indexes for the services.
"""

import structlog

from catalog_admin.admin.base_factory import BaseAdminModelFactory
from catalog_admin.admin.mapping import category_to_model, product_to_model
from catalog_admin.admin.models import (
    AddProductToCategoryListModel,
    AddProductToCategorySearchModel,
    BaseSearchModel,
    CategoryListModel,
    CategoryLocalizedModel,
    CategoryModel,
    CategoryProductListModel,
    CategoryProductModel,
    CategoryProductSearchModel,
    CategorySearchModel,
)
from catalog_admin.admin.supported_factories import (
    AclSupportedModelFactory,
    DiscountSupportedModelFactory,
    LocalizedModelFactory,
    StoreMappingSupportedModelFactory,
)
from catalog_admin.application.customer_service import AclService, CustomerService
from catalog_admin.application.discount_service import DiscountService
from catalog_admin.application.localization_service import LanguageService, LocalizationService
from catalog_admin.application.store_service import StoreMappingService, StoreService
from catalog_admin.application.vendor_service import VendorService
from catalog_admin.catalog.models import Category
from catalog_admin.catalog.service import (
    CategoryService,
    CategoryTemplateService,
    ManufacturerService,
    ProductFilter,
    ProductService,
)
from catalog_admin.domain.entities import DiscountType
from catalog_admin.domain.exceptions import MissingArgumentError
from catalog_admin.infrastructure.config import Settings, settings as default_settings
from catalog_admin.infrastructure.memory import InMemoryDatabase, get_database

logger = structlog.get_logger()

PARENT_NONE_RESOURCE = "Admin.Catalog.Categories.Fields.Parent.None"


def _require(value: object, argument: str) -> None:
    if value is None:
        logger.warning("Model preparation rejected", argument=argument)
        raise MissingArgumentError(argument)


class CategoryModelFactory:
    """Prepares category admin view-models.

    Example usage:
        factory = build_category_model_factory()
        search = factory.prepare_category_search_model(CategorySearchModel())
        search.search_category_name = "laptops"
        page = factory.prepare_category_list_model(search)
    """

    def __init__(
        self,
        acl_supported_model_factory: AclSupportedModelFactory,
        base_admin_model_factory: BaseAdminModelFactory,
        category_service: CategoryService,
        discount_service: DiscountService,
        discount_supported_model_factory: DiscountSupportedModelFactory,
        localization_service: LocalizationService,
        localized_model_factory: LocalizedModelFactory,
        product_service: ProductService,
        store_mapping_supported_model_factory: StoreMappingSupportedModelFactory,
        settings: Settings | None = None,
    ) -> None:
        self.acl_supported_model_factory = acl_supported_model_factory
        self.base_admin_model_factory = base_admin_model_factory
        self.category_service = category_service
        self.discount_service = discount_service
        self.discount_supported_model_factory = discount_supported_model_factory
        self.localization_service = localization_service
        self.localized_model_factory = localized_model_factory
        self.product_service = product_service
        self.store_mapping_supported_model_factory = store_mapping_supported_model_factory
        self.settings = settings or default_settings

    # ------------------------------------------------------------------
    # Category grid
    # ------------------------------------------------------------------

    def prepare_category_search_model(self, model: CategorySearchModel) -> CategorySearchModel:
        """Prepare the category grid criteria.

        Args:
            model: Search model to fill.

        Returns:
            The same search model with available stores.
        """
        _require(model, "model")

        self.base_admin_model_factory.prepare_stores(model.available_stores)
        self._set_grid_page_size(model)

        return model

    def prepare_category_list_model(self, search_model: CategorySearchModel) -> CategoryListModel:
        """Prepare one page of the category grid.

        Args:
            search_model: Grid criteria.

        Returns:
            Categories with their breadcrumbs and the total match count.
        """
        _require(search_model, "search_model")

        categories = self.category_service.get_all_categories(
            category_name=search_model.search_category_name,
            store_id=search_model.search_store_id,
            page_index=search_model.page - 1,
            page_size=search_model.page_size,
            show_hidden=True,
        )

        data = []
        for category in categories:
            category_model = category_to_model(category)
            category_model.breadcrumb = self.category_service.get_formatted_breadcrumb(category)
            data.append(category_model)

        logger.debug(
            "Prepared category list",
            page=search_model.page,
            rows=len(data),
            total=categories.total_count,
        )

        return CategoryListModel(data=data, total=categories.total_count)

    # ------------------------------------------------------------------
    # Category edit form
    # ------------------------------------------------------------------

    def prepare_category_model(
        self,
        model: CategoryModel | None,
        category: Category | None,
        exclude_properties: bool = False,
    ) -> CategoryModel:
        """Prepare the category edit form.

        Args:
            model: Submitted model, or None to build it from ``category``.
            category: Existing category, or None when creating one.
            exclude_properties: Keep submitted locales, discounts, roles
                and stores instead of loading them from the category.

        Returns:
            Category model with its option lists.
        """
        configure_locale = None

        if category is not None:
            if model is None:
                model = category_to_model(category)

            self.prepare_category_product_search_model(
                model.category_product_search_model, category
            )

            def configure_locale(locale: CategoryLocalizedModel, language_id: int) -> None:
                localize = self.localization_service.get_localized
                locale.name = localize(category, "name", language_id, False, False)
                locale.description = localize(category, "description", language_id, False, False)
                locale.meta_keywords = localize(
                    category, "meta_keywords", language_id, False, False
                )
                locale.meta_description = localize(
                    category, "meta_description", language_id, False, False
                )
                locale.meta_title = localize(category, "meta_title", language_id, False, False)
                locale.se_name = self.localization_service.get_se_name(
                    category, language_id, False, False
                )

        _require(model, "model")

        if category is None:
            model.page_size = self.settings.default_category_page_size
            model.page_size_options = self.settings.default_category_page_size_options
            model.published = True
            model.include_in_top_menu = True
            model.allow_customers_to_select_page_size = True

        if not exclude_properties:
            model.locales = self.localized_model_factory.prepare_localized_models(
                CategoryLocalizedModel, configure_locale
            )

        self.base_admin_model_factory.prepare_category_templates(
            model.available_category_templates, with_special_default_item=False
        )

        self.base_admin_model_factory.prepare_categories(
            model.available_categories,
            default_item_text=self.localization_service.get_resource(PARENT_NONE_RESOURCE),
        )

        available_discounts = self.discount_service.get_all_discounts(
            DiscountType.ASSIGNED_TO_CATEGORIES, show_hidden=True
        )
        self.discount_supported_model_factory.prepare_model_discounts(
            model, category, available_discounts, exclude_properties
        )

        self.acl_supported_model_factory.prepare_model_customer_roles(
            model, category, exclude_properties
        )

        self.store_mapping_supported_model_factory.prepare_model_stores(
            model, category, exclude_properties
        )

        return model

    # ------------------------------------------------------------------
    # Products in category grid
    # ------------------------------------------------------------------

    def prepare_category_product_search_model(
        self,
        model: CategoryProductSearchModel,
        category: Category | None,
    ) -> CategoryProductSearchModel:
        """Prepare the products-in-category grid criteria."""
        _require(model, "model")

        if category is not None:
            model.category_id = category.id
        self._set_grid_page_size(model)

        return model

    def prepare_category_product_list_model(
        self,
        search_model: CategoryProductSearchModel,
        category: Category,
    ) -> CategoryProductListModel:
        """Prepare one page of the products-in-category grid.

        Args:
            search_model: Grid criteria.
            category: Category whose products are listed.

        Returns:
            Product associations with product names and the total count.
        """
        _require(search_model, "search_model")
        _require(category, "category")

        product_categories = self.category_service.get_product_categories_by_category_id(
            category.id,
            page_index=search_model.page - 1,
            page_size=search_model.page_size,
            show_hidden=True,
        )

        data = []
        for product_category in product_categories:
            product = self.product_service.get_product_by_id(product_category.product_id)
            data.append(
                CategoryProductModel(
                    id=product_category.id,
                    category_id=product_category.category_id,
                    product_id=product_category.product_id,
                    product_name=product.name if product is not None else None,
                    is_featured_product=product_category.is_featured_product,
                    display_order=product_category.display_order,
                )
            )

        return CategoryProductListModel(data=data, total=product_categories.total_count)

    # ------------------------------------------------------------------
    # Product picker
    # ------------------------------------------------------------------

    def prepare_add_product_to_category_search_model(
        self,
        model: AddProductToCategorySearchModel,
    ) -> AddProductToCategorySearchModel:
        """Prepare the product picker criteria and its filter options."""
        _require(model, "model")

        self.base_admin_model_factory.prepare_categories(model.available_categories)
        self.base_admin_model_factory.prepare_manufacturers(model.available_manufacturers)
        self.base_admin_model_factory.prepare_stores(model.available_stores)
        self.base_admin_model_factory.prepare_vendors(model.available_vendors)
        self.base_admin_model_factory.prepare_product_types(model.available_product_types)
        self._set_grid_page_size(model)

        return model

    def prepare_add_product_to_category_list_model(
        self,
        search_model: AddProductToCategorySearchModel,
    ) -> AddProductToCategoryListModel:
        """Prepare one page of the product picker.

        Args:
            search_model: Picker criteria.

        Returns:
            Matching products and the total match count.
        """
        _require(search_model, "search_model")

        product_type = None
        if search_model.search_product_type_id > 0:
            product_type = search_model.search_product_type_id

        products = self.product_service.search_products(
            ProductFilter(
                category_ids=[search_model.search_category_id],
                manufacturer_id=search_model.search_manufacturer_id,
                store_id=search_model.search_store_id,
                vendor_id=search_model.search_vendor_id,
                product_type=product_type,
                keywords=search_model.search_product_name,
                show_hidden=True,
            ),
            page_index=search_model.page - 1,
            page_size=search_model.page_size,
        )

        return AddProductToCategoryListModel(
            data=[product_to_model(product) for product in products],
            total=products.total_count,
        )

    def _set_grid_page_size(self, model: BaseSearchModel) -> None:
        model.set_grid_page_size(
            self.settings.default_grid_page_size, self.settings.grid_page_sizes
        )


def build_category_model_factory(
    database: InMemoryDatabase | None = None,
    settings: Settings | None = None,
) -> CategoryModelFactory:
    """Wire a category model factory and its services over one store.

    Args:
        database: Store shared by all services (process-wide store if None).
        settings: Settings for catalog and grid defaults.

    Returns:
        Ready-to-use factory.
    """
    db = database or get_database()

    language_service = LanguageService(db)
    localization_service = LocalizationService(db, language_service)
    store_service = StoreService(db)
    store_mapping_service = StoreMappingService(db)
    category_service = CategoryService(db, localization_service, store_mapping_service)

    return CategoryModelFactory(
        acl_supported_model_factory=AclSupportedModelFactory(
            AclService(db), CustomerService(db)
        ),
        base_admin_model_factory=BaseAdminModelFactory(
            category_service=category_service,
            category_template_service=CategoryTemplateService(db),
            localization_service=localization_service,
            manufacturer_service=ManufacturerService(db),
            store_service=store_service,
            vendor_service=VendorService(db),
        ),
        category_service=category_service,
        discount_service=DiscountService(db),
        discount_supported_model_factory=DiscountSupportedModelFactory(),
        localization_service=localization_service,
        localized_model_factory=LocalizedModelFactory(language_service),
        product_service=ProductService(db, store_mapping_service),
        store_mapping_supported_model_factory=StoreMappingSupportedModelFactory(
            store_mapping_service, store_service
        ),
        settings=settings,
    )
