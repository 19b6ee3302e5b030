"""Admin view-models.

Pydantic models shaped for admin screens: search models carrying
filter and pagination criteria, list models carrying one page of rows,
and edit models carrying form values plus their option lists.
"""

from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


# ============================================================================
# Common Models
# ============================================================================


class SelectListItem(BaseModel):
    """One option of a drop-down list."""

    text: str = Field(..., description="Display text")
    value: str = Field(..., description="Submitted value")
    selected: bool = Field(default=False, description="Whether the option is preselected")


class BaseSearchModel(BaseModel):
    """Filter and pagination criteria of an admin grid."""

    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    page_size: int = Field(default=15, ge=1, description="Items per page")
    available_page_sizes: str = Field(
        default="", description="Comma-separated page sizes offered by the grid"
    )

    def set_grid_page_size(self, page_size: int, available_page_sizes: str) -> None:
        """Apply the configured grid page size settings.

        Args:
            page_size: Default rows per page.
            available_page_sizes: Comma-separated page sizes.
        """
        self.page = 1
        self.page_size = page_size
        self.available_page_sizes = available_page_sizes


class BasePagedListModel(BaseModel, Generic[T]):
    """One page of grid rows plus the total row count."""

    data: list[T] = Field(default_factory=list, description="Rows on this page")
    total: int = Field(default=0, description="Total number of rows")


class LocalizedLocaleModel(BaseModel):
    """Per-language values of a localizable model."""

    language_id: int = Field(..., description="Language ID")


# ============================================================================
# Supported Model Mixins
# ============================================================================


class DiscountSupportedModel(BaseModel):
    """Model that lets the admin pick applied discounts."""

    selected_discount_ids: list[int] = Field(default_factory=list)
    available_discounts: list[SelectListItem] = Field(default_factory=list)


class AclSupportedModel(BaseModel):
    """Model that lets the admin limit access to customer roles."""

    selected_customer_role_ids: list[int] = Field(default_factory=list)
    available_customer_roles: list[SelectListItem] = Field(default_factory=list)


class StoreMappingSupportedModel(BaseModel):
    """Model that lets the admin limit visibility to stores."""

    selected_store_ids: list[int] = Field(default_factory=list)
    available_stores: list[SelectListItem] = Field(default_factory=list)


# ============================================================================
# Category Models
# ============================================================================


class CategorySearchModel(BaseSearchModel):
    """Criteria of the category grid."""

    search_category_name: str | None = Field(default=None, description="Name filter")
    search_store_id: int = Field(default=0, ge=0, description="Store filter (0 = all)")
    available_stores: list[SelectListItem] = Field(default_factory=list)


class CategoryProductSearchModel(BaseSearchModel):
    """Criteria of the products grid on the category edit screen."""

    category_id: int = Field(default=0, ge=0, description="Category whose products are listed")


class CategoryLocalizedModel(LocalizedLocaleModel):
    """Category values in one language."""

    name: str | None = None
    description: str | None = None
    meta_keywords: str | None = None
    meta_description: str | None = None
    meta_title: str | None = None
    se_name: str | None = None


class CategoryModel(DiscountSupportedModel, AclSupportedModel, StoreMappingSupportedModel):
    """Category edit form."""

    id: int = 0
    name: str = ""
    description: str | None = None
    category_template_id: int = 0
    meta_keywords: str | None = None
    meta_description: str | None = None
    meta_title: str | None = None
    se_name: str | None = None
    parent_category_id: int = 0
    picture_id: int = 0
    page_size: int = 0
    allow_customers_to_select_page_size: bool = False
    page_size_options: str | None = None
    price_ranges: str | None = None
    show_on_home_page: bool = False
    include_in_top_menu: bool = False
    published: bool = False
    deleted: bool = False
    display_order: int = 0

    breadcrumb: str | None = Field(default=None, description="Formatted ancestor path")
    locales: list[CategoryLocalizedModel] = Field(default_factory=list)
    available_category_templates: list[SelectListItem] = Field(default_factory=list)
    available_categories: list[SelectListItem] = Field(default_factory=list)
    category_product_search_model: CategoryProductSearchModel = Field(
        default_factory=CategoryProductSearchModel
    )


class CategoryListModel(BasePagedListModel[CategoryModel]):
    """Page of the category grid."""


class CategoryProductModel(BaseModel):
    """Row of the products grid on the category edit screen."""

    id: int
    category_id: int
    product_id: int
    product_name: str | None = None
    is_featured_product: bool = False
    display_order: int = 0


class CategoryProductListModel(BasePagedListModel[CategoryProductModel]):
    """Page of the category products grid."""


# ============================================================================
# Add Product To Category Models
# ============================================================================


class ProductModel(BaseModel):
    """Row of the product picker grid."""

    id: int
    name: str
    short_description: str | None = None
    sku: str | None = None
    product_type_id: int = 0
    vendor_id: int = 0
    price: Decimal = Decimal("0.00")
    stock_quantity: int = 0
    published: bool = False
    display_order: int = 0


class AddProductToCategorySearchModel(BaseSearchModel):
    """Criteria of the product picker used to add products to a category."""

    search_product_name: str | None = None
    search_category_id: int = Field(default=0, ge=0)
    search_manufacturer_id: int = Field(default=0, ge=0)
    search_store_id: int = Field(default=0, ge=0)
    search_vendor_id: int = Field(default=0, ge=0)
    search_product_type_id: int = Field(default=0, ge=0)

    available_categories: list[SelectListItem] = Field(default_factory=list)
    available_manufacturers: list[SelectListItem] = Field(default_factory=list)
    available_stores: list[SelectListItem] = Field(default_factory=list)
    available_vendors: list[SelectListItem] = Field(default_factory=list)
    available_product_types: list[SelectListItem] = Field(default_factory=list)


class AddProductToCategoryListModel(BasePagedListModel[ProductModel]):
    """Page of the product picker grid."""
