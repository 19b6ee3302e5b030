"""Category admin API endpoints.

Serves the view-models of the category admin screens:
- GET /admin/categories/search-model - category grid criteria
- POST /admin/categories/list - one page of the category grid
- GET /admin/categories/new - edit form for a new category
- GET /admin/categories/{id} - edit form for an existing category
- POST /admin/categories/{id}/products - products in the category
- GET /admin/categories/add-product/search-model - product picker criteria
- POST /admin/categories/add-product/list - one page of the product picker
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from catalog_admin.admin.category_factory import CategoryModelFactory, build_category_model_factory
from catalog_admin.admin.models import (
    AddProductToCategoryListModel,
    AddProductToCategorySearchModel,
    CategoryListModel,
    CategoryModel,
    CategoryProductListModel,
    CategoryProductSearchModel,
    CategorySearchModel,
)
from catalog_admin.api.schemas import ErrorResponse
from catalog_admin.catalog.models import Category
from catalog_admin.domain.exceptions import CategoryNotFoundError

router = APIRouter(prefix="/admin/categories", tags=["Categories"])


# ============================================================================
# Dependencies
# ============================================================================


def get_factory() -> CategoryModelFactory:
    """Get category model factory over the process-wide store."""
    return build_category_model_factory()


FactoryDep = Annotated[CategoryModelFactory, Depends(get_factory)]


def get_category(
    factory: FactoryDep,
    category_id: Annotated[int, Path(ge=1)],
) -> Category:
    """Load a category or fail with 404.

    Raises:
        CategoryNotFoundError: If the category does not exist or is deleted.
    """
    category = factory.category_service.get_category_by_id(category_id)

    if category is None or category.deleted:
        raise CategoryNotFoundError(category_id)

    return category


CategoryDep = Annotated[Category, Depends(get_category)]


# ============================================================================
# Category Grid
# ============================================================================


@router.get(
    "/search-model",
    response_model=CategorySearchModel,
    summary="Category grid criteria",
)
async def get_category_search_model(factory: FactoryDep) -> CategorySearchModel:
    """Get the category grid criteria with available stores."""
    return factory.prepare_category_search_model(CategorySearchModel())


@router.post(
    "/list",
    response_model=CategoryListModel,
    responses={400: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    search_model: CategorySearchModel,
    factory: FactoryDep,
) -> CategoryListModel:
    """Get one page of the category grid.

    Categories are returned in tree order with their breadcrumbs.
    """
    return factory.prepare_category_list_model(search_model)


# ============================================================================
# Category Edit Form
# ============================================================================


@router.get(
    "/new",
    response_model=CategoryModel,
    summary="New category form",
)
async def get_new_category_model(factory: FactoryDep) -> CategoryModel:
    """Get the edit form for a new category, filled with defaults."""
    return factory.prepare_category_model(CategoryModel(), None)


@router.get(
    "/{category_id}",
    response_model=CategoryModel,
    responses={404: {"model": ErrorResponse}},
    summary="Category form",
)
async def get_category_model(category: CategoryDep, factory: FactoryDep) -> CategoryModel:
    """Get the edit form of an existing category."""
    return factory.prepare_category_model(None, category)


@router.post(
    "/{category_id}/products",
    response_model=CategoryProductListModel,
    responses={404: {"model": ErrorResponse}},
    summary="List products in category",
)
async def list_category_products(
    search_model: CategoryProductSearchModel,
    category: CategoryDep,
    factory: FactoryDep,
) -> CategoryProductListModel:
    """Get one page of the products assigned to a category."""
    return factory.prepare_category_product_list_model(search_model, category)


# ============================================================================
# Product Picker
# ============================================================================


@router.get(
    "/add-product/search-model",
    response_model=AddProductToCategorySearchModel,
    summary="Product picker criteria",
)
async def get_add_product_search_model(factory: FactoryDep) -> AddProductToCategorySearchModel:
    """Get the product picker criteria with its filter options."""
    return factory.prepare_add_product_to_category_search_model(
        AddProductToCategorySearchModel()
    )


@router.post(
    "/add-product/list",
    response_model=AddProductToCategoryListModel,
    summary="Search products to add",
)
async def list_products_to_add(
    search_model: AddProductToCategorySearchModel,
    factory: FactoryDep,
) -> AddProductToCategoryListModel:
    """Get one page of products matching the picker criteria."""
    return factory.prepare_add_product_to_category_list_model(search_model)
