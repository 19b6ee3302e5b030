"""Entity to view-model projection.

Copies every entity field that has a counterpart on the target model.
Fields that exist only on the model (option lists, breadcrumbs,
locales) are left at their defaults for the factories to fill.
"""

from dataclasses import fields
from typing import TypeVar

from pydantic import BaseModel

from catalog_admin.admin.models import CategoryModel, ProductModel
from catalog_admin.catalog.models import Category, Product

M = TypeVar("M", bound=BaseModel)


def map_entity(entity: object, model_type: type[M], **extra: object) -> M:
    """Project a dataclass entity onto a model type.

    Args:
        entity: Source dataclass instance.
        model_type: Pydantic model to build.
        extra: Values for model fields without an entity counterpart.

    Returns:
        New model instance.
    """
    model_fields = model_type.model_fields
    values = {
        f.name: getattr(entity, f.name)
        for f in fields(entity)  # type: ignore[arg-type]
        if f.name in model_fields
    }
    values.update(extra)
    return model_type(**values)


def category_to_model(category: Category) -> CategoryModel:
    """Map a category onto its edit model."""
    return map_entity(category, CategoryModel)


def product_to_model(product: Product) -> ProductModel:
    """Map a product onto a product grid row."""
    return map_entity(product, ProductModel, product_type_id=int(product.product_type))
