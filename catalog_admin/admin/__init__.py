"""Admin model factories and view-models."""

from catalog_admin.admin.category_factory import CategoryModelFactory, build_category_model_factory

__all__ = ["CategoryModelFactory", "build_category_model_factory"]
