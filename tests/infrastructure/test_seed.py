"""Tests for the in-memory store and its demo data."""

import pytest

from catalog_admin.admin.category_factory import build_category_model_factory
from catalog_admin.admin.models import CategorySearchModel
from catalog_admin.catalog.models import Category
from catalog_admin.infrastructure.memory import InMemoryDatabase, entity_name
from catalog_admin.infrastructure.seed import EMBEDDED_TAXONOMY, parse_taxonomy, seed_demo_data


class TestInMemoryDatabase:
    """Tests for InMemoryDatabase."""

    def test_add_routes_by_type(self) -> None:
        """Records land in the table for their type."""
        db = InMemoryDatabase()

        db.add(Category(id=3, name="Books"))

        assert db.categories[3].name == "Books"

    def test_add_unknown_type(self) -> None:
        """Unknown record types are rejected."""
        with pytest.raises(TypeError):
            InMemoryDatabase().add(object())

    def test_clear(self, catalog_db: InMemoryDatabase) -> None:
        """Clear empties every table."""
        catalog_db.clear()

        assert not catalog_db.categories
        assert not catalog_db.locale_string_resources

    def test_entity_name(self) -> None:
        """Entity name is the record type name."""
        assert entity_name(Category(id=1, name="Books")) == "Category"


class TestParseTaxonomy:
    """Tests for parse_taxonomy."""

    def test_resolves_parents(self) -> None:
        """Parents are resolved from the path."""
        categories = parse_taxonomy(
            ["1 - Computers", "2 - Computers > Notebooks", "3 - Computers > Notebooks > Gaming"]
        )

        assert [(c.id, c.parent_category_id) for c in categories] == [(1, 0), (2, 1), (3, 2)]
        assert categories[0].include_in_top_menu is True
        assert categories[1].include_in_top_menu is False

    def test_skips_malformed_lines(self) -> None:
        """Comments, blanks and lines without an ID are skipped."""
        categories = parse_taxonomy(["# comment", "", "x - Broken", "no separator", "5 - Books"])

        assert [c.id for c in categories] == [5]

    def test_se_name(self) -> None:
        """Slugs are lowercase with dashes."""
        (category,) = parse_taxonomy(["6 - Camera & photo"])

        assert category.se_name == "camera-photo"


class TestSeedDemoData:
    """Tests for seed_demo_data."""

    @pytest.fixture
    def demo_db(self) -> InMemoryDatabase:
        """Create a store with demo data."""
        db = InMemoryDatabase()
        seed_demo_data(db)
        return db

    def test_loads_taxonomy(self, demo_db: InMemoryDatabase) -> None:
        """All taxonomy categories are loaded."""
        assert len(demo_db.categories) == len(EMBEDDED_TAXONOMY.splitlines())
        assert len(demo_db.products) == len(demo_db.product_categories)

    def test_is_deterministic(self, demo_db: InMemoryDatabase) -> None:
        """The same seed gives the same catalog."""
        again = InMemoryDatabase()
        seed_demo_data(again)

        assert again.product_categories == demo_db.product_categories
        assert [p.price for p in again.products.values()] == [
            p.price for p in demo_db.products.values()
        ]

    def test_demo_catalog_renders(self, demo_db: InMemoryDatabase) -> None:
        """The category grid can be prepared over demo data."""
        factory = build_category_model_factory(demo_db)

        result = factory.prepare_category_list_model(CategorySearchModel(page_size=100))

        assert result.total == len(demo_db.categories)
        assert "Computers >> Desktops" in [row.breadcrumb for row in result.data]
