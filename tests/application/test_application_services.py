"""Tests for store, customer, discount, vendor and localization services."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog_admin.application.customer_service import AclService, CustomerService
from catalog_admin.application.discount_service import DiscountService
from catalog_admin.application.localization_service import LanguageService, LocalizationService
from catalog_admin.application.store_service import StoreMappingService, StoreService
from catalog_admin.application.vendor_service import VendorService
from catalog_admin.domain.entities import Discount, DiscountType, Language
from catalog_admin.infrastructure.memory import InMemoryDatabase


class TestStoreServices:
    """Tests for StoreService and StoreMappingService."""

    def test_stores_by_display_order(self, catalog_db: InMemoryDatabase) -> None:
        """Should list stores by display order."""
        stores = StoreService(catalog_db).get_all_stores()

        assert [s.name for s in stores] == ["Main store", "Outlet"]

    def test_store_by_id(self, catalog_db: InMemoryDatabase) -> None:
        """Should return None for store 0."""
        service = StoreService(catalog_db)

        assert service.get_store_by_id(2).name == "Outlet"
        assert service.get_store_by_id(0) is None

    def test_store_ids_with_access(self, catalog_db: InMemoryDatabase) -> None:
        """Should return mapped stores only for limited entities."""
        service = StoreMappingService(catalog_db)

        assert service.get_stores_ids_with_access(catalog_db.categories[6]) == [2]
        assert service.get_stores_ids_with_access(catalog_db.categories[1]) == []

    def test_authorize(self, catalog_db: InMemoryDatabase) -> None:
        """Should allow unlimited entities everywhere and limited ones in their stores."""
        service = StoreMappingService(catalog_db)
        gift_cards = catalog_db.categories[6]

        assert service.authorize(gift_cards, 2) is True
        assert service.authorize(gift_cards, 1) is False
        assert service.authorize(gift_cards, 0) is True
        assert service.authorize(catalog_db.categories[1], 1) is True
        assert service.authorize(None, 1) is False


class TestCustomerServices:
    """Tests for CustomerService and AclService."""

    def test_roles_hide_inactive(self, catalog_db: InMemoryDatabase) -> None:
        """Should skip inactive roles unless show_hidden is set."""
        service = CustomerService(catalog_db)

        assert [r.name for r in service.get_all_customer_roles()] == [
            "Administrators",
            "Registered",
        ]
        assert len(service.get_all_customer_roles(show_hidden=True)) == 3

    def test_role_ids_with_access(self, catalog_db: InMemoryDatabase) -> None:
        """Should return granted roles only for entities subject to ACL."""
        service = AclService(catalog_db)

        assert service.get_customer_role_ids_with_access(catalog_db.categories[1]) == [1, 2]
        assert service.get_customer_role_ids_with_access(catalog_db.categories[2]) == []


class TestDiscountService:
    """Tests for DiscountService."""

    def test_filters_by_type(self, catalog_db: InMemoryDatabase) -> None:
        """Should return only discounts of the requested type."""
        discounts = DiscountService(catalog_db).get_all_discounts(
            DiscountType.ASSIGNED_TO_CATEGORIES, show_hidden=True
        )

        assert [d.id for d in discounts] == [1, 3]

    def test_hides_expired_unless_show_hidden(self, catalog_db: InMemoryDatabase) -> None:
        """Should skip discounts outside their validity window."""
        discounts = DiscountService(catalog_db).get_all_discounts(
            DiscountType.ASSIGNED_TO_CATEGORIES
        )

        assert [d.id for d in discounts] == [1]

    def test_not_yet_started(self) -> None:
        """Should skip discounts that start in the future."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        db = InMemoryDatabase()
        db.add(Discount(id=1, name="Spring", start_date_utc=now + timedelta(days=60)))

        assert DiscountService(db).get_all_discounts(now=now) == []
        assert len(DiscountService(db).get_all_discounts(show_hidden=True, now=now)) == 1


class TestVendorService:
    """Tests for VendorService."""

    def test_hides_inactive(self, catalog_db: InMemoryDatabase) -> None:
        """Should skip inactive vendors unless show_hidden is set."""
        service = VendorService(catalog_db)

        assert [v.name for v in service.get_all_vendors()] == ["Vendor 1"]
        assert [v.name for v in service.get_all_vendors(show_hidden=True)] == [
            "Vendor 1",
            "Vendor 2",
        ]


class TestLocalizationService:
    """Tests for LanguageService and LocalizationService."""

    @pytest.fixture
    def localization(self, catalog_db: InMemoryDatabase) -> LocalizationService:
        """Create localization service over the test catalog."""
        return LocalizationService(catalog_db)

    def test_working_language(self, catalog_db: InMemoryDatabase) -> None:
        """Should use the first published language."""
        assert LanguageService(catalog_db).get_working_language_id() == 1

    def test_resource_lookup(self, localization: LocalizationService) -> None:
        """Should resolve resources case-insensitively per language."""
        assert localization.get_resource("admin.common.all") == "All"
        assert localization.get_resource("Admin.Common.All", language_id=2) == "Alle"

    def test_missing_resource_returns_name(self, localization: LocalizationService) -> None:
        """Should fall back to the resource name."""
        assert localization.get_resource("Admin.Unknown") == "Admin.Unknown"

    def test_localized_value(
        self, localization: LocalizationService, catalog_db: InMemoryDatabase
    ) -> None:
        """Should return the translated value or fall back to the default."""
        computers = catalog_db.categories[1]

        assert localization.get_localized(computers, "name", 2) == "Computer"
        assert localization.get_localized(computers, "name", 1) == "Computers"
        assert localization.get_localized(computers, "name", 1, False, False) is None

    def test_localized_needs_two_published_languages(
        self, localization: LocalizationService, catalog_db: InMemoryDatabase
    ) -> None:
        """Should not localize with a single published language unless told to."""
        catalog_db.languages[2].published = False
        computers = catalog_db.categories[1]

        assert localization.get_localized(computers, "name", 2) == "Computers"
        assert localization.get_localized(computers, "name", 2, False, False) == "Computer"

    def test_se_name(
        self, localization: LocalizationService, catalog_db: InMemoryDatabase
    ) -> None:
        """Should return the language slug or the standard slug."""
        computers = catalog_db.categories[1]

        assert localization.get_se_name(computers, 2) == "computer"
        assert localization.get_se_name(computers, 1) == "computers"
        assert localization.get_se_name(computers, 1, False, False) is None

    def test_unpublished_language_is_hidden(self, catalog_db: InMemoryDatabase) -> None:
        """Should list unpublished languages only with show_hidden."""
        catalog_db.add(Language(id=3, name="Français", published=False, display_order=2))
        service = LanguageService(catalog_db)

        assert [lang.id for lang in service.get_all_languages()] == [1, 2]
        assert [lang.id for lang in service.get_all_languages(show_hidden=True)] == [1, 2, 3]
