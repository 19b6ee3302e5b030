"""Vendor service."""

from catalog_admin.domain.entities import Vendor
from catalog_admin.infrastructure.memory import InMemoryDatabase, get_database


class VendorService:
    """Reads vendors."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_vendors(self, show_hidden: bool = False) -> list[Vendor]:
        """Get vendors that are not deleted.

        Args:
            show_hidden: Include inactive vendors.

        Returns:
            Vendors ordered by display order, then name.
        """
        vendors = [
            v for v in self.db.vendors.values()
            if not v.deleted and (show_hidden or v.active)
        ]
        return sorted(vendors, key=lambda v: (v.display_order, v.name, v.id))
