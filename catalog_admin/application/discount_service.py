"""Discount service."""

from datetime import datetime, timezone

from catalog_admin.domain.entities import Discount, DiscountType
from catalog_admin.infrastructure.memory import InMemoryDatabase, get_database


class DiscountService:
    """Reads discount definitions."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_discounts(
        self,
        discount_type: DiscountType | None = None,
        show_hidden: bool = False,
        now: datetime | None = None,
    ) -> list[Discount]:
        """Get discounts, optionally of one type.

        Args:
            discount_type: Only return discounts of this type.
            show_hidden: Include discounts outside their validity window.
            now: Reference time for the validity window (defaults to now, UTC).

        Returns:
            Discounts ordered by name, then ID.
        """
        now = now or datetime.now(timezone.utc)

        discounts = []
        for discount in self.db.discounts.values():
            if discount_type is not None and discount.discount_type != discount_type:
                continue
            if not show_hidden and not self._is_active(discount, now):
                continue
            discounts.append(discount)

        return sorted(discounts, key=lambda d: (d.name, d.id))

    @staticmethod
    def _is_active(discount: Discount, now: datetime) -> bool:
        if discount.start_date_utc is not None and discount.start_date_utc > now:
            return False
        if discount.end_date_utc is not None and discount.end_date_utc < now:
            return False
        return True
