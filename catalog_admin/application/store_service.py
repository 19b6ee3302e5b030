"""Store and store-mapping services.

Read stores and resolve which stores an entity is limited to.
"""

from typing import Any

from catalog_admin.domain.entities import Store
from catalog_admin.infrastructure.memory import InMemoryDatabase, entity_name, get_database


class StoreService:
    """Reads configured stores."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_stores(self) -> list[Store]:
        """Get all stores ordered by display order, then ID."""
        return sorted(self.db.stores.values(), key=lambda s: (s.display_order, s.id))

    def get_store_by_id(self, store_id: int) -> Store | None:
        """Get store by ID (0 returns None)."""
        if store_id == 0:
            return None
        return self.db.stores.get(store_id)


class StoreMappingService:
    """Resolves store limitations of entities that support them.

    An entity supports store mapping when it has a ``limited_to_stores``
    flag and an integer ``id``.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_stores_ids_with_access(self, entity: Any) -> list[int]:
        """Get IDs of stores the entity is mapped to.

        Args:
            entity: Entity with ``limited_to_stores``.

        Returns:
            Store IDs, empty when the entity is not limited to stores.
        """
        if entity is None:
            raise ValueError("entity is required")

        if not entity.limited_to_stores:
            return []

        name = entity_name(entity)
        return [
            m.store_id
            for m in self.db.store_mappings
            if m.entity_name == name and m.entity_id == entity.id
        ]

    def authorize(self, entity: Any, store_id: int) -> bool:
        """Check whether the entity is visible in a store.

        Args:
            entity: Entity with ``limited_to_stores``.
            store_id: Store to check, 0 means any store.

        Returns:
            True when the entity may be shown in the store.
        """
        if entity is None:
            return False

        if store_id == 0 or not entity.limited_to_stores:
            return True

        return store_id in self.get_stores_ids_with_access(entity)
