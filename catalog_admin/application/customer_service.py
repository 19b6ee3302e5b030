"""Customer role and ACL services."""

from typing import Any

from catalog_admin.domain.entities import CustomerRole
from catalog_admin.infrastructure.memory import InMemoryDatabase, entity_name, get_database


class CustomerService:
    """Reads customer roles."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_customer_roles(self, show_hidden: bool = False) -> list[CustomerRole]:
        """Get customer roles ordered by name.

        Args:
            show_hidden: Include inactive roles.

        Returns:
            Customer roles.
        """
        roles = [r for r in self.db.customer_roles.values() if show_hidden or r.active]
        return sorted(roles, key=lambda r: (r.name, r.id))


class AclService:
    """Resolves customer-role access lists of entities that support them.

    An entity supports ACL when it has a ``subject_to_acl`` flag and an
    integer ``id``.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_customer_role_ids_with_access(self, entity: Any) -> list[int]:
        """Get IDs of customer roles granted access to the entity.

        Args:
            entity: Entity with ``subject_to_acl``.

        Returns:
            Role IDs, empty when the entity is not subject to ACL.
        """
        if entity is None:
            raise ValueError("entity is required")

        if not entity.subject_to_acl:
            return []

        name = entity_name(entity)
        return [
            r.customer_role_id
            for r in self.db.acl_records
            if r.entity_name == name and r.entity_id == entity.id
        ]
