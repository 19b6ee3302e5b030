"""Supporting entities consumed by the admin factories.

These records are owned by other subsystems (stores, customers,
discounts, localization). The admin layer only reads them.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class DiscountType(IntEnum):
    """What a discount is applied to."""

    ASSIGNED_TO_ORDER_TOTAL = 1
    ASSIGNED_TO_SKUS = 2
    ASSIGNED_TO_CATEGORIES = 5
    ASSIGNED_TO_MANUFACTURERS = 6
    ASSIGNED_TO_SHIPPING = 10
    ASSIGNED_TO_ORDER_SUBTOTAL = 20


@dataclass
class Store:
    """A storefront served by the application."""

    id: int
    name: str
    url: str = ""
    display_order: int = 0


@dataclass
class Language:
    """A language content can be localized into."""

    id: int
    name: str
    language_culture: str = "en-US"
    published: bool = True
    display_order: int = 0


@dataclass
class CustomerRole:
    """A customer role used for access control lists."""

    id: int
    name: str
    system_name: str = ""
    active: bool = True


@dataclass
class Vendor:
    """A vendor selling products through the store."""

    id: int
    name: str
    email: str = ""
    active: bool = True
    deleted: bool = False
    display_order: int = 0


@dataclass
class Discount:
    """A discount definition.

    Attributes:
        id: Discount ID.
        name: Display name.
        discount_type: What the discount is applied to.
        start_date_utc: First moment the discount is valid (open if None).
        end_date_utc: Last moment the discount is valid (open if None).
    """

    id: int
    name: str
    discount_type: DiscountType = DiscountType.ASSIGNED_TO_ORDER_TOTAL
    discount_percentage: float = 0.0
    start_date_utc: datetime | None = None
    end_date_utc: datetime | None = None


# ============================================================================
# Mapping Records
# ============================================================================


@dataclass
class StoreMapping:
    """Limits an entity to a store."""

    entity_name: str
    entity_id: int
    store_id: int


@dataclass
class AclRecord:
    """Grants a customer role access to an entity."""

    entity_name: str
    entity_id: int
    customer_role_id: int


# ============================================================================
# Localization Records
# ============================================================================


@dataclass
class LocalizedProperty:
    """A translated value of one entity property."""

    entity_name: str
    entity_id: int
    language_id: int
    key: str
    value: str


@dataclass
class UrlRecord:
    """An SEO slug for an entity in a language (0 = standard)."""

    entity_name: str
    entity_id: int
    slug: str
    language_id: int = 0
    is_active: bool = True


@dataclass
class LocaleStringResource:
    """A named UI string in a language."""

    language_id: int
    name: str
    value: str
