"""Language and localization services.

Resolve UI resource strings, per-language property values and SEO
slugs. Language ID 0 denotes the standard (non-localized) value.
"""

from typing import Any

import structlog

from catalog_admin.domain.entities import Language
from catalog_admin.infrastructure.memory import InMemoryDatabase, entity_name, get_database

logger = structlog.get_logger()


class LanguageService:
    """Reads languages."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or get_database()

    def get_all_languages(self, show_hidden: bool = False) -> list[Language]:
        """Get languages ordered by display order.

        Args:
            show_hidden: Include unpublished languages.

        Returns:
            Languages.
        """
        languages = [
            lang for lang in self.db.languages.values() if show_hidden or lang.published
        ]
        return sorted(languages, key=lambda lang: (lang.display_order, lang.id))

    def get_working_language_id(self) -> int:
        """Get the ID of the first published language (0 if none)."""
        languages = self.get_all_languages()
        return languages[0].id if languages else 0


class LocalizationService:
    """Looks up localized strings and entity values."""

    def __init__(
        self,
        database: InMemoryDatabase | None = None,
        language_service: LanguageService | None = None,
    ) -> None:
        self.db = database or get_database()
        self.language_service = language_service or LanguageService(self.db)

    def get_resource(self, name: str, language_id: int | None = None) -> str:
        """Get a UI resource string.

        Args:
            name: Resource name (case-insensitive).
            language_id: Language to use, working language when None.

        Returns:
            Resource value, or the resource name when it is not defined.
        """
        if language_id is None:
            language_id = self.language_service.get_working_language_id()

        key = name.strip().lower()
        for resource in self.db.locale_string_resources:
            if resource.language_id == language_id and resource.name.lower() == key:
                return resource.value

        logger.debug("Resource string not found", resource=name, language_id=language_id)
        return name

    def get_localized(
        self,
        entity: Any,
        key: str,
        language_id: int,
        return_default_value: bool = True,
        ensure_two_published_languages: bool = True,
    ) -> Any:
        """Get the localized value of an entity property.

        Args:
            entity: Entity with an integer ``id``.
            key: Property name.
            language_id: Language to localize into.
            return_default_value: Fall back to the entity's own value.
            ensure_two_published_languages: Only localize when more than
                one language is published.

        Returns:
            Localized value, the default value, or None.
        """
        if entity is None:
            raise ValueError("entity is required")

        result = None
        if language_id > 0 and self._should_localize(ensure_two_published_languages):
            name = entity_name(entity)
            for prop in self.db.localized_properties:
                if (
                    prop.entity_name == name
                    and prop.entity_id == entity.id
                    and prop.language_id == language_id
                    and prop.key == key
                ):
                    if prop.value:
                        result = prop.value
                    break

        if result is None and return_default_value:
            result = getattr(entity, key)

        return result

    def get_se_name(
        self,
        entity: Any,
        language_id: int,
        return_default_value: bool = True,
        ensure_two_published_languages: bool = True,
    ) -> str | None:
        """Get the SEO slug of an entity.

        Args:
            entity: Entity with an integer ``id``.
            language_id: Language of the slug.
            return_default_value: Fall back to the standard slug.
            ensure_two_published_languages: Only localize when more than
                one language is published.

        Returns:
            Slug or None.
        """
        if entity is None:
            raise ValueError("entity is required")

        result = None
        if language_id != 0 and self._should_localize(ensure_two_published_languages):
            result = self._active_slug(entity, language_id)

        if result is None and return_default_value:
            result = self._active_slug(entity, 0)

        return result

    def _should_localize(self, ensure_two_published_languages: bool) -> bool:
        if not ensure_two_published_languages:
            return True
        return len(self.language_service.get_all_languages()) > 1

    def _active_slug(self, entity: Any, language_id: int) -> str | None:
        name = entity_name(entity)
        for record in self.db.url_records:
            if (
                record.entity_name == name
                and record.entity_id == entity.id
                and record.language_id == language_id
                and record.is_active
            ):
                return record.slug
        return None
