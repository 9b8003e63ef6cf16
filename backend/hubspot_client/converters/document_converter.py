"""Conversion between HubSpot entities and generic documents.

Outbound, an entity becomes a ``{"properties": [...]}`` request document
whose entries follow the v1 or v2 wire convention. Inbound, single-entity
responses carry a ``properties`` object of ``{"<name>": {"value": ...}}``
entries plus a root ``vid``; list responses wrap such entities under a
pluralized key (``contacts``, ``companies``, ...) next to paging metadata.

Unknown keys and property entries without a ``value`` are skipped, since the
server may return fields the client model does not track. Missing structural
keys raise ``DocumentError`` subclasses.
"""
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar
from hubspot_client.converters.mappers.wire_conventions import convention_for, get_mapper
from hubspot_client.core.config import settings
from hubspot_client.core.errors import (
    MalformedListError,
    MissingListKeyError,
    MissingPropertiesError,
)
from hubspot_client.core.logging import get_logger
from hubspot_client.domain.document import Document, ValueKind, classify, get_document
from hubspot_client.domain.entities import HubSpotEntity
from hubspot_client.domain.schema import (
    describe,
    find_collection_field,
    find_identity_field,
    resolve_by_wire_name,
)

logger = get_logger(__name__)

E = TypeVar("E", bound=HubSpotEntity)


def stringify_value(value: Any) -> str:
    """Render a field value the way HubSpot expects property values."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _find_key(doc: Mapping[str, Any], key: str) -> Optional[str]:
    """Find ``key`` in ``doc``, falling back to a case-insensitive match."""
    if key in doc:
        return key
    lowered = key.lower()
    for candidate in doc:
        if candidate.lower() == lowered:
            return candidate
    return None


class DocumentConverter:
    """Maps entities to request documents and response documents to entities."""

    def to_document(
        self,
        entity: HubSpotEntity,
        uses_flat_wire_convention: Optional[bool] = None,
    ) -> Document:
        """Convert an entity to a request document.

        Args:
            entity: Entity to convert
            uses_flat_wire_convention: Emit v2 (flat named) entries instead of
                v1 property envelopes. Derived from the entity's route when None.

        Returns:
            ``{"properties": [entry, ...]}`` with one entry per non-null field,
            in field declaration order
        """
        descriptor = describe(type(entity))

        if uses_flat_wire_convention is None:
            route = getattr(entity, descriptor.route_field) if descriptor.route_field else ""
            uses_flat_wire_convention = settings.uses_flat_wire_convention(route)

        mapper = get_mapper(convention_for(uses_flat_wire_convention))
        logger.debug(
            "convert_to_document",
            schema=descriptor.schema_type.__name__,
            convention=mapper.convention.value,
            field_count=len(descriptor.fields),
        )

        entries: List[Dict[str, Any]] = []
        for field in descriptor.fields:
            if field.is_collection:
                continue
            value = getattr(entity, field.name)
            if value is None:
                continue
            entries.append(mapper.map(field.wire_name, stringify_value(value)))

        logger.debug("convert_to_document_complete", properties=len(entries))
        return {settings.properties_key: entries}

    def from_single_document(self, doc: Mapping[str, Any], schema_type: Type[E]) -> E:
        """Convert a single-entity response document into a new entity.

        Args:
            doc: Response document with a ``properties`` object
            schema_type: Entity schema to instantiate

        Returns:
            The populated entity

        Raises:
            MissingPropertiesError: If the document has no ``properties`` object
        """
        describe(schema_type)
        return self.populate_entity(doc, schema_type())

    def populate_entity(self, doc: Mapping[str, Any], entity: E) -> E:
        """Populate an existing entity from a single-entity document.

        The ``vid`` root key goes straight to the identity field; every other
        field is read from ``properties.<name>.value``. Nothing is assigned
        unless the document carries a ``properties`` object.

        Args:
            doc: Response document
            entity: Entity that receives the data

        Returns:
            The same entity, populated

        Raises:
            MissingPropertiesError: If the document has no ``properties`` object
        """
        descriptor = describe(type(entity))

        properties = get_document(doc, settings.properties_key)
        if properties is None:
            logger.error(
                "properties_missing",
                schema=descriptor.schema_type.__name__,
                keys=list(doc.keys()),
            )
            raise MissingPropertiesError(settings.properties_key)

        updates: Dict[str, Any] = {}

        identity = find_identity_field(descriptor)
        if identity is not None and settings.identity_key in doc:
            updates[identity.name] = doc[settings.identity_key]

        for key, entry in properties.items():
            if classify(entry) is not ValueKind.DOCUMENT or "value" not in entry:
                continue

            target = resolve_by_wire_name(descriptor, key)
            if target is None or target is identity or target.is_collection:
                continue

            logger.debug(
                "property_mapped",
                key=key,
                field=target.name,
                value=entry["value"],
            )
            updates[target.name] = entry["value"]

        # Validate every update on a copy so a coercion failure leaves entity untouched
        staged = entity.model_copy()
        for name, value in updates.items():
            setattr(staged, name, value)
        for name in updates:
            setattr(entity, name, getattr(staged, name))
        return entity

    def from_list_document(self, doc: Mapping[str, Any], container_type: Type[E]) -> E:
        """Convert a list response document into a container entity.

        The collection key is the wire name of the container's only
        list-of-entities field. Remaining top-level keys map raw onto the
        container's own fields (paging cursors, ``has-more`` flags).

        Args:
            doc: List response document
            container_type: Container schema with exactly one collection field

        Returns:
            The populated container

        Raises:
            NoCollectionFieldError: If the container has no collection field
            AmbiguousCollectionFieldError: If it has more than one
            MissingListKeyError: If the document lacks the collection key
            MalformedListError: If the collection is not a list of documents
            MissingPropertiesError: If an element has no ``properties`` object
        """
        collection = find_collection_field(container_type)
        descriptor = describe(container_type)

        list_key = _find_key(doc, collection.wire_name)
        if list_key is None:
            logger.error(
                "list_key_missing",
                schema=container_type.__name__,
                expected=collection.wire_name,
                keys=list(doc.keys()),
            )
            raise MissingListKeyError(collection.wire_name, container_type)

        items = doc[list_key]
        if classify(items) is not ValueKind.SEQUENCE:
            raise MalformedListError(list_key, f"got {classify(items).value}")

        entities = []
        for index, item in enumerate(items):
            kind = classify(item)
            if kind is not ValueKind.DOCUMENT:
                raise MalformedListError(list_key, f"element {index} is a {kind.value}")
            entities.append(self.populate_entity(item, collection.element_type()))

        container = container_type()
        setattr(container, collection.name, entities)

        for key, value in doc.items():
            if key == list_key:
                continue
            target = resolve_by_wire_name(descriptor, key)
            if target is None or target.is_collection:
                continue
            setattr(container, target.name, value)

        logger.debug(
            "convert_list_complete",
            schema=container_type.__name__,
            items=len(entities),
        )
        return container


# Global converter instance
document_converter = DocumentConverter()
