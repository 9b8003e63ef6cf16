"""Entity schema introspection.

Derives the mapping contract of a ``HubSpotEntity`` subclass from its
pydantic field definitions: which fields are mapped, what each one is
called on the wire, and which field (if any) holds a list of sub-entities.
Descriptors are immutable and cached per schema type.
"""
import types
import typing
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping, Optional, Tuple, Type
from hubspot_client.core.config import settings
from hubspot_client.core.errors import (
    AmbiguousCollectionFieldError,
    NoCollectionFieldError,
    UninspectableSchemaError,
)
from hubspot_client.core.logging import get_logger
from hubspot_client.domain.entities import HubSpotEntity, RouteMetadata

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """A mapped field of an entity schema."""
    name: str
    wire_name: str
    annotation: Any
    element_type: Optional[Type[HubSpotEntity]] = None  # set on collection fields

    @property
    def is_collection(self) -> bool:
        return self.element_type is not None


@dataclass(frozen=True)
class SchemaDescriptor:
    """Shape of an entity schema, minus its route metadata field."""
    schema_type: Type[HubSpotEntity]
    fields: Tuple[FieldDescriptor, ...]
    route_field: Optional[str] = None
    by_wire_name: Mapping[str, FieldDescriptor] = field(
        default_factory=lambda: types.MappingProxyType({}), repr=False
    )

    @property
    def collection_fields(self) -> Tuple[FieldDescriptor, ...]:
        return tuple(f for f in self.fields if f.is_collection)


def _entity_element_type(annotation: Any) -> Optional[Type[HubSpotEntity]]:
    """Return X when annotation is List[X] (or Optional[List[X]]) with X an entity."""
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Union or origin is getattr(types, "UnionType", None):
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1:
            return _entity_element_type(non_none[0])
        return None

    if origin is list and len(args) == 1:
        element = args[0]
        if isinstance(element, type) and issubclass(element, HubSpotEntity):
            return element
    return None


def describe(schema_type: Type[HubSpotEntity]) -> SchemaDescriptor:
    """Describe the mapped fields of a schema type.

    Args:
        schema_type: HubSpotEntity subclass

    Returns:
        Immutable schema descriptor, in field declaration order

    Raises:
        UninspectableSchemaError: If the type is not an entity schema, has no
            mapped fields, or marks more than one field as route metadata
    """
    if not (isinstance(schema_type, type) and issubclass(schema_type, HubSpotEntity)):
        raise UninspectableSchemaError(schema_type, "not a HubSpotEntity subclass")
    return _describe(schema_type)


@lru_cache(maxsize=None)
def _describe(schema_type: Type[HubSpotEntity]) -> SchemaDescriptor:
    route_fields = []
    fields = []
    for name, info in schema_type.model_fields.items():
        if any(isinstance(m, RouteMetadata) for m in info.metadata):
            route_fields.append(name)
            continue
        fields.append(
            FieldDescriptor(
                name=name,
                wire_name=info.alias or name,
                annotation=info.annotation,
                element_type=_entity_element_type(info.annotation),
            )
        )

    if len(route_fields) > 1:
        raise UninspectableSchemaError(
            schema_type,
            f"more than one route metadata field: {', '.join(route_fields)}",
        )
    if not fields:
        raise UninspectableSchemaError(schema_type, "no mapped fields")

    # First declaration wins when two fields share a wire name ignoring case
    by_wire_name = {}
    for f in fields:
        by_wire_name.setdefault(f.wire_name.lower(), f)

    descriptor = SchemaDescriptor(
        schema_type=schema_type,
        fields=tuple(fields),
        route_field=route_fields[0] if route_fields else None,
        by_wire_name=types.MappingProxyType(by_wire_name),
    )
    logger.debug(
        "schema_described",
        schema=schema_type.__name__,
        fields=[f.name for f in fields],
    )
    return descriptor


def find_collection_field(schema_type: Type[HubSpotEntity]) -> FieldDescriptor:
    """Locate the field holding the list of sub-entities.

    Args:
        schema_type: List-response container schema

    Returns:
        The collection field descriptor

    Raises:
        NoCollectionFieldError: If no field is a list of entities
        AmbiguousCollectionFieldError: If more than one field is
    """
    candidates = describe(schema_type).collection_fields
    if not candidates:
        logger.error("collection_field_missing", schema=schema_type.__name__)
        raise NoCollectionFieldError(schema_type)
    if len(candidates) > 1:
        names = [f.name for f in candidates]
        logger.error(
            "collection_field_ambiguous", schema=schema_type.__name__, fields=names
        )
        raise AmbiguousCollectionFieldError(schema_type, names)
    return candidates[0]


def resolve_by_wire_name(
    descriptor: SchemaDescriptor,
    wire_name: str,
) -> Optional[FieldDescriptor]:
    """Case-insensitive lookup of a field by its wire name; None if unmatched."""
    return descriptor.by_wire_name.get(wire_name.lower())


def find_identity_field(descriptor: SchemaDescriptor) -> Optional[FieldDescriptor]:
    """Find the field receiving the document's root identity key (``vid``)."""
    key = settings.identity_key.lower()
    for f in descriptor.fields:
        if f.name.lower() == key or f.wire_name.lower() == key:
            return f
    return None
