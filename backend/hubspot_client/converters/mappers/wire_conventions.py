"""Property mappers for the v1 and v2 wire conventions."""
from typing import Any, Dict
from hubspot_client.converters.mappers.base import BaseMapper, WireConvention


class PropertyEnvelopeMapper(BaseMapper):
    """Legacy property envelope: ``{"name": ..., "value": ...}``."""

    version = "v1"
    convention = WireConvention.PROPERTY_ENVELOPE
    name_key = "name"

    def map(self, wire_name: str, value: str) -> Dict[str, Any]:
        return {self.name_key: wire_name, "value": value}


class FlatNamedMapper(BaseMapper):
    """Flat named property: ``{"propertyName": ..., "value": ...}``."""

    version = "v2"
    convention = WireConvention.FLAT_NAMED
    name_key = "propertyName"

    def map(self, wire_name: str, value: str) -> Dict[str, Any]:
        return {self.name_key: wire_name, "value": value}


# Mapper registry, keyed by convention
MAPPER_REGISTRY: Dict[WireConvention, BaseMapper] = {
    WireConvention.PROPERTY_ENVELOPE: PropertyEnvelopeMapper(),
    WireConvention.FLAT_NAMED: FlatNamedMapper(),
}


def get_mapper(convention: WireConvention) -> BaseMapper:
    """Get mapper for a wire convention.

    Args:
        convention: Wire convention

    Returns:
        Mapper instance

    Raises:
        ValueError: If no mapper is registered for the convention
    """
    if convention not in MAPPER_REGISTRY:
        raise ValueError(f"Mapper for convention '{convention}' not found")

    return MAPPER_REGISTRY[convention]


def get_mapper_for_version(version: str) -> BaseMapper:
    """Get mapper by API version ("v1" or "v2").

    Args:
        version: API version

    Returns:
        Mapper instance

    Raises:
        ValueError: If version not found
    """
    for mapper in MAPPER_REGISTRY.values():
        if mapper.version == version.lower():
            return mapper

    raise ValueError(f"Mapper version '{version}' not found")


def convention_for(uses_flat_wire_convention: bool) -> WireConvention:
    """Select the wire convention from the per-route flag."""
    if uses_flat_wire_convention:
        return WireConvention.FLAT_NAMED
    return WireConvention.PROPERTY_ENVELOPE
