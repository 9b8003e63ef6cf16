"""Mapping errors raised by the schema introspector and document converter.

Schema errors point at a programming error in the entity model. Document
errors point at a response whose shape does not match the model it is
decoded into. Both derive from ``ValueError``.
"""
from typing import Optional


class HubSpotMappingError(ValueError):
    """Base class for conversion errors."""


# ============================================================================
# Schema errors
# ============================================================================

class SchemaError(HubSpotMappingError):
    """Entity schema cannot be used for the requested conversion."""

    def __init__(self, schema_type: type, message: str):
        self.schema_type = schema_type
        super().__init__(f"{getattr(schema_type, '__name__', schema_type)}: {message}")


class UninspectableSchemaError(SchemaError):
    """Schema type has no usable fields or an ambiguous route metadata field."""


class NoCollectionFieldError(SchemaError):
    """Container schema has no field holding a list of entities."""

    def __init__(self, schema_type: type):
        super().__init__(
            schema_type,
            "unable to locate a field typed as a list of HubSpot entities",
        )


class AmbiguousCollectionFieldError(SchemaError):
    """Container schema has more than one field holding a list of entities."""

    def __init__(self, schema_type: type, field_names: list):
        self.field_names = list(field_names)
        super().__init__(
            schema_type,
            f"more than one collection field: {', '.join(self.field_names)}",
        )


# ============================================================================
# Document errors
# ============================================================================

class DocumentError(HubSpotMappingError):
    """Document shape does not match what the schema expects."""


class MissingPropertiesError(DocumentError):
    """Single-entity document has no ``properties`` object."""

    def __init__(self, key: str = "properties"):
        self.key = key
        super().__init__(f"The given document does not contain a '{key}' object")


class MissingListKeyError(DocumentError):
    """List document lacks the key holding the collection."""

    def __init__(self, key: str, schema_type: Optional[type] = None):
        self.key = key
        self.schema_type = schema_type
        super().__init__(
            f"The document does not contain a property of name '{key}' "
            "which is required to decode the list response"
        )


class MalformedListError(DocumentError):
    """Collection key holds something other than a list of documents."""

    def __init__(self, key: str, detail: str):
        self.key = key
        super().__init__(f"The '{key}' property is not a list of documents: {detail}")
