"""Base property mapper interface (wire convention versioning)."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict


class WireConvention(str, Enum):
    """On-the-wire shape of an outbound property."""

    PROPERTY_ENVELOPE = "property_envelope"  # legacy v1 routes
    FLAT_NAMED = "flat_named"  # v2 routes


class BaseMapper(ABC):
    """Base class for outbound property mappers."""

    version: str = "v1"
    convention: WireConvention = WireConvention.PROPERTY_ENVELOPE

    @abstractmethod
    def map(self, wire_name: str, value: str) -> Dict[str, Any]:
        """Map a single property to its wire entry.

        Args:
            wire_name: Serialized property name
            value: Stringified property value

        Returns:
            Property entry for the request document
        """
        pass
