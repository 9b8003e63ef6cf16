"""Generic document tree exchanged with the JSON layer.

A document is a mapping of string keys to values, where every value is a
primitive, a nested document, or a list of documents. ``classify`` tags a
value with its shape so callers branch on a ``ValueKind`` rather than on
scattered ``isinstance`` checks.
"""
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

Primitive = Union[str, int, float, bool, None]
DocumentValue = Union[Primitive, "Document", List["Document"]]
Document = Dict[str, DocumentValue]


class ValueKind(str, Enum):
    """Shape of a document value."""

    PRIMITIVE = "primitive"
    DOCUMENT = "document"
    SEQUENCE = "sequence"


def classify(value: Any) -> ValueKind:
    """Tag a document value with its shape.

    Args:
        value: Value taken from a document

    Returns:
        The value's kind

    Raises:
        TypeError: If the value is none of the shapes a document may hold
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        return ValueKind.PRIMITIVE
    if isinstance(value, Mapping):
        return ValueKind.DOCUMENT
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    raise TypeError(f"Unsupported document value of type {type(value).__name__}")


def get_document(doc: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    """Return ``doc[key]`` if it holds a nested document, else None."""
    if key not in doc:
        return None
    value = doc[key]
    return value if classify(value) is ValueKind.DOCUMENT else None
