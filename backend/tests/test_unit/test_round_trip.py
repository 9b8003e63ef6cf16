"""Test outbound/inbound round trips.

Request and response documents are deliberately asymmetric: requests carry
a list of ``{"name"|"propertyName": ..., "value": ...}`` entries, responses
carry a ``properties`` object keyed by name with ``{"value": ...}`` entries
and the identity at the root. ``as_response`` rewraps a request document
into the response shape so both directions can be checked together.
"""
from typing import Any, Dict
import pytest
from hubspot_client.converters.mappers.wire_conventions import convention_for, get_mapper
from hubspot_client.domain.entities import Company, Contact, Deal


def as_response(request_document: Dict[str, Any], name_key: str) -> Dict[str, Any]:
    """Rewrap an outbound request document as an inbound response document."""
    properties = {
        entry[name_key]: {"value": entry["value"]}
        for entry in request_document["properties"]
    }
    response: Dict[str, Any] = {"properties": properties}
    if "vid" in properties:
        response["vid"] = properties["vid"]["value"]
    return response


ENTITIES = [
    Contact(vid=7, email="a@b.com", first_name="Ada", zip="0150"),
    Company(company_id=12, name="Acme", is_public=True),
    Company(name="Quiet Co", is_public=False),
    Deal(name="Renewal", stage="closedwon", amount=1500.5, owner_id=77),
]


@pytest.mark.unit
@pytest.mark.outbound
@pytest.mark.inbound
class TestRoundTrip:
    """Test that non-null fields survive a round trip."""

    @pytest.mark.parametrize("uses_flat", [False, True])
    @pytest.mark.parametrize("entity", ENTITIES, ids=lambda e: type(e).__name__)
    def test_round_trip(self, converter, entity, uses_flat):
        """Test converting an entity out and back in."""
        request_document = converter.to_document(entity, uses_flat_wire_convention=uses_flat)
        name_key = get_mapper(convention_for(uses_flat)).name_key

        restored = converter.from_single_document(
            as_response(request_document, name_key), type(entity)
        )

        assert restored.model_dump() == entity.model_dump()
