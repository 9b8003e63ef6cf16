"""Test wire convention mapper versioning."""
import pytest
from hubspot_client.converters.mappers.base import WireConvention
from hubspot_client.converters.mappers.wire_conventions import (
    FlatNamedMapper,
    MAPPER_REGISTRY,
    PropertyEnvelopeMapper,
    convention_for,
    get_mapper,
    get_mapper_for_version,
)


@pytest.mark.unit
@pytest.mark.outbound
class TestMapperVersioning:
    """Test mapper versioning and registry."""

    def test_mapper_has_version(self):
        """Test that mappers carry their API version."""
        assert PropertyEnvelopeMapper().version == "v1"
        assert FlatNamedMapper().version == "v2"

    def test_get_mapper_by_convention(self):
        """Test getting mapper by wire convention."""
        mapper = get_mapper(WireConvention.FLAT_NAMED)

        assert isinstance(mapper, FlatNamedMapper)
        assert mapper.convention is WireConvention.FLAT_NAMED

    def test_get_mapper_by_version(self):
        """Test getting mapper by API version."""
        assert isinstance(get_mapper_for_version("v1"), PropertyEnvelopeMapper)
        assert isinstance(get_mapper_for_version("V2"), FlatNamedMapper)

    def test_get_mapper_unknown_version_raises(self):
        """Test that unknown version raises ValueError."""
        with pytest.raises(ValueError) as exc:
            get_mapper_for_version("v99")

        assert "version" in str(exc.value).lower()
        assert "not found" in str(exc.value).lower()

    def test_get_mapper_unknown_convention_raises(self):
        """Test that an unregistered convention raises ValueError."""
        with pytest.raises(ValueError) as exc:
            get_mapper("xml")

        assert "not found" in str(exc.value).lower()

    def test_mapper_registry_structure(self):
        """Test that every convention has a registered mapper."""
        assert set(MAPPER_REGISTRY) == set(WireConvention)
        for convention, mapper in MAPPER_REGISTRY.items():
            assert mapper.convention is convention

    def test_convention_for_flag(self):
        """Test selecting the convention from the per-route flag."""
        assert convention_for(True) is WireConvention.FLAT_NAMED
        assert convention_for(False) is WireConvention.PROPERTY_ENVELOPE


@pytest.mark.unit
@pytest.mark.outbound
class TestMapperTransformation:
    """Test single property entries."""

    def test_property_envelope_entry(self):
        """Test the legacy v1 entry shape."""
        entry = PropertyEnvelopeMapper().map("email", "a@b.com")

        assert entry == {"name": "email", "value": "a@b.com"}

    def test_flat_named_entry(self):
        """Test the v2 entry shape."""
        entry = FlatNamedMapper().map("email", "a@b.com")

        assert entry == {"propertyName": "email", "value": "a@b.com"}
