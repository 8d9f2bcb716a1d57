"""Tests for document tree nodes."""

import dataclasses

import pytest

from print_schema.document.names import psf_name, psk_name
from print_schema.document.nodes import (
    DocumentKind,
    PrintCapabilitiesDocument,
    PrintFeature,
    PrintFeatureOption,
    PrintTicketDocument,
    Property,
    ScoredProperty,
    get_property,
    get_scored_property,
    property_value,
)
from print_schema.document.values import IntegerValue, StringValue


class TestNodes:
    """Test suite for tree node construction."""

    def test_lists_are_frozen_to_tuples(self):
        """Child sequences are stored as tuples."""
        feature = PrintFeature(psk_name("PageMediaSize"), options=[PrintFeatureOption()])
        assert isinstance(feature.options, tuple)
        assert feature.properties == ()

    def test_nodes_are_immutable(self):
        """Nodes cannot be modified after construction."""
        prop = Property(psk_name("DisplayName"), StringValue("A4"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            prop.value = None

    def test_structural_equality(self):
        """Trees built from equal parts are equal and hashable."""
        first = PrintTicketDocument(features=[PrintFeature(psk_name("PageOrientation"))])
        second = PrintTicketDocument(features=(PrintFeature(psk_name("PageOrientation")),))
        assert first == second
        assert hash(first) == hash(second)

    def test_document_kinds(self):
        """Each root type reports its kind."""
        assert PrintCapabilitiesDocument().kind is DocumentKind.PRINT_CAPABILITIES
        assert PrintTicketDocument().kind is DocumentKind.PRINT_TICKET
        assert str(DocumentKind.PRINT_TICKET) == "PrintTicket"


class TestLookups:
    """Test suite for property lookups."""

    def test_get_property_returns_first_match(self):
        """The first direct child with the name wins."""
        option = PrintFeatureOption(
            psk_name("ISOA4"),
            properties=[
                Property(psk_name("DisplayName"), StringValue("first")),
                Property(psk_name("DisplayName"), StringValue("second")),
            ],
        )
        assert get_property(option, psk_name("DisplayName")).value == StringValue("first")
        assert get_property(option, psf_name("DisplayName")) is None

    def test_property_value(self):
        """property_value tolerates missing properties and values."""
        node = Property(psk_name("Outer"), properties=[Property(psk_name("Empty"))])
        assert property_value(node, psk_name("Empty")) is None
        assert property_value(node, psk_name("Missing")) is None

    def test_get_scored_property_skips_anonymous(self):
        """Unnamed scored properties never match a lookup."""
        option = PrintFeatureOption(
            scored_properties=[
                ScoredProperty(value=IntegerValue(1)),
                ScoredProperty(psk_name("MediaSizeWidth"), value=IntegerValue(2)),
            ]
        )
        found = get_scored_property(option, psk_name("MediaSizeWidth"))
        assert found.value == IntegerValue(2)
