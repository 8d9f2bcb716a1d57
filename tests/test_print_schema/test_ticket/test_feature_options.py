"""Tests for orientation, resolution, duplex and output color packs."""

import pytest

from print_schema.document.names import psk_name
from print_schema.document.nodes import (
    ParameterInit,
    PrintFeature,
    PrintFeatureOption,
    PrintTicketDocument,
    ScoredProperty,
)
from print_schema.document.values import IntegerValue, QNameValue, StringValue
from print_schema.ticket import (
    DocumentDuplex,
    FeatureOptionPack,
    JobDuplex,
    PageOrientation,
    PageOutputColor,
    PageResolution,
    PredefinedDuplexType,
    PredefinedPageOrientation,
    PredefinedPageOutputColor,
    PrintCapabilities,
    PrintTicket,
)


@pytest.fixture
def capabilities(capabilities_xml):
    return PrintCapabilities.from_xml(capabilities_xml)


class TestPacks:
    """Test suite for the concrete feature option packs."""

    def test_orientations(self, capabilities):
        """Orientation options map to their keywords."""
        names = [o.as_predefined_name() for o in capabilities.page_orientations()]
        assert names == [PredefinedPageOrientation.Portrait, PredefinedPageOrientation.Landscape]

    def test_resolutions(self, capabilities):
        """Resolution reads ResolutionX and ResolutionY."""
        resolutions = list(capabilities.page_resolutions())
        assert [r.dpi() for r in resolutions] == [(300, 300), (600, 1200)]
        assert resolutions[0].as_predefined_name() is None

    def test_job_duplex(self, capabilities):
        """Job duplex options map to duplex keywords."""
        duplexes = list(capabilities.job_duplexes())
        assert [d.as_predefined_name() for d in duplexes] == [
            PredefinedDuplexType.OneSided,
            PredefinedDuplexType.TwoSidedLongEdge,
            PredefinedDuplexType.TwoSidedShortEdge,
        ]
        assert duplexes[1].scored_value("DuplexMode") == QNameValue(psk_name("Automatic"))

    def test_absent_feature(self, capabilities):
        """A feature the printer does not offer lists nothing."""
        assert list(capabilities.document_duplexes()) == []
        assert list(DocumentDuplex.list(capabilities)) == []

    def test_output_colors(self, capabilities):
        """Output color options map to their keywords."""
        colors = list(capabilities.page_output_colors())
        assert [c.as_predefined_name() for c in colors] == list(PredefinedPageOutputColor)
        assert colors[2].display_name() == "Black only"


class TestFeatureOptionPack:
    """Test suite for the pack base class."""

    def test_ticket_fragment(self):
        """A pack becomes a single-feature ticket with its parameters."""
        option = PrintFeatureOption(
            psk_name("Custom"),
            scored_properties=[ScoredProperty(psk_name("X"), parameter_ref=psk_name("P"))],
        )
        parameters = [ParameterInit(psk_name("P"), IntegerValue(5))]
        pack = JobDuplex(option, parameters)

        document = pack.to_print_ticket_document()
        assert document == PrintTicketDocument(
            parameter_inits=parameters,
            features=[PrintFeature(psk_name("JobDuplexAllDocumentsContiguously"), options=[option])],
        )
        ticket = pack.to_print_ticket()
        assert isinstance(ticket, PrintTicket)
        assert ticket.document() == document

    def test_scored_integer_ignores_other_types(self):
        """Non-integer values read as zero."""
        option = PrintFeatureOption(
            scored_properties=[ScoredProperty(psk_name("ResolutionX"), value=StringValue("300"))]
        )
        assert PageResolution(option).dpi() == (0, 0)

    def test_equality(self):
        """Packs compare by type, option and parameters."""
        option = PrintFeatureOption(psk_name("Color"))
        assert PageOutputColor(option) == PageOutputColor(option)
        assert PageOutputColor(option) != PageOrientation(option)
        assert "PageOutputColor(option=psk:Color" in repr(PageOutputColor(option))

    def test_base_without_keywords(self):
        """The base class has no keyword enum."""
        assert FeatureOptionPack(PrintFeatureOption(psk_name("A4"))).as_predefined_name() is None
