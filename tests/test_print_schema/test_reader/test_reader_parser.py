"""Tests for the streaming Print Schema reader."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from print_schema.document.names import NS_XSD, QualifiedName, psf_name, psk_name, xsd_name
from print_schema.document.nodes import (
    DocumentKind,
    PrintCapabilitiesDocument,
    PrintTicketDocument,
    get_property,
    property_value,
)
from print_schema.document.values import IntegerValue, QNameValue, StringValue, UnknownValue
from print_schema.reader import (
    InvalidPrintSchemaError,
    InvalidXmlError,
    ParsePrintSchemaError,
    PrintSchemaReader,
    WrongDocumentTypeError,
    parse_capabilities,
    parse_document,
    parse_ticket,
)
from print_schema.shared import ReaderConfig

VENDOR_NS = "http://schemas.example.com/printing/vendor"


class TestCapabilitiesDocument:
    """Test suite for reading the capabilities fixture."""

    def test_top_level_structure(self, capabilities_document):
        """Root properties, parameter definitions and features are collected in order."""
        assert capabilities_document.kind is DocumentKind.PRINT_CAPABILITIES
        assert [p.name for p in capabilities_document.properties] == [
            psk_name("PageImageableSize"),
            QualifiedName("Density", VENDOR_NS),
        ]
        assert len(capabilities_document.parameter_defs) == 5
        assert [f.name.local_name for f in capabilities_document.features] == [
            "PageMediaSize",
            "PageOrientation",
            "PageResolution",
            "JobDuplexAllDocumentsContiguously",
            "PageOutputColor",
        ]

    def test_names_keep_prefix(self, capabilities_document):
        """Prefixes are recorded as spelled in the source."""
        feature = capabilities_document.features[0]
        assert feature.name.prefix == "psk"
        assert str(feature.options[2].name) == "ns0000:UserDefinedSize"

    def test_value_variants(self, capabilities_document):
        """String, integer, QName and unknown values are decoded."""
        copies = capabilities_document.parameter_defs[0]
        assert property_value(copies, psf_name("DataType")) == QNameValue(xsd_name("integer"))
        assert property_value(copies, psf_name("MaxValue")) == IntegerValue(999)
        assert property_value(copies, psf_name("UnitType")) == StringValue("copies")

        density = capabilities_document.properties[1]
        assert density.value == UnknownValue(QualifiedName("DensityLevel", VENDOR_NS), "high")

    def test_cdata_joins_text(self, capabilities_document):
        """CDATA sections and character data form one string."""
        letter = capabilities_document.features[0].options[1]
        assert property_value(letter, psk_name("DisplayName")) == StringValue("Letter (8.5 x 11)")

    def test_parameter_references(self, capabilities_document):
        """ParameterRef sets the reference of its scored property."""
        custom = capabilities_document.features[0].options[2]
        width, height = custom.scored_properties
        assert width.parameter_ref == psk_name("PageMediaSizeMediaSizeWidth")
        assert width.value is None
        assert height.parameter_ref == psk_name("PageMediaSizeMediaSizeHeight")

    def test_nested_properties(self, capabilities_document):
        """Properties nest inside properties."""
        imageable = capabilities_document.properties[0]
        area = get_property(imageable, psk_name("ImageableArea"))
        assert property_value(area, psk_name("ExtentHeight")) == IntegerValue(288534)

    def test_foreign_elements_are_skipped(self, capabilities_document):
        """Vendor elements outside the framework namespace leave no trace."""
        assert len(capabilities_document.properties) == 2


class TestTicketDocument:
    """Test suite for reading the ticket fixture."""

    def test_structure(self, ticket_document):
        """Parameter inits and features are collected."""
        assert ticket_document.kind is DocumentKind.PRINT_TICKET
        assert ticket_document.parameter_inits[0].name == psk_name("JobCopiesAllDocuments")
        assert ticket_document.parameter_inits[0].value == IntegerValue(2)
        assert ticket_document.features[1].options[0].name == psk_name("Landscape")

    def test_parse_document_dispatches_on_root(self, ticket_xml, capabilities_xml):
        """parse_document returns whichever root type it finds."""
        assert isinstance(parse_document(ticket_xml), PrintTicketDocument)
        assert isinstance(parse_document(capabilities_xml), PrintCapabilitiesDocument)


class TestDocumentType:
    """Test suite for document type checks."""

    def test_ticket_rejected_as_capabilities(self, ticket_xml):
        """A ticket is not accepted where capabilities are expected."""
        with pytest.raises(WrongDocumentTypeError) as exc_info:
            parse_capabilities(ticket_xml)
        assert exc_info.value.expected is DocumentKind.PRINT_CAPABILITIES
        assert exc_info.value.found is DocumentKind.PRINT_TICKET
        assert "expected PrintCapabilities but found PrintTicket" in str(exc_info.value)

    def test_capabilities_rejected_as_ticket(self, capabilities_xml):
        """Capabilities are not accepted where a ticket is expected."""
        with pytest.raises(WrongDocumentTypeError) as exc_info:
            parse_ticket(capabilities_xml)
        assert exc_info.value.expected is DocumentKind.PRINT_TICKET
        assert exc_info.value.found is DocumentKind.PRINT_CAPABILITIES


class TestStructuralErrors:
    """Test suite for nesting and pairing violations."""

    def test_parameter_def_in_ticket(self, make_ticket):
        """ParameterDef only belongs to capabilities."""
        with pytest.raises(InvalidPrintSchemaError, match="ParameterDef cannot be here"):
            parse_ticket(make_ticket('<psf:ParameterDef name="psk:A"/>'))

    def test_parameter_init_in_capabilities(self, make_capabilities):
        """ParameterInit only belongs to tickets."""
        body = (
            '<psf:ParameterInit name="psk:A">'
            '<psf:Value xsi:type="xsd:integer">1</psf:Value></psf:ParameterInit>'
        )
        with pytest.raises(InvalidPrintSchemaError, match="ParameterInit cannot be here"):
            parse_capabilities(make_capabilities(body))

    def test_nested_root(self, make_ticket):
        """A root element below depth one is rejected."""
        with pytest.raises(InvalidPrintSchemaError, match="PrintTicket should be root element"):
            parse_ticket(make_ticket("<psf:PrintTicket/>"))

    def test_unknown_framework_element(self, make_ticket):
        """Unknown names in the framework namespace are errors, not extensions."""
        with pytest.raises(InvalidPrintSchemaError, match="Invalid element: psf:Bogus"):
            parse_ticket(make_ticket("<psf:Bogus/>"))

    @pytest.mark.parametrize(
        "body, reason",
        [
            ('<psf:Option name="psk:A"/>', "Option cannot be here"),
            (
                '<psf:Feature name="psk:F"><psf:ScoredProperty name="psk:S"/></psf:Feature>',
                "ScoredProperty cannot be here",
            ),
            (
                '<psf:Feature name="psk:F"><psf:Option><psf:ParameterRef name="psk:P"/>'
                "</psf:Option></psf:Feature>",
                "ParameterRef cannot be here",
            ),
            (
                '<psf:Property name="psk:P"><psf:Value xsi:type="xsd:string">'
                '<psf:Property name="psk:Q"/></psf:Value></psf:Property>',
                "Property cannot be here",
            ),
            ('<psf:Value xsi:type="xsd:string">x</psf:Value>', "Value cannot be here"),
        ],
    )
    def test_misplaced_elements(self, make_ticket, body, reason):
        """Elements outside their allowed parents are rejected."""
        with pytest.raises(InvalidPrintSchemaError, match=reason):
            parse_ticket(make_ticket(body))

    @pytest.mark.parametrize("element", ["Feature", "Property"])
    def test_missing_mandatory_name(self, make_ticket, element):
        """Features and properties must be named."""
        with pytest.raises(InvalidPrintSchemaError, match=f"{element} name not found"):
            parse_ticket(make_ticket(f"<psf:{element}/>"))

    def test_parameter_init_without_value(self, make_ticket):
        """A ParameterInit must carry a value."""
        with pytest.raises(InvalidPrintSchemaError, match="ParameterInit value not found"):
            parse_ticket(make_ticket('<psf:ParameterInit name="psk:A"/>'))

    def test_error_reports_line(self, make_ticket):
        """Structural errors carry the line of the offending element."""
        with pytest.raises(InvalidPrintSchemaError) as exc_info:
            parse_ticket(make_ticket('\n\n<psf:ParameterDef name="psk:A"/>'))
        assert exc_info.value.position.line == 3
        assert exc_info.value.position.column is None
        assert "(at line 3)" in str(exc_info.value)

    def test_no_root(self):
        """A document without a Print Schema root is rejected."""
        with pytest.raises(InvalidPrintSchemaError, match="No valid root element found"):
            parse_document(b"<root><child/></root>")

    def test_max_depth(self, make_ticket):
        """Nesting deeper than configured is rejected."""
        body = '<psf:Property name="psk:A"><psf:Property name="psk:B">' \
               '<psf:Property name="psk:C"/></psf:Property></psf:Property>'
        reader = PrintSchemaReader(ReaderConfig(max_depth=3))
        with pytest.raises(InvalidPrintSchemaError, match="maximum depth 3"):
            reader.read(make_ticket(body))
        assert PrintSchemaReader(ReaderConfig(max_depth=4)).read(make_ticket(body))

    def test_foreign_wrapper_is_transparent(self, make_capabilities):
        """Framework elements inside a vendor element attach to the enclosing framework element."""
        body = (
            '<psf:Feature name="psk:F"><ns0000:Group>'
            '<psf:Option name="psk:O"/></ns0000:Group></psf:Feature>'
        )
        document = parse_capabilities(make_capabilities(body))
        assert document.features[0].options[0].name == psk_name("O")


class TestValueDecoding:
    """Test suite for Value element decoding."""

    def _value(self, make_ticket, markup):
        document = parse_ticket(make_ticket(f'<psf:Property name="psk:P">{markup}</psf:Property>'))
        return document.properties[0].value

    @pytest.mark.parametrize(
        "text, expected",
        [("42", 42), ("  -17\n", -17), ("+7", 7), ("2147483647", 2147483647)],
    )
    def test_integers(self, make_ticket, text, expected):
        """Integers allow a sign and surrounding whitespace."""
        markup = f'<psf:Value xsi:type="xsd:integer">{text}</psf:Value>'
        assert self._value(make_ticket, markup) == IntegerValue(expected)

    @pytest.mark.parametrize("text", ["12a", "", "1.5", "2147483648", "0x10"])
    def test_invalid_integers(self, make_ticket, text):
        """Anything but a 32-bit decimal integer is rejected."""
        markup = f'<psf:Value xsi:type="xsd:integer">{text}</psf:Value>'
        with pytest.raises(InvalidPrintSchemaError, match="Invalid integer"):
            self._value(make_ticket, markup)

    def test_whitespace_only_string(self, make_ticket):
        """A whitespace-only string collapses to a single space."""
        markup = '<psf:Value xsi:type="xsd:string">  \n  </psf:Value>'
        assert self._value(make_ticket, markup) == StringValue(" ")

    def test_string_is_not_trimmed(self, make_ticket):
        """Strings with content keep their whitespace."""
        markup = '<psf:Value xsi:type="xsd:string"> A4 </psf:Value>'
        assert self._value(make_ticket, markup) == StringValue(" A4 ")

    def test_qname_uses_scope_of_value(self, make_ticket):
        """QName values resolve against bindings in scope at the Value element."""
        markup = '<psf:Value xsi:type="xsd:QName" xmlns:x="urn:x">x:Thing</psf:Value>'
        assert self._value(make_ticket, markup) == QNameValue(QualifiedName("Thing", "urn:x"))

    @pytest.mark.parametrize(
        "markup",
        [
            '<psf:Value xsi:type="xsd:QName">psk:</psf:Value>',
            '<psf:Value xsi:type="xsd:QName">   </psf:Value>',
            '<psf:Value xsi:type="xsd:">1</psf:Value>',
            '<psf:Value xsi:type="xsd:QName">nowhere:Thing</psf:Value>',
            '<psf:Value xsi:type="nowhere:Type">1</psf:Value>',
        ],
    )
    def test_invalid_qnames(self, make_ticket, markup):
        """QNames with an empty local part or an unbound prefix are schema errors."""
        with pytest.raises(InvalidPrintSchemaError, match="Invalid QName"):
            self._value(make_ticket, markup)

    def test_xsi_type_with_other_prefix(self, make_ticket):
        """The XSD namespace is recognized under any prefix."""
        markup = f'<psf:Value xsi:type="s:integer" xmlns:s="{NS_XSD}">5</psf:Value>'
        assert self._value(make_ticket, markup) == IntegerValue(5)

    def test_value_without_type(self, make_ticket):
        """A Value without xsi:type leaves its parent without a value."""
        assert self._value(make_ticket, "<psf:Value>5</psf:Value>") is None

    def test_unknown_type(self, make_ticket):
        """Values of unknown types are kept verbatim."""
        markup = '<psf:Value xsi:type="ns0000:Bar" >baz</psf:Value>'
        assert self._value(make_ticket, markup) == UnknownValue(
            QualifiedName("Bar", VENDOR_NS), "baz"
        )


class TestInput:
    """Test suite for input handling."""

    def test_malformed_xml(self):
        """Malformed XML raises InvalidXmlError with a position."""
        with pytest.raises(InvalidXmlError) as exc_info:
            parse_document(b"<psf:PrintTicket>\n<unclosed>")
        assert exc_info.value.position is not None
        assert str(exc_info.value).startswith("Invalid xml:")

    def test_empty_input(self):
        """Empty input is not XML."""
        with pytest.raises(InvalidXmlError):
            parse_document(b"")

    def test_error_hierarchy(self):
        """Every reader error is a ParsePrintSchemaError."""
        assert issubclass(InvalidXmlError, ParsePrintSchemaError)
        assert issubclass(InvalidPrintSchemaError, ParsePrintSchemaError)
        assert issubclass(WrongDocumentTypeError, ParsePrintSchemaError)

    def test_text_input(self, ticket_xml):
        """Text input ignores the declared encoding."""
        text = ticket_xml.decode("utf-8").replace('encoding="UTF-8"', 'encoding="UTF-16"')
        assert parse_ticket(text) == parse_ticket(ticket_xml)

    def test_utf16_input(self, make_ticket):
        """UTF-16 encoded bytes with a byte order mark are accepted."""
        utf8 = make_ticket('<psf:Property name="psk:P"><psf:Value xsi:type="xsd:string">'
                           "été</psf:Value></psf:Property>")
        utf16 = utf8.decode("utf-8").encode("utf-16")
        document = parse_ticket(utf16)
        assert document.properties[0].value == StringValue("été")
        assert document == parse_ticket(utf8)

    def test_unsupported_input_type(self):
        """Only bytes and str are accepted."""
        with pytest.raises(TypeError):
            parse_document(42)

    def test_concurrent_parsing(self, capabilities_xml):
        """One reader can parse on several threads at once."""
        reader = PrintSchemaReader()
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(reader.read, [capabilities_xml] * 8))
        assert all(result == results[0] for result in results)
