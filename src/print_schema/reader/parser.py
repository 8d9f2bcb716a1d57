"""Streaming reader that builds Print Schema document trees.

The reader consumes lxml start/end events in a single forward pass. Every
open Print Schema Framework element owns a frame on an explicit stack; a
frame collects the children built for it and is turned into a tree node when
its element closes, so the nesting and pairing rules of the schema are
checked as the document streams by:

    Property        roots, ParameterDef, Feature, Option, ScoredProperty, Property
    ScoredProperty  Option, ScoredProperty
    Option          Feature
    Feature         roots, Feature
    ParameterDef    PrintCapabilities
    ParameterInit   PrintTicket
    ParameterRef    ScoredProperty
    Value           Property, ScoredProperty, ParameterInit

Elements from other namespaces are skipped; Print Schema elements nested in
them attach to the nearest open Print Schema element.
"""

import io
import re
import time
from dataclasses import dataclass, field
from typing import (
    Callable,
    Dict,
    FrozenSet,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from lxml import etree

from print_schema.document.names import NS_PSF, NS_XSD, NS_XSI, QualifiedName, resolve_qname
from print_schema.document.nodes import (
    DocumentKind,
    ParameterDef,
    ParameterInit,
    PrintCapabilitiesDocument,
    PrintFeature,
    PrintFeatureOption,
    PrintSchemaDocument,
    PrintTicketDocument,
    Property,
    ScoredProperty,
)
from print_schema.document.values import (
    INT32_MAX,
    INT32_MIN,
    IntegerValue,
    PropertyValue,
    QNameValue,
    StringValue,
    UnknownValue,
)
from print_schema.shared import ReaderConfig, get_logger

from .errors import (
    InvalidPrintSchemaError,
    InvalidXmlError,
    SourcePosition,
    WrongDocumentTypeError,
)

InputType = Union[bytes, bytearray, memoryview, str]

_PSF_PREFIX = f"{{{NS_PSF}}}"
_XSI_TYPE = f"{{{NS_XSI}}}type"
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_ROOTS: Dict[str, DocumentKind] = {kind.value: kind for kind in DocumentKind}
_ANY_ROOT = frozenset(_ROOTS)

_ALLOWED_PARENTS: Dict[str, FrozenSet[str]] = {
    "Property": _ANY_ROOT | {
        "ParameterDef", "Feature", "Option", "ScoredProperty", "Property",
    },
    "ScoredProperty": frozenset({"Option", "ScoredProperty"}),
    "Option": frozenset({"Feature"}),
    "Feature": _ANY_ROOT | {"Feature"},
    "ParameterDef": frozenset({"PrintCapabilities"}),
    "ParameterInit": frozenset({"PrintTicket"}),
    "ParameterRef": frozenset({"ScoredProperty"}),
    "Value": frozenset({"Property", "ScoredProperty", "ParameterInit"}),
}

_NAME_REQUIRED = frozenset(
    {"ParameterDef", "ParameterInit", "Feature", "Property", "ParameterRef"}
)


@dataclass
class _Frame:
    """Pending state of one open Print Schema element."""

    element: str
    line: int
    name: Optional[QualifiedName] = None
    properties: List[Property] = field(default_factory=list)
    scored_properties: List[ScoredProperty] = field(default_factory=list)
    options: List[PrintFeatureOption] = field(default_factory=list)
    features: List[PrintFeature] = field(default_factory=list)
    parameter_defs: List[ParameterDef] = field(default_factory=list)
    parameter_inits: List[ParameterInit] = field(default_factory=list)
    value: Optional[PropertyValue] = None
    parameter_ref: Optional[QualifiedName] = None
    # Value elements only
    value_type: Optional[QualifiedName] = None
    nsmap: Mapping[Optional[str], str] = field(default_factory=dict)


def _psf_local_name(element: etree._Element) -> Optional[str]:
    tag = element.tag
    if isinstance(tag, str) and tag.startswith(_PSF_PREFIX):
        return tag[len(_PSF_PREFIX):]
    return None


def _value_text(element: etree._Element) -> str:
    """Concatenate character data below a Value element.

    CDATA sections are merged into the surrounding text by lxml. A run made of
    whitespace only collapses to one space.
    """
    return "".join(
        " " if piece.isspace() else piece for piece in element.itertext()
    )


class _TreeBuilder:
    """Per-document state. One instance parses exactly one document."""

    def __init__(self, config: ReaderConfig) -> None:
        self.config = config
        self.frames: List[_Frame] = []
        self.depth = 0
        self.last_line = 1
        self.skipped_elements = 0
        self._closers: Dict[str, Callable[[_Frame, etree._Element], None]] = {
            "Property": self._close_property,
            "ScoredProperty": self._close_scored_property,
            "Option": self._close_option,
            "Feature": self._close_feature,
            "ParameterDef": self._close_parameter_def,
            "ParameterInit": self._close_parameter_init,
            "ParameterRef": self._close_parameter_ref,
            "Value": self._close_value,
        }

    def error(self, line: Optional[int], reason: str) -> InvalidPrintSchemaError:
        return InvalidPrintSchemaError(SourcePosition(line or self.last_line), reason)

    # Event handlers

    def start(self, element: etree._Element) -> None:
        self.depth += 1
        if element.sourceline:
            self.last_line = element.sourceline
        if self.depth > self.config.max_depth:
            raise self.error(
                element.sourceline,
                f"Element nesting exceeds maximum depth {self.config.max_depth}",
            )

        local_name = _psf_local_name(element)
        if local_name is None:
            self.skipped_elements += 1
            return

        if local_name in _ROOTS:
            if self.depth != 1:
                raise self.error(
                    element.sourceline, f"{local_name} should be root element"
                )
            self.frames.append(_Frame(local_name, element.sourceline or 1))
            return

        allowed_parents = _ALLOWED_PARENTS.get(local_name)
        if allowed_parents is None:
            raise self.error(element.sourceline, f"Invalid element: psf:{local_name}")
        if not self.frames or self.frames[-1].element not in allowed_parents:
            raise self.error(element.sourceline, f"{local_name} cannot be here")

        frame = _Frame(local_name, element.sourceline or self.last_line)
        name_attribute = element.get("name")
        if name_attribute is not None and name_attribute.strip():
            frame.name = self._resolve(name_attribute, element.nsmap, frame.line)
        elif local_name in _NAME_REQUIRED:
            raise self.error(element.sourceline, f"{local_name} name not found")

        if local_name == "Value":
            type_attribute = element.get(_XSI_TYPE)
            if type_attribute is not None and type_attribute.strip():
                frame.value_type = self._resolve(type_attribute, element.nsmap, frame.line)
            frame.nsmap = dict(element.nsmap)

        self.frames.append(frame)

    def end(self, element: etree._Element) -> Optional[PrintSchemaDocument]:
        self.depth -= 1
        local_name = _psf_local_name(element)
        if local_name is None:
            return None

        if not self.frames or self.frames[-1].element != local_name:
            raise self.error(element.sourceline, f"Unbalanced element: psf:{local_name}")
        frame = self.frames.pop()

        if local_name in _ROOTS:
            return self._close_root(frame)
        self._closers[local_name](frame, element)
        return None

    # Node construction

    def _close_root(self, frame: _Frame) -> PrintSchemaDocument:
        if _ROOTS[frame.element] is DocumentKind.PRINT_CAPABILITIES:
            return PrintCapabilitiesDocument(
                properties=frame.properties,
                parameter_defs=frame.parameter_defs,
                features=frame.features,
            )
        return PrintTicketDocument(
            properties=frame.properties,
            parameter_inits=frame.parameter_inits,
            features=frame.features,
        )

    def _close_property(self, frame: _Frame, element: etree._Element) -> None:
        self.frames[-1].properties.append(
            Property(name=frame.name, value=frame.value, properties=frame.properties)
        )

    def _close_scored_property(self, frame: _Frame, element: etree._Element) -> None:
        self.frames[-1].scored_properties.append(
            ScoredProperty(
                name=frame.name,
                parameter_ref=frame.parameter_ref,
                value=frame.value,
                scored_properties=frame.scored_properties,
                properties=frame.properties,
            )
        )

    def _close_option(self, frame: _Frame, element: etree._Element) -> None:
        self.frames[-1].options.append(
            PrintFeatureOption(
                name=frame.name,
                scored_properties=frame.scored_properties,
                properties=frame.properties,
            )
        )

    def _close_feature(self, frame: _Frame, element: etree._Element) -> None:
        self.frames[-1].features.append(
            PrintFeature(
                name=frame.name,
                properties=frame.properties,
                options=frame.options,
                features=frame.features,
            )
        )

    def _close_parameter_def(self, frame: _Frame, element: etree._Element) -> None:
        self.frames[-1].parameter_defs.append(
            ParameterDef(name=frame.name, properties=frame.properties)
        )

    def _close_parameter_init(self, frame: _Frame, element: etree._Element) -> None:
        if frame.value is None:
            raise self.error(frame.line, "ParameterInit value not found")
        self.frames[-1].parameter_inits.append(
            ParameterInit(name=frame.name, value=frame.value)
        )

    def _close_parameter_ref(self, frame: _Frame, element: etree._Element) -> None:
        self.frames[-1].parameter_ref = frame.name

    def _close_value(self, frame: _Frame, element: etree._Element) -> None:
        if frame.value_type is None:
            # no xsi:type, nothing to decode
            return
        self.frames[-1].value = self._decode_value(frame, _value_text(element))

    def _decode_value(self, frame: _Frame, text: str) -> PropertyValue:
        value_type = frame.value_type
        if value_type.namespace == NS_XSD:
            if value_type.local_name == "string":
                return StringValue(text)
            if value_type.local_name == "integer":
                return IntegerValue(self._decode_integer(frame, text))
            if value_type.local_name == "QName":
                if not text.strip():
                    raise self.error(frame.line, "Invalid QName")
                return QNameValue(self._resolve(text, frame.nsmap, frame.line))
        return UnknownValue(value_type, text)

    def _resolve(
        self, value: str, nsmap: Mapping[Optional[str], str], line: int
    ) -> QualifiedName:
        try:
            name = resolve_qname(value, nsmap)
        except ValueError as e:
            raise self.error(line, "Invalid QName") from e
        if name.prefix and name.namespace is None:
            raise self.error(line, f"Invalid QName: unbound prefix {name.prefix}")
        return name

    def _decode_integer(self, frame: _Frame, text: str) -> int:
        candidate = text.strip()
        if not _INTEGER_PATTERN.fullmatch(candidate):
            raise self.error(frame.line, "Invalid integer")
        number = int(candidate)
        if not INT32_MIN <= number <= INT32_MAX:
            raise self.error(frame.line, "Invalid integer: out of range")
        return number


class PrintSchemaReader:
    """Parser for PrintCapabilities and PrintTicket documents.

    The reader keeps no state between calls; a single instance can be shared
    by threads parsing different documents.

    Examples:
        >>> reader = PrintSchemaReader()
        >>> capabilities = reader.read_capabilities(xml_bytes)
        >>> [feature.name for feature in capabilities.features]
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or ReaderConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "print_schema_reader")

    def read(self, data: InputType) -> PrintSchemaDocument:
        """Parse a document of either kind.

        Args:
            data: XML document as bytes (UTF-8 or UTF-16) or str

        Returns:
            PrintCapabilitiesDocument or PrintTicketDocument

        Raises:
            InvalidXmlError: The input is not well-formed XML
            InvalidPrintSchemaError: The input violates the Print Schema structure
        """
        start_time = time.perf_counter()
        source, encoding = self._prepare(data)
        self.logger.debug("Parsing print schema document", extra={"size": len(source)})

        builder = _TreeBuilder(self.config)
        events = etree.iterparse(
            io.BytesIO(source),
            events=("start", "end"),
            encoding=encoding,
            resolve_entities=False,
            load_dtd=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
            huge_tree=self.config.huge_tree,
        )
        try:
            for event, element in events:
                if event == "start":
                    builder.start(element)
                    continue
                document = builder.end(element)
                if document is not None:
                    self.logger.debug(
                        "Parsed print schema document",
                        extra={
                            "kind": document.kind.value,
                            "features": len(document.features),
                            "skipped_elements": builder.skipped_elements,
                            "processing_time_ms": (time.perf_counter() - start_time) * 1000,
                        },
                    )
                    return document
        except etree.XMLSyntaxError as e:
            position = None
            if e.lineno is not None:
                column = e.offset + 1 if e.offset is not None else None
                position = SourcePosition(e.lineno, column)
            raise InvalidXmlError(e.msg or str(e), position) from e

        raise builder.error(builder.last_line, "No valid root element found")

    def read_capabilities(self, data: InputType) -> PrintCapabilitiesDocument:
        """Parse a document that must be a PrintCapabilities document."""
        document = self.read(data)
        if not isinstance(document, PrintCapabilitiesDocument):
            raise WrongDocumentTypeError(DocumentKind.PRINT_CAPABILITIES, document.kind)
        return document

    def read_ticket(self, data: InputType) -> PrintTicketDocument:
        """Parse a document that must be a PrintTicket document."""
        document = self.read(data)
        if not isinstance(document, PrintTicketDocument):
            raise WrongDocumentTypeError(DocumentKind.PRINT_TICKET, document.kind)
        return document

    @staticmethod
    def _prepare(data: InputType) -> Tuple[bytes, Optional[str]]:
        if isinstance(data, str):
            # text is already decoded; ignore any encoding declaration
            return data.encode("utf-8"), "utf-8"
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data), None
        raise TypeError(
            f"Print schema input must be bytes or str, not {type(data).__name__}"
        )


def parse_document(
    data: InputType,
    config: Optional[ReaderConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintSchemaDocument:
    """Parse a PrintCapabilities or PrintTicket document."""
    return PrintSchemaReader(config, correlation_id).read(data)


def parse_capabilities(
    data: InputType,
    config: Optional[ReaderConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintCapabilitiesDocument:
    """Parse a document that must be a PrintCapabilities document."""
    return PrintSchemaReader(config, correlation_id).read_capabilities(data)


def parse_ticket(
    data: InputType,
    config: Optional[ReaderConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintTicketDocument:
    """Parse a document that must be a PrintTicket document."""
    return PrintSchemaReader(config, correlation_id).read_ticket(data)
