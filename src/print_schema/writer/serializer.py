"""Serialization of Print Schema document trees back to XML.

Writing happens in two passes. The first collects every namespace used by
names and value types into a ``NamespaceTable``; the second builds an lxml
element tree with all bindings declared on the root and serializes it. Child
elements are emitted in a fixed order per element kind, so equal documents
always produce identical bytes.
"""

import time
from typing import Dict, Iterator, Optional

from lxml import etree

from print_schema.document.names import NS_PSF, NS_XSI, STANDARD_PREFIXES, QualifiedName
from print_schema.document.nodes import (
    ParameterDef,
    ParameterInit,
    PrintCapabilitiesDocument,
    PrintFeature,
    PrintFeatureOption,
    PrintSchemaDocument,
    Property,
    ScoredProperty,
)
from print_schema.document.values import (
    IntegerValue,
    PropertyValue,
    QNameValue,
    StringValue,
    UnknownValue,
)
from print_schema.shared import WriterConfig, get_logger

SCHEMA_VERSION = "1"

_XSI_TYPE = f"{{{NS_XSI}}}type"


def _psf(local_name: str) -> str:
    return f"{{{NS_PSF}}}{local_name}"


class NamespaceTable:
    """Prefix bindings declared on the root of a serialized document.

    The four standard prefixes are always bound first. Other namespaces keep
    the prefix they were read with when it is still free, otherwise they reuse
    an existing prefix for the same URI or receive a generated ``nsN`` prefix.
    """

    def __init__(self) -> None:
        self._uri_by_prefix: Dict[str, str] = {}
        self._prefix_by_uri: Dict[str, str] = {}
        self._generated = 0
        for prefix, uri in STANDARD_PREFIXES:
            self._bind(prefix, uri)

    @classmethod
    def collect(cls, document: PrintSchemaDocument) -> "NamespaceTable":
        """Build the table for a document, visiting names in emission order."""
        table = cls()
        for name in _iter_names(document):
            table.add(name)
        return table

    @property
    def nsmap(self) -> Dict[str, str]:
        """Bindings in declaration order, suitable for lxml."""
        return dict(self._uri_by_prefix)

    def prefix_for(self, namespace: str) -> Optional[str]:
        return self._prefix_by_uri.get(namespace)

    def add(self, name: QualifiedName) -> None:
        """Make sure the namespace of ``name`` has a prefix."""
        if name.namespace is None or name.namespace in self._prefix_by_uri:
            return
        if name.prefix and name.prefix not in self._uri_by_prefix:
            self._bind(name.prefix, name.namespace)
            return
        self._bind(self._next_prefix(), name.namespace)

    def format(self, name: QualifiedName) -> str:
        """Lexical ``prefix:local`` form of a name under this table."""
        if name.namespace is None:
            return name.local_name
        prefix = self._prefix_by_uri.get(name.namespace)
        if prefix is None:
            raise KeyError(f"Namespace not collected: {name.namespace}")
        return f"{prefix}:{name.local_name}"

    def _bind(self, prefix: str, uri: str) -> None:
        self._uri_by_prefix[prefix] = uri
        self._prefix_by_uri.setdefault(uri, prefix)

    def _next_prefix(self) -> str:
        while True:
            prefix = f"ns{self._generated}"
            self._generated += 1
            if prefix not in self._uri_by_prefix:
                return prefix


# Name traversal, same order as element emission below


def _iter_names(document: PrintSchemaDocument) -> Iterator[QualifiedName]:
    for prop in document.properties:
        yield from _iter_property_names(prop)
    if isinstance(document, PrintCapabilitiesDocument):
        for parameter_def in document.parameter_defs:
            yield parameter_def.name
            for prop in parameter_def.properties:
                yield from _iter_property_names(prop)
    else:
        for parameter_init in document.parameter_inits:
            yield parameter_init.name
            yield from _iter_value_names(parameter_init.value)
    for feature in document.features:
        yield from _iter_feature_names(feature)


def _iter_feature_names(feature: PrintFeature) -> Iterator[QualifiedName]:
    yield feature.name
    for option in feature.options:
        if option.name is not None:
            yield option.name
        for scored_property in option.scored_properties:
            yield from _iter_scored_property_names(scored_property)
        for prop in option.properties:
            yield from _iter_property_names(prop)
    for prop in feature.properties:
        yield from _iter_property_names(prop)
    for sub_feature in feature.features:
        yield from _iter_feature_names(sub_feature)


def _iter_scored_property_names(
    scored_property: ScoredProperty,
) -> Iterator[QualifiedName]:
    if scored_property.name is not None:
        yield scored_property.name
    if scored_property.parameter_ref is not None:
        yield scored_property.parameter_ref
    yield from _iter_value_names(scored_property.value)
    for child in scored_property.scored_properties:
        yield from _iter_scored_property_names(child)
    for prop in scored_property.properties:
        yield from _iter_property_names(prop)


def _iter_property_names(prop: Property) -> Iterator[QualifiedName]:
    yield prop.name
    yield from _iter_value_names(prop.value)
    for child in prop.properties:
        yield from _iter_property_names(child)


def _iter_value_names(value: Optional[PropertyValue]) -> Iterator[QualifiedName]:
    if value is None:
        return
    yield value.xsi_type
    if isinstance(value, QNameValue):
        yield value.name


class PrintSchemaWriter:
    """Serializer for PrintCapabilities and PrintTicket trees.

    Examples:
        >>> writer = PrintSchemaWriter(WriterConfig(pretty_print=True))
        >>> xml_bytes = writer.write(document)
    """

    def __init__(
        self,
        config: Optional[WriterConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or WriterConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "print_schema_writer")

    def write(self, document: PrintSchemaDocument) -> bytes:
        """Serialize a document tree.

        Args:
            document: PrintCapabilitiesDocument or PrintTicketDocument

        Returns:
            Encoded XML bytes
        """
        start_time = time.perf_counter()
        root = self.to_element(document)
        result = etree.tostring(
            root,
            xml_declaration=self.config.xml_declaration,
            encoding=self.config.encoding,
            pretty_print=self.config.pretty_print,
        )
        self.logger.debug(
            "Serialized print schema document",
            extra={
                "kind": document.kind.value,
                "size": len(result),
                "processing_time_ms": (time.perf_counter() - start_time) * 1000,
            },
        )
        return result

    def to_element(self, document: PrintSchemaDocument) -> etree._Element:
        """Build the lxml element tree of a document without serializing it."""
        table = NamespaceTable.collect(document)
        root = etree.Element(_psf(document.kind.value), nsmap=table.nsmap)
        root.set("version", SCHEMA_VERSION)

        for prop in document.properties:
            self._append_property(root, prop, table)
        if isinstance(document, PrintCapabilitiesDocument):
            for parameter_def in document.parameter_defs:
                self._append_parameter_def(root, parameter_def, table)
        else:
            for parameter_init in document.parameter_inits:
                self._append_parameter_init(root, parameter_init, table)
        for feature in document.features:
            self._append_feature(root, feature, table)
        return root

    def _named_element(
        self,
        parent: etree._Element,
        local_name: str,
        name: Optional[QualifiedName],
        table: NamespaceTable,
    ) -> etree._Element:
        element = etree.SubElement(parent, _psf(local_name))
        if name is not None:
            element.set("name", table.format(name))
        return element

    def _append_feature(
        self, parent: etree._Element, feature: PrintFeature, table: NamespaceTable
    ) -> None:
        element = self._named_element(parent, "Feature", feature.name, table)
        for option in feature.options:
            self._append_option(element, option, table)
        for prop in feature.properties:
            self._append_property(element, prop, table)
        for sub_feature in feature.features:
            self._append_feature(element, sub_feature, table)

    def _append_option(
        self,
        parent: etree._Element,
        option: PrintFeatureOption,
        table: NamespaceTable,
    ) -> None:
        element = self._named_element(parent, "Option", option.name, table)
        for scored_property in option.scored_properties:
            self._append_scored_property(element, scored_property, table)
        for prop in option.properties:
            self._append_property(element, prop, table)

    def _append_scored_property(
        self,
        parent: etree._Element,
        scored_property: ScoredProperty,
        table: NamespaceTable,
    ) -> None:
        element = self._named_element(
            parent, "ScoredProperty", scored_property.name, table
        )
        if scored_property.parameter_ref is not None:
            self._named_element(element, "ParameterRef", scored_property.parameter_ref, table)
        if scored_property.value is not None:
            self._append_value(element, scored_property.value, table)
        for child in scored_property.scored_properties:
            self._append_scored_property(element, child, table)
        for prop in scored_property.properties:
            self._append_property(element, prop, table)

    def _append_property(
        self, parent: etree._Element, prop: Property, table: NamespaceTable
    ) -> None:
        element = self._named_element(parent, "Property", prop.name, table)
        if prop.value is not None:
            self._append_value(element, prop.value, table)
        for child in prop.properties:
            self._append_property(element, child, table)

    def _append_parameter_def(
        self,
        parent: etree._Element,
        parameter_def: ParameterDef,
        table: NamespaceTable,
    ) -> None:
        element = self._named_element(parent, "ParameterDef", parameter_def.name, table)
        for prop in parameter_def.properties:
            self._append_property(element, prop, table)

    def _append_parameter_init(
        self,
        parent: etree._Element,
        parameter_init: ParameterInit,
        table: NamespaceTable,
    ) -> None:
        element = self._named_element(parent, "ParameterInit", parameter_init.name, table)
        self._append_value(element, parameter_init.value, table)

    def _append_value(
        self, parent: etree._Element, value: PropertyValue, table: NamespaceTable
    ) -> None:
        element = etree.SubElement(parent, _psf("Value"))
        element.set(_XSI_TYPE, table.format(value.xsi_type))
        element.text = self._value_text(value, table)

    @staticmethod
    def _value_text(value: PropertyValue, table: NamespaceTable) -> str:
        if isinstance(value, StringValue):
            return value.text
        if isinstance(value, IntegerValue):
            return str(value.value)
        if isinstance(value, QNameValue):
            return table.format(value.name)
        if isinstance(value, UnknownValue):
            return value.text
        raise TypeError(f"Unsupported value type: {type(value).__name__}")


def to_xml(
    document: PrintSchemaDocument,
    config: Optional[WriterConfig] = None,
    correlation_id: Optional[str] = None,
) -> bytes:
    """Serialize a PrintCapabilities or PrintTicket document to XML bytes."""
    return PrintSchemaWriter(config, correlation_id).write(document)
