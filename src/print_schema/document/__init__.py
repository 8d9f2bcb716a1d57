"""Document model of Print Schema capabilities and tickets.

Key Components:
    QualifiedName: Namespace-qualified name with cosmetic prefix
    PropertyValue: String, integer, QName or unknown-typed value
    PrintCapabilitiesDocument / PrintTicketDocument: Immutable document roots
    default_parameters_for / value_with: Parameter resolution helpers
"""

from .names import (
    NS_PSF,
    NS_PSK,
    NS_XSD,
    NS_XSI,
    STANDARD_PREFIXES,
    QualifiedName,
    psf_name,
    psk_name,
    resolve_qname,
    xsd_name,
)
from .nodes import (
    DocumentKind,
    HasProperties,
    HasScoredProperties,
    ParameterDef,
    ParameterInit,
    PrintCapabilitiesDocument,
    PrintFeature,
    PrintFeatureOption,
    PrintSchemaDocument,
    PrintTicketDocument,
    Property,
    ScoredProperty,
    get_property,
    get_scored_property,
    property_value,
)
from .parameters import (
    default_parameters_for,
    default_value,
    parameters_dependent,
    value_with,
)
from .values import (
    IntegerValue,
    PropertyValue,
    QNameValue,
    StringValue,
    UnknownValue,
)

__all__ = [
    "NS_PSF",
    "NS_PSK",
    "NS_XSD",
    "NS_XSI",
    "STANDARD_PREFIXES",
    "QualifiedName",
    "psf_name",
    "psk_name",
    "resolve_qname",
    "xsd_name",
    "DocumentKind",
    "HasProperties",
    "HasScoredProperties",
    "ParameterDef",
    "ParameterInit",
    "PrintCapabilitiesDocument",
    "PrintFeature",
    "PrintFeatureOption",
    "PrintSchemaDocument",
    "PrintTicketDocument",
    "Property",
    "ScoredProperty",
    "get_property",
    "get_scored_property",
    "property_value",
    "default_parameters_for",
    "default_value",
    "parameters_dependent",
    "value_with",
    "IntegerValue",
    "PropertyValue",
    "QNameValue",
    "StringValue",
    "UnknownValue",
]
