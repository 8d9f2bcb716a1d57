"""Print Schema document model.

Reads, writes and queries PrintCapabilities and PrintTicket documents of the
Print Schema (the XML vocabulary printers use to describe what they support
and what a job requests).

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_file(), parse_capabilities(), parse_ticket(), to_xml()
- Level 2: Configured parser - PrintSchemaParser class
- Level 3: Typed queries - PrintCapabilities, feature option packs, PrintTicketBuilder
"""

__version__ = "0.1.0"
__author__ = "Print Schema Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Advanced configuration
from .api import (
    PrintSchemaParser,
    parse,
    parse_capabilities,
    parse_file,
    parse_ticket,
    to_xml,
)

# Document model
from .document import (
    IntegerValue,
    ParameterDef,
    ParameterInit,
    PrintCapabilitiesDocument,
    PrintFeature,
    PrintFeatureOption,
    PrintTicketDocument,
    Property,
    PropertyValue,
    QNameValue,
    QualifiedName,
    ScoredProperty,
    StringValue,
    UnknownValue,
)

# Errors
from .reader import (
    InvalidPrintSchemaError,
    InvalidXmlError,
    ParsePrintSchemaError,
    PrintSchemaError,
    WrongDocumentTypeError,
)

# Configuration classes for advanced usage
from .shared import PrintSchemaConfig, ReaderConfig, WriterConfig

# Level 3: Typed queries
from .ticket import (
    DocumentMergeProvider,
    PageMediaSize,
    PredefinedMediaName,
    PrintCapabilities,
    PrintTicket,
    PrintTicketBuilder,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "parse",
    "parse_file",
    "parse_capabilities",
    "parse_ticket",
    "to_xml",

    # Level 2: Advanced parser class
    "PrintSchemaParser",

    # Document model
    "IntegerValue",
    "ParameterDef",
    "ParameterInit",
    "PrintCapabilitiesDocument",
    "PrintFeature",
    "PrintFeatureOption",
    "PrintTicketDocument",
    "Property",
    "PropertyValue",
    "QNameValue",
    "QualifiedName",
    "ScoredProperty",
    "StringValue",
    "UnknownValue",

    # Errors
    "InvalidPrintSchemaError",
    "InvalidXmlError",
    "ParsePrintSchemaError",
    "PrintSchemaError",
    "WrongDocumentTypeError",

    # Configuration classes
    "PrintSchemaConfig",
    "ReaderConfig",
    "WriterConfig",

    # Level 3: Typed queries
    "DocumentMergeProvider",
    "PageMediaSize",
    "PredefinedMediaName",
    "PrintCapabilities",
    "PrintTicket",
    "PrintTicketBuilder",
]
