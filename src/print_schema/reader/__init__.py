"""Streaming reader for PrintCapabilities and PrintTicket documents.

Key Components:
    PrintSchemaReader: Reusable reader bound to a ReaderConfig
    parse_document / parse_capabilities / parse_ticket: One-shot helpers
    PrintSchemaError: Root of the error hierarchy
"""

from .errors import (
    InvalidPrintSchemaError,
    InvalidXmlError,
    ParsePrintSchemaError,
    PrintSchemaError,
    SourcePosition,
    WrongDocumentTypeError,
)
from .parser import (
    PrintSchemaReader,
    parse_capabilities,
    parse_document,
    parse_ticket,
)

__all__ = [
    "InvalidPrintSchemaError",
    "InvalidXmlError",
    "ParsePrintSchemaError",
    "PrintSchemaError",
    "SourcePosition",
    "WrongDocumentTypeError",
    "PrintSchemaReader",
    "parse_capabilities",
    "parse_document",
    "parse_ticket",
]
