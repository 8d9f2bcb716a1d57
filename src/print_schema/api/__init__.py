"""Public API for parsing and serializing Print Schema documents."""

from .parser import (
    PrintSchemaParser,
    parse,
    parse_capabilities,
    parse_file,
    parse_ticket,
    to_xml,
)

__all__ = [
    "PrintSchemaParser",
    "parse",
    "parse_capabilities",
    "parse_file",
    "parse_ticket",
    "to_xml",
]
