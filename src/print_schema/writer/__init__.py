"""XML serialization of Print Schema document trees."""

from .serializer import SCHEMA_VERSION, NamespaceTable, PrintSchemaWriter, to_xml

__all__ = [
    "SCHEMA_VERSION",
    "NamespaceTable",
    "PrintSchemaWriter",
    "to_xml",
]
