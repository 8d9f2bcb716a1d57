"""Public parsing API with progressive disclosure.

Module level functions cover one-shot use; ``PrintSchemaParser`` binds a
``PrintSchemaConfig`` and keeps usage statistics across many documents.
"""

import threading
import time
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, TextIO, Union

from print_schema.document.nodes import (
    PrintCapabilitiesDocument,
    PrintSchemaDocument,
    PrintTicketDocument,
)
from print_schema.reader import PrintSchemaReader
from print_schema.reader.errors import ParsePrintSchemaError
from print_schema.shared import PrintSchemaConfig, get_logger
from print_schema.writer import PrintSchemaWriter

# Type definitions for input data
InputType = Union[str, bytes, bytearray, BinaryIO, TextIO, Path]

MS_PER_SECOND = 1000


def _read_input(input_data: InputType) -> Union[str, bytes]:
    """Resolve any supported input to XML text or bytes.

    ``str`` is XML content, never a path; wrap paths in ``pathlib.Path``.
    """
    if isinstance(input_data, (str, bytes)):
        return input_data
    if isinstance(input_data, bytearray):
        return bytes(input_data)
    if isinstance(input_data, Path):
        return input_data.read_bytes()
    if hasattr(input_data, "read"):
        return input_data.read()
    raise TypeError(f"Unsupported input type: {type(input_data).__name__}")


def parse(
    input_data: InputType,
    config: Optional[PrintSchemaConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintSchemaDocument:
    """Parse a PrintCapabilities or PrintTicket document from any source.

    Args:
        input_data: XML content as str or bytes, a file-like object, or a Path
        config: Optional configuration (reader settings are used)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        PrintCapabilitiesDocument or PrintTicketDocument

    Raises:
        InvalidXmlError: The input is not well-formed XML
        InvalidPrintSchemaError: The input violates the Print Schema structure

    Examples:
        >>> document = parse(Path("capabilities.xml"))
        >>> document.kind
        <DocumentKind.PRINT_CAPABILITIES: 'PrintCapabilities'>
    """
    return PrintSchemaParser(config, correlation_id).parse(input_data)


def parse_file(
    file_path: Union[str, Path],
    config: Optional[PrintSchemaConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintSchemaDocument:
    """Parse a document stored in a file.

    Raises:
        OSError: The file cannot be read
    """
    return parse(Path(file_path), config, correlation_id)


def parse_capabilities(
    input_data: InputType,
    config: Optional[PrintSchemaConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintCapabilitiesDocument:
    """Parse a document that must be a PrintCapabilities document.

    Raises:
        WrongDocumentTypeError: The document is a PrintTicket
    """
    return PrintSchemaParser(config, correlation_id).parse_capabilities(input_data)


def parse_ticket(
    input_data: InputType,
    config: Optional[PrintSchemaConfig] = None,
    correlation_id: Optional[str] = None,
) -> PrintTicketDocument:
    """Parse a document that must be a PrintTicket document.

    Raises:
        WrongDocumentTypeError: The document is a PrintCapabilities document
    """
    return PrintSchemaParser(config, correlation_id).parse_ticket(input_data)


def to_xml(
    document: PrintSchemaDocument,
    config: Optional[PrintSchemaConfig] = None,
    correlation_id: Optional[str] = None,
) -> bytes:
    """Serialize a document with the writer settings of ``config``."""
    return PrintSchemaParser(config, correlation_id).serialize(document)


class PrintSchemaParser:
    """Configured parser and serializer, reusable across documents.

    Instances can be shared between threads; only the statistics counters are
    mutable and they are updated under a lock.

    Attributes:
        config: Current configuration
        correlation_id: Correlation ID for request tracking

    Examples:
        >>> parser = PrintSchemaParser(PrintSchemaConfig.readable())
        >>> ticket = parser.parse_ticket(ticket_bytes)
        >>> print(parser.serialize(ticket).decode())
    """

    def __init__(
        self,
        config: Optional[PrintSchemaConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or PrintSchemaConfig.default()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "print_schema_parser")
        self._build_components()

        self._lock = threading.Lock()
        self._parse_count = 0
        self._failed_parses = 0
        self._total_processing_time = 0.0

    def _build_components(self) -> None:
        self._reader = PrintSchemaReader(self.config.reader, self.correlation_id)
        self._writer = PrintSchemaWriter(self.config.writer, self.correlation_id)

    def parse(self, input_data: InputType) -> PrintSchemaDocument:
        return self._timed(self._reader.read, input_data)

    def parse_capabilities(self, input_data: InputType) -> PrintCapabilitiesDocument:
        return self._timed(self._reader.read_capabilities, input_data)

    def parse_ticket(self, input_data: InputType) -> PrintTicketDocument:
        return self._timed(self._reader.read_ticket, input_data)

    def serialize(self, document: PrintSchemaDocument) -> bytes:
        return self._writer.write(document)

    def _timed(self, read: Any, input_data: InputType) -> Any:
        start_time = time.time()
        content = _read_input(input_data)
        try:
            return read(content)
        except ParsePrintSchemaError as e:
            with self._lock:
                self._failed_parses += 1
            self.logger.debug(
                "Print schema parse rejected input",
                extra={"error_type": type(e).__name__},
            )
            raise
        finally:
            processing_time = (time.time() - start_time) * MS_PER_SECOND
            with self._lock:
                self._parse_count += 1
                self._total_processing_time += processing_time

    def reconfigure(self, config: PrintSchemaConfig) -> None:
        """Replace the configuration for subsequent calls."""
        self.config = config
        self._build_components()
        self.logger.info("Parser reconfigured", extra={"config_name": config.name})

    @property
    def statistics(self) -> Dict[str, Any]:
        """Get parser usage statistics."""
        with self._lock:
            return {
                "total_parses": self._parse_count,
                "failed_parses": self._failed_parses,
                "total_processing_time_ms": self._total_processing_time,
                "average_processing_time_ms": (
                    self._total_processing_time / self._parse_count
                    if self._parse_count > 0 else 0.0
                ),
                "correlation_id": self.correlation_id,
            }

    def reset_statistics(self) -> None:
        with self._lock:
            self._parse_count = 0
            self._failed_parses = 0
            self._total_processing_time = 0.0
