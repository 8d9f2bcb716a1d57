"""Serialized print tickets."""

from typing import Optional, Union

from print_schema.document.nodes import PrintTicketDocument
from print_schema.reader import parse_ticket
from print_schema.shared import ReaderConfig, WriterConfig
from print_schema.writer import to_xml

DEFAULT_PRINT_TICKET_XML = (
    b'<psf:PrintTicket'
    b' xmlns:psf="http://schemas.microsoft.com/windows/2003/08/printing/printschemaframework"'
    b' xmlns:psk="http://schemas.microsoft.com/windows/2003/08/printing/printschemakeywords"'
    b' xmlns:xsd="http://www.w3.org/2001/XMLSchema"'
    b' xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
    b' version="1"></psf:PrintTicket>'
)


class PrintTicket:
    """A print ticket held as XML bytes.

    Tickets travel between the merge service and the device as XML, so the
    bytes are the source of truth; ``document()`` parses them on demand.
    """

    def __init__(self, xml: bytes) -> None:
        self._xml = bytes(xml)

    @classmethod
    def default(cls) -> "PrintTicket":
        """Empty ticket declaring the four standard namespaces."""
        return cls(DEFAULT_PRINT_TICKET_XML)

    @classmethod
    def from_xml(cls, data: Union[bytes, str]) -> "PrintTicket":
        if isinstance(data, str):
            data = data.encode("utf-8")
        return cls(data)

    @classmethod
    def from_document(
        cls,
        document: PrintTicketDocument,
        config: Optional[WriterConfig] = None,
    ) -> "PrintTicket":
        return cls(to_xml(document, config))

    @property
    def xml(self) -> bytes:
        return self._xml

    def document(self, config: Optional[ReaderConfig] = None) -> PrintTicketDocument:
        """Parse the ticket.

        Raises:
            ParsePrintSchemaError: The bytes are not a valid PrintTicket document
        """
        return parse_ticket(self._xml, config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrintTicket):
            return NotImplemented
        return self._xml == other._xml

    def __hash__(self) -> int:
        return hash(self._xml)

    def __repr__(self) -> str:
        return f"PrintTicket({len(self._xml)} bytes)"
