"""Incremental construction of print tickets through a merge provider.

Merging and validating tickets against a device is the job of an external
service (on Windows, the Print Ticket Provider). ``PrintTicketProvider`` is
the seam to that service; ``DocumentMergeProvider`` is a portable stand-in
that merges documents by qualified name without device validation.
"""

from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, TypeVar

from print_schema.document.nodes import ParameterInit, PrintFeature, PrintTicketDocument, Property
from print_schema.reader import ParsePrintSchemaError, parse_ticket
from print_schema.reader.errors import PrintSchemaError
from print_schema.shared import ReaderConfig, WriterConfig, get_logger
from print_schema.writer import to_xml

from .print_ticket import PrintTicket

N = TypeVar("N", PrintFeature, ParameterInit, Property)


class PrintTicketBuilderError(PrintSchemaError):
    """Base exception for ticket building failures."""


class MergePrintTicketsError(PrintTicketBuilderError):
    """The provider rejected or failed to merge a delta ticket."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to merge print tickets: {message}")
        self.message = message


class DecodePrintTicketError(PrintTicketBuilderError):
    """The provider returned something that is not a print ticket."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to decode print ticket: {message}")
        self.message = message


class PrintTicketProvider(Protocol):
    """Service that merges a delta ticket into a base ticket."""

    def merge_and_validate(self, base: bytes, delta: bytes) -> bytes:
        """Return the merged ticket XML."""
        ...


def _merge_named(base: Iterable[N], delta: Iterable[N]) -> List[N]:
    replacements: Dict[Tuple[str, str], N] = {}
    for item in delta:
        replacements[item.name.sort_key] = item

    merged: List[N] = []
    emitted = set()
    for item in base:
        key = item.name.sort_key
        if key not in replacements:
            merged.append(item)
        elif key not in emitted:
            merged.append(replacements[key])
            emitted.add(key)
    for key, item in replacements.items():
        if key not in emitted:
            merged.append(item)
    return merged


def merge_ticket_documents(
    base: PrintTicketDocument, delta: PrintTicketDocument
) -> PrintTicketDocument:
    """Overlay ``delta`` on ``base``.

    Root properties, parameter inits and features of the delta replace the
    base entries with the same qualified name, keeping the base position; the
    remaining delta entries are appended.
    """
    return PrintTicketDocument(
        properties=_merge_named(base.properties, delta.properties),
        parameter_inits=_merge_named(base.parameter_inits, delta.parameter_inits),
        features=_merge_named(base.features, delta.features),
    )


class DocumentMergeProvider:
    """Merge provider working on parsed documents, without a device."""

    def __init__(
        self,
        reader_config: Optional[ReaderConfig] = None,
        writer_config: Optional[WriterConfig] = None,
    ) -> None:
        self.reader_config = reader_config
        self.writer_config = writer_config

    def merge_and_validate(self, base: bytes, delta: bytes) -> bytes:
        merged = merge_ticket_documents(
            parse_ticket(base, self.reader_config),
            parse_ticket(delta, self.reader_config),
        )
        return to_xml(merged, self.writer_config)


class PrintTicketBuilder:
    """Accumulates deltas on top of a base ticket.

    Examples:
        >>> builder = PrintTicketBuilder(DocumentMergeProvider())
        >>> builder.merge(media).merge(Copies(2))
        >>> ticket = builder.build()
    """

    def __init__(
        self,
        provider: PrintTicketProvider,
        base: Optional[PrintTicket] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.provider = provider
        self._xml = (base or PrintTicket.default()).xml
        self.merge_count = 0
        self.logger = get_logger(__name__, correlation_id, "print_ticket_builder")

    def merge(self, delta: Any) -> "PrintTicketBuilder":
        """Merge a delta into the current ticket.

        Args:
            delta: PrintTicket, PrintTicketDocument, or any object with a
                ``to_print_ticket()`` method (feature option packs, Copies)

        Returns:
            The builder, for chaining

        Raises:
            MergePrintTicketsError: The provider failed
            DecodePrintTicketError: The provider output is not a PrintTicket
        """
        delta_ticket = _as_print_ticket(delta)
        try:
            result = self.provider.merge_and_validate(self._xml, delta_ticket.xml)
        except PrintTicketBuilderError:
            raise
        except Exception as e:
            raise MergePrintTicketsError(str(e)) from e

        if isinstance(result, str):
            result = result.encode("utf-8")
        if not isinstance(result, (bytes, bytearray)):
            raise DecodePrintTicketError(
                f"provider returned {type(result).__name__}, expected bytes"
            )
        try:
            parse_ticket(result)
        except ParsePrintSchemaError as e:
            raise DecodePrintTicketError(str(e)) from e

        self._xml = bytes(result)
        self.merge_count += 1
        self.logger.info(
            "Merged print ticket",
            extra={"delta_type": type(delta).__name__, "merge_count": self.merge_count},
        )
        return self

    def build(self) -> PrintTicket:
        return PrintTicket(self._xml)


def _as_print_ticket(delta: Any) -> PrintTicket:
    if isinstance(delta, PrintTicket):
        return delta
    if isinstance(delta, PrintTicketDocument):
        return PrintTicket.from_document(delta)
    to_print_ticket = getattr(delta, "to_print_ticket", None)
    if callable(to_print_ticket):
        return to_print_ticket()
    raise TypeError(f"Cannot merge {type(delta).__name__} into a print ticket")
