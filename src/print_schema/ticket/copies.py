"""Job copy count."""

from dataclasses import dataclass

from print_schema.document.names import psk_name
from print_schema.document.nodes import ParameterInit, PrintTicketDocument
from print_schema.document.values import IntegerValue

from .print_ticket import PrintTicket

JOB_COPIES_ALL_DOCUMENTS = psk_name("JobCopiesAllDocuments")
MAX_COPY_COUNT = 0xFFFF


@dataclass(frozen=True)
class Copies:
    """Number of copies of the whole job, set through a ticket parameter."""

    count: int

    def __post_init__(self) -> None:
        """Validate copy count."""
        if not 0 <= self.count <= MAX_COPY_COUNT:
            raise ValueError(f"Copy count must be between 0 and {MAX_COPY_COUNT}")

    def to_print_ticket_document(self) -> PrintTicketDocument:
        return PrintTicketDocument(
            parameter_inits=[
                ParameterInit(name=JOB_COPIES_ALL_DOCUMENTS, value=IntegerValue(self.count))
            ]
        )

    def to_print_ticket(self) -> PrintTicket:
        return PrintTicket.from_document(self.to_print_ticket_document())
