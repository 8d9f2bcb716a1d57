"""Typed feature options, capabilities queries and ticket building.

Key Components:
    PrintCapabilities: Queries over a parsed capabilities document
    FeatureOptionPack: Base of PageMediaSize, PageOrientation, PageResolution,
        JobDuplex, DocumentDuplex and PageOutputColor
    PredefinedName: Base of the keyword enums
    PrintTicket / PrintTicketBuilder: Ticket bytes and their incremental merge
"""

from .builder import (
    DecodePrintTicketError,
    DocumentMergeProvider,
    MergePrintTicketsError,
    PrintTicketBuilder,
    PrintTicketBuilderError,
    PrintTicketProvider,
    merge_ticket_documents,
)
from .capabilities import PrintCapabilities
from .copies import JOB_COPIES_ALL_DOCUMENTS, Copies
from .duplex import DocumentDuplex, JobDuplex, PredefinedDuplexType
from .feature_option_pack import FeatureOptionPack, PredefinedName
from .imageable_size import PageImageableSize, PageImageableSizeError
from .media_size import MediaSizeTuple, PageMediaSize, PredefinedMediaName
from .orientation import PageOrientation, PredefinedPageOrientation
from .output_color import PageOutputColor, PredefinedPageOutputColor
from .print_ticket import DEFAULT_PRINT_TICKET_XML, PrintTicket
from .resolution import PageResolution

__all__ = [
    "DecodePrintTicketError",
    "DocumentMergeProvider",
    "MergePrintTicketsError",
    "PrintTicketBuilder",
    "PrintTicketBuilderError",
    "PrintTicketProvider",
    "merge_ticket_documents",
    "PrintCapabilities",
    "JOB_COPIES_ALL_DOCUMENTS",
    "Copies",
    "DocumentDuplex",
    "JobDuplex",
    "PredefinedDuplexType",
    "FeatureOptionPack",
    "PredefinedName",
    "PageImageableSize",
    "PageImageableSizeError",
    "MediaSizeTuple",
    "PageMediaSize",
    "PredefinedMediaName",
    "PageOrientation",
    "PredefinedPageOrientation",
    "PageOutputColor",
    "PredefinedPageOutputColor",
    "DEFAULT_PRINT_TICKET_XML",
    "PrintTicket",
    "PageResolution",
]
