"""Exception hierarchy for Print Schema processing."""

from dataclasses import dataclass
from typing import Optional

from print_schema.document.nodes import DocumentKind


@dataclass(frozen=True)
class SourcePosition:
    """Location in the source document. Lines and columns are 1-based."""

    line: int
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"


class PrintSchemaError(Exception):
    """Base exception for all Print Schema errors."""


class ParsePrintSchemaError(PrintSchemaError):
    """Base exception for failures while parsing a document."""


class InvalidXmlError(ParsePrintSchemaError):
    """The input is not well-formed XML."""

    def __init__(self, message: str, position: Optional[SourcePosition] = None) -> None:
        self.message = message
        self.position = position
        if position is not None:
            super().__init__(f"Invalid xml: (at {position}) {message}")
        else:
            super().__init__(f"Invalid xml: {message}")


class InvalidPrintSchemaError(ParsePrintSchemaError):
    """Well-formed XML that violates the Print Schema structure or value rules.

    lxml reports no column for elements, so ``position.column`` is None and
    ``position.line`` is the source line of the offending element.
    """

    def __init__(self, position: SourcePosition, reason: str) -> None:
        super().__init__(f"Invalid print schema: (at {position}) {reason}")
        self.position = position
        self.reason = reason


class WrongDocumentTypeError(ParsePrintSchemaError):
    """The document root is not the kind the caller asked for."""

    def __init__(self, expected: DocumentKind, found: DocumentKind) -> None:
        super().__init__(f"Wrong document type: expected {expected} but found {found}")
        self.expected = expected
        self.found = found
