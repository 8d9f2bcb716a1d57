"""Shared fixtures for Print Schema tests."""

from pathlib import Path
from typing import Callable

import pytest

from print_schema.reader import parse_capabilities, parse_ticket

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

NAMESPACE_DECLARATIONS = (
    'xmlns:psf="http://schemas.microsoft.com/windows/2003/08/printing/printschemaframework" '
    'xmlns:psk="http://schemas.microsoft.com/windows/2003/08/printing/printschemakeywords" '
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" '
    'xmlns:ns0000="http://schemas.example.com/printing/vendor"'
)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def capabilities_path() -> Path:
    return DATA_DIR / "print_capabilities.xml"


@pytest.fixture
def ticket_path() -> Path:
    return DATA_DIR / "print_ticket.xml"


@pytest.fixture
def capabilities_xml(capabilities_path: Path) -> bytes:
    return capabilities_path.read_bytes()


@pytest.fixture
def ticket_xml(ticket_path: Path) -> bytes:
    return ticket_path.read_bytes()


@pytest.fixture
def capabilities_document(capabilities_xml: bytes):
    return parse_capabilities(capabilities_xml)


@pytest.fixture
def ticket_document(ticket_xml: bytes):
    return parse_ticket(ticket_xml)


@pytest.fixture
def make_capabilities() -> Callable[[str], bytes]:
    """Wrap body markup in a PrintCapabilities root declaring the usual prefixes."""

    def build(body: str) -> bytes:
        return (
            f'<psf:PrintCapabilities {NAMESPACE_DECLARATIONS} version="1">'
            f"{body}</psf:PrintCapabilities>"
        ).encode("utf-8")

    return build


@pytest.fixture
def make_ticket() -> Callable[[str], bytes]:
    """Wrap body markup in a PrintTicket root declaring the usual prefixes."""

    def build(body: str) -> bytes:
        return (
            f'<psf:PrintTicket {NAMESPACE_DECLARATIONS} version="1">'
            f"{body}</psf:PrintTicket>"
        ).encode("utf-8")

    return build
