#!/usr/bin/env python3
"""
Quick Start Guide for the Print Schema library.

Reads the sample capabilities shipped with the tests, lists a few typed
options and builds a print ticket from them.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from print_schema import PrintSchemaConfig, to_xml
from print_schema.ticket import (
    Copies,
    DocumentMergeProvider,
    PredefinedMediaName,
    PredefinedPageOrientation,
    PrintCapabilities,
    PrintTicketBuilder,
)

SAMPLE = Path(__file__).parent.parent / "tests" / "data" / "print_capabilities.xml"


def quick_start_example(path: Path = SAMPLE) -> None:
    """Walk through reading capabilities and building a ticket."""

    print("🚀 QUICK START - Print Schema")
    print("=" * 45)

    # Step 1: Read the capabilities
    print("\n📄 Step 1: Reading PrintCapabilities")
    print("-" * 30)

    capabilities = PrintCapabilities.from_xml(path.read_bytes())
    print(f"✅ {capabilities!r}")
    print(f"🖨️  Max copies: {capabilities.max_copies()}")

    # Step 2: Typed options
    print("\n📏 Step 2: Media sizes and orientations")
    print("-" * 30)

    media_sizes = list(capabilities.page_media_sizes())
    for media in media_sizes:
        print(f"  - {media.display_name() or media.option.name}: {media.size()!r}")
    orientations = list(capabilities.page_orientations())

    a4 = next(
        m for m in media_sizes if m.as_predefined_name() is PredefinedMediaName.ISOA4
    )
    landscape = next(
        o for o in orientations
        if o.as_predefined_name() is PredefinedPageOrientation.Landscape
    )

    # Step 3: Build a ticket
    print("\n🎫 Step 3: Building a PrintTicket")
    print("-" * 30)

    builder = PrintTicketBuilder(DocumentMergeProvider())
    builder.merge(a4).merge(landscape).merge(Copies(2))
    ticket = builder.build()

    readable = to_xml(ticket.document(), PrintSchemaConfig.readable())
    print(readable.decode("utf-8"))


if __name__ == "__main__":
    quick_start_example()
