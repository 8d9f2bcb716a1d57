"""Main CLI entry point for the print-schema command-line tool.

Provides inspection, canonical re-serialization and option listing for
PrintCapabilities and PrintTicket documents.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from print_schema import __version__
from print_schema.api import PrintSchemaParser
from print_schema.document.names import STANDARD_PREFIXES, QualifiedName
from print_schema.document.nodes import (
    PrintCapabilitiesDocument,
    PrintFeature,
    PrintSchemaDocument,
)
from print_schema.reader.errors import PrintSchemaError
from print_schema.shared import ConfigError, PrintSchemaConfig, get_logger
from print_schema.ticket import FeatureOptionPack, PrintCapabilities
from print_schema.ticket.duplex import DocumentDuplex, JobDuplex
from print_schema.ticket.media_size import PageMediaSize
from print_schema.ticket.orientation import PageOrientation
from print_schema.ticket.output_color import PageOutputColor
from print_schema.ticket.resolution import PageResolution

logger = get_logger(__name__, None, "cli")

# Feature listings of the options command, in output order
OPTION_PACKS = (
    ("media_sizes", PageMediaSize),
    ("orientations", PageOrientation),
    ("resolutions", PageResolution),
    ("job_duplex", JobDuplex),
    ("document_duplex", DocumentDuplex),
    ("output_colors", PageOutputColor),
)


def load_config(config_path: Optional[Path]) -> PrintSchemaConfig:
    """Load configuration from a JSON file, or the default preset."""
    if config_path is None:
        return PrintSchemaConfig.default()
    return PrintSchemaConfig.from_json(config_path.read_text(encoding="utf-8"))


def count_options(features: Iterable[PrintFeature]) -> int:
    """Count options in a feature forest, sub-features included."""
    return sum(len(f.options) + count_options(f.features) for f in features)


def summarize(document: PrintSchemaDocument) -> Dict[str, Any]:
    """Element counts of a parsed document."""
    if isinstance(document, PrintCapabilitiesDocument):
        parameters = len(document.parameter_defs)
    else:
        parameters = len(document.parameter_inits)
    return {
        "kind": document.kind.value,
        "properties": len(document.properties),
        "parameters": parameters,
        "features": len(document.features),
        "options": count_options(document.features),
    }


def describe_pack(pack: FeatureOptionPack) -> Dict[str, Any]:
    """JSON-ready description of one typed option."""
    predefined = pack.as_predefined_name()
    entry: Dict[str, Any] = {
        "name": str(pack.option.name) if pack.option.name is not None else None,
        "display_name": pack.display_name(),
        "predefined": predefined.value if predefined is not None else None,
    }
    if isinstance(pack, PageMediaSize):
        size = pack.size()
        entry["size_micron"] = [size.width, size.height]
    elif isinstance(pack, PageResolution):
        entry["dpi"] = list(pack.dpi())
    return entry


def parse_feature_name(value: str) -> QualifiedName:
    """Resolve ``prefix:Local`` against the standard Print Schema prefixes."""
    prefix, sep, local_name = value.partition(":")
    if not sep:
        return QualifiedName(value)
    namespaces = dict(STANDARD_PREFIXES)
    if prefix not in namespaces:
        raise argparse.ArgumentTypeError(
            f"unknown prefix {prefix!r}, expected one of {sorted(namespaces)}"
        )
    return QualifiedName(local_name, namespaces[prefix], prefix)


def format_inspection(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format inspect results for output."""
    if format_type == "json":
        return json.dumps(results, indent=2)

    lines = []
    successful = sum(1 for r in results if r["success"])
    lines.append(f"Inspected {len(results)} files, {successful} valid")
    lines.append("-" * 60)
    for result in results:
        status = "✓" if result["success"] else "✗"
        lines.append(f"{status} {result['file']}")
        if result["success"]:
            lines.append(
                f"   {result['kind']}: {result['features']} features, "
                f"{result['options']} options, {result['parameters']} parameters, "
                f"{result['properties']} properties"
            )
        else:
            lines.append(f"   Error: {result['error']}")
    return "\n".join(lines)


def cmd_inspect(args: argparse.Namespace, config: PrintSchemaConfig) -> int:
    """Handle inspect command."""
    parser = PrintSchemaParser(config)
    results = []
    for path in args.paths:
        try:
            document = parser.parse(path)
        except (OSError, PrintSchemaError) as e:
            results.append({"file": str(path), "success": False, "error": str(e)})
            continue
        results.append({"file": str(path), "success": True, **summarize(document)})

    print(format_inspection(results, args.format))
    return 0 if all(r["success"] for r in results) else 1


def cmd_canonicalize(args: argparse.Namespace, config: PrintSchemaConfig) -> int:
    """Handle canonicalize command."""
    if args.pretty:
        config = config.override(writer__pretty_print=True)
    parser = PrintSchemaParser(config)
    try:
        output = parser.serialize(parser.parse(args.path))
    except (OSError, PrintSchemaError) as e:
        print(f"Failed to canonicalize {args.path}: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_bytes(output)
        print(f"Canonical document written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
    return 0


def cmd_options(args: argparse.Namespace, config: PrintSchemaConfig) -> int:
    """Handle options command."""
    try:
        capabilities = PrintCapabilities(
            PrintSchemaParser(config).parse_capabilities(args.path)
        )
    except (OSError, PrintSchemaError) as e:
        print(f"Failed to read capabilities {args.path}: {e}", file=sys.stderr)
        return 1

    if args.feature is not None:
        listing: Dict[str, Any] = {
            str(args.feature): [
                {
                    "name": str(option.name) if option.name is not None else None,
                    "display_name": FeatureOptionPack(option).display_name(),
                }
                for option in capabilities.options_for_feature(args.feature)
            ]
        }
    else:
        listing = {
            key: [describe_pack(pack) for pack in pack_type.list(capabilities)]
            for key, pack_type in OPTION_PACKS
        }
        max_copies = capabilities.max_copies()
        listing["max_copies"] = max_copies.count if max_copies is not None else None

    if args.format == "json":
        print(json.dumps(listing, indent=2))
        return 0

    for key, entries in listing.items():
        if not isinstance(entries, list):
            print(f"{key}: {entries}")
            continue
        print(f"{key}:")
        for entry in entries:
            label = entry["display_name"] or "-"
            print(f"   {entry['name'] or '<unnamed>'}  {label}")
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="print-schema",
        description="Inspect and canonicalize Print Schema capabilities and tickets"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path (JSON)"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Errors only")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Inspect command
    inspect_parser = subparsers.add_parser("inspect", help="Summarize documents")
    inspect_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Capabilities or ticket files"
    )
    inspect_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)"
    )

    # Canonicalize command
    canonical_parser = subparsers.add_parser(
        "canonicalize", help="Rewrite a document in canonical form"
    )
    canonical_parser.add_argument("path", type=Path, help="Document to rewrite")
    canonical_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    canonical_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the output"
    )

    # Options command
    options_parser = subparsers.add_parser(
        "options", help="List the options offered by a capabilities document"
    )
    options_parser.add_argument("path", type=Path, help="Capabilities file")
    options_parser.add_argument(
        "--feature",
        type=parse_feature_name,
        help="List every option of one feature, e.g. psk:PageMediaSize"
    )
    options_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        config = load_config(args.config)
    except (OSError, ConfigError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    handlers = {
        "inspect": cmd_inspect,
        "canonicalize": cmd_canonicalize,
        "options": cmd_options,
    }
    logger.debug("Running command", extra={"command": args.command})
    try:
        return handlers[args.command](args, config)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
