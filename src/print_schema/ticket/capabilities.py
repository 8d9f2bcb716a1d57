"""Queries over a parsed PrintCapabilities document."""

from typing import Iterable, Iterator, List, Optional, Union

from print_schema.document.names import QualifiedName, psf_name
from print_schema.document.nodes import (
    ParameterInit,
    PrintCapabilitiesDocument,
    PrintFeatureOption,
    property_value,
)
from print_schema.document.parameters import default_parameters_for
from print_schema.reader import parse_capabilities
from print_schema.shared import ReaderConfig, WriterConfig
from print_schema.writer import to_xml

from .copies import JOB_COPIES_ALL_DOCUMENTS, MAX_COPY_COUNT, Copies
from .duplex import DocumentDuplex, JobDuplex
from .imageable_size import PageImageableSize
from .media_size import PageMediaSize
from .orientation import PageOrientation
from .output_color import PageOutputColor
from .resolution import PageResolution

MAX_VALUE = psf_name("MaxValue")


class PrintCapabilities:
    """Capabilities of one printer.

    Examples:
        >>> capabilities = PrintCapabilities.from_xml(xml_bytes)
        >>> for media in capabilities.page_media_sizes():
        ...     print(media.display_name(), media.size())
    """

    def __init__(self, document: PrintCapabilitiesDocument) -> None:
        self.document = document

    @classmethod
    def from_xml(
        cls,
        data: Union[bytes, str],
        config: Optional[ReaderConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> "PrintCapabilities":
        """Parse capabilities XML.

        Raises:
            ParsePrintSchemaError: The input is not a valid PrintCapabilities document
        """
        return cls(parse_capabilities(data, config, correlation_id))

    def to_xml(self, config: Optional[WriterConfig] = None) -> bytes:
        return to_xml(self.document, config)

    def options_for_feature(self, name: QualifiedName) -> Iterator[PrintFeatureOption]:
        """Options of every top level feature with the given name, in document order."""
        for feature in self.document.features:
            if feature.name == name:
                yield from feature.options

    def default_parameters_for(self, names: Iterable[QualifiedName]) -> List[ParameterInit]:
        return list(default_parameters_for(self.document, names))

    def page_media_sizes(self) -> Iterator[PageMediaSize]:
        return PageMediaSize.list(self)

    def page_orientations(self) -> Iterator[PageOrientation]:
        return PageOrientation.list(self)

    def page_resolutions(self) -> Iterator[PageResolution]:
        return PageResolution.list(self)

    def job_duplexes(self) -> Iterator[JobDuplex]:
        return JobDuplex.list(self)

    def document_duplexes(self) -> Iterator[DocumentDuplex]:
        return DocumentDuplex.list(self)

    def page_output_colors(self) -> Iterator[PageOutputColor]:
        return PageOutputColor.list(self)

    def max_copies(self) -> Optional[Copies]:
        """Upper bound of ``psk:JobCopiesAllDocuments``, if declared."""
        for parameter_def in self.document.parameter_defs:
            if parameter_def.name != JOB_COPIES_ALL_DOCUMENTS:
                continue
            value = property_value(parameter_def, MAX_VALUE)
            number = value.as_integer() if value is not None else None
            if number is not None:
                return Copies(min(max(number, 0), MAX_COPY_COUNT))
        return None

    def imageable_size(self) -> PageImageableSize:
        """Imageable area declared by the capabilities.

        Raises:
            PageImageableSizeError: The property is missing or incomplete
        """
        return PageImageableSize.from_capabilities(self.document)

    def __repr__(self) -> str:
        return f"PrintCapabilities(features={len(self.document.features)})"
