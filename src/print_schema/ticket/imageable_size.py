"""Imageable area of the page reported by a capabilities document."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from print_schema.document.names import psk_name
from print_schema.document.nodes import (
    HasProperties,
    PrintCapabilitiesDocument,
    Property,
    get_property,
)
from print_schema.reader.errors import PrintSchemaError

from .media_size import MediaSizeTuple

if TYPE_CHECKING:
    from .capabilities import PrintCapabilities


class PageImageableSizeError(PrintSchemaError):
    """A required imageable size field is missing or invalid."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field error: {field}")
        self.field = field


def _child(node: HasProperties, local_name: str) -> Property:
    prop = get_property(node, psk_name(local_name))
    if prop is None:
        raise PageImageableSizeError(local_name)
    return prop


def _dimension(node: HasProperties, local_name: str) -> int:
    value = _child(node, local_name).value
    number = value.as_integer() if value is not None else None
    if number is None or number < 0:
        raise PageImageableSizeError(local_name)
    return number


@dataclass(frozen=True)
class PageImageableSize:
    """Printable region of the currently selected media, in microns.

    Attributes:
        size: Full imageable size
        origin: Offset of the imageable area from the top left corner
        extent: Dimensions of the imageable area
    """

    size: MediaSizeTuple
    origin: MediaSizeTuple
    extent: MediaSizeTuple

    @classmethod
    def from_capabilities(
        cls,
        capabilities: Union["PrintCapabilities", PrintCapabilitiesDocument],
    ) -> "PageImageableSize":
        """Read the root ``psk:PageImageableSize`` property.

        Raises:
            PageImageableSizeError: A field is missing, not an integer or negative
        """
        document = getattr(capabilities, "document", capabilities)
        imageable_size = _child(document, "PageImageableSize")
        size = MediaSizeTuple.micron(
            _dimension(imageable_size, "ImageableSizeWidth"),
            _dimension(imageable_size, "ImageableSizeHeight"),
        )
        area = _child(imageable_size, "ImageableArea")
        return cls(
            size=size,
            origin=MediaSizeTuple.micron(
                _dimension(area, "OriginWidth"),
                _dimension(area, "OriginHeight"),
            ),
            extent=MediaSizeTuple.micron(
                _dimension(area, "ExtentWidth"),
                _dimension(area, "ExtentHeight"),
            ),
        )
