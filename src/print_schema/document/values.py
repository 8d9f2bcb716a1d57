"""Typed values carried by Print Schema ``<Value>`` elements.

``PropertyValue`` is a closed union of four variants, selected by the
``xsi:type`` attribute of the element:

    StringValue   xsd:string
    IntegerValue  xsd:integer (32-bit signed)
    QNameValue    xsd:QName
    UnknownValue  anything else, kept verbatim with its type name
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .names import QualifiedName, xsd_name

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

XSD_STRING = xsd_name("string")
XSD_INTEGER = xsd_name("integer")
XSD_QNAME = xsd_name("QName")


class PropertyValue(ABC):
    """Base class of the four value variants."""

    __slots__ = ()

    @property
    @abstractmethod
    def xsi_type(self) -> QualifiedName:
        """Canonical ``xsi:type`` of the variant."""

    def as_string(self) -> Optional[str]:
        return None

    def as_integer(self) -> Optional[int]:
        return None

    def as_qname(self) -> Optional[QualifiedName]:
        return None


@dataclass(frozen=True)
class StringValue(PropertyValue):
    text: str

    @property
    def xsi_type(self) -> QualifiedName:
        return XSD_STRING

    def as_string(self) -> Optional[str]:
        return self.text


@dataclass(frozen=True)
class IntegerValue(PropertyValue):
    value: int

    def __post_init__(self) -> None:
        """Validate integer range."""
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueError(f"Integer value {self.value} is out of 32-bit range")

    @property
    def xsi_type(self) -> QualifiedName:
        return XSD_INTEGER

    def as_integer(self) -> Optional[int]:
        return self.value


@dataclass(frozen=True)
class QNameValue(PropertyValue):
    name: QualifiedName

    @property
    def xsi_type(self) -> QualifiedName:
        return XSD_QNAME

    def as_qname(self) -> Optional[QualifiedName]:
        return self.name


@dataclass(frozen=True)
class UnknownValue(PropertyValue):
    """Value of a type outside the XSD built-ins, kept for round-tripping."""

    type_name: QualifiedName
    text: str

    @property
    def xsi_type(self) -> QualifiedName:
        return self.type_name
