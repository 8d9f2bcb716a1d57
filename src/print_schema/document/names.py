"""Namespaces and qualified names of the Print Schema vocabulary."""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

NS_PSF = "http://schemas.microsoft.com/windows/2003/08/printing/printschemaframework"
NS_PSK = "http://schemas.microsoft.com/windows/2003/08/printing/printschemakeywords"
NS_XSD = "http://www.w3.org/2001/XMLSchema"
NS_XSI = "http://www.w3.org/2001/XMLSchema-instance"

# Conventional prefixes, declared on every serialized root
STANDARD_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("psf", NS_PSF),
    ("psk", NS_PSK),
    ("xsd", NS_XSD),
    ("xsi", NS_XSI),
)


@dataclass(frozen=True)
class QualifiedName:
    """A namespace-qualified XML name.

    Identity is ``(namespace, local_name)``; the prefix only records how the
    name was spelled so that it can be written back the same way.
    """

    local_name: str
    namespace: Optional[str] = None
    prefix: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate qualified name."""
        if not self.local_name:
            raise ValueError("Local name cannot be empty")

    @property
    def sort_key(self) -> Tuple[str, str]:
        """Total ordering key over (namespace, local name)."""
        return (self.namespace or "", self.local_name)

    def matches(self, local_name: str, namespace: Optional[str]) -> bool:
        """Check the name against a bare (local name, namespace) pair."""
        return self.local_name == local_name and self.namespace == namespace

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name


def psf_name(local_name: str) -> QualifiedName:
    """Name in the Print Schema Framework namespace."""
    return QualifiedName(local_name, NS_PSF, "psf")


def psk_name(local_name: str) -> QualifiedName:
    """Name in the Print Schema Keywords namespace."""
    return QualifiedName(local_name, NS_PSK, "psk")


def xsd_name(local_name: str) -> QualifiedName:
    """Name in the XML Schema namespace."""
    return QualifiedName(local_name, NS_XSD, "xsd")


def resolve_qname(value: str, nsmap: Mapping[Optional[str], str]) -> QualifiedName:
    """Decode a ``prefix:local`` lexical value against in-scope bindings.

    An unprefixed value has no namespace (the default namespace does not apply
    to QName values in the Print Schema). A prefix with no binding is kept with
    no namespace.

    Args:
        value: Lexical QName, e.g. ``psk:ISOA4``
        nsmap: Prefix to namespace URI bindings in scope

    Returns:
        The decoded qualified name
    """
    value = value.strip()
    prefix, sep, local_name = value.partition(":")
    if not sep:
        return QualifiedName(value)
    return QualifiedName(local_name, nsmap.get(prefix), prefix)
