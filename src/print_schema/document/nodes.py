"""Document tree for Print Schema capabilities and tickets.

Key Components:
    Property: Named fact with an optional value and nested properties
    ScoredProperty: Option sub-property matched against tickets, literal or parameterized
    PrintFeatureOption: One legal choice of a feature
    PrintFeature: Configurable printing axis with its options and sub-features
    ParameterDef / ParameterInit: Parameter declaration (capabilities) and value (ticket)
    PrintCapabilitiesDocument / PrintTicketDocument: Document roots

Trees are immutable. Child collections are stored as tuples; sequences passed
to the constructors are converted, so literal lists can be used when building
documents by hand.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, Union

from .names import QualifiedName
from .values import PropertyValue


class DocumentKind(Enum):
    """Root element kinds of a Print Schema document."""

    PRINT_CAPABILITIES = "PrintCapabilities"
    PRINT_TICKET = "PrintTicket"

    def __str__(self) -> str:
        return self.value


def _freeze(node: object, *names: str) -> None:
    for name in names:
        object.__setattr__(node, name, tuple(getattr(node, name)))


@dataclass(frozen=True)
class Property:
    """Simple named fact, possibly bearing sub-facts."""

    name: QualifiedName
    value: Optional[PropertyValue] = None
    properties: Tuple["Property", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "properties")


@dataclass(frozen=True)
class ScoredProperty:
    """Scored sub-property of an option.

    The effective value is either ``value`` or, when ``parameter_ref`` is set,
    the value of the ParameterInit with that name.
    """

    name: Optional[QualifiedName] = None
    parameter_ref: Optional[QualifiedName] = None
    value: Optional[PropertyValue] = None
    scored_properties: Tuple["ScoredProperty", ...] = ()
    properties: Tuple[Property, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "scored_properties", "properties")


@dataclass(frozen=True)
class PrintFeatureOption:
    """One legal choice for a feature. ``name`` is None for anonymous options."""

    name: Optional[QualifiedName] = None
    scored_properties: Tuple[ScoredProperty, ...] = ()
    properties: Tuple[Property, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "scored_properties", "properties")


@dataclass(frozen=True)
class PrintFeature:
    """Configurable printing axis (e.g. ``psk:PageMediaSize``) and its options."""

    name: QualifiedName
    properties: Tuple[Property, ...] = ()
    options: Tuple[PrintFeatureOption, ...] = ()
    features: Tuple["PrintFeature", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "properties", "options", "features")


@dataclass(frozen=True)
class ParameterDef:
    """Parameter metadata (data type, bounds, default). Capabilities only."""

    name: QualifiedName
    properties: Tuple[Property, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "properties")


@dataclass(frozen=True)
class ParameterInit:
    """Concrete parameter value. Tickets only."""

    name: QualifiedName
    value: PropertyValue


@dataclass(frozen=True)
class PrintCapabilitiesDocument:
    """Root of a PrintCapabilities document."""

    properties: Tuple[Property, ...] = ()
    parameter_defs: Tuple[ParameterDef, ...] = ()
    features: Tuple[PrintFeature, ...] = ()

    kind = DocumentKind.PRINT_CAPABILITIES

    def __post_init__(self) -> None:
        _freeze(self, "properties", "parameter_defs", "features")


@dataclass(frozen=True)
class PrintTicketDocument:
    """Root of a PrintTicket document."""

    properties: Tuple[Property, ...] = ()
    parameter_inits: Tuple[ParameterInit, ...] = ()
    features: Tuple[PrintFeature, ...] = ()

    kind = DocumentKind.PRINT_TICKET

    def __post_init__(self) -> None:
        _freeze(self, "properties", "parameter_inits", "features")


PrintSchemaDocument = Union[PrintCapabilitiesDocument, PrintTicketDocument]


class HasProperties(Protocol):
    """Any node carrying child properties."""

    @property
    def properties(self) -> Sequence[Property]: ...


class HasScoredProperties(Protocol):
    """Any node carrying child scored properties."""

    @property
    def scored_properties(self) -> Sequence[ScoredProperty]: ...


def get_property(node: HasProperties, name: QualifiedName) -> Optional[Property]:
    """Find the first direct child property with the given name."""
    for prop in node.properties:
        if prop.name == name:
            return prop
    return None


def get_scored_property(
    node: HasScoredProperties, name: QualifiedName
) -> Optional[ScoredProperty]:
    """Find the first direct child scored property with the given name.

    Anonymous scored properties never match.
    """
    for scored_property in node.scored_properties:
        if scored_property.name is not None and scored_property.name == name:
            return scored_property
    return None


def property_value(node: HasProperties, name: QualifiedName) -> Optional[PropertyValue]:
    """Value of the named child property, if both exist."""
    prop = get_property(node, name)
    return prop.value if prop is not None else None
