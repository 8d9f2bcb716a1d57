"""Typed views over the options of well-known Print Schema features.

A feature option pack owns one option of a capabilities feature together with
the parameter values it needs. Subclasses bind the pack to a feature name and,
where the Print Schema defines a closed keyword set for the feature, to a
``PredefinedName`` enum.
"""

from enum import Enum
from typing import (
    TYPE_CHECKING,
    ClassVar,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from print_schema.document.names import NS_PSK, QualifiedName, psk_name
from print_schema.document.nodes import (
    ParameterInit,
    PrintFeature,
    PrintFeatureOption,
    PrintTicketDocument,
    get_scored_property,
    property_value,
)
from print_schema.document.parameters import parameters_dependent, value_with
from print_schema.document.values import PropertyValue

from .print_ticket import PrintTicket

if TYPE_CHECKING:
    from .capabilities import PrintCapabilities

DISPLAY_NAME = psk_name("DisplayName")

P = TypeVar("P", bound="PredefinedName")
F = TypeVar("F", bound="FeatureOptionPack")


class PredefinedName(str, Enum):
    """Base of the closed enums of well-known Print Schema keywords.

    Member values are local names in the Print Schema Keywords namespace.
    """

    @classmethod
    def from_name(cls: Type[P], name: Optional[QualifiedName]) -> Optional[P]:
        """Map a qualified name to a member.

        Names outside the keywords namespace and unknown local names map to
        None; vendor specific options are expected in capabilities.
        """
        if name is None or name.namespace != NS_PSK:
            return None
        try:
            return cls(name.local_name)
        except ValueError:
            return None

    @property
    def qualified_name(self) -> QualifiedName:
        return psk_name(self.value)


class FeatureOptionPack:
    """One option of a well-known feature plus the parameters it depends on.

    Subclasses set ``feature_name`` and optionally ``predefined_names``.

    Attributes:
        option: The wrapped option as read from the capabilities
        parameters: ParameterInit values for every parameter the option references
    """

    feature_name: ClassVar[QualifiedName]
    predefined_names: ClassVar[Optional[Type[PredefinedName]]] = None

    def __init__(
        self,
        option: PrintFeatureOption,
        parameters: Iterable[ParameterInit] = (),
    ) -> None:
        self.option = option
        self.parameters: Tuple[ParameterInit, ...] = tuple(parameters)

    @classmethod
    def list(cls: Type[F], capabilities: "PrintCapabilities") -> Iterator[F]:
        """Yield one pack per option of this feature in the capabilities.

        Each pack receives the default values of the parameters its option
        references.
        """
        for option in capabilities.options_for_feature(cls.feature_name):
            defaults = capabilities.default_parameters_for(parameters_dependent(option))
            yield cls(option, defaults)

    def display_name(self) -> Optional[str]:
        """Human readable name of the option (``psk:DisplayName``)."""
        value = property_value(self.option, DISPLAY_NAME)
        return value.as_string() if value is not None else None

    def as_predefined_name(self) -> Optional[PredefinedName]:
        """Well-known keyword of the option, or None for vendor options."""
        if self.predefined_names is None:
            return None
        return self.predefined_names.from_name(self.option.name)

    def scored_value(self, local_name: str) -> Optional[PropertyValue]:
        """Effective value of a ``psk`` scored property of the option."""
        scored_property = get_scored_property(self.option, psk_name(local_name))
        if scored_property is None:
            return None
        return value_with(scored_property, self.parameters)

    def scored_integer(self, local_name: str) -> int:
        """Integer value of a ``psk`` scored property; 0 when absent."""
        value = self.scored_value(local_name)
        number = value.as_integer() if value is not None else None
        return number if number is not None else 0

    def to_print_ticket_document(self) -> PrintTicketDocument:
        """Ticket fragment selecting this option."""
        return PrintTicketDocument(
            parameter_inits=self.parameters,
            features=[PrintFeature(name=self.feature_name, options=[self.option])],
        )

    def to_print_ticket(self) -> PrintTicket:
        return PrintTicket.from_document(self.to_print_ticket_document())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.option == other.option and self.parameters == other.parameters

    def __hash__(self) -> int:
        return hash((type(self), self.option, self.parameters))

    def __repr__(self) -> str:
        option_name = self.option.name if self.option.name is not None else "<unnamed>"
        return f"{type(self).__name__}(option={option_name}, parameters={len(self.parameters)})"
