"""Parameter resolution over Print Schema document trees.

Options in a capabilities document may leave some scored properties open,
pointing at a named parameter instead of carrying a literal value (custom
media sizes are the usual example). Before such an option can be placed in a
ticket, every referenced parameter needs a ``ParameterInit``; the defaults are
taken from the matching ``ParameterDef`` declarations.
"""

from bisect import bisect_left
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .names import QualifiedName, psf_name
from .nodes import (
    ParameterDef,
    ParameterInit,
    PrintCapabilitiesDocument,
    PrintFeatureOption,
    ScoredProperty,
    property_value,
)
from .values import PropertyValue

DEFAULT_VALUE = psf_name("DefaultValue")


def default_value(parameter_def: ParameterDef) -> Optional[PropertyValue]:
    """Get the ``psf:DefaultValue`` declared by a parameter definition."""
    return property_value(parameter_def, DEFAULT_VALUE)


def default_parameters_for(
    document: PrintCapabilitiesDocument,
    names: Iterable[QualifiedName],
) -> Iterator[ParameterInit]:
    """Yield default ``ParameterInit`` values for the named parameters.

    Parameter definitions are visited in document order. Definitions without a
    default value are skipped.

    Args:
        document: Capabilities document declaring the parameters
        names: Parameter names to resolve, matched on namespace and local name

    Yields:
        One ParameterInit per matching definition that has a default
    """
    wanted = sorted({name.sort_key for name in names})
    if not wanted:
        return

    for parameter_def in document.parameter_defs:
        key = parameter_def.name.sort_key
        index = bisect_left(wanted, key)
        if index == len(wanted) or wanted[index] != key:
            continue
        value = default_value(parameter_def)
        if value is None:
            continue
        yield ParameterInit(name=parameter_def.name, value=value)


def parameters_dependent(
    node: Union[PrintFeatureOption, ScoredProperty]
) -> List[QualifiedName]:
    """Collect every parameter referenced below an option or scored property.

    The walk is depth-first in document order; duplicates are kept.
    """
    result: List[QualifiedName] = []
    if isinstance(node, ScoredProperty) and node.parameter_ref is not None:
        result.append(node.parameter_ref)
    for scored_property in node.scored_properties:
        result.extend(parameters_dependent(scored_property))
    return result


def value_with(
    scored_property: ScoredProperty,
    parameters: Sequence[ParameterInit],
) -> Optional[PropertyValue]:
    """Resolve the effective value of a scored property.

    Returns the literal value when the scored property does not reference a
    parameter, otherwise the value of the first matching ParameterInit.
    """
    if scored_property.parameter_ref is None:
        return scored_property.value
    for parameter in parameters:
        if parameter.name == scored_property.parameter_ref:
            return parameter.value
    return None
