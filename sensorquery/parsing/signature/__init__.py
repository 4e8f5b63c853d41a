"""
D-Bus type signature codec.

This sub-package validates and names the type tags carried by variant values,
so a property bag decoder can tell well-formed values it does not care about
from corrupt ones.
"""
from sensorquery.parsing.signature.decode import (
    complete_type_end,
    is_single_complete_type,
    type_name,
    BASIC_TYPES,
    TYPE_NAMES,
)

__all__ = [
    "complete_type_end",
    "is_single_complete_type",
    "type_name",
    "BASIC_TYPES",
    "TYPE_NAMES",
]
