"""
Units Module for convertx

Closed unit registry plus the conversion engine that routes each
category through its canonical unit.
"""

from typing import Union

from .definitions import (
    CATEGORY_DESCRIPTIONS,
    CONVERSION_KINDS,
    UNIT_TABLES,
    Category,
    ConversionKind,
    UnitDefinition,
    format_unit,
    get_canonical_unit,
    get_conversion_kind,
    list_units,
    list_variants,
    parse_category,
    parse_unit,
)
from .converter import UnitConverter
from ..data_structures import ConversionRequest, ConversionResult

# Create default converter instance
default_converter = UnitConverter()


# Convenience functions using default converter
def convert(category: Union[str, Category], value, from_token: str, to_token: str) -> ConversionResult:
    """Convert value between unit tokens of a category using default converter"""
    request = ConversionRequest.from_tokens(category, value, from_token, to_token)
    return default_converter.convert(request)


def convert_value(category: Union[str, Category], value, from_token: str, to_token: str):
    """Convert value between unit tokens, raising UnsupportedConversionError for unsupported pairs"""
    return convert(category, value, from_token, to_token).unwrap()


__all__ = [
    'CATEGORY_DESCRIPTIONS',
    'CONVERSION_KINDS',
    'UNIT_TABLES',
    'Category',
    'ConversionKind',
    'UnitDefinition',
    'UnitConverter',
    'ConversionRequest',
    'ConversionResult',
    'default_converter',
    'convert',
    'convert_value',
    'format_unit',
    'get_canonical_unit',
    'get_conversion_kind',
    'list_units',
    'list_variants',
    'parse_category',
    'parse_unit',
]
