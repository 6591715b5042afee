"""
convertx

Multi-purpose unit converter: a closed registry of units per physical
quantity and a conversion engine that routes every category through
its canonical unit.
"""

__version__ = "1.0.0"

# Core imports for public API (units first, data structures depend on it)
from .core.units import (
    Category,
    UnitDefinition,
    UnitConverter,
    default_converter,
    convert,
    convert_value,
    parse_unit,
    format_unit,
    list_variants,
)
from .core.data_structures import ConversionRequest, ConversionResult
from .core.exceptions import (
    ConvertxError,
    ValidationError,
    InvalidUnitError,
    UnsupportedConversionError,
    ConfigurationError,
)
from .core.formatting import format_result
from .core.humanize import bytes_to_mb, bytes_to_human_readable, seconds_to_human_readable

__all__ = [
    # Registry and engine
    'Category', 'UnitDefinition', 'UnitConverter', 'default_converter',
    'convert', 'convert_value', 'parse_unit', 'format_unit', 'list_variants',
    'ConversionRequest', 'ConversionResult', 'format_result',

    # Derived utilities
    'bytes_to_mb', 'bytes_to_human_readable', 'seconds_to_human_readable',

    # Errors
    'ConvertxError', 'ValidationError', 'InvalidUnitError',
    'UnsupportedConversionError', 'ConfigurationError',

    # Version info
    '__version__'
]
