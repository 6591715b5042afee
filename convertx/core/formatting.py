"""Text templates for conversion results"""

import numpy as np

from .data_structures import ConversionResult
from .exceptions import ValidationError
from .units.definitions import Category

VALUE_PRECISION = 4
TEMPERATURE_PRECISION = 2


def format_unsupported(result: ConversionResult) -> str:
    request = result.request
    return f"Conversion from {request.from_unit} to {request.to_unit} is not directly supported."


def format_result(result: ConversionResult) -> str:
    """
    Render a conversion result as a single output line

    Temperatures use two decimals and upper-cased unit letters with a
    degree sign; every other category uses four decimals.

    Raises:
        ValidationError: If the request value is an array rather than a scalar
    """
    if isinstance(result.request.value, np.ndarray):
        raise ValidationError("Only scalar results can be formatted", 'value', result.request.value.shape)

    if not result.supported:
        return format_unsupported(result)

    request = result.request
    if request.category is Category.TEMPERATURE:
        p = TEMPERATURE_PRECISION
        return (f"{request.value:.{p}f}°{request.from_unit.token.upper()} = "
                f"{result.value:.{p}f}°{request.to_unit.token.upper()}")

    p = VALUE_PRECISION
    return f"{request.value:.{p}f} {request.from_unit} = {result.value:.{p}f} {request.to_unit}"
