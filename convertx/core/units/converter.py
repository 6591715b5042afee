"""
Unit Conversion Engine

Routes every conversion through the category's canonical unit: the source
value is scaled into the canonical unit, then out of it into the target
unit. Temperature uses an affine transform; luminous quantities only
support the identity conversion.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from ..data_structures import ConversionRequest, ConversionResult
from ..exceptions import UnsupportedConversionError, ValidationError
from ...infrastructure.logging.cli_logger import get_logger
from .definitions import (
    CONVERSION_KINDS,
    ConversionKind,
    UnitDefinition,
)

Numeric = Union[float, np.ndarray]

logger = get_logger(__name__)


def _convert_multiplicative(value: Numeric, from_unit: UnitDefinition,
                            to_unit: UnitDefinition) -> Optional[Numeric]:
    canonical = value * from_unit.factor
    return canonical / to_unit.factor


def _convert_affine(value: Numeric, from_unit: UnitDefinition,
                    to_unit: UnitDefinition) -> Optional[Numeric]:
    return to_unit.from_canonical(from_unit.to_canonical(value))


def _convert_identity_only(value: Numeric, from_unit: UnitDefinition,
                           to_unit: UnitDefinition) -> Optional[Numeric]:
    # Only reached for distinct units
    return None


_STRATEGIES: Dict[ConversionKind, Callable[[Numeric, UnitDefinition, UnitDefinition], Optional[Numeric]]] = {
    ConversionKind.MULTIPLICATIVE: _convert_multiplicative,
    ConversionKind.AFFINE: _convert_affine,
    ConversionKind.IDENTITY_ONLY: _convert_identity_only,
}


@lru_cache(maxsize=256)
def _scalar_factor(from_unit: UnitDefinition, to_unit: UnitDefinition) -> float:
    return from_unit.factor / to_unit.factor


class UnitConverter:
    """
    Category-aware unit converter

    Conversions are pure functions of their inputs; the converter only
    keeps usage statistics for diagnostics.
    """

    def __init__(self):
        self._stats = {
            'conversions': 0,
            'identity_shortcuts': 0,
            'unsupported': 0,
        }

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """
        Convert the request's value into its target unit

        Args:
            request: Validated conversion request

        Returns:
            ConversionResult with the converted value, or with no value
            when the category defines no formula for the unit pair
        """
        self._stats['conversions'] += 1

        if request.is_identity:
            self._stats['identity_shortcuts'] += 1
            logger.debug("Identity conversion for %s, value returned unchanged", request.from_unit)
            return ConversionResult(request, request.value)

        kind = CONVERSION_KINDS[request.category]
        value = _STRATEGIES[kind](request.value, request.from_unit, request.to_unit)

        if value is None:
            self._stats['unsupported'] += 1
            logger.debug("No %s formula from %s to %s", request.category.value,
                         request.from_unit, request.to_unit)
        else:
            logger.debug("Converted %s %s -> %s via %s path", request.category.value,
                         request.from_unit, request.to_unit, kind.value)

        return ConversionResult(request, value)

    def convert_value(self, value: Numeric, from_unit: UnitDefinition,
                      to_unit: UnitDefinition) -> Optional[Numeric]:
        """
        Convert a value between two units of the same category

        Args:
            value: Value(s) to convert
            from_unit: Source unit
            to_unit: Target unit

        Returns:
            Converted value(s), or None for an unsupported pair

        Raises:
            ValidationError: If the units belong to different categories
        """
        if from_unit.category is not to_unit.category:
            raise ValidationError(
                f"Cannot convert {from_unit.category.value} unit '{from_unit}' "
                f"to {to_unit.category.value} unit '{to_unit}'"
            )

        request = ConversionRequest(from_unit.category, value, from_unit, to_unit)
        return self.convert(request).value

    def get_conversion_factor(self, from_unit: UnitDefinition, to_unit: UnitDefinition) -> float:
        """
        Get the scalar factor between two units

        Args:
            from_unit: Source unit
            to_unit: Target unit

        Returns:
            Multiplication factor taking from_unit values to to_unit

        Raises:
            ValidationError: If the units belong to different categories
            UnsupportedConversionError: If the pair is not related by a scalar
        """
        if from_unit.category is not to_unit.category:
            raise ValidationError(
                f"Cannot relate {from_unit.category.value} unit '{from_unit}' "
                f"to {to_unit.category.value} unit '{to_unit}'"
            )

        if from_unit == to_unit:
            return 1.0

        kind = CONVERSION_KINDS[from_unit.category]
        if kind is not ConversionKind.MULTIPLICATIVE:
            raise UnsupportedConversionError(
                f"No scalar factor relates '{from_unit}' and '{to_unit}' ({kind.value} category)",
                from_unit.token, to_unit.token
            )

        return _scalar_factor(from_unit, to_unit)

    def get_statistics(self) -> Dict[str, Any]:
        """Get converter usage statistics"""
        stats = self._stats.copy()
        cache_info = _scalar_factor.cache_info()
        stats.update({
            'factor_cache_hits': cache_info.hits,
            'factor_cache_misses': cache_info.misses,
        })
        return stats

    def reset_statistics(self):
        """Reset usage statistics"""
        for key in self._stats:
            self._stats[key] = 0
