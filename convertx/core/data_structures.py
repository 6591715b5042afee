"""
Core Data Structures for convertx

Immutable request/result containers passed between the CLI layer,
the conversion engine and the formatter.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import numpy as np

from .exceptions import ValidationError, UnsupportedConversionError
from .units.definitions import Category, UnitDefinition, parse_category, parse_unit

Numeric = Union[float, np.ndarray]


@dataclass(frozen=True)
class ConversionRequest:
    """
    A single conversion to perform

    Both units must belong to ``category``; mixing categories is a
    programming error rather than a user input error.
    """
    category: Category
    value: Numeric
    from_unit: UnitDefinition
    to_unit: UnitDefinition

    def __post_init__(self):
        """Validate request after creation"""
        if not isinstance(self.category, Category):
            object.__setattr__(self, 'category', parse_category(self.category))

        for field_name in ('from_unit', 'to_unit'):
            unit = getattr(self, field_name)
            if not isinstance(unit, UnitDefinition):
                raise ValidationError(f"'{field_name}' must be a UnitDefinition", field_name, unit)
            if unit.category is not self.category:
                raise ValidationError(
                    f"Unit '{unit.token}' belongs to {unit.category.value}, not {self.category.value}",
                    field_name, unit.token
                )

    @classmethod
    def from_tokens(cls, category: Union[str, Category], value: Numeric,
                    from_token: str, to_token: str) -> 'ConversionRequest':
        """Create a request from raw unit tokens"""
        category = parse_category(category)
        return cls(category, value, parse_unit(category, from_token), parse_unit(category, to_token))

    @property
    def is_identity(self) -> bool:
        return self.from_unit == self.to_unit

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'category': self.category.value,
            'value': self.value.tolist() if isinstance(self.value, np.ndarray) else self.value,
            'from_unit': self.from_unit.token,
            'to_unit': self.to_unit.token,
        }


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion; ``value`` is None for an unsupported pair"""
    request: ConversionRequest
    value: Optional[Numeric] = None

    @property
    def supported(self) -> bool:
        return self.value is not None

    def unwrap(self) -> Numeric:
        """
        Get the converted value

        Raises:
            UnsupportedConversionError: If no formula exists for the unit pair
        """
        if self.value is None:
            raise UnsupportedConversionError(
                f"Conversion from {self.request.from_unit} to {self.request.to_unit} is not supported",
                self.request.from_unit.token,
                self.request.to_unit.token
            )
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        value = self.value.tolist() if isinstance(self.value, np.ndarray) else self.value
        return {
            'request': self.request.to_dict(),
            'supported': self.supported,
            'value': value,
        }
