"""
Unit Definitions for convertx

Closed per-category unit tables. Every category routes its conversions
through a single canonical unit (the first unit declared for it), so each
unit only needs one factor relative to that canonical unit.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from ..exceptions import InvalidUnitError, ValidationError


class Category(Enum):
    """Physical quantity categories (value doubles as the CLI subcommand)"""
    LENGTH = "length"
    TEMPERATURE = "temperature"
    MASS = "mass"
    DATA_RATE = "datarate"
    AREA = "area"
    VOLUME = "volume"
    SPEED = "speed"
    PRESSURE = "pressure"
    CURRENT = "current"
    ENERGY = "energy"
    POWER = "power"
    FREQUENCY = "frequency"
    ANGLE = "angle"
    FORCE = "force"
    LUMINOUS = "luminous"
    MAGNETIC = "magnetic"
    RADIOACTIVITY = "radioactivity"
    CAPACITANCE = "capacitance"
    INDUCTANCE = "inductance"
    CONDUCTANCE = "conductance"
    CHARGE = "charge"
    VOLTAGE = "voltage"
    RESISTANCE = "resistance"
    ILLUMINANCE = "illuminance"
    AMOUNT = "amount"


class ConversionKind(Enum):
    """How values move between units of a category"""
    MULTIPLICATIVE = "multiplicative"
    AFFINE = "affine"
    IDENTITY_ONLY = "identity_only"


@dataclass(frozen=True)
class UnitDefinition:
    """
    Definition of a unit within one category

    A value expressed in this unit maps to the category's canonical unit
    as ``(value + offset) * factor``. Only temperature uses a non-zero offset.
    """
    token: str  # Canonical lowercase token (e.g., "kilometers", "psi")
    name: str  # Full name (e.g., "kilometer", "pound per square inch")
    category: Category
    factor: float = 1.0  # Multiplier to the canonical unit
    offset: float = 0.0  # Added before the factor is applied

    def __post_init__(self):
        """Validate unit definition after creation"""
        if not math.isfinite(self.factor) or self.factor <= 0:
            raise ValueError(f"Conversion factor must be positive and finite, got {self.factor}")

        if not math.isfinite(self.offset):
            raise ValueError(f"Offset must be finite, got {self.offset}")

        if self.token != self.token.lower():
            raise ValueError(f"Unit token must be lowercase, got '{self.token}'")

    def to_canonical(self, value):
        """Express value (in this unit) in the canonical unit"""
        if self.offset:
            return (value + self.offset) * self.factor
        return value * self.factor

    def from_canonical(self, value):
        """Express a canonical-unit value in this unit"""
        if self.offset:
            return value / self.factor - self.offset
        return value / self.factor

    def __str__(self):
        return self.token


def _units(category: Category, *entries) -> Tuple[UnitDefinition, ...]:
    """Build the unit tuple for a category; the first entry is canonical"""
    return tuple(UnitDefinition(token, name, category, *rest) for token, name, *rest in entries)


# ===================================================================
# UNIT TABLES
# ===================================================================

FEET_IN_METER = 3.28084
INCHES_IN_METER = 39.3701
LB_IN_KG = 2.20462
OZ_IN_KG = 35.274
KELVIN_OFFSET = 273.15

_UNIT_TABLES: Dict[Category, Tuple[UnitDefinition, ...]] = {
    Category.LENGTH: _units(
        Category.LENGTH,
        ('meters', 'meter'),
        ('feet', 'foot', 1.0 / FEET_IN_METER),
        ('inches', 'inch', 1.0 / INCHES_IN_METER),
        ('kilometers', 'kilometer', 1000.0),
    ),

    # Celsius is canonical; offsets are applied before the factor
    Category.TEMPERATURE: _units(
        Category.TEMPERATURE,
        ('c', 'degree celsius'),
        ('f', 'degree fahrenheit', 5.0 / 9.0, -32.0),
        ('k', 'kelvin', 1.0, -KELVIN_OFFSET),
    ),

    Category.MASS: _units(
        Category.MASS,
        ('kg', 'kilogram'),
        ('lb', 'pound', 1.0 / LB_IN_KG),
        ('oz', 'ounce', 1.0 / OZ_IN_KG),
    ),

    Category.DATA_RATE: _units(
        Category.DATA_RATE,
        ('bps', 'bit per second'),
        ('kbps', 'kilobit per second', 1e3),
        ('mbps', 'megabit per second', 1e6),
        ('gbps', 'gigabit per second', 1e9),
    ),

    Category.AREA: _units(
        Category.AREA,
        ('sqm', 'square meter'),
        ('sqft', 'square foot', 1.0 / 10.7639),
        ('acres', 'acre', 4046.85642),
        ('hectares', 'hectare', 10000.0),
    ),

    Category.VOLUME: _units(
        Category.VOLUME,
        ('liters', 'liter'),
        ('milliliters', 'milliliter', 0.001),
        ('cubic_meters', 'cubic meter', 1000.0),
        ('cubic_inches', 'cubic inch', 1.0 / 61.0237),
        ('gallons', 'US gallon', 3.78541),
    ),

    Category.SPEED: _units(
        Category.SPEED,
        ('mps', 'meter per second'),
        ('kph', 'kilometer per hour', 1.0 / 3.6),
        ('mph', 'mile per hour', 0.44704),
        ('knots', 'knot', 0.514444),
    ),

    Category.PRESSURE: _units(
        Category.PRESSURE,
        ('pa', 'pascal'),
        ('bar', 'bar', 100000.0),
        ('atm', 'standard atmosphere', 101325.0),
        ('psi', 'pound per square inch', 6894.76),
    ),

    Category.CURRENT: _units(
        Category.CURRENT,
        ('amperes', 'ampere'),
        ('milliamperes', 'milliampere', 1e-3),
        ('microamperes', 'microampere', 1e-6),
        ('kiloamperes', 'kiloampere', 1e3),
    ),

    Category.ENERGY: _units(
        Category.ENERGY,
        ('joules', 'joule'),
        ('kilojoules', 'kilojoule', 1e3),
        ('calories', 'thermochemical calorie', 4.184),
        ('kilocalories', 'thermochemical kilocalorie', 4184.0),
        ('watt_hours', 'watt hour', 3600.0),
        ('kilowatt_hours', 'kilowatt hour', 3.6e6),
        ('electronvolts', 'electronvolt', 1.602176634e-19),
        ('btu', 'British thermal unit', 1055.06),
    ),

    Category.POWER: _units(
        Category.POWER,
        ('watts', 'watt'),
        ('kilowatts', 'kilowatt', 1e3),
        ('megawatts', 'megawatt', 1e6),
        ('horsepower', 'mechanical horsepower', 745.7),
    ),

    Category.FREQUENCY: _units(
        Category.FREQUENCY,
        ('hertz', 'hertz'),
        ('kilohertz', 'kilohertz', 1e3),
        ('megahertz', 'megahertz', 1e6),
        ('gigahertz', 'gigahertz', 1e9),
        ('rpm', 'revolution per minute', 1.0 / 60.0),
    ),

    Category.ANGLE: _units(
        Category.ANGLE,
        ('radians', 'radian'),
        ('degrees', 'degree', math.pi / 180.0),
        ('gradians', 'gradian', math.pi / 200.0),
        ('turns', 'turn', 2.0 * math.pi),
    ),

    Category.FORCE: _units(
        Category.FORCE,
        ('newtons', 'newton'),
        ('kilonewtons', 'kilonewton', 1e3),
        ('dynes', 'dyne', 1e-5),
        ('pound_force', 'pound-force', 4.4482216152605),
    ),

    # Intensity, flux and illuminance share no scalar factor
    Category.LUMINOUS: _units(
        Category.LUMINOUS,
        ('candela', 'candela'),
        ('lumen', 'lumen'),
        ('lux', 'lux'),
    ),

    Category.MAGNETIC: _units(
        Category.MAGNETIC,
        ('tesla', 'tesla'),
        ('millitesla', 'millitesla', 1e-3),
        ('gauss', 'gauss', 1e-4),
    ),

    Category.RADIOACTIVITY: _units(
        Category.RADIOACTIVITY,
        ('becquerels', 'becquerel'),
        ('rutherfords', 'rutherford', 1e6),
        ('curies', 'curie', 3.7e10),
    ),

    Category.CAPACITANCE: _units(Category.CAPACITANCE, ('farads', 'farad')),
    Category.INDUCTANCE: _units(Category.INDUCTANCE, ('henries', 'henry')),
    Category.CONDUCTANCE: _units(Category.CONDUCTANCE, ('siemens', 'siemens')),
    Category.CHARGE: _units(Category.CHARGE, ('coulombs', 'coulomb')),
    Category.VOLTAGE: _units(Category.VOLTAGE, ('volts', 'volt')),
    Category.RESISTANCE: _units(Category.RESISTANCE, ('ohms', 'ohm')),

    Category.ILLUMINANCE: _units(
        Category.ILLUMINANCE,
        ('lux', 'lux'),
        ('phot', 'phot', 1e4),
        ('foot_candles', 'foot-candle', 10.763910416709722),
    ),

    Category.AMOUNT: _units(Category.AMOUNT, ('moles', 'mole')),
}

UNIT_TABLES: Mapping[Category, Tuple[UnitDefinition, ...]] = MappingProxyType(_UNIT_TABLES)

CONVERSION_KINDS: Mapping[Category, ConversionKind] = MappingProxyType({
    category: (ConversionKind.AFFINE if category is Category.TEMPERATURE
               else ConversionKind.IDENTITY_ONLY if category is Category.LUMINOUS
               else ConversionKind.MULTIPLICATIVE)
    for category in Category
})

CATEGORY_DESCRIPTIONS: Mapping[Category, str] = MappingProxyType({
    Category.LENGTH: "Convert length units.",
    Category.TEMPERATURE: "Convert temperature units.",
    Category.MASS: "Convert mass/weight units.",
    Category.DATA_RATE: "Convert data rate units.",
    Category.AREA: "Convert area units.",
    Category.VOLUME: "Convert volume units.",
    Category.SPEED: "Convert speed units.",
    Category.PRESSURE: "Convert pressure units.",
    Category.CURRENT: "Convert electric current units.",
    Category.ENERGY: "Convert energy units.",
    Category.POWER: "Convert power units.",
    Category.FREQUENCY: "Convert frequency units.",
    Category.ANGLE: "Convert angle units.",
    Category.FORCE: "Convert force units.",
    Category.LUMINOUS: "Convert luminous intensity/flux units (identity only).",
    Category.MAGNETIC: "Convert magnetic flux density units.",
    Category.RADIOACTIVITY: "Convert radioactivity units.",
    Category.CAPACITANCE: "Convert capacitance units.",
    Category.INDUCTANCE: "Convert inductance units.",
    Category.CONDUCTANCE: "Convert conductance units.",
    Category.CHARGE: "Convert electric charge units.",
    Category.VOLTAGE: "Convert voltage units.",
    Category.RESISTANCE: "Convert resistance units.",
    Category.ILLUMINANCE: "Convert illuminance units.",
    Category.AMOUNT: "Convert amount of substance units.",
})


def _validate_tables() -> None:
    """Check the closed-table invariants once at import time"""
    for category in Category:
        units = _UNIT_TABLES.get(category)
        if not units:
            raise ValueError(f"No units defined for category '{category.value}'")

        canonical = units[0]
        if canonical.factor != 1.0 or canonical.offset != 0.0:
            raise ValueError(f"Canonical unit '{canonical.token}' of '{category.value}' must have factor 1.0")

        tokens = [unit.token for unit in units]
        if len(set(tokens)) != len(tokens):
            raise ValueError(f"Duplicate unit tokens in '{category.value}': {tokens}")

        for unit in units:
            if unit.category is not category:
                raise ValueError(f"Unit '{unit.token}' filed under the wrong category '{category.value}'")


_validate_tables()


# ===================================================================
# REGISTRY FUNCTIONS
# ===================================================================

def parse_category(name: Union[str, Category]) -> Category:
    """
    Resolve a category from its name

    Args:
        name: Category or its string value (case-insensitive)

    Returns:
        Matching Category

    Raises:
        ValidationError: If no category has that name
    """
    if isinstance(name, Category):
        return name

    try:
        return Category(str(name).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown category '{name}'", field_name='category', value=name)


def list_units(category: Union[str, Category]) -> Tuple[UnitDefinition, ...]:
    """Units of a category in declaration order"""
    return UNIT_TABLES[parse_category(category)]


def list_variants(category: Union[str, Category]) -> Tuple[str, ...]:
    """Unit tokens of a category in declaration order"""
    return tuple(unit.token for unit in list_units(category))


def get_canonical_unit(category: Union[str, Category]) -> UnitDefinition:
    """Unit every conversion in the category is routed through"""
    return list_units(category)[0]


def get_conversion_kind(category: Union[str, Category]) -> ConversionKind:
    return CONVERSION_KINDS[parse_category(category)]


def parse_unit(category: Union[str, Category], token: str) -> UnitDefinition:
    """
    Look up a unit by token within a category

    Args:
        category: Category (or name) to search
        token: Unit token, matched case-insensitively

    Returns:
        UnitDefinition for the token

    Raises:
        InvalidUnitError: If the token is not defined for the category
    """
    category = parse_category(category)
    normalized = str(token).strip().lower()

    for unit in UNIT_TABLES[category]:
        if unit.token == normalized:
            return unit

    choices = list_variants(category)
    raise InvalidUnitError(
        f"Invalid {category.value} unit '{token}' (choose from {', '.join(choices)})",
        category=category.value,
        token=token,
        choices=choices
    )


def format_unit(unit: UnitDefinition) -> str:
    """Canonical token for a unit"""
    return unit.token
