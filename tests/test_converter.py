"""Unit tests for the conversion engine."""

import itertools

import numpy as np
import pytest

from convertx.core.data_structures import ConversionRequest, ConversionResult
from convertx.core.exceptions import UnsupportedConversionError, ValidationError
from convertx.core.units import (
    Category,
    ConversionKind,
    UnitConverter,
    convert,
    convert_value,
    get_conversion_kind,
    list_units,
    parse_unit,
)


def _unit(category, token):
    return parse_unit(category, token)


def _supported_pairs():
    for category in Category:
        if get_conversion_kind(category) is ConversionKind.IDENTITY_ONLY:
            continue
        for from_unit, to_unit in itertools.permutations(list_units(category), 2):
            yield pytest.param(from_unit, to_unit, id=f"{category.value}-{from_unit}-{to_unit}")


@pytest.fixture
def converter():
    return UnitConverter()


class TestKnownValues:
    """Tests against reference values."""

    @pytest.mark.parametrize("category, value, from_token, to_token, expected, tol", [
        ("length", 1.0, "meters", "feet", 3.28084, 1e-5),
        ("length", 3.28084, "feet", "meters", 1.0, 1e-5),
        ("length", 1.0, "kilometers", "meters", 1000.0, 1e-5),
        ("length", 12.0, "inches", "feet", 1.0, 1e-5),
        ("temperature", 0.0, "c", "f", 32.0, 1e-6),
        ("temperature", 32.0, "f", "c", 0.0, 1e-6),
        ("temperature", 100.0, "c", "k", 373.15, 1e-2),
        ("temperature", 0.0, "k", "c", -273.15, 1e-2),
        ("mass", 1.0, "kg", "lb", 2.20462, 1e-5),
        ("mass", 2.20462, "lb", "kg", 1.0, 1e-5),
        ("mass", 1.0, "kg", "oz", 35.274, 1e-3),
        ("datarate", 1_000_000.0, "bps", "mbps", 1.0, 1e-8),
        ("datarate", 1.0, "mbps", "bps", 1_000_000.0, 1e-8),
        ("area", 1.0, "acres", "sqm", 4046.85642, 1e-4),
        ("area", 1.0, "sqm", "acres", 0.000247105, 1e-7),
        ("area", 1.0, "hectares", "acres", 2.47105, 1e-5),
        ("volume", 1.0, "gallons", "liters", 3.78541, 1e-5),
        ("volume", 1.0, "liters", "gallons", 0.264172, 1e-6),
        ("volume", 1000.0, "milliliters", "liters", 1.0, 1e-6),
        ("speed", 1.0, "mps", "kph", 3.6, 1e-6),
        ("speed", 3.6, "kph", "mps", 1.0, 1e-6),
        ("speed", 1.0, "knots", "mph", 1.15078, 1e-5),
        ("pressure", 1.0, "atm", "pa", 101325.0, 1e-3),
        ("pressure", 1.0, "psi", "bar", 0.0689476, 1e-6),
        ("pressure", 1.0, "bar", "psi", 14.5038, 1e-4),
        ("energy", 1.0, "kilowatt_hours", "joules", 3.6e6, 1e-6),
        ("energy", 1.0, "kilocalories", "kilojoules", 4.184, 1e-9),
        ("power", 1.0, "horsepower", "watts", 745.7, 1e-9),
        ("frequency", 60.0, "rpm", "hertz", 1.0, 1e-12),
        ("angle", 180.0, "degrees", "radians", np.pi, 1e-12),
        ("angle", 1.0, "turns", "degrees", 360.0, 1e-9),
        ("force", 1.0, "kilonewtons", "newtons", 1000.0, 1e-9),
        ("current", 1500.0, "milliamperes", "amperes", 1.5, 1e-12),
        ("magnetic", 1.0, "tesla", "gauss", 10000.0, 1e-6),
        ("radioactivity", 1.0, "curies", "becquerels", 3.7e10, 1.0),
        ("illuminance", 1.0, "foot_candles", "lux", 10.7639104, 1e-6),
    ])
    def test_reference_value(self, category, value, from_token, to_token, expected, tol):
        assert convert_value(category, value, from_token, to_token) == pytest.approx(expected, abs=tol)


class TestIdentity:
    """Tests for same-unit conversions."""

    @pytest.mark.parametrize("category", list(Category))
    def test_identity_exact(self, converter, category):
        for unit in list_units(category):
            assert converter.convert_value(0.1 + 0.2, unit, unit) == 0.1 + 0.2

    def test_identity_returns_same_object(self, converter):
        values = np.array([1.0, 2.0])
        meters = _unit(Category.LENGTH, "meters")
        assert converter.convert_value(values, meters, meters) is values

    def test_identity_counted(self, converter):
        kelvin = _unit(Category.TEMPERATURE, "k")
        converter.convert_value(300.0, kelvin, kelvin)
        assert converter.get_statistics()['identity_shortcuts'] == 1


class TestRoundTrip:
    """Tests for A -> B -> A conversions."""

    @pytest.mark.parametrize("from_unit, to_unit", list(_supported_pairs()))
    def test_round_trip(self, converter, from_unit, to_unit):
        x = 123.456
        there = converter.convert_value(x, from_unit, to_unit)
        back = converter.convert_value(there, to_unit, from_unit)
        assert back == pytest.approx(x, rel=1e-5)

    def test_kelvin_round_trip(self, converter):
        kelvin = _unit(Category.TEMPERATURE, "k")
        fahrenheit = _unit(Category.TEMPERATURE, "f")
        there = converter.convert_value(-40.0, fahrenheit, kelvin)
        assert converter.convert_value(there, kelvin, fahrenheit) == pytest.approx(-40.0, abs=1e-2)

    def test_path_consistency(self, converter):
        """Feet -> inches equals feet -> kilometers -> inches."""
        feet = _unit(Category.LENGTH, "feet")
        inches = _unit(Category.LENGTH, "inches")
        kilometers = _unit(Category.LENGTH, "kilometers")
        direct = converter.convert_value(7.0, feet, inches)
        via = converter.convert_value(converter.convert_value(7.0, feet, kilometers), kilometers, inches)
        assert direct == pytest.approx(via, rel=1e-12)


class TestLinearity:
    """Tests for scaling behaviour."""

    @pytest.mark.parametrize("category", [
        c for c in Category if get_conversion_kind(c) is ConversionKind.MULTIPLICATIVE
    ])
    def test_scaling(self, converter, category):
        units = list_units(category)
        from_unit, to_unit = units[-1], units[0]
        base = converter.convert_value(2.5, from_unit, to_unit)
        assert converter.convert_value(2.5 * 8, from_unit, to_unit) == pytest.approx(base * 8, rel=1e-12)

    def test_temperature_is_affine(self, converter):
        celsius = _unit(Category.TEMPERATURE, "c")
        fahrenheit = _unit(Category.TEMPERATURE, "f")
        assert converter.convert_value(20.0, celsius, fahrenheit) != 2 * converter.convert_value(10.0, celsius, fahrenheit)
        assert converter.convert_value(-40.0, celsius, fahrenheit) == pytest.approx(-40.0)

    def test_negative_values_accepted(self, converter):
        kg = _unit(Category.MASS, "kg")
        lb = _unit(Category.MASS, "lb")
        assert converter.convert_value(-1.0, kg, lb) == pytest.approx(-2.20462)


class TestUnsupported:
    """Tests for the luminous identity-only category."""

    @pytest.mark.parametrize("from_token, to_token", [
        ("candela", "lumen"), ("lumen", "lux"), ("lux", "candela"),
    ])
    def test_cross_unit_unsupported(self, from_token, to_token):
        result = convert(Category.LUMINOUS, 1.0, from_token, to_token)
        assert isinstance(result, ConversionResult)
        assert not result.supported
        assert result.value is None

    def test_same_unit_supported(self):
        assert convert(Category.LUMINOUS, 5.0, "lumen", "lumen").value == 5.0

    def test_unwrap_raises(self):
        result = convert(Category.LUMINOUS, 1.0, "candela", "lumen")
        with pytest.raises(UnsupportedConversionError) as exc_info:
            result.unwrap()
        assert exc_info.value.from_unit == "candela"
        assert exc_info.value.to_unit == "lumen"

    def test_convert_value_raises(self):
        with pytest.raises(UnsupportedConversionError):
            convert_value(Category.LUMINOUS, 1.0, "candela", "lux")

    def test_unsupported_counted(self, converter):
        request = ConversionRequest.from_tokens(Category.LUMINOUS, 1.0, "candela", "lumen")
        converter.convert(request)
        assert converter.get_statistics()['unsupported'] == 1


class TestArrays:
    """Tests for numpy array values."""

    def test_array_conversion(self, converter):
        values = np.array([0.0, 1.0, 2.5])
        result = converter.convert_value(values, _unit(Category.LENGTH, "kilometers"),
                                         _unit(Category.LENGTH, "meters"))
        np.testing.assert_allclose(result, [0.0, 1000.0, 2500.0])

    def test_array_temperature(self, converter):
        values = np.array([32.0, 212.0])
        result = converter.convert_value(values, _unit(Category.TEMPERATURE, "f"),
                                         _unit(Category.TEMPERATURE, "c"))
        np.testing.assert_allclose(result, [0.0, 100.0], atol=1e-9)

    def test_result_to_dict(self):
        result = convert(Category.MASS, np.array([1.0, 2.0]), "kg", "kg")
        assert result.to_dict() == {
            'request': {'category': 'mass', 'value': [1.0, 2.0], 'from_unit': 'kg', 'to_unit': 'kg'},
            'supported': True,
            'value': [1.0, 2.0],
        }


class TestConversionFactor:
    """Tests for scalar factor lookup."""

    def test_factor(self, converter):
        factor = converter.get_conversion_factor(_unit(Category.PRESSURE, "atm"), _unit(Category.PRESSURE, "pa"))
        assert factor == pytest.approx(101325.0)

    def test_identity_factor(self, converter):
        psi = _unit(Category.PRESSURE, "psi")
        assert converter.get_conversion_factor(psi, psi) == 1.0

    def test_affine_has_no_factor(self, converter):
        with pytest.raises(UnsupportedConversionError):
            converter.get_conversion_factor(_unit(Category.TEMPERATURE, "c"), _unit(Category.TEMPERATURE, "k"))

    def test_luminous_has_no_factor(self, converter):
        with pytest.raises(UnsupportedConversionError):
            converter.get_conversion_factor(_unit(Category.LUMINOUS, "candela"), _unit(Category.LUMINOUS, "lux"))


class TestValidation:
    """Tests for mixed-category requests."""

    def test_mixed_categories(self, converter):
        with pytest.raises(ValidationError):
            converter.convert_value(1.0, _unit(Category.LENGTH, "meters"), _unit(Category.MASS, "kg"))

    def test_request_category_mismatch(self):
        with pytest.raises(ValidationError):
            ConversionRequest(Category.MASS, 1.0, _unit(Category.LENGTH, "meters"), _unit(Category.LENGTH, "feet"))

    def test_request_category_by_name(self):
        request = ConversionRequest("length", 1.0, _unit(Category.LENGTH, "meters"), _unit(Category.LENGTH, "feet"))
        assert request.category is Category.LENGTH

    def test_mixed_factor(self, converter):
        with pytest.raises(ValidationError):
            converter.get_conversion_factor(_unit(Category.POWER, "watts"), _unit(Category.ENERGY, "joules"))


class TestStatistics:
    """Tests for converter statistics."""

    def test_counts_and_reset(self, converter):
        meters = _unit(Category.LENGTH, "meters")
        feet = _unit(Category.LENGTH, "feet")
        converter.convert_value(1.0, meters, feet)
        converter.convert_value(1.0, feet, feet)

        stats = converter.get_statistics()
        assert stats['conversions'] == 2
        assert stats['identity_shortcuts'] == 1
        assert 'factor_cache_hits' in stats

        converter.reset_statistics()
        assert converter.get_statistics()['conversions'] == 0
