#!/usr/bin/env python3
"""
Temperature conversion utilities for the converter form
Handles conversion between Celsius and Fahrenheit and the form field values
"""

import math
from enum import Enum
from typing import Optional, Union

DEFAULT_CELSIUS = 100.0
DEFAULT_FAHRENHEIT = 212.0


class TemperatureUnit(Enum):
    """Which of the two form fields was edited last"""
    CELSIUS = 'Celsius'
    FAHRENHEIT = 'Fahrenheit'
    NONE = 'None'

    @classmethod
    def parse(cls, value: Optional[str]) -> 'TemperatureUnit':
        """Parse a last-edited indicator, unknown values map to NONE"""
        if value is None:
            return cls.NONE
        value = value.strip().lower()
        if value in ('celsius', 'c'):
            return cls.CELSIUS
        if value in ('fahrenheit', 'f'):
            return cls.FAHRENHEIT
        return cls.NONE


class TemperatureConversion:
    """A Celsius/Fahrenheit pair plus the field the user edited last"""

    def __init__(self, celsius: float = math.nan, fahrenheit: float = math.nan,
                 last_edited_unit: TemperatureUnit = TemperatureUnit.NONE):
        self.celsius = celsius
        self.fahrenheit = fahrenheit
        self.last_edited_unit = last_edited_unit

    @classmethod
    def default(cls) -> 'TemperatureConversion':
        """Pair shown on the first page load"""
        return cls(DEFAULT_CELSIUS, DEFAULT_FAHRENHEIT, TemperatureUnit.NONE)

    def copy(self, **changes) -> 'TemperatureConversion':
        values = {
            'celsius': self.celsius,
            'fahrenheit': self.fahrenheit,
            'last_edited_unit': self.last_edited_unit,
        }
        values.update(changes)
        return TemperatureConversion(**values)

    def to_dict(self) -> dict:
        """JSON-friendly view, NaN and infinities become None"""
        return {
            'celsius': self.celsius if math.isfinite(self.celsius) else None,
            'fahrenheit': self.fahrenheit if math.isfinite(self.fahrenheit) else None,
            'last_edited_unit': self.last_edited_unit.value,
        }

    def __eq__(self, other):
        if not isinstance(other, TemperatureConversion):
            return NotImplemented
        return (_same_value(self.celsius, other.celsius)
                and _same_value(self.fahrenheit, other.fahrenheit)
                and self.last_edited_unit is other.last_edited_unit)

    def __repr__(self):
        return (f"TemperatureConversion(celsius={self.celsius!r}, "
                f"fahrenheit={self.fahrenheit!r}, "
                f"last_edited_unit={self.last_edited_unit.name})")


def _same_value(a: float, b: float) -> bool:
    # NaN marks an empty field, so two empty fields compare equal
    if math.isnan(a) and math.isnan(b):
        return True
    return a == b


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit

    Args:
        celsius: Temperature in degrees Celsius

    Returns:
        Temperature in degrees Fahrenheit
    """
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius

    Args:
        fahrenheit: Temperature in degrees Fahrenheit

    Returns:
        Temperature in degrees Celsius
    """
    return (fahrenheit - 32) * 5 / 9


def convert(conversion: TemperatureConversion) -> TemperatureConversion:
    """Recompute the field the user did not edit

    Args:
        conversion: Current field values and the field edited last

    Returns:
        A new TemperatureConversion. When no field was edited, or the edited
        field holds NaN, the values come back unchanged.
    """
    unit = conversion.last_edited_unit
    if unit is TemperatureUnit.CELSIUS and not math.isnan(conversion.celsius):
        return conversion.copy(fahrenheit=celsius_to_fahrenheit(conversion.celsius))
    elif unit is TemperatureUnit.FAHRENHEIT and not math.isnan(conversion.fahrenheit):
        return conversion.copy(celsius=fahrenheit_to_celsius(conversion.fahrenheit))
    return conversion.copy()


def parse_field_value(raw: Optional[str]) -> float:
    """Parse a submitted form field

    Args:
        raw: Field value as submitted, possibly missing or blank

    Returns:
        The number, or NaN when the field is blank

    Raises:
        ValueError: If the field holds something that is not a number
    """
    if raw is None or not raw.strip():
        return math.nan
    return float(raw.strip())


def format_field_value(value: float) -> str:
    """Format a number for a form field, NaN renders as an empty field"""
    if math.isnan(value):
        return ''
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def get_unit_symbol(unit: Union[TemperatureUnit, str]) -> str:
    """Get the display symbol for a temperature unit

    Args:
        unit: TemperatureUnit or unit letter ('C' or 'F')

    Returns:
        Display symbol ('°C' or '°F')
    """
    if isinstance(unit, TemperatureUnit):
        unit = unit.value
    if unit.upper() in ('F', 'FAHRENHEIT'):
        return '°F'
    return '°C'  # Default fallback


def format_temperature(temp: float, unit: Union[TemperatureUnit, str], precision: int = 1) -> str:
    """Format temperature value with unit symbol

    Args:
        temp: Temperature value
        unit: TemperatureUnit or unit letter ('C' or 'F')
        precision: Number of decimal places (default 1)

    Returns:
        Formatted temperature string (e.g., "212.0°F")
    """
    if math.isnan(temp):
        return '—'
    symbol = get_unit_symbol(unit)
    return f"{temp:.{precision}f}{symbol}"
