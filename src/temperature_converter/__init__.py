"""
Temperature converter
Flask form that converts temperatures between Celsius and Fahrenheit
"""

__version__ = '1.0.0'
