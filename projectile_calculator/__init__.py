"""
Projectile Motion Calculator
============================
An interactive console calculator for drag-free projectile motion on flat
ground. From initial speed, launch angle and gravitational acceleration it
derives:
  - Range
  - Time of flight
  - Maximum height

using the closed-form kinematic equations, behind a numbered text menu.
"""

from .constants import DEFAULT_GRAVITY, MIN_ANGLE, MAX_ANGLE
from .errors import CalculatorError, InvalidNumberError
from .projectile import Projectile, to_radians
from .validation import (
    parse_number, parse_choice,
    normalize_velocity, clamp_angle, validate_gravity,
)
from .calculator import Calculator
from .cli import main

__version__ = "1.0.0"
__all__ = [
    'Projectile', 'Calculator', 'to_radians',
    'CalculatorError', 'InvalidNumberError',
    'parse_number', 'parse_choice',
    'normalize_velocity', 'clamp_angle', 'validate_gravity',
    'DEFAULT_GRAVITY', 'MIN_ANGLE', 'MAX_ANGLE',
    'main',
]
