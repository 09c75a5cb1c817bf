"""
Input Validation
================
Policies applied to values typed at the calculator prompts before they
reach the Projectile model:
  - negative velocity   -> absolute value
  - angle outside 0-90  -> clamped to the nearest bound
  - gravity <= 0        -> reset to the default

Each policy returns ``(value, adjusted)`` so the caller decides what to
tell the user.
"""

import logging
from typing import Tuple

import numpy as np

from .constants import MIN_ANGLE, MAX_ANGLE, DEFAULT_GRAVITY
from .errors import InvalidNumberError

logger = logging.getLogger(__name__)


def parse_number(text: str) -> float:
    """Parse a finite decimal number, raising InvalidNumberError otherwise."""
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        raise InvalidNumberError(text) from None
    if not np.isfinite(value):
        raise InvalidNumberError(text, expected='finite number')
    return value


def parse_choice(text: str) -> int:
    """Parse a menu choice as an integer."""
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        raise InvalidNumberError(text, expected='whole number') from None


def normalize_velocity(v: float) -> Tuple[float, bool]:
    adjusted = v < 0
    if adjusted:
        logger.debug("Negative velocity %s replaced by %s", v, abs(v))
    return abs(v), adjusted  # abs() also folds -0.0 into 0.0


def clamp_angle(a: float) -> Tuple[float, bool]:
    """Clamp a launch angle into [MIN_ANGLE, MAX_ANGLE] degrees."""
    if a < MIN_ANGLE or a > MAX_ANGLE:
        clamped = float(np.clip(a, MIN_ANGLE, MAX_ANGLE))
        logger.debug("Angle %s clamped to %s", a, clamped)
        return clamped, True
    return a, False


def validate_gravity(g: float) -> Tuple[float, bool]:
    if g <= 0:
        logger.debug("Non-positive gravity %s replaced by default %s",
                     g, DEFAULT_GRAVITY)
        return DEFAULT_GRAVITY, True
    return g, False
