"""
Projectile Definition & Closed-Form Kinematics
===============================================
Defines the Projectile dataclass and the drag-free results derived from it:
  - Range           R = v² · sin(2θ) / g
  - Time of flight  T = 2 · v · sin(θ) / g
  - Maximum height  H = v² · sin²(θ) / (2g)

The model stores whatever it is given. Bounds checking is done by the
caller (see validation.py), so the formulas can be tested in isolation.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .constants import (
    DEFAULT_VELOCITY, DEFAULT_ANGLE, DEFAULT_GRAVITY,
    SEPARATOR, REPORT_PRECISION,
)

logger = logging.getLogger(__name__)


def to_radians(deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return np.radians(deg)


@dataclass
class Projectile:
    """
    Launch parameters of a projectile on flat ground without air resistance.
    """
    velocity: float = DEFAULT_VELOCITY   # m/s  initial speed
    angle: float = DEFAULT_ANGLE         # degrees above horizontal
    gravity: float = DEFAULT_GRAVITY     # m/s²

    # ── Setters / getters ─────────────────────────────────────────────────
    def set_velocity(self, v: float):
        self.velocity = v

    def set_angle(self, a: float):
        self.angle = a

    def set_gravity(self, g: float):
        self.gravity = g

    def get_velocity(self) -> float:
        return self.velocity

    def get_angle(self) -> float:
        return self.angle

    def get_gravity(self) -> float:
        return self.gravity

    # ── Derived quantities ────────────────────────────────────────────────
    # numpy scalars give inf/nan for g == 0 instead of ZeroDivisionError
    def calculate_range(self) -> float:
        """Horizontal distance travelled before returning to launch height (m)."""
        theta = to_radians(self.angle)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self.velocity) ** 2 * np.sin(2 * theta)
                         / self.gravity)

    def calculate_time_of_flight(self) -> float:
        """Time from launch to landing at the same height (s)."""
        theta = to_radians(self.angle)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(2 * np.float64(self.velocity) * np.sin(theta)
                         / self.gravity)

    def calculate_max_height(self) -> float:
        """Peak height above the launch point (m)."""
        sin_theta = np.sin(to_radians(self.angle))
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self.velocity) ** 2 * sin_theta ** 2
                         / (2 * np.float64(self.gravity)))

    # ── Reporting ─────────────────────────────────────────────────────────
    def summary(self) -> str:
        """Human-readable report of the inputs and derived results."""
        p = REPORT_PRECISION
        lines = [
            "",
            SEPARATOR,
            "        PROJECTILE MOTION RESULTS",
            SEPARATOR,
            "",
            "Input Parameters:",
            f"  Initial Velocity: {self.velocity:.{p}f} m/s",
            f"  Launch Angle:     {self.angle:.{p}f} degrees",
            f"  Gravity:          {self.gravity:.{p}f} m/s²",
            "",
            "Calculated Values:",
            f"  Range:            {self.calculate_range():.{p}f} m",
            f"  Time of Flight:   {self.calculate_time_of_flight():.{p}f} s",
            f"  Maximum Height:   {self.calculate_max_height():.{p}f} m",
            SEPARATOR,
        ]
        return '\n'.join(lines)

    def display_results(self, output=print):
        """Write the report to standard output (or the given writer)."""
        logger.debug("Displaying results for %r", self)
        output(self.summary())
