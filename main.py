#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  PROJECTILE MOTION CALCULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Starts the interactive menu:
    1. Enter velocity and angle, then show range / time of flight / height
    2. Show the results for the current values
    3. Change gravity
    4. Exit

  Usage:
    python main.py
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from projectile_calculator.cli import main


if __name__ == "__main__":
    sys.exit(main())
