"""
Interactive Menu
================
Menu-driven console loop around a single Projectile:

  1. Enter new values and calculate
  2. Display current results
  3. Change gravity
  4. Exit

All bad input is recovered from; the loop only ends on option 4 or when
standard input is closed.
"""

import logging
from typing import Callable, Optional

from .constants import (
    SEPARATOR, MENU_TITLE, MENU_OPTIONS,
    CHOICE_INPUT, CHOICE_DISPLAY, CHOICE_GRAVITY, CHOICE_EXIT,
    PROMPT_CHOICE, PROMPT_VELOCITY, PROMPT_ANGLE, PROMPT_GRAVITY,
    MSG_WELCOME, MSG_FAREWELL, MSG_INVALID_INPUT, MSG_INVALID_OPTION,
    MSG_NO_VALUES, MSG_NEGATIVE_VEL, MSG_ANGLE_RANGE, MSG_ANGLE_ADJUSTED,
    MSG_GRAVITY_INVALID, MSG_GRAVITY_UPDATED,
)
from .errors import InvalidNumberError
from .projectile import Projectile
from .validation import (
    parse_number, parse_choice,
    normalize_velocity, clamp_angle, validate_gravity,
)

logger = logging.getLogger(__name__)


class Calculator:
    """
    Console controller owning one Projectile.

    Parameters
    ----------
    projectile : model to drive (a fresh default Projectile if omitted)
    input_func : called with a prompt, returns one line of user input
    output : called with one message per call
    """

    def __init__(self, projectile: Optional[Projectile] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None):
        self.projectile = projectile if projectile is not None else Projectile()
        self.values_entered = False
        self._input = input_func or input
        self._print = output or print
        self._handlers = {
            CHOICE_INPUT: self.input_values,
            CHOICE_DISPLAY: self.display_current,
            CHOICE_GRAVITY: self.change_gravity,
            CHOICE_EXIT: self.exit,
        }

    # ── Menu loop ─────────────────────────────────────────────────────────
    def run(self):
        """Show the menu until the user exits or input runs out."""
        logger.info("Calculator started")
        self._print(MSG_WELCOME)

        choice = None
        while choice != CHOICE_EXIT:
            self.display_menu()
            try:
                line = self._input(PROMPT_CHOICE)
            except EOFError:
                self._print("")
                break

            try:
                choice = parse_choice(line)
            except InvalidNumberError as exc:
                logger.debug("Rejected menu input: %s", exc)
                self._print(MSG_INVALID_INPUT)
                continue

            logger.debug("Menu choice %d", choice)
            try:
                self.dispatch(choice)
            except EOFError:
                self._print("")
                break

        logger.info("Calculator stopped")

    def display_menu(self):
        self._print(f"\n{SEPARATOR}")
        self._print(MENU_TITLE)
        self._print(SEPARATOR)
        for option in MENU_OPTIONS:
            self._print(option)
        self._print(SEPARATOR)

    def dispatch(self, choice: int):
        """Run the action for a menu number, or report an invalid option."""
        handler = self._handlers.get(choice)
        if handler is None:
            self._print(MSG_INVALID_OPTION)
            return
        handler()

    # ── Actions ───────────────────────────────────────────────────────────
    def input_values(self):
        v = self._read_number(f"\n{PROMPT_VELOCITY}")
        a = self._read_number(PROMPT_ANGLE)

        v, adjusted = normalize_velocity(v)
        if adjusted:
            self._print(MSG_NEGATIVE_VEL)

        a, adjusted = clamp_angle(a)
        if adjusted:
            self._print(MSG_ANGLE_RANGE)
            self._print(MSG_ANGLE_ADJUSTED.format(angle=a))

        self.projectile.set_velocity(v)
        self.projectile.set_angle(a)
        self.values_entered = True
        logger.debug("Stored velocity=%s angle=%s", v, a)

        self.projectile.display_results(self._print)

    def display_current(self):
        # explicit flag: an entered (0, 0) pair is still a real configuration
        if not self.values_entered:
            self._print(MSG_NO_VALUES)
            return
        self.projectile.display_results(self._print)

    def change_gravity(self):
        g = self._read_number(f"\n{PROMPT_GRAVITY}")

        g, adjusted = validate_gravity(g)
        if adjusted:
            self._print(MSG_GRAVITY_INVALID)

        self.projectile.set_gravity(g)
        logger.debug("Stored gravity=%s", g)
        self._print(MSG_GRAVITY_UPDATED.format(gravity=g))

    def exit(self):
        self._print(MSG_FAREWELL)

    def _read_number(self, prompt: str) -> float:
        """Prompt until a finite number is entered. EOFError propagates."""
        while True:
            line = self._input(prompt)
            try:
                return parse_number(line)
            except InvalidNumberError as exc:
                logger.debug("Rejected numeric input: %s", exc)
                self._print(MSG_INVALID_INPUT)
