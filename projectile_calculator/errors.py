"""Exceptions raised while reading user input."""


class CalculatorError(Exception):
    """Base class for calculator errors."""


class InvalidNumberError(CalculatorError, ValueError):
    """Text entered at a prompt is not a usable number."""

    def __init__(self, text: str, expected: str = 'number'):
        self.text = text
        self.expected = expected
        super().__init__(f"Expected a {expected}, got {text!r}")
