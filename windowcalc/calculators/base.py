"""
Abstract base class for window calculators.

Input: raw width/height text as typed into the form
Output: CalculationOutcome (result or error message, never both)
"""

import math
import re
from abc import ABC, abstractmethod

INVALID_INPUT_MESSAGE = "Please enter valid, positive numbers for both width and height."

# Leading numeric prefix: sign, digits with optional fraction (or bare fraction),
# optional exponent. Anything after the prefix is ignored.
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


class InvalidInput(ValueError):
    """Raised when an opening dimension is not a valid, positive number."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message


def parse_float_prefix(value) -> float:
    """
    Parse the leading numeric prefix of user input.

    '72.5' -> 72.5, '72.5in' -> 72.5, '  .5' -> 0.5, 'abc' -> nan.
    Numbers pass through unchanged; None parses to nan.
    """
    if value is None:
        return math.nan
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _NUMERIC_PREFIX.match(str(value).lstrip())
    if not match:
        return math.nan
    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


class BaseCalculator(ABC):
    """All window calculators inherit from this."""

    @abstractmethod
    def calculate(self, raw_width, raw_height):
        """
        Takes the raw width and height as entered.
        Returns a CalculationOutcome; never raises for bad input.
        """
        pass

    # --- Helper methods for all calculators ---

    def parse_positive_inches(self, value) -> float:
        """Parse an inches value, raising InvalidInput unless it is > 0. No upper bound."""
        parsed = parse_float_prefix(value)
        if math.isnan(parsed) or parsed <= 0:
            raise InvalidInput()
        return parsed

    def finite_or_none(self, value: float):
        """Raw length for output; infinite openings have no length to report."""
        return value if value is not None and math.isfinite(value) else None

    def make_cut_item(self, section: str, description: str, length_inches: float,
                      display: str, quantity: int) -> dict:
        """Build a cut list item dict."""
        length = self.finite_or_none(length_inches)
        return {
            "section": section,
            "description": description,
            "length_inches": round(length, 3) if length is not None else None,
            "display": display,
            "quantity": quantity,
        }
