"""
Two-shutter aluminum sliding window calculator.

Frame track runs the full opening. Shutter pipes and glass are cut from the
opening with fixed clearance deductions. All lengths in inches.
"""

import logging

from ..schemas import CalculationOutcome, ComputedDimensions, OpeningDimensions, RawLengths
from .base import BaseCalculator, InvalidInput
from .eighths import format_eighths

logger = logging.getLogger(__name__)


class SlidingWindowCalculator(BaseCalculator):

    # Clearance rules, inches
    HANDLE_INTERLOCK_DEDUCTION = 1.5     # pipe is 1.5" shorter than opening height
    TOP_BEARING_BOTTOM_DEDUCTION = 6.25  # overlap/clearance taken off the width before splitting
    GLASS_HEIGHT_DEDUCTION = 3.0         # glass is 3" shorter than handle/interlock pipe
    GLASS_WIDTH_ALLOWANCE = 0.5          # glass runs 0.5" into the pipe channel

    SHUTTER_COUNT = 2
    PANE_COUNT = 2

    def calculate(self, raw_width, raw_height) -> CalculationOutcome:
        try:
            opening = self.validate_opening(raw_width, raw_height)
        except InvalidInput as e:
            logger.info("Rejected opening width=%r height=%r", raw_width, raw_height)
            return CalculationOutcome(error=e.message)
        return CalculationOutcome(result=self.compute(opening))

    def validate_opening(self, raw_width, raw_height) -> OpeningDimensions:
        """Parse both inputs. Raises InvalidInput unless both are positive numbers."""
        return OpeningDimensions(
            width=self.parse_positive_inches(raw_width),
            height=self.parse_positive_inches(raw_height),
        )

    def compute(self, opening: OpeningDimensions) -> ComputedDimensions:
        total_width = opening.width
        total_height = opening.height

        # --- Frame (full opening) ---
        top_bottom_track = total_width
        side_track = total_height

        # --- Shutters (2) ---
        handle_interlock = total_height - self.HANDLE_INTERLOCK_DEDUCTION
        top_bearing_bottom = (total_width - self.TOP_BEARING_BOTTOM_DEDUCTION) / self.SHUTTER_COUNT

        # --- Glass (2 panes) ---
        # No bounds check: tiny openings give negative lengths, formatted as-is.
        # Infinite openings format as "" and report no raw length.
        glass_height = handle_interlock - self.GLASS_HEIGHT_DEDUCTION
        glass_width = top_bearing_bottom + self.GLASS_WIDTH_ALLOWANCE

        raw = RawLengths(
            top_bottom_track=self.finite_or_none(top_bottom_track),
            side_track=self.finite_or_none(side_track),
            handle_interlock=self.finite_or_none(handle_interlock),
            top_bearing_bottom=self.finite_or_none(top_bearing_bottom),
            glass_width=self.finite_or_none(glass_width),
            glass_height=self.finite_or_none(glass_height),
        )
        glass_dimensions = self.glass_label(glass_width, glass_height)

        return ComputedDimensions(
            top_bottom_track=format_eighths(top_bottom_track),
            side_track=format_eighths(side_track),
            handle_interlock=format_eighths(handle_interlock),
            top_bearing_bottom=format_eighths(top_bearing_bottom),
            glass_width=format_eighths(glass_width),
            glass_height=format_eighths(glass_height),
            glass_dimensions=glass_dimensions,
            raw=raw,
            cut_list=self.build_cut_list(raw, glass_dimensions),
        )

    def glass_label(self, glass_width: float, glass_height: float) -> str:
        return "%s (Width) x %s (Height)" % (format_eighths(glass_width), format_eighths(glass_height))

    def build_cut_list(self, raw: RawLengths, glass_dimensions: str) -> list:
        """Cut list grouped the way the shop sheet reads: frame, shutters, glass."""
        frame = "Frame Dimensions"
        shutters = "Shutter Dimensions (for %d Shutters)" % self.SHUTTER_COUNT
        glass = "Glass Dimensions (for %d Panes)" % self.PANE_COUNT
        return [
            self.make_cut_item(frame, "Top & Bottom Track", raw.top_bottom_track,
                               format_eighths(raw.top_bottom_track), 2),
            self.make_cut_item(frame, "Side Track", raw.side_track,
                               format_eighths(raw.side_track), 2),
            # Handle pipe + interlock pipe per shutter
            self.make_cut_item(shutters, "Handle Pipe & Interlock Pipe", raw.handle_interlock,
                               format_eighths(raw.handle_interlock), 2 * self.SHUTTER_COUNT),
            # Top pipe + bearing bottom per shutter
            self.make_cut_item(shutters, "Top Pipe & Bearing Bottom", raw.top_bearing_bottom,
                               format_eighths(raw.top_bearing_bottom), 2 * self.SHUTTER_COUNT),
            self.make_cut_item(glass, "Glass Panes", raw.glass_width,
                               glass_dimensions, self.PANE_COUNT),
        ]

    def rules(self) -> dict:
        return {
            "handle_interlock_deduction": self.HANDLE_INTERLOCK_DEDUCTION,
            "top_bearing_bottom_deduction": self.TOP_BEARING_BOTTOM_DEDUCTION,
            "glass_height_deduction": self.GLASS_HEIGHT_DEDUCTION,
            "glass_width_allowance": self.GLASS_WIDTH_ALLOWANCE,
            "shutter_count": self.SHUTTER_COUNT,
            "pane_count": self.PANE_COUNT,
        }


def calculate(raw_width, raw_height) -> CalculationOutcome:
    """Module-level entry point for callers that don't need the class."""
    return SlidingWindowCalculator().calculate(raw_width, raw_height)
