"""Classify glyph segment descriptions into digits."""

from bankocr.models import Digit, Position, SegmentDescription
from bankocr.parsing.segments import parse_glyph

L, B, R = Position.LEFT, Position.BOTTOM, Position.RIGHT

# One rule per digit: (top bar lit, middle row, bottom row).
# The descriptions are pairwise distinct, so at most one rule can match.
DIGIT_RULES: tuple[tuple[SegmentDescription, Digit], ...] = (
    (SegmentDescription.of(True, (L, R), (L, B, R)), Digit.ZERO),
    (SegmentDescription.of(False, (R,), (R,)), Digit.ONE),
    (SegmentDescription.of(True, (B, R), (L, B)), Digit.TWO),
    (SegmentDescription.of(True, (B, R), (B, R)), Digit.THREE),
    (SegmentDescription.of(False, (L, B, R), (R,)), Digit.FOUR),
    (SegmentDescription.of(True, (L, B), (B, R)), Digit.FIVE),
    (SegmentDescription.of(True, (L, B), (L, B, R)), Digit.SIX),
    (SegmentDescription.of(True, (R,), (R,)), Digit.SEVEN),
    (SegmentDescription.of(True, (L, B, R), (L, B, R)), Digit.EIGHT),
    (SegmentDescription.of(True, (L, B, R), (B, R)), Digit.NINE),
)

_RULE_TABLE: dict[SegmentDescription, Digit] = dict(DIGIT_RULES)


def classify_segments(description: SegmentDescription) -> Digit:
    """Return the digit whose shape matches exactly, else UNRECOGNIZED."""
    return _RULE_TABLE.get(description, Digit.UNRECOGNIZED)


def classify_digit(glyph: str) -> Digit:
    """
    Convert a single 3x3 OCR glyph to a digit.

    A glyph is drawn like an LCD alarm clock digit, e.g. 3 is::

         _
         _|
         _|

    Args:
        glyph: Three rows of three characters joined by newlines.

    Returns:
        The matching Digit, or Digit.UNRECOGNIZED. Never raises.
    """
    return classify_segments(parse_glyph(glyph))
