"""Single-segment repair of OCR glyphs."""

from dataclasses import replace
from typing import Optional

from bankocr.models import Digit, Position, SegmentDescription
from bankocr.parsing.classifier import classify_segments
from bankocr.parsing.segments import parse_glyph


def _toggle(positions: frozenset[Position], position: Position) -> frozenset[Position]:
    return positions ^ {position}


def segment_variations(description: SegmentDescription) -> list[SegmentDescription]:
    """
    All descriptions one segment toggle away from ``description``.

    Always seven: the top bar flipped, then each middle position toggled,
    then each bottom position toggled. Shapes that are not digits are kept;
    the classifier rejects them.
    """
    variations = [replace(description, top=not description.top)]
    for position in Position:
        variations.append(
            replace(description, middle=_toggle(description.middle, position))
        )
    for position in Position:
        variations.append(
            replace(description, bottom=_toggle(description.bottom, position))
        )
    return variations


def guess_digit(glyph: str) -> Optional[list[Digit]]:
    """
    Guess which digits a glyph could be if exactly one segment was misread.

    Args:
        glyph: Three rows of three characters joined by newlines.

    Returns:
        Digits reachable by one toggle, deduplicated, in the order found.
        None if no single toggle produces a digit.
    """
    guesses: list[Digit] = []
    for variation in segment_variations(parse_glyph(glyph)):
        digit = classify_segments(variation)
        if digit.is_recognized and digit not in guesses:
            guesses.append(digit)
    return guesses or None
