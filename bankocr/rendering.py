"""Render account numbers as OCR glyph rows."""

from bankocr.models import DIGITS_PER_ACCOUNT, Digit, SegmentDescription
from bankocr.parsing.classifier import DIGIT_RULES
from bankocr.parsing.segments import ROW_RENDERINGS, TOP_BAR


def _render_segments(description: SegmentDescription) -> tuple[str, str, str]:
    top = f" {TOP_BAR} " if description.top else "   "
    return (
        top,
        ROW_RENDERINGS[description.middle],
        ROW_RENDERINGS[description.bottom],
    )


# Canonical glyph rows per digit, built from the classifier rules so that
# rendering and classification can never disagree
GLYPHS: dict[str, tuple[str, str, str]] = {
    digit.char: _render_segments(description)
    for description, digit in DIGIT_RULES
}


def render_digit(digit: str | Digit) -> str:
    """Render one digit as a 3x3 glyph string (rows joined by newlines)."""
    char = digit.char if isinstance(digit, Digit) else digit
    if char not in GLYPHS:
        raise ValueError(f"Cannot render {char!r}, expected a digit 0-9")
    return "\n".join(GLYPHS[char])


def render_account_number(number: str) -> str:
    """
    Render a 9-digit account number as a full OCR row.

    The result is three 27-character lines, each ending in a newline,
    followed by a blank line.

    Raises:
        ValueError: If ``number`` is not exactly nine digits.
    """
    if len(number) != DIGITS_PER_ACCOUNT or not all(c in GLYPHS for c in number):
        raise ValueError(
            f"Account number must be {DIGITS_PER_ACCOUNT} digits, got {number!r}"
        )

    lines = ["".join(GLYPHS[c][row] for c in number) for row in range(3)]
    return "\n".join(lines) + "\n\n"
