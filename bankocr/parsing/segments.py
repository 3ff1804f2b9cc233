"""Parse a 3x3 ASCII glyph into the segments that are lit."""

from bankocr.models import GLYPH_HEIGHT, Position, SegmentDescription

L, B, R = Position.LEFT, Position.BOTTOM, Position.RIGHT

TOP_BAR = "_"

# Every legal rendering of a middle or bottom glyph row
ROW_PATTERNS: dict[str, frozenset[Position]] = {
    "   ": frozenset(),
    "|  ": frozenset({L}),
    " _ ": frozenset({B}),
    "  |": frozenset({R}),
    "|_ ": frozenset({L, B}),
    "|_|": frozenset({L, B, R}),
    " _|": frozenset({B, R}),
    "| |": frozenset({L, R}),
}

# Inverse of ROW_PATTERNS, used when rendering glyphs
ROW_RENDERINGS: dict[frozenset[Position], str] = {
    positions: pattern for pattern, positions in ROW_PATTERNS.items()
}


def parse_row(row: str) -> frozenset[Position]:
    """
    Map one middle or bottom glyph row to its lit positions.

    Patterns outside the eight legal renderings (wrong width, stray
    characters) read as nothing lit; the glyph as a whole is then left to
    the classifier to reject.
    """
    return ROW_PATTERNS.get(row, frozenset())


def split_glyph(glyph: str) -> list[str]:
    """Split a glyph string into exactly three rows, padding missing rows."""
    rows = glyph.split("\n")[:GLYPH_HEIGHT]
    rows += [""] * (GLYPH_HEIGHT - len(rows))
    return rows


def parse_glyph(glyph: str) -> SegmentDescription:
    """
    Parse a glyph into a SegmentDescription.

    Args:
        glyph: Three rows of three characters joined by newlines
            (top, middle, bottom). A trailing newline is ignored.

    Returns:
        The lit segments. Never raises for malformed input.
    """
    top, middle, bottom = split_glyph(glyph or "")
    return SegmentDescription(
        top=TOP_BAR in top,
        middle=parse_row(middle),
        bottom=parse_row(bottom),
    )
