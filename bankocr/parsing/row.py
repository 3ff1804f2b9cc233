"""Decode OCR rows into account numbers, repairing them where possible."""

import logging
from typing import Iterable, Optional

import numpy as np

from bankocr.models import (
    CHARACTERS_PER_ROW,
    DIGITS_PER_ACCOUNT,
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    LINE_WIDTH,
    UNRECOGNIZED_CHAR,
    AccountNumber,
    AccountNumberRow,
    AccountStatus,
    Digit,
)
from bankocr.parsing.classifier import classify_digit
from bankocr.parsing.guesser import guess_digit
from bankocr.parsing.validator import (
    account_number_is_valid,
    filter_valid_account_numbers,
)

logger = logging.getLogger(__name__)


def _to_grid(row: str) -> np.ndarray:
    """
    Lay the three content lines of a row out as a 3x27 character grid.

    Short or missing lines are padded with spaces and long lines are cut,
    so a malformed row still yields nine (possibly unrecognized) glyphs.
    """
    lines = row.split("\n")[:GLYPH_HEIGHT]
    lines += [""] * (GLYPH_HEIGHT - len(lines))
    return np.array(
        [list(line.ljust(LINE_WIDTH)[:LINE_WIDTH]) for line in lines],
        dtype="<U1",
    )


def split_glyphs(row: str) -> list[str]:
    """Split a row into its nine glyphs, left to right."""
    grid = _to_grid(row)
    glyphs = []
    for index in range(DIGITS_PER_ACCOUNT):
        cell = grid[:, index * GLYPH_WIDTH : (index + 1) * GLYPH_WIDTH]
        glyphs.append("\n".join("".join(chars) for chars in cell))
    return glyphs


def _render_number(digits: list[Digit]) -> str:
    return "".join(d.char for d in digits)


def _build_candidates(
    number: str, glyphs: list[str], positions: Iterable[int]
) -> list[str]:
    """Substitute every guess for every given position into ``number``."""
    candidates = []
    for index in positions:
        for guess in guess_digit(glyphs[index]) or []:
            candidates.append(number[:index] + guess.char + number[index + 1 :])
    return candidates


def _resolve(
    number: str, candidates: list[str]
) -> Optional[AccountNumberRow]:
    """Turn repair candidates into a final row, or None if none are valid."""
    valid = filter_valid_account_numbers(candidates)
    if valid is None:
        return None

    if len(valid) == 1:
        return AccountNumberRow(
            data=AccountNumber(number=valid[0], status=AccountStatus.OK)
        )

    return AccountNumberRow(
        data=AccountNumber(number=number, status=AccountStatus.AMBIGUOUS),
        possible_matches=valid,
    )


def decode_row(row: str) -> AccountNumberRow:
    """
    Decode one OCR row into an account number.

    The row is three lines of nine 3-character glyphs; a trailing blank
    line is allowed and ignored. Decoding never raises:

    1. Classify each glyph. If every digit is legible and the checksum
       passes, the number is OK.
    2. If some digits are unrecognized, try single-segment repairs on those
       positions only.
    3. If that found nothing (or the checksum failed on a fully legible
       number), try single-segment repairs on every position.
    4. Exactly one valid candidate replaces the number (OK); several are
       reported as AMBIGUOUS. With none, the number is ILLEGIBLE if it
       still contains '?', otherwise ERROR.
    """
    glyphs = split_glyphs(row or "")
    digits = [classify_digit(glyph) for glyph in glyphs]
    number = _render_number(digits)
    unrecognized = [i for i, d in enumerate(digits) if not d.is_recognized]

    logger.debug("Decoded %s (%d unrecognized)", number, len(unrecognized))

    if not unrecognized and account_number_is_valid(number):
        return AccountNumberRow(
            data=AccountNumber(number=number, status=AccountStatus.OK)
        )

    if unrecognized:
        candidates = _build_candidates(number, glyphs, unrecognized)
        result = _resolve(number, candidates)
        if result is not None:
            logger.debug(
                "Repaired %s from unrecognized positions: %s",
                number,
                result.data.status.display,
            )
            return result

    candidates = _build_candidates(number, glyphs, range(DIGITS_PER_ACCOUNT))
    result = _resolve(number, candidates)
    if result is not None:
        logger.debug(
            "Repaired %s from all positions (%d candidates): %s",
            number,
            len(candidates),
            result.data.status.display,
        )
        return result

    status = (
        AccountStatus.ILLEGIBLE
        if UNRECOGNIZED_CHAR in number
        else AccountStatus.ERROR
    )
    logger.debug("No repair for %s: %s", number, status.display)
    return AccountNumberRow(data=AccountNumber(number=number, status=status))


def split_rows(contents: Optional[str]) -> list[str]:
    """Slice file contents into fixed-width rows, in order."""
    if not contents:
        return []
    return [
        contents[start : start + CHARACTERS_PER_ROW]
        for start in range(0, len(contents), CHARACTERS_PER_ROW)
    ]


def decode_file(contents: Optional[str]) -> list[AccountNumberRow]:
    """
    Decode every row of an OCR file, preserving row order.

    Empty or missing contents give an empty list. Run
    ``validate_file_layout`` first; a trailing partial row is decoded as-is.
    """
    return [decode_row(row) for row in split_rows(contents)]
