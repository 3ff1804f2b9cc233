"""Account number checksum and OCR file layout validation."""

from typing import Iterable, Optional

from bankocr.models import (
    CHARACTERS_PER_ROW,
    DIGITS_PER_ACCOUNT,
    LEGAL_CHARACTERS,
    FileValidationResult,
)

# Checksum weights, leftmost digit first (the rightmost digit weighs 1)
_ACCOUNT_WEIGHTS = list(range(DIGITS_PER_ACCOUNT, 0, -1))

_CHECKSUM_MODULUS = 11

EMPTY_FILE = "OCR file is empty"
ILLEGAL_CHARACTERS = "OCR file contains illegal characters"
BAD_ROW_LENGTH = (
    "OCR file is not divisible by the expected number of characters per row "
    f"({CHARACTERS_PER_ROW})"
)


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def account_number_is_valid(account_number: Optional[str]) -> bool:
    """
    Validate a 9-digit account number using the modulo-11 checksum.

    With digits d1..d9 read right to left, the checksum is
    (1*d1 + 2*d2 + ... + 9*d9) mod 11, and must be 0.
    Anything that is not exactly nine ASCII digits is invalid.
    """
    if not account_number or len(account_number) != DIGITS_PER_ACCOUNT:
        return False
    if not _is_ascii_digits(account_number):
        return False

    total = sum(int(d) * w for d, w in zip(account_number, _ACCOUNT_WEIGHTS))
    return total % _CHECKSUM_MODULUS == 0


def filter_valid_account_numbers(
    account_numbers: Optional[Iterable[str]],
) -> Optional[list[str]]:
    """
    Return the valid account numbers, in input order.

    Returns None (not an empty list) when none of the numbers are valid,
    including when there were no numbers to check.
    """
    valid = [n for n in account_numbers or [] if account_number_is_valid(n)]
    return valid or None


def validate_file_layout(contents: Optional[str]) -> FileValidationResult:
    """
    Check that OCR file contents can be decoded.

    Checks, in order: the contents are not empty; only pipes, underscores,
    spaces and newlines are used; the length is a whole number of rows.
    Line endings must already be normalized to a single newline.
    """
    if not contents:
        return FileValidationResult(is_valid=False, failure_reason=EMPTY_FILE)

    if not set(contents) <= LEGAL_CHARACTERS:
        return FileValidationResult(
            is_valid=False, failure_reason=ILLEGAL_CHARACTERS
        )

    if len(contents) % CHARACTERS_PER_ROW != 0:
        return FileValidationResult(is_valid=False, failure_reason=BAD_ROW_LENGTH)

    return FileValidationResult(is_valid=True)
