"""Public API for reading bank account numbers from OCR files."""

import logging
import warnings
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from bankocr.models import AccountNumberRow, FileValidationResult
from bankocr.parsing.row import decode_row, split_rows
from bankocr.parsing.validator import validate_file_layout

logger = logging.getLogger(__name__)


class InvalidOcrFileError(ValueError):
    """Raised when OCR file contents fail the layout pre-check."""

    def __init__(self, validation: FileValidationResult):
        super().__init__(validation.failure_reason)
        self.validation = validation


def normalize_line_endings(contents: str) -> str:
    """Convert Windows and old Mac line endings to a single newline."""
    return contents.replace("\r\n", "\n").replace("\r", "\n")


class AccountNumberReader:
    """
    Main entry point for decoding OCR account number files.

    Usage:
        reader = AccountNumberReader()
        for row in reader.read("path/to/accounts.txt"):
            print(row.data.number, row.data.status.display)
    """

    def __init__(self, workers: int = 1, encoding: str = "utf-8"):
        """
        Initialize the reader.

        Args:
            workers: Number of worker processes used to decode rows.
                1 decodes serially in the calling process.
            encoding: Text encoding of OCR files.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self.encoding = encoding

    def read(self, path: str | Path) -> list[AccountNumberRow]:
        """
        Read, validate and decode an OCR file.

        Args:
            path: Path to the OCR file.

        Returns:
            One AccountNumberRow per row, in file order.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            InvalidOcrFileError: If the file layout is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"OCR file not found: {path}")

        contents = path.read_text(encoding=self.encoding)
        rows = self.read_contents(contents)
        logger.info("Read %d account numbers from %s", len(rows), path)
        return rows

    def read_contents(self, contents: Optional[str]) -> list[AccountNumberRow]:
        """
        Validate and decode OCR file contents.

        Raises:
            InvalidOcrFileError: If the contents fail the layout check.
        """
        contents = normalize_line_endings(contents or "")
        validation = validate_file_layout(contents)
        if not validation.is_valid:
            raise InvalidOcrFileError(validation)
        return self.decode(contents)

    def decode(self, contents: Optional[str]) -> list[AccountNumberRow]:
        """Decode contents without validating them first."""
        rows = split_rows(contents)
        if self.workers == 1:
            return [decode_row(row) for row in rows]

        if len(rows) <= 1:
            warnings.warn(
                f"{len(rows)} row(s) to decode, ignoring workers={self.workers}"
            )
            return [decode_row(row) for row in rows]

        return self._decode_parallel(rows)

    def _decode_parallel(self, rows: list[str]) -> list[AccountNumberRow]:
        """Decode rows on a process pool, reassembling them by row index."""
        results: dict[int, AccountNumberRow] = {}
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                executor.submit(decode_row, row): index
                for index, row in enumerate(rows)
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return [results[index] for index in range(len(rows))]
