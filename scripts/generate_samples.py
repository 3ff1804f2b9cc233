#!/usr/bin/env python3
"""
Generate sample OCR account number files.

Each file exercises one decoding outcome: clean numbers, numbers repaired
to a single match, ambiguous numbers, checksum errors and illegible digits.
Broken rows are written out literally since they cannot be rendered from
digits.
"""

import sys
from pathlib import Path

from bankocr.rendering import render_account_number

SAMPLES_DIR = Path(__file__).parent.parent / "samples"

# "?00?000?1": three glyphs that no single-segment edit can fix
_ILLEGIBLE_ROW = (
    " _  _  _     _  _  _       \n"
    "|  | || |  || || || | _   |\n"
    "| ||_||_||_ |_||_||_| _|  |\n"
    "\n"
)

# "?23456789": the first glyph is a 1 with a stray underscore
_REPAIRABLE_ROW = (
    "    _  _     _  _  _  _  _ \n"
    " _| _| _||_||_ |_   ||_||_|\n"
    "  ||_  _|  | _||_|  ||_| _|\n"
    "\n"
)

SAMPLES = {
    "valid.txt": ["000000000", "123456789", "490867715", "711111111"],
    "repaired.txt": ["111111111", "777777777", "333333333"],
    "ambiguous.txt": ["888888888", "555555555", "666666666", "999999999"],
    "errors.txt": ["222222222", "444444444"],
}


def generate_all_samples() -> dict[str, str]:
    """Build the contents of every sample file."""
    samples = {
        name: "".join(render_account_number(n) for n in numbers)
        for name, numbers in SAMPLES.items()
    }
    samples["illegible.txt"] = _ILLEGIBLE_ROW
    samples["mixed.txt"] = (
        render_account_number("000000051")
        + _REPAIRABLE_ROW
        + render_account_number("888888888")
        + render_account_number("222222222")
        + _ILLEGIBLE_ROW
    )
    return samples


def save_samples(output_dir: Path | None = None):
    """Generate and save all sample files to disk."""
    if output_dir is None:
        output_dir = SAMPLES_DIR

    output_dir.mkdir(parents=True, exist_ok=True)

    samples = generate_all_samples()
    for name, contents in samples.items():
        filepath = output_dir / name
        filepath.write_text(contents, encoding="utf-8")
        print(f"Saved: {filepath}")

    print(f"\nGenerated {len(samples)} sample files in {output_dir}")
    return samples


if __name__ == "__main__":
    save_samples(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
