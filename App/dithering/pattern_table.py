"""Threshold tables for the table-lookup dithers.

AIDEV-NOTE: A table is an N x N grid of thresholds (0-255) tiled across the
image by (y mod N, x mod N). 255 is the "always gap" sentinel: no grayscale
value exceeds it, so those cells never become foreground.
"""

import json
import logging
import threading
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)

GAP = 255

# Fixed 4x4 Bayer matrix scaled to 0-255
BAYER_4X4 = (
    (0, 128, 32, 160),
    (192, 64, 224, 96),
    (48, 176, 16, 144),
    (240, 112, 208, 80),
)

# 1px horizontal lines: even rows are line thresholds, odd rows are gaps
DEFAULT_HORIZONTAL_TABLE = (
    (160, 144, 152, 136),  # Row 0 - line (light areas)
    (GAP, GAP, GAP, GAP),  # Row 1 - gap
    (64, 48, 56, 40),  # Row 2 - line (dark areas)
    (GAP, GAP, GAP, GAP),  # Row 3 - gap
)

# Denser gradient: isolated dots in light areas, dashes in mid tones,
# solid lines in the dark. Not editable.
HORIZONTAL_TABLE_8X8 = (
    (200, GAP, 208, GAP, 204, GAP, 212, GAP),  # dots
    (GAP, GAP, GAP, GAP, GAP, GAP, GAP, GAP),
    (152, 136, GAP, GAP, 148, 132, GAP, GAP),  # dashes
    (GAP, GAP, GAP, GAP, GAP, GAP, GAP, GAP),
    (104, 88, 96, 80, 100, 84, 92, 76),  # line
    (GAP, GAP, GAP, GAP, GAP, GAP, GAP, GAP),
    (48, 32, 40, 24, 44, 28, 36, 20),  # line (dark areas)
    (GAP, GAP, GAP, GAP, GAP, GAP, GAP, GAP),
)

BUILTIN_TABLES = {
    "default": DEFAULT_HORIZONTAL_TABLE,
    "8x8": HORIZONTAL_TABLE_8X8,
}

VALID_SIZES = (4, 8)


class PatternTableError(ValueError):
    """Raised when a table interchange file is malformed."""


def copy_rows(rows) -> "list[list[int]]":
    """Independent list-of-lists copy of a table."""
    return [list(row) for row in rows]


class PatternTable:
    """Mutable threshold table shared between an editor and the dither engine.

    AIDEV-NOTE: get() and set() both copy, so callers can never alias the
    stored rows. The lock makes snapshot() see either the old or the new
    table, never a mixture. No shape validation happens here; a
    mismatched table is the caller's problem.
    """

    def __init__(self, rows=DEFAULT_HORIZONTAL_TABLE):
        self._lock = threading.Lock()
        self._rows = copy_rows(rows)
        self._version = 0

    @property
    def version(self) -> int:
        """Number of times the table has been replaced."""
        return self._version

    def get(self) -> "list[list[int]]":
        with self._lock:
            return copy_rows(self._rows)

    def set(self, rows) -> None:
        """Replace the whole table with a copy of ``rows``."""
        new_rows = copy_rows(rows)
        with self._lock:
            self._rows = new_rows
            self._version += 1
        logger.debug("Pattern table replaced (version %d)", self._version)

    def reset(self) -> None:
        self.set(DEFAULT_HORIZONTAL_TABLE)

    def snapshot(self) -> np.ndarray:
        """Current table as a float array, for a single dither call."""
        with self._lock:
            return np.array(self._rows, dtype=np.float64)

    def __repr__(self):
        return f"PatternTable(version={self._version}, rows={self.get()!r})"


# Process-wide table used when a caller does not pass one explicitly
horizontal_line_table = PatternTable()


def builtin_table(name: str) -> "list[list[int]]":
    """Copy of a built-in table by name ("default" or "8x8")."""
    try:
        return copy_rows(BUILTIN_TABLES[name])
    except KeyError:
        raise PatternTableError(
            f"Unknown built-in table '{name}' "
            f"(choose from {', '.join(BUILTIN_TABLES)})"
        ) from None


def validate_table(rows) -> "list[list[int]]":
    """Check a table against the interchange format and return a copy.

    Raises:
        PatternTableError: If the grid is not N x N with N in (4, 8), or a
            value is not an integer in 0-255
    """
    if not isinstance(rows, (list, tuple)):
        raise PatternTableError("Table must be a list of rows")

    size = len(rows)
    if size not in VALID_SIZES:
        raise PatternTableError(f"Table must have 4 or 8 rows, got {size}")

    for row_idx, row in enumerate(rows):
        if not isinstance(row, (list, tuple)) or len(row) != size:
            raise PatternTableError(f"Row {row_idx} must have {size} values")
        for value in row:
            # bool is an int subclass but not a threshold
            if isinstance(value, bool) or not isinstance(value, int):
                raise PatternTableError(
                    f"Row {row_idx} holds non-integer value {value!r}"
                )
            if not 0 <= value <= 255:
                raise PatternTableError(
                    f"Row {row_idx} value {value} is outside 0-255"
                )

    return copy_rows(rows)


def load_table(path: "str | Path") -> "list[list[int]]":
    """Load a table from a JSON file holding an N x N grid.

    Raises:
        PatternTableError: If the file cannot be read or is not a valid table
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PatternTableError(f"Could not read table file {path}: {e}") from e

    rows = validate_table(data)
    logger.info("Loaded %dx%d pattern table from %s", len(rows), len(rows), path)
    return rows


def save_table(rows, path: "str | Path") -> None:
    """Write a table as a JSON grid, one row per line."""
    rows = validate_table(rows)
    lines = ",\n".join("  " + json.dumps(row) for row in rows)
    Path(path).write_text(f"[\n{lines}\n]\n")
