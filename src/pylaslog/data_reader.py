"""ASCII data section reader for LAS 2.0 files.

Handles both normal and wrapped modes. Wrapped records are rebuilt with an
explicit buffer that is flushed whenever it holds exactly one value per
curve, so the column count is checked line by line.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from .exceptions import ColumnCountMismatchError, NumericParseError
from .models import HeaderSection

DEFAULT_NULL_VALUE = -999.25

# Sentinels are written with varying precision (-999.25 vs -999.2500),
# and a relative tolerance keeps extreme but legitimate values intact.
NULL_RTOL = 1e-6
NULL_ATOL = 0.0


def resolve_wrap(version: HeaderSection, well: HeaderSection) -> bool:
    """Return True if WRAP is YES.

    WRAP is looked up in ~W first and then in ~V, where LAS 2.0 files
    normally declare it. Absent means NO.
    """
    wrap = well.get("WRAP") or version.get("WRAP")
    if wrap is None:
        return False
    return wrap.value.strip().upper() == "YES"


def resolve_null_value(well: HeaderSection) -> float:
    """Return the NULL sentinel from ~W, or DEFAULT_NULL_VALUE if absent or empty.

    Raises:
        NumericParseError: If NULL is present but not a number.
    """
    null = well.get("NULL")
    if null is None or not null.value:
        return DEFAULT_NULL_VALUE
    token = null.value.split()[0]
    try:
        value = float(token)
    except ValueError:
        raise NumericParseError(
            "NULL value is not a number", null.line_number, null.value, token=token
        ) from None
    if not math.isfinite(value):
        raise NumericParseError(
            "NULL value is not finite", null.line_number, null.value, token=token
        )
    return value


def _parse_tokens(line: str, line_number: int) -> list[float]:
    values: list[float] = []
    for token in line.split():
        try:
            value = float(token)
        except ValueError:
            raise NumericParseError(
                f"invalid numeric token {token!r}", line_number, line, token=token
            ) from None
        if not math.isfinite(value):
            raise NumericParseError(
                f"non-finite numeric token {token!r}", line_number, line, token=token
            )
        values.append(value)
    return values


def read_ascii_data(
    lines: Sequence[tuple[int, str]],
    curve_count: int,
    wrap: bool,
    null_value: float = DEFAULT_NULL_VALUE,
) -> NDArray[np.float64]:
    """Read the ~A (ASCII data) section into a matrix.

    Args:
        lines: (line_number, text) pairs of the ~A content lines.
        curve_count: Number of curves declared in ~C.
        wrap: True if one record may span several lines.
        null_value: Sentinel replaced by NaN in the result.

    Returns:
        Read-only float64 array of shape (records, curve_count).

    Raises:
        NumericParseError: If a token is not a finite number.
        ColumnCountMismatchError: If a record does not hold exactly
            curve_count values.
    """
    rows = _read_wrapped(lines, curve_count) if wrap else _read_normal(lines, curve_count)

    matrix = np.array(rows, dtype=np.float64).reshape(len(rows), curve_count)
    matrix[np.isclose(matrix, null_value, rtol=NULL_RTOL, atol=NULL_ATOL)] = np.nan
    matrix.flags.writeable = False
    return matrix


def _read_normal(lines: Sequence[tuple[int, str]], curve_count: int) -> list[list[float]]:
    """Read non-wrapped ASCII data. One record per line."""
    rows: list[list[float]] = []
    for line_number, line in lines:
        values = _parse_tokens(line, line_number)
        if not values:
            continue
        if len(values) != curve_count:
            raise ColumnCountMismatchError(
                f"expected {curve_count} values, found {len(values)}",
                line_number,
                line,
                expected=curve_count,
                actual=len(values),
            )
        rows.append(values)
    return rows


def _read_wrapped(lines: Sequence[tuple[int, str]], curve_count: int) -> list[list[float]]:
    """Read wrapped ASCII data, accumulating values until a record is full."""
    rows: list[list[float]] = []
    pending: list[float] = []
    last_line_number = 0
    last_line = ""

    for line_number, line in lines:
        values = _parse_tokens(line, line_number)
        if not values:
            continue
        pending.extend(values)
        last_line_number, last_line = line_number, line

        if len(pending) > curve_count:
            raise ColumnCountMismatchError(
                f"wrapped record overflows: expected {curve_count} values, "
                f"accumulated {len(pending)}",
                line_number,
                line,
                expected=curve_count,
                actual=len(pending),
            )
        if len(pending) == curve_count:
            rows.append(pending)
            pending = []

    if pending:
        raise ColumnCountMismatchError(
            f"incomplete wrapped record at end of data: expected {curve_count} "
            f"values, accumulated {len(pending)}",
            last_line_number,
            last_line,
            expected=curve_count,
            actual=len(pending),
        )
    return rows
