"""Final assembly of a parsed LAS document."""

from __future__ import annotations

from collections.abc import Sequence

from .data_reader import read_ascii_data, resolve_null_value, resolve_wrap
from .exceptions import ColumnCountMismatchError, MissingSectionError
from .models import Field, HeaderSection, LASDocument


def assemble_document(
    version_fields: Sequence[Field],
    well_fields: Sequence[Field],
    curve_fields: Sequence[Field],
    parameter_fields: Sequence[Field] | None,
    other_lines: Sequence[str] | None,
    data_lines: Sequence[tuple[int, str]],
) -> LASDocument:
    """Build the immutable LASDocument from the collected sections.

    ``parameter_fields`` and ``other_lines`` are None when the file has no
    ~P or ~O section.

    Raises:
        MissingSectionError: If ~C is absent or declares no curves.
        ColumnCountMismatchError: If a data record does not match ~C.
        NumericParseError: If NULL or a data token is not a number.
    """
    if not curve_fields:
        raise MissingSectionError("~C section is missing or declares no curves")

    version = HeaderSection("version", tuple(version_fields))
    well = HeaderSection("well", tuple(well_fields))
    curves = HeaderSection("curves", tuple(curve_fields))
    parameters = (
        HeaderSection("parameters", tuple(parameter_fields))
        if parameter_fields is not None
        else None
    )

    wrap = resolve_wrap(version, well)
    null_value = resolve_null_value(well)
    curve_count = len(curves)
    data = read_ascii_data(data_lines, curve_count, wrap, null_value)

    if data.shape[1] != curve_count:
        raise ColumnCountMismatchError(
            f"data matrix has {data.shape[1]} columns, ~C declares {curve_count}",
            expected=curve_count,
            actual=int(data.shape[1]),
        )

    return LASDocument(
        version=version,
        well=well,
        curves=curves,
        parameters=parameters,
        other="\n".join(other_lines) if other_lines is not None else None,
        data=data,
        wrap=wrap,
        null_value=null_value,
    )
