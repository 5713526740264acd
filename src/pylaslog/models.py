"""Data models for parsed LAS 2.0 documents.

All models are frozen: a document is assembled once during parsing and is
read-only afterwards.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

SECTION_ALIASES: dict[str, str] = {
    "V": "version",
    "VERSION": "version",
    "W": "well",
    "WELL": "well",
    "C": "curves",
    "CURVE": "curves",
    "CURVES": "curves",
    "P": "parameters",
    "PARAMETER": "parameters",
    "PARAMETERS": "parameters",
}


def unique_mnemonics(names: Iterable[str]) -> list[str]:
    """Rename repeated mnemonics to NAME_2, NAME_3, ... keeping order.

    Used for dict views only; sections and curve order keep duplicates.
    """
    seen: dict[str, int] = {}
    result: list[str] = []
    for name in names:
        if name in seen:
            seen[name] += 1
            result.append(f"{name}_{seen[name]}")
        else:
            seen[name] = 1
            result.append(name)
    return result


@dataclass(frozen=True)
class Field:
    """Single header line: MNEMONIC.UNIT VALUE : DESCRIPTION.

    All parts are raw trimmed text; no type coercion is done.
    """

    mnemonic: str
    unit: str = ""
    value: str = ""
    description: str = ""
    line_number: int = field(default=0, compare=False)

    def to_dict(self) -> dict[str, str]:
        return {
            "mnemonic": self.mnemonic,
            "unit": self.unit,
            "value": self.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class HeaderSection:
    """Ordered fields of one header section (~V, ~W, ~C or ~P).

    Mnemonics need not be unique; file order and duplicates are preserved.
    """

    name: str
    fields: tuple[Field, ...] = ()

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __contains__(self, mnemonic: object) -> bool:
        return isinstance(mnemonic, str) and self.get(mnemonic) is not None

    def __getitem__(self, mnemonic: str) -> Field:
        found = self.get(mnemonic)
        if found is None:
            raise KeyError(mnemonic)
        return found

    def get(self, mnemonic: str, default: Field | None = None) -> Field | None:
        """Get the first field with this mnemonic.

        An exact match wins; otherwise the first case-insensitive match.
        """
        for f in self.fields:
            if f.mnemonic == mnemonic:
                return f
        upper = mnemonic.upper()
        for f in self.fields:
            if f.mnemonic.upper() == upper:
                return f
        return default

    def get_all(self, mnemonic: str) -> list[Field]:
        """Get every field with this mnemonic (case-insensitive)."""
        upper = mnemonic.upper()
        return [f for f in self.fields if f.mnemonic.upper() == upper]

    @property
    def mnemonics(self) -> list[str]:
        return [f.mnemonic for f in self.fields]

    def to_dict(self) -> dict[str, str]:
        """Convert to mnemonic -> value dict, suffixing duplicate mnemonics."""
        names = unique_mnemonics(self.mnemonics)
        return {name: f.value for name, f in zip(names, self.fields)}


def _empty_matrix() -> NDArray[np.float64]:
    matrix = np.empty((0, 0), dtype=np.float64)
    matrix.flags.writeable = False
    return matrix


@dataclass(frozen=True, eq=False)
class LASDocument:
    """Complete parsed LAS 2.0 file.

    ``data`` is a read-only (rows, curves) float64 matrix whose columns
    follow the ~C field order. Null cells are NaN.
    """

    version: HeaderSection = field(default_factory=lambda: HeaderSection("version"))
    well: HeaderSection = field(default_factory=lambda: HeaderSection("well"))
    curves: HeaderSection = field(default_factory=lambda: HeaderSection("curves"))
    parameters: HeaderSection | None = None
    other: str | None = None
    data: NDArray[np.float64] = field(default_factory=_empty_matrix)
    wrap: bool = False
    null_value: float = -999.25
    source_file: str = ""
    encoding: str = "utf-8"

    def headers(self) -> list[str]:
        """Curve mnemonics in ~C order, duplicates included."""
        return self.curves.mnemonics

    def headers_and_desc(self) -> list[tuple[str, str]]:
        """(mnemonic, description) pairs in ~C order."""
        return [(f.mnemonic, f.description) for f in self.curves]

    def section(self, name: str) -> HeaderSection:
        """Get a header section by code ('W') or name ('well').

        A file without ~P yields an empty parameter section.

        Raises:
            KeyError: If the name does not denote a header section.
        """
        attr = SECTION_ALIASES.get(name.strip().lstrip("~").upper())
        if attr is None:
            raise KeyError(name)
        if attr == "parameters" and self.parameters is None:
            return HeaderSection("parameters")
        section: HeaderSection = getattr(self, attr)
        return section

    def column(self, mnemonic: str) -> NDArray[np.float64]:
        """Get the data column for the first curve with this mnemonic.

        Matches like HeaderSection.get: exact first, then case-insensitive.

        Raises:
            KeyError: If no curve has this mnemonic.
        """
        curve = self.curves[mnemonic]
        idx = next(i for i, f in enumerate(self.curves) if f is curve)
        return self.data[:, idx]

    def null_mask(self) -> NDArray[np.bool_]:
        """Boolean matrix, True where a cell held the null value."""
        return np.isnan(self.data)

    @property
    def column_count(self) -> int:
        return len(self.curves)

    @property
    def row_count(self) -> int:
        return int(self.data.shape[0])

    @property
    def version_number(self) -> float | None:
        """Declared LAS version (VERS) as float, or None if missing or invalid."""
        vers = self.version.get("VERS")
        if vers is None:
            return None
        try:
            number = float(vers.value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict view.

        Duplicate curve mnemonics are suffixed (_2, _3, ...) in ``logs``,
        while ``curves_order`` keeps the names as written in the file.
        """
        log_names = unique_mnemonics(self.headers())
        params = self.parameters.to_dict() if self.parameters is not None else {}
        return {
            "version": self.version.to_dict(),
            "well": self.well.to_dict(),
            "parameters": params,
            "curves": [f.to_dict() for f in self.curves],
            "curves_order": self.headers(),
            "logs": {name: self.data[:, i].copy() for i, name in enumerate(log_names)},
            "other": self.other or "",
        }
