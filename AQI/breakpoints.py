"""Breakpoint tables and bracket lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from AQI.constants.aqi_const import AQI_BREAKS, BREAK_COUNT


class MalformedTableError(ValueError):
    pass


@dataclass(frozen=True)
class Breakpoint:
    lo: float
    hi: float


@dataclass(frozen=True)
class BreakpointTable:
    """Ordered concentration ranges, one per AQI category."""

    name: str
    entries: Tuple[Breakpoint, ...]

    def __post_init__(self) -> None:
        validate_table(self.name, self.entries)

    @classmethod
    def from_pairs(
        cls, name: str, pairs: Iterable[Sequence[float]]
    ) -> "BreakpointTable":
        return cls(name, tuple(Breakpoint(float(lo), float(hi)) for lo, hi in pairs))

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Breakpoint:
        return self.entries[index]

    def __iter__(self):
        return iter(self.entries)

    @property
    def lows(self) -> np.ndarray:
        return np.array([bp.lo for bp in self.entries], dtype=float)

    @property
    def highs(self) -> np.ndarray:
        return np.array([bp.hi for bp in self.entries], dtype=float)


def validate_table(name: str, entries: Sequence[Breakpoint]) -> None:
    """Reject tables the interpolation formula cannot use.

    A table must have exactly ``BREAK_COUNT`` rows, each with ``lo < hi``,
    and both the low and the high column must be strictly ascending. Together
    these guarantee a non-zero denominator for any pair of indices returned
    by :func:`low_index` and :func:`high_index`.
    """
    if len(entries) != BREAK_COUNT:
        raise MalformedTableError(
            f"{name}: expected {BREAK_COUNT} breakpoints, got {len(entries)}"
        )
    for i, bp in enumerate(entries):
        if not bp.lo < bp.hi:
            raise MalformedTableError(
                f"{name}: breakpoint {i} has lo={bp.lo} >= hi={bp.hi}"
            )
        if i and not (entries[i - 1].lo < bp.lo and entries[i - 1].hi < bp.hi):
            raise MalformedTableError(f"{name}: breakpoint {i} is not ascending")


def low_index(val: float, table: BreakpointTable) -> int:
    """Index of the highest breakpoint whose ``lo`` is <= ``val``.

    Values below the first breakpoint clamp to index 0.
    """
    for i in range(len(table) - 1, -1, -1):
        if table[i].lo <= val:
            return i
    return 0


def high_index(val: float, table: BreakpointTable) -> int:
    """Index of the lowest breakpoint whose ``hi`` is >= ``val``.

    Values above the last breakpoint clamp to the last index.
    """
    for i, bp in enumerate(table):
        if bp.hi >= val:
            return i
    return len(table) - 1


def low_index_array(vals: np.ndarray, table: BreakpointTable) -> np.ndarray:
    """Vectorised :func:`low_index` using binary search."""
    idx = np.searchsorted(table.lows, vals, side="right") - 1
    return np.clip(idx, 0, len(table) - 1)


def high_index_array(vals: np.ndarray, table: BreakpointTable) -> np.ndarray:
    """Vectorised :func:`high_index` using binary search."""
    idx = np.searchsorted(table.highs, vals, side="left")
    return np.clip(idx, 0, len(table) - 1)


AQI_TABLE = BreakpointTable.from_pairs("AQI", AQI_BREAKS)
