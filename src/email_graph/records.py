from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple

import numpy as np
import pandas as pd

from .config import RECORD_FIELDS
from .errors import RecordFormatError


class InteractionRecord(NamedTuple):
    """One email: `sender` wrote to `receiver` at second `time`."""

    sender: int
    receiver: int
    time: int


def _readonly_column(values, name: str) -> np.ndarray:
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise RecordFormatError(f"column {name!r} must be one-dimensional, got shape {arr.shape}")
    if arr.size and arr.dtype.kind not in "iu":
        raise RecordFormatError(f"column {name!r} must hold integers, got dtype {arr.dtype}")
    arr = arr.astype(np.int64, copy=True)
    if arr.size and int(arr.min()) < 0:
        raise RecordFormatError(f"column {name!r} holds negative values")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class InteractionRecords:
    """Canonical, immutable list of raw interaction triples.

    The three columns are aligned read-only int64 arrays kept in input order.
    Duplicate rows are distinct emails and are never collapsed here.
    """

    src: np.ndarray
    dst: np.ndarray
    t: np.ndarray

    def __post_init__(self):
        src = _readonly_column(self.src, "src")
        dst = _readonly_column(self.dst, "dst")
        t = _readonly_column(self.t, "t")
        if not (len(src) == len(dst) == len(t)):
            raise RecordFormatError(
                f"column lengths differ: src={len(src)}, dst={len(dst)}, t={len(t)}"
            )
        object.__setattr__(self, "src", src)
        object.__setattr__(self, "dst", dst)
        object.__setattr__(self, "t", t)

    # ---- constructors ---------------------------------------------------------

    @classmethod
    def empty(cls) -> "InteractionRecords":
        z = np.zeros(0, dtype=np.int64)
        return cls(z, z, z)

    @classmethod
    def from_triples(cls, triples: Iterable[Iterable[int]]) -> "InteractionRecords":
        """Build from an iterable of (sender, receiver, time) triples."""
        rows = [tuple(r) for r in triples]
        if not rows:
            return cls.empty()
        try:
            arr = np.asarray(rows)
        except ValueError as exc:  # ragged rows
            raise RecordFormatError("every record must have exactly 3 fields") from exc
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise RecordFormatError("every record must have exactly 3 fields")
        return cls(arr[:, 0], arr[:, 1], arr[:, 2])

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "InteractionRecords":
        """Build from a DataFrame with columns src, dst, t."""
        missing = [c for c in RECORD_FIELDS if c not in df.columns]
        if missing:
            raise RecordFormatError(f"missing columns: {missing}")
        return cls(*(df[c].to_numpy() for c in RECORD_FIELDS))

    # ---- views ----------------------------------------------------------------

    def __len__(self) -> int:
        return int(self.t.shape[0])

    def __iter__(self) -> Iterator[InteractionRecord]:
        for s, d, ts in zip(self.src.tolist(), self.dst.tolist(), self.t.tolist()):
            yield InteractionRecord(s, d, ts)

    def to_frame(self) -> pd.DataFrame:
        """Copy of the records as a DataFrame (columns src, dst, t)."""
        return pd.DataFrame({"src": self.src.copy(), "dst": self.dst.copy(), "t": self.t.copy()})

    def actor_ids(self) -> set[int]:
        """Every sender and receiver id (a fresh set)."""
        if len(self) == 0:
            return set()
        return set(np.union1d(self.src, self.dst).tolist())

    def take(self, mask: np.ndarray) -> "InteractionRecords":
        """Rows selected by a boolean mask (or index array), order preserved."""
        return InteractionRecords(self.src[mask], self.dst[mask], self.t[mask])

    def sorted_by_time(self) -> "InteractionRecords":
        """Stable copy ordered by time; ties keep input order."""
        order = np.argsort(self.t, kind="stable")
        return self.take(order)

    def window(self, t0: int, t1: int) -> "InteractionRecords":
        return filter_by_time(self, t0, t1)

    def involving(self, actor_ids: Iterable[int]) -> "InteractionRecords":
        return filter_by_actors(self, actor_ids)


def filter_by_time(records: InteractionRecords, t0: int, t1: int) -> InteractionRecords:
    """Records with t0 <= t <= t1 (inclusive). Empty if t0 > t1."""
    if t0 > t1:
        return InteractionRecords.empty()
    mask = (records.t >= t0) & (records.t <= t1)
    return records.take(mask)


def filter_by_actors(records: InteractionRecords, actor_ids: Iterable[int]) -> InteractionRecords:
    """Records whose sender or receiver is in `actor_ids`."""
    ids = np.fromiter((int(a) for a in set(actor_ids)), dtype=np.int64)
    mask = np.isin(records.src, ids) | np.isin(records.dst, ids)
    return records.take(mask)
