"""Read interaction logs in SNAP temporal-edge format.

Each data line holds three whitespace-separated non-negative integers:

    sender receiver time

Blank lines and lines starting with '#' are skipped. Anything else that
does not parse raises RecordFormatError; bad lines are never coerced.
"""

from __future__ import annotations

import gzip
import logging
import re
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import numpy as np

from .config import COMMENT_PREFIX
from .errors import RecordFormatError
from .records import InteractionRecord, InteractionRecords

logger = logging.getLogger(__name__)

# ASCII digits only
_DIGITS = re.compile(r"[0-9]+")
_NEGATIVE = re.compile(r"-[0-9]+")


def parse_line(line: str, line_no: Optional[int] = None) -> InteractionRecord:
    parts = line.split()
    if len(parts) != 3:
        raise RecordFormatError(
            f"expected 3 fields, got {len(parts)}", line_no=line_no, line=line.rstrip("\n")
        )
    for p in parts:
        if _DIGITS.fullmatch(p):
            continue
        reason = "negative" if _NEGATIVE.fullmatch(p) else "non-integer"
        raise RecordFormatError(
            f"{reason} field in {line.strip()!r}", line_no=line_no, line=line.rstrip("\n")
        )
    sender, receiver, ts = (int(p) for p in parts)
    return InteractionRecord(sender, receiver, ts)


def parse_lines(lines: Iterable[str]) -> Iterator[InteractionRecord]:
    for i, line in enumerate(lines, start=1):
        if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX):
            continue
        yield parse_line(line, line_no=i)


def _open_text(path: Path):
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return open(path, "r", encoding="utf-8")


def load_interactions(path: Union[str, PathLike]) -> InteractionRecords:
    """Load every record of a plain or gzip-compressed interaction file."""
    path = Path(path)
    with _open_text(path) as f:
        rows = list(parse_lines(f))

    if not rows:
        records = InteractionRecords.empty()
    else:
        arr = np.asarray(rows, dtype=np.int64)
        records = InteractionRecords(arr[:, 0], arr[:, 1], arr[:, 2])
    logger.info("Loaded %d interactions from %s", len(records), path)
    return records
