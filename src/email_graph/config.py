"""Defaults shared by the graph engine and the command-line front end."""

from __future__ import annotations

from pathlib import Path

# Reference dataset (same line format: src dst ts, ts in seconds)
SNAP_URL = "https://snap.stanford.edu/data/email-Eu-core-temporal.txt.gz"
DEFAULT_DATA_DIR = Path("data")

# Record columns, in file order
RECORD_FIELDS = ("src", "dst", "t")
COMMENT_PREFIX = "#"

# Timestamps are seconds
SECONDS_PER_HOUR = 3600

# Sentinels for absent results
NOT_FOUND = -1
NO_PATH = None
