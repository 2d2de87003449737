"""Type aliases used across sheetcheck."""

from __future__ import annotations

RowNumber = int  # 1-based, matches input order
RawRow = dict[str, str]  # header -> cell text, before destringing
