"""
canonical_json.py — Compact JSON for RTM command payloads

Commands are sent as a single line of JSON:
- UTF-8, non-ASCII characters kept as-is
- No insignificant whitespace
- Keys in insertion order (cmd, op, appId, peerId, t, n, s, m, cid),
  matching the order clients have always sent
- No NaN/Infinity (raises ValueError)
"""

from __future__ import annotations
import json
from typing import Any


def command_dumps(obj: Any) -> str:
    """Return compact single-line JSON with insertion-ordered keys."""
    return json.dumps(
        obj,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )

