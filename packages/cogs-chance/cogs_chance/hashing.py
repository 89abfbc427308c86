"""Constant "random-ish" values derived from other values."""
from __future__ import annotations

from typing import Any

import xxhash


def hashcode(value: Any, seed: int = 0) -> int:
    """64-bit hash of ``value``, stable for equal values.

    Handy wherever something should look random but never change, such as
    choosing a tile variant from the tile's ICoord. The hash covers the
    value's type and ``repr``, so equal values of different types differ
    (``1`` vs ``"1"``) and results are the same across runs for values
    whose ``repr`` is stable. Not for security.
    """
    kind = type(value)
    payload = f"{kind.__module__}.{kind.__qualname__}:{value!r}".encode()
    return xxhash.xxh64_intdigest(payload, seed=seed)
