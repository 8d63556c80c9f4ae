from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)

_FIELD_SPLIT = re.compile(r"\s*,\s*")


@dataclass(frozen=True)
class WeightTriple:
    """Linear boundary ``w0 + w1 * x1 + w2 * x2 = 0``."""

    w0: float
    w1: float
    w2: float


def _is_header(line: str) -> bool:
    lowered = line.lower()
    return "w0" in lowered and "w1" in lowered and "w2" in lowered


def _parse_row(line: str):
    parts = _FIELD_SPLIT.split(line)
    if len(parts) < 3:
        return None
    try:
        values = [float(part) for part in parts[:3]]
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    return WeightTriple(*values)


def parse_weight_sequence(text: str) -> Tuple[WeightTriple, ...]:
    """
    Parse ``w0,w1,w2`` rows into an ordered weight sequence.

    Blank lines are ignored and a first line mentioning w0, w1 and w2 is
    treated as a header. Rows with fewer than three fields or with a field
    that is not a finite number are dropped; this never raises for malformed
    text.

    Args:
        text: Free-form text, one row per line, any line-ending convention.

    Returns:
        Tuple of WeightTriple in row order (possibly empty).
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return ()

    start = 1 if _is_header(lines[0]) else 0

    out = []
    dropped = 0
    for line in lines[start:]:
        triple = _parse_row(line)
        if triple is None:
            dropped += 1
            logger.debug("Dropping malformed weight row: %r", line)
            continue
        out.append(triple)

    if dropped:
        logger.debug("Parsed %d weight rows, dropped %d", len(out), dropped)
    return tuple(out)


def weights_to_csv(weights: Iterable[WeightTriple]) -> str:
    """Render a weight sequence as CSV with a ``w0,w1,w2`` header."""
    lines = ["w0,w1,w2"]
    for w in weights:
        lines.append(f"{w.w0!r},{w.w1!r},{w.w2!r}")
    return "\n".join(lines)


def load_weight_sequence(path: str | Path) -> Tuple[WeightTriple, ...]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Weights file not found at {path}")
    return parse_weight_sequence(path.read_text(encoding="utf-8"))
