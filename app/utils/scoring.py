import math
import re
from typing import Any, Iterable, Optional

from app.models.response_models import Level, ScoreResult

# (lower inclusive, upper exclusive)
SEVERITY_BANDS = {
    (-math.inf, 10): Level.LOW,
    (10, 20): Level.MODERATE,
    (20, math.inf): Level.HIGH,
}

_INT_PREFIX = re.compile(r"[+-]?[0-9]+")


def parse_answer(value: Any) -> int:
    """Coerce a single answer to an int, falling back to 0.

    Strings keep their leading integer prefix ("3.5" -> 3, "4abc" -> 4),
    floats are truncated toward zero. Anything else counts as 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value.strip())
        return int(match.group()) if match else 0
    return 0


def classify(score: int, mapping: dict = SEVERITY_BANDS) -> Level:
    for (low, high), level in mapping.items():
        if low <= score < high:
            return level
    # unreachable with the default bands, which cover every integer
    raise ValueError(f"no severity band for score {score}")


def evaluate(answers: Optional[Iterable[Any]]) -> ScoreResult:
    score = sum(parse_answer(a) for a in (answers or []))
    return ScoreResult(score=score, level=classify(score))
