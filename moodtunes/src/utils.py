import math
from typing import Dict, Iterable, List


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round2(value: float) -> float:
    return round(value, 2)


def unique(items: Iterable[str]) -> List[str]:
    """Dedup preserving first-seen order."""
    seen = set()
    out: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            out.append(item)
    return out


def normalize_scores(scores: Dict[str, float]) -> Dict[str, float]:
    """Divide every score by the total and round to 2 decimals.

    Rounding uses largest remainders: every value is floored to whole
    hundredths and the missing hundredths go to the values that lost the most,
    so the result always sums to exactly 1.00. Ties keep input order.

    Raises ValueError for negative, non-finite or all-zero input so callers can
    decide how to degrade.
    """
    if not scores:
        raise ValueError("empty score map")
    for key, value in scores.items():
        if value is None or value != value or value < 0 or value == float("inf"):
            raise ValueError(f"invalid score for {key}: {value!r}")
    total = sum(scores.values())
    if total <= 0:
        raise ValueError("scores sum to zero")
    shares = {key: value / total * 100 for key, value in scores.items()}
    cents = {key: math.floor(round(share, 9)) for key, share in shares.items()}
    leftover = 100 - sum(cents.values())
    for key in sorted(shares, key=lambda k: shares[k] - cents[k], reverse=True)[:leftover]:
        cents[key] += 1
    return {key: cents[key] / 100 for key in scores}
