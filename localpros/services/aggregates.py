# localpros/services/aggregates.py
"""Read-side values derived from full row scans on every call."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Sized


def average_rating(ratings: Iterable[int]) -> float:
    """Mean of the ratings rounded half-up to one decimal; 0 when there are none."""
    values = [int(r) for r in ratings]
    if not values:
        return 0.0
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def provider_average_rating(reviews) -> float:
    return average_rating(r.rating for r in reviews)


def contact_count(contacts: Sized) -> int:
    return len(contacts)
