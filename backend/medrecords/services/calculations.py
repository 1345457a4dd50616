"""Values derived from stored fields at a point in time. No side effects."""

from datetime import date
from typing import Optional, Union


def calculate_age(birth_date: Union[date, str], as_of: Optional[date] = None) -> int:
    """Full calendar years elapsed between ``birth_date`` and ``as_of`` (default today)."""
    if isinstance(birth_date, str):
        birth_date = date.fromisoformat(birth_date)
    as_of = as_of or date.today()
    age = as_of.year - birth_date.year
    if (as_of.month, as_of.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def calculate_bmi(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """weight / height(m)^2 rounded to 2 places, or None unless both are positive."""
    if height_cm is None or weight_kg is None:
        return None
    if height_cm <= 0 or weight_kg <= 0:
        return None
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 2)
