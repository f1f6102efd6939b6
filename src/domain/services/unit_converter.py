"""Weight and height unit conversion for display.

Canonical storage is always kilograms and centimetres. Converting to
imperial and back rounds to two decimals each way, so repeated toggling
without re-fetching drifts by up to a few hundredths. That loss is accepted.
"""

LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54


def _parse(value: str) -> float | None:
    try:
        return float((value or "").strip())
    except ValueError:
        return None


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def kg_to_lbs(kg: float) -> float:
    return round(kg * LBS_PER_KG, 2)


def lbs_to_kg(lbs: float) -> float:
    return round(lbs / LBS_PER_KG, 2)


def cm_to_inches(cm: float) -> float:
    return round(cm / CM_PER_INCH, 2)


def inches_to_cm(inches: float) -> float:
    return round(inches * CM_PER_INCH, 2)


def toggle_units(weight: str, height: str, currently_imperial: bool) -> tuple[str, str, bool]:
    """Flip the display unit of a weight/height pair.

    Values that do not parse as numbers (including empty strings) are
    returned unchanged.

    Args:
        weight: Weight in the current display unit.
        height: Height in the current display unit.
        currently_imperial: True if the values are in lbs/inches.

    Returns:
        ``(new_weight, new_height, newly_imperial)``.
    """
    w = _parse(weight)
    h = _parse(height)

    if currently_imperial:
        new_weight = _fmt(lbs_to_kg(w)) if w is not None else weight
        new_height = _fmt(inches_to_cm(h)) if h is not None else height
    else:
        new_weight = _fmt(kg_to_lbs(w)) if w is not None else weight
        new_height = _fmt(cm_to_inches(h)) if h is not None else height

    return new_weight, new_height, not currently_imperial


def to_metric(weight: str, height: str, imperial: bool) -> tuple[str, str]:
    """Express display values in the canonical metric unit."""
    if not imperial:
        return weight, height
    new_weight, new_height, _ = toggle_units(weight, height, currently_imperial=True)
    return new_weight, new_height
