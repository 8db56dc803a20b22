import math

def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``.5`` upwards (CSS / JavaScript style, not banker's rounding)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
