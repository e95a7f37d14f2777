# utils/validators.py
"""
Signal Simulator Validation Utilities
Input validation for initial conditions and request data.
"""

from typing import Any, List, Optional, Sequence
from .exceptions import ValidationError

def _parse_int(raw: Any, what: str) -> int:
    """Parse an integer from user input, rejecting bools and fractional values."""
    if isinstance(raw, bool):
        raise ValidationError(f"{what} must be an integer: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValidationError(f"{what} must be an integer: {raw!r}")
        return int(raw)
    if raw is None:
        raise ValidationError(f"{what} is missing")
    text = str(raw).strip()
    if not text:
        raise ValidationError(f"{what} is missing")
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"{what} must be an integer: {raw!r}")

def validate_lane_count(raw: Any) -> int:
    """Parse one lane's initial vehicle count; negative values clamp to zero."""
    value = _parse_int(raw, "Vehicle count")
    return max(0, value)

def validate_lane_counts(values: Sequence[Any], lane_count: int) -> List[int]:
    """Validate the initial counts for every lane of the intersection."""
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"Lane counts must be a list of {lane_count} integers")

    if len(values) != lane_count:
        raise ValidationError(f"Expected {lane_count} lane counts, got {len(values)}")

    return [validate_lane_count(v) for v in values]

def validate_cycle_count(raw: Any, maximum: Optional[int] = None) -> int:
    """Validate the number of cycles to simulate (must be positive)."""
    cycles = _parse_int(raw, "Cycle count")
    if cycles <= 0:
        raise ValidationError(f"Cycle count must be positive: {cycles}")

    if maximum is not None and cycles > maximum:
        raise ValidationError(f"Cycle count {cycles} exceeds the limit of {maximum}")

    return cycles

def validate_intersection_name(name: Optional[str], max_length: int) -> str:
    """Validate an intersection label, truncating it to the bounded length."""
    if name is None or not str(name).strip():
        raise ValidationError("Intersection name cannot be empty")

    return str(name)[:max_length]

def validate_seed(raw: Any) -> Optional[int]:
    """Validate an optional random seed (non-negative integer)."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None

    seed = _parse_int(raw, "Seed")
    if seed < 0:
        raise ValidationError(f"Seed must be non-negative: {seed}")

    return seed
