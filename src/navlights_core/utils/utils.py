import numpy as np
from typing import Dict, Iterable, List, Sequence, Tuple

HORIZON_DEGREES = 360


def wrap_degree(degree: int, size: int = HORIZON_DEGREES) -> int:
    """Transform an integer degree to the range [0, size)."""
    return int(degree) % size


def half_angle(angle: int) -> int:
    """
    Half of the binocular angle, truncated toward zero.

    Python's ``//`` floors, so negative angles are handled explicitly.
    """
    angle = int(angle)
    return angle // 2 if angle >= 0 else -((-angle) // 2)


def window_indices(center: int, angle: int, size: int = HORIZON_DEGREES) -> np.ndarray:
    """
    Horizon indices visible through binoculars pointed at ``center``.

    The window is [center - angle/2, center + angle/2], inclusive on both
    ends and circular. When start > end the range wraps around zero and is
    [start, size - 1] followed by [0, end].

    Args:
        center (int): Degree where the binoculars point. Any integer, wrapped to [0, size).
        angle (int): Visible width in degrees. Values >= size cover the whole
            horizon, negative values are clamped to 0.
        size (int): Number of slots on the horizon.

    Returns:
        np.ndarray: Integer indices in visiting order.
    """
    center = wrap_degree(center, size)
    angle = max(int(angle), 0)

    if angle >= size:
        return np.arange(size)

    half = half_angle(angle)
    start = (center - half + size) % size
    end = (center + half) % size

    if start <= end:
        indices = np.arange(start, end + 1)
    else:
        indices = np.concatenate((np.arange(start, size), np.arange(0, end + 1)))

    return indices % size


def validate_horizon(horizon: Sequence[Sequence[str]], size: int = HORIZON_DEGREES) -> None:
    """Raise ValueError unless the horizon has exactly ``size`` slots."""
    if len(horizon) != size:
        raise ValueError(f"horizon must contain exactly {size} slots. Got {len(horizon)}")


def build_horizon(
    marks_by_degree: Dict[int, Iterable[str]],
    size: int = HORIZON_DEGREES
) -> List[Tuple[str, ...]]:
    """
    Build a horizon with empty slots except at the given degrees.

    Args:
        marks_by_degree: Mapping of degree -> light marks observed there.
        size: Number of slots on the horizon.

    Returns:
        list: ``size`` tuples of light marks.
    """
    horizon: List[Tuple[str, ...]] = [() for _ in range(size)]
    for degree, marks in marks_by_degree.items():
        if not 0 <= degree < size:
            raise ValueError(f"degree must be in [0, {size - 1}]. Got {degree}")
        horizon[degree] = tuple(marks)
    return horizon
