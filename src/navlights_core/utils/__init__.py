from .utils import (
    HORIZON_DEGREES,
    wrap_degree,
    half_angle,
    window_indices,
    validate_horizon,
    build_horizon,
)

__all__ = [
    'HORIZON_DEGREES',
    'wrap_degree',
    'half_angle',
    'window_indices',
    'validate_horizon',
    'build_horizon',
]
