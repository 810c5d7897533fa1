"""
Horizon aggregation
"""

from .binoculars import (
    Binoculars,
    count_vessels,
    most_vessels,
)

__all__ = [
    'Binoculars',
    'count_vessels',
    'most_vessels',
]
