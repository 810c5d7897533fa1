"""
Light mark parsing and heading classification
"""

from .types import LightColor, Heading
from .classifier import parse_light_mark, HeadingClassifier
from .vessel import Vessel

__all__ = [
    'LightColor',
    'Heading',
    'Vessel',
    'parse_light_mark',
    'HeadingClassifier',
]
