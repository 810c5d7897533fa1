"""
NavLights Core - Navigation Light Heading Classification and Horizon Lookout

Classifies vessels by their observed navigation lights and counts them
through binoculars pointed at a 360-degree horizon.
"""

from .lights.classifier import HeadingClassifier, parse_light_mark
from .lights.types import LightColor, Heading
from .lights.vessel import Vessel
from .horizon.binoculars import Binoculars, count_vessels, most_vessels
from .utils import build_horizon


__version__ = "0.1.0"
__author__ = "Maritime Robotics Lab"

__all__ = [
    # Main classes
    "HeadingClassifier",
    "Binoculars",

    # Functions
    "parse_light_mark",
    "count_vessels",
    "most_vessels",
    "build_horizon",

    # Types and enums
    "LightColor",
    "Heading",
    "Vessel",
]
