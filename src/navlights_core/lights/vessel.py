"""
관측 선박 (Observation)
"""
import logging
from typing import NamedTuple, Optional, Tuple

from .types import LightColor, Heading
from .classifier import parse_light_mark, HeadingClassifier

logger = logging.getLogger(__name__)


class Vessel(NamedTuple):
    """
    한 방위에서 관측된 선박 (raw light mark 목록)

    모든 light mark가 해석되어야 heading을 판단할 수 있음.
    하나라도 인식할 수 없으면 UNKNOWN.
    """
    light_marks: Tuple[str, ...]

    @property
    def lights(self) -> Optional[Tuple[LightColor, ...]]:
        """모든 mark가 해석되면 LightColor 목록, 하나라도 실패하면 None"""
        parsed = tuple(parse_light_mark(mark) for mark in self.light_marks)
        if any(light is None for light in parsed):
            logger.debug("Unrecognized light mark in %s", self.light_marks)
            return None
        return parsed

    @property
    def heading(self) -> Heading:
        """진행 방향 (매 호출마다 다시 계산)"""
        lights = self.lights
        if lights is None:
            return Heading.UNKNOWN
        return HeadingClassifier.classify(lights)
