"""
항해등 조합 기반 Heading 분류
"""
from typing import FrozenSet, Iterable, Optional

from .types import LightColor, Heading

_LIGHT_MARKS = {
    "r": LightColor.RED,
    "g": LightColor.GREEN,
    "w": LightColor.WHITE,
}


def parse_light_mark(mark: str) -> Optional[LightColor]:
    """
    Light mark 문자 하나를 LightColor로 변환 (대소문자 무시)

    Args:
        mark: 'r', 'g', 'w' (or upper case)

    Returns:
        LightColor, 인식할 수 없으면 None
    """
    if not isinstance(mark, str):
        return None
    return _LIGHT_MARKS.get(mark.lower())


class HeadingClassifier:
    """
    항해등 조합으로 선박 heading 분류

    Rules:
        - Red: 좌현(port)이 보임 -> LEFT
        - Green: 우현(starboard)이 보임 -> RIGHT
        - Red & Green: 양현이 보임 -> TOWARDS
        - White: 선미(aft)가 보임 -> AWAY
        - 그 외 조합은 UNKNOWN
    """

    HEADING_RULES = {
        frozenset({LightColor.RED, LightColor.GREEN}): Heading.TOWARDS,
        frozenset({LightColor.WHITE}): Heading.AWAY,
        frozenset({LightColor.RED}): Heading.LEFT,
        frozenset({LightColor.GREEN}): Heading.RIGHT,
    }

    @classmethod
    def classify(cls, lights: Iterable[LightColor]) -> Heading:
        """
        Heading 분류 (순서, 중복 무관)

        Args:
            lights: 관측된 LightColor 목록

        Returns:
            Heading
        """
        light_set: FrozenSet[LightColor] = frozenset(lights)
        return cls.HEADING_RULES.get(light_set, Heading.UNKNOWN)

    @staticmethod
    def get_heading_description(heading: Heading) -> str:
        """
        Heading별 판단 근거

        Args:
            heading: Heading

        Returns:
            판단 근거 설명
        """
        descriptions = {
            Heading.TOWARDS: "Red & Green: 양현등이 모두 보임. 본선 방향으로 접근 중",
            Heading.AWAY: "White: 선미등이 보임. 본선에서 멀어지는 중",
            Heading.LEFT: "Red: 좌현등이 보임. 좌측으로 진행 중",
            Heading.RIGHT: "Green: 우현등이 보임. 우측으로 진행 중",
            Heading.UNKNOWN: "등화 조합 불일치 또는 인식 불가. 진행 방향 판단 불가",
        }
        return descriptions.get(heading, "Unknown")
