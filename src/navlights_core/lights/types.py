"""
Navigation light and heading types
"""
from enum import Enum


class LightColor(Enum):
    """
    선박 항해등 색상
    """
    GREEN = "green"    # 우현등 (starboard)
    RED = "red"        # 좌현등 (port)
    WHITE = "white"    # 선미등 (stern)


class Heading(Enum):
    """
    관측된 항해등 조합으로 추정한 선박 진행 방향
    """
    TOWARDS = "towards"    # 양현등 모두 보임
    AWAY = "away"          # 선미등만 보임
    LEFT = "left"          # 좌현등만 보임
    RIGHT = "right"        # 우현등만 보임
    UNKNOWN = "unknown"    # 판단 불가
