"""
Binoculars: 수평선 위 선박 집계
"""
import logging
import numpy as np
from typing import Callable, Sequence

from ..lights import Heading, Vessel
from ..utils import HORIZON_DEGREES, window_indices, validate_horizon

logger = logging.getLogger(__name__)

Horizon = Sequence[Sequence[str]]
HeadingFilter = Callable[[Heading], bool]


def _any_heading(heading: Heading) -> bool:
    return True


class Binoculars:
    """
    쌍안경으로 수평선(360 slots)을 관측

    Horizon은 360개 slot으로 구성되며 각 slot은 해당 방위에서 관측된
    light mark 목록 (비어 있으면 선박 없음). center는 쌍안경이 향하는 방위,
    angle은 보이는 범위 (zoom이 클수록 angle이 작음).
    """

    HORIZON_DEGREES = HORIZON_DEGREES

    def count_vessels(
        self,
        horizon: Horizon,
        center: int,
        angle: int,
        heading_filter: HeadingFilter = _any_heading
    ) -> int:
        """
        쌍안경 시야 안에서 조건을 만족하는 선박 수

        Args:
            horizon: 360개 slot의 light mark 목록
            center: 쌍안경 방위 (degrees, 음수 허용)
            angle: 시야각 (degrees)
            heading_filter: Heading -> bool

        Returns:
            선박 수

        Raises:
            ValueError: If horizon does not have 360 slots
        """
        validate_horizon(horizon, self.HORIZON_DEGREES)

        indices = window_indices(center, angle, self.HORIZON_DEGREES)
        logger.debug(
            "Window center=%s angle=%s covers %d slots (%d..%d)",
            center, angle, len(indices), indices[0], indices[-1]
        )

        count = 0
        for i in indices:
            marks = horizon[int(i) % self.HORIZON_DEGREES]
            if not marks:
                continue
            if heading_filter(Vessel(tuple(marks)).heading):
                count += 1
        return count

    def most_vessels(self, horizon: Horizon, angle: int) -> int:
        """
        가장 많은 선박이 보이는 쌍안경 방위

        Args:
            horizon: 360개 slot의 light mark 목록
            angle: 시야각 (degrees)

        Returns:
            center (degrees, [0, 360)). 동률이면 가장 작은 방위
        """
        counts = np.array([
            self.count_vessels(horizon, center, angle)
            for center in range(self.HORIZON_DEGREES)
        ])
        # argmax returns the first occurrence of the maximum
        best_center = int(np.argmax(counts))
        logger.debug(
            "Best center for angle=%s is %d with %d vessels",
            angle, best_center, counts[best_center]
        )
        return best_center


_default_binoculars = Binoculars()


def count_vessels(
    horizon: Horizon,
    center: int,
    angle: int,
    heading_filter: HeadingFilter = _any_heading
) -> int:
    """`Binoculars.count_vessels` on a shared instance"""
    return _default_binoculars.count_vessels(horizon, center, angle, heading_filter)


def most_vessels(horizon: Horizon, angle: int) -> int:
    """`Binoculars.most_vessels` on a shared instance"""
    return _default_binoculars.most_vessels(horizon, angle)
