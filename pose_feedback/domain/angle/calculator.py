"""
각도 계산 Domain Logic
포즈 스냅샷 → 림(limb) 방향 각도 변환

- 각도는 수직축 기준: atan2(dx, dy) (수학 관례와 인자 순서가 반대)
  → 수직 림은 0° 또는 180°, 수평 림은 90° 근처
- 끝점 중 하나라도 없거나 좌표가 유한하지 않으면(NaN/inf) None(계산 불가)을 해당 위치에 채운다
- 입력 스냅샷은 절대 수정하지 않는다 (순수 함수)
"""
from __future__ import annotations

import math
import logging
from typing import TYPE_CHECKING, List, Mapping, Optional

from pose_feedback.analyze.constants import LIMB_CONNECTIONS, PoseLandmark

if TYPE_CHECKING:
    from pose_feedback.schemas.frame_dto import CoordinatePoint, FrameRecord

logger = logging.getLogger(__name__)


def extract_limb_angles(
    snapshot: Mapping[PoseLandmark, Optional["CoordinatePoint"]],
) -> List[Optional[float]]:
    """
    LIMB_CONNECTIONS 순서대로 각도(도, [0, 180])를 반환.
    끝점이 누락됐거나 좌표가 NaN/inf 인 연결은 None.
    """
    angles: List[Optional[float]] = []

    for start, end in LIMB_CONNECTIONS:
        start_point = snapshot.get(start)
        end_point = snapshot.get(end)
        if start_point is None or end_point is None:
            angles.append(None)
            continue

        dx = end_point.x - start_point.x
        dy = end_point.y - start_point.y
        if not (math.isfinite(dx) and math.isfinite(dy)):
            logger.warning(f"⚠️ Non-finite coordinate on {start.name} → {end.name}, angle skipped")
            angles.append(None)
            continue
        angles.append(_vertical_angle_deg(dx, dy))

    logger.debug(f"Calculated limb angles: {angles}")
    return angles


def _vertical_angle_deg(dx: float, dy: float) -> float:
    """변위 벡터의 수직축 기준 각도를 [0, 180]로 접어서 반환"""
    angle = math.atan2(dx, dy)

    # [-π, π] → [0, 2π)
    normalized = angle + 2 * math.pi if angle < 0 else angle
    # (π, 2π) → 반사해서 [0, π]
    folded = 2 * math.pi - normalized if normalized > math.pi else normalized

    return math.degrees(folded)


class AngleCalculator:
    """서비스 주입용 래퍼 (상태 없음)"""

    def calculate(self, frame: "FrameRecord") -> List[Optional[float]]:
        """
        프레임의 각도 시퀀스 계산

        Args:
            frame: 스냅샷을 담은 FrameRecord

        Returns:
            연결별 각도 리스트 (None=계산 불가)
        """
        return extract_limb_angles(frame.landmarks)
