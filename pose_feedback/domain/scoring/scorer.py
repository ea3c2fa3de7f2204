"""
차이/정확도 계산 Domain Logic
기준(reference) 각도 vs 연습(practice) 각도 → 위치별 delta + 종합 정확도

결측 데이터 정책 (DeltaStatus):
- present: 양쪽 모두 수치 → delta = practice - reference
- missing: 한쪽이라도 None(관절 미검출) 또는 NaN/inf → delta 없음, 평균에서 제외
- absent : practice 시퀀스에 해당 위치 자체가 없음(길이 불일치)
           → delta = 0.0 으로 보고 평균에 포함 (완벽 일치로 간주하는 기존 정책 유지)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from pose_feedback.analyze.constants import ACCURACY_RANGE

logger = logging.getLogger(__name__)


class DeltaStatus(str, Enum):
    present = "present"
    missing = "missing"
    absent = "absent"


class AngleDelta(BaseModel):
    """1개 림 연결의 각도 차이"""
    model_config = ConfigDict(frozen=True)

    status: DeltaStatus
    value: Optional[float] = Field(None, description="부호 있는 차이(도), missing이면 None")

    @property
    def is_counted(self) -> bool:
        """정확도 평균에 포함되는지 여부"""
        return self.status is not DeltaStatus.missing


class ScoreResult(BaseModel):
    """비교 결과 (delta 시퀀스 + 정확도)"""
    model_config = ConfigDict(frozen=True)

    deltas: List[AngleDelta]
    accuracy: float = Field(..., ge=0.0, le=100.0)


def compute_angle_differences(
    reference: Sequence[Optional[float]],
    practice: Sequence[Optional[float]],
) -> List[AngleDelta]:
    """
    reference 길이 기준으로 위치별 delta 계산.
    practice가 더 길면 초과분은 무시한다.
    """
    deltas: List[AngleDelta] = []

    for i, ref in enumerate(reference):
        if i >= len(practice):
            deltas.append(AngleDelta(status=DeltaStatus.absent, value=0.0))
            continue

        prac = practice[i]
        if not (_is_finite(ref) and _is_finite(prac)):
            deltas.append(AngleDelta(status=DeltaStatus.missing))
            continue

        deltas.append(AngleDelta(status=DeltaStatus.present, value=prac - ref))

    return deltas


def _is_finite(angle: Optional[float]) -> bool:
    return angle is not None and bool(np.isfinite(angle))


def calculate_accuracy(deltas: Sequence[AngleDelta]) -> float:
    """
    정확도 = max(0, 100 - mean(|delta|)), [0, 100] 클램프.
    평균에 포함될 delta가 하나도 없으면 0.
    """
    counted = [abs(d.value) for d in deltas if d.is_counted and d.value is not None]
    if not counted:
        return 0.0

    avg_diff = float(np.mean(counted))
    lo, hi = ACCURACY_RANGE
    return float(np.clip(100.0 - avg_diff, lo, hi))


class DifferenceScorer:
    """서비스 주입용 래퍼"""

    def score(
        self,
        reference: Sequence[Optional[float]],
        practice: Sequence[Optional[float]],
    ) -> ScoreResult:
        deltas = compute_angle_differences(reference, practice)
        accuracy = calculate_accuracy(deltas)

        skipped = sum(1 for d in deltas if d.status is DeltaStatus.missing)
        if skipped:
            logger.info(f"ℹ️ {skipped}개 연결은 관절 미검출로 정확도 계산에서 제외")
        if len(practice) < len(reference):
            logger.warning(
                f"⚠️ practice 각도 수({len(practice)})가 reference({len(reference)})보다 적음 "
                "→ 누락 위치는 delta=0 으로 처리"
            )

        return ScoreResult(deltas=deltas, accuracy=accuracy)
