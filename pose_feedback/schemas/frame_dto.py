"""
프레임(포즈 스냅샷) 관련 DTO
포즈 소스 → 분석 파이프라인 입력용
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from pose_feedback.analyze.constants import PoseLandmark
from pose_feedback.domain.angle.calculator import extract_limb_angles


class CoordinatePoint(BaseModel):
    """2D 좌표 (검출기 좌표계 그대로, 정규화/범위 제한 없음)"""
    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="X 좌표")
    y: float = Field(..., description="Y 좌표")


LandmarkSnapshot = Dict[PoseLandmark, Optional[CoordinatePoint]]


class FrameRecord(BaseModel):
    """1개 프레임의 스냅샷 + 파생 각도"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="프레임 ID")
    landmarks: LandmarkSnapshot = Field(
        default_factory=dict,
        description="PoseLandmark → 좌표 (없으면 null/누락)",
    )
    frame_number: int = Field(0, ge=0, description="시퀀스 내 위치")

    @computed_field
    @property
    def angles(self) -> List[Optional[float]]:
        """LIMB_CONNECTIONS 순서의 각도 (항상 스냅샷에서 재계산, None=계산 불가)"""
        return extract_limb_angles(self.landmarks)

    def coordinate(self, landmark: PoseLandmark) -> Optional[CoordinatePoint]:
        return self.landmarks.get(landmark)

    @field_validator("landmarks", mode="before")
    @classmethod
    def _coerce_landmark_keys(cls, v):
        # JSON 입력은 키가 문자열 → 인덱스("0") 또는 이름("LEFT_SHOULDER") 모두 허용
        if not isinstance(v, dict):
            return v
        return {_to_landmark(k): p for k, p in v.items()}


def _to_landmark(key) -> PoseLandmark:
    if isinstance(key, PoseLandmark):
        return key
    if isinstance(key, int):
        return PoseLandmark(key)
    text = str(key).strip()
    if text.isdigit():
        return PoseLandmark(int(text))
    try:
        return PoseLandmark[text.upper()]
    except KeyError:
        raise ValueError(f"unknown landmark key: {key!r}") from None
