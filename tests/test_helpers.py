"""
테스트 헬퍼 함수들

재사용 가능한 테스트 데이터 생성 및 검증 로직
"""
from typing import Dict, List, Optional, Tuple

from pose_feedback.analyze.constants import PoseLandmark
from pose_feedback.schemas.frame_dto import CoordinatePoint, FrameRecord


GOOD_FEEDBACK = (
    "Great effort! Your LEFT_ELBOW is well aligned, but straighten the LEFT_WRIST "
    "a little more. Keep it up!"
)

# 레퍼런스 포즈: 양팔을 아래로 벌린 자세
REFERENCE_COORDS: Dict[PoseLandmark, Tuple[float, float]] = {
    PoseLandmark.LEFT_SHOULDER: (2, 4),
    PoseLandmark.RIGHT_SHOULDER: (4, 4),
    PoseLandmark.LEFT_ELBOW: (2, 3),
    PoseLandmark.RIGHT_ELBOW: (4, 3),
    PoseLandmark.LEFT_WRIST: (1, 2),
    PoseLandmark.RIGHT_WRIST: (5, 2),
}


def create_frame(
    frame_id: str,
    coords: Optional[Dict[PoseLandmark, Optional[Tuple[float, float]]]] = None,
    frame_number: int = 0,
) -> FrameRecord:
    """좌표 dict → FrameRecord (값이 None이면 해당 관절 누락)"""
    coords = REFERENCE_COORDS if coords is None else coords
    landmarks = {
        lm: (None if xy is None else CoordinatePoint(x=xy[0], y=xy[1]))
        for lm, xy in coords.items()
    }
    return FrameRecord(id=frame_id, landmarks=landmarks, frame_number=frame_number)


def adjust_coords(
    changes: Dict[PoseLandmark, Tuple[float, float]],
    base: Optional[Dict[PoseLandmark, Tuple[float, float]]] = None,
) -> Dict[PoseLandmark, Tuple[float, float]]:
    """base 좌표에 (dx, dy) 이동을 적용한 새 dict (원본 불변)"""
    base = REFERENCE_COORDS if base is None else base
    out = dict(base)
    for lm, (dx, dy) in changes.items():
        x, y = out[lm]
        out[lm] = (x + dx, y + dy)
    return out


def without(*landmarks: PoseLandmark) -> Dict[PoseLandmark, Tuple[float, float]]:
    """레퍼런스 좌표에서 특정 관절을 뺀 dict"""
    return {lm: xy for lm, xy in REFERENCE_COORDS.items() if lm not in landmarks}


class ScriptedLLM:
    """
    순서대로 준비된 응답을 돌려주는 가짜 TextCompletion
    - prompts: 실제로 받은 프롬프트 기록
    """

    def __init__(self, responses: List[str]):
        self._responses = list(responses)
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._responses:
            raise AssertionError("ScriptedLLM: no more scripted responses")
        return self._responses.pop(0)


class FailingLLM:
    """n번째 호출에서 예외를 던지는 가짜 TextCompletion"""

    def __init__(self, responses: List[str], error: Exception):
        self._responses = list(responses)
        self._error = error
        self.calls = 0

    async def complete(self, prompt: str) -> str:
        self.calls += 1
        if not self._responses:
            raise self._error
        return self._responses.pop(0)


def assert_angle_range(angle: Optional[float], min_val: float = 0.0, max_val: float = 180.0):
    """각도 범위 검증 (None=계산 불가는 허용)"""
    if angle is None:
        return
    assert min_val <= angle <= max_val, f"Angle {angle} out of range [{min_val}, {max_val}]"
