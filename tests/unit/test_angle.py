# tests/unit/test_angle.py
import pytest

from pose_feedback.analyze.constants import LIMB_CONNECTIONS, PoseLandmark
from pose_feedback.domain.angle.calculator import AngleCalculator, extract_limb_angles
from pose_feedback.schemas.frame_dto import CoordinatePoint
from tests.test_helpers import (
    REFERENCE_COORDS,
    adjust_coords,
    assert_angle_range,
    create_frame,
    without,
)


def _snapshot(coords):
    return {lm: CoordinatePoint(x=x, y=y) for lm, (x, y) in coords.items()}


def test_reference_pose_angles():
    """레퍼런스 포즈 → [180, 135, 180, 135]"""
    angles = extract_limb_angles(_snapshot(REFERENCE_COORDS))
    assert angles == pytest.approx([180.0, 135.0, 180.0, 135.0])


def test_shifted_left_wrist_straightens_forearm():
    """왼쪽 손목 (+1, 0) 이동 → 두 번째 각도 135 → 180"""
    angles = extract_limb_angles(
        _snapshot(adjust_coords({PoseLandmark.LEFT_WRIST: (1, 0)}))
    )
    assert angles == pytest.approx([180.0, 180.0, 180.0, 135.0])


@pytest.mark.parametrize(
    "end, expected",
    [
        ((0, 1), 0.0),      # 수직 (y 증가 방향)
        ((0, -1), 180.0),   # 수직 (반대 방향)
        ((1, 0), 90.0),     # 수평 오른쪽
        ((-1, 0), 90.0),    # 수평 왼쪽 → 접혀서 90
        ((1, 1), 45.0),
        ((-1, 1), 45.0),
    ],
)
def test_angle_measured_from_vertical_axis(end, expected):
    snap = {
        PoseLandmark.LEFT_SHOULDER: CoordinatePoint(x=0, y=0),
        PoseLandmark.LEFT_ELBOW: CoordinatePoint(x=end[0], y=end[1]),
    }
    angles = extract_limb_angles(snap)
    assert angles[0] == pytest.approx(expected)


def test_missing_endpoint_yields_none():
    angles = extract_limb_angles(_snapshot(without(PoseLandmark.RIGHT_WRIST)))
    assert len(angles) == len(LIMB_CONNECTIONS)
    assert angles[3] is None
    assert angles[:3] == pytest.approx([180.0, 135.0, 180.0])


def test_explicit_none_coordinate_yields_none():
    snap = _snapshot(REFERENCE_COORDS)
    snap[PoseLandmark.LEFT_ELBOW] = None
    angles = extract_limb_angles(snap)
    # LEFT_ELBOW 가 끼는 두 연결 모두 계산 불가
    assert angles[0] is None
    assert angles[1] is None
    assert angles[2] is not None


def test_empty_snapshot_keeps_one_entry_per_connection():
    assert extract_limb_angles({}) == [None] * len(LIMB_CONNECTIONS)


def test_angles_always_in_range():
    coords = {
        PoseLandmark.LEFT_SHOULDER: (0.3, -7.0),
        PoseLandmark.RIGHT_SHOULDER: (-2.5, 1.25),
        PoseLandmark.LEFT_ELBOW: (10.0, 3.3),
        PoseLandmark.RIGHT_ELBOW: (-0.1, -0.2),
        PoseLandmark.LEFT_WRIST: (-4.0, 8.0),
        PoseLandmark.RIGHT_WRIST: (6.0, -9.5),
    }
    for angle in extract_limb_angles(_snapshot(coords)):
        assert angle is not None
        assert_angle_range(angle)


def test_extractor_is_idempotent_and_pure():
    frame = create_frame("ref")
    before = dict(frame.landmarks)

    calc = AngleCalculator()
    first = calc.calculate(frame)
    second = calc.calculate(frame)

    assert first == second
    assert dict(frame.landmarks) == before


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_coordinate_yields_none(bad):
    coords = dict(REFERENCE_COORDS)
    coords[PoseLandmark.RIGHT_WRIST] = (bad, 2.0)
    angles = extract_limb_angles(_snapshot(coords))

    assert angles[3] is None
    assert angles[:3] == pytest.approx([180.0, 135.0, 180.0])
