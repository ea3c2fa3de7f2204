import pytest
from pydantic import ValidationError

from pose_feedback.analyze.constants import PoseLandmark
from pose_feedback.schemas.frame_dto import FrameRecord


def test_landmark_keys_accept_names_and_indices():
    frame = FrameRecord.model_validate(
        {
            "id": "f1",
            "landmarks": {
                "LEFT_SHOULDER": {"x": 2, "y": 4},
                "2": {"x": 2, "y": 3},
                "right_wrist": None,
            },
        }
    )
    assert frame.coordinate(PoseLandmark.LEFT_SHOULDER).x == 2.0
    assert frame.coordinate(PoseLandmark.LEFT_ELBOW).y == 3.0
    assert frame.coordinate(PoseLandmark.RIGHT_WRIST) is None


def test_unknown_landmark_key_is_rejected():
    with pytest.raises(ValidationError):
        FrameRecord.model_validate({"id": "f1", "landmarks": {"LEFT_KNEE": {"x": 0, "y": 0}}})


def test_angles_are_derived_from_snapshot():
    frame = FrameRecord.model_validate(
        {
            "id": "f1",
            "landmarks": {
                "LEFT_SHOULDER": {"x": 0, "y": 0},
                "LEFT_ELBOW": {"x": 1, "y": 0},
            },
        }
    )
    assert frame.angles[0] == pytest.approx(90.0)
    assert frame.angles[1:] == [None, None, None]
    assert "angles" in frame.model_dump()


def test_frame_is_frozen():
    frame = FrameRecord(id="f1")
    with pytest.raises(ValidationError):
        frame.id = "f2"
