"""
LLM 요청 프롬프트 빌더

- 같은 입력이면 항상 같은 문자열 (랜덤/숨은 상태 없음)
- LLM 호출은 하지 않는다. 호출은 서비스 레이어 책임
"""
from __future__ import annotations

import json
from typing import List, Optional, Sequence

from pose_feedback.analyze.constants import (
    LIMB_CONNECTIONS,
    PoseLandmark,
    connection_label,
)
from pose_feedback.domain.scoring.scorer import AngleDelta, DeltaStatus
from pose_feedback.schemas.frame_dto import FrameRecord

UNDEFINED_MARKER = "undefined"

_SYSTEM_INTRO = """You are a professional dance or movement coach AI.
You are given differences between a reference choreography pose and a user's practice pose.

Analyze these angle differences and provide constructive, encouraging feedback
with clear instructions on how the user can improve their form."""

_INSTRUCTIONS = """Make sure to add a concise note on potential landmark detection issues at the end if:
1. If there is a landmark coordinate (don't mention angles) that is extremely different from other coordinates
within that set of reference or practice pose, highlight it as a potential mis-detection of the joint. DO NOT attempt
to give any feedback on any angle involving that joint.
2. If an angle difference is "undefined", it means one of the joints involved in that angle is missing. Mention the
specific missing joints using the LimbConnections and PoseLandmark enum reference.

Respond with a short, natural paragraph explaining:
1. Identify which body parts need adjustment based on the angle differences
(DO NOT include any angles involving a joint that's an outlier).
2. For mismatches, provide concise coaching tips for improvement.
3. Provide a motivational remark to encourage the user."""


def build_feedback_prompt(
    deltas: Sequence[AngleDelta],
    accuracy: float,
    reference: FrameRecord,
    practice: FrameRecord,
) -> str:
    """
    피드백 생성용 프롬프트.
    순서: 정확도 → 연결별 delta → 연결 매핑 → 양쪽 원본 좌표 → 랜드마크 어휘 → 지시문
    """
    sections = [
        _SYSTEM_INTRO,
        "",
        "DATA:",
        f"Accuracy Score: {accuracy:.1f}%",
        "Angle Differences:",
        _format_deltas(deltas),
        "LimbConnections associated with each angle for reference:",
        _format_connections(),
        "",
        "Reference Landmarks Coordinates (PoseLandmark enum index order):",
        _format_coordinates(reference),
        "Practice Landmarks Coordinates (PoseLandmark enum index order):",
        _format_coordinates(practice),
        "PoseLandmark enum for reference:",
        _format_vocabulary(),
        "",
        _INSTRUCTIONS,
    ]
    return "\n".join(sections) + "\n"


def build_landmark_extraction_prompt(feedback: str) -> str:
    """피드백에 언급된 관절 목록을 [A, B, ...] 형식으로 뽑게 하는 후속 프롬프트"""
    return (
        f"given this feedback {feedback}, give me a list of all the joints\n"
        "mentioned in the feedback in one list in this format:\n"
        "[JOINT_A, JOINT_B, ...]\n"
        "1. Only include joints that are mentioned in the feedback.\n"
        '2. Use all caps and separate words with underscores "_".'
    )


def build_tone_check_prompt(feedback: str) -> str:
    """피드백 톤이 긍정적인지 TRUE/FALSE 한 단어로 답하게 하는 후속 프롬프트"""
    return (
        f"given this feedback {feedback}, is the overall mood of the feedback positive?\n"
        'Respond with one word "TRUE" or "FALSE".'
    )


# Internal utils
def _format_deltas(deltas: Sequence[AngleDelta]) -> str:
    lines: List[str] = []
    for i, delta in enumerate(deltas):
        label = connection_label(LIMB_CONNECTIONS[i]) if i < len(LIMB_CONNECTIONS) else f"angle {i}"
        lines.append(f"- {i} ({label}): difference = {_format_delta_value(delta)}")
    return "\n".join(lines)


def _format_delta_value(delta: AngleDelta) -> str:
    if delta.status is DeltaStatus.missing or delta.value is None:
        return UNDEFINED_MARKER
    text = f"{delta.value:.2f}"
    if delta.status is DeltaStatus.absent:
        text += " (no practice data)"
    return text


def _format_connections() -> str:
    return "\n".join(
        f"{i} = {connection_label(conn)}" for i, conn in enumerate(LIMB_CONNECTIONS)
    )


def _format_coordinates(frame: FrameRecord) -> str:
    """PoseLandmark 순서의 [x, y] 배열 (없으면 null), 반올림 없음"""
    coords: List[Optional[List[float]]] = []
    for lm in PoseLandmark:
        point = frame.coordinate(lm)
        coords.append(None if point is None else [point.x, point.y])
    return json.dumps(coords)


def _format_vocabulary() -> str:
    return "\n".join(f"{lm.value} = {lm.name}" for lm in PoseLandmark)
