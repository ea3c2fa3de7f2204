"""
LLM 피드백 응답 검증기

세 가지 독립 검사 (피드백 텍스트는 절대 수정하지 않음):
1) 관절 어휘 검사 (하드 실패) - 후속 LLM 호출로 언급된 관절 목록을 받아 PoseLandmark 이름과 대조
2) 톤 검사 (경고) - 후속 LLM 호출로 TRUE/FALSE 판정
3) 길이 검사 (경고) - 공백 기준 단어 수 > max_words

LLM 응답은 신뢰할 수 없는 입력으로 취급한다. 형식이 깨져도 최대한 관대하게 파싱하되,
어휘 밖 토큰은 반드시 UnknownLandmarkReference 로 실패시킨다.
"""
from __future__ import annotations

import re
import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from pose_feedback.analyze.constants import LANDMARK_NAMES, DEFAULT_FEEDBACK_MAX_WORDS
from pose_feedback.common.exceptions import UnknownLandmarkReference
from pose_feedback.domain.feedback.prompt_builder import (
    build_landmark_extraction_prompt,
    build_tone_check_prompt,
)
from pose_feedback.utils.types.types import TextCompletion

logger = logging.getLogger(__name__)

WARN_TONE_NOT_POSITIVE = "tone_not_positive"
WARN_TONE_MALFORMED = "tone_malformed"
WARN_TOO_LONG = "too_long"
WARN_UNKNOWN_LANDMARK = "unknown_landmark"

_BRACKETED = re.compile(r"\[(.*?)\]", re.DOTALL)
_TOKEN_SEPARATORS = re.compile(r"[\s\-]+")
_TOKEN_STRIP = " \t\r\n'\"`*."
# 괄호 없이 "언급 없음"만 답한 경우 (예: "None.", "No joints were mentioned.", "N/A")
_NOTHING_MENTIONED = re.compile(
    r"none|nothing|n/?a|no\s+(joints?|landmarks?)(\s+(were|are|was|is))?(\s+mentioned)?",
    re.IGNORECASE,
)


class ValidationReport(BaseModel):
    """검증 결과 (경고는 저장/반환을 막지 않음)"""
    mentioned_landmarks: List[str] = Field(default_factory=list)
    tone_positive: Optional[bool] = Field(None, description="None이면 판정 응답이 깨짐")
    word_count: int = 0
    warnings: List[str] = Field(default_factory=list)


def parse_landmark_list(raw: str) -> List[str]:
    """
    "[LEFT_ELBOW, RIGHT_WRIST]" 형태의 응답을 토큰 리스트로 파싱.
    - 첫 번째 [...] 그룹만 사용 (없으면 전체 텍스트)
    - 괄호 없이 "none" 류로만 답하면 빈 리스트
    - 따옴표/백틱 제거, 공백·하이픈 → '_', 대문자화, 빈 토큰 제거
    """
    text = (raw or "").strip()
    match = _BRACKETED.search(text)
    if match is None and _NOTHING_MENTIONED.fullmatch(text.strip(_TOKEN_STRIP)):
        return []
    body = match.group(1) if match else text

    tokens: List[str] = []
    for part in body.split(","):
        token = part.strip(_TOKEN_STRIP)
        if not token:
            continue
        tokens.append(_TOKEN_SEPARATORS.sub("_", token).upper())
    return tokens


def parse_tone_verdict(raw: str) -> Optional[bool]:
    """TRUE → True, FALSE → False, 그 외(깨진 응답) → None"""
    verdict = (raw or "").strip().strip(_TOKEN_STRIP).upper()
    if verdict == "TRUE":
        return True
    if verdict == "FALSE":
        return False
    return None


def count_words(text: str) -> int:
    return len(text.split())


class ResponseValidator:
    """피드백 응답 검증기 (LLM 호출은 순차적으로 2회)"""

    def __init__(self, max_words: int = DEFAULT_FEEDBACK_MAX_WORDS):
        self.max_words = max_words

    async def validate(
        self,
        feedback: str,
        llm: TextCompletion,
        feedback_id: str = "",
    ) -> ValidationReport:
        """
        Args:
            feedback: 1차 LLM 피드백 텍스트
            llm: 후속 검사에 쓸 동일 텍스트 생성기
            feedback_id: 로그용 식별자

        Returns:
            ValidationReport

        Raises:
            UnknownLandmarkReference: 어휘 밖 관절 언급
        """
        report = ValidationReport()

        # ========== 1) 관절 어휘 검사 (하드) ==========
        report.mentioned_landmarks = await self.check_landmarks(feedback, llm)

        # ========== 2) 톤 검사 (경고) ==========
        tone_raw = await llm.complete(build_tone_check_prompt(feedback))
        report.tone_positive = parse_tone_verdict(tone_raw)
        if report.tone_positive is True:
            logger.info("✅ Feedback mood is positive.")
        elif report.tone_positive is False:
            logger.warning(f"⚠️ Feedback [{feedback_id}] mood is not positive. Please review.")
            report.warnings.append(WARN_TONE_NOT_POSITIVE)
        else:
            logger.warning(
                f"⚠️ Feedback [{feedback_id}] tone check returned malformed verdict: {tone_raw!r}"
            )
            report.warnings.append(WARN_TONE_MALFORMED)

        # ========== 3) 길이 검사 (경고) ==========
        report.word_count = count_words(feedback)
        if report.word_count > self.max_words:
            logger.warning(
                f"⚠️ Feedback [{feedback_id}] is too long "
                f"({report.word_count} > {self.max_words} words). Please review."
            )
            report.warnings.append(WARN_TOO_LONG)
        else:
            logger.info("✅ Feedback is concise enough.")

        return report

    async def check_landmarks(self, feedback: str, llm: TextCompletion) -> List[str]:
        raw = await llm.complete(build_landmark_extraction_prompt(feedback))
        tokens = parse_landmark_list(raw)

        unknown = [t for t in tokens if t not in LANDMARK_NAMES]
        if unknown:
            logger.error(f"❌ LLM referenced unknown landmark(s): {unknown}")
            raise UnknownLandmarkReference(unknown)

        logger.info("✅ All landmarks mentioned exist in PoseLandmark enum.")
        return tokens
