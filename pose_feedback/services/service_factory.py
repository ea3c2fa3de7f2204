from functools import lru_cache

from pose_feedback.config.settings import settings
from pose_feedback.services.feedback_service import FeedbackService
from pose_feedback.domain.angle.calculator import AngleCalculator
from pose_feedback.domain.scoring.scorer import DifferenceScorer
from pose_feedback.domain.feedback.validator import ResponseValidator
from pose_feedback.storage.feedback_store import InMemoryFeedbackStore
from pose_feedback.llm.client import get_llm_client


def create_feedback_service() -> FeedbackService:
    """
    FeedbackService 인스턴스 생성

    저장소는 서비스가 소유한다. 기본 LLM 은 settings.LLM_DEFAULT_PROVIDER 기준.

    Returns:
        FeedbackService 인스턴스
    """
    return FeedbackService(
        angle_calculator=AngleCalculator(),
        scorer=DifferenceScorer(),
        validator=ResponseValidator(max_words=settings.FEEDBACK_MAX_WORDS),
        store=InMemoryFeedbackStore(),
        llm_client=get_llm_client(),
    )


@lru_cache(maxsize=1)
def get_feedback_service() -> FeedbackService:
    """프로세스당 1개 (라우터 의존성 주입용)"""
    return create_feedback_service()
