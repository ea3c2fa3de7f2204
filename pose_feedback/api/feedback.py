from fastapi import APIRouter, Depends, HTTPException
import logging

import httpx
import openai

from pose_feedback.common.dependencies import select_llm_client, verify_api_key
from pose_feedback.common.exceptions import FeedbackNotFound, UnknownLandmarkReference
from pose_feedback.schemas.feedback_dto import (
    AnalyzeFeedbackRequest,
    AnalyzeFeedbackResponse,
    FeedbackResult,
)
from pose_feedback.services.feedback_service import FeedbackService
from pose_feedback.services.service_factory import get_feedback_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/feedback", tags=["Feedback"])


# ========== API Endpoint ==========
@router.post("", response_model=AnalyzeFeedbackResponse)
async def analyze_feedback(
        req: AnalyzeFeedbackRequest,
        service: FeedbackService = Depends(get_feedback_service),
        _: bool = Depends(verify_api_key),
) -> AnalyzeFeedbackResponse:
    """
    레퍼런스 vs 연습 포즈 비교 → AI 코칭 피드백 생성/저장

    기본: llm_provider 미지정 → 서버 기본값 (LLM_DEFAULT_PROVIDER)
    """
    logger.info(
        f"📥 피드백 요청: ref={req.reference.id}, practice={req.practice.id}, llm={req.llm_provider}"
    )

    llm = select_llm_client(req.llm_provider, req.llm_model)

    try:
        feedback_id = await service.analyze(req.reference, req.practice, llm=llm)
    except UnknownLandmarkReference as e:
        logger.error(f"❌ 피드백 검증 실패: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except (httpx.HTTPError, openai.OpenAIError, RuntimeError) as e:
        logger.error(f"❌ LLM 호출 실패: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail=f"LLM 호출 실패: {e}")

    logger.info(f"✅ 피드백 분석 완료: {feedback_id}")
    return AnalyzeFeedbackResponse(feedback_id=feedback_id)


@router.get("/{feedback_id}", response_model=FeedbackResult)
def get_feedback(
        feedback_id: str,
        service: FeedbackService = Depends(get_feedback_service),
        _: bool = Depends(verify_api_key),
) -> FeedbackResult:
    try:
        return service.get_feedback(feedback_id)
    except FeedbackNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


ROUTERS = [router]
