from fastapi import Header, HTTPException
from typing import Optional
import secrets
import logging

from pose_feedback.config.settings import settings
from pose_feedback.llm.client import get_llm_client
from pose_feedback.utils.types.types import TextCompletion

logger = logging.getLogger(__name__)


# API Key 인증
async def verify_api_key(
        x_internal_api_key: Optional[str] = Header(None, alias="X-Internal-Api-Key")
):
    if x_internal_api_key is None:
        logger.warning("⚠️ Missing X-Internal-Api-Key header")
        raise HTTPException(
            status_code=401,
            detail="Missing X-Internal-Api-Key header"
        )

    expected = settings.INTERNAL_API_KEY
    if not expected or not secrets.compare_digest(x_internal_api_key, expected):
        logger.warning(f"❌ Invalid API Key: {x_internal_api_key[:10]}...")
        raise HTTPException(
            status_code=401,
            detail="Invalid Internal API Key"
        )

    return True


# 요청별 LLM 선택 (지정 없으면 None → 서비스 기본 클라이언트 사용)
def select_llm_client(
        provider: Optional[str],
        model: Optional[str],
) -> Optional[TextCompletion]:
    if not provider and not model:
        return None
    try:
        return get_llm_client(provider, model)
    except (ValueError, RuntimeError) as e:
        logger.warning(f"⚠️ LLM 설정 오류: provider={provider}, model={model}: {e}")
        raise HTTPException(status_code=400, detail=f"LLM 설정 오류: {e}")
