from __future__ import annotations
from typing import Optional

import logging

from pose_feedback.config.settings import settings
from pose_feedback.infrastructure.llm.gateway_client import (
    LLMGatewayClient,
    NoopTextCompletion,
)
from pose_feedback.llm.providers.openai_runtime import OpenAIChatCompletion
from pose_feedback.utils.types.types import TextCompletion

logger = logging.getLogger(__name__)


def get_llm_client(
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> TextCompletion:
    """
    provider 문자열 → TextCompletion 구현
    - 모든 기본값은 settings에서만 가져옴
    - provider 없으면 LLM_DEFAULT_PROVIDER (기본 noop)
    """
    provider = (provider or settings.LLM_DEFAULT_PROVIDER).lower()
    model = model or settings.LLM_DEFAULT_MODEL

    if provider not in settings.LLM_PROVIDERS:
        raise ValueError(f"Unsupported LLM provider: {provider}")

    if provider == "noop":
        return NoopTextCompletion()

    if provider == "gateway":
        if not settings.LLM_GATEWAY_URL:
            raise ValueError("LLM_GATEWAY_URL is not set")
        return LLMGatewayClient(
            gateway_url=settings.LLM_GATEWAY_URL,
            model=model,
            api_key=settings.INTERNAL_API_KEY or None,
            timeout=settings.LLM_TIMEOUT,
            temperature=settings.LLM_TEMPERATURE,
        )

    if provider == "openai":
        if not settings.OPENAI_API_KEY:
            raise ValueError("OPENAI_API_KEY is not set")
        return OpenAIChatCompletion(
            api_key=settings.OPENAI_API_KEY,
            model=model,
            temperature=settings.LLM_TEMPERATURE,
            timeout=settings.LLM_TIMEOUT,
        )

    raise ValueError(f"Unsupported LLM provider: {provider}")
