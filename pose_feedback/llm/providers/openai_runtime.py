"""
OpenAI 직접 호출 TextCompletion (AsyncOpenAI chat.completions)

openai 패키지는 이 provider 를 처음 만들 때 import 한다.
noop/gateway 만 쓰는 프로세스는 SDK 를 로드하지 않는다.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from pose_feedback.analyze.constants import DEFAULT_LLM_TEMPERATURE, DEFAULT_LLM_TIMEOUT
from pose_feedback.utils.types.types import Message

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _async_openai_cls() -> Optional[type]:
    """AsyncOpenAI 클래스 (import 실패 시 None, 결과는 프로세스 동안 고정)"""
    try:
        from openai import AsyncOpenAI
    except ImportError as e:
        logger.warning(f"[LLM] OpenAI SDK import failed: {e}")
        return None
    logger.info("[LLM] OpenAI SDK loaded")
    return AsyncOpenAI


class OpenAIChatCompletion:
    """피드백/후속 검사 프롬프트를 user 메시지 1개로 보내고 본문만 돌려준다 (재시도 없음)"""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = DEFAULT_LLM_TEMPERATURE,
        timeout: float = DEFAULT_LLM_TIMEOUT,
        max_tokens: Optional[int] = None,
    ):
        client_cls = _async_openai_cls()
        if client_cls is None:
            raise RuntimeError("OpenAI SDK unavailable")
        self._client = client_cls(api_key=api_key, timeout=timeout)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def complete(self, prompt: str) -> str:
        message: Message = {"role": "user", "content": prompt}
        options: Dict[str, Any] = {"temperature": self.temperature}
        if self.max_tokens is not None:
            options["max_tokens"] = self.max_tokens

        resp = await self._client.chat.completions.create(
            model=self.model, messages=[message], **options
        )
        return (resp.choices[0].message.content or "").strip()
