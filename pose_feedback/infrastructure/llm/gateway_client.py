import httpx
from typing import Optional
import logging

from pose_feedback.analyze.constants import (
    NOOP_FEEDBACK_TEXT,
    NOOP_LANDMARK_LIST,
    NOOP_TONE_VERDICT,
)

logger = logging.getLogger(__name__)


class LLMGatewayClient:
    """LLM Gateway와 통신하는 클라이언트 (TextCompletion 구현)"""

    def __init__(
        self,
        gateway_url: str,
        provider: str = "openai",
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 60.0,
        temperature: float = 0.7,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            gateway_url: LLM Gateway 서버 URL (예: http://localhost:3030)
            provider: Gateway 뒤의 실제 벤더 (openai, gemini 등)
            model: 모델명
            api_key: 내부 인증 키 (X-Internal-Api-Key)
            timeout: 전송 타임아웃(초)
            temperature: 샘플링 온도
            transport: 테스트용 httpx transport (MockTransport 등)
        """
        self.gateway_url = gateway_url.rstrip("/")
        # URL이 /chat으로 끝나지 않으면 붙여주는 안전장치
        if not self.gateway_url.endswith("/chat"):
            self.gateway_url = f"{self.gateway_url}/chat"
        self.provider = provider.lower()
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.temperature = temperature
        self._transport = transport

        logger.info(f"🚀 LLM Client: gateway / {self.provider} / {model}")

    async def complete(self, prompt: str) -> str:
        """
        단일 턴 텍스트 생성 (POST /chat)

        재시도는 하지 않는다. 전송 오류/HTTP 오류는 httpx 예외 그대로 전파.
        """
        payload = {
            "provider": self.provider,
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-Internal-Api-Key"] = self.api_key

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.gateway_url, json=payload, headers=headers)
            if response.status_code != 200:
                logger.error(f"LLM Gateway Error: {response.status_code} - {response.text}")
            response.raise_for_status()

            data = response.json()

        # Gateway 버전에 따라 content 또는 feedback 키
        text = data.get("content")
        if text is None:
            text = data.get("feedback", "")
        return str(text).strip()


class NoopTextCompletion:
    """
    Noop 모드 (테스트/개발용, 과금 없음)
    프롬프트 종류에 따라 고정 응답을 돌려준다.
    """

    def __init__(self) -> None:
        logger.info("🧪 LLM Client: NoOp 모드 (테스트용, 과금 없음)")

    async def complete(self, prompt: str) -> str:
        if "[JOINT_A, JOINT_B, ...]" in prompt:
            return NOOP_LANDMARK_LIST
        if '"TRUE" or "FALSE"' in prompt:
            return NOOP_TONE_VERDICT
        return NOOP_FEEDBACK_TEXT
