from __future__ import annotations
from typing import TypedDict, Literal, Protocol, runtime_checkable

# LLM 메시지 역할(문자열 리터럴 유니온)
Role = Literal["system", "user", "assistant"]


# 공통 LLM 메시지 스키마
class Message(TypedDict):
    role: Role
    content: str


# LLM 경로 타입
Transport = Literal["gateway", "openai", "noop"]


# 텍스트 생성 능력: 단일 턴, 상태 없음, 자유 텍스트 in/out (응답 구조 보장 없음)
@runtime_checkable
class TextCompletion(Protocol):
    async def complete(self, prompt: str) -> str: ...
