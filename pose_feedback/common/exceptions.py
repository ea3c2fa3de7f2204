"""
피드백 파이프라인 예외 정의

- 결측 관절(MissingJointData)은 예외가 아니라 None 각도로 표현한다.
- 톤/길이 위반은 경고(ValidationReport.warnings)일 뿐 예외가 아니다.
- LLM 전송 오류(httpx / openai)는 재시도 없이 그대로 전파한다.
"""
from typing import Iterable, List


class FeedbackError(Exception):
    """피드백 도메인 예외의 공통 부모"""


class FeedbackNotFound(FeedbackError):
    """저장소에 없는 feedback_id 조회"""

    def __init__(self, feedback_id: str):
        self.feedback_id = feedback_id
        super().__init__(f"Feedback with ID {feedback_id} not found.")


class UnknownLandmarkReference(FeedbackError):
    """LLM 응답이 고정 어휘 밖의 관절을 언급함 (하드 실패)"""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: List[str] = list(tokens)
        joined = ", ".join(f'"{t}"' for t in self.tokens)
        super().__init__(f"LLM referenced unknown landmark: {joined}")
