"""
피드백 관련 Request/Response DTO
Router ↔ Service ↔ Store 간 데이터 전달용
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pose_feedback.schemas.frame_dto import FrameRecord
from pose_feedback.utils.types.types import Transport


# ============ Store DTO ============
class FeedbackDraft(BaseModel):
    """저장 직전의 레코드 (아직 ID 미확정)"""
    model_config = ConfigDict(frozen=True)

    base_id: str = Field(..., description="fb-{reference}-{practice}")
    reference_frame: FrameRecord
    practice_frame: FrameRecord
    feedback: str
    accuracy_value: float = Field(..., ge=0.0, le=100.0)
    warnings: List[str] = Field(default_factory=list)


class FeedbackRecord(BaseModel):
    """저장된 피드백 (불변, 추가 전용)"""
    model_config = ConfigDict(frozen=True)

    feedback_id: str
    reference_frame: FrameRecord
    practice_frame: FrameRecord
    feedback: str
    accuracy_value: float = Field(..., ge=0.0, le=100.0)
    warnings: List[str] = Field(default_factory=list)


class FeedbackResult(BaseModel):
    """getFeedback 결과"""
    feedback: str
    accuracy_value: float = Field(..., ge=0.0, le=100.0, description="정확도 (0-100)")
    warnings: List[str] = Field(default_factory=list, description="톤/길이 경고")


# ============ API Request DTO ============
class AnalyzeFeedbackRequest(BaseModel):
    """피드백 분석 요청 (FastAPI Router → Service)"""
    reference: FrameRecord = Field(..., description="기준(레퍼런스) 프레임")
    practice: FrameRecord = Field(..., description="연습 프레임")
    llm_provider: Optional[Transport] = Field(
        default=None, description="LLM 경로 (없으면 서버 기본값)"
    )
    llm_model: Optional[str] = Field(default=None, description="LLM 모델명")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "reference": {
                    "id": "ref-1",
                    "frame_number": 0,
                    "landmarks": {
                        "LEFT_SHOULDER": {"x": 2, "y": 4},
                        "RIGHT_SHOULDER": {"x": 4, "y": 4},
                        "LEFT_ELBOW": {"x": 2, "y": 3},
                        "RIGHT_ELBOW": {"x": 4, "y": 3},
                        "LEFT_WRIST": {"x": 1, "y": 2},
                        "RIGHT_WRIST": {"x": 5, "y": 2},
                    },
                },
                "practice": {
                    "id": "prac-1",
                    "frame_number": 0,
                    "landmarks": {
                        "LEFT_SHOULDER": {"x": 2, "y": 4},
                        "RIGHT_SHOULDER": {"x": 4, "y": 4},
                        "LEFT_ELBOW": {"x": 2, "y": 3},
                        "RIGHT_ELBOW": {"x": 4, "y": 3},
                        "LEFT_WRIST": {"x": 2, "y": 2},
                        "RIGHT_WRIST": {"x": 5, "y": 2},
                    },
                },
                "llm_provider": "noop",
            }
        }
    )


# ============ API Response DTO ============
class AnalyzeFeedbackResponse(BaseModel):
    feedback_id: str = Field(..., description="저장된 피드백 ID")
