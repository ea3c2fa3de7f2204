"""
피드백 분석 Service Layer
Domain 컴포넌트들을 조합하여 전체 분석 파이프라인 실행
"""
import logging
from typing import Optional

from pose_feedback.analyze.constants import FEEDBACK_ID_PREFIX
from pose_feedback.common.exceptions import UnknownLandmarkReference
from pose_feedback.domain.angle.calculator import AngleCalculator
from pose_feedback.domain.feedback.prompt_builder import build_feedback_prompt
from pose_feedback.domain.feedback.validator import WARN_UNKNOWN_LANDMARK, ResponseValidator
from pose_feedback.domain.scoring.scorer import DifferenceScorer
from pose_feedback.schemas.feedback_dto import FeedbackDraft, FeedbackResult
from pose_feedback.schemas.frame_dto import FrameRecord
from pose_feedback.storage.feedback_store import FeedbackStore, InMemoryFeedbackStore
from pose_feedback.utils.types.types import TextCompletion

logger = logging.getLogger(__name__)


class FeedbackService:
    """
    포즈 피드백 메인 서비스

    책임:
    - 전체 분석 파이프라인 오케스트레이션
    - Domain 컴포넌트 간 데이터 흐름 관리
    - 외부 텍스트 생성기 호출 (1회 생성 + 2회 검증, 모두 순차)
    """

    def __init__(
        self,
        angle_calculator: Optional[AngleCalculator] = None,
        scorer: Optional[DifferenceScorer] = None,
        validator: Optional[ResponseValidator] = None,
        store: Optional[FeedbackStore] = None,
        llm_client: Optional[TextCompletion] = None,
    ):
        """
        Args:
            angle_calculator: 각도 계산기
            scorer: 차이/정확도 계산기
            validator: 응답 검증기
            store: 피드백 저장소 (없으면 인스턴스 전용 인메모리 저장소)
            llm_client: 기본 텍스트 생성기 (analyze 호출 시 지정하지 않으면 사용)
        """
        self.angle_calculator = angle_calculator or AngleCalculator()
        self.scorer = scorer or DifferenceScorer()
        self.validator = validator or ResponseValidator()
        self.store = store if store is not None else InMemoryFeedbackStore()
        self.llm_client = llm_client

    async def analyze(
        self,
        reference_frame: FrameRecord,
        practice_frame: FrameRecord,
        llm: Optional[TextCompletion] = None,
    ) -> str:
        """
        피드백 분석 파이프라인 실행

        Process:
        1. 각도 계산 (프레임별 1회)
        2. 차이/정확도 계산
        3. 프롬프트 생성
        4. AI 피드백 생성
        5. 저장소 commit (1차 생성 직후, 검증 전)
        6. 응답 검증 (관절 어휘 → 톤 → 길이), 경고는 저장된 레코드에 추가

        Returns:
            저장된 feedback_id

        Raises:
            UnknownLandmarkReference: 어휘 밖 관절 언급.
                레코드는 이미 저장된 상태이며 "unknown_landmark" 경고가 붙는다.
        """
        llm = llm or self.llm_client
        if llm is None:
            raise ValueError("No text-generation client configured")

        logger.info("🤖 Comparing practice pose to reference...")

        # ========== Step 1: 각도 계산 ==========
        reference_angles = self.angle_calculator.calculate(reference_frame)
        practice_angles = self.angle_calculator.calculate(practice_frame)

        # ========== Step 2: 차이/정확도 ==========
        score = self.scorer.score(reference_angles, practice_angles)

        # ========== Step 3: 프롬프트 ==========
        prompt = build_feedback_prompt(
            score.deltas, score.accuracy, reference_frame, practice_frame
        )

        # ========== Step 4: AI 피드백 생성 ==========
        ai_feedback = await llm.complete(prompt)

        base_id = self._generate_feedback_id(reference_frame, practice_frame)
        logger.info(f"✅ Feedback generated [{base_id}] accuracy={score.accuracy:.1f}")

        # ========== Step 5: 저장 (검증 전) ==========
        record = self.store.commit(
            FeedbackDraft(
                base_id=base_id,
                reference_frame=reference_frame,
                practice_frame=practice_frame,
                feedback=ai_feedback,
                accuracy_value=score.accuracy,
            )
        )
        feedback_id = record.feedback_id
        logger.info(f"💾 Feedback stored [{feedback_id}]")

        # ========== Step 6: 검증 (결과는 경고로 레코드에 덧붙임) ==========
        try:
            report = await self.validator.validate(ai_feedback, llm, feedback_id=feedback_id)
        except UnknownLandmarkReference:
            self.store.annotate(feedback_id, [WARN_UNKNOWN_LANDMARK])
            raise

        self.store.annotate(feedback_id, report.warnings)
        return feedback_id

    def get_feedback(self, feedback_id: str) -> FeedbackResult:
        """저장된 피드백 조회 (없으면 FeedbackNotFound)"""
        record = self.store.get(feedback_id)
        return FeedbackResult(
            feedback=record.feedback,
            accuracy_value=record.accuracy_value,
            warnings=record.warnings,
        )

    def _generate_feedback_id(self, reference: FrameRecord, practice: FrameRecord) -> str:
        """프레임 ID 쌍에서 파생되는 기본 ID (충돌 시 저장소가 버전 부여)"""
        return f"{FEEDBACK_ID_PREFIX}-{reference.id}-{practice.id}"
