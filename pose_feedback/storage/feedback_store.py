"""
피드백 저장소 (프로세스 수명 동안만 유지되는 추가 전용 컬렉션)

- commit: 1차 생성 직후의 draft 를 레코드로 추가 (삭제 없음)
- annotate: 검증 결과(경고)를 기존 레코드에 덧붙임. 본문/정확도/ID 는 바뀌지 않음
- 같은 프레임 쌍이 반복되면 ID를 버전으로 구분: fb-a-b, fb-a-b-v2, fb-a-b-v3 ...
- ID 배정과 추가는 하나의 lock 안에서 처리 → 동시 commit 시 유실/충돌 없음
"""
from __future__ import annotations

import threading
import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from pose_feedback.analyze.constants import FEEDBACK_ID_VERSION_PATTERN
from pose_feedback.common.exceptions import FeedbackNotFound
from pose_feedback.schemas.feedback_dto import FeedbackDraft, FeedbackRecord

logger = logging.getLogger(__name__)


class FeedbackStore(ABC):
    """저장소 인터페이스 (서비스가 소유, 테스트마다 새로 생성 가능)"""

    @abstractmethod
    def commit(self, draft: FeedbackDraft) -> FeedbackRecord:
        ...

    @abstractmethod
    def get(self, feedback_id: str) -> FeedbackRecord:
        ...

    @abstractmethod
    def annotate(self, feedback_id: str, warnings: List[str]) -> FeedbackRecord:
        ...


class InMemoryFeedbackStore(FeedbackStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: List[FeedbackRecord] = []
        self._index: Dict[str, FeedbackRecord] = {}
        self._versions: Dict[str, int] = {}

    def commit(self, draft: FeedbackDraft) -> FeedbackRecord:
        with self._lock:
            version = self._versions.get(draft.base_id, 0)
            feedback_id = draft.base_id
            # 프레임 ID에 '-'가 들어가면 다른 쌍의 ID와 겹칠 수 있으므로 빈 ID가 나올 때까지 증가
            while version == 0 or feedback_id in self._index:
                version += 1
                feedback_id = (
                    draft.base_id
                    if version == 1
                    else FEEDBACK_ID_VERSION_PATTERN.format(base=draft.base_id, version=version)
                )
            self._versions[draft.base_id] = version

            record = FeedbackRecord(
                feedback_id=feedback_id,
                reference_frame=draft.reference_frame,
                practice_frame=draft.practice_frame,
                feedback=draft.feedback,
                accuracy_value=draft.accuracy_value,
                warnings=list(draft.warnings),
            )
            self._records.append(record)
            self._index[feedback_id] = record

        if version > 1:
            logger.info(f"ℹ️ 동일 프레임 쌍 재분석 → 버전 ID 부여: {feedback_id}")
        return record

    def get(self, feedback_id: str) -> FeedbackRecord:
        with self._lock:
            record = self._index.get(feedback_id)
        if record is None:
            raise FeedbackNotFound(feedback_id)
        return record

    def annotate(self, feedback_id: str, warnings: List[str]) -> FeedbackRecord:
        """경고 추가 (기존 경고 뒤에 이어붙임, 레코드 위치/순서 유지)"""
        with self._lock:
            current = self._index.get(feedback_id)
            if current is None:
                raise FeedbackNotFound(feedback_id)
            if not warnings:
                return current
            updated = current.model_copy(
                update={"warnings": [*current.warnings, *warnings]}
            )
            self._records[self._records.index(current)] = updated
            self._index[feedback_id] = updated
        return updated

    def list_ids(self) -> List[str]:
        with self._lock:
            return [r.feedback_id for r in self._records]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
