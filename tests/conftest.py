"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest
from fastapi.testclient import TestClient

from pose_feedback.analyze.constants import PoseLandmark
from pose_feedback.config.settings import settings
from pose_feedback.services.feedback_service import FeedbackService
from pose_feedback.storage.feedback_store import InMemoryFeedbackStore
from tests.test_helpers import GOOD_FEEDBACK, ScriptedLLM, adjust_coords, create_frame


TEST_API_KEY = "test-api-key"

# ========================================
# Application Fixtures
# ========================================

@pytest.fixture
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from pose_feedback.main import app as fastapi_app
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, monkeypatch):
    """FastAPI TestClient (API 테스트용)"""
    monkeypatch.setattr(settings, "INTERNAL_API_KEY", TEST_API_KEY)
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """인증 헤더 (X-Internal-Api-Key)"""
    return {"X-Internal-Api-Key": TEST_API_KEY}


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def reference_frame():
    return create_frame("ref")


@pytest.fixture
def practice_frame():
    """왼쪽 손목만 (+1, 0) 이동한 연습 프레임"""
    return create_frame("prac", adjust_coords({PoseLandmark.LEFT_WRIST: (1, 0)}))


# ========================================
# Service Fixtures
# ========================================

@pytest.fixture
def store():
    return InMemoryFeedbackStore()


@pytest.fixture
def service(store):
    return FeedbackService(store=store)


@pytest.fixture
def happy_llm():
    """피드백 → 관절 목록 → 톤 판정 순으로 정상 응답"""
    return ScriptedLLM([GOOD_FEEDBACK, "[LEFT_ELBOW, LEFT_WRIST]", "TRUE"])
