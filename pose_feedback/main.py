import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from pose_feedback.api import include_all_routers
from pose_feedback.config.settings import settings

# ---------- 로거 ----------
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

# 앱 생성
app = FastAPI(debug=settings.DEBUG_MODE)

# 자동으로 pose_feedback/api/* 모듈을 스캔해 라우터 전부 등록
include_all_routers(app)

app.openapi = lambda: get_openapi(
    title="AI Pose Feedback API",
    version="1.0.0",
    description="레퍼런스/연습 포즈 비교 기반 AI 코칭 피드백 API",
    routes=app.routes,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pose_feedback.main:app", host="0.0.0.0", port=settings.FASTAPI_PORT, reload=True)
