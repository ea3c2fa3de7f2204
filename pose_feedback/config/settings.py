from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# helpers
from pose_feedback.config.env_utils import env_bool, env_float, env_int, env_list
from pose_feedback.analyze.constants import (
    DEFAULT_FEEDBACK_MAX_WORDS,
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_LLM_TEMPERATURE,
)


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수 → 그래도 없으면 현재 작업 디렉토리
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any((parent / m).exists() for m in (".git", "pyproject.toml")):
            return parent
    # site-packages 설치본은 마커가 없으므로 cwd 기준
    return Path.cwd()


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "test")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    FASTAPI_PORT: int = env_int("FASTAPI_PORT", 8000)
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    ROOT: Path = ROOT

    # ── 내부 인증 ─────────────────────────────────────────
    INTERNAL_API_KEY: str = os.getenv("INTERNAL_API_KEY", "")

    # ── LLM ───────────────────────────────────────────────
    LLM_GATEWAY_URL: str = os.getenv("LLM_GATEWAY_URL", "http://localhost:3030")
    LLM_DEFAULT_PROVIDER: str = os.getenv("LLM_DEFAULT_PROVIDER", "noop")
    LLM_DEFAULT_MODEL: str = os.getenv("LLM_DEFAULT_MODEL", "gpt-4o-mini")
    LLM_PROVIDERS = env_list("LLM_PROVIDERS", ["noop", "gateway", "openai"])
    LLM_TIMEOUT: float = env_float("LLM_TIMEOUT", DEFAULT_LLM_TIMEOUT)
    LLM_TEMPERATURE: float = env_float("LLM_TEMPERATURE", DEFAULT_LLM_TEMPERATURE)
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")

    # ── Feedback 검증 ─────────────────────────────────────
    FEEDBACK_MAX_WORDS: int = env_int("FEEDBACK_MAX_WORDS", DEFAULT_FEEDBACK_MAX_WORDS)


# 전역 싱글톤처럼 사용
settings = Settings()
