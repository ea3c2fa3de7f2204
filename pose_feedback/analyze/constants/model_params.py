# Fallback defaults (settings에서 ENV 미지정 시 사용)
DEFAULT_FEEDBACK_MAX_WORDS = 500
DEFAULT_LLM_TIMEOUT = 60.0
DEFAULT_LLM_TEMPERATURE = 0.7

# feedback id 규칙: fb-{reference}-{practice}[-v{n}]
FEEDBACK_ID_PREFIX = "fb"
FEEDBACK_ID_VERSION_PATTERN = "{base}-v{version}"

# 정확도 정의역
ACCURACY_RANGE = (0.0, 100.0)

# Noop 모드에서 돌려주는 고정 응답
NOOP_FEEDBACK_TEXT = (
    "Nice work! Your LEFT_SHOULDER and RIGHT_SHOULDER are well placed. "
    "Try to keep your LEFT_ELBOW a little closer to the reference line and "
    "extend through the LEFT_WRIST. Keep practicing, you are getting there!"
)
NOOP_LANDMARK_LIST = "[LEFT_SHOULDER, RIGHT_SHOULDER, LEFT_ELBOW, LEFT_WRIST]"
NOOP_TONE_VERDICT = "TRUE"
