# re-exports: 다른 모듈에서 짧게 import 하도록

from .landmarks import (
    PoseLandmark,
    LimbConnection,
    LIMB_CONNECTIONS,
    LANDMARK_NAMES,
    connection_label,
)

from .model_params import (
    DEFAULT_FEEDBACK_MAX_WORDS,
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_LLM_TEMPERATURE,
    FEEDBACK_ID_PREFIX,
    FEEDBACK_ID_VERSION_PATTERN,
    ACCURACY_RANGE,
    NOOP_FEEDBACK_TEXT,
    NOOP_LANDMARK_LIST,
    NOOP_TONE_VERDICT,
)
