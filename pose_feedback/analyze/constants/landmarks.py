from enum import IntEnum
from typing import List, Tuple


# Landmark vocabulary (declaration order == serialization order)
class PoseLandmark(IntEnum):
    LEFT_SHOULDER = 0
    RIGHT_SHOULDER = 1
    LEFT_ELBOW = 2
    RIGHT_ELBOW = 3
    LEFT_WRIST = 4
    RIGHT_WRIST = 5


LimbConnection = Tuple[PoseLandmark, PoseLandmark]

# Limb segments whose orientation is tracked; index == angle position
LIMB_CONNECTIONS: List[LimbConnection] = [
    (PoseLandmark.LEFT_SHOULDER, PoseLandmark.LEFT_ELBOW),
    (PoseLandmark.LEFT_ELBOW, PoseLandmark.LEFT_WRIST),
    (PoseLandmark.RIGHT_SHOULDER, PoseLandmark.RIGHT_ELBOW),
    (PoseLandmark.RIGHT_ELBOW, PoseLandmark.RIGHT_WRIST),
]

LANDMARK_NAMES = frozenset(lm.name for lm in PoseLandmark)


def connection_label(connection: LimbConnection) -> str:
    start, end = connection
    return f"{start.name} to {end.name}"
