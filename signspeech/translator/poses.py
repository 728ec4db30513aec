"""
Sign Pose Data Model

Typed shape of a pose target for the avatar: joint rotations, finger
curls, facial expression and how the pose was resolved.
"""

import copy
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class FacialExpression(Enum):
    NEUTRAL = "neutral"
    SMILE = "smile"
    SAD = "sad"
    QUESTIONING = "questioning"


class ResolutionMethod(Enum):
    DICTIONARY = "dictionary"
    ML_PREDICTION = "ml_prediction"
    FINGERSPELLING = "fingerspelling"


FINGERS = ('thumb', 'index', 'middle', 'ring', 'pinky')
JOINTS = (
    'left_shoulder', 'right_shoulder',
    'left_elbow', 'right_elbow',
    'left_wrist', 'right_wrist',
)


@dataclass(frozen=True)
class FingerState:
    """Curl per finger: 0 = fully extended, 1 = fully curled."""
    thumb: float = 0.0
    index: float = 0.0
    middle: float = 0.0
    ring: float = 0.0
    pinky: float = 0.0

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> 'FingerState':
        """Build from a partial mapping; missing fingers are open."""
        return cls(**{f: float(values.get(f, 0.0)) for f in FINGERS})

    @classmethod
    def uniform(cls, curl: float) -> 'FingerState':
        return cls(curl, curl, curl, curl, curl)

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(getattr(self, f) for f in FINGERS)


OPEN_HAND = FingerState()
FIST = FingerState.uniform(1.0)


@dataclass(frozen=True)
class JointRotation:
    """Target rotation for one joint, radians."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


def rot(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> JointRotation:
    return JointRotation(x, y, z)


@dataclass
class SignPose:
    """A fully populated pose target handed to the renderer."""
    description: str
    left_shoulder: JointRotation
    right_shoulder: JointRotation
    left_elbow: JointRotation
    right_elbow: JointRotation
    left_wrist: JointRotation
    right_wrist: JointRotation
    left_hand: FingerState
    right_hand: FingerState
    facial_expression: FacialExpression = FacialExpression.NEUTRAL
    method: ResolutionMethod = ResolutionMethod.DICTIONARY
    confidence: float = 1.0

    def to_dict(self) -> Dict:
        """JSON-ready representation."""
        data = asdict(self)
        for joint in JOINTS:
            data[joint] = list(getattr(self, joint).as_tuple())
        data['facial_expression'] = self.facial_expression.value
        data['method'] = self.method.value
        return data


@dataclass(frozen=True)
class WordTableEntry:
    """Stored form of a known word: a pose without method/confidence."""
    description: str
    left_shoulder: JointRotation
    right_shoulder: JointRotation
    left_elbow: JointRotation
    right_elbow: JointRotation
    left_wrist: JointRotation
    right_wrist: JointRotation
    left_hand: FingerState
    right_hand: FingerState
    facial_expression: FacialExpression = FacialExpression.NEUTRAL

    def to_pose(self, method: ResolutionMethod, confidence: float,
                description: Optional[str] = None) -> SignPose:
        """Fresh SignPose built from this entry; the entry itself is never shared."""
        return SignPose(
            description=self.description if description is None else description,
            left_shoulder=self.left_shoulder,
            right_shoulder=self.right_shoulder,
            left_elbow=self.left_elbow,
            right_elbow=self.right_elbow,
            left_wrist=self.left_wrist,
            right_wrist=self.right_wrist,
            left_hand=self.left_hand,
            right_hand=self.right_hand,
            facial_expression=self.facial_expression,
            method=method,
            confidence=confidence,
        )


DEFAULT_POSE = SignPose(
    description='Idle',
    left_shoulder=rot(z=0.4),
    right_shoulder=rot(z=-0.4),
    left_elbow=rot(),
    right_elbow=rot(),
    left_wrist=rot(),
    right_wrist=rot(),
    left_hand=OPEN_HAND,
    right_hand=OPEN_HAND,
)


def idle_pose() -> SignPose:
    """Fresh copy of the rest pose."""
    return copy.deepcopy(DEFAULT_POSE)


def with_description(pose: SignPose, description: str) -> SignPose:
    return replace(pose, description=description)
