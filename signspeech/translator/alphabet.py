"""
Fingerspelling Alphabet

Hand shapes for the 26 manual alphabet letters. Only the right hand shape
varies per letter; the arms share one presented baseline.
"""

import logging
from types import MappingProxyType
from typing import List

from ..shared.config import CONFIDENCE
from .poses import (
    FacialExpression, FingerState, OPEN_HAND, ResolutionMethod,
    SignPose, rot,
)

logger = logging.getLogger(__name__)


def _hand(thumb, index, middle, ring, pinky):
    return FingerState(thumb, index, middle, ring, pinky)


# Curl per finger (thumb, index, middle, ring, pinky); 0 = extended
LETTER_SHAPES = MappingProxyType({
    'a': _hand(0.0, 1.0, 1.0, 1.0, 1.0),   # fist, thumb alongside
    'b': _hand(1.0, 0.0, 0.0, 0.0, 0.0),   # flat hand, thumb across palm
    'c': _hand(0.4, 0.5, 0.5, 0.5, 0.5),   # rounded C
    'd': _hand(0.6, 0.0, 0.8, 0.8, 0.8),
    'e': _hand(0.8, 0.8, 0.8, 0.8, 0.8),
    'f': _hand(0.6, 0.7, 0.0, 0.0, 0.0),
    'g': _hand(0.2, 0.0, 1.0, 1.0, 1.0),
    'h': _hand(0.8, 0.0, 0.0, 1.0, 1.0),
    'i': _hand(1.0, 1.0, 1.0, 1.0, 0.0),
    'j': _hand(1.0, 1.0, 1.0, 1.0, 0.0),
    'k': _hand(0.3, 0.0, 0.2, 1.0, 1.0),
    'l': _hand(0.0, 0.0, 1.0, 1.0, 1.0),
    'm': _hand(0.9, 0.9, 0.9, 0.9, 1.0),
    'n': _hand(0.9, 0.9, 0.9, 1.0, 1.0),
    'o': _hand(0.6, 0.7, 0.7, 0.7, 0.7),   # rounded O
    'p': _hand(0.3, 0.0, 0.2, 1.0, 1.0),
    'q': _hand(0.2, 0.0, 1.0, 1.0, 1.0),
    'r': _hand(1.0, 0.0, 0.1, 1.0, 1.0),
    's': _hand(0.7, 1.0, 1.0, 1.0, 1.0),
    't': _hand(0.5, 0.8, 1.0, 1.0, 1.0),
    'u': _hand(1.0, 0.0, 0.0, 1.0, 1.0),
    'v': _hand(1.0, 0.0, 0.0, 1.0, 1.0),
    'w': _hand(1.0, 0.0, 0.0, 0.0, 1.0),
    'x': _hand(1.0, 0.6, 1.0, 1.0, 1.0),   # hooked index
    'y': _hand(0.0, 1.0, 1.0, 1.0, 0.0),
    'z': _hand(1.0, 0.0, 1.0, 1.0, 1.0),
})

# Shared arm baseline: right arm raised and presented, left arm at rest
FINGERSPELL_BASELINE = MappingProxyType({
    'left_shoulder': rot(z=0.4),
    'right_shoulder': rot(-0.7, 0, -0.4),
    'left_elbow': rot(),
    'right_elbow': rot(-0.6, 0, 0),
    'left_wrist': rot(),
    'right_wrist': rot(),
})


def letter_shape(letter: str) -> FingerState:
    """Finger state for a letter; anything unknown gets the open hand."""
    return LETTER_SHAPES.get(letter.lower(), OPEN_HAND) if letter else OPEN_HAND


def fingerspell_pose(description: str, right_hand: FingerState) -> SignPose:
    """Baseline fingerspelling pose with the given right hand shape."""
    return SignPose(
        description=description,
        left_hand=OPEN_HAND,
        right_hand=right_hand,
        facial_expression=FacialExpression.NEUTRAL,
        method=ResolutionMethod.FINGERSPELLING,
        confidence=CONFIDENCE['fingerspelling'],
        **FINGERSPELL_BASELINE,
    )


def get_letter_pose(letter: str) -> SignPose:
    """
    Resolve a single letter to its fingerspelling pose.

    Case-insensitive. Non-letters fall back to the open hand rather than
    failing.
    """
    return fingerspell_pose(f"Letter: {letter.upper()}", letter_shape(letter))


def spell_word(word: str) -> List[SignPose]:
    """Letter poses for every alphabetic character of ``word``, in order."""
    poses = [get_letter_pose(ch) for ch in word.lower() if ch in LETTER_SHAPES]
    logger.debug(f"Spelled '{word}' as {len(poses)} letters")
    return poses
