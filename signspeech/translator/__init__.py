"""
Text-to-Sign Pose Translator

Converts English words to avatar pose targets and plays them in order.

Pipeline:
    Text / Speech → Words → Resolver (dictionary → prediction → spelling) → Sequencer → Avatar
"""

from .poses import DEFAULT_POSE, FacialExpression, FingerState, JointRotation, ResolutionMethod, SignPose
from .alphabet import get_letter_pose, spell_word
from .resolver import get_sign, predict_sign
from .sign_sequencer import PlaybackConfig, PlaybackState, SignSequencer
from .translator import SignTranslator, split_words

__all__ = [
    'DEFAULT_POSE', 'FacialExpression', 'FingerState', 'JointRotation',
    'ResolutionMethod', 'SignPose',
    'get_letter_pose', 'spell_word', 'get_sign', 'predict_sign',
    'PlaybackConfig', 'PlaybackState', 'SignSequencer',
    'SignTranslator', 'split_words',
]
