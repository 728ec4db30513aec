"""
Sign Resolver

Resolves a word to a pose through three strategies, first match wins:
1. Exact dictionary match
2. Keyword category prediction (heuristic "ML" tier)
3. Fingerspelling fallback

Category membership is substring containment, not whole-word equality,
so e.g. "this" contains "hi" and resolves as a greeting. That over-match
is kept for compatibility with existing transcripts and is likely not
what a linguist would want.
"""

import logging
import re
from types import MappingProxyType
from typing import Optional

from ..shared.config import CONFIDENCE
from .alphabet import LETTER_SHAPES, fingerspell_pose, get_letter_pose, letter_shape
from .dictionary import SIGN_DICTIONARY, lookup
from .poses import ResolutionMethod, SignPose

logger = logging.getLogger(__name__)

_NON_ALPHA = re.compile(r'[^a-z]')

# Tested in this order; first category with a matching keyword wins
CATEGORY_KEYWORDS = MappingProxyType({
    'greeting': ('hello', 'hi', 'hey', 'greetings', 'welcome'),
    'emotion': ('happy', 'sad', 'angry', 'love', 'hate', 'excited', 'scared'),
    'action': ('eat', 'drink', 'sleep', 'work', 'play', 'run', 'walk', 'jump'),
    'question': ('what', 'where', 'who', 'when', 'why', 'how'),
})

NEGATIVE_EMOTIONS = ('sad', 'angry', 'hate', 'scared')

CATEGORY_TEMPLATES = MappingProxyType({
    'greeting': 'hello',
    'action': 'work',
    'question': 'what',
})


def normalize_word(word: str) -> str:
    """Lowercase and strip everything but a-z."""
    return _NON_ALPHA.sub('', word.lower())


def match_category(word: str) -> Optional[str]:
    """First keyword category whose keywords occur inside ``word``."""
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in word for keyword in keywords):
            return category
    return None


def _template_for(category: str, word: str) -> str:
    if category == 'emotion':
        return 'sad' if any(e in word for e in NEGATIVE_EMOTIONS) else 'happy'
    return CATEGORY_TEMPLATES[category]


def predict_sign(word: str) -> Optional[SignPose]:
    """
    Heuristic category prediction for a normalised word.

    Returns None when no category matches.
    """
    category = match_category(word)
    if category is None:
        return None

    template = SIGN_DICTIONARY[_template_for(category, word)]
    return template.to_pose(
        ResolutionMethod.ML_PREDICTION,
        CONFIDENCE[category],
        description=f"{word} (ML)",
    )


def get_sign(word: str) -> SignPose:
    """
    Resolve a word to a pose. Total: never raises, always returns a fresh pose.

    Args:
        word: Raw word as typed or transcribed (punctuation allowed)

    Returns:
        SignPose tagged with the resolution method and confidence
    """
    normalized = normalize_word(word)

    # Strategy 1: Exact dictionary match
    entry = lookup(normalized)
    if entry is not None:
        return entry.to_pose(ResolutionMethod.DICTIONARY, CONFIDENCE['dictionary'])

    # Strategy 2: Keyword category prediction
    predicted = predict_sign(normalized)
    if predicted is not None:
        logger.debug(f"Predicted '{word}' with confidence {predicted.confidence}")
        return predicted

    # Strategy 3: Single letter
    if len(normalized) == 1 and normalized in LETTER_SHAPES:
        return get_letter_pose(normalized)

    # Not found - one representative pose for the whole spelled word
    return fingerspell_pose(f"Spell: {word.upper()}", letter_shape(normalized[:1]))
