"""
Text-to-Sign Translator

Main entry point: turns typed text or speech transcripts into word lists
and hands them to the sequencer.
"""

import logging
from collections import deque
from datetime import datetime
from typing import Dict, List, Optional

from ..shared.config import TRANSCRIPT_CONFIG
from .dictionary import known_words
from .resolver import get_sign
from .sign_sequencer import PlaybackConfig, SignSequencer, calculate_timing, plan

logger = logging.getLogger(__name__)


def split_words(text: Optional[str]) -> List[str]:
    """Whitespace split; blank text gives no words."""
    if not text:
        return []
    return text.split()


class SignTranslator:
    """
    Translator class for English text → sign poses.

    Usage:
        translator = SignTranslator()
        translator.play_text("hello friend")
        translator.sequencer.state.active_pose
    """

    def __init__(self, sequencer: Optional[SignSequencer] = None,
                 max_transcript: Optional[int] = None):
        self.sequencer = sequencer or SignSequencer()
        self.speech_text = ''
        self._transcript = deque(maxlen=max_transcript or TRANSCRIPT_CONFIG['max_entries'])

    @property
    def transcript(self) -> List[str]:
        return list(self._transcript)

    def translate(self, text: str, config: Optional[PlaybackConfig] = None) -> Dict:
        """
        Resolve text without playing it.

        Returns:
            Dictionary containing:
                - input: Original text
                - words: Whitespace-split words
                - signs: Per-word resolved pose
                - timing: Timeline the sequencer would follow
        """
        words = split_words(text)
        signs = [get_sign(word).to_dict() for word in words]

        return {
            'input': text,
            'words': words,
            'signs': signs,
            'found': sum(1 for s in signs if s['method'] == 'dictionary'),
            'timing': calculate_timing(plan(words, config)),
        }

    def play_text(self, text: str, config: Optional[PlaybackConfig] = None,
                  record: bool = True) -> bool:
        """Split ``text`` and play it. Returns whether playback started."""
        words = split_words(text)
        if not words:
            return False
        if record:
            self._record(text.strip())
        return self.sequencer.play(words, config)

    def handle_final_transcript(self, text: str) -> None:
        """Speech recognition hand-off: keep the final transcript for playback."""
        text = (text or '').strip()
        if not text:
            return
        self.speech_text = text
        self._record(text)
        logger.info(f"Final transcript received ({len(split_words(text))} words)")

    def play_speech(self, config: Optional[PlaybackConfig] = None) -> bool:
        """Play the most recent speech transcript."""
        return self.play_text(self.speech_text, config, record=False)

    def clear(self) -> None:
        """Cancel playback and forget the pending speech text."""
        self.speech_text = ''
        self.sequencer.cancel()

    def get_available_signs(self) -> List[str]:
        return known_words()

    def _record(self, text: str) -> None:
        timestamp = datetime.now().strftime('%H:%M:%S')
        self._transcript.append(f"[{timestamp}] {text}")
