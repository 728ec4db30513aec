"""
Sign Sequencer

Walks a list of words one at a time, expands unknown words into letter
poses, and publishes the active pose with per-word and per-letter timing.

Playback is a small state machine (idle / running) advanced by timer
callbacks: each tick checks for cancellation, emits the next pose and
schedules the following tick.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..shared.config import PLAYBACK_CONFIG
from .alphabet import spell_word
from .poses import ResolutionMethod, SignPose, idle_pose, with_description
from .resolver import get_sign, normalize_word
from .scheduler import Scheduler, ThreadingScheduler

logger = logging.getLogger(__name__)


def _in_range(value, name, bounds):
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return value


@dataclass(frozen=True)
class PlaybackConfig:
    """Timing options for one playback run."""
    speed_multiplier: float = PLAYBACK_CONFIG['speed_multiplier']
    pause_duration_ms: int = PLAYBACK_CONFIG['pause_duration_ms']

    def __post_init__(self):
        if not self.speed_multiplier > 0:
            raise ValueError(f"speed_multiplier must be positive, got {self.speed_multiplier}")
        if not self.pause_duration_ms > 0:
            raise ValueError(f"pause_duration_ms must be positive, got {self.pause_duration_ms}")

    @classmethod
    def from_mapping(cls, options: Optional[Mapping]) -> 'PlaybackConfig':
        """
        Accept either camelCase (client) or snake_case keys.

        Client values must fall inside the ranges the UI sliders offer.
        """
        options = options or {}
        speed = options.get('speedMultiplier', options.get('speed_multiplier'))
        pause = options.get('pauseDuration', options.get('pause_duration_ms'))
        kwargs = {}
        if speed is not None:
            kwargs['speed_multiplier'] = _in_range(
                float(speed), 'speed_multiplier', PLAYBACK_CONFIG['speed_range'])
        if pause is not None:
            kwargs['pause_duration_ms'] = _in_range(
                int(pause), 'pause_duration_ms', PLAYBACK_CONFIG['pause_range_ms'])
        return cls(**kwargs)

    @property
    def word_delay(self) -> float:
        """Seconds a word pose is held."""
        ms = self.pause_duration_ms / self.speed_multiplier + PLAYBACK_CONFIG['word_settle_ms']
        return ms / 1000.0

    @property
    def letter_delay(self) -> float:
        """Seconds a fingerspelled letter is held."""
        ms = (self.pause_duration_ms * PLAYBACK_CONFIG['letter_pause_factor'] / self.speed_multiplier
              + PLAYBACK_CONFIG['letter_settle_ms'])
        return ms / 1000.0


@dataclass(frozen=True)
class PlaybackStep:
    """One pose activation in a playback timeline."""
    word_index: int
    letter_index: Optional[int]
    pose: SignPose
    delay: float          # Hold time before the next step, seconds
    start: float = 0.0    # Offset from the start of the run, seconds


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot of what the renderer and UI observe."""
    active_pose: SignPose
    current_word_index: Optional[int]
    is_running: bool
    words: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict:
        return {
            'active_pose': self.active_pose.to_dict(),
            'current_word_index': self.current_word_index,
            'is_running': self.is_running,
            'words': list(self.words),
        }


def iter_steps(words: Sequence[str], config: PlaybackConfig) -> Iterator[PlaybackStep]:
    """
    Yield the playback steps for ``words`` in emission order.

    Words are resolved lazily as the iterator reaches them.
    """
    for i, word in enumerate(words):
        sign = get_sign(word)
        letters = normalize_word(word)

        if sign.method is ResolutionMethod.FINGERSPELLING and len(letters) > 1:
            # Full fingerspelling: one pose per letter
            for j, (letter, letter_pose) in enumerate(zip(letters, spell_word(letters))):
                pose = with_description(letter_pose, f"Spell: {word.upper()} → {letter.upper()}")
                yield PlaybackStep(i, j, pose, config.letter_delay)
        else:
            yield PlaybackStep(i, None, sign, config.word_delay)


def plan(words: Sequence[str], config: Optional[PlaybackConfig] = None) -> List[PlaybackStep]:
    """Full timeline for ``words`` with start offsets, without playing it."""
    config = config or PlaybackConfig()
    steps = []
    current_time = 0.0
    for step in iter_steps(words, config):
        steps.append(PlaybackStep(step.word_index, step.letter_index, step.pose,
                                  step.delay, start=current_time))
        current_time += step.delay
    return steps


def calculate_timing(steps: Sequence[PlaybackStep]) -> Dict:
    """
    Summarise a planned timeline.

    Returns timing information for the client.
    """
    timeline = [
        {
            'description': step.pose.description,
            'method': step.pose.method.value,
            'word_index': step.word_index,
            'letter_index': step.letter_index,
            'start_time': step.start,
            'end_time': step.start + step.delay,
            'duration': step.delay,
        }
        for step in steps
    ]
    total = sum(step.delay for step in steps)

    return {
        'total_duration': total,
        'timeline': timeline,
        'step_count': len(steps),
        'average_step_duration': total / len(steps) if steps else 0,
    }


class SignSequencer:
    """
    Plays one word sequence at a time.

    Usage:
        sequencer = SignSequencer()
        sequencer.subscribe(lambda state: render(state.active_pose))
        sequencer.play(["hello", "xq"])
    """

    def __init__(self, scheduler: Optional[Scheduler] = None):
        self.scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.RLock()
        self._subscribers: List[Callable[[PlaybackState], None]] = []

        self._running = False
        self._generation = 0
        self._steps: Optional[Iterator[PlaybackStep]] = None
        self._handle = None

        self._active_pose = idle_pose()
        self._current_word_index: Optional[int] = None
        self._words: Tuple[str, ...] = ()

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def processed_words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def state(self) -> PlaybackState:
        with self._lock:
            return self._snapshot()

    def subscribe(self, callback: Callable[[PlaybackState], None]) -> Callable[[], None]:
        """Register for state changes; returns a function that unsubscribes."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def play(self, words: Sequence[str], config: Optional[PlaybackConfig] = None) -> bool:
        """
        Start playing ``words``.

        Returns False without doing anything when a sequence is already
        running or there is nothing to play.
        """
        config = config or PlaybackConfig()
        words = tuple(words)

        with self._lock:
            if self._running:
                logger.info(f"Sequence already running, ignoring {len(words)} words")
                return False
            if not words:
                return False

            self._running = True
            self._generation += 1
            self._words = words
            self._steps = iter_steps(words, config)
            generation = self._generation

        logger.info(f"Playing {len(words)} words "
                    f"(speed={config.speed_multiplier}, pause={config.pause_duration_ms}ms)")
        self._tick(generation)
        return True

    def cancel(self) -> None:
        """Stop any running sequence and return to the idle pose. Safe when idle."""
        with self._lock:
            was_running = self._running
            self._running = False
            self._generation += 1
            self.scheduler.cancel(self._handle)
            self._handle = None
            self._steps = None
            self._active_pose = idle_pose()
            self._current_word_index = None

            if was_running:
                logger.info("Sequence cancelled")
            # Published under the lock so a racing tick cannot deliver after this
            self._publish(self._snapshot())

    def _tick(self, generation: int) -> None:
        with self._lock:
            # A callback from a cancelled run must not touch a newer one
            if not self._running or generation != self._generation:
                return

            step = next(self._steps, None)
            if step is None:
                self._running = False
                self._steps = None
                self._handle = None
                self._current_word_index = None
                logger.info(f"Sequence complete ({len(self._words)} words)")
            else:
                self._active_pose = step.pose
                self._current_word_index = step.word_index
                self._handle = self.scheduler.call_later(
                    step.delay, lambda: self._tick(generation))
                logger.debug(f"Step {step.word_index}/{step.letter_index}: "
                             f"{step.pose.description} for {step.delay:.2f}s")
            self._publish(self._snapshot())

    def _snapshot(self) -> PlaybackState:
        return PlaybackState(
            active_pose=self._active_pose,
            current_word_index=self._current_word_index,
            is_running=self._running,
            words=self._words,
        )

    def _publish(self, state: PlaybackState) -> None:
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception as e:
                logger.error(f"State subscriber failed: {e}")
