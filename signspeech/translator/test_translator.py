import numpy as np
import pytest

from signspeech.translator import SignSequencer, SignTranslator, get_sign, split_words
from signspeech.translator.interpolation import (
    VECTOR_SIZE, approach, interpolate_poses, pose_to_vector, vector_to_pose,
)
from signspeech.translator.poses import DEFAULT_POSE
from signspeech.translator.scheduler import ManualScheduler


@pytest.fixture
def clock():
    return ManualScheduler()


@pytest.fixture
def translator(clock):
    return SignTranslator(SignSequencer(scheduler=clock), max_transcript=3)


@pytest.mark.parametrize("text,words", [
    ("hello  my\tfriend\n", ["hello", "my", "friend"]),
    ("   ", []),
    ("", []),
    (None, []),
])
def test_split_words(text, words):
    assert split_words(text) == words


def test_translate_summarises_without_playing(translator):
    result = translator.translate("hello zebra")
    assert result['words'] == ["hello", "zebra"]
    assert [s['method'] for s in result['signs']] == ['dictionary', 'fingerspelling']
    assert result['found'] == 1
    # hello + 5 letters
    assert result['timing']['step_count'] == 6
    assert not translator.sequencer.is_running


def test_play_text_records_transcript(translator, clock):
    assert translator.play_text("  hello friend ")
    assert translator.sequencer.processed_words == ("hello", "friend")
    assert translator.transcript[-1].endswith("] hello friend")
    clock.run_until_idle()
    assert not translator.sequencer.is_running


def test_blank_text_does_not_play(translator):
    assert not translator.play_text("   ")
    assert translator.transcript == []


def test_transcript_is_bounded(translator, clock):
    for text in ["one", "two", "three", "four"]:
        translator.play_text(text)
        clock.run_until_idle()
    assert len(translator.transcript) == 3
    assert translator.transcript[0].endswith("] two")


def test_final_transcript_waits_for_play(translator):
    translator.handle_final_transcript(" where is home ")
    assert translator.speech_text == "where is home"
    assert not translator.sequencer.is_running

    assert translator.play_speech()
    assert translator.sequencer.state.active_pose.description == "Where?"
    # speech already recorded when it arrived
    assert len(translator.transcript) == 1


def test_clear_cancels_and_forgets_speech(translator):
    translator.handle_final_transcript("hello")
    translator.play_speech()
    translator.clear()
    assert translator.speech_text == ''
    assert translator.sequencer.state.active_pose == DEFAULT_POSE
    assert not translator.play_speech()


def test_pose_vector_roundtrip():
    pose = get_sign("love")
    vector = pose_to_vector(pose)
    assert vector.shape == (VECTOR_SIZE,)
    assert vector_to_pose(vector, pose) == pose


def test_interpolation_endpoints():
    start, end = get_sign("hello"), get_sign("work")
    frames = interpolate_poses(start, end, 9)
    assert len(frames) == 9
    assert np.allclose(pose_to_vector(frames[0]), pose_to_vector(start))
    assert np.allclose(pose_to_vector(frames[-1]), pose_to_vector(end))
    assert frames[4].right_hand.index == pytest.approx(0.5)


def test_approach_moves_partway():
    current = approach(DEFAULT_POSE, get_sign("work"), 0.25)
    assert current.left_elbow.x == pytest.approx(-0.2)
    assert current.description == "Work"
