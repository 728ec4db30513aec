import pytest

from signspeech.translator.alphabet import (
    FINGERSPELL_BASELINE, LETTER_SHAPES, get_letter_pose, spell_word,
)
from signspeech.translator.dictionary import SIGN_DICTIONARY, known_words
from signspeech.translator.poses import (
    DEFAULT_POSE, FIST, OPEN_HAND, FacialExpression, FingerState,
    ResolutionMethod, idle_pose,
)
from signspeech.translator.resolver import get_sign, match_category, normalize_word, predict_sign

JOINT_FIELDS = ('left_shoulder', 'right_shoulder', 'left_elbow',
                'right_elbow', 'left_wrist', 'right_wrist')


def joints(pose):
    return tuple(getattr(pose, j) for j in JOINT_FIELDS)


# --- letters -------------------------------------------------------------

def test_alphabet_covers_every_letter():
    assert sorted(LETTER_SHAPES) == [chr(c) for c in range(ord('a'), ord('z') + 1)]
    for shape in LETTER_SHAPES.values():
        assert all(0.0 <= curl <= 1.0 for curl in shape.as_tuple())


@pytest.mark.parametrize("letter", list("abcxyzQ"))
def test_letter_pose(letter):
    pose = get_letter_pose(letter)
    assert pose.method is ResolutionMethod.FINGERSPELLING
    assert pose.confidence == 1
    assert pose.description == f"Letter: {letter.upper()}"
    assert pose.right_hand == LETTER_SHAPES[letter.lower()]
    assert pose.left_hand == OPEN_HAND
    assert pose.right_shoulder == FINGERSPELL_BASELINE['right_shoulder']
    assert pose.left_shoulder == DEFAULT_POSE.left_shoulder


@pytest.mark.parametrize("char", ["1", "?", " ", ""])
def test_non_letter_gets_open_hand(char):
    pose = get_letter_pose(char)
    assert pose.right_hand == OPEN_HAND
    assert pose.method is ResolutionMethod.FINGERSPELLING


def test_spell_word_skips_non_letters():
    poses = spell_word("o-k!")
    assert [p.description for p in poses] == ["Letter: O", "Letter: K"]


def test_finger_state_from_partial_mapping():
    assert FingerState.from_mapping({'index': 1}) == FingerState(0, 1, 0, 0, 0)


# --- dictionary tier -----------------------------------------------------

@pytest.mark.parametrize("word", known_words())
def test_known_words_resolve_from_dictionary(word):
    pose = get_sign(word)
    assert pose.method is ResolutionMethod.DICTIONARY
    assert pose.confidence == 1
    assert pose.description == SIGN_DICTIONARY[word].description


def test_dictionary_match_ignores_case_and_punctuation():
    pose = get_sign("Hello!")
    assert pose.method is ResolutionMethod.DICTIONARY
    assert pose.description == "Hello"
    assert pose.facial_expression is FacialExpression.SMILE


def test_closed_hands_are_fully_curled():
    assert get_sign("love").left_hand == FIST
    assert get_sign("sorry").right_hand == FIST
    assert get_sign("sorry").left_hand == OPEN_HAND


# --- prediction tier -----------------------------------------------------

def test_greeting_prediction_uses_hello_template():
    pose = get_sign("greetingsparty")
    hello = get_sign("hello")
    assert pose.method is ResolutionMethod.ML_PREDICTION
    assert pose.confidence == 0.75
    assert pose.description == "greetingsparty (ML)"
    assert joints(pose) == joints(hello)
    assert pose.right_hand == hello.right_hand


def test_substring_match_over_matches_greeting():
    # "this" contains "hi"
    assert get_sign("this").method is ResolutionMethod.ML_PREDICTION
    assert joints(get_sign("this")) == joints(get_sign("hello"))


def test_greeting_wins_over_emotion():
    assert match_category("hihappy") == 'greeting'
    assert get_sign("hihappy").confidence == 0.75


@pytest.mark.parametrize("word,template", [
    ("sadly", "sad"),
    ("angryface", "sad"),
    ("hateful", "sad"),
    ("scaredy", "sad"),
    ("unhappy", "happy"),
    ("lovely", "happy"),
    ("excitedly", "happy"),
])
def test_emotion_prediction(word, template):
    pose = get_sign(word)
    assert pose.method is ResolutionMethod.ML_PREDICTION
    assert pose.confidence == 0.7
    assert joints(pose) == joints(get_sign(template))
    assert pose.facial_expression == get_sign(template).facial_expression


@pytest.mark.parametrize("word", ["running", "jumped", "playground", "eating"])
def test_action_prediction(word):
    pose = get_sign(word)
    assert pose.method is ResolutionMethod.ML_PREDICTION
    assert pose.confidence == 0.65
    assert joints(pose) == joints(get_sign("work"))


@pytest.mark.parametrize("word", ["however", "whenever", "why"])
def test_question_prediction(word):
    pose = get_sign(word)
    assert pose.method is ResolutionMethod.ML_PREDICTION
    assert pose.confidence == 0.7
    assert pose.facial_expression is FacialExpression.QUESTIONING


def test_predict_sign_returns_none_without_category():
    assert predict_sign("xyzqrs") is None


# --- fingerspelling tier -------------------------------------------------

def test_unknown_word_spelled():
    pose = get_sign("xyzqrs")
    assert pose.method is ResolutionMethod.FINGERSPELLING
    assert pose.confidence == 1
    assert pose.description == "Spell: XYZQRS"
    assert pose.right_hand == LETTER_SHAPES['x']
    assert pose.right_elbow == FINGERSPELL_BASELINE['right_elbow']


def test_spell_description_keeps_original_word():
    assert get_sign("Zq.").description == "Spell: ZQ."


def test_single_letter_delegates_to_alphabet():
    assert get_sign("b") == get_letter_pose("b")
    assert get_sign("B?").description == "Letter: B"


@pytest.mark.parametrize("word", ["", "123", "?!"])
def test_empty_after_normalizing_degrades_to_open_hand(word):
    pose = get_sign(word)
    assert pose.method is ResolutionMethod.FINGERSPELLING
    assert pose.right_hand == OPEN_HAND
    assert pose.description == f"Spell: {word.upper()}"


def test_normalize_word():
    assert normalize_word("Don't!") == "dont"


# --- purity --------------------------------------------------------------

@pytest.mark.parametrize("word", ["hello", "greetingsparty", "xyzqrs", "a", ""])
def test_resolution_is_pure(word):
    assert get_sign(word) == get_sign(word)


def test_results_are_fresh_objects():
    first = get_sign("hello")
    first.description = "changed"
    first.confidence = 0.1
    assert get_sign("hello").description == "Hello"
    assert get_sign("hello").confidence == 1


def test_idle_pose_is_a_copy():
    pose = idle_pose()
    pose.description = "changed"
    assert DEFAULT_POSE.description == "Idle"
    assert DEFAULT_POSE.method is ResolutionMethod.DICTIONARY
