"""
Sign Dictionary

Closed vocabulary of known words mapped to full pose targets. Entries are
immutable and loaded once; resolution builds a fresh SignPose from them.
"""

from types import MappingProxyType
from typing import List, Optional

from .poses import FIST, OPEN_HAND, FacialExpression, WordTableEntry, rot

NEUTRAL = FacialExpression.NEUTRAL
SMILE = FacialExpression.SMILE
SAD = FacialExpression.SAD
QUESTIONING = FacialExpression.QUESTIONING

REST_LEFT_SHOULDER = (0, 0, 0.4)
ZERO = (0, 0, 0)


def _entry(description, left_shoulder, right_shoulder, left_elbow, right_elbow,
           left_wrist, right_wrist, closed=(False, False), facial=NEUTRAL):
    left_closed, right_closed = closed
    return WordTableEntry(
        description=description,
        left_shoulder=rot(*left_shoulder),
        right_shoulder=rot(*right_shoulder),
        left_elbow=rot(*left_elbow),
        right_elbow=rot(*right_elbow),
        left_wrist=rot(*left_wrist),
        right_wrist=rot(*right_wrist),
        left_hand=FIST if left_closed else OPEN_HAND,
        right_hand=FIST if right_closed else OPEN_HAND,
        facial_expression=facial,
    )


_GOODBYE = dict(
    left_shoulder=REST_LEFT_SHOULDER, right_shoulder=(-1.3, 0.4, -0.7),
    left_elbow=ZERO, right_elbow=(-0.5, 0, 0),
    left_wrist=(0, 0, 0.6), right_wrist=ZERO, facial=SMILE,
)
_THANK = dict(
    left_shoulder=REST_LEFT_SHOULDER, right_shoulder=(-0.3, 0, -0.2),
    left_elbow=ZERO, right_elbow=(-0.8, 0, 0),
    left_wrist=(0.4, 0, 0), right_wrist=ZERO, facial=SMILE,
)
_SELF = dict(
    left_shoulder=REST_LEFT_SHOULDER, right_shoulder=(-0.1, 0, -0.1),
    left_elbow=ZERO, right_elbow=(-1.2, 0, 0),
    left_wrist=ZERO, right_wrist=ZERO,
)

SIGN_DICTIONARY = MappingProxyType({
    # Greetings and courtesy
    'hello': _entry('Hello', REST_LEFT_SHOULDER, (-1.2, 0.3, -0.8), ZERO, (-0.8, 0, 0),
                    ZERO, (0, 0, 0.5), facial=SMILE),
    'hi': _entry('Hi', REST_LEFT_SHOULDER, (-1.4, 0.2, -0.6), ZERO, (-0.6, 0, 0),
                 ZERO, (0.3, 0, 0), facial=SMILE),
    'goodbye': _entry('Goodbye', **_GOODBYE),
    'bye': _entry('Bye', **_GOODBYE),
    'thank': _entry('Thank You', **_THANK),
    'thanks': _entry('Thanks', **_THANK),
    'please': _entry('Please', REST_LEFT_SHOULDER, (-0.2, 0, -0.1), ZERO, (-1.0, 0, 0),
                     ZERO, (0, 0.3, 0)),
    'sorry': _entry('Sorry', REST_LEFT_SHOULDER, (-0.2, 0, -0.1), ZERO, (-1.2, 0, 0),
                    ZERO, ZERO, closed=(False, True), facial=SAD),
    'yes': _entry('Yes', REST_LEFT_SHOULDER, (0, 0, -0.3), ZERO, (-0.6, 0, 0),
                  ZERO, (0.4, 0, 0), closed=(False, True), facial=SMILE),
    'no': _entry('No', REST_LEFT_SHOULDER, (-0.5, 0, -0.3), ZERO, (-0.4, 0, 0),
                 ZERO, ZERO),

    # Feelings
    'good': _entry('Good', REST_LEFT_SHOULDER, (-0.4, 0, -0.2), ZERO, (-0.7, 0, 0),
                   (0.3, 0, 0), ZERO, facial=SMILE),
    'bad': _entry('Bad', REST_LEFT_SHOULDER, (0.2, 0, -0.2), ZERO, (-0.5, 0, 0),
                  (-0.3, 0, 0), ZERO, facial=SAD),
    'happy': _entry('Happy', (-0.6, 0, 0.6), (-0.6, 0, -0.6), (-0.5, 0, 0), (-0.5, 0, 0),
                    ZERO, ZERO, facial=SMILE),
    'sad': _entry('Sad', (0.2, 0, 0.2), (0.2, 0, -0.2), ZERO, ZERO,
                  ZERO, ZERO, facial=SAD),
    'love': _entry('Love', (-0.3, 0.3, 0.5), (-0.3, -0.3, -0.5), (-1.2, 0, 0), (-1.2, 0, 0),
                   ZERO, ZERO, closed=(True, True), facial=SMILE),
    'help': _entry('Help', (-0.5, 0, 0.5), (-0.8, 0, -0.3), (-0.3, 0, 0), (-0.6, 0, 0),
                   (0.3, 0, 0), ZERO, closed=(False, True)),

    # Pronouns
    'i': _entry('I / Me', **_SELF),
    'me': _entry('Me', **_SELF),
    'you': _entry('You', REST_LEFT_SHOULDER, (-0.6, 0, -0.3), ZERO, (-0.3, 0, 0),
                  ZERO, ZERO),
    'we': _entry('We', (-0.4, 0, 0.5), (-0.4, 0, -0.5), (-0.3, 0, 0), (-0.3, 0, 0),
                 ZERO, ZERO),

    # Questions
    'what': _entry('What?', (-0.5, 0, 0.7), (-0.5, 0, -0.7), (-0.5, 0, 0), (-0.5, 0, 0),
                   (0, 0, 0.3), (0, 0, -0.3), facial=QUESTIONING),
    'where': _entry('Where?', REST_LEFT_SHOULDER, (-0.7, 0.2, -0.5), ZERO, (-0.4, 0, 0),
                    ZERO, (0, 0, 0.4), facial=QUESTIONING),
    'who': _entry('Who?', REST_LEFT_SHOULDER, (-0.5, 0, -0.3), ZERO, (-0.6, 0, 0),
                  ZERO, (0, 0.3, 0), facial=QUESTIONING),

    # Actions
    'eat': _entry('Eat', REST_LEFT_SHOULDER, (-0.3, 0.2, -0.2), ZERO, (-1.4, 0, 0),
                  ZERO, (0.3, 0, 0), closed=(False, True)),
    'drink': _entry('Drink', REST_LEFT_SHOULDER, (-0.4, 0.2, -0.2), ZERO, (-1.5, 0, 0),
                    (0.5, 0, 0), ZERO, closed=(False, True)),
    'sleep': _entry('Sleep', REST_LEFT_SHOULDER, (-0.5, 0.3, -0.2), ZERO, (-1.3, 0, 0),
                    (0.4, 0, 0), ZERO),
    'work': _entry('Work', (-0.3, 0, 0.3), (-0.3, 0, -0.3), (-0.8, 0, 0), (-0.8, 0, 0),
                   ZERO, ZERO, closed=(True, True)),

    # Things and places
    'friend': _entry('Friend', (-0.4, 0.2, 0.4), (-0.4, -0.2, -0.4), (-0.6, 0, 0), (-0.6, 0, 0),
                     ZERO, ZERO, facial=SMILE),
    'water': _entry('Water', REST_LEFT_SHOULDER, (-0.3, 0, -0.2), ZERO, (-1.0, 0, 0),
                    ZERO, (0, 0.4, 0)),
    'food': _entry('Food', REST_LEFT_SHOULDER, (-0.3, 0.2, -0.2), ZERO, (-1.3, 0, 0),
                   ZERO, (0.3, 0, 0), closed=(False, True)),
    'home': _entry('Home', (-0.3, 0, 0.4), (-0.3, 0, -0.4), (-0.8, 0, 0), (-0.8, 0, 0),
                   (0.2, 0, 0.3), (0.2, 0, -0.3), facial=SMILE),
    'school': _entry('School', (-0.5, 0, 0.5), (-0.5, 0, -0.5), (-0.4, 0, 0), (-0.4, 0, 0),
                     ZERO, ZERO),
})


def lookup(word: str) -> Optional[WordTableEntry]:
    """Exact lookup of an already normalised word."""
    return SIGN_DICTIONARY.get(word)


def known_words() -> List[str]:
    """Sorted vocabulary of the dictionary."""
    return sorted(SIGN_DICTIONARY)
